"""
Project scan: discovery, config loading and parallel extraction.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from react_analyzer.analyzer.base_analyzer import CodeAnalyzer
from react_analyzer.analyzer.discovery import find_files
from react_analyzer.analyzer.models import ParsedFile, TestFile
from react_analyzer.configs.base import ConfigError
from react_analyzer.configs.package_json import PackageJson, load_package_jsons
from react_analyzer.configs.ts_config import TypeScriptConfig, load_ts_configs
from react_analyzer.settings import AnalyzerSettings

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Raw material for ``report.summary.extract``."""

    files: List[ParsedFile] = field(default_factory=list)
    skipped_files: List[str] = field(default_factory=list)
    package_jsons: List[PackageJson] = field(default_factory=list)
    ts_configs: List[TypeScriptConfig] = field(default_factory=list)
    config_errors: List[ConfigError] = field(default_factory=list)


def scan(settings: AnalyzerSettings, analyzer: Optional[CodeAnalyzer] = None) -> ScanResult:
    """
    Discover the project's files, load its configs and parse every source.

    Configs are loaded sequentially before the parallel file scan.
    """
    analyzer = analyzer or CodeAnalyzer()
    found = find_files(settings.root, settings.pattern, settings.ignore_pattern)

    package_jsons, package_errors = load_package_jsons(found.package_json, settings.root)
    ts_configs, ts_errors = load_ts_configs(found.ts_config, settings.root)

    batch = analyzer.analyze_files(
        found.all_files,
        settings.root,
        max_workers=settings.workers,
        show_progress=settings.show_progress,
    )
    if batch.skipped:
        logger.warning(f"{len(batch.skipped)} file(s) could not be analyzed and were skipped")

    return ScanResult(
        files=batch.files,
        skipped_files=batch.skipped,
        package_jsons=package_jsons,
        ts_configs=ts_configs,
        config_errors=package_errors + ts_errors,
    )


def scan_test_files(settings: AnalyzerSettings, analyzer: Optional[CodeAnalyzer] = None) -> List[TestFile]:
    """Find files matching the test pattern and count their tests."""
    analyzer = analyzer or CodeAnalyzer()
    found = find_files(settings.root, settings.test_pattern, settings.ignore_pattern)
    return analyzer.analyze_test_files(found.all_files, settings.root)
