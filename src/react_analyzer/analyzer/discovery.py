"""
Source file discovery.

Patterns are matched (``re.search``) against root-relative POSIX paths.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Pattern, Union

from react_analyzer.utils.paths import to_relative_posix

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = r"^.*\.(jsx|js|tsx|ts)$"
DEFAULT_IGNORE_PATTERN = r"(^|/)(node_modules|\.git)(/|$)"
DEFAULT_TEST_PATTERN = r".*\.(cy|test|spec|unit)\.(jsx|tsx|js|ts)$"

# Never descended into
DEFAULT_EXCLUDES = {"node_modules", ".git"}

PACKAGE_JSON = "package.json"
TS_CONFIG = "tsconfig.json"


@dataclass
class SourceFiles:
    """Files found under a project root, each list sorted."""

    all_files: List[Path] = field(default_factory=list)
    package_json: List[Path] = field(default_factory=list)
    ts_config: List[Path] = field(default_factory=list)


def _compile(pattern: Union[str, Pattern]) -> Pattern:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


def find_files(
    root: Path,
    pattern: Union[str, Pattern] = DEFAULT_PATTERN,
    ignore_pattern: Union[str, Pattern] = DEFAULT_IGNORE_PATTERN,
) -> SourceFiles:
    """
    Walk *root* and collect source and config files.

    Args:
        root: Project root
        pattern: Source files to include
        ignore_pattern: Paths (files or directories) to skip

    Returns:
        SourceFiles with sources, package.json and tsconfig.json paths
    """
    include = _compile(pattern)
    ignore = _compile(ignore_pattern)
    found = SourceFiles()

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            d
            for d in dirnames
            if d not in DEFAULT_EXCLUDES and not ignore.search(to_relative_posix(current / d, root))
        )

        for filename in sorted(filenames):
            file_path = current / filename
            relative = to_relative_posix(file_path, root)
            if ignore.search(relative):
                continue
            if filename == PACKAGE_JSON:
                found.package_json.append(file_path)
            elif filename == TS_CONFIG:
                found.ts_config.append(file_path)
            if include.search(relative):
                found.all_files.append(file_path)

    found.all_files.sort()
    found.package_json.sort()
    found.ts_config.sort()
    logger.debug(
        "Discovered %d source file(s), %d package.json, %d tsconfig.json under %s",
        len(found.all_files),
        len(found.package_json),
        len(found.ts_config),
        root,
    )
    return found
