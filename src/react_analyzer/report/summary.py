"""
Summary and output assembly.

``extract`` runs the graph-level analyses over a parsed file set and gathers
their results into one ``Output`` record, ready for the report writer.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from react_analyzer.analyzer.models import ParsedFile, TestFile
from react_analyzer.configs.base import ConfigError
from react_analyzer.configs.package_json import PackageJson, declared_dependencies
from react_analyzer.configs.ts_config import TypeScriptConfig
from react_analyzer.graph.builder import build_import_graph
from react_analyzer.graph.models import ImportGraph
from react_analyzer.report.dead_files import find_dead
from react_analyzer.report.exports import FileExports, aggregate_exports
from react_analyzer.report.packages import cross_reference

logger = logging.getLogger(__name__)


@dataclass
class Summary:
    """Project-wide counts."""

    line_count: int = 0
    import_count: int = 0
    file_count: int = 0
    unused_file_count: int = 0
    skipped_file_count: int = 0

    def __str__(self) -> str:
        return (
            f"Total Files:     {self.file_count}\n"
            f"Total Lines:     {self.line_count}\n"
            f"Total Imports:   {self.import_count}\n"
            f"Dead Files:      {self.unused_file_count}"
        )


@dataclass
class TestSummary:
    """Counts over all test files."""

    __test__ = False  # not a pytest class

    count: int = 0
    skipped_count: int = 0
    line_count: int = 0
    file_count: int = 0

    def __str__(self) -> str:
        return (
            f"Total Tests:     {self.count}\n"
            f"Skipped Tests:   {self.skipped_count}\n"
            f"Total Lines:     {self.line_count}"
        )


@dataclass
class Output:
    """Everything written to the JSON report."""

    import_graph: ImportGraph
    dead_files: List[str]
    unknown_imports: List[str]
    exports: List[FileExports]
    summary: Summary
    dependencies: Dict[str, int]
    skipped_files: List[str] = field(default_factory=list)
    config_errors: List[ConfigError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation, nodes and edges in id order."""
        return {
            "import_graph": self.import_graph.to_dict(),
            "dead_files": list(self.dead_files),
            "unknown_imports": list(self.unknown_imports),
            "exports": [
                {
                    "source": entry.source,
                    "exports": [
                        {"name": b.name, "target": b.target, "is_default": b.is_default}
                        for b in entry.exports
                    ],
                }
                for entry in self.exports
            ],
            "summary": {
                "line_count": self.summary.line_count,
                "import_count": self.summary.import_count,
                "file_count": self.summary.file_count,
                "unused_file_count": self.summary.unused_file_count,
                "skipped_file_count": self.summary.skipped_file_count,
            },
            "package_json": {"dependencies": dict(self.dependencies)},
            "skipped_files": list(self.skipped_files),
            "config_errors": [
                {"file_path": e.file_path, "message": e.message} for e in self.config_errors
            ],
        }


def extract(
    root: Path,
    files: Sequence[ParsedFile],
    package_jsons: Sequence[PackageJson],
    ts_configs: Sequence[TypeScriptConfig],
    skipped_files: Iterable[str] = (),
    config_errors: Iterable[ConfigError] = (),
) -> Output:
    """
    Build the import graph and derive every report section from it.

    Args:
        root: Project root the file paths are relative to
        files: Parsed source files
        package_jsons: Loaded package.json files
        ts_configs: Loaded tsconfig.json files
        skipped_files: Paths dropped during the scan
        config_errors: Configs that failed to load

    Returns:
        Assembled Output
    """
    graph = build_import_graph(files, ts_configs)
    dead_files, unknown_imports = find_dead(graph, declared_dependencies(package_jsons), root)
    exports = aggregate_exports(graph)
    dependencies = cross_reference(files, package_jsons)
    skipped = sorted(skipped_files)

    summary = Summary(
        line_count=sum(f.line_count for f in files),
        import_count=sum(len(f.imports) for f in files),
        file_count=len(files),
        unused_file_count=len(dead_files),
        skipped_file_count=len(skipped),
    )
    logger.debug("Summary: %r", summary)

    return Output(
        import_graph=graph,
        dead_files=dead_files,
        unknown_imports=unknown_imports,
        exports=exports,
        summary=summary,
        dependencies=dependencies,
        skipped_files=skipped,
        config_errors=list(config_errors),
    )


def extract_test_files(test_files: Iterable[TestFile]) -> TestSummary:
    """Sum test, skipped-test and line counts over *test_files*."""
    summary = TestSummary()
    for test_file in test_files:
        summary.count += test_file.test_count
        summary.skipped_count += test_file.skipped_test_count
        summary.line_count += test_file.line_count
        summary.file_count += 1
    return summary
