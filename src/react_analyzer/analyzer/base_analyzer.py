"""
Main CodeAnalyzer orchestrator.

Runs the Tree-sitter extractors over single files and fans files out to a
thread pool.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, List, Sequence

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from react_analyzer.analyzer.extractors.exports import ExportExtractor
from react_analyzer.analyzer.extractors.imports import ImportExtractor
from react_analyzer.analyzer.extractors.tests import TestCountExtractor
from react_analyzer.analyzer.languages import detect_language
from react_analyzer.analyzer.models import ParsedFile, TestFile
from react_analyzer.analyzer.parser import parse_source, read_source
from react_analyzer.exceptions import AnalyzerError
from react_analyzer.utils.paths import to_relative_posix

logger = logging.getLogger(__name__)

# Bounded by open file descriptors rather than CPU count
DEFAULT_WORKERS = 64


def get_file_name(path: str) -> str:
    """Display name of a module: the stem, or the directory name for index files."""
    pure = PurePosixPath(path)
    stem = pure.stem
    if stem == "index" and pure.parent.name:
        return pure.parent.name
    return stem


def count_lines(content: str) -> int:
    return len(content.splitlines())


@dataclass
class AnalysisBatch:
    """Results of analyzing a batch of files."""

    files: List[ParsedFile] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class CodeAnalyzer:
    """
    Orchestrates code analysis using specialized extractors.

    Delegates extraction to specialized extractor classes. Extractors hold no
    per-file state, so one analyzer is shared by all worker threads.
    """

    def __init__(self):
        """Initialize analyzer with all extractors."""
        self.import_extractor = ImportExtractor()
        self.export_extractor = ExportExtractor()
        self.test_counter = TestCountExtractor()

    def _run_extractions(self, tree: Any, result: ParsedFile) -> None:
        try:
            self.import_extractor.extract(tree, result)
        except Exception as e:
            logger.error(f"Import extraction failed for {result.path}: {e}")

        try:
            self.export_extractor.extract(tree, result)
        except Exception as e:
            logger.error(f"Export extraction failed for {result.path}: {e}")

    def analyze_file(self, file_path: Path, root: Path) -> ParsedFile:
        """Analyze a single source file.

        Files of an unknown language only get a line count.

        Args:
            file_path: Path to the source file
            root: Project root; the result's path is relative to it

        Returns:
            ParsedFile containing all extracted information

        Raises:
            ParseError: If the file cannot be read or parsed
        """
        relative = to_relative_posix(file_path, root)
        language = detect_language(relative)
        content = read_source(file_path)

        result = ParsedFile(
            path=relative,
            name=get_file_name(relative),
            extension=PurePosixPath(relative).suffix.lstrip("."),
            line_count=count_lines(content),
            language=language,
        )

        if not language.is_javascript_family:
            logger.debug(f"No extractor for {relative}, counting lines only")
            return result

        tree = parse_source(content, language, filename=relative)
        self._run_extractions(tree, result)
        return result

    def analyze_test_file(self, file_path: Path, root: Path) -> TestFile:
        """Count the test cases of a test file.

        Raises:
            ParseError: If the file cannot be read
        """
        relative = to_relative_posix(file_path, root)
        content = read_source(file_path)
        result = TestFile(
            path=relative,
            name=get_file_name(relative),
            line_count=count_lines(content),
        )
        if detect_language(relative).is_javascript_family:
            result.test_count, result.skipped_test_count = self.test_counter.count(content)
        return result

    def analyze_files(
        self,
        files: Sequence[Path],
        root: Path,
        max_workers: int = DEFAULT_WORKERS,
        show_progress: bool = True,
    ) -> AnalysisBatch:
        """Analyze *files* in a thread pool.

        Files that fail are logged and listed in ``skipped``; the rest are
        returned sorted by path.

        Args:
            files: Source files to analyze
            root: Project root
            max_workers: Size of the worker pool
            show_progress: Display a progress bar

        Returns:
            AnalysisBatch with parsed and skipped files
        """
        batch = AnalysisBatch()
        if not files:
            logger.warning(f"No source files found in {root}")
            return batch

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            disable=not show_progress,
        ) as progress:
            task = progress.add_task(f"Analyzing {len(files)} files...", total=len(files))

            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                future_to_file = {
                    executor.submit(self.analyze_file, source_file, root): source_file
                    for source_file in files
                }

                for future in as_completed(future_to_file):
                    source_file = future_to_file[future]
                    try:
                        batch.files.append(future.result())
                    except AnalyzerError as e:
                        logger.warning(f"Skipping {source_file}: {e}")
                        batch.skipped.append(to_relative_posix(source_file, root))
                    finally:
                        progress.update(task, advance=1)

        batch.files.sort(key=lambda f: f.path)
        batch.skipped.sort()
        return batch

    def analyze_test_files(self, files: Sequence[Path], root: Path) -> List[TestFile]:
        """Count tests in *files* sequentially, skipping unreadable ones."""
        results = []
        for test_file in files:
            try:
                results.append(self.analyze_test_file(test_file, root))
            except AnalyzerError as e:
                logger.warning(f"Skipping test file {test_file}: {e}")
        return results
