#!/usr/bin/env python3
"""
Command-line interface for react-analyzer.

Scans a JavaScript/TypeScript project, builds its import graph and writes
the JSON report.
"""

import logging
import re
import sys
from pathlib import Path
from typing import Optional, Pattern

import click
from rich import markup
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .analyzer.base_analyzer import DEFAULT_WORKERS, CodeAnalyzer
from .analyzer.discovery import DEFAULT_IGNORE_PATTERN, DEFAULT_PATTERN, DEFAULT_TEST_PATTERN
from .analyzer.scanner import scan, scan_test_files
from .console_styles import (
    create_data_table,
    create_header_panel,
    create_summary_table,
    create_timing_panel,
    format_count,
    get_status_icon,
)
from .report.summary import Output, TestSummary, extract, extract_test_files
from .report.writer import write_file_reports, write_output
from .settings import DEFAULT_OUTPUT, AnalyzerSettings
from .utils.timer import TimingContext

console = Console()

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    if verbose:
        logging.getLogger("react_analyzer").setLevel(logging.DEBUG)


def _compile_pattern(ctx: click.Context, param: click.Parameter, value: str) -> Pattern:
    try:
        return re.compile(value)
    except re.error as e:
        raise click.BadParameter(f"invalid regular expression {value!r}: {e}") from e


def _print_inputs(settings: AnalyzerSettings) -> None:
    table = create_data_table("Inputs", [("Setting", "left", "cyan"), ("Value", "left", "white")])
    table.add_row("Analyzing", str(settings.root))
    table.add_row("Scan", settings.pattern.pattern)
    table.add_row("Ignore", settings.ignore_pattern.pattern)
    table.add_row("Test", settings.test_pattern.pattern if settings.scan_tests else "[dim]disabled[/dim]")
    table.add_row("Workers", str(settings.workers))
    console.print(table)


def _print_file_summary(output: Output) -> None:
    summary = output.summary
    table = create_summary_table("File Summary")
    table.add_row("Total Files", format_count(summary.file_count))
    table.add_row("Total Lines", format_count(summary.line_count))
    table.add_row("Total Imports", format_count(summary.import_count))
    table.add_row("Dead Files", format_count(summary.unused_file_count))
    table.add_row("Unknown Imports", format_count(len(output.unknown_imports)))
    if summary.skipped_file_count > 0:
        table.add_row("Skipped Files", format_count(summary.skipped_file_count))
    console.print(table)

    for error in output.config_errors:
        console.print(
            f"{get_status_icon(False)} [yellow]Ignored config[/yellow] "
            f"{markup.escape(error.file_path)}: {markup.escape(error.message)}"
        )


def _print_test_summary(test_summary: TestSummary) -> None:
    table = create_summary_table("Test Summary")
    table.add_row("Test Files", format_count(test_summary.file_count))
    table.add_row("Total Tests", format_count(test_summary.count))
    table.add_row("Skipped Tests", format_count(test_summary.skipped_count))
    table.add_row("Total Lines", format_count(test_summary.line_count))
    console.print(table)


@click.command()
@click.version_option(version=__version__, prog_name="react-analyzer")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--pattern",
    default=DEFAULT_PATTERN,
    show_default=True,
    callback=_compile_pattern,
    help="Regex selecting source files (matched against root-relative paths)",
)
@click.option(
    "--ignore",
    "ignore_pattern",
    default=DEFAULT_IGNORE_PATTERN,
    show_default=True,
    callback=_compile_pattern,
    help="Regex of paths to skip",
)
@click.option(
    "--test-pattern",
    default=DEFAULT_TEST_PATTERN,
    show_default=True,
    callback=_compile_pattern,
    help="Regex selecting test files for the test summary",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Where to write the JSON report",
)
@click.option(
    "--report-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also write one HTML page per imported file into this directory",
)
@click.option(
    "-w",
    "--workers",
    type=click.IntRange(min=1),
    default=DEFAULT_WORKERS,
    show_default=True,
    help="Number of worker threads",
)
@click.option("--no-tests", is_flag=True, help="Skip the test file summary")
@click.option("--no-progress", is_flag=True, help="Hide the progress bar")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (debug) logging")
def cli(
    path: Path,
    pattern: Pattern,
    ignore_pattern: Pattern,
    test_pattern: Pattern,
    output: Path,
    report_dir: Optional[Path],
    workers: int,
    no_tests: bool,
    no_progress: bool,
    verbose: bool,
) -> None:
    """react-analyzer - a static code analyzer for React based projects.

    Builds the import graph of the JavaScript/TypeScript sources under PATH,
    lists dead files and unresolved imports, counts how often each declared
    package is imported and summarizes the test files.

    PATH: Root directory of the project

    Examples:
        react-analyzer ./my-app
        react-analyzer ./monorepo -o out/report.json --report-dir out/files
    """
    _configure_logging(verbose)

    settings = AnalyzerSettings(
        root=path,
        pattern=pattern,
        ignore_pattern=ignore_pattern,
        test_pattern=test_pattern,
        output=output,
        report_dir=report_dir,
        workers=workers,
        scan_tests=not no_tests,
        show_progress=not no_progress,
    )

    logger.debug("Settings: %s", settings)
    console.print(create_header_panel("react-analyzer", f"v{__version__}"))
    _print_inputs(settings)

    timings = TimingContext()
    analyzer = CodeAnalyzer()

    with timings.measure("File scan"):
        scan_result = scan(settings, analyzer)

    with timings.measure("Graph analysis"):
        result = extract(
            settings.root,
            scan_result.files,
            scan_result.package_jsons,
            scan_result.ts_configs,
            skipped_files=scan_result.skipped_files,
            config_errors=scan_result.config_errors,
        )

    try:
        with timings.measure("Report writing"):
            write_output(result, settings.output)
            if settings.report_dir is not None:
                write_file_reports(result, settings.report_dir)
    except OSError as e:
        target = e.filename or settings.output
        console.print(f"[red]Error:[/red] cannot write report to {markup.escape(str(target))}: {e.strerror or e}")
        sys.exit(1)

    console.print()
    _print_file_summary(result)
    console.print(f"\n[green]Report written to:[/green] {settings.output}")

    if settings.scan_tests:
        with timings.measure("Test scan"):
            test_summary = extract_test_files(scan_test_files(settings, analyzer))
        console.print()
        _print_test_summary(test_summary)

    console.print()
    console.print(create_timing_panel(timings.total, timings.phases))
