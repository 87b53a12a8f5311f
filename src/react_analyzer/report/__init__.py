"""
Report module.

- dead_files: dead-file and unknown-import detection
- exports: per-module export aggregation
- packages: declared-dependency usage counts
- summary: Output assembly
- writer: JSON and HTML output
"""

from react_analyzer.report.dead_files import find_dead
from react_analyzer.report.exports import ExportedBinding, FileExports, aggregate_exports
from react_analyzer.report.packages import cross_reference
from react_analyzer.report.summary import (
    Output,
    Summary,
    TestSummary,
    extract,
    extract_test_files,
)
from react_analyzer.report.writer import write_file_reports, write_output

__all__ = [
    "find_dead",
    "ExportedBinding",
    "FileExports",
    "aggregate_exports",
    "cross_reference",
    "Output",
    "Summary",
    "TestSummary",
    "extract",
    "extract_test_files",
    "write_file_reports",
    "write_output",
]
