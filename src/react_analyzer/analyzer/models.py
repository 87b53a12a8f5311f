"""
Data models for per-file extraction results.
"""

from dataclasses import dataclass, field
from typing import List

from react_analyzer.analyzer.languages import Language


@dataclass
class Import:
    """A single import statement (or re-export / require / dynamic import)."""

    source: str  # Specifier as written: "./b", "@app/utils", "lodash/debounce"
    file_path: str  # Root-relative path of the importing file
    named: List[str] = field(default_factory=list)
    is_default: bool = False
    line: int = 0


@dataclass
class Export:
    """An export statement of a file.

    A non-empty ``source`` marks a re-export (``export ... from 'x'``).
    """

    file_path: str
    named: List[str] = field(default_factory=list)
    default: str = ""
    source: str = ""
    line: int = 0


@dataclass
class ParsedFile:
    """Complete extraction result for a single source file."""

    path: str  # Root-relative POSIX path with extension
    name: str  # Display name; index files use their directory name
    extension: str  # Without the leading dot
    line_count: int
    imports: List[Import] = field(default_factory=list)
    exports: List[Export] = field(default_factory=list)
    language: Language = Language.UNKNOWN


@dataclass
class TestFile:
    """Counts gathered from a test-pattern-matched file."""

    __test__ = False  # not a pytest class

    path: str
    name: str
    line_count: int
    test_count: int = 0
    skipped_test_count: int = 0
