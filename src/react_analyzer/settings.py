"""Effective run configuration."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Pattern

from react_analyzer.analyzer.base_analyzer import DEFAULT_WORKERS
from react_analyzer.analyzer.discovery import (
    DEFAULT_IGNORE_PATTERN,
    DEFAULT_PATTERN,
    DEFAULT_TEST_PATTERN,
)

DEFAULT_OUTPUT = Path("report.json")


@dataclass
class AnalyzerSettings:
    """Everything a run needs, with the CLI defaults."""

    root: Path
    pattern: Pattern = field(default_factory=lambda: re.compile(DEFAULT_PATTERN))
    ignore_pattern: Pattern = field(default_factory=lambda: re.compile(DEFAULT_IGNORE_PATTERN))
    test_pattern: Pattern = field(default_factory=lambda: re.compile(DEFAULT_TEST_PATTERN))
    output: Path = DEFAULT_OUTPUT
    report_dir: Optional[Path] = None
    workers: int = DEFAULT_WORKERS
    scan_tests: bool = True
    show_progress: bool = True

    def __post_init__(self):
        self.root = Path(self.root).resolve()
        for name in ("pattern", "ignore_pattern", "test_pattern"):
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, re.compile(value))
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
