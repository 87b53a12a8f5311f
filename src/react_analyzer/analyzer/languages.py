"""
Language registry.

Maps file extensions to the closed set of languages the analyzer knows how to
extract. Anything not listed resolves to ``Language.UNKNOWN``, whose handler
only counts lines.
"""

from enum import Enum
from pathlib import PurePosixPath
from typing import Dict


class Language(Enum):
    """Languages understood by the per-file extractor."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    UNKNOWN = "unknown"

    @property
    def is_javascript_family(self) -> bool:
        return self is not Language.UNKNOWN


LANGUAGE_MAP: Dict[str, Language] = {
    ".js": Language.JAVASCRIPT,
    ".jsx": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".cjs": Language.JAVASCRIPT,
    ".ts": Language.TYPESCRIPT,
    ".mts": Language.TYPESCRIPT,
    ".cts": Language.TYPESCRIPT,
    ".tsx": Language.TSX,
}


def detect_language(path: str) -> Language:
    """Return the language registered for *path*'s extension."""
    return LANGUAGE_MAP.get(PurePosixPath(path).suffix.lower(), Language.UNKNOWN)
