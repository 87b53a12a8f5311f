"""
Analyzer module for JavaScript/TypeScript sources.

- languages: extension -> Language registry
- models: Data classes for extraction results
- parser: Tree-sitter parsers
- extractors: import, export and test-count extraction
- base_analyzer: Main CodeAnalyzer orchestrator
- discovery / scanner: file discovery and the full project scan
"""

from react_analyzer.analyzer.base_analyzer import CodeAnalyzer
from react_analyzer.analyzer.languages import Language, detect_language
from react_analyzer.analyzer.models import Export, Import, ParsedFile, TestFile

__all__ = [
    "CodeAnalyzer",
    "Language",
    "detect_language",
    "Export",
    "Import",
    "ParsedFile",
    "TestFile",
]
