"""Exceptions raised by react-analyzer."""


class AnalyzerError(Exception):
    """Base class for all analyzer errors."""

    pass


class ParserInitializationError(AnalyzerError):
    """Raised when a Tree-sitter grammar cannot be loaded."""

    pass


class ParseError(AnalyzerError):
    """Raised when a single source file cannot be read or parsed."""

    pass


class ConfigLoadError(AnalyzerError):
    """Raised when a package.json or tsconfig.json cannot be loaded."""

    def __init__(self, file_path: str, message: str):
        super().__init__(f"{file_path}: {message}")
        self.file_path = file_path
        self.message = message
