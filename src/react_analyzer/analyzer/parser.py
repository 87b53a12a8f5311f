"""
Tree-sitter Parser Module

Provides Tree-sitter parsing for JavaScript, TypeScript and TSX sources.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language as TSLanguage
from tree_sitter import Parser

from react_analyzer.analyzer.languages import Language
from react_analyzer.exceptions import ParseError, ParserInitializationError

logger = logging.getLogger(__name__)

# Type aliases
TreeSitterNode = Any  # tree_sitter.Node

_GRAMMARS: Dict[Language, Callable[[], Any]] = {
    Language.JAVASCRIPT: tree_sitter_javascript.language,
    Language.TYPESCRIPT: tree_sitter_typescript.language_typescript,
    Language.TSX: tree_sitter_typescript.language_tsx,
}

# tree_sitter.Parser instances must not be shared between threads
_local = threading.local()


def get_parser(language: Language) -> Parser:
    """
    Return the calling thread's Tree-sitter parser for *language*.

    Args:
        language: Language to parse

    Returns:
        Parser: Configured Tree-sitter parser

    Raises:
        ParserInitializationError: If no grammar is registered or it fails to load
    """
    parsers: Optional[Dict[Language, Parser]] = getattr(_local, "parsers", None)
    if parsers is None:
        parsers = _local.parsers = {}

    parser = parsers.get(language)
    if parser is None:
        parser = _create_parser(language)
        parsers[language] = parser
    return parser


def _create_parser(language: Language) -> Parser:
    grammar = _GRAMMARS.get(language)
    if grammar is None:
        raise ParserInitializationError(f"No grammar registered for {language.value}")

    try:
        parser = Parser()
        parser.language = TSLanguage(grammar())
    except Exception as e:
        logger.error(f"Failed to initialize Tree-sitter parser for {language.value}: {e}")
        raise ParserInitializationError(f"Cannot initialize parser: {e}") from e

    logger.debug("Tree-sitter %s parser initialized", language.value)
    return parser


def parse_source(
    source_code: str,
    language: Language,
    filename: str = "<unknown>",
) -> TreeSitterNode:
    """
    Parse source code and return the Tree-sitter root node.

    Tree-sitter is error tolerant, so syntax errors produce ERROR nodes
    rather than exceptions.

    Raises:
        ParseError: If parsing fails
        ParserInitializationError: If the grammar cannot be loaded
    """
    parser = get_parser(language)
    try:
        tree = parser.parse(source_code.encode("utf-8"))
    except Exception as e:
        raise ParseError(f"Failed to parse {filename}: {e}") from e
    return tree.root_node


def read_source(file_path: Path) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        ParseError: If the file cannot be read or decoded
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"Encoding error reading {file_path}: {e}") from e
    except OSError as e:
        raise ParseError(f"Error reading {file_path}: {e}") from e


def node_text(node: Optional[TreeSitterNode]) -> str:
    """Text covered by *node* ("" for None)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def string_value(node: Optional[TreeSitterNode]) -> Optional[str]:
    """Unquoted value of a string literal node, or None for non-strings."""
    if node is None or node.type not in ("string", "template_string"):
        return None
    fragments = [c for c in node.children if c.type == "string_fragment"]
    if fragments:
        return "".join(node_text(f) for f in fragments)
    if node.type == "template_string" and any(
        c.type == "template_substitution" for c in node.children
    ):
        return None
    return node_text(node)[1:-1]


def walk_tree(node: TreeSitterNode) -> Iterator[TreeSitterNode]:
    """Pre-order traversal of *node* and all its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def line_of(node: TreeSitterNode) -> int:
    """1-based start line of *node*."""
    return node.start_point[0] + 1
