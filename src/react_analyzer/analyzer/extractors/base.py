"""
Base extractor interface.

All extractors inherit from BaseExtractor and implement the extract method.
Uses Tree-sitter exclusively for parsing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from react_analyzer.analyzer.models import ParsedFile
from react_analyzer.analyzer.parser import (
    TreeSitterNode,
    line_of,
    node_text,
    string_value,
    walk_tree,
)

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Base class for all extractors.

    Extractors analyze Tree-sitter trees and populate ParsedFile results.
    Each extractor is responsible for one aspect of code analysis.
    """

    def walk_tree(self, tree: TreeSitterNode) -> Iterator[TreeSitterNode]:
        """Iterate over *tree* in pre-order."""
        return walk_tree(tree)

    @abstractmethod
    def extract(self, tree: TreeSitterNode, result: ParsedFile) -> None:
        """Extract information from Tree-sitter tree and populate result.

        Args:
            tree: Tree-sitter root node
            result: ParsedFile object to populate with extracted information
        """
        pass

    # Helper methods for common operations
    def text(self, node: Optional[TreeSitterNode]) -> str:
        return node_text(node)

    def string_value(self, node: Optional[TreeSitterNode]) -> Optional[str]:
        return string_value(node)

    def line(self, node: TreeSitterNode) -> int:
        return line_of(node)

    def binding_name(self, node: Optional[TreeSitterNode]) -> str:
        """Name of an import/export specifier part (identifier or string)."""
        value = string_value(node)
        if value is not None:
            return value
        return node_text(node)
