"""
Import extraction from Tree-sitter JavaScript/TypeScript trees.

Recognized forms:
- ``import D, { a, b as c } from './x'``
- ``import * as ns from './x'``
- ``import x = require('./x')`` (TypeScript)
- ``export { a } from './x'`` / ``export * from './x'`` (re-exports)
- ``require('./x')`` and ``import('./x')`` calls

Side-effect imports (``import './styles.css'``) are recorded with no bindings.
"""

import logging
from typing import List, Optional, Tuple

from react_analyzer.analyzer.extractors.base import BaseExtractor
from react_analyzer.analyzer.models import Import, ParsedFile
from react_analyzer.analyzer.parser import TreeSitterNode

logger = logging.getLogger(__name__)

NAMESPACE = "*"


class ImportExtractor(BaseExtractor):
    """Extracts import statements from Tree-sitter trees."""

    def extract(self, tree: TreeSitterNode, result: ParsedFile) -> None:
        """Populate ``result.imports`` in source order.

        Args:
            tree: Tree-sitter root node
            result: ParsedFile to populate
        """
        for node in self.walk_tree(tree):
            if node.type == "import_statement":
                import_info = self._from_import_statement(node, result.path)
            elif node.type == "export_statement":
                import_info = self._from_reexport(node, result.path)
            elif node.type == "call_expression":
                import_info = self._from_call(node, result.path)
            else:
                continue

            if import_info is not None:
                result.imports.append(import_info)

    def _from_import_statement(self, node: TreeSitterNode, file_path: str) -> Optional[Import]:
        source = self.string_value(node.child_by_field_name("source"))
        clause = None
        for child in node.children:
            if child.type == "import_clause":
                clause = child
            elif child.type == "import_require_clause":
                # import x = require('./x')
                source = self.string_value(child.child_by_field_name("source"))
                if source is None:
                    source = next(
                        (self.string_value(c) for c in child.children if c.type == "string"),
                        None,
                    )
                if source is None:
                    return None
                return Import(source=source, file_path=file_path, is_default=True, line=self.line(node))

        if source is None:
            logger.debug("Import without string source at %s:%d", file_path, self.line(node))
            return None
        if clause is None:
            # Side-effect import, nothing is bound
            named, is_default = [], False
        else:
            named, is_default = self._clause_bindings(clause)
        return Import(
            source=source,
            file_path=file_path,
            named=named,
            is_default=is_default,
            line=self.line(node),
        )

    def _clause_bindings(self, clause: TreeSitterNode) -> Tuple[List[str], bool]:
        named: List[str] = []
        is_default = False
        for child in clause.children:
            if child.type == "identifier":
                is_default = True
            elif child.type == "namespace_import":
                named.append(NAMESPACE)
            elif child.type == "named_imports":
                for specifier in child.children:
                    if specifier.type != "import_specifier":
                        continue
                    name = self.binding_name(specifier.child_by_field_name("name"))
                    if name == "default":
                        is_default = True
                    elif name:
                        named.append(name)
        return named, is_default

    def _from_reexport(self, node: TreeSitterNode, file_path: str) -> Optional[Import]:
        source = self.string_value(node.child_by_field_name("source"))
        if source is None:
            return None

        named: List[str] = []
        is_default = False
        for child in node.children:
            if child.type in ("*", "namespace_export"):
                named.append(NAMESPACE)
            elif child.type == "export_clause":
                for specifier in child.children:
                    if specifier.type != "export_specifier":
                        continue
                    name = self.binding_name(specifier.child_by_field_name("name"))
                    if name == "default":
                        is_default = True
                    elif name:
                        named.append(name)

        return Import(
            source=source,
            file_path=file_path,
            named=named,
            is_default=is_default,
            line=self.line(node),
        )

    def _from_call(self, node: TreeSitterNode, file_path: str) -> Optional[Import]:
        function = node.child_by_field_name("function")
        if function is None:
            return None
        if function.type == "import":
            kind = "dynamic import"
        elif function.type == "identifier" and self.text(function) == "require":
            kind = "require"
        else:
            return None

        arguments = node.child_by_field_name("arguments")
        if arguments is None or not arguments.named_children:
            return None
        source = self.string_value(arguments.named_children[0])
        if source is None:
            logger.debug("Skipping %s with computed specifier at %s:%d", kind, file_path, self.line(node))
            return None

        return Import(source=source, file_path=file_path, is_default=True, line=self.line(node))
