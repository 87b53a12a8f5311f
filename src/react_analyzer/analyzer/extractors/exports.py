"""
Export extraction from Tree-sitter JavaScript/TypeScript trees.
"""

import logging
from typing import List, Optional

from react_analyzer.analyzer.extractors.base import BaseExtractor
from react_analyzer.analyzer.models import Export, ParsedFile
from react_analyzer.analyzer.parser import TreeSitterNode

logger = logging.getLogger(__name__)

# Declarations whose exported name sits in the "name" field
NAMED_DECLARATIONS = {
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
    "interface_declaration",
    "type_alias_declaration",
    "enum_declaration",
    "internal_module",
    "module",
    "function_signature",
}

VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}


class ExportExtractor(BaseExtractor):
    """Extracts export statements from Tree-sitter trees."""

    def extract(self, tree: TreeSitterNode, result: ParsedFile) -> None:
        """Populate ``result.exports``, one Export per export statement.

        Args:
            tree: Tree-sitter root node
            result: ParsedFile to populate
        """
        for node in self.walk_tree(tree):
            if node.type != "export_statement":
                continue
            export_info = self._extract_export(node, result.path)
            if export_info is not None:
                result.exports.append(export_info)

    def _extract_export(self, node: TreeSitterNode, file_path: str) -> Optional[Export]:
        export_info = Export(file_path=file_path, line=self.line(node))

        source = self.string_value(node.child_by_field_name("source"))
        if source is not None:
            export_info.source = source

        is_default = any(child.type == "default" for child in node.children)
        declaration = node.child_by_field_name("declaration")

        if is_default:
            target = declaration if declaration is not None else node.child_by_field_name("value")
            export_info.default = self._default_name(target)
            return export_info

        if declaration is not None:
            export_info.named.extend(self._declaration_names(declaration))

        for child in node.children:
            if child.type == "export_clause":
                export_info.named.extend(self._clause_names(child))
            elif child.type == "namespace_export":
                # export * as ns from './x'
                names = [c for c in child.named_children]
                export_info.named.append(self.binding_name(names[-1]) if names else "*")
            elif child.type == "*":
                export_info.named.append("*")

        if not export_info.named and not export_info.source:
            # export = foo / export as namespace Foo
            logger.debug("Unrecognized export form at %s:%d", file_path, export_info.line)
            return None
        return export_info

    def _default_name(self, target: Optional[TreeSitterNode]) -> str:
        """Name of a default export, or the first line of its expression."""
        if target is None:
            return ""
        if target.type == "identifier":
            return self.text(target)
        name = target.child_by_field_name("name")
        if name is not None:
            return self.text(name)
        text = self.text(target).strip()
        return text.splitlines()[0] if text else ""

    def _clause_names(self, clause: TreeSitterNode) -> List[str]:
        names = []
        for specifier in clause.children:
            if specifier.type != "export_specifier":
                continue
            alias = specifier.child_by_field_name("alias")
            name = specifier.child_by_field_name("name")
            exported = self.binding_name(alias if alias is not None else name)
            if exported:
                names.append(exported)
        return names

    def _declaration_names(self, declaration: TreeSitterNode) -> List[str]:
        if declaration.type in VARIABLE_DECLARATIONS:
            names = []
            for declarator in declaration.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name = declarator.child_by_field_name("name")
                if name is None:
                    continue
                if name.type == "identifier":
                    names.append(self.text(name))
                else:
                    # Destructuring: export const { a, b } = obj
                    names.extend(
                        self.text(n)
                        for n in self.walk_tree(name)
                        if n.type in ("identifier", "shorthand_property_identifier_pattern")
                    )
            return names

        if declaration.type in NAMED_DECLARATIONS:
            name = declaration.child_by_field_name("name")
            return [self.text(name)] if name is not None else []

        if declaration.type == "ambient_declaration":
            # export declare const x: number
            for child in declaration.named_children:
                names = self._declaration_names(child)
                if names:
                    return names
        return []
