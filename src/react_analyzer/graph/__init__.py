"""
Import graph module.

- models: Node, Edge and the ImportGraph container
- resolver: tsconfig.json lookup and specifier resolution
- builder: graph construction from parsed files
"""

from react_analyzer.graph.builder import ImportGraphBuilder, build_import_graph
from react_analyzer.graph.models import Edge, ImportGraph, Node
from react_analyzer.graph.resolver import (
    closest_config,
    get_aliases,
    get_base_url,
    resolve_specifier,
)

__all__ = [
    "ImportGraphBuilder",
    "build_import_graph",
    "Edge",
    "ImportGraph",
    "Node",
    "closest_config",
    "get_aliases",
    "get_base_url",
    "resolve_specifier",
]
