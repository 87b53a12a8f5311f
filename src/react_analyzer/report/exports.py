"""
Per-file export aggregation: what each module provides and to whom.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from react_analyzer.graph.models import ImportGraph


@dataclass
class ExportedBinding:
    """A binding imported from a module by one importer."""

    name: str
    target: str  # Path of the importing module
    is_default: bool


@dataclass
class FileExports:
    """Everything imported from one module."""

    source: str
    exports: List[ExportedBinding] = field(default_factory=list)


def aggregate_exports(graph: ImportGraph) -> List[FileExports]:
    """
    Invert the edges of *graph* per imported module.

    Modules nobody imports from get no entry.

    Returns:
        FileExports ordered by source node id, bindings in edge order
    """
    paths = {node.id: node.path for node in graph.nodes}
    grouped: Dict[int, List[ExportedBinding]] = defaultdict(list)

    for edge in graph.edges:
        grouped[edge.source].append(
            ExportedBinding(name=edge.name, target=paths[edge.target], is_default=edge.is_default)
        )

    return [FileExports(source=paths[source_id], exports=grouped[source_id]) for source_id in sorted(grouped)]
