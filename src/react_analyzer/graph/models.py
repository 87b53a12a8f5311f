"""
Import graph data models.

Nodes live in an arena indexed by id with a separate path -> id table.
A node created as an edge endpoint before its own file is parsed is a
placeholder: only ``path`` is known until ``complete`` fills the rest.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Node:
    """A module in the import graph, keyed by its canonical path."""

    id: int
    path: str
    file_name: Optional[str] = None
    extension: Optional[str] = None
    line_count: Optional[int] = None

    @property
    def is_placeholder(self) -> bool:
        return self.file_name is None and self.extension is None and self.line_count is None

    def complete(self, file_name: str, extension: str, line_count: int) -> None:
        """Fill metadata fields that are still unset. Set fields are kept."""
        if self.file_name is None:
            self.file_name = file_name
        if self.extension is None:
            self.extension = extension
        if self.line_count is None:
            self.line_count = line_count


@dataclass
class Edge:
    """One imported binding.

    ``source`` is the module imported from, ``target`` the importing module.
    A default import has an empty ``name``.
    """

    id: int
    source: int
    target: int
    is_default: bool
    name: str


@dataclass
class ImportGraph:
    """Finished, read-only import graph."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        self._by_path: Dict[str, Node] = {node.path: node for node in self.nodes}
        self._by_id: Dict[int, Node] = {node.id: node for node in self.nodes}

    def get(self, path: str) -> Optional[Node]:
        """Node keyed by *path*, if any."""
        return self._by_path.get(path)

    def node(self, node_id: int) -> Node:
        return self._by_id[node_id]

    def connected_ids(self) -> set:
        """Ids appearing as an endpoint of any edge."""
        ids = set()
        for edge in self.edges:
            ids.add(edge.source)
            ids.add(edge.target)
        return ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {
                    "id": n.id,
                    "path": n.path,
                    "file_name": n.file_name,
                    "extension": n.extension,
                    "line_count": n.line_count,
                }
                for n in self.nodes
            ],
            "edges": [
                {
                    "id": e.id,
                    "source": e.source,
                    "target": e.target,
                    "is_default": e.is_default,
                    "name": e.name,
                }
                for e in self.edges
            ],
        }
