"""
Import graph construction.

Nodes are keyed by canonical path. A parsed file is keyed by its full path
(``src/Foo/index.tsx``) but can also be reached through its *import keys*:
the path without extension (``src/Foo/index``) and, for index files, the
directory (``src/Foo``). Imports resolving to an import key land on the file
node; a placeholder created under an import key before the file was seen is
merged into the file node, keeping its id.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from react_analyzer.analyzer.models import ParsedFile
from react_analyzer.configs.ts_config import TypeScriptConfig
from react_analyzer.graph.models import Edge, ImportGraph, Node
from react_analyzer.graph.resolver import closest_config, resolve_specifier
from react_analyzer.utils.paths import parent_dir, strip_extension

logger = logging.getLogger(__name__)

INDEX_STEM = "index"
DECLARATION_SUFFIX = ".d"


def import_keys(path: str) -> List[str]:
    """Alternative keys under which the file at *path* can be imported."""
    stem_path = strip_extension(path)
    keys = [stem_path] if stem_path != path else []
    if stem_path.endswith(DECLARATION_SUFFIX):
        # types.d.ts is imported as ./types
        stem_path = stem_path[: -len(DECLARATION_SUFFIX)]
        keys.append(stem_path)
    if stem_path.rsplit("/", 1)[-1] == INDEX_STEM:
        directory = parent_dir(path)
        if directory:
            keys.append(directory)
    return keys


class ImportGraphBuilder:
    """Accumulates parsed files into an ImportGraph.

    Files must be added in a deterministic order for ids to be reproducible;
    ``build_import_graph`` sorts them by path.
    """

    def __init__(self, ts_configs: Sequence[TypeScriptConfig] = ()):
        self.ts_configs = list(ts_configs)
        self._nodes: Dict[int, Node] = {}
        self._index: Dict[str, int] = {}
        self._import_keys: Dict[str, int] = {}
        self._redirects: Dict[int, int] = {}
        self._edges: List[Edge] = []
        self._next_node_id = 0
        self._next_edge_id = 0

    def add_file(self, parsed_file: ParsedFile) -> int:
        """
        Register *parsed_file* and the edges of its imports.

        Returns:
            Id of the file's node
        """
        node_id = self._register_file(parsed_file)
        config = closest_config(self.ts_configs, parsed_file.path)

        for import_info in parsed_file.imports:
            importing_file = import_info.file_path or parsed_file.path
            key = resolve_specifier(import_info.source, importing_file, config)
            source_id = self._node_for_key(key)

            for name in import_info.named:
                self._add_edge(source_id, node_id, False, name)
            if import_info.is_default:
                self._add_edge(source_id, node_id, True, "")

        return node_id

    def build(self) -> ImportGraph:
        """Finalize the graph: nodes in id order, edges with redirects applied."""
        for edge in self._edges:
            edge.source = self._resolve_id(edge.source)
            edge.target = self._resolve_id(edge.target)
        nodes = [self._nodes[node_id] for node_id in sorted(self._nodes)]
        logger.debug("Built import graph: %d nodes, %d edges", len(nodes), len(self._edges))
        return ImportGraph(nodes=nodes, edges=list(self._edges))

    def _register_file(self, parsed_file: ParsedFile) -> int:
        path = parsed_file.path
        keys = import_keys(path)
        candidates = sorted(
            self._index[key]
            for key in [path] + keys
            if key in self._index and self._nodes[self._index[key]].is_placeholder
        )

        if candidates:
            # The oldest placeholder keeps its id
            node_id = candidates.pop(0)
            for retired_id in candidates:
                self._retire(retired_id, node_id)
            if self._nodes[node_id].path != path:
                self._rekey(node_id, path)
        else:
            node_id = self._index.get(path)
            if node_id is None:
                node_id = self._new_node(path)

        self._nodes[node_id].complete(parsed_file.name, parsed_file.extension, parsed_file.line_count)
        for key in keys:
            self._import_keys.setdefault(key, node_id)
        return node_id

    def _node_for_key(self, key: str) -> int:
        node_id = self._index.get(key)
        if node_id is None:
            node_id = self._import_keys.get(key)
        if node_id is None:
            node_id = self._new_node(key)
        return node_id

    def _new_node(self, path: str) -> int:
        node_id = self._next_node_id
        self._next_node_id += 1
        self._nodes[node_id] = Node(id=node_id, path=path)
        self._index[path] = node_id
        return node_id

    def _rekey(self, node_id: int, path: str) -> None:
        node = self._nodes[node_id]
        logger.debug("Merging placeholder %r into %r (id %d)", node.path, path, node_id)
        del self._index[node.path]
        node.path = path
        self._index[path] = node_id

    def _retire(self, node_id: int, survivor_id: int) -> None:
        node = self._nodes.pop(node_id)
        logger.debug("Retiring placeholder %r (id %d) into id %d", node.path, node_id, survivor_id)
        del self._index[node.path]
        self._redirects[node_id] = survivor_id

    def _resolve_id(self, node_id: int) -> int:
        while node_id in self._redirects:
            node_id = self._redirects[node_id]
        return node_id

    def _add_edge(self, source: int, target: int, is_default: bool, name: str) -> None:
        self._edges.append(
            Edge(id=self._next_edge_id, source=source, target=target, is_default=is_default, name=name)
        )
        self._next_edge_id += 1


def build_import_graph(
    files: Iterable[ParsedFile],
    ts_configs: Optional[Sequence[TypeScriptConfig]] = None,
) -> ImportGraph:
    """
    Build the import graph of *files*.

    Args:
        files: Parsed source files, in any order
        ts_configs: Loaded tsconfig.json files used for alias resolution

    Returns:
        ImportGraph with deterministic ids
    """
    builder = ImportGraphBuilder(ts_configs or [])
    for parsed_file in sorted(files, key=lambda f: f.path):
        builder.add_file(parsed_file)
    return builder.build()
