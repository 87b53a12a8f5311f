"""Tests for import graph construction."""

import random

from conftest import imp, parsed
from react_analyzer.configs.ts_config import CompilerOptions, TypeScriptConfig
from react_analyzer.graph.builder import ImportGraphBuilder, build_import_graph, import_keys


def assert_well_formed(graph):
    ids = {node.id for node in graph.nodes}
    paths = [node.path for node in graph.nodes]
    assert len(ids) == len(graph.nodes)
    assert len(set(paths)) == len(paths)
    for edge in graph.edges:
        assert edge.source in ids
        assert edge.target in ids


def test_import_keys():
    assert import_keys("src/a.ts") == ["src/a"]
    assert import_keys("src/Foo/index.tsx") == ["src/Foo/index", "src/Foo"]
    assert import_keys("index.ts") == ["index"]


def test_named_import_between_two_files():
    graph = build_import_graph(
        [
            parsed("a.ts", imp("./b", "a.ts", "x")),
            parsed("b.ts"),
        ]
    )

    assert_well_formed(graph)
    assert [n.path for n in graph.nodes] == ["a.ts", "b.ts"]
    assert len(graph.edges) == 1
    edge = graph.edges[0]
    assert graph.node(edge.source).path == "b.ts"
    assert graph.node(edge.target).path == "a.ts"
    assert edge.name == "x"
    assert edge.is_default is False


def test_default_import_adds_unnamed_edge():
    graph = build_import_graph([parsed("a.ts", imp("./b", "a.ts", "x", "y", default=True)), parsed("b.ts")])

    names = [(e.name, e.is_default) for e in graph.edges]
    assert names == [("x", False), ("y", False), ("", True)]
    assert [e.id for e in graph.edges] == [0, 1, 2]


def test_side_effect_import_creates_no_edge():
    graph = build_import_graph([parsed("a.ts", imp("./styles.css", "a.ts"))])
    assert graph.edges == []
    assert graph.get("styles.css") is not None


def test_placeholder_is_completed_and_keeps_id():
    files = [
        parsed("src/a.ts", imp("./b", "src/a.ts", "x")),
        parsed("src/b.ts", line_count=12),
    ]
    graph = build_import_graph(files)

    node = graph.get("src/b.ts")
    assert node.id == 1
    assert node.file_name == "b"
    assert node.extension == "ts"
    assert node.line_count == 12
    assert graph.get("src/b") is None


def test_index_collapsing():
    files = [
        parsed("src/App.tsx", imp("./Foo", "src/App.tsx", "Foo")),
        parsed("src/Foo/index.ts", line_count=3),
    ]
    graph = build_import_graph(files)

    assert_well_formed(graph)
    assert [n.path for n in graph.nodes] == ["src/App.tsx", "src/Foo/index.ts"]
    foo = graph.get("src/Foo/index.ts")
    assert foo.id == 1
    assert foo.line_count == 3
    assert graph.edges[0].source == foo.id


def test_index_import_after_file_is_registered():
    files = [
        parsed("src/Foo/index.ts"),
        parsed("src/Zed.ts", imp("./Foo", "src/Zed.ts", "Foo"), imp("./Foo/index", "src/Zed.ts", "Bar")),
    ]
    graph = build_import_graph(files)

    assert len(graph.nodes) == 2
    foo = graph.get("src/Foo/index.ts")
    assert [e.source for e in graph.edges] == [foo.id, foo.id]


def test_two_placeholders_for_same_file_are_merged():
    files = [
        parsed("src/a.ts", imp("./foo", "src/a.ts", "x")),
        parsed("src/b.ts", imp("./foo/index", "src/b.ts", "y")),
        parsed("src/foo/index.ts"),
    ]
    graph = build_import_graph(files)

    assert_well_formed(graph)
    foo = graph.get("src/foo/index.ts")
    assert foo.id == 1
    assert [n.id for n in graph.nodes] == [0, 1, 2]
    assert {e.source for e in graph.edges} == {foo.id}


def test_explicit_extension_and_bare_import_share_a_node():
    files = [
        parsed("a.ts", imp("./b.ts", "a.ts", "x"), imp("./b", "a.ts", "y")),
        parsed("b.ts"),
    ]
    graph = build_import_graph(files)

    assert_well_formed(graph)
    assert len(graph.nodes) == 2
    b = graph.get("b.ts")
    assert {e.source for e in graph.edges} == {b.id}


def test_file_beats_index_directory_for_same_import_key():
    files = [
        parsed("src/a.ts", imp("./Foo", "src/a.ts", "x")),
        parsed("src/Foo.ts"),
        parsed("src/Foo/index.ts"),
    ]
    graph = build_import_graph(files)

    assert graph.node(graph.edges[0].source).path == "src/Foo.ts"
    assert graph.get("src/Foo/index.ts") is not None


def test_ids_do_not_depend_on_input_order():
    files = [
        parsed("src/a.ts", imp("./b", "src/a.ts", "b"), imp("react", "src/a.ts", default=True)),
        parsed("src/b.ts", imp("./c", "src/b.ts", "c")),
        parsed("src/c/index.ts", imp("lodash", "src/c/index.ts", "map")),
        parsed("src/d.ts"),
    ]
    expected = build_import_graph(files).to_dict()

    shuffled = list(files)
    random.Random(7).shuffle(shuffled)
    assert build_import_graph(shuffled).to_dict() == expected


def test_aliases_use_closest_config():
    configs = [
        TypeScriptConfig(
            file_path="tsconfig.json",
            compiler_options=CompilerOptions(base_url="src", paths={"@app/*": ["app/*"]}),
        ),
        TypeScriptConfig(
            file_path="pkgA/tsconfig.json",
            compiler_options=CompilerOptions(base_url="lib", paths={"@app/*": ["*"]}),
        ),
    ]
    files = [
        parsed("src/main.ts", imp("@app/utils", "src/main.ts", "a")),
        parsed("pkgA/src/x.ts", imp("@app/utils", "pkgA/src/x.ts", "b")),
        parsed("src/app/utils.ts"),
        parsed("pkgA/lib/utils.ts"),
    ]
    graph = build_import_graph(files, configs)

    sources = {graph.node(e.target).path: graph.node(e.source).path for e in graph.edges}
    assert sources == {
        "src/main.ts": "src/app/utils.ts",
        "pkgA/src/x.ts": "pkgA/lib/utils.ts",
    }


def test_builder_returns_file_node_id():
    builder = ImportGraphBuilder()
    assert builder.add_file(parsed("a.ts", imp("./b", "a.ts", "x"))) == 0
    assert builder.add_file(parsed("b.ts")) == 1


def test_directory_placeholder_id_survives_file_path_placeholder():
    files = [
        parsed("a.ts", imp("./lib/Foo", "a.ts", "x")),
        parsed("b.ts", imp("./lib/Foo/index.ts", "b.ts", "y")),
        parsed("lib/Foo/index.ts", line_count=4),
    ]
    graph = build_import_graph(files)

    assert_well_formed(graph)
    foo = graph.get("lib/Foo/index.ts")
    assert foo.id == 1
    assert foo.line_count == 4
    assert [n.id for n in graph.nodes] == [0, 1, 2]
    assert graph.get("lib/Foo") is None
    assert {e.source for e in graph.edges} == {foo.id}


def test_trailing_slash_import_collapses_onto_index_file():
    files = [
        parsed("src/App.tsx", imp("./Foo/", "src/App.tsx", "Foo")),
        parsed("src/Foo/index.ts"),
    ]
    graph = build_import_graph(files)

    assert [n.path for n in graph.nodes] == ["src/App.tsx", "src/Foo/index.ts"]
    assert graph.edges[0].source == graph.get("src/Foo/index.ts").id


def test_catch_all_alias_resolves_into_source_tree():
    configs = [
        TypeScriptConfig(
            file_path="tsconfig.json",
            compiler_options=CompilerOptions(base_url=".", paths={"*": ["src/*"]}),
        )
    ]
    files = [
        parsed("src/main.ts", imp("utils/format", "src/main.ts", "format")),
        parsed("src/utils/format.ts"),
    ]
    graph = build_import_graph(files, configs)

    assert_well_formed(graph)
    assert len(graph.nodes) == 2
    assert graph.node(graph.edges[0].source).path == "src/utils/format.ts"


def test_declaration_file_is_reached_without_d_suffix():
    assert import_keys("src/types.d.ts") == ["src/types.d", "src/types"]
    assert import_keys("src/api/index.d.ts") == ["src/api/index.d", "src/api/index", "src/api"]

    files = [
        parsed("src/a.ts", imp("./types", "src/a.ts", "Props")),
        parsed("src/types.d.ts"),
    ]
    graph = build_import_graph(files)

    assert len(graph.nodes) == 2
    assert graph.node(graph.edges[0].source).path == "src/types.d.ts"
