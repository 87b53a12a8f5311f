"""Tests for the Tree-sitter import/export extractors and the test counter."""

import pytest

from react_analyzer.analyzer.extractors.exports import ExportExtractor
from react_analyzer.analyzer.extractors.imports import ImportExtractor
from react_analyzer.analyzer.extractors.tests import TestCountExtractor
from react_analyzer.analyzer.languages import Language, detect_language
from react_analyzer.analyzer.models import ParsedFile
from react_analyzer.analyzer.parser import parse_source


def extract(source: str, language: Language = Language.TYPESCRIPT, path: str = "src/a.ts") -> ParsedFile:
    result = ParsedFile(path=path, name="a", extension="ts", line_count=0, language=language)
    tree = parse_source(source, language, filename=path)
    ImportExtractor().extract(tree, result)
    ExportExtractor().extract(tree, result)
    return result


def import_facts(result: ParsedFile):
    return [(i.source, i.named, i.is_default) for i in result.imports]


@pytest.mark.parametrize(
    "path,language",
    [
        ("a.js", Language.JAVASCRIPT),
        ("a.jsx", Language.JAVASCRIPT),
        ("a.mjs", Language.JAVASCRIPT),
        ("a.ts", Language.TYPESCRIPT),
        ("a.tsx", Language.TSX),
        ("a.TSX", Language.TSX),
        ("styles.css", Language.UNKNOWN),
        ("Makefile", Language.UNKNOWN),
    ],
)
def test_detect_language(path, language):
    assert detect_language(path) is language


class TestImportExtractor:
    def test_default_and_named_imports(self):
        result = extract("import React, { useState, useEffect as effect } from 'react'\n")
        assert import_facts(result) == [("react", ["useState", "useEffect"], True)]
        assert result.imports[0].file_path == "src/a.ts"
        assert result.imports[0].line == 1

    def test_namespace_import(self):
        result = extract("import * as utils from './utils'\n")
        assert import_facts(result) == [("./utils", ["*"], False)]

    def test_side_effect_imports_are_recorded_without_bindings(self):
        result = extract("import 'core-js/stable'\nimport './polyfills'\n")
        assert import_facts(result) == [("core-js/stable", [], False), ("./polyfills", [], False)]
        assert [i.line for i in result.imports] == [1, 2]

    def test_default_as_named_binding(self):
        result = extract("import { default as Button, size } from './Button'\n")
        assert import_facts(result) == [("./Button", ["size"], True)]

    def test_type_only_import(self):
        result = extract("import type { Props } from './types'\n")
        assert import_facts(result) == [("./types", ["Props"], False)]

    def test_require_and_dynamic_import(self):
        source = "const fs = require('fs')\nconst Page = lazy(() => import('./Page'))\n"
        result = extract(source, Language.JAVASCRIPT, "src/a.js")
        assert import_facts(result) == [("fs", [], True), ("./Page", [], True)]
        assert [i.line for i in result.imports] == [1, 2]

    def test_computed_require_is_ignored(self):
        result = extract("const mod = require(name)\n", Language.JAVASCRIPT, "src/a.js")
        assert result.imports == []

    def test_import_equals_require(self):
        result = extract("import path = require('path')\n")
        assert import_facts(result) == [("path", [], True)]

    def test_reexports_are_imports(self):
        source = (
            "export { Button, default as Card } from './Button'\n"
            "export * from './hooks'\n"
            "export * as icons from './icons'\n"
        )
        result = extract(source)
        assert import_facts(result) == [
            ("./Button", ["Button"], True),
            ("./hooks", ["*"], False),
            ("./icons", ["*"], False),
        ]

    def test_jsx_source(self):
        source = "import Button from './Button'\n\nexport const App = () => <Button label=\"hi\" />\n"
        result = extract(source, Language.TSX, "src/App.tsx")
        assert import_facts(result) == [("./Button", [], True)]


class TestExportExtractor:
    def test_declaration_exports(self):
        source = (
            "export const a = 1, b = 2\n"
            "export function run() {}\n"
            "export class Store {}\n"
            "export interface Props { x: number }\n"
            "export type Id = string\n"
            "export enum Color { Red }\n"
        )
        result = extract(source)
        assert [e.named for e in result.exports] == [["a", "b"], ["run"], ["Store"], ["Props"], ["Id"], ["Color"]]
        assert all(e.source == "" for e in result.exports)

    def test_export_clause_uses_aliases(self):
        result = extract("const a = 1\nconst b = 2\nexport { a, b as c }\n")
        assert [e.named for e in result.exports] == [["a", "c"]]

    def test_default_exports(self):
        result = extract("export default function App() {}\n", Language.TSX, "src/App.tsx")
        assert result.exports[0].default == "App"
        assert result.exports[0].named == []

        result = extract("const store = {}\nexport default store\n")
        assert result.exports[0].default == "store"

    def test_reexport_records_source(self):
        result = extract("export { Button as Btn } from './Button'\nexport * from './hooks'\n")
        assert [(e.named, e.source) for e in result.exports] == [(["Btn"], "./Button"), (["*"], "./hooks")]

    def test_destructured_export(self):
        result = extract("export const { a, b } = obj\n")
        assert result.exports[0].named == ["a", "b"]


class TestTestCountExtractor:
    def test_counts_tests_and_skipped_tests(self):
        source = (
            "describe('suite', () => {\n"
            "  test('one', () => {})\n"
            '  it("two", () => {})\n'
            "  test.skip('three', () => {})\n"
            "  it.skip(\"four\", () => {})\n"
            "})\n"
        )
        assert TestCountExtractor().count(source) == (2, 2)

    def test_no_tests(self):
        assert TestCountExtractor().count("export const x = 1\n") == (0, 0)
