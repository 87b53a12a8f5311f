"""End-to-end tests for the react-analyzer command."""

import json
from pathlib import Path

from click.testing import CliRunner

from conftest import write_files
from react_analyzer import __version__
from react_analyzer.cli import cli


def run(root: Path, *args: str):
    report = root.parent / f"{root.name}-report.json"
    result = CliRunner().invoke(cli, [str(root), "-o", str(report), "--no-progress", *args])
    return result, report


def load(report: Path):
    return json.loads(report.read_text(encoding="utf-8"))


def test_two_file_project(two_file_project: Path):
    result, report = run(two_file_project)

    assert result.exit_code == 0, result.output
    data = load(report)
    nodes = data["import_graph"]["nodes"]
    edges = data["import_graph"]["edges"]
    assert [n["path"] for n in nodes] == ["a.ts", "b.ts"]
    assert edges == [{"id": 0, "source": 1, "target": 0, "is_default": False, "name": "x"}]
    assert data["dead_files"] == []
    assert data["unknown_imports"] == []
    assert data["exports"] == [
        {"source": "b.ts", "exports": [{"name": "x", "target": "a.ts", "is_default": False}]}
    ]
    assert data["summary"]["file_count"] == 2
    assert data["summary"]["import_count"] == 1


def test_sample_project(sample_project: Path):
    result, report = run(sample_project)

    assert result.exit_code == 0, result.output
    data = load(report)
    paths = [n["path"] for n in data["import_graph"]["nodes"]]
    assert "src/app/utils.ts" in paths
    assert "src/components/Button/index.tsx" in paths
    assert not any(p.startswith("node_modules") for p in paths)
    assert data["dead_files"] == ["src/legacy.js"]
    assert data["unknown_imports"] == []
    assert data["package_json"]["dependencies"] == {"react": 3, "lodash": 1, "jest": 0}
    assert data["summary"]["file_count"] == 6
    assert data["summary"]["import_count"] == 9
    assert data["config_errors"] == []

    assert "File Summary" in result.output
    assert "Test Summary" in result.output
    assert "Report written to:" in result.output


def test_no_tests_skips_test_summary(sample_project: Path):
    result, _ = run(sample_project, "--no-tests")
    assert result.exit_code == 0, result.output
    assert "Test Summary" not in result.output


def test_report_dir(sample_project: Path, tmp_path: Path):
    pages = tmp_path / "pages"
    result, _ = run(sample_project, "--report-dir", str(pages))

    assert result.exit_code == 0, result.output
    assert (pages / "src" / "App.tsx.html").is_file()
    assert (pages / "react.html").is_file()


def test_invalid_pattern_is_a_usage_error(sample_project: Path):
    result, report = run(sample_project, "--pattern", "(unclosed")
    assert result.exit_code == 2
    assert "invalid regular expression" in result.output
    assert not report.exists()


def test_missing_root_is_a_usage_error(tmp_path: Path):
    result = CliRunner().invoke(cli, [str(tmp_path / "missing")])
    assert result.exit_code == 2


def test_malformed_tsconfig_is_reported_not_fatal(temp_dir: Path):
    write_files(
        temp_dir,
        {
            "tsconfig.json": '{"compilerOptions": {"paths": []}}',
            "a.ts": "import { x } from './b'\n",
            "b.ts": "export const x = 1\n",
        },
    )
    result, report = run(temp_dir)

    assert result.exit_code == 0, result.output
    data = load(report)
    assert [e["file_path"] for e in data["config_errors"]] == ["tsconfig.json"]
    assert len(data["import_graph"]["edges"]) == 1


def test_unwritable_output_exits_with_error(two_file_project: Path, tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = CliRunner().invoke(
        cli, [str(two_file_project), "-o", str(blocker / "report.json"), "--no-progress"]
    )

    assert result.exit_code == 1
    assert "cannot write report" in result.output


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
