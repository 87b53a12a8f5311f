"""Write the JSON report and the optional per-file HTML pages."""

import html
import json
import logging
from pathlib import Path
from string import Template
from typing import List, Optional

from react_analyzer.report.exports import FileExports
from react_analyzer.report.summary import Output
from react_analyzer.utils.paths import normalize_path

logger = logging.getLogger(__name__)

_TEMPLATE_PATH = Path(__file__).with_name("file.html")


def write_output(output: Output, output_path: Path, indent: Optional[int] = None) -> None:
    """Serialize *output* as JSON to *output_path*, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output.to_dict(), f, indent=indent)
    logger.debug("Report written to %s", output_path)


def _render_rows(entry: FileExports) -> str:
    rows = []
    for binding in entry.exports:
        if binding.is_default:
            name = '<span class="default">default</span>'
        else:
            name = html.escape(binding.name)
        rows.append(f'<tr><td class="name">{name}</td><td>{html.escape(binding.target)}</td></tr>')
    return "\n".join(rows)


def render_file_report(entry: FileExports) -> str:
    """Render the HTML page listing what *entry* provides and to whom."""
    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    return template.safe_substitute(
        file_name=html.escape(entry.source),
        export_count=len(entry.exports),
        importer_count=len({b.target for b in entry.exports}),
        rows=_render_rows(entry),
    )


def report_page_path(directory: Path, source: str) -> Optional[Path]:
    """Location of the page for *source* under *directory*.

    ``..`` components are folded lexically and cannot climb above *directory*.
    Returns None when nothing is left of *source*.
    """
    relative = normalize_path(source).lstrip("/")
    if not relative:
        return None
    return directory / f"{relative}.html"


def write_file_reports(output: Output, directory: Path) -> List[Path]:
    """
    Write one ``<source>.html`` page per imported module under *directory*.

    Sources are normalized first so every page lands inside *directory*.

    Returns:
        Paths of the written pages
    """
    written = []
    for entry in output.exports:
        page_path = report_page_path(directory, entry.source)
        if page_path is None:
            logger.warning(f"Not writing a report page for {entry.source!r}: empty path")
            continue
        page_path.parent.mkdir(parents=True, exist_ok=True)
        page_path.write_text(render_file_report(entry), encoding="utf-8")
        written.append(page_path)
    logger.debug("Wrote %d file report(s) to %s", len(written), directory)
    return written
