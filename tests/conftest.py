"""
Pytest configuration and shared fixtures for react-analyzer tests.
"""

import json
import tempfile
from pathlib import Path
from typing import Dict, Generator

import pytest

from react_analyzer.analyzer.models import Import, ParsedFile


def write_files(root: Path, files: Dict[str, str]) -> Path:
    """Write ``{relative_path: content}`` under *root* and return *root*."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def parsed(path: str, *imports: Import, line_count: int = 1) -> ParsedFile:
    """Build a ParsedFile by hand, bypassing Tree-sitter."""
    stem = path.rsplit("/", 1)[-1].rsplit(".", 1)
    return ParsedFile(
        path=path,
        name=stem[0],
        extension=stem[1] if len(stem) > 1 else "",
        line_count=line_count,
        imports=list(imports),
    )


def imp(source: str, file_path: str, *named: str, default: bool = False) -> Import:
    return Import(source=source, file_path=file_path, named=list(named), is_default=default)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after test.

    Yields:
        Path to temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def two_file_project(temp_dir: Path) -> Path:
    """``a.ts`` importing ``x`` from ``./b``."""
    return write_files(
        temp_dir,
        {
            "a.ts": "import { x } from './b'\n\nconsole.log(x)\n",
            "b.ts": "export const x = 1\n",
        },
    )


@pytest.fixture
def sample_project(temp_dir: Path) -> Path:
    """A small React project with aliases, an index file, a dead file and tests.

    Args:
        temp_dir: Temporary directory fixture

    Returns:
        Path to the project root
    """
    files = {
        "package.json": json.dumps(
            {
                "name": "sample",
                "dependencies": {"react": "^18.2.0", "lodash": "^4.17.21"},
                "devDependencies": {"jest": "^29.0.0"},
            }
        ),
        "tsconfig.json": """{
  // path aliases
  "compilerOptions": {
    "baseUrl": "src",
    "paths": {
      "@app/*": ["app/*"],
    },
  },
}
""",
        "src/index.tsx": """import React from 'react'
import { render } from 'react-dom'
import App from './App'

render(<App />, document.getElementById('root'))
""",
        "src/App.tsx": """import React from 'react'
import { Button } from './components/Button'
import { formatDate } from '@app/utils'
import debounce from 'lodash/debounce'

export default function App() {
  return <Button onClick={debounce(() => formatDate(new Date()), 100)} />
}
""",
        "src/components/Button/index.tsx": """import React from 'react'

export const Button = (props) => <button {...props} />
""",
        "src/app/utils.ts": """export function formatDate(date: Date): string {
  return date.toISOString()
}
""",
        "src/legacy.js": "module.exports = function legacy() {}\n",
        "src/App.test.tsx": """import App from './App'

test('renders', () => {})
it('works', () => {})
test.skip('later', () => {})
""",
        "node_modules/react/index.js": "module.exports = {}\n",
    }
    return write_files(temp_dir, files)
