from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def markdown_file(tmp_path: Path):
    """Writes dedented Markdown into a file under `tmp_path` and returns its path."""

    def _write(content: str, filename: str = "doc.md") -> Path:
        path = tmp_path / filename
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
