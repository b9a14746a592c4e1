"""Shared fixtures for CLI tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from rljson import Rljson, io
from rljson.cli import app

if TYPE_CHECKING:
    from click.testing import Result


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_file(tmp_path):
    """Write the basic example database to a temp JSON file."""
    path = tmp_path / "db.json"
    path.write_text(io.dumps(Rljson.example(), "json"))
    return str(path)


@pytest.fixture
def deep_file(tmp_path):
    """Write the a -> b -> c -> d example database to a temp JSON file."""
    path = tmp_path / "deep.json"
    path.write_text(io.dumps(Rljson.example_with_deep_link(), "json"))
    return str(path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("RLJSON_INPUT", "RLJSON_MAX_LINK_DEPTH", "RLJSON_VALIDATE_HASHES"):
        monkeypatch.delenv(name, raising=False)


def invoke(runner: CliRunner, args: list[str], input_path: str | None = None) -> "Result":
    """Invoke CLI with the input file injected before the subcommand."""
    if input_path:
        args = ["--input", input_path] + args
    return runner.invoke(app, args, catch_exceptions=False)
