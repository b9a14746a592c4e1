"""rljson example — write one of the bundled example databases."""

from __future__ import annotations

from typing import Optional

import typer

from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error
from rljson.cli.export_cmd import write_output
from rljson.database import Rljson

EXAMPLES = {
    "basic": Rljson.example,
    "link": Rljson.example_with_link,
    "deep-link": Rljson.example_with_deep_link,
}


def example_cmd(
    kind: str = typer.Option("basic", "--kind", help="basic, link or deep-link"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    fmt: str = typer.Option("json", "--format", help="Output format: json or yaml"),
) -> None:
    """Write an example database."""
    factory = EXAMPLES.get(kind)
    if factory is None:
        print_error(f"--kind must be one of: {', '.join(EXAMPLES)}")
        raise typer.Exit(ec.USAGE_ERROR)
    write_output(factory(), output, fmt)
