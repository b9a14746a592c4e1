"""rljson export — write the hashed database as JSON or YAML."""

from __future__ import annotations

from typing import Optional

import typer

from rljson import io
from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error
from rljson.cli._storage import open_database
from rljson.database import Rljson
from rljson.errors import RljsonError


def write_output(db: Rljson, output: str | None, fmt: str) -> None:
    """Dump ``db`` to ``output`` or stdout."""
    if fmt not in io.FORMATS:
        print_error(f"--format must be one of: {', '.join(io.FORMATS)}")
        raise typer.Exit(ec.USAGE_ERROR)
    text = io.dumps(db, fmt)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {len(db)} table(s) to {output}")
    else:
        print(text, end="")


def export_cmd(
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    fmt: str = typer.Option("json", "--format", help="Output format: json or yaml"),
    table: Optional[list[str]] = typer.Option(
        None, "--table", "-t", help="Export only these tables"
    ),
) -> None:
    """Export the database with all hashes filled in."""
    try:
        db = open_database()
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)

    if table:
        missing = [t for t in table if not db.has_table(t)]
        if missing:
            print_error(f"Table(s) not found: {', '.join(missing)}")
            raise typer.Exit(ec.NOT_FOUND)
        subset = {t: db.table(t).to_json() for t in table}
        db = Rljson.from_json(subset, config=db.config, json_hash=db.json_hash)

    write_output(db, output, fmt)
