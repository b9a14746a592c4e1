"""rljson ls — list every field path in the database."""

from __future__ import annotations

from typing import Optional

import typer

from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error, print_object
from rljson.cli._storage import open_database
from rljson.errors import RljsonError


def ls_cmd(
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Only list this table"),
) -> None:
    """List paths as TABLE/ROW_HASH/FIELD."""
    from rljson.cli import state

    try:
        db = open_database()
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)

    if table is not None and not db.has_table(table):
        print_error(f'Table "{table}" not found.')
        raise typer.Exit(ec.NOT_FOUND)

    paths = db.ls()
    if table is not None:
        paths = [p for p in paths if p.split("/", 1)[0] == table]

    if state.json_output:
        print_object(paths, json_mode=True)
        return
    for path in paths:
        print(path)
