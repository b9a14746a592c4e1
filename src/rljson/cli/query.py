"""rljson query — read rows and values, follow links and join tables."""

from __future__ import annotations

from typing import Optional

import typer

from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error, print_object, print_table
from rljson.cli._storage import open_database
from rljson.database import Rljson
from rljson.errors import InvalidArgumentError, NotFoundError, RljsonError

app = typer.Typer(no_args_is_help=True)


def _open() -> Rljson:
    try:
        return open_database()
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)


def _fail(e: RljsonError) -> typer.Exit:
    print_error(str(e))
    if isinstance(e, NotFoundError):
        return typer.Exit(ec.NOT_FOUND)
    if isinstance(e, InvalidArgumentError):
        return typer.Exit(ec.USAGE_ERROR)
    return typer.Exit(ec.GENERAL_ERROR)


@app.command(name="row")
def query_row_cmd(
    table: str = typer.Argument(..., help="Table name"),
    row_hash: str = typer.Argument(..., help="Row hash"),
) -> None:
    """Print the row with ROW_HASH in TABLE."""
    from rljson.cli import state

    db = _open()
    try:
        row = db.row(table, row_hash)
    except RljsonError as e:
        raise _fail(e)
    print_object(row, json_mode=state.json_output)


@app.command(name="hash")
def query_hash_cmd(
    table: str = typer.Argument(..., help="Table name"),
    index: int = typer.Argument(..., help="Row index in insertion order"),
) -> None:
    """Print the hash of the row at INDEX in TABLE."""
    from rljson.cli import state

    db = _open()
    try:
        row_hash = db.hash(table, index)
    except RljsonError as e:
        raise _fail(e)
    print_object(row_hash, json_mode=state.json_output)


@app.command(name="value")
def query_value_cmd(
    table: str = typer.Argument(..., help="Table name"),
    row_hash: str = typer.Argument(..., help="Row hash"),
    path: Optional[list[str]] = typer.Argument(
        None, help="Keys to follow, e.g. bRef cRef value (or bRef/cRef/value)"
    ),
) -> None:
    """Print a value, following reference fields along PATH."""
    from rljson.cli import state

    segments: list[str] = []
    for part in path or []:
        segments.extend(s for s in part.split("/") if s)

    db = _open()
    try:
        value = db.value(table, row_hash, segments)
    except RljsonError as e:
        raise _fail(e)
    print_object(value, json_mode=state.json_output)


@app.command(name="select")
def query_select_cmd(
    table: str = typer.Argument(..., help="Table name"),
    columns: list[str] = typer.Argument(..., help="Column paths, e.g. value bRef/value"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Max rows to print"),
) -> None:
    """Join columns from linked tables into one grid."""
    from rljson.cli import state

    db = _open()
    try:
        grid = db.select(table, columns)
    except RljsonError as e:
        raise _fail(e)

    if limit is not None:
        grid = grid[:limit]

    if not grid and not state.json_output:
        print("(no rows)")
        return
    print_table(columns, grid, json_mode=state.json_output)
