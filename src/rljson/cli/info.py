"""rljson info — show tables, row counts and hashes."""

from __future__ import annotations

from typing import Any

import typer

from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error, print_object, print_table
from rljson.cli._storage import open_database, resolve_input
from rljson.errors import RljsonError
from rljson.naming import is_ref


def info_cmd(
    links: bool = typer.Option(False, "--links", help="Count reference fields per table"),
) -> None:
    """Show database status and high-level metadata."""
    from rljson.cli import state

    json_mode = state.json_output

    try:
        db = open_database()
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)

    tables: list[dict[str, Any]] = []
    for name in db.table_names:
        table = db.table(name)
        entry: dict[str, Any] = {"table": name, "rows": len(table), "hash": table.table_hash}
        if links:
            entry["links"] = sum(
                1
                for row in table
                for key in row
                if is_ref(key, db.config.ref_suffix)
            )
        tables.append(entry)

    data: dict[str, Any] = {
        "input": resolve_input(),
        "hash": db.data_hash,
        "table_count": len(tables),
        "row_count": sum(t["rows"] for t in tables),
        "tables": tables,
    }

    if json_mode:
        print_object(data, json_mode=True)
        return

    print(f"Input: {data['input']}")
    print(f"Hash: {data['hash']}")
    print(f"Tables: {data['table_count']}")
    print(f"Rows: {data['row_count']}")
    if tables:
        print()
        headers = list(tables[0].keys())
        print_table(headers, [[t[h] for h in headers] for t in tables])
