"""rljson merge — merge table files into the input database."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from rljson import io
from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error
from rljson.cli._storage import config_from_env, open_database, resolve_input
from rljson.cli.export_cmd import write_output
from rljson.database import Rljson
from rljson.errors import IntegrityError, RljsonError

logger = logging.getLogger(__name__)


def merge_cmd(
    files: list[str] = typer.Argument(..., help="JSON or YAML files with tables to merge"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    fmt: str = typer.Option("json", "--format", help="Output format: json or yaml"),
    validate_hashes: bool = typer.Option(
        False, "--validate-hashes", help="Reject files whose stored hashes are wrong"
    ),
    check_links: bool = typer.Option(
        False, "--check-links", help="Fail when the merged result has broken links"
    ),
) -> None:
    """Merge FILES in order; rows already present are skipped.

    Starts from --input when given, otherwise from an empty database.
    """
    try:
        db = open_database() if resolve_input() else Rljson.empty(config=config_from_env())
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)

    for path in files:
        try:
            tables = io.load_file(path)
            before = sum(len(db.table(t)) for t in db.table_names)
            db = db.add_data(tables, validate_hashes=validate_hashes or None)
            after = sum(len(db.table(t)) for t in db.table_names)
            logger.info("Merged %s: %d new row(s)", path, after - before)
        except (OSError, ValueError) as e:
            print_error(f"Cannot read {path}: {e}")
            raise typer.Exit(ec.INPUT_ERROR)
        except RljsonError as e:
            print_error(f"Cannot merge {path}: {e}")
            code = ec.INTEGRITY_ERROR if isinstance(e, IntegrityError) else ec.INPUT_ERROR
            raise typer.Exit(code)

    if check_links:
        try:
            db.check_links()
        except IntegrityError as e:
            print_error(str(e))
            raise typer.Exit(ec.INTEGRITY_ERROR)

    write_output(db, output, fmt)
