"""rljson verify — check table names, links and hashes."""

from __future__ import annotations

from typing import Any

import typer

from rljson.cli import _exitcodes as ec
from rljson.cli._output import print_error, print_object
from rljson.cli._storage import open_database
from rljson.database import Rljson
from rljson.errors import IntegrityError, MalformedError, RljsonError


def verify_cmd(
    hashes: bool = typer.Option(
        False, "--hashes", help="Also verify every hash stored in the input file"
    ),
    strict: bool = typer.Option(False, "--strict", help="Non-zero exit on any problem"),
) -> None:
    """Verify table names, references and (optionally) stored hashes."""
    from rljson.cli import state

    json_mode = state.json_output
    problems: list[dict[str, Any]] = []
    db: Rljson | None

    try:
        db = open_database(validate_hashes=True if hashes else None)
    except (IntegrityError, MalformedError) as e:
        problems.append({"check": "load", "error": str(e)})
        db = None
    except (OSError, ValueError, RljsonError) as e:
        print_error(f"Cannot load database: {e}")
        raise typer.Exit(ec.INPUT_ERROR)

    if db is not None:
        try:
            db.check_links()
        except IntegrityError as e:
            problems.append({"check": "links", "error": str(e)})

    if json_mode:
        print_object(
            {"status": "problems" if problems else "ok", "problems": problems}, json_mode=True
        )
    elif problems:
        print(f"Verification failed — {len(problems)} problem(s):")
        for p in problems:
            print(f"  [{p['check']}] {p['error']}")
    else:
        print("OK — table names, links" + (" and hashes" if hashes else "") + " are valid.")

    if problems and strict:
        raise typer.Exit(ec.INTEGRITY_ERROR)
