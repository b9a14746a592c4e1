"""rljson CLI: inspect, query, verify and merge relational JSON files."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from rljson.cli import example_cmd, export_cmd, info, ls, merge_cmd, query, verify

app = typer.Typer(
    name="rljson",
    help="rljson CLI — inspect, query, verify and merge relational JSON files.",
    no_args_is_help=True,
)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class _State:
    """Global CLI state shared across subcommands."""

    input: str | None = None
    json_output: bool = False
    log_level: str = "WARNING"


state = _State()


def _version_callback(value: bool) -> None:
    if value:
        try:
            from importlib.metadata import version

            v = version("rljson")
        except Exception:
            v = "unknown"
        print(f"rljson {v}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    input_path: Optional[str] = typer.Option(
        None,
        "--input",
        "-i",
        envvar="RLJSON_INPUT",
        help="Database file (JSON, or YAML by .yaml/.yml extension)",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output when supported"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="RLJSON_LOG_LEVEL", help="Logging level"
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Global options for all rljson commands."""
    level = log_level.upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(f"--log-level must be one of {', '.join(_LOG_LEVELS)}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    state.input = input_path
    state.json_output = json_output
    state.log_level = level
    if ctx.invoked_subcommand is None and not version:
        print(ctx.get_help())
        raise typer.Exit()


# Register subcommand groups
app.add_typer(query.app, name="query", help="Read rows and values, follow links, join tables")

# Register top-level commands
app.command(name="ls")(ls.ls_cmd)
app.command(name="info")(info.info_cmd)
app.command(name="verify")(verify.verify_cmd)
app.command(name="merge")(merge_cmd.merge_cmd)
app.command(name="export")(export_cmd.export_cmd)
app.command(name="example")(example_cmd.example_cmd)


def main() -> None:
    """Entry point for the rljson CLI."""
    app()
