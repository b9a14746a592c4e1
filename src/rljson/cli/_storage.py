"""CLI helpers for config and database construction."""

from __future__ import annotations

import os

from rljson import io
from rljson.config import RljsonConfig
from rljson.database import Rljson


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    return int(raw)


def config_from_env() -> RljsonConfig:
    """Build engine config from RLJSON_* environment variables."""
    config = RljsonConfig()
    hash_length = _env_int("RLJSON_HASH_LENGTH")
    if hash_length is not None:
        config.hash_length = hash_length
    config.max_link_depth = _env_int("RLJSON_MAX_LINK_DEPTH")
    validate_hashes = _env_flag("RLJSON_VALIDATE_HASHES")
    if validate_hashes is not None:
        config.validate_hashes = validate_hashes
    return config


def resolve_input() -> str | None:
    """Return the input file path from CLI state."""
    from rljson.cli import state

    return state.input


def open_database(*, validate_hashes: bool | None = None) -> Rljson:
    """Load the database named by the global --input option."""
    path = resolve_input()
    if not path:
        raise FileNotFoundError("No input file given; use --input or RLJSON_INPUT")
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")
    return io.load(path, config=config_from_env(), validate_hashes=validate_hashes)
