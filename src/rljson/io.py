"""Reading and writing databases as JSON or YAML documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from rljson.config import RljsonConfig
from rljson.database import Rljson

FORMATS = ("json", "yaml")


def detect_format(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return "json"


def load_file(path: str | Path) -> dict[str, Any]:
    """Read a tables document from a JSON or YAML file."""
    text = Path(path).read_text(encoding="utf-8")
    if detect_format(path) == "yaml":
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of tables in {path}, got {type(data).__name__}")
    return data


def load(
    path: str | Path,
    *,
    config: RljsonConfig | None = None,
    validate_hashes: bool | None = None,
) -> Rljson:
    """Build a database from a JSON or YAML file."""
    return Rljson.from_json(load_file(path), config=config, validate_hashes=validate_hashes)


def dumps(db: Rljson, fmt: str = "json") -> str:
    """Serialize a database to a JSON or YAML string."""
    data = db.to_json()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported format '{fmt}', expected one of {', '.join(FORMATS)}")
