"""Ingestion and dedup merge of row batches into tables."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import JsonValue, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from rljson.errors import MalformedRowError, MissingDataError, WrongDataTypeError
from rljson.json_hash import HashProvider
from rljson.naming import DATA_KEY, HASH_KEY, REF_SUFFIX, is_reserved
from rljson.store import Table
from rljson.validate import check_table_names

logger = logging.getLogger(__name__)

_ROWS_ADAPTER: TypeAdapter[list[dict[str, JsonValue]]] = TypeAdapter(list[dict[str, JsonValue]])


def check_data(tables: Mapping[str, Any]) -> None:
    """Check that every table carries a ``_data`` list.

    All offending tables are collected before raising. A table without
    ``_data`` is only reported as missing, never also as wrongly typed.
    """
    missing: list[str] = []
    wrong_type: list[str] = []

    for name, table in tables.items():
        if is_reserved(name):
            continue
        rows = table.get(DATA_KEY) if isinstance(table, Mapping) else None
        if rows is None:
            missing.append(name)
        elif not isinstance(rows, list):
            wrong_type.append(name)

    if missing:
        raise MissingDataError(missing)
    if wrong_type:
        raise WrongDataTypeError(wrong_type)


def check_rows(tables: Mapping[str, Any]) -> None:
    """Check that every row is a JSON object with string keys and JSON values.

    Values a YAML loader produces beyond JSON, such as dates, are rejected here
    rather than failing later in the hash provider.
    """
    for name, table in tables.items():
        if is_reserved(name):
            continue
        try:
            _ROWS_ADAPTER.validate_python(table[DATA_KEY], strict=True)
        except PydanticValidationError as e:
            first = e.errors()[0]
            index = first["loc"][0] if first["loc"] else 0
            raise MalformedRowError(name, int(index), first["msg"]) from None


class MergeEngine:
    """Stamps incoming batches with hashes and merges them into tables."""

    def __init__(self, json_hash: HashProvider, ref_suffix: str = REF_SUFFIX) -> None:
        self.json_hash = json_hash
        self.ref_suffix = ref_suffix

    def prepare(
        self,
        added: Mapping[str, Any],
        *,
        validate_hashes: bool = False,
        update_hashes: bool = True,
    ) -> dict[str, list[dict[str, Any]]]:
        """Check a batch and return its rows per table with hashes assigned.

        Nothing is merged when a check fails. The caller's batch is never
        modified; hashes are written into copies.
        """
        check_data(added)
        check_rows(added)
        check_table_names(added, self.ref_suffix)

        if validate_hashes:
            self.json_hash.validate(added)

        batch = {
            name: {DATA_KEY: table[DATA_KEY]}
            for name, table in added.items()
            if not is_reserved(name)
        }
        stamped = self.json_hash.apply(
            batch,
            in_place=False,
            update_existing_hashes=update_hashes,
            throw_if_on_wrong_hashes=validate_hashes,
        )
        return {
            name: table[DATA_KEY] for name, table in stamped.items() if not is_reserved(name)
        }

    def merge(
        self,
        tables: Mapping[str, Table],
        added: Mapping[str, Any],
        *,
        validate_hashes: bool = False,
        update_hashes: bool = True,
    ) -> tuple[dict[str, Table], str]:
        """Merge a batch into ``tables``.

        Returns the new table mapping and the new aggregate hash. ``tables``
        and the Table objects in it are left untouched.
        """
        incoming = self.prepare(
            added, validate_hashes=validate_hashes, update_hashes=update_hashes
        )

        merged: dict[str, Table] = dict(tables)
        for name, rows in incoming.items():
            existing = merged.get(name)
            if existing is None:
                merged[name] = Table.from_rows(name, rows)
                logger.debug("Created table %s with %d row(s)", name, len(merged[name]))
                continue

            table, added_count = existing.merged(rows)
            merged[name] = table
            logger.debug(
                "Merged table %s: %d row(s) added, %d duplicate(s) dropped",
                name,
                added_count,
                len(rows) - added_count,
            )

        return self.rehash(merged)

    def rehash(self, tables: Mapping[str, Table]) -> tuple[dict[str, Table], str]:
        """Recompute table hashes that are unset and the aggregate hash.

        Row hashes and hashes of untouched tables are kept as they are.
        """
        tree: dict[str, Any] = {}
        for name, table in tables.items():
            node: dict[str, Any] = {DATA_KEY: list(table.rows)}
            if table.table_hash is not None:
                node[HASH_KEY] = table.table_hash
            tree[name] = node

        self.json_hash.apply(
            tree,
            in_place=True,
            update_existing_hashes=False,
            throw_if_on_wrong_hashes=False,
        )

        result: dict[str, Table] = {}
        for name, table in tables.items():
            table_hash = tree[name][HASH_KEY]
            if table.table_hash == table_hash:
                result[name] = table
            else:
                result[name] = Table(name, table.rows, dict(table.indexed), table_hash)
        return result, tree[HASH_KEY]
