"""Table storage: ordered rows plus a hash index over the same row objects."""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping

from rljson.errors import IndexOutOfRangeError, RowNotFoundError
from rljson.naming import DATA_KEY, HASH_KEY

Row = dict[str, Any]


class Table:
    """One named table.

    ``rows`` keeps insertion order and backs index based access; ``indexed``
    maps each row hash to the same row object and backs existence checks.
    Both views are built together and never change afterwards: merging
    produces a new Table. The row dicts themselves are shared with every
    table derived by merging and are handed out without copying.
    """

    __slots__ = ("name", "table_hash", "_rows", "_indexed")

    def __init__(
        self,
        name: str,
        rows: tuple[Row, ...] = (),
        indexed: dict[str, Row] | None = None,
        table_hash: str | None = None,
    ) -> None:
        self.name = name
        self.table_hash = table_hash
        self._rows = rows
        self._indexed = indexed if indexed is not None else {r[HASH_KEY]: r for r in rows}

    @classmethod
    def from_rows(cls, name: str, rows: Iterable[Row], table_hash: str | None = None) -> Table:
        """Build a table from hashed rows; later rows sharing a hash are dropped."""
        ordered: list[Row] = []
        indexed: dict[str, Row] = {}
        for row in rows:
            row_hash = row[HASH_KEY]
            if row_hash in indexed:
                continue
            ordered.append(row)
            indexed[row_hash] = row
        return cls(name, tuple(ordered), indexed, table_hash)

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def indexed(self) -> Mapping[str, Row]:
        return MappingProxyType(self._indexed)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __contains__(self, row_hash: object) -> bool:
        return row_hash in self._indexed

    def __repr__(self) -> str:
        return f"Table(name={self.name!r}, rows={len(self._rows)}, hash={self.table_hash!r})"

    def get(self, row_hash: str) -> Row | None:
        return self._indexed.get(row_hash)

    def row(self, row_hash: str) -> Row:
        """Return the row with ``row_hash`` or raise RowNotFoundError."""
        row = self._indexed.get(row_hash) if isinstance(row_hash, str) else None
        if row is None:
            raise RowNotFoundError(self.name, row_hash)
        return row

    def hash_at(self, index: int) -> str:
        """Return the hash of the row at ``index`` in insertion order."""
        if index < 0 or index >= len(self._rows):
            raise IndexOutOfRangeError(self.name, index)
        return self._rows[index][HASH_KEY]

    def where(self, predicate: Callable[[Row], bool]) -> list[Row]:
        return [row for row in self._rows if predicate(row)]

    def merged(self, rows: Iterable[Row]) -> tuple[Table, int]:
        """Return a new table with every row whose hash is new appended.

        Rows whose hash already exists are dropped; the first occurrence wins.
        Returns the table and the number of rows added.
        """
        ordered = list(self._rows)
        indexed = dict(self._indexed)
        added = 0
        for row in rows:
            row_hash = row[HASH_KEY]
            if row_hash in indexed:
                continue
            ordered.append(row)
            indexed[row_hash] = row
            added += 1
        return Table(self.name, tuple(ordered), indexed), added

    def to_json(self) -> dict[str, Any]:
        """Return the ``{"_data": [...], "_hash": ...}`` form with copied rows."""
        result: dict[str, Any] = {DATA_KEY: [copy.deepcopy(r) for r in self._rows]}
        if self.table_hash is not None:
            result[HASH_KEY] = self.table_hash
        return result
