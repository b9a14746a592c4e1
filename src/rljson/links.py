"""Value lookup and column projection across reference chains."""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from rljson.errors import (
    EmptyHashError,
    ExtraKeyError,
    KeyNotFoundError,
    LinkDepthError,
    RowNotFoundError,
    TableNotFoundError,
)
from rljson.naming import HASH_KEY, REF_SUFFIX, is_ref, ref_target, split_path
from rljson.store import Row, Table

Path = Union[str, Sequence[str]]


class LinkResolver:
    """Follows reference fields from row to row.

    A path such as ``["bRef", "cRef", "value"]`` reads ``bRef`` on the start
    row, jumps to the referenced row in table ``b``, reads ``cRef`` there and
    so on until a plain field ends the path.
    """

    def __init__(
        self,
        tables: Mapping[str, Table],
        *,
        ref_suffix: str = REF_SUFFIX,
        max_link_depth: int | None = None,
    ) -> None:
        self.tables = tables
        self.ref_suffix = ref_suffix
        self.max_link_depth = max_link_depth

    def table(self, name: str) -> Table:
        table = self.tables.get(name)
        if table is None:
            raise TableNotFoundError(name)
        return table

    def value(self, table: str, row_hash: str, path: Path | None = None) -> Any:
        """Return the value at ``path`` starting from row ``row_hash`` in ``table``.

        An empty path returns the whole row.
        """
        if not row_hash:
            raise EmptyHashError()
        row = self.table(table).row(row_hash)
        return self._resolve(table, row, split_path(path))

    def select(self, table: str, columns: Sequence[Path]) -> list[list[Any]]:
        """Project every row of ``table`` onto ``columns``.

        Each column is a link path. The result has one list per source row,
        in table order, with one entry per column in the given order. A plain
        column missing from a source row yields None.
        """
        source = self.table(table)
        column_paths = [split_path(c) for c in columns]

        grid: list[list[Any]] = []
        for row in source:
            target_row: list[Any] = []
            for segments in column_paths:
                if len(segments) == 1 and segments[0] not in row:
                    if not is_ref(segments[0], self.ref_suffix):
                        target_row.append(None)
                        continue
                target_row.append(self._resolve(table, row, segments))
            grid.append(target_row)
        return grid

    def _resolve(self, table: str, row: Row, segments: list[str]) -> Any:
        # Every hop consumes one segment, so the loop ends after len(segments).
        depth = 0
        while segments:
            key, rest = segments[0], segments[1:]
            row_hash = row.get(HASH_KEY, "")
            if key not in row:
                raise KeyNotFoundError(table, row_hash, key)
            value = row[key]

            if not is_ref(key, self.ref_suffix):
                if rest:
                    raise ExtraKeyError(key, rest[0])
                return value

            depth += 1
            if self.max_link_depth is not None and depth > self.max_link_depth:
                raise LinkDepthError(table, row_hash, self.max_link_depth)
            if not value:
                raise EmptyHashError()

            table = ref_target(key, self.ref_suffix)
            if not isinstance(value, str):
                raise RowNotFoundError(table, str(value))
            row = self.table(table).row(value)
            segments = rest
        return row
