"""The Rljson database: named tables of content-hashed rows."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from rljson.config import RljsonConfig
from rljson.errors import TableNotFoundError
from rljson.json_hash import HashProvider, JsonHash
from rljson.links import LinkResolver, Path
from rljson.merge import MergeEngine
from rljson.naming import DATA_KEY, HASH_KEY, REF_SUFFIX
from rljson.store import Row, Table
from rljson.validate import check_links, check_table_name, check_table_names

logger = logging.getLogger(__name__)


class Rljson:
    """Immutable snapshot of a relational JSON database.

    Tables hold flat JSON rows, each carrying a ``_hash`` of its content.
    Fields ending with ``Ref`` hold the hash of a row in another table
    (``tableARef`` points into ``tableA``). Adding data returns a new
    snapshot and leaves existing snapshots as they are.

    Row dicts are shared between a snapshot and the snapshots derived from
    it. Accessors return those shared dicts without copying; treat them as
    read-only, or copy before editing and add the copy with ``add_row``.

    Example:
        >>> db = Rljson.from_json({"tableA": {"_data": [{"keyA0": "a0"}]}})
        >>> h = db.hash("tableA", 0)
        >>> db.value("tableA", h, ["keyA0"])
        'a0'
    """

    def __init__(
        self,
        tables: Mapping[str, Table] | None = None,
        *,
        data_hash: str | None = None,
        config: RljsonConfig | None = None,
        json_hash: HashProvider | None = None,
    ) -> None:
        self.config = config or RljsonConfig()
        self.json_hash = json_hash or JsonHash.from_config(self.config)
        self._tables: dict[str, Table] = dict(tables or {})
        self._engine = MergeEngine(self.json_hash, self.config.ref_suffix)
        if data_hash is None:
            self._tables, data_hash = self._engine.rehash(self._tables)
        self._data_hash = data_hash
        self._resolver = LinkResolver(
            self._tables,
            ref_suffix=self.config.ref_suffix,
            max_link_depth=self.config.max_link_depth,
        )

    # --- construction ---

    @classmethod
    def empty(
        cls,
        *,
        config: RljsonConfig | None = None,
        json_hash: HashProvider | None = None,
    ) -> Rljson:
        return cls(config=config, json_hash=json_hash)

    @classmethod
    def from_json(
        cls,
        data: Mapping[str, Any],
        *,
        validate_hashes: bool | None = None,
        update_hashes: bool | None = None,
        config: RljsonConfig | None = None,
        json_hash: HashProvider | None = None,
    ) -> Rljson:
        """Build a database from ``{"table": {"_data": [row, ...]}, ...}``."""
        return cls.empty(config=config, json_hash=json_hash).add_data(
            data, validate_hashes=validate_hashes, update_hashes=update_hashes
        )

    def _derive(self, tables: Mapping[str, Table], data_hash: str) -> Rljson:
        return Rljson(tables, data_hash=data_hash, config=self.config, json_hash=self.json_hash)

    # --- merging ---

    def add_data(
        self,
        tables: Mapping[str, Any],
        *,
        validate_hashes: bool | None = None,
        update_hashes: bool | None = None,
    ) -> Rljson:
        """Return a new database with ``tables`` merged in.

        Unknown tables are adopted as given. For known tables, rows whose hash
        is already present are dropped and the others appended in order.

        Args:
            tables: Mapping of table name to ``{"_data": [row, ...]}``.
            validate_hashes: Verify every hash in ``tables`` before merging.
            update_hashes: Recompute hashes already present on incoming rows.

        Raises:
            MissingDataError, WrongDataTypeError: listing every offending table.
            MalformedRowError: a row is not a JSON object of JSON values.
            InvalidTableNameError: a table name breaks the naming rules.
            MissingHashError, HashMismatchError: hash validation failed.
        """
        if validate_hashes is None:
            validate_hashes = self.config.validate_hashes
        if update_hashes is None:
            update_hashes = self.config.update_hashes

        merged, data_hash = self._engine.merge(
            self._tables,
            tables,
            validate_hashes=validate_hashes,
            update_hashes=update_hashes,
        )
        logger.debug("add_data: %d table(s), aggregate hash %s", len(merged), data_hash)
        return self._derive(merged, data_hash)

    def create_table(self, name: str) -> Rljson:
        """Return a new database that has an (empty) table ``name``."""
        return self.add_data({name: {DATA_KEY: []}})

    def add_row(self, table: str, row: Row) -> Rljson:
        """Return a new database with ``row`` appended to an existing ``table``.

        The row hash is recomputed from its content. A row whose hash already
        exists leaves the table as it is.
        """
        self.table(table)
        return self.add_data(
            {table: {DATA_KEY: [row]}}, validate_hashes=False, update_hashes=True
        )

    # --- accessors ---

    @property
    def data_hash(self) -> str:
        """Aggregate hash over all tables."""
        return self._data_hash

    @property
    def table_names(self) -> list[str]:
        return list(self._tables)

    def __contains__(self, table: object) -> bool:
        return table in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"Rljson(tables={self.table_names!r}, hash={self._data_hash!r})"

    def has_table(self, table: str) -> bool:
        return table in self._tables

    def table(self, table: str) -> Table:
        """Return the table named ``table``."""
        found = self._tables.get(table)
        if found is None:
            raise TableNotFoundError(table)
        return found

    def table_indexed(self, table: str) -> Mapping[str, Row]:
        """Return the hash to row mapping of ``table``."""
        return self.table(table).indexed

    def row(self, table: str, row_hash: str) -> Row:
        """Return the stored row. The dict is shared and must not be modified."""
        return self.table(table).row(row_hash)

    def items(self, table: str, where: Callable[[Row], bool]) -> list[Row]:
        """Return the rows of ``table`` for which ``where`` is true."""
        return self.table(table).where(where)

    def hash(self, table: str, index: int) -> str:
        """Return the hash of the row at ``index`` in insertion order."""
        return self.table(table).hash_at(index)

    def ls(self) -> list[str]:
        """Return ``table/rowHash/field`` for every field except ``_hash``.

        Reference fields are listed like any other field; their targets are
        not expanded.
        """
        result: list[str] = []
        for name, table in self._tables.items():
            for row_hash, row in table.indexed.items():
                for key in row:
                    if key == HASH_KEY:
                        continue
                    result.append(f"{name}/{row_hash}/{key}")
        return result

    # --- links ---

    def value(self, table: str, row_hash: str, path: Path | None = None) -> Any:
        """Return the value at ``path``, following reference fields.

        See LinkResolver.value.
        """
        return self._resolver.value(table, row_hash, path)

    def select(self, table: str, columns: Sequence[Path]) -> list[list[Any]]:
        """Join values from linked tables into a grid. See LinkResolver.select."""
        return self._resolver.select(table, columns)

    # --- validation ---

    def check_links(self) -> None:
        """Raise BrokenLinkError on the first reference to a missing table or row."""
        check_links(self._tables, self.config.ref_suffix)

    @staticmethod
    def check_table_names(tables: Mapping[str, Any], ref_suffix: str = REF_SUFFIX) -> None:
        check_table_names(tables, ref_suffix)

    @staticmethod
    def check_table_name(name: str, ref_suffix: str = REF_SUFFIX) -> None:
        check_table_name(name, ref_suffix)

    def validate_hashes(self) -> None:
        """Recompute every hash in the database and raise on a mismatch."""
        self.json_hash.validate(self.to_json())

    # --- serialization ---

    def to_json(self) -> dict[str, Any]:
        """Return the database as ``{"table": {"_data": [...], "_hash": ...}, "_hash": ...}``."""
        result: dict[str, Any] = {name: table.to_json() for name, table in self._tables.items()}
        result[HASH_KEY] = self._data_hash
        return result

    # --- examples ---

    @classmethod
    def example(cls) -> Rljson:
        """Two tables with two unrelated rows each."""
        return cls.from_json(
            {
                "tableA": {DATA_KEY: [{"keyA0": "a0"}, {"keyA1": "a1"}]},
                "tableB": {DATA_KEY: [{"keyB0": "b0"}, {"keyB1": "b1"}]},
            }
        )

    @classmethod
    def example_with_link(cls) -> Rljson:
        """``tableA`` plus a table whose single row links to the first row of ``tableA``."""
        db = cls.from_json({"tableA": {DATA_KEY: [{"keyA0": "a0"}, {"keyA1": "a1"}]}})
        return db.add_data(
            {"linkToTableA": {DATA_KEY: [{"tableARef": db.hash("tableA", 0)}]}}
        )

    @classmethod
    def example_with_deep_link(cls) -> Rljson:
        """Tables ``a -> b -> c -> d`` chained by reference fields."""
        db = cls.from_json(
            {"d": {DATA_KEY: [{"value": "d", "details": "details about d"}]}}
        )
        db = db.add_data({"c": {DATA_KEY: [{"dRef": db.hash("d", 0), "value": "c"}]}})
        db = db.add_data({"b": {DATA_KEY: [{"cRef": db.hash("c", 0), "value": "b"}]}})
        hash_b = db.hash("b", 0)
        db = db.add_data(
            {
                "a": {
                    DATA_KEY: [
                        {"bRef": hash_b, "value": "a"},
                        {"bRef": hash_b, "value": "a0"},
                    ]
                }
            }
        )
        db.validate_hashes()
        return db
