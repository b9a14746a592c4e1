"""Structured error types for rljson."""

from __future__ import annotations

from typing import Sequence


class RljsonError(Exception):
    """Base error for all rljson errors."""


# --- Not found ---


class NotFoundError(RljsonError):
    """Raised when a table, row, key or index does not exist."""


class TableNotFoundError(NotFoundError):
    """Raised when a table name is not present in the database."""

    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f'Table "{table}" not found.')


class RowNotFoundError(NotFoundError):
    """Raised when no row with the given hash exists in a table."""

    def __init__(self, table: str, row_hash: str) -> None:
        self.table = table
        self.row_hash = row_hash
        super().__init__(f'Row not found with hash "{row_hash}" in table "{table}".')


class KeyNotFoundError(NotFoundError):
    """Raised when a row does not carry the requested field."""

    def __init__(self, table: str, row_hash: str, key: str) -> None:
        self.table = table
        self.row_hash = row_hash
        self.key = key
        super().__init__(
            f'Key "{key}" not found in row with hash "{row_hash}" in table "{table}".'
        )


class IndexOutOfRangeError(NotFoundError):
    """Raised when a row index exceeds the table length."""

    def __init__(self, table: str, index: int) -> None:
        self.table = table
        self.index = index
        super().__init__(f'Index {index} out of range in table "{table}".')


# --- Malformed input ---


class MalformedError(RljsonError):
    """Raised when ingested data does not have the expected shape."""


class MissingDataError(MalformedError):
    """Raised when one or more tables carry no rows container."""

    def __init__(self, tables: Sequence[str]) -> None:
        self.tables = list(tables)
        super().__init__(f"_data is missing in table: {', '.join(self.tables)}")


class WrongDataTypeError(MalformedError):
    """Raised when the rows container of one or more tables is not a list."""

    def __init__(self, tables: Sequence[str]) -> None:
        self.tables = list(tables)
        super().__init__(f"_data must be a list in table: {', '.join(self.tables)}")


class MalformedRowError(MalformedError):
    """Raised when a row is not a string-keyed JSON object of JSON values."""

    def __init__(self, table: str, index: int, detail: str) -> None:
        self.table = table
        self.index = index
        self.detail = detail
        super().__init__(f'Row {index} in table "{table}" is not valid JSON: {detail}')


class InvalidTableNameError(MalformedError):
    """Raised when a table name violates one of the naming rules."""

    def __init__(self, table: str, rule: str, reason: str) -> None:
        self.table = table
        self.rule = rule
        super().__init__(f"Invalid table name: {table}. {reason}")


# --- Integrity ---


class IntegrityError(RljsonError):
    """Raised when hashes or links are inconsistent."""


class HashMismatchError(IntegrityError):
    """Raised when an embedded hash differs from the recomputed one."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'Hash "{actual}" is wrong. Should be "{expected}".')


class MissingHashError(IntegrityError):
    """Raised by hash validation when an object carries no hash."""

    def __init__(self) -> None:
        super().__init__("Hash is missing.")


class BrokenLinkError(IntegrityError):
    """Raised when a reference field points to a missing table or row."""

    def __init__(
        self,
        table: str,
        row_hash: str,
        ref_key: str,
        target_table: str,
        target_hash: str | None = None,
    ) -> None:
        self.table = table
        self.row_hash = row_hash
        self.ref_key = ref_key
        self.target_table = target_table
        self.target_hash = target_hash
        if target_hash is None:
            message = (
                f'Table "{table}" has a row "{row_hash}" which links to '
                f'not existing table "{ref_key}".'
            )
        else:
            message = (
                f'Table "{table}" has a row "{row_hash}" which links to '
                f'not existing row "{target_hash}" in table "{target_table}".'
            )
        super().__init__(message)


class LinkDepthError(IntegrityError):
    """Raised when a link path follows more references than allowed."""

    def __init__(self, table: str, row_hash: str, limit: int) -> None:
        self.table = table
        self.row_hash = row_hash
        self.limit = limit
        super().__init__(
            f'Link path exceeds max_link_depth of {limit} at row "{row_hash}" '
            f'in table "{table}".'
        )


# --- Invalid arguments ---


class InvalidArgumentError(RljsonError):
    """Raised when a caller passes an unusable argument."""


class EmptyHashError(InvalidArgumentError):
    """Raised when an empty row hash is passed to a lookup."""

    def __init__(self) -> None:
        super().__init__("row_hash must not be empty.")


class ExtraKeyError(InvalidArgumentError):
    """Raised when a link path continues after a plain value."""

    def __init__(self, key: str, extra_key: str) -> None:
        self.key = key
        self.extra_key = extra_key
        super().__init__(
            f'Invalid key "{extra_key}". Additional keys are only allowed for links. '
            f'But key "{key}" points to a value.'
        )
