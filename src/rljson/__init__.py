"""rljson: relational data structures over content-hashed JSON."""

__version__ = "0.1.0"

from rljson.config import RljsonConfig
from rljson.database import Rljson
from rljson.errors import (
    BrokenLinkError,
    EmptyHashError,
    ExtraKeyError,
    HashMismatchError,
    IndexOutOfRangeError,
    IntegrityError,
    InvalidArgumentError,
    InvalidTableNameError,
    KeyNotFoundError,
    LinkDepthError,
    MalformedError,
    MalformedRowError,
    MissingDataError,
    MissingHashError,
    NotFoundError,
    RljsonError,
    RowNotFoundError,
    TableNotFoundError,
    WrongDataTypeError,
)
from rljson.json_hash import HashProvider, JsonHash
from rljson.store import Table

__all__ = [
    "__version__",
    "Rljson",
    "Table",
    "RljsonConfig",
    "HashProvider",
    "JsonHash",
    "RljsonError",
    "NotFoundError",
    "TableNotFoundError",
    "RowNotFoundError",
    "KeyNotFoundError",
    "IndexOutOfRangeError",
    "MalformedError",
    "MissingDataError",
    "WrongDataTypeError",
    "MalformedRowError",
    "InvalidTableNameError",
    "IntegrityError",
    "HashMismatchError",
    "MissingHashError",
    "BrokenLinkError",
    "LinkDepthError",
    "InvalidArgumentError",
    "EmptyHashError",
    "ExtraKeyError",
]
