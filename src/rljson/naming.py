"""Reserved keys and the reference-field naming convention."""

from __future__ import annotations

HASH_KEY = "_hash"
DATA_KEY = "_data"
REF_SUFFIX = "Ref"


def is_reserved(key: str) -> bool:
    """Keys starting with an underscore belong to rljson, not to user data."""
    return key.startswith("_")


def is_ref(key: str, ref_suffix: str = REF_SUFFIX) -> bool:
    """Return True when ``key`` names a reference field (``tableARef``)."""
    return key.endswith(ref_suffix) and key != ref_suffix


def ref_target(key: str, ref_suffix: str = REF_SUFFIX) -> str:
    """Return the table a reference field points to (``tableARef`` -> ``tableA``)."""
    return key[: -len(ref_suffix)]


def split_path(path: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Normalize a link path given as ``"aRef/bRef/value"`` or a sequence of keys."""
    if path is None:
        return []
    if isinstance(path, str):
        return [segment for segment in path.split("/") if segment]
    return list(path)
