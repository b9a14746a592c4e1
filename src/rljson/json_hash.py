"""Deterministic content hashes over JSON trees.

Every JSON object in a tree gets a ``_hash`` field computed from its other
fields. Nested objects contribute their own hash instead of their content, so
a parent hash changes whenever a child changes. The engine only relies on the
:class:`HashProvider` protocol; :class:`JsonHash` is the default provider.
"""

from __future__ import annotations

import base64
import copy
import hashlib
import json
import math
from typing import Any, Protocol, runtime_checkable

from rljson.config import RljsonConfig
from rljson.errors import HashMismatchError, MissingHashError
from rljson.naming import HASH_KEY


@runtime_checkable
class HashProvider(Protocol):
    """Capability consumed by the engine to stamp and verify content hashes."""

    def apply(
        self,
        tree: Any,
        *,
        in_place: bool = False,
        update_existing_hashes: bool = True,
        throw_if_on_wrong_hashes: bool = True,
    ) -> Any: ...

    def validate(self, tree: Any) -> None: ...


class JsonHash:
    """SHA-256 over canonical JSON, encoded as truncated URL-safe base64."""

    def __init__(self, hash_length: int = 22, float_precision: int = 10) -> None:
        if not 1 <= hash_length <= 43:
            raise ValueError(f"hash_length must be between 1 and 43, got {hash_length}")
        self.hash_length = hash_length
        self.float_precision = float_precision

    @classmethod
    def from_config(cls, config: RljsonConfig) -> JsonHash:
        return cls(hash_length=config.hash_length, float_precision=config.float_precision)

    def calc_hash(self, text: str) -> str:
        """Hash a string."""
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        encoded = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
        return encoded[: self.hash_length]

    def apply(
        self,
        tree: Any,
        *,
        in_place: bool = False,
        update_existing_hashes: bool = True,
        throw_if_on_wrong_hashes: bool = True,
    ) -> Any:
        """Write a ``_hash`` into every object of ``tree`` and return the tree.

        Args:
            tree: JSON object or array.
            in_place: Mutate ``tree`` instead of a deep copy.
            update_existing_hashes: Recompute hashes that are already present.
                When False, an object that already has a hash is left alone,
                children included.
            throw_if_on_wrong_hashes: When recomputing, raise
                HashMismatchError instead of overwriting a wrong hash.
        """
        target = tree if in_place else copy.deepcopy(tree)
        self._apply_node(target, update_existing_hashes, throw_if_on_wrong_hashes)
        return target

    def validate(self, tree: Any) -> None:
        """Raise if any object in ``tree`` lacks a hash or carries a wrong one."""
        self._validate_node(tree)

    # --- internals ---

    def _apply_node(self, node: Any, update_existing: bool, throw: bool) -> None:
        if isinstance(node, list):
            for item in node:
                self._apply_node(item, update_existing, throw)
            return
        if not isinstance(node, dict):
            return

        existing = node.get(HASH_KEY)
        if existing is not None and not update_existing:
            return

        for key, value in node.items():
            if key != HASH_KEY:
                self._apply_node(value, update_existing, throw)

        computed = self._object_hash(node)
        if existing is not None and existing != computed and throw:
            raise HashMismatchError(expected=computed, actual=existing)
        node[HASH_KEY] = computed

    def _validate_node(self, node: Any) -> None:
        if isinstance(node, list):
            for item in node:
                self._validate_node(item)
            return
        if not isinstance(node, dict):
            return

        for key, value in node.items():
            if key != HASH_KEY:
                self._validate_node(value)

        existing = node.get(HASH_KEY)
        if existing is None:
            raise MissingHashError()
        computed = self._object_hash(node)
        if existing != computed:
            raise HashMismatchError(expected=computed, actual=existing)

    def _object_hash(self, obj: dict[str, Any]) -> str:
        # Children are hashed already; they contribute their hash only.
        canonical = {k: self._canonical(v) for k, v in obj.items() if k != HASH_KEY}
        text = json.dumps(
            canonical,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        return self.calc_hash(text)

    def _canonical(self, value: Any) -> Any:
        if isinstance(value, dict):
            return value[HASH_KEY]
        if isinstance(value, list):
            return [self._canonical(v) for v in value]
        if isinstance(value, bool) or value is None or isinstance(value, (str, int)):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"Cannot hash non-finite number {value!r}")
            return round(value, self.float_precision)
        raise TypeError(f"Cannot hash value of type {type(value).__name__}: {value!r}")
