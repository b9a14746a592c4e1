"""Configuration for the rljson engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RljsonConfig:
    """Configuration for hashing, naming and link resolution."""

    hash_length: int = 22
    float_precision: int = 10
    ref_suffix: str = "Ref"
    max_link_depth: int | None = None
    validate_hashes: bool = False
    update_hashes: bool = True
