"""Table-name rules and referential integrity checks."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from rljson.errors import BrokenLinkError, InvalidTableNameError
from rljson.naming import HASH_KEY, REF_SUFFIX, is_ref, is_reserved, ref_target
from rljson.store import Table

logger = logging.getLogger(__name__)

_ALNUM_RE = re.compile(r"[A-Za-z0-9]+")


def check_table_name(name: str, ref_suffix: str = REF_SUFFIX) -> None:
    """Raise InvalidTableNameError unless ``name`` is a valid table name.

    Rules are applied in this order and the first violation wins:
    letters and digits only, no reference suffix, no leading digit.
    """
    if not _ALNUM_RE.fullmatch(name):
        raise InvalidTableNameError(name, "charset", "Only letters and numbers are allowed.")
    if name.endswith(ref_suffix):
        raise InvalidTableNameError(
            name, "ref_suffix", f'Table names must not end with "{ref_suffix}".'
        )
    if name[0].isdigit():
        raise InvalidTableNameError(
            name, "leading_digit", "Table names must not start with a number."
        )


def check_table_names(tables: Mapping[str, Any], ref_suffix: str = REF_SUFFIX) -> None:
    """Check every non-reserved key of a tables mapping."""
    for name in tables:
        if is_reserved(name):
            continue
        check_table_name(name, ref_suffix)


def check_links(tables: Mapping[str, Table], ref_suffix: str = REF_SUFFIX) -> None:
    """Scan every row and raise BrokenLinkError on the first dangling reference."""
    checked = 0
    for table_name, table in tables.items():
        for row in table:
            for key, target_hash in row.items():
                if key == HASH_KEY or not is_ref(key, ref_suffix):
                    continue
                checked += 1
                target_name = ref_target(key, ref_suffix)
                target = tables.get(target_name)
                if target is None:
                    raise BrokenLinkError(table_name, row[HASH_KEY], key, target_name)
                if not isinstance(target_hash, str) or target_hash not in target:
                    raise BrokenLinkError(
                        table_name, row[HASH_KEY], key, target_name, str(target_hash)
                    )
    logger.debug("Checked %d link(s) across %d table(s)", checked, len(tables))
