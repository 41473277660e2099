"""Identifier Parsing — text ids from paths and comma lists into integers.

Invariants:
    - Only plain decimal digits are accepted (no sign, no whitespace inside)
    - Ids above MAX_ID are rejected: they fit no integer key column
    - Failure raises InvalidIdentifierError before any database call
    - parse_id_list preserves first-seen order and drops duplicates

Design Decisions:
    - Pure functions, no IO: routes call them before touching the session
"""

import re

from blogcart.core.domain_types import MAX_ID
from blogcart.core.errors import InvalidIdentifierError

_DIGITS = re.compile(r"^\d+$")


def parse_id(raw: str, field: str = "id") -> int:
    """Parse one path segment into an integer id."""
    value = (raw or "").strip()
    if not _DIGITS.match(value) or int(value) > MAX_ID:
        raise InvalidIdentifierError(raw, field)
    return int(value)


def parse_id_list(raw: str, field: str = "ids") -> list[int]:
    """Parse a comma-joined id list ("1,2,99") into unique integer ids."""
    if not (raw or "").strip():
        raise InvalidIdentifierError(raw, field)
    ids: list[int] = []
    for segment in raw.split(","):
        value = parse_id(segment, field)
        if value not in ids:
            ids.append(value)
    return ids
