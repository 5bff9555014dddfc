"""UUID text helpers shared by every identifier kind.

This module is the single place that knows the textual UUID grammar, so the
value objects never have to re-implement validation or generation.
"""

from __future__ import annotations

import re
from uuid import uuid4

# 8-4-4-4-12 hexadecimal groups, as written by RFC 4122.
_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid_text(value: object) -> bool:
    """Return True if *value* is a string in hyphenated 8-4-4-4-12 form."""
    return isinstance(value, str) and _UUID_PATTERN.match(value) is not None


def canonicalize(value: str, *, accept_uppercase: bool = True) -> str | None:
    """Return the lowercase canonical form of *value*, or None if it is not UUID text.

    Uppercase hex digits are folded to lowercase when *accept_uppercase* is
    set; otherwise only the canonical lowercase form is accepted.
    """
    if not is_uuid_text(value):
        return None
    canonical = value.lower()
    if canonical != value and not accept_uppercase:
        return None
    return canonical


def new_uuid_text() -> str:
    """Generate a new random UUID v4 in canonical text form."""
    return str(uuid4())
