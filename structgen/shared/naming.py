"""Naming utilities for code generation."""

from __future__ import annotations

import re
from functools import lru_cache

# Initialisms Go style keeps fully upper-case in exported identifiers
_GO_INITIALISMS: frozenset[str] = frozenset({
    "api",
    "id",
    "ip",
    "json",
    "sql",
    "uid",
    "url",
    "uri",
    "uuid",
})


def clean_name(value: str) -> str:
    """Strip surrounding whitespace from a catalog-reported name."""
    return value.strip()


@lru_cache(maxsize=1024)
def to_go_exported(value: str) -> str:
    """Convert a column or table name into an exported Go identifier.

    Examples:
        >>> to_go_exported("user_id")
        'UserID'
        >>> to_go_exported("created_at")
        'CreatedAt'
    """
    value = re.sub(r'([a-z])([A-Z])', r'\1_\2', value)
    parts = [part for part in re.split(r'[-_\s]+', value) if part]
    exported = "".join(
        part.upper() if part.lower() in _GO_INITIALISMS else part.capitalize()
        for part in parts
    )
    # Go identifiers cannot start with a digit
    if exported[:1].isdigit():
        exported = f"X{exported}"
    return exported
