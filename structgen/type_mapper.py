"""Mapping from PostgreSQL catalog type names to Go types."""

from __future__ import annotations

from typing import Final

# Type mappings from information_schema data_type values to Go types
DEFAULT_GO_TYPES: Final[dict[str, str]] = {
    "integer": "int",
    "bigint": "int64",
    "text": "string",
    "character varying": "string",
    "boolean": "bool",
    "timestamp without time zone": "time.Time",
    "date": "time.Time",
}

# Unrecognized types lose their precise shape
FALLBACK_GO_TYPE: Final[str] = "interface{}"


def map_type(sql_type: str) -> str:
    """Return the Go type for a catalog type name, falling back to ``interface{}``."""
    return DEFAULT_GO_TYPES.get(sql_type, FALLBACK_GO_TYPE)
