"""
Schema Reader - Lists tables and columns from the PostgreSQL catalog.

Queries ``information_schema`` over a single psycopg connection. Catalog
values are normalized to ``str`` here so the rest of the generator never
deals with driver-specific byte representations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

import psycopg

from .shared import ConnectivityError, GeneratorConfig

LIST_TABLES_SQL: Final[str] = """
    SELECT table_name::text
    FROM information_schema.tables
    WHERE table_schema = %s
      AND table_type = ANY(%s)
    ORDER BY table_name
"""

LIST_COLUMNS_SQL: Final[str] = """
    SELECT column_name::text, data_type::text
    FROM information_schema.columns
    WHERE table_schema = %s
      AND table_name = %s
    ORDER BY ordinal_position
"""


@dataclass(frozen=True, slots=True)
class ColumnInfo:
    """A column as reported by the catalog."""

    name: str
    sql_type: str


def _to_text(value: Any) -> str:
    """Decode a catalog value that may surface as bytes or str."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    return str(value)


class SchemaReader:
    """Read-only access to the table and column catalog views.

    Use as a context manager to open and close the connection, or pass an
    already-open connection which the caller then owns.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        connection: psycopg.Connection | None = None,
    ) -> None:
        self._config = config
        self._conn = connection
        self._owns_connection = connection is None

    def __enter__(self) -> SchemaReader:
        if self._conn is None:
            self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect(self) -> None:
        """Open the database connection."""
        try:
            self._conn = psycopg.connect(self._config.connection_string)
        except psycopg.Error as e:
            raise ConnectivityError(f"Failed to connect to database: {e}") from e
        self._owns_connection = True

    def close(self) -> None:
        """Close the connection if this reader opened it."""
        if self._conn is not None and self._owns_connection:
            self._conn.close()
            self._conn = None

    def _fetch(
        self,
        query: str,
        params: tuple[Any, ...],
        table: str | None = None,
    ) -> list[tuple[Any, ...]]:
        if self._conn is None:
            raise ConnectivityError("Schema reader is not connected", table)
        try:
            with self._conn.cursor() as cur:
                cur.execute(query, params)
                return list(cur.fetchall())
        except psycopg.Error as e:
            raise ConnectivityError(f"Catalog query failed: {e}", table) from e

    def list_tables(self) -> list[str]:
        """List table names in the configured schema.

        Raises:
            ConnectivityError: If the query cannot execute.
        """
        table_types = ["BASE TABLE"]
        if self._config.include_views:
            table_types.append("VIEW")
        rows = self._fetch(LIST_TABLES_SQL, (self._config.table_schema, table_types))
        return [_to_text(row[0]) for row in rows]

    def list_columns(self, table_name: str) -> list[ColumnInfo]:
        """List the columns of ``table_name`` in ordinal order.

        An unknown table yields an empty list rather than an error.

        Raises:
            ConnectivityError: If the query cannot execute.
        """
        rows = self._fetch(
            LIST_COLUMNS_SQL,
            (self._config.table_schema, table_name),
            table=table_name,
        )
        return [
            ColumnInfo(name=_to_text(name), sql_type=_to_text(sql_type))
            for name, sql_type in rows
        ]
