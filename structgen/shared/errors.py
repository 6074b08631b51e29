"""Custom exceptions for the struct generator."""

from __future__ import annotations


class CodegenError(Exception):
    """Base exception for generator errors."""


class ConnectivityError(CodegenError):
    """Raised when the database cannot be reached or a catalog query fails."""

    def __init__(self, message: str, table: str | None = None) -> None:
        self.table = table
        full_message = message if not table else f"Table '{table}': {message}"
        super().__init__(full_message)


class OutputError(CodegenError):
    """Raised when generated code cannot be written to disk."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        full_message = message if not path else f"[{path}] {message}"
        super().__init__(full_message)


class ConfigError(CodegenError):
    """Raised when a configuration file is unreadable or invalid."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        full_message = message if not config_path else f"[{config_path}] {message}"
        super().__init__(full_message)
