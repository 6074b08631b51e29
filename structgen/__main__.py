#!/usr/bin/env python3
"""
Command line interface for structgen.

Usage:
    python -m structgen <command> [options]

Commands:
    generate    Generate Go bun structs for every table
    tables      List the tables of the configured schema
    columns     Show the columns of one table and their Go types
    clean       Remove generated struct files

Examples:
    python -m structgen generate --dsn postgres://user:pw@localhost/app
    python -m structgen generate --config structgen.yaml --export-names
    python -m structgen columns users
    python -m structgen clean --dry-run
"""

from __future__ import annotations

import argparse
import sys

from structgen import clean, generator
from structgen.schema_reader import SchemaReader
from structgen.shared import CodegenError
from structgen.type_mapper import map_type


def _exit_code(e: SystemExit, default: int = 1) -> int:
    if isinstance(e.code, int):
        return e.code
    if e.code:
        print(e.code, file=sys.stderr)
    return default


def _catalog_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    generator.add_connection_arguments(parser)
    return parser


def cmd_generate(args: list[str]) -> int:
    """Generate struct files."""
    try:
        generator.main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def cmd_tables(args: list[str]) -> int:
    """List tables in the configured schema."""
    parser = _catalog_parser(
        "structgen tables", "List the tables of the configured schema"
    )
    try:
        parsed = parser.parse_args(args)
        config = generator.config_from_args(parsed)
        with SchemaReader(config) as reader:
            for table_name in reader.list_tables():
                print(table_name)
        return 0
    except CodegenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SystemExit as e:
        return _exit_code(e)


def cmd_columns(args: list[str]) -> int:
    """Show the columns of one table."""
    parser = _catalog_parser(
        "structgen columns", "Show the columns of one table and their Go types"
    )
    parser.add_argument("table", help="Table to describe")
    try:
        parsed = parser.parse_args(args)
        config = generator.config_from_args(parsed)
        with SchemaReader(config) as reader:
            columns = reader.list_columns(parsed.table)
        if not columns:
            print(f"No columns found for table '{parsed.table}'")
        for column in columns:
            print(f"  {column.name}: {column.sql_type} -> {map_type(column.sql_type)}")
        return 0
    except CodegenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SystemExit as e:
        return _exit_code(e)


def cmd_clean(args: list[str]) -> int:
    """Remove generated struct files."""
    try:
        clean.main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


COMMANDS = {
    "generate": (cmd_generate, "Generate Go bun structs for every table"),
    "tables": (cmd_tables, "List the tables of the configured schema"),
    "columns": (cmd_columns, "Show the columns of one table and their Go types"),
    "clean": (cmd_clean, "Remove generated struct files"),
}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:12} {desc}")
        print("\nUse '<command> --help' for command-specific options.")
        return 0

    command = argv[0]
    args = argv[1:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS.keys())}")
        return 1

    handler, _ = COMMANDS[command]
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
