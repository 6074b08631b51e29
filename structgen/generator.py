"""
Struct Generator - Generates Go bun model structs from a live PostgreSQL schema.

Lists the tables of one schema, reads each table's columns from the catalog,
maps their types to Go and writes one ``<table>_struct.go`` file per table.
Processing is sequential and the first error aborts the run; files written
before the failure are left in place.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .schema_reader import SchemaReader
from .shared import CodegenError, GeneratorConfig, load_config
from .struct_emitter import StructEmitter


def generate(
    config: GeneratorConfig,
    reader: SchemaReader,
    emitter: StructEmitter,
    tables: Sequence[str] | None = None,
    verbose: bool = False,
) -> list[tuple[str, Path]]:
    """Generate one struct file per table.

    Args:
        config: Generator configuration.
        reader: Connected schema reader.
        emitter: Struct emitter writing into ``config.output_dir``.
        tables: Explicit table subset; all tables in the schema when None.
        verbose: Print the raw catalog columns of every table.

    Returns:
        ``(table_name, path)`` for every file written, in processing order.

    Raises:
        ConnectivityError: If a catalog query fails.
        OutputError: If a file cannot be written.
    """
    table_names = list(tables) if tables else reader.list_tables()
    print(f"Tables: {table_names}")

    written: list[tuple[str, Path]] = []
    for table_name in table_names:
        columns = reader.list_columns(table_name)
        if verbose:
            print(f"Columns for table {table_name}:")
            for column in columns:
                print(f"  {column.name!r}: {column.sql_type!r}")

        path = emitter.emit(table_name, columns)
        print(f"Struct for table {table_name} saved to {path}")
        written.append((table_name, path))

    return written


def add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options needed to reach and scope the catalog."""
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with generator settings",
    )
    parser.add_argument(
        "--connection-string",
        "--dsn",
        dest="connection_string",
        default=None,
        help="PostgreSQL connection string (overrides DATABASE_URL)",
    )
    parser.add_argument(
        "--schema",
        dest="table_schema",
        default=None,
        help="Schema to introspect (default: public)",
    )
    parser.add_argument(
        "--include-views",
        action="store_const",
        const=True,
        default=None,
        help="Include views as well as base tables",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Go bun model structs from a PostgreSQL schema",
    )
    add_connection_arguments(parser)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated files (default: bunmodels)",
    )
    parser.add_argument(
        "--package",
        dest="package_name",
        default=None,
        help="Go package name written at the top of each file",
    )
    parser.add_argument(
        "--export-names",
        action="store_const",
        const=True,
        default=None,
        help="Emit exported (PascalCase) struct and field names",
    )
    parser.add_argument(
        "--table",
        dest="tables",
        action="append",
        default=None,
        help="Only generate the given table (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print raw column data for every table",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Resolve the configuration from parsed CLI arguments.

    Output options are optional so parsers built with only
    ``add_connection_arguments`` resolve to the default output settings.
    """
    return load_config(
        args.config,
        overrides={
            "connection_string": args.connection_string,
            "table_schema": args.table_schema,
            "output_dir": getattr(args, "output_dir", None),
            "package_name": getattr(args, "package_name", None),
            "export_names": getattr(args, "export_names", None),
            "include_views": args.include_views,
        },
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        emitter = StructEmitter(config)

        with SchemaReader(config) as reader:
            written = generate(
                config,
                reader,
                emitter,
                tables=args.tables,
                verbose=args.verbose,
            )

        print(f"Generated {len(written)} struct file(s) into {config.output_dir}")
    except CodegenError as e:
        raise SystemExit(f"Error: {e}") from e


if __name__ == "__main__":
    main()
