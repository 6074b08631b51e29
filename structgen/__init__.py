"""structgen - Generates Go bun model structs from a PostgreSQL schema."""

from .schema_reader import ColumnInfo, SchemaReader
from .struct_emitter import (
    FieldMapping,
    GeneratedStruct,
    StructEmitter,
    build_fields,
    persist,
)
from .type_mapper import DEFAULT_GO_TYPES, FALLBACK_GO_TYPE, map_type
from .generator import generate, main

__all__ = [
    "ColumnInfo",
    "SchemaReader",
    "FieldMapping",
    "GeneratedStruct",
    "StructEmitter",
    "build_fields",
    "persist",
    "DEFAULT_GO_TYPES",
    "FALLBACK_GO_TYPE",
    "map_type",
    "generate",
    "main",
]
