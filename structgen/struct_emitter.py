"""
Struct Emitter - Renders Go structs with bun tags and writes them to disk.

Templates are compiled once per emitter; rendering is deterministic, so the
same table and field list always produce byte-identical output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Iterable, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, Template

from .schema_reader import ColumnInfo
from .shared import GeneratorConfig, OutputError, clean_name, to_go_exported
from .type_mapper import map_type

# Go import path required by each host type that needs one
TYPE_IMPORTS: Final[dict[str, str]] = {
    "time.Time": "time",
}


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """A single struct field derived from a catalog column."""

    field_name: str
    host_type: str
    tag: str


@dataclass(frozen=True, slots=True)
class GeneratedStruct:
    """An ordered set of fields belonging to one table."""

    table_name: str
    fields: tuple[FieldMapping, ...] = ()


def build_fields(
    columns: Iterable[ColumnInfo],
    export_names: bool = False,
) -> list[FieldMapping]:
    """Turn catalog columns into field mappings.

    Columns whose cleaned name or mapped type is empty are dropped. Exported
    names that collide with an earlier field get a numeric suffix.
    """
    mappings: list[FieldMapping] = []
    used: set[str] = set()
    for column in columns:
        tag = clean_name(column.name)
        host_type = map_type(column.sql_type)
        if not tag or not host_type:
            continue
        field_name = to_go_exported(tag) if export_names else tag
        if field_name in used:
            suffix = 2
            while f"{field_name}{suffix}" in used:
                suffix += 1
            field_name = f"{field_name}{suffix}"
        used.add(field_name)
        mappings.append(
            FieldMapping(field_name=field_name, host_type=host_type, tag=tag)
        )
    return mappings


def required_imports(fields: Iterable[FieldMapping]) -> list[str]:
    """Return the sorted Go import paths the field types depend on."""
    return sorted(
        {TYPE_IMPORTS[f.host_type] for f in fields if f.host_type in TYPE_IMPORTS}
    )


def persist(output_dir: Path, file_name: str, text: str, header: str) -> Path:
    """Write ``header`` followed by ``text`` to ``output_dir / file_name``.

    The directory is created if absent and an existing file is overwritten.

    Raises:
        OutputError: If the directory or the file cannot be written.
    """
    path = output_dir / file_name
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(header)
            handle.write(text)
    except OSError as e:
        raise OutputError(f"Failed to write generated struct: {e}", str(path)) from e
    return path


@dataclass
class StructEmitter:
    """Renders and persists struct definitions using the configured package."""

    config: GeneratorConfig
    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=PackageLoader("structgen", "templates"),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        # Pre-compile templates
        self._struct_template = self.template_env.get_template("struct.go.j2")
        self._header_template = self.template_env.get_template("header.go.j2")

    @property
    def struct_template(self) -> Template:
        return self._struct_template

    @property
    def header_template(self) -> Template:
        return self._header_template

    def struct_name_for(self, table_name: str) -> str:
        if self.config.export_names:
            return to_go_exported(table_name)
        return table_name

    def render(self, table_name: str, fields: Sequence[FieldMapping]) -> str:
        """Render a struct declaration named after ``table_name``.

        Fields with an empty name or type are skipped.
        """
        struct = GeneratedStruct(
            table_name=table_name,
            fields=tuple(f for f in fields if f.field_name.strip() and f.host_type),
        )
        return self.struct_template.render(
            struct_name=self.struct_name_for(struct.table_name),
            fields=struct.fields,
        )

    def render_header(self, fields: Iterable[FieldMapping] = ()) -> str:
        """Render the package declaration plus the imports ``fields`` need."""
        return self.header_template.render(
            package_name=self.config.package_name,
            imports=required_imports(fields),
        )

    def persist(
        self,
        file_name: str,
        text: str,
        fields: Iterable[FieldMapping] = (),
    ) -> Path:
        """Write ``text`` under the configured output directory."""
        return persist(
            self.config.output_dir,
            file_name,
            text,
            self.render_header(fields),
        )

    def emit(self, table_name: str, columns: Iterable[ColumnInfo]) -> Path:
        """Build, render, and persist the struct for one table."""
        fields = build_fields(columns, export_names=self.config.export_names)
        text = self.render(table_name, fields)
        return self.persist(self.config.file_name_for(table_name), text, fields)
