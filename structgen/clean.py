"""
Remove generated struct files.

Only files ending in the generated suffix (``_struct.go`` by default) are
deleted; the output directory itself is removed once it is empty.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterator

from .shared import DEFAULT_FILE_SUFFIX, DEFAULT_OUTPUT_DIR


def find_generated_files(
    output_dir: Path,
    suffix: str = DEFAULT_FILE_SUFFIX,
) -> Iterator[Path]:
    """Find generated files directly inside ``output_dir``."""
    if not output_dir.is_dir():
        return
    for path in sorted(output_dir.iterdir()):
        if path.is_file() and path.name.endswith(suffix):
            yield path


def format_size(size_bytes: float) -> str:
    """Format size in human-readable form."""
    for unit in ("B", "KB", "MB", "GB"):
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def clean_generated(
    output_dir: Path,
    suffix: str = DEFAULT_FILE_SUFFIX,
    *,
    dry_run: bool = False,
) -> int:
    """Remove generated files, returning bytes freed."""
    total = 0
    for path in find_generated_files(output_dir, suffix):
        size = path.stat().st_size
        if dry_run:
            print(f"  Would remove: {path} - {format_size(size)}")
        else:
            print(f"  Removing: {path} - {format_size(size)}")
            path.unlink()
        total += size

    if not dry_run and output_dir.is_dir() and not any(output_dir.iterdir()):
        output_dir.rmdir()
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(DEFAULT_OUTPUT_DIR),
        help="Directory holding generated files (default: bunmodels)",
    )
    parser.add_argument(
        "--suffix",
        default=DEFAULT_FILE_SUFFIX,
        help="Suffix of generated files (default: _struct.go)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be cleaned without removing anything",
    )
    args = parser.parse_args(argv)

    print(f"Cleaning generated structs in {args.output_dir}...")
    total_freed = clean_generated(args.output_dir, args.suffix, dry_run=args.dry_run)

    action = "Would free" if args.dry_run else "Freed"
    print(f"\n{action}: {format_size(total_freed)}")

    if args.dry_run:
        print("\nRun without --dry-run to actually clean.")


if __name__ == "__main__":
    main()
