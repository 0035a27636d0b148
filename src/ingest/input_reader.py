"""Mapping file readers for ingestion.

This module validates local mapping file paths, pre-counts lines for
progress reporting, and streams decoded lines in file order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from core.errors import ResmapIngestError


def resolve_mapping_path(source_path: str) -> Path:
    """Resolve and validate a local mapping file path.

    Args:
        source_path: Local path to a residue mapping file.

    Returns:
        Expanded file path.

    Raises:
        ResmapIngestError: If the path is missing or not a file.
    """
    mapping_path = Path(source_path).expanduser()
    if not mapping_path.exists():
        raise ResmapIngestError(
            f"Failed to read mapping file at {mapping_path}: path does not exist. "
            "Provide an existing PDB-UniProt residue mapping file."
        )
    if not mapping_path.is_file():
        raise ResmapIngestError(
            f"Failed to read mapping file at {mapping_path}: path is not a file. "
            "Provide a single mapping file rather than a directory."
        )
    return mapping_path


def count_lines(mapping_path: Path) -> int:
    """Count lines in a mapping file, including blank and comment lines."""
    with mapping_path.open("r", encoding="utf-8-sig") as handle:
        return sum(1 for _ in handle)


def iter_mapping_lines(mapping_path: Path) -> Iterator[str]:
    """Yield mapping file lines in order.

    A leading UTF-8 byte order mark is dropped. Read errors propagate
    unchanged to the caller.
    """
    with mapping_path.open("r", encoding="utf-8-sig", newline="") as handle:
        yield from handle
