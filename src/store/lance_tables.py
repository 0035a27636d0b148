"""Lance columnar export for finished loads.

This module writes committed alignment and residue tables to Apache
Lance datasets, one dataset per table, under the load directory.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any

from core.constants import ALIGNMENT_TABLE_NAME, LANCE_DIR_NAME, RESIDUE_MAPPING_TABLE_NAME
from core.errors import ResmapDependencyError, ResmapStoreError
from core.logging_config import get_logger
from core.types import AlignmentRecord, ResidueMapping

_LOGGER = get_logger(__name__)

_ALIGNMENT_SCHEMA = (
    ("alignment_id", "int64"),
    ("pdb_id", "string"),
    ("chain", "string"),
    ("uniprot_id", "string"),
    ("pdb_from", "int64"),
    ("pdb_to", "int64"),
    ("uniprot_from", "int64"),
    ("uniprot_to", "int64"),
    ("e_value", "float64"),
    ("identity", "float64"),
    ("identity_percent", "float64"),
)

_RESIDUE_SCHEMA = (
    ("alignment_id", "int64"),
    ("pdb_position", "int64"),
    ("uniprot_position", "int64"),
    ("match_symbol", "string"),
)


def export_load_to_lance(
    load_dir: Path,
    alignments: list[AlignmentRecord],
    residue_mappings: list[ResidueMapping],
) -> Path:
    """Write both load tables as Lance datasets.

    Args:
        load_dir: Load directory receiving the ``lance`` subdirectory.
        alignments: Committed alignment rows.
        residue_mappings: Committed residue mapping rows.

    Returns:
        Directory holding the Lance datasets.

    Raises:
        ResmapDependencyError: If lance or pyarrow is missing.
        ResmapStoreError: If a Lance write fails.
    """
    lance, pa = _import_lance_modules()
    lance_root = load_dir / LANCE_DIR_NAME
    tables = {
        ALIGNMENT_TABLE_NAME: _build_table(
            pa, [asdict(row) for row in alignments], _ALIGNMENT_SCHEMA
        ),
        RESIDUE_MAPPING_TABLE_NAME: _build_table(
            pa, [asdict(row) for row in residue_mappings], _RESIDUE_SCHEMA
        ),
    }
    for table_name, table in tables.items():
        lance_uri = str(lance_root / f"{table_name}.lance")
        try:
            lance.write_dataset(table, lance_uri, mode="overwrite")
        except Exception as error:
            raise ResmapStoreError(
                f"Failed to write Lance dataset at {lance_uri}: {error}. "
                "Validate lance/pyarrow compatibility and retry the export."
            ) from error
    _LOGGER.info(
        "lance_export_completed",
        load_dir=str(load_dir),
        alignment_count=len(alignments),
        residue_count=len(residue_mappings),
    )
    return lance_root


def ensure_lance_available() -> None:
    """Fail fast when the lance extra is missing.

    Raises:
        ResmapDependencyError: If lance or pyarrow is missing.
    """
    _import_lance_modules()


def _build_table(pa: Any, rows: list[dict[str, Any]], schema: tuple[tuple[str, str], ...]) -> Any:
    """Build a typed pyarrow table, keeping column types for empty tables."""
    arrow_schema = pa.schema([(name, pa.type_for_alias(alias)) for name, alias in schema])
    return pa.Table.from_pylist(rows, schema=arrow_schema)


def _import_lance_modules() -> tuple[Any, Any]:
    try:
        import lance
        import pyarrow as pa
    except ImportError as error:
        raise ResmapDependencyError(
            "Lance export requires lance and pyarrow, but they are not installed. "
            "Install the 'lance' extra to export loads."
        ) from error
    return lance, pa
