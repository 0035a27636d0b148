"""File-backed staged bulk loader.

This module buffers rows per table and commits each batch as one
JSONL part file. A part becomes visible only through an atomic rename,
so a failed commit leaves earlier parts intact and adds nothing.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.constants import (
    ALIGNMENT_TABLE_NAME,
    BULK_TABLE_NAMES,
    PART_FILE_PREFIX,
    PART_FILE_SUFFIX,
    RESIDUE_MAPPING_TABLE_NAME,
)
from core.errors import ResmapStoreError
from core.logging_config import get_logger
from core.types import AlignmentRecord, ResidueMapping
from store.record_payload import (
    alignment_to_payload,
    render_payload_lines,
    residue_mapping_to_payload,
)

_LOGGER = get_logger(__name__)


class StagedBulkLoader:
    """Bulk sink writing batched table parts under a load directory.

    With batching disabled every submitted row is committed on its own.
    With batching enabled a table buffer is committed once it holds
    ``batch_size`` rows, and on ``flush_all``.
    """

    def __init__(self, load_dir: Path, batch_size: int) -> None:
        if batch_size <= 0:
            raise ResmapStoreError(
                f"Invalid bulk batch size {batch_size}: expected a positive integer."
            )
        self._load_dir = load_dir
        self._batch_size = batch_size
        self._batching = False
        self._pending: dict[str, list[dict[str, object]]] = {
            table_name: [] for table_name in BULK_TABLE_NAMES
        }
        self._part_counts: dict[str, int] = {table_name: 0 for table_name in BULK_TABLE_NAMES}
        self._committed_rows: dict[str, int] = {
            table_name: 0 for table_name in BULK_TABLE_NAMES
        }

    @property
    def is_batching(self) -> bool:
        return self._batching

    @property
    def batch_count(self) -> int:
        """Return the number of committed parts across all tables."""
        return sum(self._part_counts.values())

    def committed_rows(self, table_name: str) -> int:
        """Return rows committed so far for one table."""
        return self._committed_rows[table_name]

    def enable_batching(self) -> None:
        self._batching = True

    def submit_alignment(self, record: AlignmentRecord) -> None:
        self._stage(ALIGNMENT_TABLE_NAME, alignment_to_payload(record))

    def submit_residue_mapping(self, mapping: ResidueMapping) -> None:
        self._stage(RESIDUE_MAPPING_TABLE_NAME, residue_mapping_to_payload(mapping))

    def flush_all(self) -> int:
        """Commit every non-empty table buffer.

        Returns:
            Number of rows committed by this flush.

        Raises:
            ResmapStoreError: If a part file cannot be written.
        """
        committed_count = 0
        for table_name in BULK_TABLE_NAMES:
            committed_count += self._commit_table(table_name)
        return committed_count

    def _stage(self, table_name: str, payload: dict[str, object]) -> None:
        pending_rows = self._pending[table_name]
        pending_rows.append(payload)
        if not self._batching or len(pending_rows) >= self._batch_size:
            self._commit_table(table_name)

    def _commit_table(self, table_name: str) -> int:
        """Write one table buffer as a new part file and clear it."""
        pending_rows = self._pending[table_name]
        if not pending_rows:
            return 0
        part_index = self._part_counts[table_name] + 1
        table_dir = self._load_dir / table_name
        part_path = table_dir / f"{PART_FILE_PREFIX}{part_index:05d}{PART_FILE_SUFFIX}"
        temp_path = part_path.with_name(part_path.name + ".tmp")
        try:
            table_dir.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(render_payload_lines(pending_rows), encoding="utf-8")
            os.replace(temp_path, part_path)
        except OSError as error:
            raise ResmapStoreError(
                f"Failed to commit {table_name} batch at {part_path}: {error}. "
                "Check write permissions and available disk space."
            ) from error
        row_count = len(pending_rows)
        self._part_counts[table_name] = part_index
        self._committed_rows[table_name] += row_count
        pending_rows.clear()
        _LOGGER.debug(
            "bulk_batch_committed",
            table=table_name,
            part=part_index,
            row_count=row_count,
        )
        return row_count


def list_table_parts(load_dir: Path, table_name: str) -> list[Path]:
    """Return committed part files of one table in commit order."""
    table_dir = load_dir / table_name
    if not table_dir.exists():
        return []
    return sorted(table_dir.glob(f"{PART_FILE_PREFIX}*{PART_FILE_SUFFIX}"))
