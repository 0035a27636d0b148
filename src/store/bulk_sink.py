"""Bulk sink contract used by the mapping import driver."""

from __future__ import annotations

from typing import Protocol

from core.types import AlignmentRecord, ResidueMapping


class BulkSink(Protocol):
    """Buffers typed rows and commits them in batches.

    The import driver only writes to a sink; it never reads rows back.
    """

    @property
    def is_batching(self) -> bool:
        """Return whether rows are buffered until a batch commit."""

    def enable_batching(self) -> None:
        """Switch the sink into buffered batch mode."""

    def submit_alignment(self, record: AlignmentRecord) -> None:
        """Stage one alignment row."""

    def submit_residue_mapping(self, mapping: ResidueMapping) -> None:
        """Stage one residue mapping row."""

    def flush_all(self) -> int:
        """Commit every pending row and return how many were committed."""
