"""In-memory bulk sink.

This module keeps committed alignment and residue rows as ordered
relational tables in process memory, keyed by alignment id.
"""

from __future__ import annotations

from core.types import AlignmentRecord, ResidueMapping


class InMemoryBulkSink:
    """Bulk sink holding committed rows in ordered lists."""

    def __init__(self) -> None:
        self.alignments: list[AlignmentRecord] = []
        self.residue_mappings: list[ResidueMapping] = []
        self._pending_alignments: list[AlignmentRecord] = []
        self._pending_residue_mappings: list[ResidueMapping] = []
        self._batching = False

    @property
    def is_batching(self) -> bool:
        return self._batching

    @property
    def pending_count(self) -> int:
        """Return the number of buffered, uncommitted rows."""
        return len(self._pending_alignments) + len(self._pending_residue_mappings)

    def enable_batching(self) -> None:
        self._batching = True

    def submit_alignment(self, record: AlignmentRecord) -> None:
        if self._batching:
            self._pending_alignments.append(record)
            return
        self.alignments.append(record)

    def submit_residue_mapping(self, mapping: ResidueMapping) -> None:
        if self._batching:
            self._pending_residue_mappings.append(mapping)
            return
        self.residue_mappings.append(mapping)

    def flush_all(self) -> int:
        committed_count = self.pending_count
        self.alignments.extend(self._pending_alignments)
        self.residue_mappings.extend(self._pending_residue_mappings)
        self._pending_alignments.clear()
        self._pending_residue_mappings.clear()
        return committed_count
