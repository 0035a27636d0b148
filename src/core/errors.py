"""Resmap exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ResmapError(Exception):
    """Base exception for all Resmap failures."""


class ResmapConfigError(ResmapError):
    """Raised for invalid runtime configuration."""


class ResmapIngestError(ResmapError):
    """Raised for source reading and mapping-file parse failures."""


class ResmapStoreError(ResmapError):
    """Raised for bulk load persistence and catalog failures."""


class ResmapDependencyError(ResmapError):
    """Raised when an optional runtime dependency is missing."""


class MalformedLineError(ResmapIngestError):
    """Base for line-level parse failures that abort an import.

    Attributes:
        line_number: One-based line number in the source stream.
        raw_line: Line content without its terminator.
        reason: Validation that failed.
    """

    line_kind = "line"

    def __init__(self, line_number: int, raw_line: str, reason: str) -> None:
        self.line_number = line_number
        self.raw_line = raw_line
        self.reason = reason
        super().__init__(
            f"Malformed {self.line_kind} at line {line_number}: {reason}. "
            f"Content: {raw_line!r}. Fix the mapping file and rerun the import."
        )


class MalformedAlignmentLineError(MalformedLineError):
    """Raised when an alignment header fails field or numeric validation.

    Attributes:
        alignment_id: Identifier the header would have been assigned.
    """

    line_kind = "alignment header"

    def __init__(
        self,
        line_number: int,
        raw_line: str,
        reason: str,
        alignment_id: int,
    ) -> None:
        self.alignment_id = alignment_id
        super().__init__(line_number, raw_line, reason)


class MalformedResidueLineError(MalformedLineError):
    """Raised when a residue mapping row fails token or index validation."""

    line_kind = "residue row"


class NoActiveAlignmentError(MalformedLineError):
    """Raised when a residue row appears before any alignment header."""

    line_kind = "residue row"
