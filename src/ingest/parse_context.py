"""Alignment identity state threaded through line parsers."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ParseContext:
    """Driver-owned alignment identity state.

    Attributes:
        last_alignment_id: Highest id assigned so far, 0 before any header.
        active_alignment_id: Id residue rows attach to, ``None`` until
            the first header parses.
    """

    last_alignment_id: int = 0
    active_alignment_id: int | None = None

    @property
    def next_alignment_id(self) -> int:
        """Return the id the next alignment header receives."""
        return self.last_alignment_id + 1

    def advance(self, alignment_id: int) -> "ParseContext":
        """Return a context with ``alignment_id`` assigned and active."""
        return replace(self, last_alignment_id=alignment_id, active_alignment_id=alignment_id)
