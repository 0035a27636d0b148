"""Structured import progress reporting.

This module defines the progress reporter contract used by the import
driver and a tracker that emits periodic structured log events.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Protocol

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class ProgressReporter(Protocol):
    """Receives monotonic progress ticks from the import driver."""

    def set_total(self, total: int) -> None:
        """Record the expected number of ticks before import starts."""

    def tick(self) -> None:
        """Advance progress by one input line."""


class NullProgressReporter:
    """Progress reporter that discards every update."""

    def set_total(self, total: int) -> None:
        return None

    def tick(self) -> None:
        return None


@dataclass
class ImportProgressTracker:
    """Track and emit line progress for one mapping import."""

    source_path: str
    log_interval_lines: int
    total_lines: int | None = None
    current_line: int = 0
    started_at: float = field(default_factory=time.monotonic)

    def set_total(self, total: int) -> None:
        """Record pre-counted total line count."""
        self.total_lines = total
        _LOGGER.info("import_started", source_path=self.source_path, total_lines=total)

    def tick(self) -> None:
        """Count one line and log when an interval boundary is reached."""
        self.current_line += 1
        if not _should_log_line(self.current_line, self.total_lines, self.log_interval_lines):
            return
        elapsed_seconds = time.monotonic() - self.started_at
        _LOGGER.info(
            "import_progress",
            source_path=self.source_path,
            line=self.current_line,
            total_lines=self.total_lines,
            progress=round(_progress_fraction(self.current_line, self.total_lines), 3),
            elapsed_seconds=round(elapsed_seconds, 3),
        )


def _should_log_line(line: int, total_lines: int | None, interval: int) -> bool:
    """Return true for the first line, interval boundaries, and the last line."""
    if line <= 1:
        return True
    if total_lines is not None and line == total_lines:
        return True
    return line % interval == 0


def _progress_fraction(line: int, total_lines: int | None) -> float:
    """Compute bounded progress fraction, 0 when the total is unknown."""
    if not total_lines:
        return 0.0
    return min(1.0, max(0.0, line / total_lines))
