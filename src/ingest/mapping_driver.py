"""Single-pass import driver for residue mapping streams.

This module walks a mapping stream in file order, dispatches each line
to the matching parser, and forwards typed rows to a bulk sink. Residue
rows always attach to the alignment header that precedes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.types import ImportSummary
from ingest.alignment_parser import parse_alignment_line
from ingest.line_classifier import (
    AlignmentHeaderLine,
    CommentLine,
    ResidueRowLine,
    classify_line,
    is_blank_line,
    strip_line_terminator,
)
from ingest.parse_context import ParseContext
from ingest.progress import NullProgressReporter, ProgressReporter
from ingest.residue_parser import parse_residue_line
from store.bulk_sink import BulkSink


@dataclass
class _ImportCounters:
    line_count: int = 0
    alignment_count: int = 0
    residue_count: int = 0
    comment_count: int = 0
    blank_count: int = 0

    def summary(self) -> ImportSummary:
        return ImportSummary(
            line_count=self.line_count,
            alignment_count=self.alignment_count,
            residue_count=self.residue_count,
            comment_count=self.comment_count,
            blank_count=self.blank_count,
        )


def import_residue_mappings(
    lines: Iterable[str],
    sink: BulkSink,
    progress: ProgressReporter | None = None,
) -> ImportSummary:
    """Parse a mapping stream and submit every row to ``sink``.

    Any malformed line aborts the import before the final flush; rows
    the sink committed earlier stay committed, buffered rows are left
    to the sink.

    Args:
        lines: Mapping file lines, with or without terminators.
        sink: Bulk sink receiving alignment and residue rows.
        progress: Optional reporter ticked once per line.

    Returns:
        Line and record counters for the stream.

    Raises:
        MalformedAlignmentLineError: If a header line is invalid.
        MalformedResidueLineError: If a residue row is invalid.
        NoActiveAlignmentError: If a residue row precedes every header.
    """
    reporter = progress or NullProgressReporter()
    context = ParseContext()
    counters = _ImportCounters()
    for line_number, line in enumerate(lines, 1):
        counters.line_count = line_number
        context = _dispatch_line(strip_line_terminator(line), line_number, context, sink, counters)
        reporter.tick()
    if sink.is_batching:
        sink.flush_all()
    return counters.summary()


def _dispatch_line(
    raw_line: str,
    line_number: int,
    context: ParseContext,
    sink: BulkSink,
    counters: _ImportCounters,
) -> ParseContext:
    """Handle one line and return the context for the next line."""
    if is_blank_line(raw_line):
        counters.blank_count += 1
        return context
    classified = classify_line(raw_line, line_number)
    if isinstance(classified, CommentLine):
        counters.comment_count += 1
        return context
    if isinstance(classified, AlignmentHeaderLine):
        record = parse_alignment_line(classified, context)
        sink.submit_alignment(record)
        counters.alignment_count += 1
        return context.advance(record.alignment_id)
    if isinstance(classified, ResidueRowLine):
        sink.submit_residue_mapping(parse_residue_line(classified, context))
        counters.residue_count += 1
        return context
    raise TypeError(f"Unsupported line classification: {type(classified).__name__}")
