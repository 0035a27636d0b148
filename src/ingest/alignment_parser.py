"""Alignment header parsing.

This module turns one ``>``-prefixed header line into an AlignmentRecord.
Header layout (tab-separated, extra trailing sequence columns ignored)::

    >pdb_id  chain  uniprot_id  pdb_from  pdb_to  uniprot_from  uniprot_to
    e_value  identity  identity_percent
"""

from __future__ import annotations

from typing import NoReturn

from core.constants import ALIGNMENT_HEADER_FIELD_COUNT, ALIGNMENT_HEADER_PREFIX
from core.errors import MalformedAlignmentLineError
from core.types import AlignmentRecord
from ingest.line_classifier import AlignmentHeaderLine, split_tab_fields
from ingest.numeric_fields import parse_strict_float, parse_strict_int
from ingest.parse_context import ParseContext


def parse_alignment_line(line: AlignmentHeaderLine, context: ParseContext) -> AlignmentRecord:
    """Parse an alignment header and assign the next alignment id.

    The id is only consumed when the header validates; the caller
    advances its context with the returned record's id.

    Args:
        line: Classified header line.
        context: Current alignment identity state.

    Returns:
        Parsed alignment record.

    Raises:
        MalformedAlignmentLineError: If field count, text, or numeric
            validation fails.
    """
    parser = _HeaderFieldParser(line, context.next_alignment_id)
    fields = split_tab_fields(line.raw_line)
    if len(fields) < ALIGNMENT_HEADER_FIELD_COUNT:
        parser.fail(
            f"expected at least {ALIGNMENT_HEADER_FIELD_COUNT} tab-separated fields, "
            f"found {len(fields)}"
        )
    pdb_id = fields[0][len(ALIGNMENT_HEADER_PREFIX):]
    record = AlignmentRecord(
        alignment_id=context.next_alignment_id,
        pdb_id=parser.text("pdb_id", pdb_id),
        chain=parser.text("chain", fields[1]),
        uniprot_id=parser.text("uniprot_id", fields[2]),
        pdb_from=parser.integer("pdb_from", fields[3]),
        pdb_to=parser.integer("pdb_to", fields[4]),
        uniprot_from=parser.integer("uniprot_from", fields[5]),
        uniprot_to=parser.integer("uniprot_to", fields[6]),
        e_value=parser.number("e_value", fields[7]),
        identity=parser.number("identity", fields[8]),
        identity_percent=parser.number("identity_percent", fields[9]),
    )
    _validate_ranges(record, parser)
    return record


class _HeaderFieldParser:
    """Field coercion bound to one header line for error context."""

    def __init__(self, line: AlignmentHeaderLine, alignment_id: int) -> None:
        self._line = line
        self._alignment_id = alignment_id

    def fail(self, reason: str) -> NoReturn:
        raise MalformedAlignmentLineError(
            self._line.line_number,
            self._line.raw_line,
            reason,
            alignment_id=self._alignment_id,
        )

    def text(self, field_name: str, raw_value: str) -> str:
        if not raw_value:
            self.fail(f"field '{field_name}' is empty")
        return raw_value

    def integer(self, field_name: str, raw_value: str) -> int:
        try:
            return parse_strict_int(raw_value)
        except ValueError as error:
            raise self._field_error(field_name, error) from error

    def number(self, field_name: str, raw_value: str) -> float:
        try:
            return parse_strict_float(raw_value)
        except ValueError as error:
            raise self._field_error(field_name, error) from error

    def _field_error(self, field_name: str, error: ValueError) -> MalformedAlignmentLineError:
        return MalformedAlignmentLineError(
            self._line.line_number,
            self._line.raw_line,
            f"field '{field_name}' is {error}",
            alignment_id=self._alignment_id,
        )


def _validate_ranges(record: AlignmentRecord, parser: _HeaderFieldParser) -> None:
    """Check residue ranges are ordered and the e-value is non-negative."""
    if record.pdb_from > record.pdb_to:
        parser.fail(f"pdb_from {record.pdb_from} is greater than pdb_to {record.pdb_to}")
    if record.uniprot_from > record.uniprot_to:
        parser.fail(
            f"uniprot_from {record.uniprot_from} is greater than "
            f"uniprot_to {record.uniprot_to}"
        )
    if record.e_value < 0:
        parser.fail(f"e_value {record.e_value} is negative")
