"""Unit tests for alignment header parsing."""

from __future__ import annotations

import pytest

from core.errors import MalformedAlignmentLineError
from core.types import AlignmentRecord
from ingest.alignment_parser import parse_alignment_line
from ingest.line_classifier import AlignmentHeaderLine
from ingest.parse_context import ParseContext

_HEADER = ">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\t0.000000\t29.000000\t90.625000"


def _header(raw_line: str, line_number: int = 1) -> AlignmentHeaderLine:
    return AlignmentHeaderLine(line_number=line_number, raw_line=raw_line)


def test_parse_alignment_line_reads_all_fields() -> None:
    """Header fields should map onto a typed alignment record."""
    record = parse_alignment_line(_header(_HEADER), ParseContext())

    assert record == AlignmentRecord(
        alignment_id=1,
        pdb_id="1a37",
        chain="A",
        uniprot_id="1433B_HUMAN",
        pdb_from=1,
        pdb_to=32,
        uniprot_from=3,
        uniprot_to=34,
        e_value=0.0,
        identity=29.0,
        identity_percent=90.625,
    )


def test_parse_alignment_line_assigns_next_alignment_id() -> None:
    """Header should receive the id after the last assigned one."""
    context = ParseContext().advance(1).advance(2)

    record = parse_alignment_line(_header(_HEADER), context)

    assert record.alignment_id == 3


def test_parse_alignment_line_ignores_trailing_sequence_fields() -> None:
    """Alignment sequence columns after the tenth field should be ignored."""
    raw_line = _HEADER + "\tMDKSELVQ\tMDKNELVQ\tMDK+ELVQ"

    record = parse_alignment_line(_header(raw_line), ParseContext())

    assert record.identity_percent == 90.625


def test_parse_alignment_line_rejects_short_header() -> None:
    """A nine-field header should fail with line context."""
    raw_line = ">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\t0.000000\t29.000000"

    with pytest.raises(MalformedAlignmentLineError) as error_info:
        parse_alignment_line(_header(raw_line, line_number=7), ParseContext())

    assert error_info.value.line_number == 7 and error_info.value.raw_line == raw_line


def test_parse_alignment_line_failure_reports_unconsumed_id() -> None:
    """A rejected header should report the id it would have received."""
    context = ParseContext().advance(1)

    with pytest.raises(MalformedAlignmentLineError) as error_info:
        parse_alignment_line(_header(">1a37\tA"), context)

    assert error_info.value.alignment_id == 2 and context.last_alignment_id == 1


@pytest.mark.parametrize(
    ("raw_line", "reason_fragment"),
    [
        (">1a37\tA\t1433B_HUMAN\tx\t32\t3\t34\t0.0\t29.0\t90.6", "pdb_from"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\tnot-a-number\t29.0\t90.6", "e_value"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\tnan\t29.0\t90.6", "e_value"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\t1e999\t29.0\t90.6", "not finite"),
        (">1a37\tA\t1433B_HUMAN\t1_0\t32\t3\t34\t0.0\t29.0\t90.6", "pdb_from"),
        (">1a37\tA\t1433B_HUMAN\t1\t 32 \t3\t34\t0.0\t29.0\t90.6", "pdb_to"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\t0.0\t2_9.0\t90.6", "identity"),
        (">1a37\tA\t1433B_HUMAN\t40\t32\t3\t34\t0.0\t29.0\t90.6", "pdb_from"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t30\t4\t0.0\t29.0\t90.6", "uniprot_from"),
        (">1a37\tA\t1433B_HUMAN\t1\t32\t3\t34\t-1.0\t29.0\t90.6", "negative"),
        (">\tA\t1433B_HUMAN\t1\t32\t3\t34\t0.0\t29.0\t90.6", "pdb_id"),
        (">1a37\tA\t\t1\t32\t3\t34\t0.0\t29.0\t90.6", "uniprot_id"),
    ],
)
def test_parse_alignment_line_rejects_invalid_fields(raw_line: str, reason_fragment: str) -> None:
    """Invalid header values should name the failing validation."""
    with pytest.raises(MalformedAlignmentLineError) as error_info:
        parse_alignment_line(_header(raw_line), ParseContext())

    assert reason_fragment in error_info.value.reason
