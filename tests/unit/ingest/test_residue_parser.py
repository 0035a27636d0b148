"""Unit tests for residue mapping row parsing."""

from __future__ import annotations

import pytest

from core.errors import MalformedResidueLineError, NoActiveAlignmentError
from core.types import ResidueMapping
from ingest.line_classifier import ResidueRowLine
from ingest.parse_context import ParseContext
from ingest.residue_parser import parse_residue_line


def _row(raw_line: str, line_number: int = 2) -> ResidueRowLine:
    return ResidueRowLine(line_number=line_number, raw_line=raw_line)


def test_parse_residue_line_reads_positions_and_match() -> None:
    """Residue tokens should lose their type letter and parse as positions."""
    mapping = parse_residue_line(_row("1a37\tA\tM1\t1433B_HUMAN\tM3\tM"), ParseContext().advance(1))

    assert mapping == ResidueMapping(
        alignment_id=1, pdb_position=1, uniprot_position=3, match_symbol="M"
    )


def test_parse_residue_line_uses_space_for_empty_match() -> None:
    """An empty match column should become a space symbol."""
    mapping = parse_residue_line(_row("1a37\tA\tM1\t1433B_HUMAN\tM3\t"), ParseContext().advance(1))

    assert mapping.match_symbol == " "


def test_parse_residue_line_tags_active_alignment() -> None:
    """Rows should attach to the most recently assigned alignment."""
    context = ParseContext().advance(1).advance(2)

    mapping = parse_residue_line(_row("1a38\tB\tL5\t1433Z_HUMAN\tL10\tL"), context)

    assert mapping.alignment_id == 2


def test_parse_residue_line_accepts_negative_pdb_numbering() -> None:
    """PDB residue numbers below zero should parse."""
    mapping = parse_residue_line(_row("1abc\tA\tG-2\tP12345\tG1\tG"), ParseContext().advance(1))

    assert mapping.pdb_position == -2


def test_parse_residue_line_requires_active_alignment() -> None:
    """A row without a preceding header should be rejected."""
    with pytest.raises(NoActiveAlignmentError) as error_info:
        parse_residue_line(_row("1a37\tA\tM1\t1433B_HUMAN\tM3\tM", line_number=1), ParseContext())

    assert error_info.value.line_number == 1


@pytest.mark.parametrize(
    "raw_line",
    [
        "1a37\tA\tM1\t1433B_HUMAN\tM3",
        "1a37\tA\tMx\t1433B_HUMAN\tM3\tM",
        "1a37\tA\tM1\t1433B_HUMAN\tM\tM",
        "1a37\tA\t\t1433B_HUMAN\tM3\tM",
        "1a37\tA\tA12A\t1433B_HUMAN\tM3\tM",
        "1a37\tA\tM1_0\t1433B_HUMAN\tM3\tM",
        "1a37\tA\tM 7\t1433B_HUMAN\tM3\tM",
        "1a37\tA\tM1\t1433B_HUMAN\tM+3\tM",
    ],
)
def test_parse_residue_line_rejects_malformed_rows(raw_line: str) -> None:
    """Rows with missing columns or non-numeric positions should fail."""
    with pytest.raises(MalformedResidueLineError) as error_info:
        parse_residue_line(_row(raw_line), ParseContext().advance(1))

    assert error_info.value.raw_line == raw_line
