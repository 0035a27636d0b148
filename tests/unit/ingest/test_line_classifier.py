"""Unit tests for mapping line classification."""

from __future__ import annotations

from ingest.line_classifier import (
    AlignmentHeaderLine,
    CommentLine,
    ResidueRowLine,
    classify_line,
    is_blank_line,
    split_tab_fields,
    strip_line_terminator,
)


def test_classify_line_detects_comment() -> None:
    """Lines starting with # should classify as comments."""
    classified = classify_line("# header", 1)

    assert isinstance(classified, CommentLine)


def test_classify_line_detects_alignment_header() -> None:
    """Lines starting with > should open an alignment block."""
    classified = classify_line(">1a37\tA\t1433B_HUMAN", 3)

    assert classified == AlignmentHeaderLine(line_number=3, raw_line=">1a37\tA\t1433B_HUMAN")


def test_classify_line_defaults_to_residue_row() -> None:
    """Any other line should classify as a residue row."""
    classified = classify_line("1a37\tA\tM1\t1433B_HUMAN\tM3\tM", 4)

    assert isinstance(classified, ResidueRowLine)


def test_is_blank_line_accepts_whitespace_only() -> None:
    """Whitespace-only lines should be treated as blank."""
    assert is_blank_line(" \t ") and not is_blank_line("x")


def test_split_tab_fields_keeps_trailing_empty_fields() -> None:
    """Tab split should keep trailing empty columns."""
    fields = split_tab_fields("1a37\tA\tM1\t1433B_HUMAN\tM3\t")

    assert fields == ["1a37", "A", "M1", "1433B_HUMAN", "M3", ""]


def test_strip_line_terminator_keeps_trailing_tab() -> None:
    """Only newline characters should be removed from line ends."""
    assert strip_line_terminator("a\tb\t\r\n") == "a\tb\t"
