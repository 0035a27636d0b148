"""Line classification for PDB-UniProt residue mapping files.

A mapping stream interleaves two record shapes: alignment headers
starting with ``>`` and residue rows. Comment lines start with ``#``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import ALIGNMENT_HEADER_PREFIX, COMMENT_PREFIX, FIELD_SEPARATOR


@dataclass(frozen=True)
class CommentLine:
    """Comment line carrying no record."""

    line_number: int
    raw_line: str


@dataclass(frozen=True)
class AlignmentHeaderLine:
    """Line that opens a new alignment block."""

    line_number: int
    raw_line: str


@dataclass(frozen=True)
class ResidueRowLine:
    """Line contributing one residue mapping to the open alignment."""

    line_number: int
    raw_line: str


ClassifiedLine = Union[CommentLine, AlignmentHeaderLine, ResidueRowLine]


def classify_line(raw_line: str, line_number: int) -> ClassifiedLine:
    """Classify one non-blank line by its leading character.

    Args:
        raw_line: Line content without its terminator.
        line_number: One-based line number.

    Returns:
        Tagged line variant.
    """
    if raw_line.startswith(COMMENT_PREFIX):
        return CommentLine(line_number=line_number, raw_line=raw_line)
    if raw_line.startswith(ALIGNMENT_HEADER_PREFIX):
        return AlignmentHeaderLine(line_number=line_number, raw_line=raw_line)
    return ResidueRowLine(line_number=line_number, raw_line=raw_line)


def is_blank_line(raw_line: str) -> bool:
    """Return whether a line holds only whitespace."""
    return not raw_line.strip()


def strip_line_terminator(line: str) -> str:
    """Remove a trailing newline without touching tab fields."""
    return line.rstrip("\r\n")


def split_tab_fields(raw_line: str) -> list[str]:
    """Split a line on tabs, keeping trailing empty fields.

    ``"a\\tb\\t"`` yields ``["a", "b", ""]``; an empty match column
    must survive the split.
    """
    return raw_line.split(FIELD_SEPARATOR)
