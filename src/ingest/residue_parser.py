"""Residue mapping row parsing.

Rows are tab-separated; columns 2 and 4 hold residue tokens such as
``M1`` (residue type letter followed by residue number) and column 5
holds the match symbol, empty for mismatches and gaps.
"""

from __future__ import annotations

from core.constants import GAP_MATCH_SYMBOL, RESIDUE_ROW_FIELD_COUNT
from core.errors import MalformedResidueLineError, NoActiveAlignmentError
from core.types import ResidueMapping
from ingest.line_classifier import ResidueRowLine, split_tab_fields
from ingest.numeric_fields import parse_strict_int
from ingest.parse_context import ParseContext

_PDB_RESIDUE_INDEX = 2
_UNIPROT_RESIDUE_INDEX = 4
_MATCH_INDEX = 5


def parse_residue_line(line: ResidueRowLine, context: ParseContext) -> ResidueMapping:
    """Parse a residue row into a mapping for the active alignment.

    Args:
        line: Classified residue row.
        context: Current alignment identity state.

    Returns:
        Parsed residue mapping tagged with the active alignment id.

    Raises:
        NoActiveAlignmentError: If no alignment header preceded the row.
        MalformedResidueLineError: If columns are missing or residue
            tokens do not carry a residue number.
    """
    if context.active_alignment_id is None:
        raise NoActiveAlignmentError(
            line.line_number,
            line.raw_line,
            "no alignment header precedes this residue row",
        )
    fields = split_tab_fields(line.raw_line)
    if len(fields) < RESIDUE_ROW_FIELD_COUNT:
        raise MalformedResidueLineError(
            line.line_number,
            line.raw_line,
            f"expected at least {RESIDUE_ROW_FIELD_COUNT} tab-separated fields, "
            f"found {len(fields)}",
        )
    match_field = fields[_MATCH_INDEX]
    return ResidueMapping(
        alignment_id=context.active_alignment_id,
        pdb_position=_residue_position(line, "pdb residue", fields[_PDB_RESIDUE_INDEX]),
        uniprot_position=_residue_position(
            line, "uniprot residue", fields[_UNIPROT_RESIDUE_INDEX]
        ),
        match_symbol=match_field[0] if match_field else GAP_MATCH_SYMBOL,
    )


def _residue_position(line: ResidueRowLine, field_name: str, token: str) -> int:
    """Strip the residue type character and parse the residue number."""
    if len(token) < 2:
        raise MalformedResidueLineError(
            line.line_number,
            line.raw_line,
            f"{field_name} token {token!r} has no residue number",
        )
    try:
        return parse_strict_int(token[1:])
    except ValueError as error:
        raise MalformedResidueLineError(
            line.line_number,
            line.raw_line,
            f"{field_name} token {token!r} does not end in an integer position",
        ) from error
