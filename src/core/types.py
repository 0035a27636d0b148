"""Shared typed models.

This module defines immutable data models used by ingest, store,
SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AlignmentRecord:
    """One PDB chain to UniProt entry sequence alignment.

    Attributes:
        alignment_id: Sequential one-based id assigned during import.
        pdb_id: PDB entry identifier without the header marker.
        chain: PDB chain identifier.
        uniprot_id: UniProt entry name or accession.
        pdb_from: First aligned PDB residue number.
        pdb_to: Last aligned PDB residue number.
        uniprot_from: First aligned UniProt residue number.
        uniprot_to: Last aligned UniProt residue number.
        e_value: Alignment e-value.
        identity: Number of identical residues.
        identity_percent: Identity as a percentage of aligned length.
    """

    alignment_id: int
    pdb_id: str
    chain: str
    uniprot_id: str
    pdb_from: int
    pdb_to: int
    uniprot_from: int
    uniprot_to: int
    e_value: float
    identity: float
    identity_percent: float


@dataclass(frozen=True)
class ResidueMapping:
    """One residue-level correspondence inside an alignment.

    Attributes:
        alignment_id: Id of the alignment this residue belongs to.
        pdb_position: PDB residue number.
        uniprot_position: UniProt residue number.
        match_symbol: Consensus symbol; a space marks a mismatch or gap.
    """

    alignment_id: int
    pdb_position: int
    uniprot_position: int
    match_symbol: str


@dataclass(frozen=True)
class ImportOptions:
    """Import command options.

    Attributes:
        source_path: Local PDB-UniProt residue mapping file.
        load_name: Logical name used as the load id prefix.
        batch_size: Optional override of the configured batch size.
        export_lance: Export committed tables to Lance after import.
    """

    source_path: str
    load_name: str = "pdb-uniprot"
    batch_size: int | None = None
    export_lance: bool = False


@dataclass(frozen=True)
class ImportSummary:
    """Counters produced by one pass over a mapping stream.

    Attributes:
        line_count: Lines read, including blank and comment lines.
        alignment_count: Alignment records submitted to the sink.
        residue_count: Residue mappings submitted to the sink.
        comment_count: Comment lines skipped.
        blank_count: Blank lines skipped.
    """

    line_count: int
    alignment_count: int
    residue_count: int
    comment_count: int
    blank_count: int


@dataclass(frozen=True)
class LoadManifest:
    """Metadata for one finished bulk load.

    Attributes:
        load_id: Unique load identifier.
        source_path: Mapping file the load was read from.
        created_at: UTC completion timestamp.
        line_count: Lines read from the source.
        alignment_count: Alignment rows committed.
        residue_count: Residue mapping rows committed.
        batch_count: Number of batch commits across both tables.
    """

    load_id: str
    source_path: str
    created_at: datetime
    line_count: int
    alignment_count: int
    residue_count: int
    batch_count: int
