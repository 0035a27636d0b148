"""Core constants used across Resmap modules.

This module centralizes file layout names and format markers.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".resmap")
LOADS_DIR_NAME = "loads"
CATALOG_FILE_NAME = "catalog.json"
MANIFEST_FILE_NAME = "manifest.json"
LANCE_DIR_NAME = "lance"
PART_FILE_PREFIX = "part-"
PART_FILE_SUFFIX = ".jsonl"
ALIGNMENT_TABLE_NAME = "pdb_uniprot_alignment"
RESIDUE_MAPPING_TABLE_NAME = "pdb_uniprot_residue_mapping"
BULK_TABLE_NAMES = (ALIGNMENT_TABLE_NAME, RESIDUE_MAPPING_TABLE_NAME)
DEFAULT_BATCH_SIZE = 10000
DEFAULT_PROGRESS_INTERVAL = 10000
COMMENT_PREFIX = "#"
ALIGNMENT_HEADER_PREFIX = ">"
FIELD_SEPARATOR = "\t"
ALIGNMENT_HEADER_FIELD_COUNT = 10
RESIDUE_ROW_FIELD_COUNT = 6
GAP_MATCH_SYMBOL = " "
