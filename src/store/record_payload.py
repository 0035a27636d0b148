"""Shared JSONL serialization for alignment and residue rows.

This module centralizes row payload encoding for bulk table parts.
It is reused by the staged loader and the load store readers.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from core.types import AlignmentRecord, ResidueMapping


def alignment_to_payload(record: AlignmentRecord) -> dict[str, object]:
    """Serialize AlignmentRecord into JSON-safe payload."""
    return asdict(record)


def alignment_from_payload(payload: dict[str, Any]) -> AlignmentRecord:
    """Deserialize JSON payload into AlignmentRecord."""
    return AlignmentRecord(
        alignment_id=int(payload["alignment_id"]),
        pdb_id=str(payload["pdb_id"]),
        chain=str(payload["chain"]),
        uniprot_id=str(payload["uniprot_id"]),
        pdb_from=int(payload["pdb_from"]),
        pdb_to=int(payload["pdb_to"]),
        uniprot_from=int(payload["uniprot_from"]),
        uniprot_to=int(payload["uniprot_to"]),
        e_value=float(payload["e_value"]),
        identity=float(payload["identity"]),
        identity_percent=float(payload["identity_percent"]),
    )


def residue_mapping_to_payload(mapping: ResidueMapping) -> dict[str, object]:
    """Serialize ResidueMapping into JSON-safe payload."""
    return asdict(mapping)


def residue_mapping_from_payload(payload: dict[str, Any]) -> ResidueMapping:
    """Deserialize JSON payload into ResidueMapping."""
    return ResidueMapping(
        alignment_id=int(payload["alignment_id"]),
        pdb_position=int(payload["pdb_position"]),
        uniprot_position=int(payload["uniprot_position"]),
        match_symbol=str(payload["match_symbol"]),
    )


def render_payload_lines(payloads: list[dict[str, object]]) -> str:
    """Render payloads as JSONL text with a trailing newline."""
    lines = [json.dumps(payload, sort_keys=True) for payload in payloads]
    return "\n".join(lines) + "\n"


def read_payload_lines(part_path: Path) -> list[dict[str, Any]]:
    """Read payload rows from one JSONL part file.

    Args:
        part_path: Input JSONL file path.

    Returns:
        Parsed payload dictionaries in file order.

    Raises:
        ValueError: If JSONL rows are invalid.
    """
    payloads: list[dict[str, Any]] = []
    for line_number, line in enumerate(part_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        payloads.append(_parse_payload_line(line, line_number))
    return payloads


def _parse_payload_line(line: str, line_number: int) -> dict[str, Any]:
    """Parse and validate one JSONL payload row.

    Args:
        line: Raw JSONL line.
        line_number: One-based line number.

    Returns:
        Parsed payload dictionary.

    Raises:
        ValueError: If JSON row is invalid.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise ValueError(f"Invalid JSON at line {line_number}: {error.msg}") from error
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid payload at line {line_number}: expected JSON object")
    return payload
