"""Catalog of finished loads.

The catalog maps each load id to its manifest payload and remembers
the most recent load. Both the catalog and per-load manifests are
replaced atomically, so readers never see a half-written file.
"""

from __future__ import annotations

import json
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from core.constants import MANIFEST_FILE_NAME
from core.errors import ResmapStoreError
from core.types import LoadManifest

_MANIFEST_INT_FIELDS = (
    "line_count",
    "alignment_count",
    "residue_count",
    "batch_count",
)


def new_load_id(load_name: str) -> str:
    """Return ``<load_name>-<utc second>-<random suffix>``."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"{load_name}-{stamp}-{uuid.uuid4().hex[:8]}"


def manifest_to_payload(manifest: LoadManifest, lance_exported: bool) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "load_id": manifest.load_id,
        "source_path": manifest.source_path,
        "created_at": manifest.created_at.isoformat(),
        "lance_exported": lance_exported,
    }
    for field_name in _MANIFEST_INT_FIELDS:
        payload[field_name] = getattr(manifest, field_name)
    return payload


def manifest_from_payload(payload: dict[str, Any]) -> LoadManifest:
    """Rebuild a manifest from its stored payload.

    Raises:
        ResmapStoreError: If a field is missing or has the wrong type.
    """
    try:
        counts = {field_name: int(payload[field_name]) for field_name in _MANIFEST_INT_FIELDS}
        return LoadManifest(
            load_id=str(payload["load_id"]),
            source_path=str(payload["source_path"]),
            created_at=datetime.fromisoformat(str(payload["created_at"])),
            **counts,
        )
    except (KeyError, TypeError, ValueError) as error:
        raise ResmapStoreError(
            f"Invalid load manifest entry {payload!r}: {error}. "
            "Rerun the import to rebuild the load."
        ) from error


def write_load_manifest(load_dir: Path, manifest: LoadManifest, lance_exported: bool) -> Path:
    """Write ``manifest.json`` into a load directory."""
    manifest_path = load_dir / MANIFEST_FILE_NAME
    _replace_json(manifest_path, manifest_to_payload(manifest, lance_exported))
    return manifest_path


class LoadCatalog:
    """JSON catalog keyed by load id."""

    def __init__(self, catalog_path: Path) -> None:
        self._catalog_path = catalog_path

    @property
    def path(self) -> Path:
        return self._catalog_path

    def record(self, manifest: LoadManifest, lance_exported: bool) -> None:
        """Add or replace one load entry and mark it as latest."""
        if self._catalog_path.exists():
            entries = self._read_entries()
        else:
            entries = {}
        entries[manifest.load_id] = manifest_to_payload(manifest, lance_exported)
        _replace_json(
            self._catalog_path,
            {"latest_load": manifest.load_id, "loads": entries},
        )

    def manifests(self) -> list[LoadManifest]:
        """Return every recorded load, oldest first.

        Raises:
            ResmapStoreError: If the catalog is missing or unreadable.
        """
        manifests = [manifest_from_payload(entry) for entry in self._read_entries().values()]
        return sorted(manifests, key=lambda manifest: manifest.created_at)

    def _read_entries(self) -> dict[str, dict[str, Any]]:
        if not self._catalog_path.exists():
            raise ResmapStoreError(
                f"Load catalog not found at {self._catalog_path}. "
                "Import a mapping file before listing loads."
            )
        try:
            payload = json.loads(self._catalog_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as error:
            raise ResmapStoreError(
                f"Failed to parse load catalog at {self._catalog_path}: {error.msg}. "
                "Delete the catalog and rerun the imports."
            ) from error
        entries = payload.get("loads") if isinstance(payload, dict) else None
        if not isinstance(entries, dict):
            raise ResmapStoreError(
                f"Load catalog at {self._catalog_path} has no 'loads' mapping. "
                "Delete the catalog and rerun the imports."
            )
        return entries


def _replace_json(target_path: Path, payload: dict[str, Any]) -> None:
    temp_path = target_path.with_name(target_path.name + ".tmp")
    try:
        temp_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        os.replace(temp_path, target_path)
    except OSError as error:
        raise ResmapStoreError(
            f"Failed to write {target_path}: {error}. "
            "Check write permissions and available disk space."
        ) from error
