"""Bulk load store and catalog.

This module owns load directories, per-load manifests, and the
catalog of finished loads. It reads committed table parts back as
typed alignment and residue rows for the SDK.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TypeVar

from core.config import ResmapConfig
from core.constants import (
    ALIGNMENT_TABLE_NAME,
    CATALOG_FILE_NAME,
    LOADS_DIR_NAME,
    RESIDUE_MAPPING_TABLE_NAME,
)
from core.errors import ResmapStoreError
from core.logging_config import get_logger
from core.types import AlignmentRecord, LoadManifest, ResidueMapping
from store.load_catalog import LoadCatalog, new_load_id, write_load_manifest
from store.record_payload import (
    alignment_from_payload,
    read_payload_lines,
    residue_mapping_from_payload,
)
from store.staged_loader import list_table_parts

_LOGGER = get_logger(__name__)

_RowT = TypeVar("_RowT")


class LoadStore:
    """Filesystem load store.

    This class owns the loads root, per-load manifests,
    and catalog updates for finished imports.
    """

    def __init__(self, config: ResmapConfig) -> None:
        """Initialize load store from config.

        Args:
            config: Runtime configuration.
        """
        self._loads_root = config.data_root / LOADS_DIR_NAME
        self._loads_root.mkdir(parents=True, exist_ok=True)
        self._catalog = LoadCatalog(self._loads_root / CATALOG_FILE_NAME)

    def create_load(self, load_name: str, source_path: str) -> tuple[str, Path]:
        """Create an empty directory for a new load.

        Args:
            load_name: Logical load name.
            source_path: Mapping file being imported.

        Returns:
            Pair of load id and load directory.
        """
        load_id = new_load_id(load_name)
        load_dir = self._loads_root / load_id
        load_dir.mkdir(parents=True, exist_ok=False)
        _LOGGER.debug("load_created", load_id=load_id, source_path=source_path)
        return load_id, load_dir

    def finalize_load(self, manifest: LoadManifest, lance_exported: bool = False) -> None:
        """Record a finished load in its manifest and the catalog.

        Args:
            manifest: Finished load manifest.
            lance_exported: Whether Lance tables were written.
        """
        load_dir = self.load_dir(manifest.load_id)
        write_load_manifest(load_dir, manifest, lance_exported)
        self._catalog.record(manifest, lance_exported)
        _LOGGER.info(
            "load_finalized",
            load_id=manifest.load_id,
            alignment_count=manifest.alignment_count,
            residue_count=manifest.residue_count,
            batch_count=manifest.batch_count,
            lance_exported=lance_exported,
        )

    def list_loads(self) -> list[LoadManifest]:
        """List finished loads sorted by creation time.

        Raises:
            ResmapStoreError: If the catalog does not exist.
        """
        return self._catalog.manifests()

    def resolve_manifest(self, load_id: str | None = None) -> LoadManifest:
        """Resolve a load manifest, latest when ``load_id`` is omitted.

        Raises:
            ResmapStoreError: If no loads exist or the id is unknown.
        """
        manifests = self.list_loads()
        if not manifests:
            raise ResmapStoreError(
                "No finished loads exist. Import a mapping file before reading loads."
            )
        if load_id is None:
            return manifests[-1]
        for manifest in manifests:
            if manifest.load_id == load_id:
                return manifest
        raise ResmapStoreError(
            f"Load '{load_id}' not found. Use list_loads to discover valid load ids."
        )

    def read_alignments(self, load_id: str) -> list[AlignmentRecord]:
        """Read committed alignment rows of one load in commit order."""
        return self._read_table(load_id, ALIGNMENT_TABLE_NAME, alignment_from_payload)

    def read_residue_mappings(self, load_id: str) -> list[ResidueMapping]:
        """Read committed residue mapping rows of one load in commit order."""
        return self._read_table(load_id, RESIDUE_MAPPING_TABLE_NAME, residue_mapping_from_payload)

    def load_dir(self, load_id: str) -> Path:
        """Return an existing load directory.

        Raises:
            ResmapStoreError: If the load directory is missing.
        """
        load_dir = self._loads_root / load_id
        if not load_dir.exists():
            raise ResmapStoreError(
                f"Missing load directory for {load_id} at {load_dir}. "
                "Rerun the import to recreate it."
            )
        return load_dir

    def _read_table(
        self,
        load_id: str,
        table_name: str,
        from_payload: Callable[[dict[str, Any]], _RowT],
    ) -> list[_RowT]:
        load_dir = self.load_dir(load_id)
        rows: list[_RowT] = []
        for part_path in list_table_parts(load_dir, table_name):
            try:
                payloads = read_payload_lines(part_path)
                rows.extend(from_payload(payload) for payload in payloads)
            except (OSError, ValueError, KeyError) as error:
                raise ResmapStoreError(
                    f"Failed to read {table_name} part at {part_path}: {error}. "
                    "Rerun the import to rebuild the load."
                ) from error
        return rows
