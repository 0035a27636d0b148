"""Python SDK for mapping imports and load inspection.

This module exposes high-level APIs for importing mapping files,
parsing them in memory, and reading finished loads.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import ResmapConfig
from core.types import AlignmentRecord, ImportOptions, LoadManifest, ResidueMapping
from ingest.input_reader import iter_mapping_lines, resolve_mapping_path
from ingest.mapping_driver import import_residue_mappings
from ingest.pipeline import import_mapping_file
from store.load_store import LoadStore
from store.memory_sink import InMemoryBulkSink


class ResmapClient:
    """Primary SDK entry point for residue mapping workflows."""

    def __init__(self, config: ResmapConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or ResmapConfig.from_env()
        self._store = LoadStore(self._config)

    def import_file(self, options: ImportOptions) -> LoadManifest:
        """Import a mapping file into a new persisted load.

        Args:
            options: Import options.

        Returns:
            Finished load manifest.

        Raises:
            ResmapIngestError: If the source is missing or malformed.
            ResmapStoreError: If load persistence fails.
        """
        return import_mapping_file(options, self._config)

    def parse_file(self, source_path: str) -> InMemoryBulkSink:
        """Parse a mapping file into in-memory tables without persisting.

        Args:
            source_path: Local mapping file path.

        Returns:
            Sink holding committed alignment and residue rows.
        """
        sink = InMemoryBulkSink()
        sink.enable_batching()
        import_residue_mappings(iter_mapping_lines(resolve_mapping_path(source_path)), sink)
        return sink

    def list_loads(self) -> list[LoadManifest]:
        """List finished loads, oldest first."""
        return self._store.list_loads()

    def load(self, load_id: str | None = None) -> "Load":
        """Get a handle to a finished load, latest when omitted."""
        manifest = self._store.resolve_manifest(load_id)
        return Load(manifest, self._store)

    def with_data_root(self, data_root: str) -> "ResmapClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        updated_config = replace(self._config, data_root=resolved_root)
        return ResmapClient(updated_config)


class Load:
    """Handle over one finished load."""

    def __init__(self, manifest: LoadManifest, store: LoadStore) -> None:
        self.manifest = manifest
        self._store = store

    @property
    def load_id(self) -> str:
        return self.manifest.load_id

    def alignments(self) -> list[AlignmentRecord]:
        """Read committed alignment rows in import order."""
        return self._store.read_alignments(self.load_id)

    def residue_mappings(self) -> list[ResidueMapping]:
        """Read committed residue mapping rows in import order."""
        return self._store.read_residue_mappings(self.load_id)
