"""Mapping import orchestration.

This module coordinates path validation, line pre-counting, the
single-pass import driver, staged bulk commits, and load finalization.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from core.config import ResmapConfig
from core.constants import ALIGNMENT_TABLE_NAME, RESIDUE_MAPPING_TABLE_NAME
from core.errors import ResmapConfigError
from core.logging_config import get_logger
from core.types import ImportOptions, ImportSummary, LoadManifest
from ingest.input_reader import count_lines, iter_mapping_lines, resolve_mapping_path
from ingest.mapping_driver import import_residue_mappings
from ingest.progress import ImportProgressTracker
from store.lance_tables import ensure_lance_available, export_load_to_lance
from store.load_store import LoadStore
from store.staged_loader import StagedBulkLoader

_LOGGER = get_logger(__name__)


class MappingImportRunner:
    """Runner for one mapping file import into a new bulk load."""

    def __init__(self, options: ImportOptions, config: ResmapConfig) -> None:
        self._options = options
        self._config = config
        self._store = LoadStore(config)

    def run(self) -> LoadManifest:
        """Execute the import and return the finished load manifest."""
        mapping_path = resolve_mapping_path(self._options.source_path)
        batch_size = _resolve_batch_size(self._options, self._config)
        if self._options.export_lance:
            ensure_lance_available()
        load_id, load_dir = self._store.create_load(self._options.load_name, str(mapping_path))
        loader = StagedBulkLoader(load_dir, batch_size)
        loader.enable_batching()
        progress = ImportProgressTracker(
            source_path=str(mapping_path),
            log_interval_lines=self._config.progress_interval,
        )
        progress.set_total(count_lines(mapping_path))
        summary = import_residue_mappings(iter_mapping_lines(mapping_path), loader, progress)
        manifest = _build_manifest(load_id, mapping_path, summary, loader)
        lance_exported = self._export_if_requested(manifest.load_id, load_dir)
        self._store.finalize_load(manifest, lance_exported)
        _log_import_completion(self._options, summary, manifest)
        return manifest

    def _export_if_requested(self, load_id: str, load_dir: Path) -> bool:
        if not self._options.export_lance:
            return False
        export_load_to_lance(
            load_dir,
            self._store.read_alignments(load_id),
            self._store.read_residue_mappings(load_id),
        )
        return True


def import_mapping_file(options: ImportOptions, config: ResmapConfig) -> LoadManifest:
    """Import a PDB-UniProt residue mapping file into a new load.

    Args:
        options: Import request options.
        config: Runtime configuration.

    Returns:
        Finished load manifest.

    Raises:
        ResmapIngestError: If the source is missing or a line is malformed.
        ResmapConfigError: If the batch size override is not positive.
        ResmapStoreError: If a batch commit or catalog write fails.
        ResmapDependencyError: If Lance export is requested without lance.
    """
    runner = MappingImportRunner(options, config)
    return runner.run()


def _resolve_batch_size(options: ImportOptions, config: ResmapConfig) -> int:
    """Pick the per-import batch size override or the configured default."""
    if options.batch_size is None:
        return config.batch_size
    if options.batch_size <= 0:
        raise ResmapConfigError(
            f"Invalid batch size {options.batch_size}. "
            "Pass a positive integer row count per bulk commit."
        )
    return options.batch_size


def _build_manifest(
    load_id: str,
    mapping_path: Path,
    summary: ImportSummary,
    loader: StagedBulkLoader,
) -> LoadManifest:
    """Build the manifest from the rows the loader actually committed."""
    return LoadManifest(
        load_id=load_id,
        source_path=str(mapping_path),
        created_at=datetime.now(timezone.utc),
        line_count=summary.line_count,
        alignment_count=loader.committed_rows(ALIGNMENT_TABLE_NAME),
        residue_count=loader.committed_rows(RESIDUE_MAPPING_TABLE_NAME),
        batch_count=loader.batch_count,
    )


def _log_import_completion(
    options: ImportOptions,
    summary: ImportSummary,
    manifest: LoadManifest,
) -> None:
    """Log import completion with contextual metadata."""
    _LOGGER.info(
        "import_completed",
        load_id=manifest.load_id,
        source_path=manifest.source_path,
        line_count=summary.line_count,
        alignment_count=summary.alignment_count,
        residue_count=summary.residue_count,
        comment_count=summary.comment_count,
        blank_count=summary.blank_count,
        batch_count=manifest.batch_count,
        export_lance=options.export_lance,
    )
