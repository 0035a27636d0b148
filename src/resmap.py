"""Public SDK surface for Resmap.

This module provides a stable import path for library users.
It re-exports the primary client, typed records, and import helpers.
"""

from __future__ import annotations

from core.config import ResmapConfig
from core.errors import (
    MalformedAlignmentLineError,
    MalformedResidueLineError,
    NoActiveAlignmentError,
    ResmapError,
)
from core.types import AlignmentRecord, ImportOptions, ImportSummary, LoadManifest, ResidueMapping
from ingest.mapping_driver import import_residue_mappings
from ingest.progress import ImportProgressTracker, ProgressReporter
from store.bulk_sink import BulkSink
from store.load_sdk import Load, ResmapClient
from store.memory_sink import InMemoryBulkSink
from store.staged_loader import StagedBulkLoader

__all__ = [
    "AlignmentRecord",
    "BulkSink",
    "ImportOptions",
    "ImportProgressTracker",
    "ImportSummary",
    "InMemoryBulkSink",
    "Load",
    "LoadManifest",
    "MalformedAlignmentLineError",
    "MalformedResidueLineError",
    "NoActiveAlignmentError",
    "ProgressReporter",
    "ResidueMapping",
    "ResmapClient",
    "ResmapConfig",
    "ResmapError",
    "StagedBulkLoader",
    "import_residue_mappings",
]
