"""Unit tests for load store catalog and table reads."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from core.config import ResmapConfig
from core.errors import ResmapStoreError
from core.types import LoadManifest, ResidueMapping
from store.load_store import LoadStore
from store.staged_loader import StagedBulkLoader


def _manifest(load_id: str, residue_count: int) -> LoadManifest:
    return LoadManifest(
        load_id=load_id,
        source_path="mapping.txt",
        created_at=datetime.now(timezone.utc),
        line_count=residue_count,
        alignment_count=0,
        residue_count=residue_count,
        batch_count=1,
    )


def test_finalize_load_updates_catalog(tmp_path) -> None:
    """Finalized loads should be listed from the catalog."""
    store = LoadStore(replace(ResmapConfig.from_env(), data_root=tmp_path))
    load_id, _ = store.create_load("demo", "mapping.txt")

    store.finalize_load(_manifest(load_id, 0))

    assert [manifest.load_id for manifest in store.list_loads()] == [load_id]


def test_read_residue_mappings_roundtrips_committed_rows(tmp_path) -> None:
    """Committed loader parts should read back as typed rows."""
    store = LoadStore(replace(ResmapConfig.from_env(), data_root=tmp_path))
    load_id, load_dir = store.create_load("demo", "mapping.txt")
    loader = StagedBulkLoader(load_dir, batch_size=10)
    loader.submit_residue_mapping(ResidueMapping(1, 4, 6, " "))

    rows = store.read_residue_mappings(load_id)

    assert rows == [ResidueMapping(1, 4, 6, " ")]


def test_list_loads_requires_catalog(tmp_path) -> None:
    """Listing before any import should fail with a store error."""
    store = LoadStore(replace(ResmapConfig.from_env(), data_root=tmp_path))

    with pytest.raises(ResmapStoreError, match="catalog not found"):
        store.list_loads()


def test_resolve_manifest_rejects_unknown_load(tmp_path) -> None:
    """Unknown load ids should fail with a store error."""
    store = LoadStore(replace(ResmapConfig.from_env(), data_root=tmp_path))
    load_id, _ = store.create_load("demo", "mapping.txt")
    store.finalize_load(_manifest(load_id, 0))

    with pytest.raises(ResmapStoreError, match="not found"):
        store.resolve_manifest("missing-load")
