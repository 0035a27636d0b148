"""Unit tests for mapping file readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import ResmapIngestError
from ingest.input_reader import count_lines, iter_mapping_lines, resolve_mapping_path
from tests.fixture_paths import fixture_path


def test_count_lines_includes_blank_and_comment_lines() -> None:
    """Line count should cover every physical line."""
    assert count_lines(fixture_path("mapping/valid_mapping.txt")) == 13


def test_iter_mapping_lines_keeps_trailing_empty_field() -> None:
    """Streaming should preserve the empty match column before the newline."""
    lines = list(iter_mapping_lines(fixture_path("mapping/valid_mapping.txt")))

    assert lines[6] == "1a37\tA\tS4\t1433B_HUMAN\tN6\t\n"


def test_resolve_mapping_path_raises_for_missing_path(tmp_path: Path) -> None:
    """Resolver should fail when the mapping file is missing."""
    missing_path = tmp_path / "does-not-exist.txt"

    with pytest.raises(ResmapIngestError):
        resolve_mapping_path(str(missing_path))

    assert missing_path.exists() is False


def test_resolve_mapping_path_raises_for_directory(tmp_path: Path) -> None:
    """Resolver should reject directories."""
    with pytest.raises(ResmapIngestError, match="not a file"):
        resolve_mapping_path(str(tmp_path))


def test_iter_mapping_lines_drops_byte_order_mark(tmp_path: Path) -> None:
    """A BOM-prefixed file should still start with the header marker."""
    mapping_path = tmp_path / "bom_mapping.txt"
    mapping_path.write_text(">1a37\tA\n1a37\tA\tM1\n", encoding="utf-8-sig")

    lines = list(iter_mapping_lines(mapping_path))

    assert lines[0].startswith(">1a37") and count_lines(mapping_path) == 2
