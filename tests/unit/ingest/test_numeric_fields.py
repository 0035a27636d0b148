"""Unit tests for strict numeric column parsing."""

from __future__ import annotations

import pytest

from ingest.numeric_fields import parse_strict_float, parse_strict_int


def test_parse_strict_int_accepts_signed_digits() -> None:
    """Plain and negative digit runs should parse."""
    assert parse_strict_int("42") == 42
    assert parse_strict_int("-3") == -3


@pytest.mark.parametrize("raw_value", ["1_0", " 32 ", "+5", "", "٣", "1.0"])
def test_parse_strict_int_rejects_loose_forms(raw_value: str) -> None:
    """Forms int() tolerates should not be accepted."""
    with pytest.raises(ValueError, match="not an integer"):
        parse_strict_int(raw_value)


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [("29.0", 29.0), ("2e-10", 2e-10), (".5", 0.5), ("7.", 7.0), ("-1.5E3", -1500.0)],
)
def test_parse_strict_float_accepts_decimal_forms(raw_value: str, expected: float) -> None:
    """Decimal and scientific spellings should parse."""
    assert parse_strict_float(raw_value) == expected


@pytest.mark.parametrize("raw_value", ["2_9.0", " 1.0", "nan", "inf", "", "."])
def test_parse_strict_float_rejects_loose_forms(raw_value: str) -> None:
    """Underscores, padding and special spellings should be rejected."""
    with pytest.raises(ValueError, match="not a number"):
        parse_strict_float(raw_value)


def test_parse_strict_float_rejects_overflow() -> None:
    """Values that overflow to infinity should be rejected."""
    with pytest.raises(ValueError, match="not finite"):
        parse_strict_float("1e999")
