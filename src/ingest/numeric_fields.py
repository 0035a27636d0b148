"""Strict numeric coercion for mapping file columns.

Only plain ASCII forms are accepted: no surrounding whitespace, no
underscore separators, no ``inf`` or ``nan`` spellings.
"""

from __future__ import annotations

import math
import re

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def parse_strict_int(raw_value: str) -> int:
    """Parse an optionally negative run of ASCII digits.

    Raises:
        ValueError: If the value is not a plain integer.
    """
    if not _INTEGER_PATTERN.fullmatch(raw_value):
        raise ValueError(f"not an integer: {raw_value!r}")
    return int(raw_value)


def parse_strict_float(raw_value: str) -> float:
    """Parse a plain decimal or scientific-notation number.

    Raises:
        ValueError: If the value is malformed or overflows to infinity.
    """
    if not _DECIMAL_PATTERN.fullmatch(raw_value):
        raise ValueError(f"not a number: {raw_value!r}")
    value = float(raw_value)
    if not math.isfinite(value):
        raise ValueError(f"not finite: {raw_value!r}")
    return value
