"""Runtime configuration model for Resmap.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_BATCH_SIZE, DEFAULT_DATA_ROOT, DEFAULT_PROGRESS_INTERVAL
from core.errors import ResmapConfigError


@dataclass(frozen=True)
class ResmapConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for bulk loads and catalogs.
        batch_size: Rows buffered per table before a batch commit.
        progress_interval: Lines between import progress log events.
    """

    data_root: Path
    batch_size: int
    progress_interval: int

    @classmethod
    def from_env(cls) -> "ResmapConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ResmapConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("RESMAP_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        batch_size = _parse_positive_int(
            "RESMAP_BATCH_SIZE", os.getenv("RESMAP_BATCH_SIZE", str(DEFAULT_BATCH_SIZE))
        )
        progress_interval = _parse_positive_int(
            "RESMAP_PROGRESS_INTERVAL",
            os.getenv("RESMAP_PROGRESS_INTERVAL", str(DEFAULT_PROGRESS_INTERVAL)),
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            batch_size=batch_size,
            progress_interval=progress_interval,
        )


def _parse_positive_int(variable_name: str, raw_value: str) -> int:
    """Parse a positive integer environment value.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        ResmapConfigError: If value is not a positive integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ResmapConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if value <= 0:
        raise ResmapConfigError(
            f"Invalid {variable_name} value: expected a positive integer, got {value}. "
            f"Set {variable_name} to 1 or greater."
        )
    return value
