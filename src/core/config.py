"""Runtime configuration model for Roster.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    INPUT_PATH_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RosterConfigError


@dataclass(frozen=True)
class RosterConfig:
    """Validated runtime configuration.

    Attributes:
        input_path: Optional entry file; the built-in entries are used when unset.
        log_level: Minimum level for structured log events.
    """

    input_path: Path | None
    log_level: str

    @classmethod
    def from_env(cls) -> "RosterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RosterConfigError: If environment values are invalid.
        """
        input_path_value = os.getenv(INPUT_PATH_ENV_VAR, "").strip()
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            input_path=Path(input_path_value).expanduser() if input_path_value else None,
            log_level=_parse_log_level(log_level_value),
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lowercased level name.

    Raises:
        RosterConfigError: If value is not a supported level.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    raise RosterConfigError(
        f"Invalid {LOG_LEVEL_ENV_VAR} value: "
        f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
        f"Set {LOG_LEVEL_ENV_VAR} to a supported level."
    )
