"""Core constants used across Roster modules.

This module centralizes the default entries and report labels.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ENTRY_ROWS: tuple[tuple[str, int], ...] = (
    ("Alice", 95),
    ("Bob", 80),
    ("Alice", 97),
    ("Charlie", 100),
    ("Diana", 75),
)
REGISTRATION_LOG_LABEL = "All participants (in order of registration):"
UNIQUE_NAMES_LABEL = "Unique participants:"
FINAL_SCORES_LABEL = "Final scores:"
SCORE_SEPARATOR = " : "
INPUT_PATH_ENV_VAR = "ROSTER_INPUT_PATH"
LOG_LEVEL_ENV_VAR = "ROSTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
JSON_SUFFIXES = (".json",)
JSONL_SUFFIXES = (".jsonl",)
YAML_SUFFIXES = (".yaml", ".yml")
SUPPORTED_INPUT_SUFFIXES = JSON_SUFFIXES + JSONL_SUFFIXES + YAML_SUFFIXES
