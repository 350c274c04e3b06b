"""Roster CLI entry points.
This module runs ingest over the built-in or file-loaded entries
and prints the roster report to stdout.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from core.config import RosterConfig
from core.constants import SUPPORTED_INPUT_SUFFIXES
from core.logging_config import configure_logging
from core.types import ParticipantEntry
from ingest.entry_reader import read_entries
from ingest.roster_ingest import default_entries, ingest_entries
from report.roster_report import write_report


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Record participant registrations and print the roster views",
    )
    parser.add_argument(
        "--input",
        help=(
            "Optional entry file to use instead of the built-in entries "
            f"({', '.join(SUPPORTED_INPUT_SUFFIXES)}); overrides ROSTER_INPUT_PATH"
        ),
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Roster CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.input)
    configure_logging(config.log_level)
    entries = _load_entries(config)
    state = ingest_entries(entries)
    write_report(state, sys.stdout)
    return 0


def _build_config(input_path: str | None) -> RosterConfig:
    """Build config with optional input-path override.

    Args:
        input_path: Optional override path.

    Returns:
        Validated runtime config.
    """
    config = RosterConfig.from_env()
    if input_path:
        config = replace(config, input_path=Path(input_path).expanduser())
    return config


def _load_entries(config: RosterConfig) -> Sequence[ParticipantEntry]:
    if config.input_path is None:
        return default_entries()
    return read_entries(config.input_path)
