"""Public SDK surface for Roster.

This module provides a stable import path for library users.
It re-exports the typed models and the ingest and report operations.
"""

from __future__ import annotations

from core.config import RosterConfig
from core.errors import RosterConfigError, RosterError, RosterInputError, RosterReportError
from core.types import ParticipantEntry, RosterState
from ingest.entry_reader import read_entries
from ingest.roster_ingest import default_entries, ingest_entries, record_entry
from report.roster_report import render_report, write_report

__all__ = [
    "ParticipantEntry",
    "RosterConfig",
    "RosterConfigError",
    "RosterError",
    "RosterInputError",
    "RosterReportError",
    "RosterState",
    "default_entries",
    "ingest_entries",
    "read_entries",
    "record_entry",
    "render_report",
    "write_report",
]
