"""Ingest-and-record stage.

This module applies entries to a roster state in arrival order.
Repeated names keep one set member and the most recent score.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_ENTRY_ROWS
from core.logging_config import get_logger
from core.types import ParticipantEntry, RosterState

_LOGGER = get_logger(__name__)


def default_entries() -> tuple[ParticipantEntry, ...]:
    """Return the built-in entries used when no input file is given."""
    return tuple(ParticipantEntry(name=name, score=score) for name, score in DEFAULT_ENTRY_ROWS)


def record_entry(state: RosterState, entry: ParticipantEntry) -> None:
    """Record one entry into all three containers.

    Args:
        state: Roster state mutated in place.
        entry: Incoming registration.
    """
    state.registrations.append(entry.name)
    state.unique_names.add(entry.name)
    state.scores[entry.name] = entry.score


def ingest_entries(
    entries: Iterable[ParticipantEntry],
    state: RosterState | None = None,
) -> RosterState:
    """Record entries in order and return the populated state.

    Args:
        entries: Ordered registrations.
        state: Optional existing state to extend.

    Returns:
        The populated roster state.
    """
    roster_state = state if state is not None else RosterState()
    for entry in entries:
        record_entry(roster_state, entry)
    _LOGGER.info(
        "roster_ingest_completed",
        registration_count=len(roster_state.registrations),
        unique_count=len(roster_state.unique_names),
        score_count=len(roster_state.scores),
    )
    return roster_state
