"""Shared typed models.

This module defines the entry model and the mutable roster state
shared by the ingest and report layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParticipantEntry:
    """One incoming registration.

    Attributes:
        name: Participant name.
        score: Score reported with this registration.
    """

    name: str
    score: int


@dataclass
class RosterState:
    """Containers populated by ingest.

    Attributes:
        registrations: Every ingested name in arrival order, duplicates kept.
        unique_names: Distinct names seen so far.
        scores: Latest score per name.
    """

    registrations: list[str] = field(default_factory=list)
    unique_names: set[str] = field(default_factory=set)
    scores: dict[str, int] = field(default_factory=dict)

    def sorted_unique_names(self) -> list[str]:
        """Return distinct names in lexicographic order."""
        return sorted(self.unique_names)

    def sorted_scores(self) -> list[tuple[str, int]]:
        """Return (name, score) pairs in lexicographic name order."""
        return sorted(self.scores.items())
