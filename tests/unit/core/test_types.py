"""Unit tests for roster state ordering helpers."""

from __future__ import annotations

from core.types import RosterState


def test_sorted_views_are_lexicographic() -> None:
    """Sorted helpers should order by name, uppercase before lowercase."""
    state = RosterState(
        registrations=["bob", "Bob", "alice"],
        unique_names={"bob", "Bob", "alice"},
        scores={"bob": 1, "Bob": 2, "alice": 3},
    )

    assert state.sorted_unique_names() == ["Bob", "alice", "bob"]
    assert state.sorted_scores() == [("Bob", 2), ("alice", 3), ("bob", 1)]
