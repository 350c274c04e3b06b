"""Unit tests for the plain-text roster report."""

from __future__ import annotations

import io

import pytest

from core.errors import RosterReportError
from core.types import RosterState
from ingest.roster_ingest import default_entries, ingest_entries
from report.roster_report import render_report, write_report

EXPECTED_DEFAULT_REPORT = (
    "All participants (in order of registration):\n"
    "Alice Bob Alice Charlie Diana \n"
    "\n"
    "Unique participants:\n"
    "Alice Bob Charlie Diana \n"
    "\n"
    "Final scores:\n"
    "Alice : 97\n"
    "Bob : 80\n"
    "Charlie : 100\n"
    "Diana : 75\n"
)


def test_render_report_default_entries_matches_layout() -> None:
    """Default entries should render the exact three-section layout."""
    report = render_report(ingest_entries(default_entries()))

    assert report == EXPECTED_DEFAULT_REPORT


def test_render_report_empty_state_keeps_headers() -> None:
    """An empty roster should still print all three labels."""
    report = render_report(RosterState())

    assert report == (
        "All participants (in order of registration):\n"
        "\n"
        "\n"
        "Unique participants:\n"
        "\n"
        "\n"
        "Final scores:\n"
    )


def test_render_report_is_deterministic() -> None:
    """Rendering twice from fresh state should be byte-identical."""
    first = render_report(ingest_entries(default_entries()))
    second = render_report(ingest_entries(default_entries()))

    assert first.encode("utf-8") == second.encode("utf-8")


def test_write_report_writes_rendered_text() -> None:
    """Write should emit the rendered report to the stream."""
    stream = io.StringIO()

    write_report(ingest_entries(default_entries()), stream)

    assert stream.getvalue() == EXPECTED_DEFAULT_REPORT


def test_write_report_closed_stream_raises_error() -> None:
    """Writing to a closed stream should raise a report error."""
    stream = io.StringIO()
    stream.close()

    with pytest.raises(RosterReportError):
        write_report(RosterState(), stream)
