"""Plain-text roster report.

This module renders the registration log, the unique names, and the
final scores in a fixed layout, and writes the result to a stream.
"""

from __future__ import annotations

from typing import Iterable, TextIO

from core.constants import (
    FINAL_SCORES_LABEL,
    REGISTRATION_LOG_LABEL,
    SCORE_SEPARATOR,
    UNIQUE_NAMES_LABEL,
)
from core.errors import RosterReportError
from core.logging_config import get_logger
from core.types import RosterState

_LOGGER = get_logger(__name__)


def render_report(state: RosterState) -> str:
    """Render all three roster views.

    Args:
        state: Populated roster state.

    Returns:
        Report text ending with a newline.
    """
    sections = [
        _render_name_line(REGISTRATION_LOG_LABEL, state.registrations),
        "\n",
        _render_name_line(UNIQUE_NAMES_LABEL, state.sorted_unique_names()),
        "\n",
        _render_scores(state.sorted_scores()),
    ]
    return "".join(sections)


def write_report(state: RosterState, stream: TextIO) -> None:
    """Write the rendered report and flush the stream.

    Args:
        state: Populated roster state.
        stream: Destination text stream, usually stdout.

    Raises:
        RosterReportError: If the stream rejects the write.
    """
    report_text = render_report(state)
    try:
        stream.write(report_text)
        stream.flush()
    except (OSError, ValueError) as error:
        raise RosterReportError(
            f"Failed to write roster report: {error}. Check that the output stream is open."
        ) from error
    _LOGGER.info("roster_report_written", character_count=len(report_text))


def _render_name_line(label: str, names: Iterable[str]) -> str:
    """Render a label line and one name line; each name is followed by a space."""
    name_line = "".join(f"{name} " for name in names)
    return f"{label}\n{name_line}\n"


def _render_scores(score_rows: Iterable[tuple[str, int]]) -> str:
    lines = [f"{FINAL_SCORES_LABEL}\n"]
    for name, score in score_rows:
        lines.append(f"{name}{SCORE_SEPARATOR}{score}\n")
    return "".join(lines)
