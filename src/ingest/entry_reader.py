"""Entry file readers for ingestion.

This module loads participant entries from local JSON, JSONL,
or YAML files and validates each row into a typed entry.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import (
    JSON_SUFFIXES,
    JSONL_SUFFIXES,
    SUPPORTED_INPUT_SUFFIXES,
)
from core.errors import RosterInputError
from core.logging_config import get_logger
from core.types import ParticipantEntry

_LOGGER = get_logger(__name__)


def read_entries(input_path: str | Path) -> list[ParticipantEntry]:
    """Load entries from a local file.

    Args:
        input_path: Path to a ``.json``, ``.jsonl``, ``.yaml`` or ``.yml`` file.

    Returns:
        Entries in file order.

    Raises:
        RosterInputError: If the file is missing, unsupported, or malformed.
    """
    entry_file = Path(input_path).expanduser()
    suffix = entry_file.suffix.lower()
    if suffix not in SUPPORTED_INPUT_SUFFIXES:
        raise RosterInputError(
            f"Unsupported entry file {entry_file}: "
            f"expected one of {', '.join(SUPPORTED_INPUT_SUFFIXES)}."
        )
    text = _read_text(entry_file)
    if suffix in JSONL_SUFFIXES:
        entries = _parse_jsonl_entries(entry_file, text)
    elif suffix in JSON_SUFFIXES:
        entries = _parse_entry_rows(entry_file, _load_json_payload(entry_file, text))
    else:
        entries = _parse_entry_rows(entry_file, _load_yaml_payload(entry_file, text))
    _LOGGER.info("roster_entries_loaded", path=str(entry_file), entry_count=len(entries))
    return entries


def _read_text(entry_file: Path) -> str:
    if not entry_file.exists():
        raise RosterInputError(
            f"Failed to read entries at {entry_file}: file does not exist. "
            "Provide an existing entry file."
        )
    if not entry_file.is_file():
        raise RosterInputError(
            f"Failed to read entries at {entry_file}: path is not a regular file. "
            "Provide an entry file, not a directory."
        )
    try:
        return entry_file.read_text(encoding="utf-8")
    except OSError as error:
        raise RosterInputError(
            f"Failed to read entries at {entry_file}: {error}. Check file permissions and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise RosterInputError(
            f"Failed to decode entries at {entry_file}: {error.reason} at byte {error.start}. "
            "Save the entry file as UTF-8."
        ) from error


def _load_json_payload(entry_file: Path, text: str) -> object:
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise RosterInputError(
            f"Failed to parse JSON entries at {entry_file}: {error.msg}. Fix the JSON syntax."
        ) from error


def _load_yaml_payload(entry_file: Path, text: str) -> object:
    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise RosterInputError(
            f"Failed to parse YAML entries at {entry_file}: {error}. Fix the YAML syntax."
        ) from error
    # An empty YAML document is an empty roster.
    return [] if payload is None else payload


def _parse_jsonl_entries(entry_file: Path, text: str) -> list[ParticipantEntry]:
    entries: list[ParticipantEntry] = []
    for line_number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        context = f"{entry_file}:{line_number}"
        try:
            payload = cast(object, json.loads(line))
        except json.JSONDecodeError as error:
            raise RosterInputError(
                f"Failed to parse JSONL entry at {context}: {error.msg}. Fix the JSON syntax."
            ) from error
        if not isinstance(payload, Mapping):
            raise RosterInputError(
                f"Invalid JSONL entry at {context}: expected an object with 'name' and 'score'."
            )
        entries.append(_parse_entry(payload, context))
    return entries


def _parse_entry_rows(entry_file: Path, payload: object) -> list[ParticipantEntry]:
    if not _is_sequence(payload):
        raise RosterInputError(
            f"Invalid entries at {entry_file}: expected a list, got {type(payload).__name__}."
        )
    rows = cast(Sequence[object], payload)
    return [
        _parse_entry(row, f"{entry_file} entry #{index + 1}") for index, row in enumerate(rows)
    ]


def _parse_entry(row: object, context: str) -> ParticipantEntry:
    if isinstance(row, Mapping):
        unknown_keys = sorted(str(key) for key in set(row) - {"name", "score"})
        if unknown_keys:
            raise RosterInputError(
                f"Invalid entry at {context}: unknown fields {', '.join(unknown_keys)}."
            )
        raw_name, raw_score = row.get("name"), row.get("score")
    elif _is_sequence(row) and len(cast(Sequence[object], row)) == 2:
        raw_name, raw_score = cast(Sequence[object], row)
    else:
        raise RosterInputError(
            f"Invalid entry at {context}: expected an object with 'name' and 'score' "
            "or a [name, score] pair."
        )
    return ParticipantEntry(
        name=_expect_name(raw_name, context),
        score=_expect_score(raw_score, context),
    )


def _expect_name(value: object, context: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    raise RosterInputError(f"Invalid entry at {context}: 'name' must be a non-empty string.")


def _expect_score(value: object, context: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise RosterInputError(f"Invalid entry at {context}: 'score' must be an integer.")


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
