"""Roster exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base exception for all Roster failures."""


class RosterConfigError(RosterError):
    """Raised for invalid runtime configuration."""


class RosterInputError(RosterError):
    """Raised for entry file reading and parsing failures."""


class RosterReportError(RosterError):
    """Raised when the report cannot be written to its stream."""
