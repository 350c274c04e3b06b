"""Roster ingestion.

This module loads incoming entries and records them into the
registration log, unique-name set, and score mapping.
"""
