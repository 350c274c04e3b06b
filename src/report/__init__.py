"""Roster reporting.

This module renders the three roster views as plain text.
"""
