"""Exception hierarchy shared by every layer."""

from __future__ import annotations


class Mp3RepairError(Exception):
    """Base class for errors raised deliberately by mp3repair."""


class ProgrammerError(Mp3RepairError):
    """An internal invariant was breached, e.g. a flag value is missing or mistyped."""
