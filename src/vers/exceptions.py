"""Typed failures raised by version, constraint and vers URI parsing."""

from __future__ import annotations


class VersError(ValueError):
    """Base class for all parsing failures; carries the offending text."""

    def __init__(self, message: str, value: str = ""):
        super().__init__(message)
        self.value = value


class InvalidVersion(VersError):
    """Raised when a version string has no recognizable structure."""


class InvalidConstraint(VersError):
    """Raised when a constraint clause or native range is malformed."""


class InvalidURI(VersError):
    """Raised when a string is not of the form ``vers:<scheme>/<constraints>``."""
