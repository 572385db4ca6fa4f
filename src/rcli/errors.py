"""Application-level exception types for rcli."""

from __future__ import annotations


class RcliError(Exception):
    """Base exception for rcli."""


class InvalidCommandError(RcliError, ValueError):
    """Raised when a query is not the command the parser expects."""


class ParsingError(RcliError, ValueError):
    """Raised when a command argument cannot be parsed."""


class ConfigurationError(RcliError):
    """Raised when settings or auxiliary config files are unusable."""


class StorageError(RcliError):
    """Raised when persisted state cannot be written."""
