"""
Exception types raised by FieldRoot.

All errors derive from FieldRootError so callers (the CLI, or any UI
layer built on top of the engine) can catch one type and re-prompt.

- ValidationError: a required field was blank on add/edit
- FormatError: a bulk-import table has bad headers or no data rows
- StorageReadError: the persisted root library could not be decoded;
  handled inside the store and never surfaced to callers
"""

from __future__ import annotations


class FieldRootError(Exception):
    """Base class for all FieldRoot errors."""


class ValidationError(FieldRootError):
    """A required field was blank after trimming.

    Attributes:
        field: Name of the offending field (e.g. "chinese", "english")
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} must not be blank")


class FormatError(FieldRootError):
    """A bulk-import table could not be used.

    The message is meant to be shown to the user as-is.
    """


class StorageReadError(FieldRootError):
    """The persisted overlay is missing, unreadable or malformed."""
