"""Exception classes for settings loading and persistence.

This module defines the error hierarchy raised while reading, validating
and writing the persisted settings document. Absence of the document or of
individual keys is never an error; these exceptions cover documents that
exist but cannot be used, and storage that refuses a write.
"""

from __future__ import annotations


class SettingsError(Exception):
    """Base error for the settings subsystem.

    Carries a human-readable message and, when available, the exception
    that triggered it.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The underlying exception, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Exception | None = original_error


class FormatError(SettingsError):
    """Raised when a present value has the wrong shape.

    Covers malformed color strings, unknown language codes and keys whose
    JSON type does not match the document schema.
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize with the offending document key.

        Args:
            message: Description of the format problem
            key: Dotted document key (e.g. ``ui.base``), if known
            original_error: The underlying exception, if any
        """
        super().__init__(f"{key}: {message}" if key else message, original_error)
        self.key = key


class ParseError(SettingsError):
    """Raised when the settings document is not well-formed JSON."""

    pass


class StorageError(SettingsError, OSError):
    """Raised when the storage backend fails to read, write or delete a file."""

    def __init__(
        self, message: str, path: str, original_error: Exception | None = None
    ) -> None:
        """Initialize with the device path that failed.

        Args:
            message: Description of the storage failure
            path: Device path of the file involved
            original_error: The underlying exception, if any
        """
        SettingsError.__init__(self, f"{message}: {path}", original_error)
        self.path = path
