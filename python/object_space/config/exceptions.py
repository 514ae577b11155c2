"""
Custom exceptions for object-space configuration.

This module defines the exception hierarchy for configuration errors:
- ConfigError: Base exception for all config errors
- ResourceError: The configuration source could not be read or written
- ConfigSyntaxError: The source is not well-formed TOML
- SchemaError: The TOML parsed but does not describe a valid object space
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ConfigError",
    "ConfigSyntaxError",
    "ResourceError",
    "SchemaError",
    "SchemaErrorKind",
]


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    pass


class ResourceError(ConfigError):
    """
    Raised when the configuration source cannot be read or written.

    The underlying ``OSError`` is available as ``__cause__``.

    Parameters
    ----------
    path
        Location that could not be accessed.
    reason
        Human-readable description of the failure.
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        path
            Location that could not be accessed.
        reason
            Human-readable description of the failure.
        """
        super().__init__(f"Could not access '{path}': {reason}")
        self.path = path
        self.reason = reason


class ConfigSyntaxError(ConfigError):
    """
    Raised when the configuration text is not well-formed TOML.

    Parameters
    ----------
    reason
        Diagnostic from the TOML parser (or the text decoder).
    lineno
        1-based line of the error, if known.
    colno
        1-based column of the error, if known.
    """

    def __init__(
        self, reason: str, lineno: int | None = None, colno: int | None = None
    ) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        reason
            Parser diagnostic.
        lineno
            Line of the error, if known.
        colno
            Column of the error, if known.
        """
        super().__init__(f"Invalid TOML: {reason}")
        self.reason = reason
        self.lineno = lineno
        self.colno = colno


class SchemaErrorKind(Enum):
    """Categories of schema violation."""

    MISSING_FIELD = "missing field"
    UNKNOWN_FIELD = "unknown field"
    UNKNOWN_VARIANT = "unknown variant"
    MISSING_DISCRIMINATOR = "missing discriminator"
    TYPE_MISMATCH = "type mismatch"
    INVALID_VALUE = "invalid value"


class SchemaError(ConfigError):
    """
    Raised when parsed configuration does not conform to the schema.

    Parameters
    ----------
    kind
        Category of the violation.
    path
        Dotted path of the offending field (empty for the document root).
    detail
        Human-readable description of the problem.
    """

    def __init__(self, kind: SchemaErrorKind, path: str, detail: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        kind
            Category of the violation.
        path
            Dotted path of the offending field.
        detail
            Description of the problem.
        """
        location = f" (at '{path}')" if path else ""
        super().__init__(f"{kind.value}: {detail}{location}")
        self.kind = kind
        self.path = path
        self.detail = detail
