"""Shared error types for pltyper."""

from __future__ import annotations


class PltyperError(Exception):
    """Base error type for pltyper."""


class InputError(PltyperError, ValueError):
    """Raised when user input is invalid or unsupported."""


class MappingError(InputError):
    """Raised when a type mapping specification is malformed or unresolvable."""


class UnknownElementError(InputError):
    """Raised by strict typers for atoms whose element has no category."""


class DimensionError(PltyperError, ValueError):
    """Raised when a caller supplied buffer does not match a typer's size."""
