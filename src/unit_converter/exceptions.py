"""Custom exception hierarchy for unit-converter.

All exceptions that cross layer boundaries must inherit from
:class:`UnitConverterError`.  Query-level failures are subclasses of
:class:`ConversionError`; they are recoverable and their message is the
exact sentence shown to the user.

Hierarchy
---------
UnitConverterError
├── ConversionError
│   ├── QueryParseError
│   ├── UnknownUnitError
│   ├── NegativeAmountError
│   ├── CategoryMismatchError
│   └── UnsupportedConversionError
├── RegistryError
└── MissingDependencyError
"""

from __future__ import annotations


class UnitConverterError(Exception):
    """Base exception for all unit-converter errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Query handling --------------------------------------------------------

class ConversionError(UnitConverterError):
    """Base class for failures of a single conversion query."""


class QueryParseError(ConversionError):
    """Raised when a raw line does not match the query pattern."""

    def __init__(self, message: str = "Parse Error", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class UnknownUnitError(ConversionError):
    """Raised when a unit token does not resolve in the registry."""


class NegativeAmountError(ConversionError):
    """Raised when a length or weight amount is below zero."""


class CategoryMismatchError(ConversionError):
    """Raised when source and target units belong to different categories."""


class UnsupportedConversionError(ConversionError):
    """Raised when no formula exists for a same-category unit pair."""


# --- Registry --------------------------------------------------------------

class RegistryError(UnitConverterError):
    """Raised when a unit table violates the registry invariants."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(UnitConverterError):
    """Raised when an optional runtime dependency is not available."""
