"""Unit resolution and request validation.

Checks run in a fixed order and the first failure wins:

1. both tokens resolve to known units;
2. length and weight amounts are not negative;
3. both units share a category.
"""

from __future__ import annotations

import logging

from unit_converter.core.models import (
    Category,
    ConversionRequest,
    ParsedQuery,
    UnitDescriptor,
)
from unit_converter.core.protocols import UnitLookup
from unit_converter.exceptions import (
    CategoryMismatchError,
    NegativeAmountError,
    UnknownUnitError,
)

logger = logging.getLogger(__name__)

UNKNOWN_PLACEHOLDER = "???"
"""Shown in place of a unit token that did not resolve."""


def _display_name(unit: UnitDescriptor) -> str:
    return unit.plural if unit.is_known else UNKNOWN_PLACEHOLDER


def _impossible(source: UnitDescriptor, target: UnitDescriptor) -> str:
    return (
        f"Conversion from {_display_name(source)} "
        f"to {_display_name(target)} is impossible"
    )


def check_units_known(source: UnitDescriptor, target: UnitDescriptor) -> None:
    """Raise :class:`UnknownUnitError` unless both units resolved."""
    if not (source.is_known and target.is_known):
        raise UnknownUnitError(
            _impossible(source, target),
            hint="Run 'unit-converter units' to list the supported units.",
        )


def check_amount(amount: float, source: UnitDescriptor) -> None:
    """Raise :class:`NegativeAmountError` for negative non-temperature amounts."""
    if amount < 0 and source.category is not Category.TEMPERATURE:
        raise NegativeAmountError(f"{source.category.label} shouldn't be negative")


def check_same_category(source: UnitDescriptor, target: UnitDescriptor) -> None:
    """Raise :class:`CategoryMismatchError` when the categories differ."""
    if source.category is not target.category:
        raise CategoryMismatchError(_impossible(source, target))


def resolve(query: ParsedQuery, registry: UnitLookup) -> ConversionRequest:
    """Resolve the tokens of *query* and validate the resulting request.

    Raises
    ------
    UnknownUnitError
        If either token is not a known alias.
    NegativeAmountError
        If a length or weight amount is below zero.
    CategoryMismatchError
        If the units belong to different categories.
    """
    source = registry.lookup(query.source_token)
    target = registry.lookup(query.target_token)
    logger.debug(
        "Resolved %r -> %r and %r -> %r",
        query.source_token,
        source.key,
        query.target_token,
        target.key,
    )

    check_units_known(source, target)
    check_amount(query.amount, source)
    check_same_category(source, target)

    return ConversionRequest(amount=query.amount, source=source, target=target)
