"""Numeric conversion between units of one category.

* **Linear** categories (length, weight) scale through the base unit.
* **Temperature** uses six explicit directional formulas.

A unit converted to itself is always returned unchanged.

No rounding is applied anywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from unit_converter.core.models import (
    ConversionRequest,
    ConvertedResult,
    UnitDescriptor,
)
from unit_converter.exceptions import UnsupportedConversionError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Temperature formulas
# ---------------------------------------------------------------------------

def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


def celsius_to_kelvin(value: float) -> float:
    return value + 273.15


def kelvin_to_celsius(value: float) -> float:
    return value - 273.15


def fahrenheit_to_kelvin(value: float) -> float:
    return (value + 459.67) * 5 / 9


def kelvin_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 - 459.67


TEMPERATURE_FORMULAS: dict[tuple[str, str], Callable[[float], float]] = {
    ("celsius", "fahrenheit"): celsius_to_fahrenheit,
    ("fahrenheit", "celsius"): fahrenheit_to_celsius,
    ("celsius", "kelvin"): celsius_to_kelvin,
    ("kelvin", "celsius"): kelvin_to_celsius,
    ("fahrenheit", "kelvin"): fahrenheit_to_kelvin,
    ("kelvin", "fahrenheit"): kelvin_to_fahrenheit,
}
"""Keyed by ``(source.key, target.key)``."""


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------

def convert_linear(amount: float, source: UnitDescriptor, target: UnitDescriptor) -> float:
    """Scale *amount* through the shared base unit."""
    return amount * source.scale_to_base / target.scale_to_base


def convert_temperature(amount: float, source: UnitDescriptor, target: UnitDescriptor) -> float:
    """Apply the formula for ``source -> target``.

    Raises
    ------
    UnsupportedConversionError
        If the pair differs and has no formula.
    """
    if source.key == target.key:
        return amount
    formula = TEMPERATURE_FORMULAS.get((source.key, target.key))
    if formula is None:
        raise UnsupportedConversionError(
            f"Conversion from {source.plural} to {target.plural} is impossible",
        )
    return formula(amount)


def convert(amount: float, source: UnitDescriptor, target: UnitDescriptor) -> ConvertedResult:
    """Convert *amount* and pick display labels for both sides.

    Callers are expected to pass units already validated to share a
    category (see :func:`unit_converter.core.resolver.resolve`).
    """
    if source.key == target.key:
        value = amount
    elif source.category.is_linear:
        value = convert_linear(amount, source, target)
    else:
        value = convert_temperature(amount, source, target)

    logger.debug("Converted %r %s -> %r %s", amount, source.key, value, target.key)
    return ConvertedResult(
        amount=amount,
        value=value,
        source_label=source.label_for(amount),
        target_label=target.label_for(value),
    )


def convert_request(request: ConversionRequest) -> ConvertedResult:
    """Shorthand for :func:`convert` on a validated request."""
    return convert(request.amount, request.source, request.target)
