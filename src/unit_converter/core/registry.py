"""Static unit table and case-insensitive alias lookup.

The registry is populated once and never mutated afterwards, so a
single instance can be shared freely between callers.

Base units
----------
* Length: meter
* Weight: gram
* Temperature: no base unit, converted with explicit pairwise formulas
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from unit_converter.core.models import UNKNOWN_UNIT, Category, UnitDescriptor
from unit_converter.exceptions import RegistryError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Unit table
# ---------------------------------------------------------------------------

def _length(key: str, aliases: tuple[str, ...], scale: float) -> UnitDescriptor:
    return UnitDescriptor(key=key, aliases=aliases, category=Category.LENGTH, scale_to_base=scale)


def _weight(key: str, aliases: tuple[str, ...], scale: float) -> UnitDescriptor:
    return UnitDescriptor(key=key, aliases=aliases, category=Category.WEIGHT, scale_to_base=scale)


def _temperature(key: str, aliases: tuple[str, ...]) -> UnitDescriptor:
    return UnitDescriptor(key=key, aliases=aliases, category=Category.TEMPERATURE)


METER = _length("meter", ("m", "meter", "meters"), 1.0)
KILOMETER = _length("kilometer", ("km", "kilometer", "kilometers"), 1000.0)
CENTIMETER = _length("centimeter", ("cm", "centimeter", "centimeters"), 0.01)
MILLIMETER = _length("millimeter", ("mm", "millimeter", "millimeters"), 0.001)
MILE = _length("mile", ("mi", "mile", "miles"), 1609.35)
YARD = _length("yard", ("yd", "yard", "yards"), 0.9144)
FOOT = _length("foot", ("ft", "foot", "feet"), 0.3048)
INCH = _length("inch", ("in", "inch", "inches"), 0.0254)

GRAM = _weight("gram", ("g", "gram", "grams"), 1.0)
KILOGRAM = _weight("kilogram", ("kg", "kilogram", "kilograms"), 1000.0)
MILLIGRAM = _weight("milligram", ("mg", "milligram", "milligrams"), 0.001)
POUND = _weight("pound", ("lb", "pound", "pounds"), 453.592)
OUNCE = _weight("ounce", ("oz", "ounce", "ounces"), 28.3495)

CELSIUS = _temperature(
    "celsius",
    ("c", "dc", "celsius", "degree Celsius", "degrees Celsius"),
)
FAHRENHEIT = _temperature(
    "fahrenheit",
    ("f", "df", "fahrenheit", "degree Fahrenheit", "degrees Fahrenheit"),
)
KELVIN = _temperature(
    "kelvin",
    ("k", "kelvin", "kelvins", "degree Kelvin", "degrees Kelvin"),
)

BUILTIN_UNITS: tuple[UnitDescriptor, ...] = (
    METER,
    KILOMETER,
    CENTIMETER,
    MILLIMETER,
    MILE,
    YARD,
    FOOT,
    INCH,
    GRAM,
    KILOGRAM,
    MILLIGRAM,
    POUND,
    OUNCE,
    CELSIUS,
    FAHRENHEIT,
    KELVIN,
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class UnitRegistry:
    """Read-only alias index over a fixed set of units.

    Parameters
    ----------
    units:
        Unit descriptors in display order.  Every alias must be unique
        across the whole table (compared case-insensitively).

    Raises
    ------
    RegistryError
        If two units share an alias or a unit has no aliases.
    """

    def __init__(self, units: Iterable[UnitDescriptor] = BUILTIN_UNITS) -> None:
        self._units: tuple[UnitDescriptor, ...] = tuple(units)
        self._index: dict[str, UnitDescriptor] = {}

        for unit in self._units:
            if not unit.is_known:
                raise RegistryError(f"Unit {unit.key!r} has no aliases.")
            for alias in unit.aliases:
                folded = alias.lower()
                owner = self._index.get(folded)
                if owner is not None:
                    raise RegistryError(
                        f"Alias {alias!r} is shared by {owner.key!r} and {unit.key!r}.",
                    )
                self._index[folded] = unit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def lookup(self, token: str) -> UnitDescriptor:
        """Return the unit whose alias equals *token*, ignoring case.

        Never raises; unknown tokens yield :data:`UNKNOWN_UNIT`.
        """
        unit = self._index.get(token.lower(), UNKNOWN_UNIT)
        if not unit.is_known:
            logger.debug("No unit matches %r", token)
        return unit

    def units(self) -> tuple[UnitDescriptor, ...]:
        """All units in registration order."""
        return self._units

    def by_category(self) -> dict[Category, tuple[UnitDescriptor, ...]]:
        """Group units by category, preserving registration order."""
        grouped: dict[Category, list[UnitDescriptor]] = {}
        for unit in self._units:
            grouped.setdefault(unit.category, []).append(unit)
        return {category: tuple(members) for category, members in grouped.items()}

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.lower() in self._index

    def __iter__(self) -> Iterator[UnitDescriptor]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)


DEFAULT_REGISTRY = UnitRegistry()
"""Registry built from :data:`BUILTIN_UNITS` at import time."""
