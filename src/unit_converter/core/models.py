"""Domain models for unit-converter.

All models are **frozen** dataclasses: immutable value objects with
little behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------

class Category(enum.Enum):
    """Conversion class of a unit.

    The value is the label used in user-facing messages.  The Weight
    label keeps its trailing space so messages match the legacy output
    byte for byte.
    """

    LENGTH = "Length"
    WEIGHT = "Weight "
    TEMPERATURE = "Temperature"
    UNKNOWN = ""

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_linear(self) -> bool:
        """Whether conversions are a plain scale through a base unit."""
        return self in (Category.LENGTH, Category.WEIGHT)


# ---------------------------------------------------------------------------
# Unit descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UnitDescriptor:
    """A known unit and every notation that refers to it.

    ``aliases`` is ordered from abbreviation to full plural form.  The
    last alias is the plural display name and the second-to-last is the
    singular display name.
    """

    key: str
    """Stable identifier (e.g. ``"kilometer"``)."""

    aliases: tuple[str, ...]
    """All recognised notations, matched case-insensitively."""

    category: Category
    """Category the unit belongs to."""

    scale_to_base: float = 0.0
    """Factor to the category base unit (meter, gram); 0.0 for temperature."""

    @property
    def is_known(self) -> bool:
        return bool(self.aliases)

    @property
    def symbol(self) -> str:
        return self.aliases[0] if self.aliases else ""

    @property
    def singular(self) -> str:
        return self.aliases[-2] if len(self.aliases) >= 2 else self.symbol

    @property
    def plural(self) -> str:
        return self.aliases[-1] if self.aliases else ""

    def label_for(self, value: float) -> str:
        """Return the singular name for exactly ``1.0``, the plural otherwise."""
        return self.singular if value == 1.0 else self.plural


UNKNOWN_UNIT = UnitDescriptor(key="", aliases=(), category=Category.UNKNOWN)
"""Sentinel returned by registry lookups that match nothing."""


# ---------------------------------------------------------------------------
# Per-query values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Structurally valid query with its unit tokens still unresolved."""

    amount: float
    source_token: str
    target_token: str


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """Validated query whose units are known and share a category."""

    amount: float
    source: UnitDescriptor
    target: UnitDescriptor


@dataclass(frozen=True, slots=True)
class ConvertedResult:
    """Outcome of a conversion, ready for display."""

    amount: float
    value: float
    source_label: str
    target_label: str

    def describe(self) -> str:
        """Render the sentence ``"<amount> <unit> is <value> <unit>"``."""
        return (
            f"{self.amount!r} {self.source_label} is "
            f"{self.value!r} {self.target_label}"
        )
