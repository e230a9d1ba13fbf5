"""Protocols (interfaces) consumed by the core layer.

Services depend on these contracts rather than on
:class:`~unit_converter.core.registry.UnitRegistry` directly, so any
alias table with a compatible ``lookup`` can be injected.
"""

from __future__ import annotations

from typing import Protocol

from unit_converter.core.models import UnitDescriptor


class UnitLookup(Protocol):
    """Contract for unit alias tables.

    Any object that implements :meth:`lookup` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def lookup(self, token: str) -> UnitDescriptor:
        """Resolve *token* to a unit.

        Matching must be case-insensitive and exact.  Implementations
        must return :data:`~unit_converter.core.models.UNKNOWN_UNIT`
        instead of raising when nothing matches.
        """
        ...  # pragma: no cover
