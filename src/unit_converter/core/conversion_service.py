"""Core query service: turns one raw line into one response.

This is the central service consumed by the CLI layer.  It depends on a
:class:`~unit_converter.core.protocols.UnitLookup` injected at
construction time, keeping the pipeline independent of any particular
unit table.

Guarantees
----------
* Pure orchestration: no I/O, no ``print()``.
* Only :class:`~unit_converter.exceptions.ConversionError` subclasses
  escape :meth:`ConversionService.run_query`.
* No state is kept between queries.
"""

from __future__ import annotations

import logging

from unit_converter.core.conversion import convert_request
from unit_converter.core.models import ConvertedResult
from unit_converter.core.protocols import UnitLookup
from unit_converter.core.query_parser import parse_query
from unit_converter.core.registry import DEFAULT_REGISTRY
from unit_converter.core.resolver import resolve
from unit_converter.exceptions import ConversionError

logger = logging.getLogger(__name__)


class ConversionService:
    """Stateless parse → resolve → convert pipeline.

    Parameters
    ----------
    registry:
        Any object satisfying the :class:`UnitLookup` protocol.
    """

    def __init__(self, registry: UnitLookup = DEFAULT_REGISTRY) -> None:
        self._registry: UnitLookup = registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_query(self, raw_line: str) -> ConvertedResult:
        """Convert the query in *raw_line*.

        Raises
        ------
        QueryParseError
            If the line is not a well-formed query.
        UnknownUnitError
            If a unit token is not recognised.
        NegativeAmountError
            If a length or weight amount is negative.
        CategoryMismatchError
            If the units belong to different categories.
        """
        query = parse_query(raw_line)
        request = resolve(query, self._registry)
        return convert_request(request)

    def handle_query(self, raw_line: str) -> str:
        """Return the success sentence, or the error message on failure."""
        try:
            return self.run_query(raw_line).describe()
        except ConversionError as exc:
            logger.debug("Query %r failed: %s", raw_line, type(exc).__name__)
            return str(exc)


_default_service = ConversionService()


def handle_query(raw_line: str) -> str:
    """Answer *raw_line* using the built-in unit table."""
    return _default_service.handle_query(raw_line)
