"""Core / service layer: pure parsing, validation and conversion.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from unit_converter.core.conversion import convert, convert_request
from unit_converter.core.conversion_service import ConversionService, handle_query
from unit_converter.core.models import (
    UNKNOWN_UNIT,
    Category,
    ConversionRequest,
    ConvertedResult,
    ParsedQuery,
    UnitDescriptor,
)
from unit_converter.core.protocols import UnitLookup
from unit_converter.core.query_parser import parse_query
from unit_converter.core.registry import DEFAULT_REGISTRY, UnitRegistry
from unit_converter.core.resolver import resolve

__all__: list[str] = [
    "Category",
    "ConversionRequest",
    "ConversionService",
    "ConvertedResult",
    "DEFAULT_REGISTRY",
    "ParsedQuery",
    "UNKNOWN_UNIT",
    "UnitDescriptor",
    "UnitLookup",
    "UnitRegistry",
    "convert",
    "convert_request",
    "handle_query",
    "parse_query",
    "resolve",
]
