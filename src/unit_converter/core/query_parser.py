"""Structural parsing of free-form conversion queries.

A query looks like ``<amount> <source unit> <connector> <target unit>``,
e.g. ``10 km to mi`` or ``1 degree celsius in kelvin``.  Parsing is two
tiered:

1. **Structure**: the whole lower-cased line must match
   :data:`QUERY_PATTERN`.  The connector only has to *contain* ``to`` or
   ``in`` (``into`` and ``toward`` are accepted too).
2. **Routing**: the token count decides which tokens are the units.
   Here the connector is compared as a whole word.

Every function in this module is pure.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from unit_converter.core.models import ParsedQuery
from unit_converter.exceptions import QueryParseError

logger = logging.getLogger(__name__)

QUERY_PATTERN = re.compile(
    r"(-)?[0-9]+(.[0-9]+)? "
    r"([a-zA-Z]+ )+"
    r"([a-zA-Z]*to[a-zA-Z]*|[a-zA-Z]*in[a-zA-Z]*) "
    r"([a-zA-Z]+|[a-zA-Z]+ [a-zA-Z]+)",
)
"""Full-match pattern applied to the lower-cased, single-spaced line."""

CONNECTORS: frozenset[str] = frozenset({"to", "in"})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def tokenize(raw_line: str) -> list[str]:
    """Split *raw_line* on runs of whitespace."""
    return raw_line.split()


def is_well_formed(tokens: Sequence[str]) -> bool:
    """Return ``True`` when *tokens* satisfy the structural pattern."""
    return QUERY_PATTERN.fullmatch(" ".join(tokens).lower()) is not None


def parse_amount(token: str) -> float:
    """Convert the leading numeric token to a float.

    The structural pattern admits any character between the integer
    and fractional digits, so ``float`` can still fail here.  Digit
    group underscores and non-ASCII digits are rejected even though
    Python accepts them.
    """
    if "_" in token or not token.isascii():
        raise QueryParseError()
    try:
        return float(token)
    except ValueError as exc:
        raise QueryParseError() from exc


def select_unit_tokens(tokens: Sequence[str]) -> tuple[str, str]:
    """Pick ``(source, target)`` unit tokens from a well-formed query.

    * 4 tokens: ``amount unit to unit``
    * 6 tokens: ``amount word unit to word unit``
    * otherwise the source is the third token when the second-to-last
      token is exactly ``to`` or ``in``, else the second; the target is
      always the last token.
    """
    count = len(tokens)
    if count == 4:
        return tokens[1], tokens[3]
    if count == 6:
        return tokens[2], tokens[5]
    if tokens[-2] in CONNECTORS:
        return tokens[2], tokens[-1]
    return tokens[1], tokens[-1]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_query(raw_line: str) -> ParsedQuery:
    """Parse *raw_line* into an amount and two unresolved unit tokens.

    Raises
    ------
    QueryParseError
        If the line does not match the query structure or the amount
        is not a number.
    """
    tokens = tokenize(raw_line)
    if not is_well_formed(tokens):
        logger.debug("Rejected malformed query %r", raw_line)
        raise QueryParseError()

    amount = parse_amount(tokens[0])
    source_token, target_token = select_unit_tokens(tokens)
    logger.debug(
        "Parsed %r as amount=%r source=%r target=%r",
        raw_line,
        amount,
        source_token,
        target_token,
    )
    return ParsedQuery(
        amount=amount,
        source_token=source_token,
        target_token=target_token,
    )
