"""Locale-tolerant numeric parsing.

Numbers are parsed by an ordered tuple of strategies; the first one that
accepts the text wins.  The default order tries the active locale's
decimal separator first and the invariant dot-decimal convention second,
so ``3,5`` works under a comma-decimal locale while ``3.5`` works
everywhere.

Accepted grammar (per strategy)::

    [whitespace] [sign] digits [sep digits] [exponent] [whitespace]

Group separators, underscores, ``nan``, ``inf`` and literals too large
for a float (``1e400``) are rejected.
"""

from __future__ import annotations

import locale
import logging
import math
import re
from collections.abc import Callable, Sequence
from functools import lru_cache

from console_tools.exceptions import InvalidNumberError, UsageError

logger = logging.getLogger(__name__)

ParseStrategy = Callable[[str], float]
"""Parses a stripped numeric literal or raises ``ValueError``."""

INVARIANT_DECIMAL_POINT = "."


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

@lru_cache(maxsize=8)
def _number_pattern(decimal_point: str) -> re.Pattern[str]:
    sep = re.escape(decimal_point)
    return re.compile(rf"[+-]?(?:\d+(?:{sep}\d*)?|{sep}\d+)(?:[eE][+-]?\d+)?")


def parse_with_decimal_point(text: str, decimal_point: str) -> float:
    """Parse *text* using *decimal_point* as the only decimal separator.

    Raises
    ------
    ValueError
        If *text* does not match the grammar for *decimal_point*, or its
        magnitude overflows to infinity (``1e400``).
    """
    candidate = text.strip()
    if not _number_pattern(decimal_point).fullmatch(candidate):
        raise ValueError(f"{candidate!r} is not a number with decimal point {decimal_point!r}")
    value = float(candidate.replace(decimal_point, INVARIANT_DECIMAL_POINT))
    if not math.isfinite(value):
        raise ValueError(f"{candidate!r} is out of range")
    return value


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def current_decimal_point() -> str:
    """Return the decimal separator of the active ``LC_NUMERIC`` locale."""
    return locale.localeconv()["decimal_point"] or INVARIANT_DECIMAL_POINT


def parse_current_locale(text: str) -> float:
    """Parse *text* under the active locale's decimal convention."""
    return parse_with_decimal_point(text, current_decimal_point())


def parse_invariant(text: str) -> float:
    """Parse *text* under the invariant dot-decimal convention."""
    return parse_with_decimal_point(text, INVARIANT_DECIMAL_POINT)


DEFAULT_STRATEGIES: tuple[ParseStrategy, ...] = (parse_current_locale, parse_invariant)


def parse_number(
    text: str,
    strategies: Sequence[ParseStrategy] = DEFAULT_STRATEGIES,
) -> float:
    """Return the value of *text* from the first strategy that accepts it.

    Raises
    ------
    InvalidNumberError
        If every strategy rejects *text*.  The individual failures are
        kept on :attr:`InvalidNumberError.attempts`.
    """
    failures: list[Exception] = []
    for strategy in strategies:
        try:
            return strategy(text)
        except ValueError as exc:
            failures.append(exc)
    raise InvalidNumberError(
        f"Invalid number: {text.strip()}",
        attempts=tuple(failures),
    )


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

_INTEGER = re.compile(r"[+-]?\d+")


def parse_positive_int(text: str, *, label: str = "<n>") -> int:
    """Parse a decimal integer that must be at least 1.

    Raises
    ------
    UsageError
        If *text* is not an integer or is below 1.
    """
    candidate = text.strip()
    if not _INTEGER.fullmatch(candidate) or int(candidate) < 1:
        raise UsageError(f"{label} must be an integer >= 1")
    return int(candidate)


# ---------------------------------------------------------------------------
# Process setup
# ---------------------------------------------------------------------------

def use_user_locale() -> str:
    """Adopt the user's numeric locale for this process.

    Returns the name of the active ``LC_NUMERIC`` locale.  When the
    environment names a locale the system does not provide, the C
    locale stays in effect.
    """
    try:
        return locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error:
        logger.debug("environment locale unavailable, keeping C numeric locale")
        return locale.setlocale(locale.LC_NUMERIC)
