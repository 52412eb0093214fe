"""Scalar equivalence: decides whether two value texts denote the same value.

Rules, first applicable wins:

1. Case-insensitive string equality.
2. Both read as real numbers: equal iff ``|a - b| < tolerance``.
3. Both read as calendar dates or date-times: equal iff same calendar date.
4. Otherwise not equivalent.

A rule is *applicable* when both sides can be read the way it needs; an
applicable rule decides the outcome even when it says "not equal", so
``"42"`` vs ``"43"`` never falls through to date parsing.

This is a heuristic.  False negatives are expected and accepted.  A text that
reads as a number is never read as a date, so ``"20240115"`` is the number
20,240,115 and not the fifteenth of January.

Dates are compared as written: ``2024-01-15T23:30:00-05:00`` falls on the 15th
regardless of the offset.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime

from cachetools import LRUCache

__all__ = [
    "DEFAULT_TOLERANCE",
    "ScalarInterpreter",
    "ScalarReading",
    "read_scalar",
    "readings_equivalent",
    "values_equivalent",
]

DEFAULT_TOLERANCE = 0.001

# Optional sign, integer part with optional comma thousands groups, optional
# fraction, optional exponent.  A bare fraction (".5") is accepted.
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)

# Tried in order after datetime.fromisoformat has rejected the text.
_DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%d-%b-%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
)


@dataclass(frozen=True, slots=True)
class ScalarReading:
    """The numeric and calendar interpretations of one value text.

    Attributes:
        text:   The original text.
        folded: Case-folded text used by the string-equality rule.
        number: Float value when the text reads as a finite number, else None.
        day:    Calendar date when the text reads as a date/date-time, else None.
    """

    text: str
    folded: str
    number: float | None
    day: date | None


def _parse_number(text: str) -> float | None:
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        return None
    value = float(stripped.replace(",", ""))
    return value if math.isfinite(value) else None


def _parse_day(text: str) -> date | None:
    stripped = text.strip()
    if not stripped:
        return None
    try:
        return datetime.fromisoformat(stripped).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(stripped, fmt).date()
        except ValueError:
            continue
    return None


def read_scalar(text: str) -> ScalarReading:
    """Interpret ``text`` once for all equivalence rules."""
    number = _parse_number(text)
    day = None if number is not None else _parse_day(text)
    return ScalarReading(text=text, folded=text.casefold(), number=number, day=day)


def readings_equivalent(
    a: ScalarReading, b: ScalarReading, tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Apply the equivalence rules to two pre-computed readings."""
    if a.folded == b.folded:
        return True
    if a.number is not None and b.number is not None:
        return abs(a.number - b.number) < tolerance
    if a.day is not None and b.day is not None:
        return a.day == b.day
    return False


def values_equivalent(a: str, b: str, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if the two value texts denote the same value.

    Args:
        a, b:      Value texts as produced by ``extract_values``.
        tolerance: Absolute tolerance of the numeric rule.

    Example::

        values_equivalent("42", "42.0")                          # True
        values_equivalent("2024-01-15", "2024-01-15T00:00:00Z")  # True
        values_equivalent("2024-01-15", "2024-01-16")            # False
    """
    return readings_equivalent(read_scalar(a), read_scalar(b), tolerance)


class ScalarInterpreter:
    """Memoizing front end for ``read_scalar``.

    Completeness scoring compares every original value against every
    harmonized value, so each text would otherwise be re-parsed once per
    comparison.  One interpreter is created per scoring call; entries never
    outlive it.

    Args:
        max_size:  Maximum number of readings held.  The least-recently-used
            reading is evicted silently when exceeded.
        tolerance: Absolute tolerance of the numeric rule.
    """

    def __init__(
        self, max_size: int = 1024, tolerance: float = DEFAULT_TOLERANCE
    ) -> None:
        self._cache: LRUCache[str, ScalarReading] = LRUCache(maxsize=max_size)
        self._tolerance = tolerance

    @property
    def curr_size(self) -> int:
        """The number of readings currently cached."""
        return int(self._cache.currsize)

    def read(self, text: str) -> ScalarReading:
        reading = self._cache.get(text)
        if reading is None:
            reading = read_scalar(text)
            self._cache[text] = reading
        return reading

    def equivalent(self, a: str, b: str) -> bool:
        return readings_equivalent(self.read(a), self.read(b), self._tolerance)
