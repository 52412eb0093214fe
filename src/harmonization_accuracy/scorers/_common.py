"""Helpers shared by the three scorers."""

from __future__ import annotations

# Exceptions a scorer recovers from locally: malformed JSON (JSONDecodeError is
# a ValueError), a document of the wrong shape (TypeError), and documents
# nested deeper than the decoder can handle.
RECOVERABLE_ERRORS: tuple[type[BaseException], ...] = (
    ValueError,
    TypeError,
    RecursionError,
)


def percentage(part: int, total: int, empty: float) -> float:
    """``part / total * 100``, or ``empty`` when there is nothing to count."""
    if total == 0:
        return empty
    return part / total * 100.0
