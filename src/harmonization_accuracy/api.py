"""Public API functions for harmonization-accuracy.

Each call creates a fresh AccuracyValidator so that no state is carried from
one call to the next.
"""

from __future__ import annotations

from harmonization_accuracy.algorithm.config import ValidatorConfig
from harmonization_accuracy.algorithm.equivalence import (
    DEFAULT_TOLERANCE,
    values_equivalent as _values_equivalent,
)
from harmonization_accuracy.result import AccuracyResult
from harmonization_accuracy.validator import AccuracyValidator

__all__ = [
    "validate_completeness",
    "validate_field_mapping",
    "validate_harmonization",
    "validate_structure",
    "values_equivalent",
]


def validate_harmonization(
    canonical_json: str,
    original_json: str,
    harmonized_json: str,
    config: ValidatorConfig | None = None,
) -> AccuracyResult:
    """Score a harmonized document against its canonical schema and original.

    Args:
        canonical_json:  Example JSON document whose shape is the target.
        original_json:   The non-canonical source document.
        harmonized_json: The candidate produced from ``original_json``.
        config:          Scoring parameters.  ``ValidatorConfig()`` when None.

    Returns:
        A complete ``AccuracyResult``.  Malformed inputs are reported as
        critical issues, never raised.
    """
    return AccuracyValidator(config=config).validate(
        canonical_json, original_json, harmonized_json
    )


def validate_structure(canonical_json: str, harmonized_json: str) -> AccuracyResult:
    """Return the structural sub-score of ``harmonized_json``."""
    return AccuracyValidator().validate_structure(canonical_json, harmonized_json)


def validate_completeness(
    original_json: str,
    harmonized_json: str,
    config: ValidatorConfig | None = None,
) -> AccuracyResult:
    """Return the data-completeness sub-score of ``harmonized_json``."""
    return AccuracyValidator(config=config).validate_completeness(
        original_json, harmonized_json
    )


def validate_field_mapping(
    canonical_json: str,
    original_json: str,
    harmonized_json: str,
    config: ValidatorConfig | None = None,
) -> AccuracyResult:
    """Return the field-mapping sub-score of ``harmonized_json``."""
    return AccuracyValidator(config=config).validate_field_mapping(
        canonical_json, original_json, harmonized_json
    )


def values_equivalent(a: str, b: str, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if two value texts denote the same value.

    Case-insensitive equality first, then numeric equality within
    ``tolerance``, then same calendar date.
    """
    return _values_equivalent(a, b, tolerance)
