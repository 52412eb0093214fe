"""Harmonization accuracy - fidelity scoring for harmonized JSON documents."""

from __future__ import annotations

import logging

from harmonization_accuracy.algorithm.config import ValidatorConfig
from harmonization_accuracy.algorithm.synonyms import SynonymTable
from harmonization_accuracy.api import (
    validate_completeness,
    validate_field_mapping,
    validate_harmonization,
    validate_structure,
    values_equivalent,
)
from harmonization_accuracy.result import (
    AccuracyIssue,
    AccuracyResult,
    IssueKind,
    Severity,
)
from harmonization_accuracy.validator import AccuracyValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AccuracyIssue",
    "AccuracyResult",
    "AccuracyValidator",
    "IssueKind",
    "Severity",
    "SynonymTable",
    "ValidatorConfig",
    "validate_completeness",
    "validate_field_mapping",
    "validate_harmonization",
    "validate_structure",
    "values_equivalent",
]
