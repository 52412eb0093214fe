"""ValidatorConfig and the fixed score weights.

ValidatorConfig is a frozen (immutable) dataclass holding the tunable
scoring parameters.  The weights of the overall score are not tunable: they
are module constants and must sum to 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from harmonization_accuracy.algorithm.equivalence import DEFAULT_TOLERANCE
from harmonization_accuracy.algorithm.synonyms import SynonymTable

__all__ = [
    "COMPLETENESS_WEIGHT",
    "FIELD_MAPPING_WEIGHT",
    "STRUCTURAL_WEIGHT",
    "ValidatorConfig",
]

STRUCTURAL_WEIGHT = 0.4
COMPLETENESS_WEIGHT = 0.3
FIELD_MAPPING_WEIGHT = 0.3


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable configuration for accuracy validation.

    Attributes:
        synonyms: Field-name categories used by field-mapping scoring.
        mapping_threshold: Field-mapping score in [0, 100] at or above which
            the mapping is reported as a success instead of an issue.
        numeric_tolerance: Absolute tolerance (> 0) of the numeric
            equivalence rule.
        compute_correspondences: When True, same-category fields of the
            original and harmonized documents are paired up and reported in
            ``AccuracyResult.field_correspondences``.  Does not affect scores.
    """

    synonyms: SynonymTable = field(default_factory=SynonymTable.default)
    mapping_threshold: float = 80.0
    numeric_tolerance: float = DEFAULT_TOLERANCE
    compute_correspondences: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.mapping_threshold <= 100.0:
            msg = (
                f"mapping_threshold must be in [0, 100], got {self.mapping_threshold}"
            )
            raise ValueError(msg)
        if self.numeric_tolerance <= 0.0:
            msg = f"numeric_tolerance must be > 0, got {self.numeric_tolerance}"
            raise ValueError(msg)
