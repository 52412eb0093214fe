"""Scorers subpackage: the three independent sub-scores of a validation.

Each scorer parses its own inputs and recovers from its own parse failures,
returning a partial AccuracyResult with one critical issue instead of raising.
"""

from harmonization_accuracy.scorers.completeness import CompletenessScorer
from harmonization_accuracy.scorers.field_mapping import FieldMappingScorer
from harmonization_accuracy.scorers.structural import StructuralScorer

__all__ = ["CompletenessScorer", "FieldMappingScorer", "StructuralScorer"]
