"""AccuracyValidator: orchestrator that wires the three scorers into one report.

Architecture:
- validate() runs StructuralScorer, CompletenessScorer and FieldMappingScorer.
  Each parses its own inputs, so a malformed document only degrades the
  scorers that read it.
- Issues and successful mappings are concatenated in scorer order
  (structural, completeness, field mapping).
- The overall score is the fixed-weight sum
  ``0.4 * structural + 0.3 * completeness + 0.3 * field mapping``.
- Anything that escapes the scorers is caught here and turned into a result
  with all scores at 0 and a single ``validation_error`` issue; validate()
  never raises.
"""

from __future__ import annotations

import logging
import time

import numpy as np

from harmonization_accuracy.algorithm.config import (
    COMPLETENESS_WEIGHT,
    FIELD_MAPPING_WEIGHT,
    STRUCTURAL_WEIGHT,
    ValidatorConfig,
)
from harmonization_accuracy.result import (
    AccuracyIssue,
    AccuracyResult,
    IssueKind,
    Severity,
)
from harmonization_accuracy.scorers import (
    CompletenessScorer,
    FieldMappingScorer,
    StructuralScorer,
)
from harmonization_accuracy.tree.builder import JsonTreeBuilder

__all__ = ["AccuracyValidator"]

logger = logging.getLogger(__name__)

_WEIGHTS = np.array(
    [STRUCTURAL_WEIGHT, COMPLETENESS_WEIGHT, FIELD_MAPPING_WEIGHT], dtype=float
)


class AccuracyValidator:
    """Scores a harmonized JSON document against a canonical schema example
    and the original document it was produced from.

    The validator holds configuration only.  Every call works on fresh
    values, so one instance can serve any number of calls, including
    concurrent ones on different inputs.

    Example::

        from harmonization_accuracy import AccuracyValidator

        validator = AccuracyValidator()
        result = validator.validate(
            canonical_json='{"wellId": "W-0", "spudDate": "2020-01-01"}',
            original_json='{"well_id": "Alpha-1", "spud_dt": "01/15/2024"}',
            harmonized_json='{"wellId": "Alpha-1", "spudDate": "2024-01-15"}',
        )
        result.overall_accuracy_percentage   # 100.0
        result.field_correspondences         # {"well_id": "wellId", ...}
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        max_cache_size: int = 1024,
    ) -> None:
        """Initialise the validator.

        Args:
            config: Scoring parameters.  Defaults to ``ValidatorConfig()``.
            max_cache_size: Maximum number of value readings cached during one
                completeness check.  An infrastructure parameter, not part of
                ``ValidatorConfig`` (which governs scoring behaviour only).

        Raises:
            ValueError: If ``max_cache_size`` is less than 1.
        """
        if max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {max_cache_size}"
            raise ValueError(msg)
        self._config: ValidatorConfig = (
            config if config is not None else ValidatorConfig()
        )
        builder = JsonTreeBuilder()
        self._structural = StructuralScorer(builder=builder)
        self._completeness = CompletenessScorer(
            tolerance=self._config.numeric_tolerance,
            max_cache_size=max_cache_size,
            builder=builder,
        )
        self._field_mapping = FieldMappingScorer(config=self._config, builder=builder)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(
        self, canonical_json: str, original_json: str, harmonized_json: str
    ) -> AccuracyResult:
        """Run all three scorers and merge them into one report.

        Args:
            canonical_json:  Example document with the target shape.
            original_json:   The non-canonical source document.
            harmonized_json: The candidate produced from ``original_json``.

        Returns:
            A complete AccuracyResult.  Never raises.
        """
        t0 = time.perf_counter()
        try:
            logger.info("Starting harmonization accuracy validation")

            structural = self.validate_structure(canonical_json, harmonized_json)
            completeness = self.validate_completeness(original_json, harmonized_json)
            field_mapping = self.validate_field_mapping(
                canonical_json, original_json, harmonized_json
            )

            scores = np.array(
                [
                    structural.structural_accuracy,
                    completeness.data_completeness,
                    field_mapping.field_mapping_accuracy,
                ],
                dtype=float,
            )
            overall = float(np.clip(np.dot(_WEIGHTS, scores), 0.0, 100.0))

            result = AccuracyResult(
                overall_accuracy_percentage=overall,
                structural_accuracy=structural.structural_accuracy,
                data_completeness=completeness.data_completeness,
                field_mapping_accuracy=field_mapping.field_mapping_accuracy,
                issues=[
                    *structural.issues,
                    *completeness.issues,
                    *field_mapping.issues,
                ],
                successful_mappings=[
                    *structural.successful_mappings,
                    *completeness.successful_mappings,
                    *field_mapping.successful_mappings,
                ],
                field_correspondences=dict(field_mapping.field_correspondences),
                computation_time_ms=(time.perf_counter() - t0) * 1000.0,
            )
            logger.info(
                "Accuracy validation completed. Overall accuracy: %.1f%%",
                result.overall_accuracy_percentage,
            )
            return result
        except Exception as exc:
            logger.exception("Error during accuracy validation")
            return AccuracyResult(
                issues=[
                    AccuracyIssue(
                        kind=IssueKind.VALIDATION_ERROR,
                        description=f"Accuracy validation failed: {exc}",
                        severity=Severity.CRITICAL,
                    )
                ],
                computation_time_ms=(time.perf_counter() - t0) * 1000.0,
            )

    def validate_structure(
        self, canonical_json: str, harmonized_json: str
    ) -> AccuracyResult:
        """Structural sub-score only (see StructuralScorer)."""
        return self._structural.score(canonical_json, harmonized_json)

    def validate_completeness(
        self, original_json: str, harmonized_json: str
    ) -> AccuracyResult:
        """Completeness sub-score only (see CompletenessScorer)."""
        return self._completeness.score(original_json, harmonized_json)

    def validate_field_mapping(
        self, canonical_json: str, original_json: str, harmonized_json: str
    ) -> AccuracyResult:
        """Field-mapping sub-score only (see FieldMappingScorer)."""
        return self._field_mapping.score(
            canonical_json, original_json, harmonized_json
        )
