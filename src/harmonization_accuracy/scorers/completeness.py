"""CompletenessScorer: did the harmonized document keep the original's values?

Every scalar value of the original document is searched for in the whole
harmonized value sequence with the equivalence rules.  Matching is
existential: one harmonized value may account for any number of original
values, and positions are irrelevant.  An original document with no values
scores 100.
"""

from __future__ import annotations

import logging

import numpy as np

from harmonization_accuracy.algorithm.equivalence import (
    DEFAULT_TOLERANCE,
    ScalarInterpreter,
)
from harmonization_accuracy.result import (
    AccuracyIssue,
    AccuracyResult,
    IssueKind,
    Severity,
)
from harmonization_accuracy.scorers._common import RECOVERABLE_ERRORS
from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.extractor import extract_values

__all__ = ["CompletenessScorer"]

logger = logging.getLogger(__name__)


class CompletenessScorer:
    """Scores how many original values survive harmonization.

    Args:
        tolerance:      Absolute tolerance of the numeric equivalence rule.
        max_cache_size: Size of the per-call value-reading cache.
        builder:        JSON parser; a fresh JsonTreeBuilder when None.
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_cache_size: int = 1024,
        builder: JsonTreeBuilder | None = None,
    ) -> None:
        self._tolerance = tolerance
        self._max_cache_size = max_cache_size
        self._builder = builder if builder is not None else JsonTreeBuilder()

    def score(self, original_json: str, harmonized_json: str) -> AccuracyResult:
        """Check that each original value is present in the harmonized document.

        Returns:
            A partial AccuracyResult with ``data_completeness`` set.  A parse
            failure yields one critical ``data_loss`` issue and a score of 0.
        """
        try:
            original_values = extract_values(self._builder.parse(original_json))
            harmonized_values = extract_values(self._builder.parse(harmonized_json))
        except RECOVERABLE_ERRORS as exc:
            logger.warning("Data completeness validation failed: %s", exc)
            return AccuracyResult(
                issues=[
                    AccuracyIssue(
                        kind=IssueKind.DATA_LOSS,
                        description=f"Data completeness validation failed: {exc}",
                        severity=Severity.CRITICAL,
                    )
                ]
            )

        preserved = self._preserved_mask(original_values, harmonized_values)

        issues: list[AccuracyIssue] = []
        successes: list[str] = []
        for value, found in zip(original_values, preserved.tolist(), strict=True):
            if found:
                successes.append(f"Value '{value}' preserved in harmonization")
            else:
                issues.append(
                    AccuracyIssue(
                        kind=IssueKind.DATA_LOSS,
                        description=(
                            f"Original value '{value}' not found in harmonized data"
                        ),
                        expected_value=value,
                        severity=Severity.MEDIUM,
                    )
                )

        completeness = float(preserved.mean()) * 100.0 if preserved.size else 100.0
        logger.debug(
            "Completeness check: %d of %d original values preserved",
            int(preserved.sum()),
            preserved.size,
        )
        return AccuracyResult(
            data_completeness=completeness,
            issues=issues,
            successful_mappings=successes,
        )

    def _preserved_mask(
        self, original_values: list[str], harmonized_values: list[str]
    ) -> np.ndarray:
        """Boolean array: is ``original_values[i]`` found in the harmonized values?"""
        interpreter = ScalarInterpreter(
            max_size=self._max_cache_size, tolerance=self._tolerance
        )
        # Rule 1 (case-insensitive equality) answered by set lookup first.
        folded = {value.casefold() for value in harmonized_values}
        candidates = list(dict.fromkeys(harmonized_values))

        def found(value: str) -> bool:
            if value.casefold() in folded:
                return True
            return any(interpreter.equivalent(value, other) for other in candidates)

        return np.fromiter(
            (found(value) for value in original_values),
            dtype=bool,
            count=len(original_values),
        )
