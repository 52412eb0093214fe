"""StructuralScorer: does the harmonized document have the canonical shape?

Both documents are flattened to ``field path -> JSON kind`` maps and every
canonical path is looked up in the harmonized map:

- missing            -> ``structural`` issue, severity high
- present, other kind -> ``type_mismatch`` issue, severity medium
- present, same kind  -> success

The comparison is one-directional: harmonized fields that the canonical
schema does not have are never penalized.  An empty canonical schema scores
0, not 100.
"""

from __future__ import annotations

import logging

from harmonization_accuracy.result import (
    AccuracyIssue,
    AccuracyResult,
    IssueKind,
    Severity,
)
from harmonization_accuracy.scorers._common import RECOVERABLE_ERRORS, percentage
from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.flattener import flatten

__all__ = ["StructuralScorer"]

logger = logging.getLogger(__name__)


class StructuralScorer:
    """Scores the canonical-vs-harmonized field structure.

    Example::

        scorer = StructuralScorer()
        result = scorer.score('{"wellId": "x", "depth": 1}', '{"wellId": "A-1"}')
        result.structural_accuracy   # 50.0
    """

    def __init__(self, builder: JsonTreeBuilder | None = None) -> None:
        self._builder = builder if builder is not None else JsonTreeBuilder()

    def score(self, canonical_json: str, harmonized_json: str) -> AccuracyResult:
        """Compare the field structure of two documents.

        Args:
            canonical_json:  Example document with the target shape.
            harmonized_json: Candidate document.

        Returns:
            A partial AccuracyResult with ``structural_accuracy`` set.  When
            either document cannot be parsed or is not an object, the result
            holds one critical ``structural`` issue and a score of 0.
        """
        try:
            canonical_fields = flatten(self._builder.parse(canonical_json))
            harmonized_fields = flatten(self._builder.parse(harmonized_json))
        except RECOVERABLE_ERRORS as exc:
            logger.warning("Structural validation failed: %s", exc)
            return AccuracyResult(
                issues=[
                    AccuracyIssue(
                        kind=IssueKind.STRUCTURAL,
                        description=f"Structural validation failed: {exc}",
                        severity=Severity.CRITICAL,
                    )
                ]
            )

        issues: list[AccuracyIssue] = []
        successes: list[str] = []
        matched = 0

        for path, expected in canonical_fields.items():
            actual = harmonized_fields.get(path)
            if actual is None:
                issues.append(
                    AccuracyIssue(
                        kind=IssueKind.STRUCTURAL,
                        field=path,
                        description=(
                            f"Missing required field '{path}' in harmonized data"
                        ),
                        severity=Severity.HIGH,
                    )
                )
            elif actual != expected:
                issues.append(
                    AccuracyIssue(
                        kind=IssueKind.TYPE_MISMATCH,
                        field=path,
                        description=f"Type mismatch for field '{path}'",
                        expected_value=str(expected),
                        actual_value=str(actual),
                        severity=Severity.MEDIUM,
                    )
                )
            else:
                matched += 1
                successes.append(
                    f"Field '{path}' correctly mapped with type {expected}"
                )

        logger.debug(
            "Structural check: %d of %d canonical fields matched",
            matched,
            len(canonical_fields),
        )
        return AccuracyResult(
            structural_accuracy=percentage(matched, len(canonical_fields), empty=0.0),
            issues=issues,
            successful_mappings=successes,
        )
