"""FieldMappingScorer: do renamed fields keep their semantic category?

Harmonization renames fields ("spud_dt" -> "spudDate").  The exact spelling is
free, but a field recognizable as a *date* in the original should reappear as
something recognizable as a *date* in the harmonized document.

Every leaf member name of the original document is categorized against the
synonym table.  A categorized field counts as covered when any member name of
the harmonized document falls in the same category, whether that member holds
a scalar, an array or an object.  Uncategorized fields are left out of the
ratio; when nothing is categorized the score is 100.

Alongside the score, same-category fields are paired one-to-one by name
similarity and reported as field correspondences.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from harmonization_accuracy.algorithm.config import ValidatorConfig
from harmonization_accuracy.algorithm.matcher import pair_by_similarity
from harmonization_accuracy.algorithm.similarity import name_similarity
from harmonization_accuracy.result import (
    AccuracyIssue,
    AccuracyResult,
    IssueKind,
    Severity,
)
from harmonization_accuracy.scorers._common import RECOVERABLE_ERRORS, percentage
from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.flattener import (
    MemberField,
    leaf_fields,
    member_fields,
)

__all__ = ["FieldMappingScorer"]

logger = logging.getLogger(__name__)


class FieldMappingScorer:
    """Scores field renamings against the configured synonym categories.

    Args:
        config:  Supplies the synonym table, the success threshold and whether
            correspondences are computed.  ``ValidatorConfig()`` when None.
        builder: JSON parser; a fresh JsonTreeBuilder when None.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        builder: JsonTreeBuilder | None = None,
    ) -> None:
        self._config = config if config is not None else ValidatorConfig()
        self._builder = builder if builder is not None else JsonTreeBuilder()

    def score(
        self, canonical_json: str, original_json: str, harmonized_json: str
    ) -> AccuracyResult:
        """Score the renaming of categorized original fields.

        All three documents must parse.  The canonical schema takes no part
        in the ratio itself.

        Returns:
            A partial AccuracyResult with ``field_mapping_accuracy`` and
            ``field_correspondences`` set.  A parse failure yields one
            critical ``field_mapping`` issue and a score of 0.
        """
        try:
            self._builder.parse(canonical_json)
            original = leaf_fields(self._builder.parse(original_json))
            harmonized = member_fields(self._builder.parse(harmonized_json))
        except RECOVERABLE_ERRORS as exc:
            logger.warning("Field mapping validation failed: %s", exc)
            return AccuracyResult(
                issues=[
                    AccuracyIssue(
                        kind=IssueKind.FIELD_MAPPING,
                        description=f"Field mapping validation failed: {exc}",
                        severity=Severity.CRITICAL,
                    )
                ]
            )

        original_by_category = self._group_by_category(original)
        harmonized_by_category = self._group_by_category(harmonized)

        categorized = sum(len(fields) for fields in original_by_category.values())
        covered = sum(
            len(fields)
            for category, fields in original_by_category.items()
            if category in harmonized_by_category
        )
        score = percentage(covered, categorized, empty=100.0)
        threshold = self._config.mapping_threshold
        logger.debug(
            "Field mapping check: %d of %d categorized fields covered (%.1f%%)",
            covered,
            categorized,
            score,
        )

        issues: list[AccuracyIssue] = []
        successes: list[str] = []
        if score >= threshold:
            successes.append(
                "Field mapping patterns follow expected conventions "
                f"({covered}/{categorized} categorized fields covered)"
            )
        else:
            missing = sorted(
                set(original_by_category) - set(harmonized_by_category),
                key=self._config.synonyms.categories.index,
            )
            issues.append(
                AccuracyIssue(
                    kind=IssueKind.FIELD_MAPPING,
                    description=(
                        "Field mapping accuracy below expected threshold; "
                        f"no harmonized field for: {', '.join(missing)}"
                    ),
                    expected_value=f"{threshold:g}",
                    actual_value=f"{score:.1f}",
                    severity=Severity.MEDIUM,
                )
            )

        correspondences: dict[str, str] = {}
        if self._config.compute_correspondences:
            correspondences = self._correspondences(
                original_by_category, harmonized_by_category
            )

        return AccuracyResult(
            field_mapping_accuracy=score,
            issues=issues,
            successful_mappings=successes,
            field_correspondences=correspondences,
        )

    def _group_by_category(
        self, fields: list[MemberField]
    ) -> dict[str, list[MemberField]]:
        grouped: dict[str, list[MemberField]] = defaultdict(list)
        for member in fields:
            category = self._config.synonyms.categorize(member.name)
            if category is not None:
                grouped[category].append(member)
        return dict(grouped)

    def _correspondences(
        self,
        original_by_category: dict[str, list[MemberField]],
        harmonized_by_category: dict[str, list[MemberField]],
    ) -> dict[str, str]:
        """Pair same-category fields one-to-one by normalized name similarity."""
        correspondences: dict[str, str] = {}
        for category, left in original_by_category.items():
            right = harmonized_by_category.get(category, [])
            pairs = pair_by_similarity(
                [field.name for field in left],
                [field.name for field in right],
                name_similarity,
            )
            for i, j in pairs:
                correspondences[left[i].path] = right[j].path
                logger.debug(
                    "Field '%s' corresponds to '%s' (%s)",
                    left[i].path,
                    right[j].path,
                    category,
                )
        return correspondences
