"""Result types for accuracy validation.

This module provides the report returned by ``AccuracyValidator.validate()``
and by each individual scorer, together with the issue taxonomy.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["AccuracyIssue", "AccuracyResult", "IssueKind", "Severity"]


class Severity(StrEnum):
    """How much an issue degrades the harmonization.

    Members are ordered by rank, ``LOW < MEDIUM < HIGH < CRITICAL``, not
    alphabetically as plain strings would be.  Comparisons against a plain
    string convert it first, so ``Severity.HIGH > "medium"`` holds.  A string
    that names no severity is not ranked, and the comparison returns
    NotImplemented.
    """

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()
    CRITICAL = auto()

    @property
    def rank(self) -> int:
        return list(Severity).index(self)

    def _other_rank(self, other: object) -> int | None:
        if isinstance(other, Severity):
            return other.rank
        if isinstance(other, str):
            try:
                return Severity(other).rank
            except ValueError:
                return None
        return None

    def __lt__(self, other: object) -> bool:
        rank = self._other_rank(other)
        return NotImplemented if rank is None else self.rank < rank

    def __le__(self, other: object) -> bool:
        rank = self._other_rank(other)
        return NotImplemented if rank is None else self.rank <= rank

    def __gt__(self, other: object) -> bool:
        rank = self._other_rank(other)
        return NotImplemented if rank is None else self.rank > rank

    def __ge__(self, other: object) -> bool:
        rank = self._other_rank(other)
        return NotImplemented if rank is None else self.rank >= rank


class IssueKind(StrEnum):
    """Issue taxonomy.

    - STRUCTURAL       -> "structural"       : canonical field missing, or a
      structural check could not run
    - TYPE_MISMATCH    -> "type_mismatch"    : field present with another kind
    - DATA_LOSS        -> "data_loss"        : original value not preserved
    - FIELD_MAPPING    -> "field_mapping"    : renamings off convention
    - VALIDATION_ERROR -> "validation_error" : validation itself failed
    """

    STRUCTURAL = auto()
    TYPE_MISMATCH = auto()
    DATA_LOSS = auto()
    FIELD_MAPPING = auto()
    VALIDATION_ERROR = auto()


@dataclass(frozen=True, slots=True)
class AccuracyIssue:
    """One problem found while validating a harmonized document.

    Attributes:
        kind:           Issue category.
        description:    Human-readable explanation.
        severity:       Impact of the issue.
        field:          Field path the issue is about, when there is one.
        expected_value: Expected type tag or value, when there is one.
        actual_value:   Observed type tag or value, when there is one.
    """

    kind: IssueKind
    description: str
    severity: Severity
    field: str | None = None
    expected_value: str | None = None
    actual_value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": str(self.kind),
            "field": self.field,
            "description": self.description,
            "expectedValue": self.expected_value,
            "actualValue": self.actual_value,
            "severity": str(self.severity),
        }


@dataclass(frozen=True, slots=True)
class AccuracyResult:
    """Accuracy report for one harmonized document.

    Scorers return partial results that fill only their own sub-score; the
    validator merges them and computes ``overall_accuracy_percentage``.

    Attributes:
        overall_accuracy_percentage: Weighted overall score in [0, 100].
        structural_accuracy: Share of canonical fields reproduced with the
            right kind, in [0, 100].
        data_completeness: Share of original values preserved, in [0, 100].
        field_mapping_accuracy: Share of categorized original fields whose
            category reappears in the harmonized document, in [0, 100].
        issues: Problems found, in scorer order.
        successful_mappings: Descriptions of confirmed correspondences.
        field_correspondences: Original field path -> harmonized field path
            for same-category fields paired up by name similarity.
        computation_time_ms: Wall-clock duration of the validation.
    """

    overall_accuracy_percentage: float = 0.0
    structural_accuracy: float = 0.0
    data_completeness: float = 0.0
    field_mapping_accuracy: float = 0.0
    issues: list[AccuracyIssue] = field(default_factory=list)
    successful_mappings: list[str] = field(default_factory=list)
    field_correspondences: dict[str, str] = field(default_factory=dict)
    computation_time_ms: float = 0.0

    @property
    def metrics(self) -> dict[str, int]:
        """Counts derived from the issue and mapping lists."""
        by_severity = {severity: 0 for severity in Severity}
        for issue in self.issues:
            by_severity[issue.severity] += 1
        return {
            "total_issues": len(self.issues),
            "critical_issues": by_severity[Severity.CRITICAL],
            "high_issues": by_severity[Severity.HIGH],
            "medium_issues": by_severity[Severity.MEDIUM],
            "low_issues": by_severity[Severity.LOW],
            "successful_mappings": len(self.successful_mappings),
            "field_correspondences": len(self.field_correspondences),
        }

    @property
    def critical_issues(self) -> list[AccuracyIssue]:
        return [i for i in self.issues if i.severity == Severity.CRITICAL]

    def issues_by_severity(
        self, minimum: Severity | str = Severity.LOW
    ) -> list[AccuracyIssue]:
        """Return the issues whose severity is at least ``minimum``."""
        floor = Severity(minimum)
        return [i for i in self.issues if i.severity >= floor]

    def issues_of_kind(self, kind: IssueKind | str) -> list[AccuracyIssue]:
        wanted = IssueKind(kind)
        return [i for i in self.issues if i.kind == wanted]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase report shape consumed by callers."""
        return {
            "overallAccuracyPercentage": self.overall_accuracy_percentage,
            "structuralAccuracy": self.structural_accuracy,
            "dataCompleteness": self.data_completeness,
            "fieldMappingAccuracy": self.field_mapping_accuracy,
            "issues": [issue.to_dict() for issue in self.issues],
            "successfulMappings": list(self.successful_mappings),
            "fieldCorrespondences": dict(self.field_correspondences),
            "metrics": self.metrics,
            "computationTimeMs": self.computation_time_ms,
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
