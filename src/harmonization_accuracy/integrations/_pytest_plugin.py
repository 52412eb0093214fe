"""pytest plugin for harmonization-accuracy.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  Once the package is installed (editable installs included),
the ``assert_harmonization_accuracy`` fixture is available in any test suite
without conftest.py changes.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from harmonization_accuracy import (
    AccuracyResult,
    ValidatorConfig,
    validate_harmonization,
)


@pytest.fixture(scope="session")
def assert_harmonization_accuracy() -> Any:
    """Fixture returning a callable harmonization accuracy asserter.

    Session-scoped because the returned callable is stateless: every call
    creates a fresh validator.

    Usage in tests::

        def test_llm_output(assert_harmonization_accuracy):
            assert_harmonization_accuracy(canonical, original, harmonized)

        def test_strict(assert_harmonization_accuracy):
            result = assert_harmonization_accuracy(
                canonical, original, harmonized, threshold=95.0
            )
            assert not result.critical_issues

    Returns:
        A callable ``_assert(canonical_json, original_json, harmonized_json,
        threshold=80.0, config=None) -> AccuracyResult`` that raises
        ``AssertionError`` when the overall accuracy is below ``threshold``
        and otherwise returns the result for further checks.
    """

    def _assert(
        canonical_json: str,
        original_json: str,
        harmonized_json: str,
        threshold: float = 80.0,
        config: ValidatorConfig | None = None,
    ) -> AccuracyResult:
        result = validate_harmonization(
            canonical_json, original_json, harmonized_json, config=config
        )
        if result.overall_accuracy_percentage < threshold:
            listed = "\n".join(
                f"    [{issue.severity}] {issue.kind}: {issue.description}"
                for issue in result.issues
            )
            raise AssertionError(
                f"Harmonization not accurate enough: "
                f"overall={result.overall_accuracy_percentage:.1f} "
                f"< threshold={threshold}\n"
                f"  structural={result.structural_accuracy:.1f} "
                f"completeness={result.data_completeness:.1f} "
                f"field_mapping={result.field_mapping_accuracy:.1f}\n"
                f"  issues:\n{listed}"
            )
        return result

    return _assert
