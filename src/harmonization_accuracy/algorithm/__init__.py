"""algorithm subpackage: value equivalence, synonym categories and configuration.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from harmonization_accuracy.algorithm import SynonymTable, ValidatorConfig

    config = ValidatorConfig(
        synonyms=SynonymTable.default().extended({"depth": ["depth", "md"]}),
    )
"""

from __future__ import annotations

from harmonization_accuracy.algorithm.config import (
    COMPLETENESS_WEIGHT,
    FIELD_MAPPING_WEIGHT,
    STRUCTURAL_WEIGHT,
    ValidatorConfig,
)
from harmonization_accuracy.algorithm.equivalence import (
    ScalarInterpreter,
    values_equivalent,
)
from harmonization_accuracy.algorithm.synonyms import SynonymTable

__all__ = [
    "COMPLETENESS_WEIGHT",
    "FIELD_MAPPING_WEIGHT",
    "STRUCTURAL_WEIGHT",
    "ScalarInterpreter",
    "SynonymTable",
    "ValidatorConfig",
    "values_equivalent",
]
