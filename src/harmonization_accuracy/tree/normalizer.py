"""FieldNameNormalizer: splits JSON member names into lowercase words.

Harmonized documents routinely rename fields across naming conventions, so
"spud_date", "spudDate", "SpudDate" and "spud-date" all normalize to
"spud date".  Acronym runs ("APINumber" -> "api number") and letter/digit
boundaries ("well2Depth" -> "well 2 depth") are split as well.
"""

from __future__ import annotations

import re

__all__ = ["FieldNameNormalizer"]

# Underscores, hyphens, dots, whitespace: explicit separators.
_SEPARATORS = re.compile(r"[_\-.\s]+")

# Zero-width word boundaries, applied in one pass:
#   lower->Upper        "spudDate"   -> "spud|Date"
#   acronym->Word       "APINumber"  -> "API|Number"
#   letter<->digit      "well2Depth" -> "well|2|Depth"
_BOUNDARY = re.compile(
    r"(?<=[a-z])(?=[A-Z])"
    r"|(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[A-Za-z])(?=\d)"
    r"|(?<=\d)(?=[A-Za-z])"
)


class FieldNameNormalizer:
    """Stateless member-name normalizer.

    Example::

        normalizer = FieldNameNormalizer()
        normalizer.words("APINumber")        # ["api", "number"]
        normalizer.normalize("spud_date")    # "spud date"
    """

    def words(self, name: str) -> list[str]:
        """Split ``name`` into lowercase words."""
        spaced = _BOUNDARY.sub(" ", _SEPARATORS.sub(" ", name))
        return spaced.lower().split()

    def normalize(self, name: str) -> str:
        """Return ``name`` as space-separated lowercase words."""
        return " ".join(self.words(name))
