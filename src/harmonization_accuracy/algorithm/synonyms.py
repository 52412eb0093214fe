"""SynonymTable: field-name categories used by field-mapping scoring.

A category groups name fragments that mark a field as carrying one kind of
information.  A field name belongs to the first category (in table order)
that has a fragment occurring anywhere in the lowercased name, so
"spud_dt", "SpudDate" and "completionTimestamp" are all *date* fields.

The table is configuration data.  Extra categories or fragments are added by
building a new table, never by editing code::

    table = SynonymTable.default().extended({"depth": ["depth", "md", "tvd"]})
    table.categorize("measuredDepth")   # "depth"
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = ["DEFAULT_SYNONYM_GROUPS", "SynonymTable"]

DEFAULT_SYNONYM_GROUPS: dict[str, tuple[str, ...]] = {
    "date": ("date", "dt", "time", "timestamp"),
    "id": ("id", "identifier", "number"),
    "name": ("name", "title", "label"),
}


@dataclass(frozen=True, slots=True)
class SynonymTable:
    """Immutable, ordered mapping of category name to name fragments.

    Attributes:
        groups: ``(category, fragments)`` pairs in priority order.  Fragments
            are stored lowercased.

    Raises:
        ValueError: On an empty category name, a category without fragments,
            an empty fragment, or a repeated category.
    """

    groups: tuple[tuple[str, tuple[str, ...]], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        normalized: list[tuple[str, tuple[str, ...]]] = []
        for category, fragments in self.groups:
            if not category:
                msg = "Synonym category names must be non-empty"
                raise ValueError(msg)
            if category in seen:
                msg = f"Duplicate synonym category: {category!r}"
                raise ValueError(msg)
            if isinstance(fragments, str) or not fragments:
                msg = f"Synonym category {category!r} needs a list of fragments"
                raise ValueError(msg)
            if any(not isinstance(f, str) or not f for f in fragments):
                msg = f"Synonym category {category!r} has an empty fragment"
                raise ValueError(msg)
            seen.add(category)
            normalized.append((category, tuple(f.lower() for f in fragments)))
        object.__setattr__(self, "groups", tuple(normalized))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> SynonymTable:
        """The built-in date / id / name table."""
        return cls.from_mapping(DEFAULT_SYNONYM_GROUPS)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> SynonymTable:
        """Build a table from ``{category: fragments}``; order is preserved."""
        groups = []
        for category, fragments in mapping.items():
            if isinstance(fragments, str):
                msg = f"Synonym category {category!r} needs a list of fragments"
                raise ValueError(msg)
            groups.append((category, tuple(fragments)))
        return cls(groups=tuple(groups))

    @classmethod
    def from_json(cls, text: str) -> SynonymTable:
        """Build a table from a JSON object of ``{category: [fragment, ...]}``.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.
            ValueError: If the document is not an object of string lists.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            msg = "Synonym table JSON must be an object of category -> fragments"
            raise ValueError(msg)
        for category, fragments in data.items():
            if not isinstance(fragments, list):
                msg = f"Synonym category {category!r} must map to a JSON array"
                raise ValueError(msg)
        return cls.from_mapping(data)

    def extended(self, mapping: Mapping[str, Iterable[str]]) -> SynonymTable:
        """Return a new table with extra fragments and categories.

        Fragments for an existing category are appended to it (duplicates
        dropped); new categories are appended after the existing ones.
        """
        merged: dict[str, list[str]] = {c: list(f) for c, f in self.groups}
        for category, fragments in mapping.items():
            if isinstance(fragments, str):
                msg = f"Synonym category {category!r} needs a list of fragments"
                raise ValueError(msg)
            bucket = merged.setdefault(category, [])
            for fragment in fragments:
                if isinstance(fragment, str):
                    fragment = fragment.lower()
                if fragment not in bucket:
                    bucket.append(fragment)
        return SynonymTable.from_mapping(merged)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def categories(self) -> list[str]:
        return [category for category, _ in self.groups]

    def categorize(self, name: str) -> str | None:
        """Return the first category with a fragment inside ``name``, or None."""
        lowered = name.lower()
        for category, fragments in self.groups:
            if any(fragment in lowered for fragment in fragments):
                return category
        return None

    def as_dict(self) -> dict[str, list[str]]:
        return {category: list(fragments) for category, fragments in self.groups}
