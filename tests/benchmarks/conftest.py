"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-field flat, 100-field nested, 500-field deeply nested.
Each tier provides a (canonical, original, harmonized) triple as JSON text:
"faithful" triples keep every value under renamed fields, "lossy" triples
reformat or drop them so completeness scoring has to scan every candidate.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

Triple = tuple[str, str, str]


def _flat_records(num_fields: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Original snake_case record and its camelCase harmonization."""
    original: dict[str, Any] = {}
    harmonized: dict[str, Any] = {}
    for i in range(num_fields):
        if i % 3 == 0:
            original[f"well_id_{i}"] = f"42-{i:03d}-{i * 7:05d}"
            harmonized[f"wellId{i}"] = f"42-{i:03d}-{i * 7:05d}"
        elif i % 3 == 1:
            original[f"spud_dt_{i}"] = f"{i % 12 + 1:02d}/15/2024"
            harmonized[f"spudDate{i}"] = f"2024-{i % 12 + 1:02d}-15"
        else:
            original[f"oil_bbl_{i}"] = f"{i * 1000:,}"
            harmonized[f"oilBbl{i}"] = i * 1000
    return original, harmonized


def _nested(flat: dict[str, Any], sections: int) -> dict[str, Any]:
    items = list(flat.items())
    size = max(len(items) // sections, 1)
    return {
        f"section{n}": dict(items[start : start + size])
        for n, start in enumerate(range(0, len(items), size))
    }


def _make_faithful(num_fields: int, sections: int = 0) -> Triple:
    original, harmonized = _flat_records(num_fields)
    if sections:
        original = _nested(original, sections)
        harmonized = _nested(harmonized, sections)
    return json.dumps(harmonized), json.dumps(original), json.dumps(harmonized)


def _make_lossy(num_fields: int, sections: int = 0) -> Triple:
    original, harmonized = _flat_records(num_fields)
    lossy = {f"status{i}": f"pending_{i}" for i in range(len(harmonized))}
    if sections:
        original = _nested(original, sections)
        harmonized = _nested(harmonized, sections)
        lossy = _nested(lossy, sections)
    return json.dumps(harmonized), json.dumps(original), json.dumps(lossy)


# --- Fixtures for each size tier ---


@pytest.fixture
def triple_10_faithful() -> Triple:
    """10-field flat faithful harmonization."""
    return _make_faithful(10)


@pytest.fixture
def triple_10_lossy() -> Triple:
    """10-field flat harmonization that lost every value."""
    return _make_lossy(10)


@pytest.fixture
def triple_100_faithful() -> Triple:
    """100-field harmonization nested in 10 sections."""
    return _make_faithful(100, sections=10)


@pytest.fixture
def triple_100_lossy() -> Triple:
    """100-field lossy harmonization nested in 10 sections."""
    return _make_lossy(100, sections=10)


@pytest.fixture
def triple_500_faithful() -> Triple:
    """500-field harmonization nested in 25 sections."""
    return _make_faithful(500, sections=25)
