"""Integrations subpackage for harmonization-accuracy.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_harmonization_accuracy`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
