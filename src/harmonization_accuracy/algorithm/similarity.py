"""Field-name similarity: Levenshtein ratio over normalized member names.

Names are normalized with FieldNameNormalizer first, so naming-convention
differences cost nothing: "spud_date" vs "spudDate" scores 1.0.
"""

from __future__ import annotations

from harmonization_accuracy.tree.normalizer import FieldNameNormalizer

__all__ = ["levenshtein_distance", "name_similarity"]

_normalizer = FieldNameNormalizer()


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``.

    Rolling single-row dynamic programme, shorter string on the inner loop.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        current = [i]
        for j, ch_b in enumerate(b, start=1):
            current.append(
                min(
                    current[j - 1] + 1,
                    previous[j] + 1,
                    previous[j - 1] + (ch_a != ch_b),
                )
            )
        previous = current
    return previous[-1]


def name_similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] of two member names after normalization.

    ``1 - distance / max(len_a, len_b, 1)``; the guard keeps two names that
    both normalize to "" at 1.0.
    """
    norm_a = _normalizer.normalize(a)
    norm_b = _normalizer.normalize(b)
    distance = levenshtein_distance(norm_a, norm_b)
    return 1.0 - distance / max(len(norm_a), len(norm_b), 1)
