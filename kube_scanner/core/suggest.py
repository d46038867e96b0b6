"""Fuzzy suggestions for mistyped resource types using Levenshtein distance."""

from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

SUGGESTION_THRESHOLD = 3


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the edit distance between two strings, counted in code points."""
    return Levenshtein.distance(s1, s2)


def suggest_closest(
    value: str, options: Iterable[str], threshold: int = SUGGESTION_THRESHOLD
) -> Optional[str]:
    """Return the option closest to ``value`` if it is within ``threshold`` edits.

    The distance must be strictly less than ``threshold``. Ties go to the
    lexicographically smallest option, so the result does not depend on the
    iteration order of ``options``.
    """
    closest = None
    best = threshold

    for option in sorted(options):
        distance = levenshtein_distance(value, option)
        if distance < best:
            best = distance
            closest = option

    return closest
