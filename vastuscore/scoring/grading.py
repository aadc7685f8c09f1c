"""Grade bands and recommendation ordering."""

from __future__ import annotations

from collections.abc import Iterable

from vastuscore.config import GRADE_THRESHOLDS
from vastuscore.models.analysis import Grade, Recommendation


def grade_for_score(score: float) -> Grade:
    """Map an overall score to its grade band.

    Bands are checked from the top; the lowest band starts at 0, so every
    score in 0-100 lands in exactly one band.  Out-of-range values are
    clamped first.
    """
    score = max(0, min(100, score))
    for minimum, name in GRADE_THRESHOLDS:
        if score >= minimum:
            return Grade(name)
    return Grade.CRITICAL


def sort_recommendations(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Stable sort: all high, then medium, then low severity items."""
    return sorted(recommendations, key=lambda rec: rec.severity.rank)
