"""VastuEngine — main entry point for Vastu compliance scoring.

Usage::

    from vastuscore.scoring import VastuEngine

    engine = VastuEngine()
    score = engine.score(vastu_input)
"""

from __future__ import annotations

import logging

from vastuscore.models.analysis import Grade, ScoreBreakdown, VastuInput, VastuScore
from vastuscore.scoring.checks import (
    check_entry,
    check_open_spaces,
    check_room_placement,
    check_sleeping_directions,
)
from vastuscore.scoring.grading import grade_for_score, sort_recommendations
from vastuscore.scoring.weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)


def calculate_vastu_score(
    vastu_input: VastuInput,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> VastuScore:
    """Score a dwelling against Vastu guidance.

    Parameters
    ----------
    vastu_input:
        Main entry direction, placed rooms and open space ratings.
    weights:
        Share of each category in the overall score.

    Returns
    -------
    VastuScore
        Overall score and grade, the four sub-scores, per-room scores,
        compliant/non-compliant findings and recommendations ordered by
        severity.
    """
    entry = check_entry(vastu_input.main_entry)
    rooms = check_room_placement(vastu_input.rooms)
    sleeping = check_sleeping_directions(vastu_input.rooms)
    spaces = check_open_spaces(vastu_input.open_spaces)

    breakdown = ScoreBreakdown(
        entry_score=entry.score,
        room_placement_score=rooms.score,
        sleeping_direction_score=sleeping.score,
        open_space_score=spaces.score,
    )
    logger.debug(
        "Sub-scores: entry=%d rooms=%d sleeping=%d open_space=%d",
        breakdown.entry_score,
        breakdown.room_placement_score,
        breakdown.sleeping_direction_score,
        breakdown.open_space_score,
    )

    weighted = (
        breakdown.entry_score * weights.entry
        + breakdown.room_placement_score * weights.room_placement
        + breakdown.sleeping_direction_score * weights.sleeping
        + breakdown.open_space_score * weights.open_space
    )
    overall = max(0, min(100, round(weighted)))

    results = (entry, rooms, sleeping, spaces)
    score = VastuScore(
        overall=overall,
        grade=grade_for_score(overall),
        breakdown=breakdown,
        room_scores=rooms.room_scores,
        compliant_items=[item for r in results for item in r.compliant_items],
        non_compliant_items=[item for r in results for item in r.non_compliant_items],
        recommendations=sort_recommendations(
            rec for r in results for rec in r.recommendations
        ),
    )
    logger.info(
        "Vastu score %d (%s): %d rooms, %d recommendations",
        score.overall,
        score.grade.value,
        len(vastu_input.rooms),
        len(score.recommendations),
    )
    return score


class VastuEngine:
    """Score ``VastuInput`` values with a fixed set of category weights.

    Parameters
    ----------
    weights:
        Category weights.  Defaults to :data:`DEFAULT_WEIGHTS`.
    """

    def __init__(self, weights: ScoringWeights | None = None) -> None:
        self.weights = weights or DEFAULT_WEIGHTS

    def score(self, vastu_input: VastuInput) -> VastuScore:
        """Run every category check and combine the results."""
        return calculate_vastu_score(vastu_input, self.weights)

    def grade_for(self, overall: float) -> Grade:
        return grade_for_score(overall)
