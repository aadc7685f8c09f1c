"""Vastu scoring engine — score a dwelling against Vastu placement guidance."""

from vastuscore.scoring.engine import VastuEngine, calculate_vastu_score
from vastuscore.scoring.grading import grade_for_score, sort_recommendations
from vastuscore.scoring.report import VastuReport
from vastuscore.scoring.weights import DEFAULT_WEIGHTS, ScoringWeights

__all__ = [
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "VastuEngine",
    "VastuReport",
    "calculate_vastu_score",
    "grade_for_score",
    "sort_recommendations",
]
