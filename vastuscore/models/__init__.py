"""Analysis input/output models."""

from vastuscore.models.analysis import (
    AnalysisSource,
    Grade,
    OpenSpaces,
    PropertyVastu,
    Recommendation,
    RecommendationCategory,
    RoomScore,
    RoomVastu,
    ScoreBreakdown,
    Severity,
    VastuInput,
    VastuScore,
    generate_room_id,
)

__all__ = [
    "AnalysisSource",
    "Grade",
    "OpenSpaces",
    "PropertyVastu",
    "Recommendation",
    "RecommendationCategory",
    "RoomScore",
    "RoomVastu",
    "ScoreBreakdown",
    "Severity",
    "VastuInput",
    "VastuScore",
    "generate_room_id",
]
