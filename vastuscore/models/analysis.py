"""Pydantic models for a Vastu analysis: the input a caller builds and the
score the engine returns.

``VastuInput`` is immutable once built.  ``VastuScore`` is a fresh value per
scoring call and carries no reference back to the input that produced it.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from vastuscore.config import DEFAULT_OPEN_SPACE, OPEN_SPACE_MAX, OPEN_SPACE_MIN
from vastuscore.domain.directions import CardinalDirection, Direction
from vastuscore.domain.rooms import Placement, RoomType, get_room_config


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_room_id() -> str:
    """Return a new unique room identifier."""
    return f"room_{uuid.uuid4().hex[:12]}"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class RoomVastu(BaseModel):
    """A room placed on the direction grid."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_room_id)
    room_type: RoomType
    direction: Direction
    sleeping_direction: Optional[CardinalDirection] = None
    """Direction the head points while sleeping; only scored for bedrooms."""

    label: Optional[str] = None
    """Free-text name overriding the room type label, e.g. 'Kids Room'."""

    @property
    def display_label(self) -> str:
        return self.label or get_room_config(self.room_type).label


class OpenSpaces(BaseModel):
    """Open space rating (1 = minimal, 5 = maximum) on each side of the plot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    north: int = Field(default=DEFAULT_OPEN_SPACE, ge=OPEN_SPACE_MIN, le=OPEN_SPACE_MAX)
    south: int = Field(default=DEFAULT_OPEN_SPACE, ge=OPEN_SPACE_MIN, le=OPEN_SPACE_MAX)
    east: int = Field(default=DEFAULT_OPEN_SPACE, ge=OPEN_SPACE_MIN, le=OPEN_SPACE_MAX)
    west: int = Field(default=DEFAULT_OPEN_SPACE, ge=OPEN_SPACE_MIN, le=OPEN_SPACE_MAX)


class VastuInput(BaseModel):
    """Everything the engine needs to score one dwelling."""

    model_config = ConfigDict(frozen=True)

    main_entry: Direction
    """Direction the main entrance faces; one of the eight compass points."""

    rooms: tuple[RoomVastu, ...] = ()
    open_spaces: OpenSpaces = Field(default_factory=OpenSpaces)

    @field_validator("main_entry")
    @classmethod
    def _entry_is_compass(cls, value: Direction) -> Direction:
        if value is Direction.CENTER:
            raise ValueError("main entry must face a compass direction, not CENTER")
        return value


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key; lower ranks are more urgent."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}


class RecommendationCategory(str, Enum):
    ENTRY = "entry"
    ROOM = "room"
    SLEEPING = "sleeping"
    SPACE = "space"


class Recommendation(BaseModel):
    """An actionable suggestion derived from one finding."""

    id: str
    severity: Severity
    category: RecommendationCategory
    title: str
    description: str
    current_state: str
    ideal_state: str
    room_id: Optional[str] = None


class RoomScore(BaseModel):
    """Placement score for a single room."""

    room_id: str
    room_type: RoomType
    direction: Direction
    score: int
    placement: Placement
    suggestion: Optional[str] = None

    @computed_field
    @property
    def is_ideal(self) -> bool:
        return self.placement is Placement.IDEAL

    @computed_field
    @property
    def is_acceptable(self) -> bool:
        """True only for the middle tier; ideal rooms are not 'acceptable'."""
        return self.placement is Placement.ACCEPTABLE


class ScoreBreakdown(BaseModel):
    """The four category sub-scores, each 0-100."""

    entry_score: int = Field(ge=0, le=100)
    room_placement_score: int = Field(ge=0, le=100)
    sleeping_direction_score: int = Field(ge=0, le=100)
    open_space_score: int = Field(ge=0, le=100)


class Grade(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    CRITICAL = "Critical"


class VastuScore(BaseModel):
    """Complete result of scoring one ``VastuInput``."""

    overall: int = Field(ge=0, le=100)
    grade: Grade
    breakdown: ScoreBreakdown
    room_scores: list[RoomScore] = Field(default_factory=list)
    compliant_items: list[str] = Field(default_factory=list)
    non_compliant_items: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    """Ordered high -> medium -> low severity."""


# ---------------------------------------------------------------------------
# Stored analysis
# ---------------------------------------------------------------------------


class AnalysisSource(str, Enum):
    MANUAL = "manual"
    AI = "ai"


class PropertyVastu(BaseModel):
    """A scored analysis attached to a property listing."""

    id: int = 0
    property_id: str
    data: VastuInput
    score: VastuScore
    last_updated: datetime = Field(default_factory=_utc_now)
    analyzed_by: AnalysisSource = AnalysisSource.MANUAL
