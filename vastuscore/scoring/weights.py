"""Category weights for combining sub-scores into the overall score."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vastuscore.config import (
    WEIGHT_ENTRY,
    WEIGHT_OPEN_SPACE,
    WEIGHT_ROOM_PLACEMENT,
    WEIGHT_SLEEPING,
    WEIGHT_SUM_TOLERANCE,
)


class ScoringWeights(BaseModel):
    """Share of each category in the overall score.  Must sum to 1."""

    model_config = ConfigDict(frozen=True)

    entry: float = Field(default=WEIGHT_ENTRY, ge=0.0, le=1.0)
    room_placement: float = Field(default=WEIGHT_ROOM_PLACEMENT, ge=0.0, le=1.0)
    sleeping: float = Field(default=WEIGHT_SLEEPING, ge=0.0, le=1.0)
    open_space: float = Field(default=WEIGHT_OPEN_SPACE, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_total(self) -> ScoringWeights:
        total = self.entry + self.room_placement + self.sleeping + self.open_space
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"category weights must sum to 1.0, got {total:.4f}")
        return self


DEFAULT_WEIGHTS = ScoringWeights()
