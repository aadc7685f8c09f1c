"""Desirability tables for the main entry and sleeping directions.

Scores are 0-100.  Northeast is the most auspicious entry and Southwest the
least; sleeping with the head towards the South is best and towards the
North is discouraged.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from vastuscore.domain.directions import CardinalDirection, Direction

ENTRY_DIRECTION_SCORES = MappingProxyType({
    Direction.N: 90,
    Direction.NE: 100,
    Direction.E: 95,
    Direction.SE: 60,
    Direction.S: 20,
    Direction.SW: 10,
    Direction.W: 70,
    Direction.NW: 65,
})

SLEEPING_DIRECTION_SCORES = MappingProxyType({
    CardinalDirection.S: 100,
    CardinalDirection.E: 80,
    CardinalDirection.W: 60,
    CardinalDirection.N: 0,
})


class SleepingGuidance(BaseModel):
    """Qualitative reading of a sleeping direction."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str


SLEEPING_DIRECTION_GUIDANCE = MappingProxyType({
    CardinalDirection.S: SleepingGuidance(
        label="Excellent", description="Health, wealth, and peaceful sleep"),
    CardinalDirection.E: SleepingGuidance(
        label="Good", description="Knowledge, clarity, and mental peace"),
    CardinalDirection.W: SleepingGuidance(
        label="Moderate", description="Stability and material success"),
    CardinalDirection.N: SleepingGuidance(
        label="Avoid", description="May cause disturbed sleep and health issues"),
})

# Directions recommended for the main entry, best first
PREFERRED_ENTRY_DIRECTIONS = (Direction.NE, Direction.N, Direction.E)


def entry_direction_score(direction: Direction | str) -> int:
    """Desirability of a main entry facing *direction*.

    Raises ``ValueError`` for CENTER or an unknown code; an entry has to face
    one of the eight compass directions.
    """
    direction = Direction(direction)
    try:
        return ENTRY_DIRECTION_SCORES[direction]
    except KeyError:
        raise ValueError(f"Main entry cannot face {direction.value}") from None


def sleeping_direction_score(direction: CardinalDirection | str) -> int:
    """Desirability of sleeping with the head towards *direction*."""
    return SLEEPING_DIRECTION_SCORES[CardinalDirection(direction)]


def sleeping_direction_guidance(direction: CardinalDirection | str) -> SleepingGuidance:
    return SLEEPING_DIRECTION_GUIDANCE[CardinalDirection(direction)]
