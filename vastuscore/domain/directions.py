"""Directions — the compass vocabulary shared by every Vastu rule."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class Direction(str, Enum):
    """Placement direction on the 3x3 grid: eight compass points plus the centre."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    CENTER = "CENTER"


class CardinalDirection(str, Enum):
    """Direction the head points towards while sleeping."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"


# Clockwise from North; CENTER is not an orientation.
COMPASS_DIRECTIONS: tuple[Direction, ...] = (
    Direction.N,
    Direction.NE,
    Direction.E,
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.W,
    Direction.NW,
)


class DirectionConfig(BaseModel):
    """Display metadata for a direction."""

    model_config = ConfigDict(frozen=True)

    direction: Direction
    label: str
    full_name: str
    angle: int
    """Compass bearing in degrees (0 for CENTER)."""

    is_cardinal: bool


_DIRECTION_CONFIGS: dict[Direction, DirectionConfig] = {
    cfg.direction: cfg
    for cfg in (
        DirectionConfig(direction=Direction.N, label="N", full_name="North", angle=0, is_cardinal=True),
        DirectionConfig(direction=Direction.NE, label="NE", full_name="Northeast", angle=45, is_cardinal=False),
        DirectionConfig(direction=Direction.E, label="E", full_name="East", angle=90, is_cardinal=True),
        DirectionConfig(direction=Direction.SE, label="SE", full_name="Southeast", angle=135, is_cardinal=False),
        DirectionConfig(direction=Direction.S, label="S", full_name="South", angle=180, is_cardinal=True),
        DirectionConfig(direction=Direction.SW, label="SW", full_name="Southwest", angle=225, is_cardinal=False),
        DirectionConfig(direction=Direction.W, label="W", full_name="West", angle=270, is_cardinal=True),
        DirectionConfig(direction=Direction.NW, label="NW", full_name="Northwest", angle=315, is_cardinal=False),
        DirectionConfig(direction=Direction.CENTER, label="Center", full_name="Center", angle=0, is_cardinal=False),
    )
}

DIRECTION_CONFIGS = MappingProxyType(_DIRECTION_CONFIGS)

# (row, col) of each direction on a north-up 3x3 grid
DIRECTION_GRID_POSITIONS = MappingProxyType({
    Direction.NW: (0, 0),
    Direction.N: (0, 1),
    Direction.NE: (0, 2),
    Direction.W: (1, 0),
    Direction.CENTER: (1, 1),
    Direction.E: (1, 2),
    Direction.SW: (2, 0),
    Direction.S: (2, 1),
    Direction.SE: (2, 2),
})


def get_direction_config(direction: Direction | str) -> DirectionConfig:
    """Return display metadata for *direction*.

    Raises ``ValueError`` if *direction* is not a known direction code.
    """
    return DIRECTION_CONFIGS[Direction(direction)]


def direction_name(direction: Direction | str) -> str:
    """Full name of a direction, e.g. ``'NE'`` -> ``'Northeast'``."""
    return get_direction_config(direction).full_name


def join_direction_names(
    directions: Iterable[Direction],
    conjunction: str | None = None,
    *,
    ordered: bool = True,
) -> str:
    """Join the full names of *directions* into a phrase.

    Names are comma separated; with a *conjunction* the last one is joined
    with it, e.g. ``'Northeast, North, or East'``.  Directions are put in
    compass order unless *ordered* is False.
    """
    if ordered:
        directions = sorted(directions, key=_compass_index)
    names = [direction_name(d) for d in directions]
    if conjunction is None or len(names) < 2:
        return ", ".join(names)
    if len(names) == 2:
        return f"{names[0]} {conjunction} {names[1]}"
    return f"{', '.join(names[:-1])}, {conjunction} {names[-1]}"


def _compass_index(direction: Direction) -> int:
    if direction is Direction.CENTER:
        return len(COMPASS_DIRECTIONS)
    return COMPASS_DIRECTIONS.index(direction)
