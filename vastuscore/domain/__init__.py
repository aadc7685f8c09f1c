"""Domain model — directions, room types and the static Vastu rule tables."""

from vastuscore.domain.directions import (
    COMPASS_DIRECTIONS,
    DIRECTION_CONFIGS,
    DIRECTION_GRID_POSITIONS,
    CardinalDirection,
    Direction,
    DirectionConfig,
    direction_name,
    get_direction_config,
)
from vastuscore.domain.guidance import (
    ENTRY_DIRECTION_SCORES,
    PREFERRED_ENTRY_DIRECTIONS,
    SLEEPING_DIRECTION_GUIDANCE,
    SLEEPING_DIRECTION_SCORES,
    SleepingGuidance,
    entry_direction_score,
    sleeping_direction_guidance,
    sleeping_direction_score,
)
from vastuscore.domain.rooms import (
    ROOM_CONFIGS,
    Placement,
    RoomConfig,
    RoomType,
    get_room_config,
    placement_preview,
)

__all__ = [
    "COMPASS_DIRECTIONS",
    "DIRECTION_CONFIGS",
    "DIRECTION_GRID_POSITIONS",
    "ENTRY_DIRECTION_SCORES",
    "PREFERRED_ENTRY_DIRECTIONS",
    "ROOM_CONFIGS",
    "SLEEPING_DIRECTION_GUIDANCE",
    "SLEEPING_DIRECTION_SCORES",
    "CardinalDirection",
    "Direction",
    "DirectionConfig",
    "Placement",
    "RoomConfig",
    "RoomType",
    "SleepingGuidance",
    "direction_name",
    "entry_direction_score",
    "get_direction_config",
    "get_room_config",
    "placement_preview",
    "sleeping_direction_guidance",
    "sleeping_direction_score",
]
