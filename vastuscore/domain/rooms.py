"""Room types and their Vastu placement guidance.

Every room type carries a static :class:`RoomConfig` listing its ideal and
acceptable directions.  Any direction in neither set is one to avoid, so
each placement falls into exactly one of three tiers.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, model_validator

from vastuscore.domain.directions import Direction


class RoomType(str, Enum):
    """Closed set of dwelling room categories."""

    MASTER_BEDROOM = "master_bedroom"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    PUJA = "puja"
    LIVING = "living"
    DINING = "dining"
    STORE = "store"
    BALCONY = "balcony"
    STUDY = "study"
    GARAGE = "garage"
    UTILITY = "utility"


class Placement(str, Enum):
    """How well a room's direction matches the guidance for its type."""

    IDEAL = "ideal"
    ACCEPTABLE = "acceptable"
    AVOID = "avoid"


class RoomConfig(BaseModel):
    """Placement guidance for a single room type."""

    model_config = ConfigDict(frozen=True)

    room_type: RoomType
    label: str
    description: str = ""
    has_sleeping_direction: bool = False
    """True for bedroom-like rooms, where a sleeping direction is asked for."""

    ideal_directions: frozenset[Direction]
    acceptable_directions: frozenset[Direction] = frozenset()

    @model_validator(mode="after")
    def _check_disjoint(self) -> RoomConfig:
        overlap = self.ideal_directions & self.acceptable_directions
        if overlap:
            raise ValueError(
                f"{self.room_type.value}: directions {sorted(d.value for d in overlap)} "
                "are both ideal and acceptable"
            )
        return self

    @property
    def avoid_directions(self) -> frozenset[Direction]:
        return frozenset(Direction) - self.ideal_directions - self.acceptable_directions

    def classify(self, direction: Direction | str) -> Placement:
        """Return the placement tier of *direction* for this room type."""
        direction = Direction(direction)
        if direction in self.ideal_directions:
            return Placement.IDEAL
        if direction in self.acceptable_directions:
            return Placement.ACCEPTABLE
        return Placement.AVOID


def _room(
    room_type: RoomType,
    label: str,
    description: str,
    ideal: str,
    acceptable: str = "",
    *,
    sleeping: bool = False,
) -> RoomConfig:
    return RoomConfig(
        room_type=room_type,
        label=label,
        description=description,
        has_sleeping_direction=sleeping,
        ideal_directions=frozenset(Direction(d) for d in ideal.split()),
        acceptable_directions=frozenset(Direction(d) for d in acceptable.split()),
    )


_ROOM_CONFIGS: dict[RoomType, RoomConfig] = {
    cfg.room_type: cfg
    for cfg in (
        _room(RoomType.MASTER_BEDROOM, "Master Bedroom",
              "Main bedroom for the head of the family",
              "SW", "S W", sleeping=True),
        _room(RoomType.BEDROOM, "Bedroom",
              "Guest or children bedroom",
              "SW S W", "NW", sleeping=True),
        _room(RoomType.KITCHEN, "Kitchen",
              "Cooking area, governed by the fire element",
              "SE", "NW E"),
        _room(RoomType.BATHROOM, "Bathroom/Toilet",
              "Washroom and toilet area",
              "NW W", "N"),
        _room(RoomType.PUJA, "Puja Room",
              "Prayer and worship area",
              "NE", "E N"),
        _room(RoomType.LIVING, "Living Room",
              "Main gathering and sitting area",
              "NE N E", "NW CENTER"),
        _room(RoomType.DINING, "Dining Room",
              "Eating and dining area",
              "E W", "S CENTER"),
        _room(RoomType.STORE, "Store Room",
              "Storage for heavy items",
              "SW", "W S NW"),
        _room(RoomType.BALCONY, "Balcony",
              "Open area for light and air",
              "N E NE", "NW SE"),
        _room(RoomType.STUDY, "Study/Office",
              "Work and study area",
              "NE E N", "W NW"),
        _room(RoomType.GARAGE, "Garage",
              "Vehicle parking area",
              "NW SE", "E N"),
        _room(RoomType.UTILITY, "Utility Room",
              "Laundry and utility area",
              "SE NW", "W S"),
    )
}

ROOM_CONFIGS = MappingProxyType(_ROOM_CONFIGS)


def get_room_config(room_type: RoomType | str) -> RoomConfig:
    """Return the placement guidance for *room_type*.

    Raises ``ValueError`` if *room_type* is not a known room type.
    """
    return ROOM_CONFIGS[RoomType(room_type)]


def placement_preview(room_type: RoomType | str) -> dict[Direction, Placement]:
    """Placement tier of every grid direction for *room_type*."""
    config = get_room_config(room_type)
    return {direction: config.classify(direction) for direction in Direction}
