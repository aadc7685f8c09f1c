"""VastuWizard — step-by-step construction of a ``VastuInput``.

The steps run strictly in order: entry -> rooms -> spaces -> results.  Each
step has to be valid before the wizard advances; leaving the spaces step
builds one immutable input and scores it.  Results is terminal until
:meth:`VastuWizard.reset`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from vastuscore.domain.directions import CardinalDirection, Direction
from vastuscore.domain.rooms import RoomType, get_room_config
from vastuscore.models.analysis import OpenSpaces, RoomVastu, VastuInput, VastuScore
from vastuscore.scoring.engine import VastuEngine

logger = logging.getLogger(__name__)


class WizardStep(str, Enum):
    ENTRY = "entry"
    ROOMS = "rooms"
    SPACES = "spaces"
    RESULTS = "results"


STEP_ORDER = (WizardStep.ENTRY, WizardStep.ROOMS, WizardStep.SPACES, WizardStep.RESULTS)

_EDITABLE_ROOM_FIELDS = {"room_type", "direction", "sleeping_direction", "label"}
_OPEN_SPACE_SIDES = {"north", "south", "east", "west"}


class WizardError(Exception):
    """Raised for a step transition or edit the wizard does not allow."""


class VastuWizard:
    """Collects the entry, rooms and open spaces for one analysis session.

    Parameters
    ----------
    engine:
        Engine used to score the finished input.  A default
        :class:`VastuEngine` is created if omitted.
    """

    def __init__(self, engine: VastuEngine | None = None) -> None:
        self.engine = engine or VastuEngine()
        self.current_step = WizardStep.ENTRY
        self.main_entry: Direction | None = None
        self.rooms: list[RoomVastu] = []
        self.open_spaces = OpenSpaces()
        self.score: VastuScore | None = None

    # -- Mutations -----------------------------------------------------------

    def set_main_entry(self, direction: Direction | str) -> None:
        """Choose the direction the main entrance faces."""
        self._ensure_editable()
        direction = Direction(direction)
        if direction is Direction.CENTER:
            raise WizardError("The main entry must face a compass direction.")
        self.main_entry = direction

    def add_room(
        self,
        room_type: RoomType | str,
        direction: Direction | str,
        sleeping_direction: CardinalDirection | str | None = None,
        label: str | None = None,
    ) -> RoomVastu:
        """Place a new room and return it."""
        self._ensure_editable()
        room = RoomVastu(
            room_type=room_type,
            direction=direction,
            sleeping_direction=_sleeping_for(room_type, sleeping_direction),
            label=label or None,
        )
        self.rooms.append(room)
        logger.debug("Added room %s (%s in %s)", room.id, room.room_type.value, room.direction.value)
        return room

    def update_room(self, room_id: str, **changes: Any) -> RoomVastu:
        """Replace fields of an existing room and return the updated room.

        Accepts ``room_type``, ``direction``, ``sleeping_direction`` and
        ``label``.
        """
        self._ensure_editable()
        unknown = set(changes) - _EDITABLE_ROOM_FIELDS
        if unknown:
            raise WizardError(f"Cannot update room fields: {sorted(unknown)}")

        index = self._room_index(room_id)
        data = self.rooms[index].model_dump()
        data.update(changes)
        data["sleeping_direction"] = _sleeping_for(data["room_type"], data["sleeping_direction"])
        data["label"] = data["label"] or None
        updated = RoomVastu.model_validate(data)
        self.rooms[index] = updated
        return updated

    def remove_room(self, room_id: str) -> None:
        self._ensure_editable()
        del self.rooms[self._room_index(room_id)]

    def set_open_spaces(self, **ratings: int) -> OpenSpaces:
        """Update any of ``north``, ``south``, ``east``, ``west`` (1-5)."""
        self._ensure_editable()
        unknown = set(ratings) - _OPEN_SPACE_SIDES
        if unknown:
            raise WizardError(f"Unknown open space sides: {sorted(unknown)}")
        data = self.open_spaces.model_dump()
        data.update(ratings)
        self.open_spaces = OpenSpaces.model_validate(data)
        return self.open_spaces

    # -- Navigation ----------------------------------------------------------

    def can_proceed(self) -> bool:
        """Whether the current step is complete enough to move on."""
        if self.current_step is WizardStep.ENTRY:
            return self.main_entry is not None
        if self.current_step is WizardStep.ROOMS:
            return len(self.rooms) >= 1
        if self.current_step is WizardStep.SPACES:
            return True
        return False

    def next(self) -> WizardStep:
        """Advance one step; leaving the spaces step scores the input."""
        if not self.can_proceed():
            raise WizardError(f"Cannot leave the {self.current_step.value} step yet.")

        if self.current_step is WizardStep.SPACES:
            self.score = self.engine.score(self.build_input())
        self.current_step = STEP_ORDER[STEP_ORDER.index(self.current_step) + 1]
        return self.current_step

    def back(self) -> WizardStep:
        """Return to the previous step.  Results can only be left via reset."""
        if self.current_step is WizardStep.RESULTS:
            raise WizardError("Results are final; reset to start a new analysis.")
        index = STEP_ORDER.index(self.current_step)
        if index > 0:
            self.current_step = STEP_ORDER[index - 1]
        return self.current_step

    def reset(self) -> None:
        """Clear everything and go back to the entry step."""
        self.current_step = WizardStep.ENTRY
        self.main_entry = None
        self.rooms = []
        self.open_spaces = OpenSpaces()
        self.score = None

    def build_input(self) -> VastuInput:
        """Snapshot the collected answers as an immutable ``VastuInput``."""
        if self.main_entry is None:
            raise WizardError("No main entry direction chosen.")
        return VastuInput(
            main_entry=self.main_entry,
            rooms=tuple(self.rooms),
            open_spaces=self.open_spaces,
        )

    # -- Internal ------------------------------------------------------------

    def _ensure_editable(self) -> None:
        if self.current_step is WizardStep.RESULTS:
            raise WizardError("Results are final; reset to start a new analysis.")

    def _room_index(self, room_id: str) -> int:
        for index, room in enumerate(self.rooms):
            if room.id == room_id:
                return index
        raise WizardError(f"No room with id {room_id!r}")


def _sleeping_for(
    room_type: RoomType | str,
    sleeping_direction: CardinalDirection | str | None,
) -> CardinalDirection | None:
    """Keep a sleeping direction only for room types that have one."""
    if sleeping_direction is None:
        return None
    if not get_room_config(room_type).has_sleeping_direction:
        return None
    return CardinalDirection(sleeping_direction)
