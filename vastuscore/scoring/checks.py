"""Per-category Vastu checks.

Each check scores one category of the input and reports the findings that
explain the score: compliant items, non-compliant items and the
recommendations that would resolve them.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from vastuscore.config import (
    ENTRY_ACCEPTABLE_THRESHOLD,
    ENTRY_EXCELLENT_THRESHOLD,
    ENTRY_IMPROVE_BELOW,
    NO_ROOMS_SCORE,
    NO_SLEEPING_ROOMS_SCORE,
    OPEN_SPACE_BALANCED_BONUS,
    OPEN_SPACE_BASE_SCORE,
    OPEN_SPACE_FAVOURED_BONUS,
    OPEN_SPACE_REVERSED_PENALTY,
    PLACEMENT_SCORE_ACCEPTABLE,
    PLACEMENT_SCORE_AVOID,
    PLACEMENT_SCORE_IDEAL,
    SLEEPING_GOOD_THRESHOLD,
    SLEEPING_MODERATE_THRESHOLD,
)
from vastuscore.domain.directions import Direction, direction_name, join_direction_names
from vastuscore.domain.guidance import (
    PREFERRED_ENTRY_DIRECTIONS,
    entry_direction_score,
    sleeping_direction_guidance,
    sleeping_direction_score,
)
from vastuscore.domain.rooms import Placement, get_room_config
from vastuscore.models.analysis import (
    OpenSpaces,
    Recommendation,
    RecommendationCategory,
    RoomScore,
    RoomVastu,
    Severity,
)

PLACEMENT_SCORES = {
    Placement.IDEAL: PLACEMENT_SCORE_IDEAL,
    Placement.ACCEPTABLE: PLACEMENT_SCORE_ACCEPTABLE,
    Placement.AVOID: PLACEMENT_SCORE_AVOID,
}


class CheckResult(BaseModel):
    """Outcome of one category check."""

    score: int
    compliant_items: list[str] = Field(default_factory=list)
    non_compliant_items: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    room_scores: list[RoomScore] = Field(default_factory=list)
    """Only filled by the room placement check."""


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


def check_entry(main_entry: Direction) -> CheckResult:
    """Score the main entry direction against the entry table."""
    score = entry_direction_score(main_entry)
    name = direction_name(main_entry)
    preferred = join_direction_names(PREFERRED_ENTRY_DIRECTIONS, "or", ordered=False)
    result = CheckResult(score=score)

    if score >= ENTRY_EXCELLENT_THRESHOLD:
        result.compliant_items.append(f"Main entry facing {name} is excellent for prosperity")
    elif score >= ENTRY_ACCEPTABLE_THRESHOLD:
        result.compliant_items.append(f"Main entry facing {name} is acceptable")
        if score < ENTRY_IMPROVE_BELOW:
            result.recommendations.append(Recommendation(
                id="entry-improve",
                severity=Severity.LOW,
                category=RecommendationCategory.ENTRY,
                title="Entry Direction Could Be Better",
                description=(
                    f"While a {name} entry is acceptable, {preferred} "
                    "entries are more auspicious."
                ),
                current_state=f"Main entry faces {name}",
                ideal_state=f"Ideally, the main entry should face {preferred}",
            ))
    else:
        result.non_compliant_items.append(
            f"Main entry facing {name} is not ideal according to Vastu"
        )
        result.recommendations.append(Recommendation(
            id="entry-unfavourable",
            severity=Severity.HIGH,
            category=RecommendationCategory.ENTRY,
            title="Unfavorable Entry Direction",
            description=(
                f"A {name} facing entry may bring challenges. Consider Vastu "
                "remedies or, if possible, use an alternative entrance."
            ),
            current_state=f"Main entry faces {name}",
            ideal_state=f"Main entry should face {preferred}",
        ))

    return result


# ---------------------------------------------------------------------------
# Room placement
# ---------------------------------------------------------------------------


def score_room(room: RoomVastu) -> RoomScore:
    """Classify and score a single room placement."""
    config = get_room_config(room.room_type)
    placement = config.classify(room.direction)
    name = direction_name(room.direction)
    label = room.display_label

    suggestion: str | None = None
    if placement is Placement.ACCEPTABLE:
        ideal = join_direction_names(config.ideal_directions, "or")
        suggestion = f"{label} in {name} is good, but {ideal} would be ideal."
    elif placement is Placement.AVOID:
        ideal = join_direction_names(config.ideal_directions)
        suggestion = (
            f"{label} should ideally be in {ideal}. "
            f"Current placement in {name} is not recommended."
        )

    return RoomScore(
        room_id=room.id,
        room_type=room.room_type,
        direction=room.direction,
        score=PLACEMENT_SCORES[placement],
        placement=placement,
        suggestion=suggestion,
    )


def check_room_placement(rooms: Sequence[RoomVastu]) -> CheckResult:
    """Score every room and average; no rooms gives ``NO_ROOMS_SCORE``."""
    if not rooms:
        return CheckResult(score=NO_ROOMS_SCORE)

    result = CheckResult(score=0)
    for room in rooms:
        room_score = score_room(room)
        result.room_scores.append(room_score)

        config = get_room_config(room.room_type)
        label = room.display_label
        name = direction_name(room.direction)
        ideal = join_direction_names(config.ideal_directions)

        if room_score.placement is Placement.IDEAL:
            result.compliant_items.append(f"{label} in {name} is perfectly placed")
        elif room_score.placement is Placement.ACCEPTABLE:
            result.recommendations.append(Recommendation(
                id=f"room-{room.id}-improve",
                severity=Severity.LOW,
                category=RecommendationCategory.ROOM,
                title=f"{label} Placement Could Be Optimized",
                description=room_score.suggestion or "",
                current_state=f"{label} is in {name}",
                ideal_state=f"Ideal placement: {ideal}",
                room_id=room.id,
            ))
        else:
            result.non_compliant_items.append(
                f"{label} in {name} conflicts with Vastu guidelines"
            )
            result.recommendations.append(Recommendation(
                id=f"room-{room.id}-misplaced",
                severity=Severity.HIGH,
                category=RecommendationCategory.ROOM,
                title=f"{label} Placement Needs Attention",
                description=room_score.suggestion or "",
                current_state=f"{label} is in {name}",
                ideal_state=f"Should be in {ideal}",
                room_id=room.id,
            ))

    total = sum(rs.score for rs in result.room_scores)
    result.score = round(total / len(result.room_scores))
    return result


# ---------------------------------------------------------------------------
# Sleeping direction
# ---------------------------------------------------------------------------


def check_sleeping_directions(rooms: Sequence[RoomVastu]) -> CheckResult:
    """Score sleeping directions of bedroom-like rooms that record one.

    Rooms without a sleeping direction, and rooms whose type has none, are
    left out of the average.  With nothing to score the result is
    ``NO_SLEEPING_ROOMS_SCORE``.
    """
    sleepers = [
        room for room in rooms
        if room.sleeping_direction is not None
        and get_room_config(room.room_type).has_sleeping_direction
    ]
    if not sleepers:
        return CheckResult(score=NO_SLEEPING_ROOMS_SCORE)

    result = CheckResult(score=0)
    total = 0
    for room in sleepers:
        heading = room.sleeping_direction
        score = sleeping_direction_score(heading)
        guidance = sleeping_direction_guidance(heading)
        label = room.display_label
        towards = direction_name(heading.value)
        total += score

        if score >= SLEEPING_GOOD_THRESHOLD:
            result.compliant_items.append(
                f"{label}: sleeping with head towards {towards} is {guidance.label.lower()}"
            )
        elif score >= SLEEPING_MODERATE_THRESHOLD:
            result.recommendations.append(Recommendation(
                id=f"sleeping-{room.id}-improve",
                severity=Severity.LOW,
                category=RecommendationCategory.SLEEPING,
                title=f"{label} Sleeping Direction",
                description=(
                    f"Sleeping with head towards {towards} provides "
                    f"{guidance.description.lower()}. South is ideal."
                ),
                current_state=f"Head towards {towards}",
                ideal_state="Head towards South for best results",
                room_id=room.id,
            ))
        else:
            result.non_compliant_items.append(
                f"{label}: sleeping with head towards {towards} should be avoided"
            )
            result.recommendations.append(Recommendation(
                id=f"sleeping-{room.id}-avoid",
                severity=Severity.MEDIUM,
                category=RecommendationCategory.SLEEPING,
                title=f"Change Sleeping Direction in {label}",
                description=(
                    f"Sleeping with head towards {towards} "
                    f"{guidance.description.lower()}. This is considered "
                    "inauspicious in Vastu."
                ),
                current_state=f"Head towards {towards}",
                ideal_state="Change bed position so the head points South or East",
                room_id=room.id,
            ))

    result.score = round(total / len(sleepers))
    return result


# ---------------------------------------------------------------------------
# Open space
# ---------------------------------------------------------------------------

# (favoured side, opposite side, recommendation id, what an open favoured side brings)
_OPEN_SPACE_AXES = (
    ("north", "south", "space-north-south", "positive energy flow"),
    ("east", "west", "space-east-west", "morning sunlight and its energy"),
)


def check_open_spaces(open_spaces: OpenSpaces) -> CheckResult:
    """Reward more open space in the North than the South and in the East
    than the West.

    Each axis adds a bonus when the favoured side is more open, a smaller
    bonus when both sides are equal, and a penalty when it is reversed.
    """
    result = CheckResult(score=OPEN_SPACE_BASE_SCORE)
    score = OPEN_SPACE_BASE_SCORE

    for favoured, opposite, rec_id, benefit in _OPEN_SPACE_AXES:
        favoured_value = getattr(open_spaces, favoured)
        opposite_value = getattr(open_spaces, opposite)
        fav_name = favoured.capitalize()
        opp_name = opposite.capitalize()
        ideal_state = f"{fav_name} should have more open space than {opp_name}"

        if favoured_value > opposite_value:
            score += OPEN_SPACE_FAVOURED_BONUS
            result.compliant_items.append(
                f"More open space in {fav_name} than {opp_name}, good for {benefit}"
            )
        elif favoured_value == opposite_value:
            score += OPEN_SPACE_BALANCED_BONUS
            result.recommendations.append(Recommendation(
                id=rec_id,
                severity=Severity.LOW,
                category=RecommendationCategory.SPACE,
                title=f"Balance Open Space {fav_name}-{opp_name}",
                description=(
                    f"Vastu recommends more open space in the {fav_name} "
                    f"to welcome {benefit}."
                ),
                current_state=f"Equal open space in {fav_name} and {opp_name}",
                ideal_state=ideal_state,
            ))
        else:
            score += OPEN_SPACE_REVERSED_PENALTY
            result.non_compliant_items.append(
                f"Less open space in {fav_name} than {opp_name}"
            )
            result.recommendations.append(Recommendation(
                id=f"{rec_id}-reversed",
                severity=Severity.LOW,
                category=RecommendationCategory.SPACE,
                title=f"Increase {fav_name} Open Space",
                description=(
                    f"Heavier construction in the {fav_name} shuts out {benefit}. "
                    f"Try to keep the {fav_name} lighter and more open."
                ),
                current_state=f"{opp_name} has more open space than {fav_name}",
                ideal_state=ideal_state,
            ))

    result.score = max(0, min(100, score))
    return result
