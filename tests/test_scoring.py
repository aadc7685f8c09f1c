"""Tests for the Vastu scoring engine.

The engine is pure: no database, no files.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vastuscore.config import NO_ROOMS_SCORE, NO_SLEEPING_ROOMS_SCORE
from vastuscore.domain import Direction, Placement, RoomType
from vastuscore.models import (
    Grade,
    OpenSpaces,
    RecommendationCategory,
    RoomVastu,
    Severity,
    VastuInput,
)
from vastuscore.scoring import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    VastuEngine,
    calculate_vastu_score,
    grade_for_score,
    sort_recommendations,
)
from vastuscore.scoring.checks import (
    check_entry,
    check_open_spaces,
    check_room_placement,
    check_sleeping_directions,
    score_room,
)


def make_room(room_type="kitchen", direction="SE", sleeping=None, label=None, room_id=None):
    data = {"room_type": room_type, "direction": direction, "sleeping_direction": sleeping, "label": label}
    if room_id:
        data["id"] = room_id
    return RoomVastu(**data)


def make_input(entry="NE", rooms=None, north=3, south=3, east=3, west=3):
    return VastuInput(
        main_entry=entry,
        rooms=rooms or [],
        open_spaces=OpenSpaces(north=north, south=south, east=east, west=west),
    )


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class TestInputModels:
    def test_center_entry_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VastuInput(main_entry="CENTER")

    def test_unknown_direction_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_room(direction="UP")

    def test_unknown_room_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_room(room_type="ballroom")

    @pytest.mark.parametrize("value", [0, 6])
    def test_open_space_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            OpenSpaces(north=value)

    def test_open_space_defaults(self) -> None:
        spaces = OpenSpaces()
        assert (spaces.north, spaces.south, spaces.east, spaces.west) == (3, 3, 3, 3)

    def test_open_spaces_reject_unknown_side(self) -> None:
        with pytest.raises(ValidationError):
            OpenSpaces(nort=5)

    def test_input_is_frozen(self) -> None:
        vastu_input = make_input()
        with pytest.raises(ValidationError):
            vastu_input.main_entry = Direction.N

    def test_input_rooms_cannot_change(self) -> None:
        vastu_input = make_input(rooms=[make_room("kitchen", "SE")])
        before = calculate_vastu_score(vastu_input)
        assert isinstance(vastu_input.rooms, tuple)
        assert not hasattr(vastu_input.rooms, "append")
        assert calculate_vastu_score(vastu_input) == before

    def test_input_accepts_room_list(self) -> None:
        rooms = [make_room("kitchen", "SE")]
        vastu_input = make_input(rooms=rooms)
        rooms.append(make_room("puja", "SW"))
        assert len(vastu_input.rooms) == 1

    def test_room_ids_unique(self) -> None:
        assert make_room().id != make_room().id

    def test_display_label(self) -> None:
        assert make_room().display_label == "Kitchen"
        assert make_room("bedroom", "SW", label="Kids Room").display_label == "Kids Room"


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


class TestEntryCheck:
    def test_excellent_entry(self) -> None:
        result = check_entry(Direction.NE)
        assert result.score == 100
        assert any("Northeast" in item for item in result.compliant_items)
        assert result.recommendations == []

    def test_acceptable_entry_gets_low_recommendation(self) -> None:
        result = check_entry(Direction.W)
        assert result.score == 70
        assert result.compliant_items
        assert not result.non_compliant_items
        assert [r.severity for r in result.recommendations] == [Severity.LOW]

    @pytest.mark.parametrize("direction", [Direction.S, Direction.SW])
    def test_poor_entry_is_high_severity(self, direction: Direction) -> None:
        result = check_entry(direction)
        assert result.non_compliant_items
        assert result.recommendations[0].severity is Severity.HIGH
        assert result.recommendations[0].category is RecommendationCategory.ENTRY


# ---------------------------------------------------------------------------
# Room placement
# ---------------------------------------------------------------------------


class TestRoomPlacement:
    @pytest.mark.parametrize("room_type", list(RoomType))
    def test_classification_exclusive_and_ordered(self, room_type: RoomType) -> None:
        by_tier: dict[Placement, list[int]] = {p: [] for p in Placement}
        for direction in Direction:
            rs = score_room(make_room(room_type, direction))
            flags = [rs.is_ideal, rs.is_acceptable, not rs.is_ideal and not rs.is_acceptable]
            assert flags.count(True) == 1
            by_tier[rs.placement].append(rs.score)

        ideal, acceptable, avoid = (
            by_tier[Placement.IDEAL], by_tier[Placement.ACCEPTABLE], by_tier[Placement.AVOID]
        )
        if ideal and acceptable:
            assert min(ideal) >= max(acceptable)
        if acceptable and avoid:
            assert min(acceptable) >= max(avoid)
        if ideal and avoid:
            assert min(ideal) > max(avoid)

    def test_ideal_room(self) -> None:
        rs = score_room(make_room("kitchen", "SE"))
        assert rs.is_ideal and not rs.is_acceptable
        assert rs.score == 100
        assert rs.suggestion is None

    def test_acceptable_room_suggestion(self) -> None:
        rs = score_room(make_room("kitchen", "E"))
        assert rs.placement is Placement.ACCEPTABLE
        assert "Southeast" in rs.suggestion

    def test_avoid_room(self) -> None:
        rs = score_room(make_room("kitchen", "NE"))
        assert rs.placement is Placement.AVOID
        assert rs.score < 70
        assert "not recommended" in rs.suggestion

    def test_average_of_rooms(self) -> None:
        result = check_room_placement([make_room("kitchen", "SE"), make_room("kitchen", "NE")])
        assert result.score == round((100 + 10) / 2)
        assert len(result.room_scores) == 2

    def test_empty_rooms_use_neutral_default(self) -> None:
        result = check_room_placement([])
        assert result.score == NO_ROOMS_SCORE
        assert result.room_scores == []

    def test_misplaced_room_recommendation(self) -> None:
        room = make_room("puja", "S", room_id="r1")
        result = check_room_placement([room])
        assert result.non_compliant_items == ["Puja Room in South conflicts with Vastu guidelines"]
        rec = result.recommendations[0]
        assert rec.severity is Severity.HIGH
        assert rec.room_id == "r1"
        assert rec.ideal_state == "Should be in Northeast"

    def test_acceptable_room_is_not_non_compliant(self) -> None:
        result = check_room_placement([make_room("bathroom", "N")])
        assert result.non_compliant_items == []
        assert [r.severity for r in result.recommendations] == [Severity.LOW]

    def test_custom_label_in_findings(self) -> None:
        result = check_room_placement([make_room("bedroom", "SW", label="Kids Room")])
        assert result.compliant_items == ["Kids Room in Southwest is perfectly placed"]


# ---------------------------------------------------------------------------
# Sleeping direction
# ---------------------------------------------------------------------------


class TestSleepingDirection:
    def test_no_sleepers_default(self) -> None:
        assert check_sleeping_directions([]).score == NO_SLEEPING_ROOMS_SCORE

    def test_bedroom_without_direction_ignored(self) -> None:
        result = check_sleeping_directions([make_room("bedroom", "SW")])
        assert result.score == NO_SLEEPING_ROOMS_SCORE

    def test_non_bedroom_direction_ignored(self) -> None:
        result = check_sleeping_directions([make_room("kitchen", "SE", sleeping="N")])
        assert result.score == NO_SLEEPING_ROOMS_SCORE
        assert result.recommendations == []

    def test_average_of_sleepers(self) -> None:
        rooms = [
            make_room("master_bedroom", "SW", sleeping="S"),
            make_room("bedroom", "W", sleeping="E"),
            make_room("kitchen", "SE", sleeping="N"),
        ]
        assert check_sleeping_directions(rooms).score == 90

    def test_north_is_medium_severity(self) -> None:
        result = check_sleeping_directions([make_room("bedroom", "S", sleeping="N")])
        assert result.score == 0
        assert result.non_compliant_items
        assert result.recommendations[0].severity is Severity.MEDIUM
        assert result.recommendations[0].category is RecommendationCategory.SLEEPING

    def test_west_is_low_improvement(self) -> None:
        result = check_sleeping_directions([make_room("bedroom", "S", sleeping="W")])
        assert result.non_compliant_items == []
        assert [r.severity for r in result.recommendations] == [Severity.LOW]

    def test_south_is_compliant(self) -> None:
        result = check_sleeping_directions([make_room("bedroom", "S", sleeping="S")])
        assert result.score == 100
        assert len(result.compliant_items) == 1


# ---------------------------------------------------------------------------
# Open space
# ---------------------------------------------------------------------------


class TestOpenSpace:
    def test_ordering_per_axis(self) -> None:
        def score(north, south):
            return check_open_spaces(OpenSpaces(north=north, south=south)).score

        assert score(4, 2) > score(3, 3) > score(2, 4)

    def test_east_west_ordering(self) -> None:
        def score(east, west):
            return check_open_spaces(OpenSpaces(east=east, west=west)).score

        assert score(5, 1) > score(2, 2) > score(1, 5)

    @pytest.mark.parametrize("south", [1, 2, 3, 4, 5])
    def test_north_monotonic(self, south: int) -> None:
        scores = [
            check_open_spaces(OpenSpaces(north=n, south=south)).score for n in range(1, 6)
        ]
        assert scores == sorted(scores)

    @pytest.mark.parametrize("west", [1, 2, 3, 4, 5])
    def test_east_monotonic(self, west: int) -> None:
        scores = [
            check_open_spaces(OpenSpaces(east=e, west=west)).score for e in range(1, 6)
        ]
        assert scores == sorted(scores)

    def test_score_bounds(self) -> None:
        best = check_open_spaces(OpenSpaces(north=5, south=1, east=5, west=1))
        worst = check_open_spaces(OpenSpaces(north=1, south=5, east=1, west=5))
        assert best.score == 100
        assert 0 <= worst.score < best.score

    def test_violations_are_low_severity(self) -> None:
        result = check_open_spaces(OpenSpaces(north=1, south=5, east=1, west=5))
        assert len(result.non_compliant_items) == 2
        assert {r.severity for r in result.recommendations} == {Severity.LOW}

    def test_balanced_is_not_violation(self) -> None:
        result = check_open_spaces(OpenSpaces())
        assert result.non_compliant_items == []
        assert len(result.recommendations) == 2


# ---------------------------------------------------------------------------
# Grades and weights
# ---------------------------------------------------------------------------


class TestGrading:
    def test_every_score_has_one_grade(self) -> None:
        for score in range(0, 101):
            assert isinstance(grade_for_score(score), Grade)

    def test_grades_monotonic(self) -> None:
        order = [Grade.CRITICAL, Grade.POOR, Grade.AVERAGE, Grade.GOOD, Grade.EXCELLENT]
        ranks = [order.index(grade_for_score(s)) for s in range(0, 101)]
        assert ranks == sorted(ranks)

    @pytest.mark.parametrize(
        ("score", "grade"),
        [
            (100, Grade.EXCELLENT), (85, Grade.EXCELLENT), (84, Grade.GOOD),
            (70, Grade.GOOD), (69, Grade.AVERAGE), (50, Grade.AVERAGE),
            (49, Grade.POOR), (30, Grade.POOR), (29, Grade.CRITICAL), (0, Grade.CRITICAL),
        ],
    )
    def test_boundaries(self, score: int, grade: Grade) -> None:
        assert grade_for_score(score) is grade

    def test_out_of_range_clamped(self) -> None:
        assert grade_for_score(150) is Grade.EXCELLENT
        assert grade_for_score(-5) is Grade.CRITICAL


class TestWeights:
    def test_default_weights_sum_to_one(self) -> None:
        w = DEFAULT_WEIGHTS
        assert w.entry + w.room_placement + w.sleeping + w.open_space == pytest.approx(1.0)

    def test_bad_sum_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringWeights(entry=0.5, room_placement=0.5, sleeping=0.5, open_space=0.5)

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringWeights(entry=-0.1, room_placement=0.5, sleeping=0.3, open_space=0.3)

    def test_entry_only_weights(self) -> None:
        weights = ScoringWeights(entry=1.0, room_placement=0.0, sleeping=0.0, open_space=0.0)
        score = calculate_vastu_score(make_input(entry="W"), weights)
        assert score.overall == 70


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestCalculateVastuScore:
    def test_well_oriented_home(self) -> None:
        vastu_input = make_input(
            entry="NE",
            rooms=[make_room("kitchen", "SE")],
            north=5, south=1, east=5, west=1,
        )
        score = calculate_vastu_score(vastu_input)

        assert score.grade in (Grade.EXCELLENT, Grade.GOOD)
        assert score.overall >= 85
        assert score.non_compliant_items == []
        assert any("Kitchen" in item for item in score.compliant_items)
        assert any("Main entry" in item for item in score.compliant_items)

    def test_poorly_oriented_home(self) -> None:
        vastu_input = make_input(
            entry="SW",
            rooms=[make_room("master_bedroom", "NE", sleeping="N")],
            north=1, south=5, east=1, west=5,
        )
        score = calculate_vastu_score(vastu_input)

        assert score.grade in (Grade.POOR, Grade.CRITICAL)
        severities = {r.severity for r in score.recommendations}
        assert Severity.HIGH in severities
        assert Severity.MEDIUM in severities
        high_categories = {
            r.category for r in score.recommendations if r.severity is Severity.HIGH
        }
        assert high_categories == {RecommendationCategory.ENTRY, RecommendationCategory.ROOM}

    def test_no_rooms(self) -> None:
        score = calculate_vastu_score(make_input(entry="N", rooms=[]))
        assert score.breakdown.room_placement_score == NO_ROOMS_SCORE
        assert score.breakdown.sleeping_direction_score == NO_SLEEPING_ROOMS_SCORE
        assert score.room_scores == []
        assert 0 <= score.overall <= 100

    def test_breakdown_values(self) -> None:
        score = calculate_vastu_score(make_input(entry="N", rooms=[]))
        assert score.breakdown.entry_score == 90
        assert score.breakdown.open_space_score == 70
        assert score.overall == 68
        assert score.grade is Grade.AVERAGE

    def test_idempotent(self) -> None:
        rooms = [
            make_room("kitchen", "NE", room_id="a"),
            make_room("bedroom", "S", sleeping="W", room_id="b"),
            make_room("study", "N", room_id="c"),
        ]
        vastu_input = make_input(entry="SE", rooms=rooms, north=2, south=4)
        first = calculate_vastu_score(vastu_input)
        second = calculate_vastu_score(vastu_input)
        assert first.model_dump() == second.model_dump()

    def test_room_scores_keep_input_order(self) -> None:
        rooms = [make_room("study", "N", room_id=f"r{i}") for i in range(4)]
        score = calculate_vastu_score(make_input(rooms=rooms))
        assert [rs.room_id for rs in score.room_scores] == ["r0", "r1", "r2", "r3"]

    def test_recommendations_sorted_by_severity(self) -> None:
        vastu_input = make_input(
            entry="W",
            rooms=[
                make_room("bathroom", "N"),
                make_room("bedroom", "NE", sleeping="N"),
                make_room("kitchen", "SW"),
            ],
            north=1, south=2, east=3, west=3,
        )
        score = calculate_vastu_score(vastu_input)
        ranks = [r.severity.rank for r in score.recommendations]
        assert ranks == sorted(ranks)
        assert {Severity.HIGH, Severity.MEDIUM, Severity.LOW} <= {
            r.severity for r in score.recommendations
        }

    def test_sort_is_stable(self) -> None:
        score = calculate_vastu_score(make_input(
            entry="S",
            rooms=[make_room("kitchen", "NE", room_id="k1"), make_room("kitchen", "N", room_id="k2")],
        ))
        high_ids = [r.id for r in score.recommendations if r.severity is Severity.HIGH]
        assert high_ids == ["entry-unfavourable", "room-k1-misplaced", "room-k2-misplaced"]
        assert sort_recommendations(score.recommendations) == score.recommendations

    def test_computed_room_flags_serialised(self) -> None:
        score = calculate_vastu_score(make_input(rooms=[make_room("kitchen", "SE")]))
        dumped = score.model_dump(mode="json")["room_scores"][0]
        assert dumped["is_ideal"] is True
        assert dumped["is_acceptable"] is False

    def test_engine_uses_its_weights(self) -> None:
        engine = VastuEngine(ScoringWeights(entry=0.0, room_placement=0.0, sleeping=0.0, open_space=1.0))
        score = engine.score(make_input(north=5, south=1, east=5, west=1))
        assert score.overall == 100
        assert engine.grade_for(score.overall) is Grade.EXCELLENT
