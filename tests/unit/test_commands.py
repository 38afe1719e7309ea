"""Unit tests for GenerateFloorPlanCommand."""

from __future__ import annotations

from pathlib import Path

import pytest

from floorplan.application import GenerateFloorPlanCommand, WallInput, WallRecord
from floorplan.application.config import load_config
from floorplan.domain import BoardConfig, FloorPlan, LaminateBoardPacker, Point2D, Wall


@pytest.fixture
def command() -> GenerateFloorPlanCommand:
    return GenerateFloorPlanCommand()


class TestExecute:
    """Tests for the derived drawing data."""

    def test_rectangle_output(self, command, rectangle_plan) -> None:
        output = command.execute(rectangle_plan, scale=100, padding=0.5)

        assert output.walls[0] == WallRecord(id="a", length=4.0, angle=0.0)
        assert len(output.vertices) == 5
        assert output.vertices[2].x == pytest.approx(4.0)
        assert output.vertices[2].y == pytest.approx(3.0)
        assert output.room_area == pytest.approx(12.0)
        assert output.path == "M 0 0 L 400 0 L 400 300 L 0 300 L 0 0"
        assert [label.text for label in output.labels] == [
            "4.00 m",
            "3.00 m",
            "4.00 m",
            "3.00 m",
        ]
        assert output.view_bounds_px == pytest.approx((-50.0, -50.0, 500.0, 400.0))
        assert output.geometry_errors == ()

    def test_no_layout_without_board_config(self, command, rectangle_plan) -> None:
        output = command.execute(rectangle_plan)
        assert not output.has_layout
        assert output.pieces == ()
        assert output.stats is None

    def test_layout_with_board_config(self, command, rectangle_plan) -> None:
        output = command.execute(rectangle_plan, BoardConfig(row_joint_offset=0.4))
        assert output.has_layout
        assert output.stats is not None
        assert output.stats.count == len(output.pieces) > 0
        assert output.stats.coverage_percentage == pytest.approx(100.0)

    def test_empty_plan(self, command) -> None:
        output = command.execute(FloorPlan(), BoardConfig())
        assert output.vertices == (Point2D(0.0, 0.0),)
        assert output.labels == ()
        assert output.pieces == ()
        assert output.stats is not None
        assert output.stats.coverage_percentage is None

    def test_collapsed_plan_has_no_area(self, command) -> None:
        plan = FloorPlan(walls=[Wall(length=4.0, angle=0.0), Wall(length=4.0, angle=180.0)])
        output = command.execute(plan, BoardConfig())
        assert output.room_area == 0.0
        assert output.pieces == ()
        assert output.stats.room_area is None
        assert output.stats.coverage_percentage is None

    def test_auto_close_gap_reported(self, command) -> None:
        plan = FloorPlan(
            walls=[
                Wall(length=3.0, angle=0.0),
                Wall(length=3.0, angle=90.0),
                Wall(length=2.0, angle=180.0),
                Wall(length=3.0, angle=270.0),
            ],
            auto_close=True,
        )
        output = command.execute(plan)
        assert output.vertices[-1] == Point2D(0.0, 0.0)
        assert [e.error_type for e in output.geometry_errors] == ["closure"]

    def test_custom_packer_is_used(self, rectangle_plan) -> None:
        command = GenerateFloorPlanCommand(packer=LaminateBoardPacker(max_iterations=1))
        output = command.execute(rectangle_plan, BoardConfig())
        assert all(p.x == pytest.approx(0.0, abs=1e-9) for p in output.pieces)

    def test_execute_from_config(self, command, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")
        output = command.execute_from_config(config)

        assert output.auto_close is True
        assert output.walls[0].id == "north"
        assert output.scale == 120
        assert output.board_config is not None
        assert output.board_config.expansion_gap == 0.01
        assert output.pieces
        for piece in output.pieces:
            if piece.is_cut:
                assert 0.2 - 1e-9 <= piece.length <= 1.0 + 1e-9


class TestMemoization:
    """Tests for result caching."""

    def test_unchanged_inputs_return_same_object(self, command, rectangle_plan) -> None:
        config = BoardConfig(row_joint_offset=0.4)
        first = command.execute(rectangle_plan, config)
        second = command.execute(rectangle_plan, BoardConfig(row_joint_offset=0.4))

        assert second is first
        info = command.cache_info()
        assert (info.hits, info.misses) == (1, 1)

    def test_editing_a_wall_recomputes(self, command, rectangle_plan) -> None:
        first = command.execute(rectangle_plan)
        rectangle_plan.update_wall("a", length=5.0)
        second = command.execute(rectangle_plan)

        assert second is not first
        assert second.vertices[1] == Point2D(5.0, 0.0)

    @pytest.mark.parametrize(
        "kwargs",
        [{"scale": 60.0}, {"padding": 1.0}],
    )
    def test_drawing_options_are_part_of_the_key(self, command, rectangle_plan, kwargs) -> None:
        first = command.execute(rectangle_plan)
        assert command.execute(rectangle_plan, **kwargs) is not first

    def test_auto_close_is_part_of_the_key(self, command, rectangle_plan) -> None:
        first = command.execute(rectangle_plan)
        rectangle_plan.auto_close = True
        assert command.execute(rectangle_plan) is not first

    def test_clear_cache(self, command, rectangle_plan) -> None:
        first = command.execute(rectangle_plan)
        command.clear_cache()
        assert command.execute(rectangle_plan) is not first
        assert command.cache_info().hits == 0


class TestWallInput:
    """Tests for the WallInput DTO."""

    @pytest.mark.parametrize(
        "text, length, angle",
        [("3.77@90", 3.77, 90.0), ("2", 2.0, 0.0), ("1.5@-45", 1.5, -45.0)],
    )
    def test_parse(self, text: str, length: float, angle: float) -> None:
        wall = WallInput.parse(text)
        assert (wall.length, wall.angle) == (length, angle)

    @pytest.mark.parametrize("text", ["", "abc", "3@north", "@90"])
    def test_parse_rejects_garbage(self, text: str) -> None:
        with pytest.raises(ValueError, match="LENGTH@ANGLE"):
            WallInput.parse(text)

    def test_validate(self) -> None:
        assert WallInput(length=1.0).validate() == []
        assert WallInput(length=-1.0).validate() == ["Length must be positive"]
        assert WallInput(length=float("inf"), angle=float("nan")).validate() == [
            "Length must be a finite number",
            "Angle must be a finite number",
        ]
