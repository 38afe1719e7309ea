"""Unit tests for configuration advisory checks."""

import pytest

from floorplan.application.config import (
    FloorPlanConfiguration,
    FlooringConfig,
    PlanConfig,
    ValidationResult,
    WallConfig,
    check_flooring_advisories,
    check_plan_geometry,
    validate_config,
)


def _config(
    walls: list[tuple[float, float]],
    *,
    auto_close: bool = False,
    flooring: FlooringConfig | None = None,
) -> FloorPlanConfiguration:
    return FloorPlanConfiguration(
        plan=PlanConfig(
            walls=[WallConfig(length=length, angle=angle) for length, angle in walls],
            auto_close=auto_close,
        ),
        flooring=flooring,
    )


RECTANGLE = [(4.0, 0.0), (3.0, 90.0), (4.0, 180.0), (3.0, 270.0)]


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "w").exit_code == 2
        assert ValidationResult().add_warning("a", "w").add_error("b", "e").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "e")
        result.merge(ValidationResult().add_warning("b", "w"))
        assert not result.is_valid
        assert result.has_warnings


class TestPlanGeometryChecks:
    """Tests for check_plan_geometry."""

    def test_clean_rectangle(self) -> None:
        assert check_plan_geometry(_config(RECTANGLE)).warnings == []

    def test_empty_plan_warns(self) -> None:
        result = check_plan_geometry(_config([]))
        assert [w.path for w in result.warnings] == ["plan.walls"]

    def test_crossing_walls_warn(self) -> None:
        diagonal = 2 * 2**0.5
        result = check_plan_geometry(
            _config([(2.0, 0.0), (diagonal, 135.0), (2.0, 0.0), (diagonal, 225.0)])
        )
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "plan.walls[3]"
        assert "intersects" in result.warnings[0].message

    def test_hidden_closure_gap_warns(self) -> None:
        walls = [(4.0, 0.0), (3.0, 90.0), (3.5, 180.0), (3.0, 270.0)]
        result = check_plan_geometry(_config(walls, auto_close=True))
        assert [w.path for w in result.warnings] == ["plan.auto_close"]
        assert "0.500" in result.warnings[0].message


class TestFlooringAdvisories:
    """Tests for check_flooring_advisories."""

    def test_no_flooring_no_warnings(self) -> None:
        assert check_flooring_advisories(_config(RECTANGLE)).warnings == []

    def test_reasonable_flooring(self) -> None:
        flooring = FlooringConfig(row_joint_offset=0.4, expansion_gap=0.01)
        assert check_flooring_advisories(_config(RECTANGLE, flooring=flooring)).warnings == []

    def test_single_wall_is_an_error(self) -> None:
        result = check_flooring_advisories(_config([(3.0, 0.0)], flooring=FlooringConfig()))
        assert not result.is_valid
        assert [(e.path, e.value) for e in result.errors] == [("plan.walls", 1)]
        assert result.warnings == []

    def test_open_plan(self) -> None:
        walls = [(3.0, 0.0), (3.0, 90.0), (2.0, 180.0)]
        result = check_flooring_advisories(_config(walls, flooring=FlooringConfig()))
        assert "plan.auto_close" in [w.path for w in result.warnings]

    def test_gap_swallowing_room_is_an_error(self) -> None:
        flooring = FlooringConfig(expansion_gap=2.0)
        result = check_flooring_advisories(_config(RECTANGLE, flooring=flooring))
        assert [(e.path, e.value) for e in result.errors] == [("flooring.expansion_gap", 2.0)]
        assert "4.00 x 3.00 m room" in result.errors[0].message

    @pytest.mark.parametrize(
        "direction, board_length, warns",
        [
            ("along-width", 3.5, False),
            ("along-length", 3.5, True),
            ("along-width", 4.5, True),
        ],
    )
    def test_board_longer_than_run(self, direction: str, board_length: float, warns: bool) -> None:
        flooring = FlooringConfig(board_length=board_length, installation_direction=direction)
        result = check_flooring_advisories(_config(RECTANGLE, flooring=flooring))
        assert ("flooring.board_length" in [w.path for w in result.warnings]) is warns

    def test_offset_not_shorter_than_board(self) -> None:
        flooring = FlooringConfig(row_joint_offset=1.2)
        result = check_flooring_advisories(_config(RECTANGLE, flooring=flooring))
        assert [w.path for w in result.warnings] == ["flooring.row_joint_offset"]

    def test_min_cut_longer_than_board(self) -> None:
        flooring = FlooringConfig(min_cut_length=1.5)
        result = check_flooring_advisories(_config(RECTANGLE, flooring=flooring))
        assert [w.path for w in result.warnings] == ["flooring.min_cut_length"]


class TestValidateConfig:
    """Tests for validate_config."""

    def test_combines_checks(self) -> None:
        walls = [(3.0, 0.0), (3.0, 90.0), (2.0, 180.0)]
        flooring = FlooringConfig(row_joint_offset=1.5)
        result = validate_config(_config(walls, flooring=flooring))
        assert result.is_valid
        assert result.exit_code == 2
        assert {w.path for w in result.warnings} == {
            "plan.auto_close",
            "flooring.row_joint_offset",
        }

    def test_blocking_errors_fail_validation(self) -> None:
        flooring = FlooringConfig(expansion_gap=2.0, row_joint_offset=1.5)
        result = validate_config(_config(RECTANGLE, flooring=flooring))
        assert not result.is_valid
        assert result.exit_code == 1
        assert [e.path for e in result.errors] == ["flooring.expansion_gap"]

    def test_empty_plan_with_flooring(self) -> None:
        result = validate_config(_config([], flooring=FlooringConfig()))
        assert result.exit_code == 1
        assert [w.path for w in result.warnings] == ["plan.walls"]
        assert [(e.path, e.value) for e in result.errors] == [("plan.walls", 0)]
