"""Unit tests for domain value objects."""

from __future__ import annotations

import pytest

from floorplan.domain import (
    BoardConfig,
    BoardPiece,
    BoundingBox,
    InstallationDirection,
    LayoutStats,
    Point2D,
)


class TestPoint2D:
    """Tests for Point2D."""

    def test_distance(self) -> None:
        assert Point2D(0.0, 0.0).distance_to(Point2D(3.0, 4.0)) == pytest.approx(5.0)

    def test_negative_coordinates_allowed(self) -> None:
        p = Point2D(-1.5, -2.0)
        assert p.distance_to(Point2D(-1.5, 0.0)) == pytest.approx(2.0)

    def test_hashable(self) -> None:
        assert len({Point2D(1.0, 2.0), Point2D(1.0, 2.0)}) == 1


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_from_points(self) -> None:
        box = BoundingBox.from_points([Point2D(1.0, -2.0), Point2D(-3.0, 4.0)])
        assert box == BoundingBox(-3.0, -2.0, 1.0, 4.0)
        assert box.width == 4.0
        assert box.height == 6.0

    def test_from_no_points_raises(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox.from_points([])

    def test_expand_and_shrink(self) -> None:
        box = BoundingBox(0.0, 0.0, 3.0, 2.0)
        assert box.expand(0.5) == BoundingBox(-0.5, -0.5, 3.5, 2.5)
        assert box.shrink(0.5) == BoundingBox(0.5, 0.5, 2.5, 1.5)

    @pytest.mark.parametrize("gap, empty", [(0.0, False), (0.99, False), (1.0, True), (2.0, True)])
    def test_shrink_past_half_is_empty(self, gap, empty) -> None:
        assert BoundingBox(0.0, 0.0, 3.0, 2.0).shrink(gap).is_empty is empty


class TestBoardConfig:
    """Tests for BoardConfig validation."""

    def test_defaults(self) -> None:
        config = BoardConfig()
        assert config.board_length == 1.2
        assert config.board_width == 0.2
        assert config.expansion_gap == 0.0
        assert config.min_cut_length is None
        assert config.max_cut_length is None
        assert config.row_joint_offset == 0.0
        assert config.installation_direction is InstallationDirection.ALONG_WIDTH

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"board_length": 0.0},
            {"board_width": -0.2},
            {"expansion_gap": -0.01},
            {"row_joint_offset": -0.4},
            {"min_cut_length": 0.0},
            {"max_cut_length": -1.0},
            {"min_cut_length": 0.6, "max_cut_length": 0.5},
        ],
    )
    def test_invalid_values_raise(self, kwargs) -> None:
        with pytest.raises(ValueError):
            BoardConfig(**kwargs)

    def test_unknown_direction_raises(self) -> None:
        with pytest.raises(ValueError):
            BoardConfig(installation_direction="diagonal")

    def test_hashable_for_caching(self) -> None:
        assert hash(BoardConfig(row_joint_offset=0.4)) == hash(BoardConfig(row_joint_offset=0.4))


class TestBoardPiece:
    """Tests for BoardPiece."""

    def test_footprint_along_width(self) -> None:
        piece = BoardPiece(length=1.2, width=0.2, x=0.0, y=0.0)
        assert (piece.placed_width, piece.placed_height) == (1.2, 0.2)
        assert piece.area == pytest.approx(0.24)

    def test_footprint_along_length(self) -> None:
        piece = BoardPiece(
            length=1.2,
            width=0.2,
            x=0.0,
            y=0.0,
            direction=InstallationDirection.ALONG_LENGTH,
        )
        assert (piece.placed_width, piece.placed_height) == (0.2, 1.2)

    def test_cut_piece_requires_original_length(self) -> None:
        with pytest.raises(ValueError, match="original length"):
            BoardPiece(length=0.4, width=0.2, x=0.0, y=0.0, is_cut=True)

    def test_full_piece_rejects_original_length(self) -> None:
        with pytest.raises(ValueError):
            BoardPiece(length=1.2, width=0.2, x=0.0, y=0.0, original_length=1.2)

    def test_non_positive_size_raises(self) -> None:
        with pytest.raises(ValueError):
            BoardPiece(length=0.0, width=0.2, x=0.0, y=0.0)


class TestLayoutStats:
    """Tests for LayoutStats."""

    def test_full_count_and_coverage(self) -> None:
        stats = LayoutStats(count=10, cut_count=3, total_area=4.5, room_area=5.0)
        assert stats.full_count == 7
        assert stats.coverage_percentage == pytest.approx(90.0)

    @pytest.mark.parametrize("room_area", [None, 0.0, 1e-15])
    def test_coverage_without_room_area(self, room_area) -> None:
        stats = LayoutStats(count=0, cut_count=0, total_area=0.0, room_area=room_area)
        assert stats.coverage_percentage is None
