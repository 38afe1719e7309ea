"""Unit tests for derived plan geometry."""

from __future__ import annotations

import pytest

from floorplan.domain import BoundingBox, Point2D, Wall, resolve_vertices
from floorplan.domain.services import (
    closure_gap,
    find_self_intersections,
    to_pixels,
    vector_path,
    view_bounds,
    wall_labels,
)


class TestViewBounds:
    """Tests for view_bounds."""

    def test_padding_on_every_side(self, square_room) -> None:
        assert view_bounds(square_room, padding=0.5) == BoundingBox(-0.5, -0.5, 3.5, 3.5)

    def test_zero_padding(self, l_shaped_room) -> None:
        assert view_bounds(l_shaped_room, padding=0.0) == BoundingBox(0.0, 0.0, 4.0, 4.0)

    def test_no_vertices_gives_unit_box(self) -> None:
        assert view_bounds(()) == BoundingBox(0.0, 0.0, 1.0, 1.0)


class TestWallLabels:
    """Tests for wall_labels."""

    def test_labels_at_midpoints(self, rectangle_plan) -> None:
        labels = wall_labels(rectangle_plan.walls, rectangle_plan.vertices())

        assert [label.wall_index for label in labels] == [0, 1, 2, 3]
        assert labels[0].position == Point2D(2.0, 0.0)
        assert labels[0].angle == pytest.approx(0.0)
        assert labels[0].text == "4.00 m"
        assert labels[1].position.x == pytest.approx(4.0)
        assert labels[1].position.y == pytest.approx(1.5)
        assert labels[1].angle == pytest.approx(90.0)

    def test_auto_closed_wall_keeps_nominal_text(self) -> None:
        walls = [
            Wall(length=3.0, angle=0.0),
            Wall(length=3.0, angle=90.0),
            Wall(length=2.9, angle=180.0),
            Wall(length=3.0, angle=270.0),
        ]
        vertices = resolve_vertices(walls, auto_close=True)

        last = wall_labels(walls, vertices)[-1]

        assert last.text == "3.00 m"
        assert last.position.x == pytest.approx(0.05)
        assert last.angle != pytest.approx(-90.0)

    def test_no_walls_no_labels(self) -> None:
        assert wall_labels([], (Point2D(0.0, 0.0),)) == []


class TestVectorPath:
    """Tests for vector_path and to_pixels."""

    def test_square_path(self, square_room) -> None:
        assert vector_path(square_room, scale=100) == "M 0 0 L 300 0 L 300 300 L 0 300"

    def test_fractional_coordinates(self) -> None:
        path = vector_path((Point2D(0.0, 0.0), Point2D(3.77, -1.25)), scale=120)
        assert path == "M 0 0 L 452.4 -150"

    def test_empty(self) -> None:
        assert vector_path(()) == ""

    def test_to_pixels(self) -> None:
        assert to_pixels(2.5, scale=40) == 100.0


class TestClosureAndIntersections:
    """Tests for closure_gap and find_self_intersections."""

    def test_closure_gap_ignores_auto_close(self) -> None:
        walls = [Wall(length=3.0, angle=0.0), Wall(length=4.0, angle=90.0)]
        assert closure_gap(walls) == pytest.approx(5.0)

    def test_touching_neighbours_are_not_crossings(self, square_room) -> None:
        ring = (*square_room, square_room[0])
        assert find_self_intersections(ring, closed=True) == []
        assert find_self_intersections(ring, closed=False) == []

    def test_crossing_segments(self) -> None:
        vertices = (
            Point2D(0.0, 0.0),
            Point2D(2.0, 0.0),
            Point2D(0.0, 2.0),
            Point2D(2.0, 2.0),
            Point2D(0.0, 0.0),
        )
        errors = find_self_intersections(vertices)
        assert len(errors) == 1
        assert errors[0].wall_indices == (1, 3)
