"""Pytest configuration and shared fixtures for floor plan tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from floorplan.domain import FloorPlan, Point2D, Wall

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def square_room() -> tuple[Point2D, ...]:
    """A 3 m x 3 m room given by exact corner coordinates."""
    return (
        Point2D(0.0, 0.0),
        Point2D(3.0, 0.0),
        Point2D(3.0, 3.0),
        Point2D(0.0, 3.0),
    )


@pytest.fixture
def l_shaped_room() -> tuple[Point2D, ...]:
    """A 4 m x 4 m room with the 2 m x 2 m top-right quarter missing."""
    return (
        Point2D(0.0, 0.0),
        Point2D(2.0, 0.0),
        Point2D(2.0, 2.0),
        Point2D(4.0, 2.0),
        Point2D(4.0, 4.0),
        Point2D(0.0, 4.0),
    )


@pytest.fixture
def rectangle_plan() -> FloorPlan:
    """A closed 4 m x 3 m plan built from walls."""
    return FloorPlan(
        walls=[
            Wall(length=4.0, angle=0.0, id="a"),
            Wall(length=3.0, angle=90.0, id="b"),
            Wall(length=4.0, angle=180.0, id="c"),
            Wall(length=3.0, angle=270.0, id="d"),
        ]
    )
