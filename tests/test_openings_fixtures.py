import pytest

from floorsketch.core.model import (
    FixtureCategory,
    FixtureType,
    OpeningType,
    Point,
    SwingDirection,
    Wall,
)
from floorsketch.geom.fixtures import create_fixture, fixture_bounds, fixture_contains_point
from floorsketch.geom.openings import opening_center, opening_fits, opening_span, place_opening

WALL = Wall("w1", 0, 0, 100, 0)


def test_place_door_defaults():
    door = place_opening(WALL, Point(25, 7), OpeningType.DOOR)

    assert door.wall_id == "w1"
    assert door.position == pytest.approx(0.25)
    assert door.width == 32
    assert door.subtype == "single"
    assert door.swing_direction is SwingDirection.LEFT


def test_place_window_defaults():
    window = place_opening(WALL, Point(80, -4), "window", opening_id="win")

    assert window.id == "win"
    assert window.type is OpeningType.WINDOW
    assert window.width == 36
    assert window.subtype == "hung"
    assert window.swing_direction is None


def test_opening_center_and_span():
    door = place_opening(WALL, Point(50, 0), OpeningType.DOOR, width=20)

    assert opening_center(door, WALL) == Point(50, 0)
    start, end = opening_span(door, WALL)
    assert start.x == pytest.approx(40)
    assert end.x == pytest.approx(60)
    assert opening_fits(door, WALL)


def test_span_is_clamped_to_wall():
    door = place_opening(WALL, Point(5, 0), OpeningType.DOOR, width=20)

    start, end = opening_span(door, WALL)
    assert start == Point(0, 0)
    assert end.x == pytest.approx(15)
    assert not opening_fits(door, WALL)


def test_create_fixture_defaults():
    toilet = create_fixture(FixtureType.TOILET, 50, 50)

    assert (toilet.width, toilet.height) == (18, 28)
    assert toilet.category is FixtureCategory.BATHROOM

    utility = create_fixture("utility-sink", 0, 0, fixture_id="u1")
    assert utility.id == "u1"
    assert utility.category is FixtureCategory.LAUNDRY


def test_fixture_bounds_are_centred():
    bounds = fixture_bounds(create_fixture(FixtureType.TUB, 100, 50))

    assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (70, 34, 130, 66)


def test_fixture_contains_point_honours_rotation():
    tub = create_fixture(FixtureType.TUB, 0, 0)
    turned = create_fixture(FixtureType.TUB, 0, 0, rotation=90)

    assert not fixture_contains_point(tub, Point(0, 25))
    assert fixture_contains_point(turned, Point(0, 25))
    assert fixture_contains_point(tub, Point(25, 0))
    assert not fixture_contains_point(turned, Point(25, 0))
