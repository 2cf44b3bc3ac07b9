import random

import pytest

from floorsketch.core.model import Point, Wall
from floorsketch.geom.polygon import is_counter_clockwise
from floorsketch.geom.rooms import detect_rooms, find_room_at_point


def _reverse(wall):
    return Wall(wall.id, wall.end_x, wall.end_y, wall.start_x, wall.start_y)


def test_single_square_room(square_walls):
    rooms = detect_rooms(square_walls, 12)

    assert len(rooms) == 1
    room = rooms[0]
    assert room.area == 100.0
    assert room.perimeter == 40.0
    assert len(room.points) == 4
    assert is_counter_clockwise(room.points)


def test_drawing_direction_does_not_matter(square_walls):
    clockwise = [_reverse(wall) for wall in reversed(square_walls)]

    rooms = detect_rooms(clockwise, 12)

    assert [room.area for room in rooms] == [100.0]
    assert is_counter_clockwise(rooms[0].points)


def test_wall_order_and_mixed_orientation(square_walls):
    walls = [_reverse(w) if i % 2 else w for i, w in enumerate(square_walls)]
    random.Random(7).shuffle(walls)

    assert [room.area for room in detect_rooms(walls, 12)] == [100.0]


def test_scale_applies_to_area_and_perimeter(square_walls):
    rooms = detect_rooms(square_walls, 24)

    assert rooms[0].area == 25.0
    assert rooms[0].perimeter == 20.0


def test_open_chain_has_no_rooms(square_walls):
    assert detect_rooms(square_walls[:3], 12) == []
    assert detect_rooms(square_walls[:2], 12) == []
    assert detect_rooms([], 12) == []


def test_split_rectangle_yields_two_rooms():
    walls = [
        Wall("b1", 0, 0, 120, 0),
        Wall("b2", 120, 0, 240, 0),
        Wall("r", 240, 0, 240, 120),
        Wall("t1", 240, 120, 120, 120),
        Wall("t2", 120, 120, 0, 120),
        Wall("l", 0, 120, 0, 0),
        Wall("mid", 120, 0, 120, 120),
    ]

    rooms = detect_rooms(walls, 12)

    assert [room.area for room in rooms] == [100.0, 100.0]
    assert all(is_counter_clockwise(room.points) for room in rooms)


def test_rooms_sorted_by_area(rectangle):
    walls = rectangle(0, 0, 240, 120, "big") + rectangle(500, 0, 120, 120, "small")

    rooms = detect_rooms(walls, 12)

    assert [room.area for room in rooms] == [100.0, 200.0]


def test_small_loops_are_discarded(rectangle):
    walls = rectangle(0, 0, 24, 24)

    assert detect_rooms(walls, 12) == []
    assert [room.area for room in detect_rooms(walls, 12, min_area_sqft=1)] == [4.0]


def test_endpoints_within_tolerance_close_the_loop():
    walls = [
        Wall("w1", 0, 0, 120, 0),
        Wall("w2", 120.5, 0, 120, 120),
        Wall("w3", 120, 120.4, 0, 120),
        Wall("w4", 0, 120, 0, 0.3),
    ]

    rooms = detect_rooms(walls, 12)

    assert len(rooms) == 1
    assert rooms[0].area == pytest.approx(100, abs=0.5)


def test_stub_wall_inside_room_adds_nothing(square_walls):
    walls = square_walls + [Wall("stub", 0, 0, 60, 60)]

    assert [room.area for room in detect_rooms(walls, 12)] == [100.0]


def test_detection_is_idempotent(rectangle):
    walls = rectangle(0, 0, 240, 120, "a") + rectangle(0, 200, 120, 120, "b")

    assert detect_rooms(walls, 12) == detect_rooms(walls, 12)


def test_find_room_at_point(rectangle):
    rooms = detect_rooms(rectangle(0, 0, 120, 120, "a") + rectangle(500, 0, 240, 120, "b"), 12)

    assert find_room_at_point(Point(600, 60), rooms).area == 200.0
    assert find_room_at_point(Point(60, 60), rooms).area == 100.0
    assert find_room_at_point(Point(300, 60), rooms) is None
