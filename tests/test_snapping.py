import math

import pytest

from floorsketch.core.model import Point, SnapType, Wall
from floorsketch.geom.snapping import (
    best_snap_point,
    find_snap_points,
    resolve_wall_endpoint,
    snap_angle,
    snap_wall_endpoint,
)

WALL = Wall("w1", 0, 0, 100, 0)


def test_endpoint_beats_closer_candidates():
    short = Wall("s", 0, 0, 12, 0)

    snap = best_snap_point(Point(4, 1), [short], 12, 10)

    assert snap.type is SnapType.ENDPOINT
    assert (snap.x, snap.y) == (0, 0)
    assert snap.reference_id == "s"


def test_midpoint_beats_wall_and_grid():
    snap = best_snap_point(Point(48, 3), [WALL], 12, 10)

    assert snap.type is SnapType.MIDPOINT
    assert (snap.x, snap.y) == (50, 0)


def test_wall_beats_grid():
    snap = best_snap_point(Point(25, 2), [WALL], 12, 10)

    assert snap.type is SnapType.WALL
    assert (snap.x, snap.y) == (25, 0)
    assert snap.reference_id == "w1"


def test_grid_snap_without_walls():
    snap = best_snap_point(Point(13, 11), [], 12, 10)

    assert snap.type is SnapType.GRID
    assert (snap.x, snap.y) == (12, 12)
    assert snap.reference_id is None


def test_grid_disabled():
    assert best_snap_point(Point(13, 11), [], 12, 10, snap_to_grid_enabled=False) is None


def test_nothing_in_range():
    assert best_snap_point(Point(50, 50), [WALL], 100, 10) is None


def test_distance_threshold_is_strict():
    wall = Wall("v", 0, 0, 0, -100)

    assert best_snap_point(Point(10, 0), [wall], 12, 10, snap_to_grid_enabled=False) is None
    assert best_snap_point(Point(9.9, 0), [wall], 12, 10).type is SnapType.ENDPOINT


def test_excluded_walls_contribute_nothing():
    snap = best_snap_point(Point(1, 1), [WALL], 12, 10, exclude_wall_ids={"w1"})

    assert snap.type is SnapType.GRID
    assert (snap.x, snap.y) == (0, 0)


def test_perpendicular_needs_anchor():
    cursor = Point(38, 2)

    snap = best_snap_point(cursor, [WALL], 12, 10, anchor=Point(40, -50))
    assert snap.type is SnapType.PERPENDICULAR
    assert snap.x == pytest.approx(40)
    assert snap.y == pytest.approx(0, abs=1e-9)

    assert best_snap_point(cursor, [WALL], 12, 10).type is SnapType.WALL


def test_find_snap_points_sorted_by_distance():
    candidates = find_snap_points(Point(48, 3), [WALL], 12, 10)
    distances = [math.hypot(c.x - 48, c.y - 3) for c in candidates]

    assert distances == sorted(distances)
    assert {c.type for c in candidates} == {SnapType.MIDPOINT, SnapType.WALL, SnapType.GRID}


@pytest.mark.parametrize(
    "angle, expected",
    [(47, 45), (3, 0), (358, 0), (-2, 0), (-88, 270), (133, 135), (20, 20)],
)
def test_snap_angle(angle, expected):
    assert snap_angle(angle) == expected


def test_snap_wall_endpoint_preserves_length():
    end = snap_wall_endpoint(Point(0, 0), Point(100, 3))

    assert end.y == pytest.approx(0, abs=1e-9)
    assert end.x == pytest.approx(math.hypot(100, 3))


def test_snap_wall_endpoint_below_horizontal():
    end = snap_wall_endpoint(Point(0, 0), Point(100, -3))

    assert end.y == pytest.approx(0, abs=1e-9)
    assert end.x == pytest.approx(math.hypot(100, 3))


def test_snap_wall_endpoint_diagonal():
    end = snap_wall_endpoint(Point(10, 10), Point(110, 105))

    assert end.x - 10 == pytest.approx(end.y - 10)


def test_snap_wall_endpoint_leaves_free_angles_alone():
    assert snap_wall_endpoint(Point(0, 0), Point(100, 50)) == Point(100, 50)
    assert snap_wall_endpoint(Point(0, 0), Point(100, 3), constrain_to_angles=False) == Point(100, 3)


def test_resolve_wall_endpoint_angle_snap():
    snap = resolve_wall_endpoint(Point(0, 0), Point(100, 3), [], 12, snap_to_grid_enabled=False)

    assert snap.type is SnapType.ANGLE
    assert snap.y == pytest.approx(0, abs=1e-9)


def test_resolve_wall_endpoint_point_snap_wins():
    wall = Wall("w", 100, 0, 100, 100)

    snap = resolve_wall_endpoint(Point(0, 0), Point(101, 3), [wall], 12)

    assert snap.type is SnapType.ENDPOINT
    assert (snap.x, snap.y) == (100, 0)


def test_resolve_wall_endpoint_without_snap():
    assert resolve_wall_endpoint(Point(0, 0), Point(100, 50), [], 12, snap_to_grid_enabled=False) is None


def test_straight_down_is_already_on_angle():
    end = Point(0, -100)

    assert snap_wall_endpoint(Point(0, 0), end) is end
    assert resolve_wall_endpoint(Point(0, 0), end, [], 12, snap_to_grid_enabled=False) is None
