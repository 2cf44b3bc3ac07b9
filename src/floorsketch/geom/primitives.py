"""Scalar geometry helpers for points and wall segments.

Every other geometry module builds on these functions. They are pure and
total over finite input; degenerate (zero-length) walls are handled where
a division would otherwise occur.
"""

from __future__ import annotations

import math
from typing import Optional

from ..config import PARALLEL_EPSILON
from ..core.model import Point, Wall


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def wall_length(wall: Wall) -> float:
    return distance(wall.start, wall.end)


def wall_angle(wall: Wall) -> float:
    """Angle of the wall direction (start to end) in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(wall.end_y - wall.start_y, wall.end_x - wall.start_x))


def wall_midpoint(wall: Wall) -> Point:
    return Point((wall.start_x + wall.end_x) / 2, (wall.start_y + wall.end_y) / 2)


def nearest_point_on_segment(point: Point, line_start: Point, line_end: Point) -> Point:
    """Project a point onto a segment, clamped to the segment's endpoints.

    Args:
        point: The point to project.
        line_start: First endpoint of the segment.
        line_end: Second endpoint of the segment.

    Returns:
        The closest point of the segment. For a zero-length segment this is
        ``line_start``.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length_squared = dx * dx + dy * dy

    if length_squared == 0:
        return line_start

    t = ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / length_squared
    t = max(0.0, min(1.0, t))

    return Point(line_start.x + t * dx, line_start.y + t * dy)


def line_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Optional[Point]:
    """Intersect the infinite line p1-p2 with the infinite line p3-p4.

    Returns:
        The intersection point, or None if the lines are parallel.
    """
    denom = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)

    if abs(denom) < PARALLEL_EPSILON:
        return None

    ua = ((p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)) / denom

    return Point(p1.x + ua * (p2.x - p1.x), p1.y + ua * (p2.y - p1.y))


def perpendicular_point(wall: Wall, point: Point) -> Optional[Point]:
    """Foot of the perpendicular dropped from a point onto the wall's line.

    The foot may fall outside the wall segment; callers that need an on-wall
    point must check it. Returns None for zero-length walls.
    """
    if wall_length(wall) == 0:
        return None

    perp_angle = math.radians(wall_angle(wall) + 90)
    perp_end = Point(point.x + math.cos(perp_angle), point.y + math.sin(perp_angle))

    return line_intersection(wall.start, wall.end, point, perp_end)


def snap_to_grid(point: Point, grid_size: float) -> Point:
    """Snap a point to the nearest grid intersection (halves round up)."""
    return Point(
        math.floor(point.x / grid_size + 0.5) * grid_size,
        math.floor(point.y / grid_size + 0.5) * grid_size,
    )


def position_along_wall(wall: Wall, point: Point) -> float:
    """Normalized position (0 to 1) of a point's projection along a wall.

    Used to place openings from a click location. Zero-length walls report 0.
    """
    length = wall_length(wall)
    if length == 0:
        return 0.0

    nearest = nearest_point_on_segment(point, wall.start, wall.end)
    return max(0.0, min(1.0, distance(wall.start, nearest) / length))


def point_at_wall_position(wall: Wall, position: float) -> Point:
    """Get the point on a wall at a normalized position (0 to 1)."""
    return Point(
        wall.start_x + (wall.end_x - wall.start_x) * position,
        wall.start_y + (wall.end_y - wall.start_y) * position,
    )


def rotate_point(point: Point, origin: Point, degrees: float) -> Point:
    """Rotate a point around an origin by an angle in degrees."""
    radians = math.radians(degrees)
    dx = point.x - origin.x
    dy = point.y - origin.y
    return Point(
        math.cos(radians) * dx - math.sin(radians) * dy + origin.x,
        math.sin(radians) * dx + math.cos(radians) * dy + origin.y,
    )
