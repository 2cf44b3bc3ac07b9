"""Polygon geometry utilities for room calculations.

This module provides the shoelace area, winding and perimeter of traced
room loops, plus shapely-backed validity and containment checks.
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import LinearRing, Polygon
from shapely.geometry import Point as ShapelyPoint

from ..core.model import Point
from .primitives import distance


def signed_area(points: Sequence[Point]) -> float:
    """Signed polygon area via the shoelace formula.

    Positive for counter-clockwise loops, negative for clockwise ones, in the
    usual x-right/y-up reading of the coordinates.
    """
    area = 0.0
    n = len(points)

    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2


def polygon_area(points: Sequence[Point]) -> float:
    return abs(signed_area(points))


def polygon_perimeter(points: Sequence[Point]) -> float:
    """Sum of consecutive-vertex distances around the closed loop."""
    n = len(points)
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(n))


def is_counter_clockwise(points: Sequence[Point]) -> bool:
    return signed_area(points) > 0


def is_simple(points: Sequence[Point]) -> bool:
    """Check that a closed loop does not touch or cross itself."""
    if len(points) < 3:
        return False
    return LinearRing([(p.x, p.y) for p in points]).is_simple


def polygon_centroid(points: Sequence[Point]) -> Point:
    """Vertex average of a polygon, used to anchor room labels."""
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def to_shapely(points: Sequence[Point]) -> Polygon:
    return Polygon([(p.x, p.y) for p in points])


def point_in_polygon(point: Point, points: Sequence[Point]) -> bool:
    """Check whether a point lies strictly inside a polygon."""
    if len(points) < 3:
        return False
    return to_shapely(points).contains(ShapelyPoint(point.x, point.y))
