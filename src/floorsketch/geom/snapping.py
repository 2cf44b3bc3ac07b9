"""Snap-point resolution for the wall drawing tool.

Called on every pointer move, so everything here is pure and cheap: the
cursor is compared against wall endpoints, midpoints, wall projections and
the grid, and a fixed type priority picks the point to commit to.
"""

from __future__ import annotations

import math
from typing import AbstractSet, Iterable, List, Optional

from ..config import (
    ANGLE_SNAP_THRESHOLD,
    DEFAULT_SNAP_DISTANCE,
    SNAP_ANGLES,
)
from ..core.model import Point, SnapPoint, SnapType, Wall
from .primitives import (
    distance,
    nearest_point_on_segment,
    perpendicular_point,
    snap_to_grid,
    wall_midpoint,
)

# Priority strictly dominates proximity across types.
SNAP_PRIORITY = (
    SnapType.ENDPOINT,
    SnapType.MIDPOINT,
    SnapType.PERPENDICULAR,
    SnapType.WALL,
    SnapType.GRID,
)


def _on_segment(point: Point, wall: Wall, tolerance: float = 1e-6) -> bool:
    nearest = nearest_point_on_segment(point, wall.start, wall.end)
    return distance(point, nearest) <= tolerance


def find_snap_points(
    cursor: Point,
    walls: Iterable[Wall],
    grid_size: float,
    snap_distance: float = DEFAULT_SNAP_DISTANCE,
    exclude_wall_ids: AbstractSet[str] = frozenset(),
    anchor: Optional[Point] = None,
) -> List[SnapPoint]:
    """Find all snap points for a given cursor position.

    Args:
        cursor: Current pointer position.
        walls: Walls of the level.
        grid_size: Grid spacing.
        snap_distance: Only candidates strictly closer than this are kept.
        exclude_wall_ids: Walls that never contribute candidates, typically
            the wall being drawn.
        anchor: Start point of the wall being drawn. When given, the foot of
            the perpendicular from the anchor onto each wall is offered as a
            ``perpendicular`` candidate.

    Returns:
        Candidates sorted by distance to the cursor (stable within ties).
    """
    walls = [wall for wall in walls if wall.id not in exclude_wall_ids]
    candidates: List[SnapPoint] = []

    def consider(point: Point, snap_type: SnapType, reference_id: Optional[str] = None):
        if distance(cursor, point) < snap_distance:
            candidates.append(SnapPoint(point.x, point.y, snap_type, reference_id))

    for wall in walls:
        consider(wall.start, SnapType.ENDPOINT, wall.id)
        consider(wall.end, SnapType.ENDPOINT, wall.id)

    for wall in walls:
        consider(wall_midpoint(wall), SnapType.MIDPOINT, wall.id)

    if anchor is not None:
        for wall in walls:
            foot = perpendicular_point(wall, anchor)
            if foot is not None and _on_segment(foot, wall):
                consider(foot, SnapType.PERPENDICULAR, wall.id)

    for wall in walls:
        consider(nearest_point_on_segment(cursor, wall.start, wall.end), SnapType.WALL, wall.id)

    # Grid snap is always computed, then filtered like the others
    consider(snap_to_grid(cursor, grid_size), SnapType.GRID)

    candidates.sort(key=lambda snap: distance(cursor, Point(snap.x, snap.y)))
    return candidates


def best_snap_point(
    cursor: Point,
    walls: Iterable[Wall],
    grid_size: float,
    snap_distance: float = DEFAULT_SNAP_DISTANCE,
    exclude_wall_ids: AbstractSet[str] = frozenset(),
    snap_to_grid_enabled: bool = True,
    anchor: Optional[Point] = None,
) -> Optional[SnapPoint]:
    """Get the best snap point for a cursor position.

    Types are scanned in the order endpoint, midpoint, perpendicular, wall,
    grid; the nearest candidate of the first type that has one is returned.
    Grid candidates are skipped when grid snapping is disabled.

    Returns:
        The chosen snap point, or None when no enabled candidate is in range.
    """
    candidates = find_snap_points(
        cursor, walls, grid_size, snap_distance, exclude_wall_ids, anchor
    )

    for snap_type in SNAP_PRIORITY:
        if snap_type is SnapType.GRID and not snap_to_grid_enabled:
            continue
        for candidate in candidates:
            if candidate.type is snap_type:
                return candidate

    return None


def _angle_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two angles in degrees."""
    diff = (a - b) % 360
    return min(diff, 360 - diff)


def snap_angle(angle: float) -> float:
    """Snap an angle to the nearest multiple of 45 degrees within threshold.

    Returns:
        The snapped angle in [0, 360), or the input unchanged when no common
        angle is within the threshold.
    """
    normalized = angle % 360

    for common in SNAP_ANGLES:
        if abs(normalized - common) < ANGLE_SNAP_THRESHOLD:
            return 0 if common == 360 else common

    return angle


def snap_wall_endpoint(start: Point, end: Point, constrain_to_angles: bool = True) -> Point:
    """Snap the end point of a wall being drawn onto a common angle.

    The drawn length is preserved; only the direction changes.
    """
    if not constrain_to_angles:
        return end

    current = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
    snapped = snap_angle(current)

    if 0 < _angle_difference(current, snapped) < ANGLE_SNAP_THRESHOLD:
        length = distance(start, end)
        radians = math.radians(snapped)
        return Point(start.x + math.cos(radians) * length, start.y + math.sin(radians) * length)

    return end


def resolve_wall_endpoint(
    start: Point,
    cursor: Point,
    walls: Iterable[Wall],
    grid_size: float,
    snap_distance: float = DEFAULT_SNAP_DISTANCE,
    exclude_wall_ids: AbstractSet[str] = frozenset(),
    snap_to_grid_enabled: bool = True,
    constrain_to_angles: bool = True,
) -> Optional[SnapPoint]:
    """Resolve where the wall being drawn from ``start`` should end.

    The cursor is first angle-snapped, then point-snapped from the
    angle-snapped position. A point snap wins over the angle snap.

    Returns:
        The snap to commit to, or None when the raw cursor should be used.
    """
    angled = snap_wall_endpoint(start, cursor, constrain_to_angles)

    snap = best_snap_point(
        angled,
        walls,
        grid_size,
        snap_distance,
        exclude_wall_ids,
        snap_to_grid_enabled,
        anchor=start,
    )
    if snap is not None:
        return snap

    if angled != cursor:
        return SnapPoint(angled.x, angled.y, SnapType.ANGLE)
    return None
