"""Staircase geometry from building-code constraints.

A staircase is computed once, at placement time, from the floor-to-floor
rise: the tread count and the actual riser height are always derived
together so they stay consistent with the rise. Layout, bounds and hit
testing work in the staircase's unrotated frame: the first run starts at
(x, y) and climbs towards +y; turning runs extend to the right (+x) or the
left (-x) of it.
"""

from __future__ import annotations

import math
import uuid
from typing import List, Optional

from shapely import affinity
from shapely.geometry import Polygon, box

from ..config import (
    DEFAULT_FLOOR_HEIGHT,
    DEFAULT_RISER_HEIGHT,
    DEFAULT_STAIR_WIDTH,
    DEFAULT_TREAD_DEPTH,
    MAX_RISER_HEIGHT,
    MAX_TREAD_DEPTH,
    MIN_RISER_HEIGHT,
    MIN_TREAD_DEPTH,
)
from ..core.model import BoundingBox, Point, Staircase, StaircaseType, Tread, TurnDirection
from .primitives import rotate_point


def _clamp_riser(height: float) -> float:
    return max(MIN_RISER_HEIGHT, min(MAX_RISER_HEIGHT, height))


def calculate_treads(
    total_rise: float = DEFAULT_FLOOR_HEIGHT, riser_height: float = DEFAULT_RISER_HEIGHT
) -> int:
    """Calculate the number of risers needed for a given rise."""
    return math.ceil(total_rise / riser_height)


def calculate_riser_height(total_rise: float, treads: int) -> float:
    """Actual riser height for a rise split over ``treads`` risers.

    Clamped to the code-legal range.
    """
    return _clamp_riser(total_rise / treads)


def calculate_stair_run(treads: int, tread_depth: float = DEFAULT_TREAD_DEPTH) -> float:
    """Total horizontal run of a flight.

    One tread depth less than the riser count: the top tread is the floor.
    """
    return (treads - 1) * tread_depth


def _run_treads(staircase: Staircase) -> List[int]:
    """Number of riser steps in each flight, first flight first."""
    treads = staircase.treads
    if staircase.type is StaircaseType.L_SHAPED:
        first = treads // 2
        return [first, treads - first]
    if staircase.type is StaircaseType.U_SHAPED:
        third = treads // 3
        return [third, third, third]
    return [treads]


def create_staircase(
    type: StaircaseType,
    x: float,
    y: float,
    *,
    width: float = DEFAULT_STAIR_WIDTH,
    total_rise: float = DEFAULT_FLOOR_HEIGHT,
    riser_height: float = DEFAULT_RISER_HEIGHT,
    tread_depth: float = DEFAULT_TREAD_DEPTH,
    turn_direction: TurnDirection = TurnDirection.RIGHT,
    rotation: float = 0.0,
    staircase_id: Optional[str] = None,
) -> Staircase:
    """Create a new staircase with calculated dimensions.

    The requested riser height is clamped into the code range before the
    tread count is derived from it, then the actual riser height is
    re-derived from the rise and that count.

    Args:
        type: Staircase topology.
        x: X-coordinate of the foot of the first run.
        y: Y-coordinate of the foot of the first run.
        width: Width of each run; also the side of the square landings.
        total_rise: Floor-to-floor rise.
        riser_height: Target riser height.
        tread_depth: Tread depth.
        turn_direction: Side turning runs extend to. Ignored for straight stairs.
        rotation: Rotation in degrees around the bounding-box centre.
        staircase_id: Identifier; a random UUID when omitted.

    Returns:
        The staircase.
    """
    type = StaircaseType(type)
    treads = calculate_treads(total_rise, _clamp_riser(riser_height))
    actual_riser = calculate_riser_height(total_rise, treads)

    landing_width = None
    if type is StaircaseType.STRAIGHT:
        length = calculate_stair_run(treads, tread_depth)
    elif type is StaircaseType.L_SHAPED:
        landing_width = width
        length = calculate_stair_run(treads // 2, tread_depth) + landing_width
    else:
        landing_width = width
        length = calculate_stair_run(treads // 3, tread_depth) * 2 + landing_width

    turning = type is not StaircaseType.STRAIGHT

    return Staircase(
        id=staircase_id or str(uuid.uuid4()),
        type=type,
        x=x,
        y=y,
        width=width,
        length=length,
        rotation=rotation,
        treads=treads,
        riser_height=actual_riser,
        tread_depth=tread_depth,
        turn_direction=TurnDirection(turn_direction) if turning else None,
        landing_width=landing_width if turning else None,
    )


def _u_shaped_treads(s: Staircase, runs: List[int], right: bool) -> List[Tread]:
    d = s.tread_depth
    w = s.width
    landing = s.landing_width
    step = w if right else -w
    positions: List[Tread] = []

    for i in range(runs[0] - 1):
        positions.append(Tread(s.x, s.y + i * d, w, d))

    middle_x = s.x + step
    first_landing_y = s.y + calculate_stair_run(runs[0], d)
    positions.append(Tread(middle_x, first_landing_y, w, landing, is_landing=True))

    middle_y = first_landing_y + landing
    for i in range(runs[1] - 1):
        positions.append(Tread(middle_x, middle_y + i * d, w, d))

    # Second landing is top-aligned with the head of the middle flight
    last_x = s.x + 2 * step
    second_landing_y = middle_y + calculate_stair_run(runs[1], d) - landing
    positions.append(Tread(last_x, second_landing_y, w, landing, is_landing=True))

    for i in range(runs[2] - 1):
        positions.append(Tread(last_x, second_landing_y - (i + 1) * d, w, d))

    return positions


def tread_positions(staircase: Staircase) -> List[Tread]:
    """Generate tread and landing rectangles for rendering.

    Straight: ``treads - 1`` treads climbing +y.

    L-shaped: the first flight climbs +y to a square landing at the top of
    the first run; the second flight leaves the landing sideways.

    U-shaped: three parallel flights of ``treads // 3`` risers, each one
    stair width further to the turn side. The first climbs +y to the
    first landing, set beside its head; the middle flight climbs from that
    landing to the top of the run; the second landing sits beside the head
    of the middle flight and the last flight comes back down -y from it.
    Everything stays within ``length``.
    """
    s = staircase
    d = s.tread_depth
    w = s.width
    positions: List[Tread] = []

    if s.type is StaircaseType.STRAIGHT or not s.landing_width:
        for i in range(s.treads - 1):
            positions.append(Tread(s.x, s.y + i * d, w, d))
        return positions

    landing = s.landing_width
    right = s.turn_direction is not TurnDirection.LEFT
    runs = _run_treads(s)

    if s.type is StaircaseType.U_SHAPED:
        return _u_shaped_treads(s, runs, right)

    first = runs[0] - 1
    for i in range(first):
        positions.append(Tread(s.x, s.y + i * d, w, d))
    landing_y = s.y + first * d
    positions.append(Tread(s.x, landing_y, w, landing, is_landing=True))

    # Sideways flight along the landing row
    side = runs[1] - 1
    for i in range(side):
        tx = s.x + w + i * d if right else s.x - (i + 1) * d
        positions.append(Tread(tx, landing_y, d, landing))

    return positions


def staircase_bounds(staircase: Staircase) -> BoundingBox:
    """Get the bounding box of a staircase in its unrotated frame.

    Covers the nominal run and every tread and landing, so L- and U-shaped
    stairs are wider than a single run and extend to the side given by
    their turn direction. A U-shaped stair is three stair widths wide and
    ``length`` deep.
    """
    s = staircase
    min_x = s.x
    max_x = s.x + s.width
    min_y = s.y
    max_y = s.y + s.length

    for tread in tread_positions(s):
        min_x = min(min_x, tread.x)
        max_x = max(max_x, tread.x + tread.width)
        min_y = min(min_y, tread.y)
        max_y = max(max_y, tread.y + tread.depth)

    return BoundingBox(min_x, min_y, max_x, max_y)


def staircase_contains_point(staircase: Staircase, point: Point) -> bool:
    """Check if a point is within a staircase, honouring its rotation.

    The point is rotated by the inverse of the staircase rotation around the
    bounding-box centre, then tested against the axis-aligned box.
    """
    bounds = staircase_bounds(staircase)

    if staircase.rotation:
        point = rotate_point(point, bounds.center, -staircase.rotation)

    return bounds.min_x <= point.x <= bounds.max_x and bounds.min_y <= point.y <= bounds.max_y


def staircase_footprint(staircase: Staircase) -> Polygon:
    """Rotated bounding rectangle of a staircase as a shapely Polygon."""
    bounds = staircase_bounds(staircase)
    rect = box(bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y)
    if not staircase.rotation:
        return rect
    center = bounds.center
    return affinity.rotate(rect, staircase.rotation, origin=(center.x, center.y))


def code_violations(staircase: Staircase) -> List[str]:
    """List riser and tread dimensions outside the building-code range."""
    problems = []
    if not MIN_RISER_HEIGHT <= staircase.riser_height <= MAX_RISER_HEIGHT:
        problems.append(
            f"riser height {staircase.riser_height:.2f} outside "
            f"[{MIN_RISER_HEIGHT:g}, {MAX_RISER_HEIGHT:g}]"
        )
    if not MIN_TREAD_DEPTH <= staircase.tread_depth <= MAX_TREAD_DEPTH:
        problems.append(
            f"tread depth {staircase.tread_depth:.2f} outside "
            f"[{MIN_TREAD_DEPTH:g}, {MAX_TREAD_DEPTH:g}]"
        )
    return problems
