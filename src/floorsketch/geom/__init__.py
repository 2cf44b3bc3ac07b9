"""Geometry utilities for sketches.

This module provides the pure geometry functions of the editor: snapping
while drawing, room detection from walls, and staircase layout.
"""

from .rooms import detect_rooms, find_room_at_point
from .snapping import best_snap_point, find_snap_points, snap_angle, snap_wall_endpoint
from .staircase import (
    create_staircase,
    staircase_bounds,
    staircase_contains_point,
    tread_positions,
)

__all__ = [
    "best_snap_point",
    "create_staircase",
    "detect_rooms",
    "find_room_at_point",
    "find_snap_points",
    "snap_angle",
    "snap_wall_endpoint",
    "staircase_bounds",
    "staircase_contains_point",
    "tread_positions",
]
