"""Floor Sketch - 2D floor plan geometry: snapping, room detection and staircases."""

__version__ = "0.1.0"

from .core.model import Opening, Point, RoomPolygon, SketchGeometry, SnapPoint, Staircase, Wall
from .geom.rooms import detect_rooms
from .geom.snapping import best_snap_point, snap_wall_endpoint
from .geom.staircase import create_staircase, staircase_bounds, staircase_contains_point

__all__ = [
    "Opening",
    "Point",
    "RoomPolygon",
    "SketchGeometry",
    "SnapPoint",
    "Staircase",
    "Wall",
    "best_snap_point",
    "create_staircase",
    "detect_rooms",
    "snap_wall_endpoint",
    "staircase_bounds",
    "staircase_contains_point",
]
