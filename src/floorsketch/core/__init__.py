"""Core data models for sketch geometry."""

from .model import Fixture, Opening, Point, RoomPolygon, SketchGeometry, SnapPoint, Staircase, Wall
from .topology import build_wall_graph, merge_vertices
from .validators import InvalidSketch, validate_sketch

__all__ = [
    "Fixture",
    "InvalidSketch",
    "Opening",
    "Point",
    "RoomPolygon",
    "SketchGeometry",
    "SnapPoint",
    "Staircase",
    "Wall",
    "build_wall_graph",
    "merge_vertices",
    "validate_sketch",
]
