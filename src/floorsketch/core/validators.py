"""Validation functions for sketch payloads.

The geometry core never validates its input: it stays total and returns a
best-effort answer for any well-typed arrays. These validators are for the
host, to run before persisting or rendering a sketch.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from ..config import POINT_TOLERANCE
from .model import Opening, SketchGeometry, Wall
from .topology import build_wall_graph, dangling_vertices


class InvalidSketch(Exception):
    """Raised when a sketch violates referential or geometric invariants."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def find_orphaned_openings(openings: Iterable[Opening], walls: Iterable[Wall]) -> List[Opening]:
    """Openings whose wall_id does not resolve to an existing wall."""
    wall_ids = {wall.id for wall in walls}
    return [opening for opening in openings if opening.wall_id not in wall_ids]


def drop_orphaned_openings(sketch: SketchGeometry) -> SketchGeometry:
    """Return a copy of the sketch without openings on deleted walls."""
    wall_ids = {wall.id for wall in sketch.walls}
    openings = tuple(o for o in sketch.openings if o.wall_id in wall_ids)
    return SketchGeometry(
        walls=sketch.walls,
        openings=openings,
        fixtures=sketch.fixtures,
        staircases=sketch.staircases,
        detected_rooms=sketch.detected_rooms,
    )


def find_degenerate_walls(walls: Iterable[Wall], tolerance: float = POINT_TOLERANCE) -> List[Wall]:
    """Walls whose endpoints coincide within tolerance."""
    degenerate = []
    for wall in walls:
        dx = wall.end_x - wall.start_x
        dy = wall.end_y - wall.start_y
        if (dx * dx + dy * dy) ** 0.5 < tolerance:
            degenerate.append(wall)
    return degenerate


def find_duplicate_ids(sketch: SketchGeometry) -> List[str]:
    """Ids used by more than one wall, opening, fixture or staircase."""
    ids = Counter(
        entity.id
        for entity in (*sketch.walls, *sketch.openings, *sketch.fixtures, *sketch.staircases)
    )
    return sorted(entity_id for entity_id, count in ids.items() if count > 1)


def find_dangling_walls(walls: Sequence[Wall], tolerance: float = POINT_TOLERANCE) -> List[str]:
    """Ids of walls with an endpoint touching no other wall.

    Dangling walls never bound a room. They are legitimate while drawing, so
    they are reported as warnings rather than errors.
    """
    G = build_wall_graph(walls, tolerance)
    dangling = set(dangling_vertices(G))
    ids = set()
    for u, v, key in G.edges(keys=True):
        if u in dangling or v in dangling:
            ids.add(key)
    return [wall.id for wall in walls if wall.id in ids]


def validate_sketch(sketch: SketchGeometry, tolerance: float = POINT_TOLERANCE) -> bool:
    """Run all validators on a sketch.

    Args:
        sketch: The sketch to validate.
        tolerance: Endpoint tolerance used for degenerate-wall detection.

    Returns:
        True if all validations pass.

    Raises:
        InvalidSketch: Listing every orphaned opening, zero-length wall and
            duplicated id.
    """
    problems = []

    for opening in find_orphaned_openings(sketch.openings, sketch.walls):
        problems.append(f"Opening '{opening.id}' references nonexistent wall '{opening.wall_id}'")

    for wall in find_degenerate_walls(sketch.walls, tolerance):
        problems.append(f"Wall '{wall.id}' has zero length")

    for entity_id in find_duplicate_ids(sketch):
        problems.append(f"Id '{entity_id}' is used more than once")

    if problems:
        raise InvalidSketch(problems)

    return True
