"""Room detection from an unordered set of wall segments.

Rooms are the bounded faces of the wall graph. Each wall is walked in both
directions (two half-edges); from every half-edge not yet consumed by an
earlier loop, the trace repeatedly takes the wall immediately clockwise from
the direction it arrived from. Bounded faces come out counter-clockwise and
are kept; the clockwise outer boundary of each connected plan is discarded.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

import networkx as nx

from ..config import (
    AREA_DECIMALS,
    DEFAULT_PIXELS_PER_FOOT,
    MIN_ROOM_AREA_SQFT,
    POINT_TOLERANCE,
)
from ..core.model import Point, RoomPolygon, Wall
from ..core.topology import build_wall_graph
from .polygon import is_simple, point_in_polygon, polygon_perimeter, signed_area

LOGGER = logging.getLogger(__name__)

TWO_PI = 2 * math.pi
ANGLE_EPSILON = 1e-12

# A half-edge is (wall order, forward): forward walks the wall start -> end.
HalfEdge = Tuple[int, bool]


class FaceTracer:
    """Walks bounded faces of a wall graph.

    Args:
        G: Wall graph built by :func:`floorsketch.core.topology.build_wall_graph`.
        max_steps: Upper bound on half-edges visited by a single trace.
    """

    def __init__(self, G: nx.MultiGraph, max_steps: int):
        self.G = G
        self.max_steps = max_steps
        self.ends: Dict[int, Tuple[int, int]] = {}
        # vertex -> [(outgoing angle, wall order, neighbour)]
        self.outgoing: Dict[int, List[Tuple[float, int, int]]] = {v: [] for v in G.nodes}

        for u, v, data in G.edges(data=True):
            order = data["order"]
            start, end = data["start"], data["end"]
            self.ends[order] = (start, end)
            self.outgoing[start].append((self._angle(start, end), order, end))
            self.outgoing[end].append((self._angle(end, start), order, start))

        for edges in self.outgoing.values():
            edges.sort(key=lambda item: item[1])

    def _pos(self, vertex: int) -> Point:
        return self.G.nodes[vertex]["pos"]

    def _angle(self, origin: int, target: int) -> float:
        a = self._pos(origin)
        b = self._pos(target)
        return math.atan2(b.y - a.y, b.x - a.x)

    def half_edges(self) -> List[HalfEdge]:
        """All half-edges in seeding order: walls in input order, forward first."""
        result = []
        for order in sorted(self.ends):
            result.append((order, True))
            result.append((order, False))
        return result

    def tail_head(self, half_edge: HalfEdge) -> Tuple[int, int]:
        order, forward = half_edge
        start, end = self.ends[order]
        return (start, end) if forward else (end, start)

    def next_half_edge(self, half_edge: HalfEdge) -> Optional[HalfEdge]:
        """Pick the wall immediately clockwise from the arrival direction.

        Returns None at a dead end, i.e. when the arrival wall is the only
        wall incident to the vertex.
        """
        order, _ = half_edge
        tail, head = self.tail_head(half_edge)
        back_angle = self._angle(head, tail)

        best = None
        best_key = None
        for angle, candidate_order, neighbour in self.outgoing[head]:
            if candidate_order == order:
                continue
            turn = (back_angle - angle) % TWO_PI
            if turn <= ANGLE_EPSILON:
                # Overlapping wall running back along the arrival wall.
                turn = TWO_PI
            key = (turn, candidate_order)
            if best_key is None or key < best_key:
                best_key = key
                best = (candidate_order, self.ends[candidate_order][0] == head)

        return best

    def trace(self, start: HalfEdge) -> Optional[Tuple[List[int], List[HalfEdge]]]:
        """Trace a closed loop starting along ``start``.

        Returns:
            The loop's vertex ids and the half-edges walked, or None if the
            trace dead-ends, degenerates, or exceeds the step cap.
        """
        first_vertex, _ = self.tail_head(start)
        loop = [first_vertex]
        path = [start]
        current = start

        for _ in range(self.max_steps):
            _, head = self.tail_head(current)

            if head == first_vertex:
                if len(loop) >= 3:
                    return loop, path
                LOGGER.debug("Degenerate two-wall loop from half-edge %s", start)
                return None

            loop.append(head)

            current = self.next_half_edge(current)
            if current is None:
                LOGGER.debug("Dead end at vertex %s tracing from half-edge %s", head, start)
                return None
            path.append(current)

        LOGGER.debug("Trace from half-edge %s exceeded %d steps", start, self.max_steps)
        return None

    def points(self, loop: Sequence[int]) -> List[Point]:
        return [self._pos(vertex) for vertex in loop]


def detect_rooms(
    walls: Iterable[Wall],
    pixels_per_foot: float = DEFAULT_PIXELS_PER_FOOT,
    *,
    tolerance: float = POINT_TOLERANCE,
    min_area_sqft: float = MIN_ROOM_AREA_SQFT,
) -> List[RoomPolygon]:
    """Detect all enclosed rooms from walls.

    Args:
        walls: Wall segments of one level, in any order and orientation.
        pixels_per_foot: Coordinate units per foot.
        tolerance: Endpoints closer than this are the same vertex.
        min_area_sqft: Loops enclosing less than this are discarded.

    Returns:
        Room polygons sorted by area, smallest first. Areas are in square
        feet and perimeters in linear feet, rounded to two decimals.
    """
    walls = list(walls)
    if len(walls) < 3:
        return []

    G = build_wall_graph(walls, tolerance)
    tracer = FaceTracer(G, max_steps=2 * len(walls))
    used: Set[HalfEdge] = set()
    rooms = []
    scale = pixels_per_foot * pixels_per_foot

    for half_edge in tracer.half_edges():
        if half_edge in used:
            continue

        traced = tracer.trace(half_edge)
        if traced is None:
            continue

        loop, path = traced
        used.update(path)
        points = tracer.points(loop)

        area_pixels = signed_area(points)
        if area_pixels <= 0:
            LOGGER.debug("Discarding clockwise boundary with %d vertices", len(points))
            continue

        if not is_simple(points):
            LOGGER.debug("Discarding self-intersecting loop with %d vertices", len(points))
            continue

        area_feet = area_pixels / scale
        if area_feet < min_area_sqft:
            LOGGER.debug("Discarding %.2f sq ft sliver", area_feet)
            continue

        perimeter_feet = polygon_perimeter(points) / pixels_per_foot
        rooms.append(
            RoomPolygon(
                points=tuple(points),
                area=round(area_feet, AREA_DECIMALS),
                perimeter=round(perimeter_feet, AREA_DECIMALS),
            )
        )

    rooms.sort(key=lambda room: room.area)
    LOGGER.debug("Detected %d rooms from %d walls", len(rooms), len(walls))
    return rooms


def find_room_at_point(point: Point, rooms: Sequence[RoomPolygon]) -> Optional[RoomPolygon]:
    """Find which detected room contains a point.

    Rooms are checked in the given order; with the output of
    :func:`detect_rooms` the smallest enclosing room wins.
    """
    for room in rooms:
        if point_in_polygon(point, room.points):
            return room
    return None
