"""Topology analysis for wall sketches.

Walls carry no adjacency of their own: two walls are connected when one of
their endpoints coincides within tolerance. This module merges coincident
endpoints into shared vertices up front and builds the resulting wall graph,
so that later traversals work on vertex ids instead of repeatedly comparing
coordinates.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from ..config import POINT_TOLERANCE
from .model import Point, Wall

LOGGER = logging.getLogger(__name__)


class VertexIndex:
    """Spatial hash assigning merged vertex ids to points.

    Points closer than ``tolerance`` to an existing vertex map to that vertex.
    The first point seen becomes the vertex's representative coordinate.
    """

    def __init__(self, tolerance: float = POINT_TOLERANCE):
        self.tolerance = tolerance
        self.points: List[Point] = []
        self._cells: Dict[Tuple[int, int], List[int]] = {}

    def _cell(self, point: Point) -> Tuple[int, int]:
        return (math.floor(point.x / self.tolerance), math.floor(point.y / self.tolerance))

    def find(self, point: Point) -> int | None:
        """Return the id of the vertex within tolerance of ``point``, if any."""
        cx, cy = self._cell(point)
        best_id = None
        best_distance = self.tolerance
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for vertex_id in self._cells.get((cx + dx, cy + dy), ()):
                    vertex = self.points[vertex_id]
                    d = math.hypot(vertex.x - point.x, vertex.y - point.y)
                    if d < best_distance:
                        best_id = vertex_id
                        best_distance = d
        return best_id

    def add(self, point: Point) -> int:
        """Return the id of the vertex for ``point``, creating it if needed."""
        vertex_id = self.find(point)
        if vertex_id is not None:
            return vertex_id

        vertex_id = len(self.points)
        self.points.append(point)
        self._cells.setdefault(self._cell(point), []).append(vertex_id)
        return vertex_id

    def __len__(self) -> int:
        return len(self.points)


def merge_vertices(
    walls: Sequence[Wall], tolerance: float = POINT_TOLERANCE
) -> Tuple[List[Point], List[Tuple[int, int]]]:
    """Merge coincident wall endpoints into shared vertices.

    Args:
        walls: Wall segments, in the order they should be indexed.
        tolerance: Endpoints closer than this are the same vertex.

    Returns:
        A tuple of the vertex coordinates and, for each wall, the pair of
        (start_vertex_id, end_vertex_id).
    """
    index = VertexIndex(tolerance)
    endpoints = []
    for wall in walls:
        endpoints.append((index.add(wall.start), index.add(wall.end)))
    return index.points, endpoints


def build_wall_graph(
    walls: Iterable[Wall], tolerance: float = POINT_TOLERANCE
) -> nx.MultiGraph:
    """Build the wall graph of a sketch.

    Creates a NetworkX multigraph where nodes are merged vertices (with a
    ``pos`` attribute holding the representative Point) and edges are walls
    keyed by wall id. Each edge records ``order``, the wall's index in the
    input, for deterministic tie-breaking, and ``start``/``end``, the vertex
    ids of the wall's own endpoints. Zero-length walls, whose ends merge
    into a single vertex, are left out.

    Args:
        walls: Wall segments of one level.
        tolerance: Endpoints closer than this are the same vertex.

    Returns:
        NetworkX MultiGraph of the wall topology.
    """
    walls = list(walls)
    points, endpoints = merge_vertices(walls, tolerance)

    G = nx.MultiGraph()
    for vertex_id, point in enumerate(points):
        G.add_node(vertex_id, pos=point)

    for order, (wall, (u, v)) in enumerate(zip(walls, endpoints)):
        if u == v:
            LOGGER.debug("Skipping zero-length wall %s", wall.id)
            continue
        G.add_edge(u, v, key=wall.id, order=order, start=u, end=v, wall=wall)

    return G


def dangling_vertices(G: nx.MultiGraph) -> List[int]:
    """Vertices with a single incident wall; no room boundary can pass them."""
    return [node for node, degree in G.degree() if degree == 1]


def connected_wall_groups(G: nx.MultiGraph) -> List[List[str]]:
    """Group wall ids by connected component, in input order."""
    groups = []
    for component in nx.connected_components(G):
        edges = sorted(
            (data["order"], key)
            for _, _, key, data in G.subgraph(component).edges(keys=True, data=True)
        )
        if edges:
            groups.append(edges)
    groups.sort(key=lambda edges: edges[0][0])
    return [[key for _, key in edges] for edges in groups]
