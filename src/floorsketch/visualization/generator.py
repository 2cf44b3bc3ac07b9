"""Image generation for sketch visualization.

This module renders a static PNG of a level: detected rooms with their
areas, walls, openings, fixtures and staircase treads. Coordinates are
screen-like (y grows downwards), so the y axis is inverted.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from shapely import affinity
from shapely.geometry import box

from ..config import DEFAULT_PIXELS_PER_FOOT
from ..core.model import OpeningType, RoomPolygon, SketchGeometry
from ..geom.openings import opening_span
from ..geom.polygon import polygon_centroid
from ..geom.rooms import detect_rooms
from ..geom.staircase import staircase_bounds, tread_positions

LOGGER = logging.getLogger(__name__)

# Global parameters below imports
ROOM_COLORS = ["#A6CEE3", "#B2DF8A", "#FB9A99", "#FDBF6F", "#CAB2D6", "#FFFF99"]
WALL_COLOR = "#000000"
DOOR_COLOR = "#FF0000"
WINDOW_COLOR = "#1F78B4"
FIXTURE_COLOR = "#6A3D9A"
STAIR_COLOR = "#8C564B"
OPENING_WIDTH = 4
FIGURE_SIZE = (12, 12)
DPI = 140


def _rotated_rect(
    min_x: float, min_y: float, max_x: float, max_y: float, rotation: float, origin: Tuple[float, float]
) -> List[Tuple[float, float]]:
    rect = box(min_x, min_y, max_x, max_y)
    if rotation:
        rect = affinity.rotate(rect, rotation, origin=origin)
    return list(rect.exterior.coords)


def generate_sketch_image(
    sketch: SketchGeometry,
    output_path: Path,
    pixels_per_foot: float = DEFAULT_PIXELS_PER_FOOT,
    rooms: Optional[Sequence[RoomPolygon]] = None,
) -> bool:
    """Generate a PNG image of a sketch.

    Args:
        sketch: The sketch to visualize.
        output_path: Path where to save the PNG image.
        pixels_per_foot: Scale used when rooms are detected here.
        rooms: Rooms to draw; detected from the walls when omitted.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.patches import Polygon as PolygonPatch

    if rooms is None:
        rooms = detect_rooms(sketch.walls, pixels_per_foot)

    try:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    except OSError as e:
        LOGGER.error("Error in image generation: %s", e)
        return False

    try:
        for index, room in enumerate(rooms):
            xy = [(p.x, p.y) for p in room.points]
            color = ROOM_COLORS[index % len(ROOM_COLORS)]
            ax.add_patch(PolygonPatch(xy, closed=True, facecolor=color, alpha=0.7, edgecolor="none"))
            c = polygon_centroid(room.points)
            ax.text(c.x, c.y, f"{room.area:.1f} sq ft", ha="center", va="center", fontsize=9, fontweight="bold")

        for wall in sketch.walls:
            ax.plot(
                [wall.start_x, wall.end_x],
                [wall.start_y, wall.end_y],
                color=WALL_COLOR,
                linewidth=max(1.0, wall.thickness / 2),
                solid_capstyle="round",
            )

        walls_by_id = {wall.id: wall for wall in sketch.walls}
        for opening in sketch.openings:
            wall = walls_by_id.get(opening.wall_id)
            if wall is None:
                LOGGER.warning("Skipping opening %s on missing wall %s", opening.id, opening.wall_id)
                continue
            a, b = opening_span(opening, wall)
            color = DOOR_COLOR if opening.type is OpeningType.DOOR else WINDOW_COLOR
            ax.plot([a.x, b.x], [a.y, b.y], color=color, linewidth=OPENING_WIDTH)

        for fixture in sketch.fixtures:
            corners = _rotated_rect(
                fixture.x - fixture.width / 2,
                fixture.y - fixture.height / 2,
                fixture.x + fixture.width / 2,
                fixture.y + fixture.height / 2,
                fixture.rotation,
                (fixture.x, fixture.y),
            )
            ax.add_patch(PolygonPatch(corners, closed=True, fill=False, edgecolor=FIXTURE_COLOR))
            ax.text(fixture.x, fixture.y, fixture.type.value, ha="center", va="center", fontsize=6)

        for staircase in sketch.staircases:
            center = staircase_bounds(staircase).center
            for tread in tread_positions(staircase):
                corners = _rotated_rect(
                    tread.x,
                    tread.y,
                    tread.x + tread.width,
                    tread.y + tread.depth,
                    staircase.rotation,
                    (center.x, center.y),
                )
                ax.add_patch(
                    PolygonPatch(
                        corners,
                        closed=True,
                        fill=tread.is_landing,
                        facecolor="#EEEEEE",
                        edgecolor=STAIR_COLOR,
                        linewidth=0.8,
                    )
                )

        ax.autoscale_view()
        ax.set_aspect("equal", adjustable="datalim")
        ax.invert_yaxis()
        ax.axis("off")
        fig.tight_layout()
        fig.savefig(output_path, dpi=DPI)
        return True

    except (OSError, ValueError) as e:
        LOGGER.error("Error in image generation: %s", e)
        return False

    finally:
        plt.close(fig)
