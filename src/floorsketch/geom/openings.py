"""Placement of doors and windows along walls."""

from __future__ import annotations

import uuid
from typing import Optional, Tuple

from ..core.model import DoorType, Opening, OpeningType, Point, SwingDirection, Wall, WindowType
from .primitives import point_at_wall_position, position_along_wall, wall_length

DEFAULT_DOOR_WIDTH = 32.0
DEFAULT_WINDOW_WIDTH = 36.0


def place_opening(
    wall: Wall,
    click: Point,
    type: OpeningType,
    *,
    width: Optional[float] = None,
    subtype: Optional[str] = None,
    swing_direction: Optional[SwingDirection] = None,
    opening_id: Optional[str] = None,
) -> Opening:
    """Create an opening on ``wall`` centred at the projection of ``click``.

    Args:
        wall: Host wall.
        click: Pointer position; only its projection onto the wall matters.
        type: Door or window.
        width: Opening width; a type-specific default when omitted.
        subtype: Door or window style; single door or hung window by default.
        swing_direction: Swing side. Defaults to left for doors, unset for
            windows.
        opening_id: Identifier; a random UUID when omitted.

    Returns:
        The new opening.
    """
    type = OpeningType(type)
    is_door = type is OpeningType.DOOR

    if width is None:
        width = DEFAULT_DOOR_WIDTH if is_door else DEFAULT_WINDOW_WIDTH
    if subtype is None:
        subtype = DoorType.SINGLE.value if is_door else WindowType.HUNG.value
    if is_door and swing_direction is None:
        swing_direction = SwingDirection.LEFT

    return Opening(
        id=opening_id or str(uuid.uuid4()),
        wall_id=wall.id,
        type=type,
        position=position_along_wall(wall, click),
        width=width,
        subtype=subtype,
        swing_direction=swing_direction if is_door else None,
    )


def opening_center(opening: Opening, wall: Wall) -> Point:
    return point_at_wall_position(wall, opening.position)


def opening_span(opening: Opening, wall: Wall) -> Tuple[Point, Point]:
    """The two wall points bounding an opening, clamped to the wall ends."""
    length = wall_length(wall)
    if length == 0:
        return wall.start, wall.start

    half = opening.width / 2 / length
    start = max(0.0, opening.position - half)
    end = min(1.0, opening.position + half)
    return point_at_wall_position(wall, start), point_at_wall_position(wall, end)


def opening_fits(opening: Opening, wall: Wall) -> bool:
    """Check that an opening lies entirely within its wall."""
    length = wall_length(wall)
    half = opening.width / 2
    center = opening.position * length
    return opening.width <= length and center - half >= 0 and center + half <= length
