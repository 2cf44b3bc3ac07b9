"""Core data models for the sketch editor.

This module defines the fundamental data structures used to represent
a single level of a floor plan sketch: walls, openings placed on walls,
free-standing fixtures, staircases, and the derived room polygons and
snap hints computed from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..config import DEFAULT_WALL_THICKNESS


class OpeningType(str, Enum):
    DOOR = "door"
    WINDOW = "window"


class DoorType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    POCKET = "pocket"
    BI_FOLD = "bi-fold"
    SLIDING = "sliding"


class WindowType(str, Enum):
    HUNG = "hung"
    CASEMENT = "casement"
    SLIDING = "sliding"
    PICTURE = "picture"


class SwingDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class FixtureCategory(str, Enum):
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    LAUNDRY = "laundry"


class FixtureType(str, Enum):
    SINK = "sink"
    STOVE = "stove"
    FRIDGE = "fridge"
    DISHWASHER = "dishwasher"
    MICROWAVE = "microwave"
    ISLAND = "island"
    TOILET = "toilet"
    TUB = "tub"
    SHOWER = "shower"
    VANITY = "vanity"
    BIDET = "bidet"
    WASHER = "washer"
    DRYER = "dryer"
    UTILITY_SINK = "utility-sink"


class StaircaseType(str, Enum):
    STRAIGHT = "straight"
    L_SHAPED = "l-shaped"
    U_SHAPED = "u-shaped"


class TurnDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class SnapType(str, Enum):
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"
    PERPENDICULAR = "perpendicular"
    WALL = "wall"
    GRID = "grid"
    ANGLE = "angle"


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in a level's local coordinate space.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Wall:
    """Represents an undirected wall segment.

    Attributes:
        id: Unique identifier for the wall.
        start_x: X-coordinate of the first endpoint.
        start_y: Y-coordinate of the first endpoint.
        end_x: X-coordinate of the second endpoint.
        end_y: Y-coordinate of the second endpoint.
        thickness: Perpendicular thickness, used for rendering only.
    """

    id: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    thickness: float = DEFAULT_WALL_THICKNESS

    @property
    def start(self) -> Point:
        return Point(self.start_x, self.start_y)

    @property
    def end(self) -> Point:
        return Point(self.end_x, self.end_y)


@dataclass(frozen=True)
class Opening:
    """Represents a door or window placed on a wall.

    Attributes:
        id: Unique identifier for the opening.
        wall_id: ID of the wall this opening is on.
        type: Door or window.
        position: Normalized position of the opening centre along the wall,
            0 at the wall start and 1 at the wall end.
        width: Width of the opening.
        subtype: Door or window style.
        swing_direction: Swing side, doors only.
    """

    id: str
    wall_id: str
    type: OpeningType
    position: float
    width: float
    subtype: Optional[str] = None
    swing_direction: Optional[SwingDirection] = None


@dataclass(frozen=True)
class Fixture:
    """Represents a free-standing fixture rectangle centred on (x, y)."""

    id: str
    type: FixtureType
    category: FixtureCategory
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0


@dataclass(frozen=True)
class Staircase:
    """Represents a staircase placed on a level.

    ``treads``, ``riser_height`` and ``length`` are derived at creation time
    by :func:`floorsketch.geom.staircase.create_staircase` and must stay
    consistent with each other.

    Attributes:
        id: Unique identifier for the staircase.
        type: Straight, L-shaped or U-shaped.
        x: X-coordinate of the foot of the first run.
        y: Y-coordinate of the foot of the first run.
        width: Width of a run.
        length: Run length along the first flight.
        rotation: Rotation in degrees around the bounding-box centre.
        treads: Number of risers needed for the total rise.
        riser_height: Actual riser height, total rise divided by treads.
        tread_depth: Horizontal depth of a tread.
        turn_direction: Turn side for L- and U-shaped stairs.
        landing_width: Side of the square landings for L- and U-shaped stairs.
    """

    id: str
    type: StaircaseType
    x: float
    y: float
    width: float
    length: float
    rotation: float
    treads: int
    riser_height: float
    tread_depth: float
    turn_direction: Optional[TurnDirection] = None
    landing_width: Optional[float] = None


@dataclass(frozen=True)
class RoomPolygon:
    """An enclosed room derived from the wall set.

    Attributes:
        points: Closed, simple, counter-clockwise loop of wall endpoints.
        area: Area in square feet.
        perimeter: Perimeter in linear feet.
    """

    points: Tuple[Point, ...]
    area: float
    perimeter: float


@dataclass(frozen=True)
class SnapPoint:
    """A candidate location the pointer is pulled toward while drawing."""

    x: float
    y: float
    type: SnapType
    reference_id: Optional[str] = None


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class Tread:
    """A tread or landing rectangle in a staircase's unrotated frame."""

    x: float
    y: float
    width: float
    depth: float
    is_landing: bool = False


@dataclass(frozen=True)
class SketchGeometry:
    """Represents the full geometry payload of one level.

    Attributes:
        walls: Wall segments, the only source of room topology.
        openings: Doors and windows referencing walls by id.
        fixtures: Free-standing fixtures.
        staircases: Staircases placed on the level.
        detected_rooms: Rooms detected at the last save, if any.
    """

    walls: Tuple[Wall, ...] = ()
    openings: Tuple[Opening, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    staircases: Tuple[Staircase, ...] = ()
    detected_rooms: Tuple[RoomPolygon, ...] = ()
