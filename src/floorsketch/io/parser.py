"""Parser for sketch geometry JSON payloads.

This module converts the geometry blob the host application stores for a
level (camelCase keys, one array per entity kind) to and from
SketchGeometry objects, and builds the payload written on save.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from ..config import DEFAULT_PIXELS_PER_FOOT, DEFAULT_WALL_THICKNESS
from ..core.model import (
    Fixture,
    FixtureCategory,
    FixtureType,
    Opening,
    OpeningType,
    Point,
    RoomPolygon,
    SketchGeometry,
    Staircase,
    StaircaseType,
    SwingDirection,
    TurnDirection,
    Wall,
)
from ..geom.polygon import polygon_centroid
from ..geom.rooms import detect_rooms


def _optional(value, cast):
    return None if value is None else cast(value)


def _parse_wall(data: Dict[str, Any]) -> Wall:
    return Wall(
        id=str(data["id"]),
        start_x=float(data["startX"]),
        start_y=float(data["startY"]),
        end_x=float(data["endX"]),
        end_y=float(data["endY"]),
        thickness=float(data.get("thickness", DEFAULT_WALL_THICKNESS)),
    )


def _parse_opening(data: Dict[str, Any]) -> Opening:
    position = float(data["position"])
    if not 0.0 <= position <= 1.0:
        raise ValueError(f"position {position} outside [0, 1]")

    return Opening(
        id=str(data["id"]),
        wall_id=str(data["wallId"]),
        type=OpeningType(data["type"]),
        position=position,
        width=float(data["width"]),
        subtype=data.get("subtype"),
        swing_direction=_optional(data.get("swingDirection"), SwingDirection),
    )


def _parse_fixture(data: Dict[str, Any]) -> Fixture:
    return Fixture(
        id=str(data["id"]),
        type=FixtureType(data["type"]),
        category=FixtureCategory(data["category"]),
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        height=float(data["height"]),
        rotation=float(data.get("rotation", 0.0)),
    )


def _parse_staircase(data: Dict[str, Any]) -> Staircase:
    return Staircase(
        id=str(data["id"]),
        type=StaircaseType(data["type"]),
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        length=float(data["length"]),
        rotation=float(data.get("rotation", 0.0)),
        treads=int(data["treads"]),
        riser_height=float(data["riserHeight"]),
        tread_depth=float(data["treadDepth"]),
        turn_direction=_optional(data.get("turnDirection"), TurnDirection),
        landing_width=_optional(data.get("landingWidth"), float),
    )


def _parse_room(data: Dict[str, Any]) -> RoomPolygon:
    return RoomPolygon(
        points=tuple(Point(float(p["x"]), float(p["y"])) for p in data["points"]),
        area=float(data["area"]),
        perimeter=float(data["perimeter"]),
    )


def _parse_all(data: Dict[str, Any], key: str, parse, kind: str) -> tuple:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"Invalid {key}: expected a list, got {type(items).__name__}")

    parsed = []
    for index, item in enumerate(items):
        entity_id = item.get("id", f"#{index}") if isinstance(item, dict) else f"#{index}"
        try:
            parsed.append(parse(item))
        except (KeyError, ValueError, TypeError) as e:
            raise ValueError(f"Invalid {kind} data for {entity_id}: {e}") from e
    return tuple(parsed)


def sketch_from_dict(data: Dict[str, Any]) -> SketchGeometry:
    """Convert a geometry payload dictionary into a SketchGeometry.

    Raises:
        ValueError: If any entity is malformed; the message names it.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Sketch payload must be an object, got {type(data).__name__}")

    return SketchGeometry(
        walls=_parse_all(data, "walls", _parse_wall, "wall"),
        openings=_parse_all(data, "openings", _parse_opening, "opening"),
        fixtures=_parse_all(data, "fixtures", _parse_fixture, "fixture"),
        staircases=_parse_all(data, "staircases", _parse_staircase, "staircase"),
        detected_rooms=_parse_all(data, "detectedRooms", _parse_room, "room"),
    )


def _point_to_dict(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def room_to_dict(room: RoomPolygon) -> Dict[str, Any]:
    return {
        "points": [_point_to_dict(p) for p in room.points],
        "area": room.area,
        "perimeter": room.perimeter,
    }


def sketch_to_dict(sketch: SketchGeometry) -> Dict[str, Any]:
    """Convert a SketchGeometry to the host's JSON payload layout."""
    walls = [
        {
            "id": w.id,
            "startX": w.start_x,
            "startY": w.start_y,
            "endX": w.end_x,
            "endY": w.end_y,
            "thickness": w.thickness,
        }
        for w in sketch.walls
    ]

    openings = []
    for o in sketch.openings:
        opening = {
            "id": o.id,
            "wallId": o.wall_id,
            "type": o.type.value,
            "position": o.position,
            "width": o.width,
        }
        if o.subtype is not None:
            opening["subtype"] = o.subtype
        if o.swing_direction is not None:
            opening["swingDirection"] = o.swing_direction.value
        openings.append(opening)

    fixtures = [
        {
            "id": f.id,
            "type": f.type.value,
            "category": f.category.value,
            "x": f.x,
            "y": f.y,
            "width": f.width,
            "height": f.height,
            "rotation": f.rotation,
        }
        for f in sketch.fixtures
    ]

    staircases = []
    for s in sketch.staircases:
        staircase = {
            "id": s.id,
            "type": s.type.value,
            "x": s.x,
            "y": s.y,
            "width": s.width,
            "length": s.length,
            "rotation": s.rotation,
            "treads": s.treads,
            "riserHeight": s.riser_height,
            "treadDepth": s.tread_depth,
        }
        if s.turn_direction is not None:
            staircase["turnDirection"] = s.turn_direction.value
        if s.landing_width is not None:
            staircase["landingWidth"] = s.landing_width
        staircases.append(staircase)

    return {
        "walls": walls,
        "openings": openings,
        "fixtures": fixtures,
        "staircases": staircases,
        "detectedRooms": [room_to_dict(room) for room in sketch.detected_rooms],
    }


def build_save_payload(
    sketch: SketchGeometry, pixels_per_foot: float = DEFAULT_PIXELS_PER_FOOT
) -> Dict[str, Any]:
    """Build the payload stored when a floor plan is saved.

    Rooms are detected afresh from the walls; any previously stored
    detectedRooms are ignored. Each room gets a default name and the
    centroid used to place its label.
    """
    rooms = detect_rooms(sketch.walls, pixels_per_foot)
    payload = sketch_to_dict(sketch)
    payload["detectedRooms"] = [room_to_dict(room) for room in rooms]
    payload["rooms"] = [
        {
            "name": f"Room {index}",
            "squareFeet": room.area,
            "perimeterLf": room.perimeter,
            "centroid": _point_to_dict(polygon_centroid(room.points)),
            "polygon": [_point_to_dict(p) for p in room.points],
        }
        for index, room in enumerate(rooms, start=1)
    ]
    return payload


def load_sketch(path: str) -> SketchGeometry:
    """Load a sketch from a JSON file.

    Args:
        path: Path to the JSON file containing the geometry payload.

    Returns:
        SketchGeometry object for the level.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return sketch_from_dict(data)


def save_sketch(sketch: SketchGeometry, output_path: str) -> None:
    """Save a sketch to a JSON file, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(sketch_to_dict(sketch), f, indent=2)
