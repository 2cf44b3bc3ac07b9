import json

import pytest

from floorsketch.core.model import (
    FixtureType,
    OpeningType,
    StaircaseType,
    SwingDirection,
    TurnDirection,
)
from floorsketch.io.parser import (
    build_save_payload,
    load_sketch,
    save_sketch,
    sketch_from_dict,
    sketch_to_dict,
)


def test_sketch_from_dict(sketch_payload):
    sketch = sketch_from_dict(sketch_payload)

    assert [w.id for w in sketch.walls] == ["w1", "w2", "w3", "w4"]
    assert sketch.walls[1].start_x == 120.0

    door = sketch.openings[0]
    assert door.type is OpeningType.DOOR
    assert door.swing_direction is SwingDirection.LEFT

    assert sketch.fixtures[0].type is FixtureType.TOILET

    stair = sketch.staircases[0]
    assert stair.type is StaircaseType.L_SHAPED
    assert stair.turn_direction is TurnDirection.RIGHT
    assert stair.treads == 13


def test_missing_sections_default_to_empty():
    sketch = sketch_from_dict({"walls": []})

    assert sketch.openings == ()
    assert sketch.detected_rooms == ()


def test_optional_fields_default():
    sketch = sketch_from_dict({"walls": [{"id": "a", "startX": 0, "startY": 0, "endX": 1, "endY": 1}]})

    assert sketch.walls[0].thickness == 6.0


def test_malformed_wall_names_the_wall(sketch_payload):
    del sketch_payload["walls"][2]["endY"]

    with pytest.raises(ValueError, match="Invalid wall data for w3") as excinfo:
        sketch_from_dict(sketch_payload)
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_unknown_enum_value(sketch_payload):
    sketch_payload["fixtures"][0]["type"] = "jacuzzi"

    with pytest.raises(ValueError, match="Invalid fixture data for f1"):
        sketch_from_dict(sketch_payload)


def test_opening_position_out_of_range(sketch_payload):
    sketch_payload["openings"][0]["position"] = 1.5

    with pytest.raises(ValueError, match="Invalid opening data for d1"):
        sketch_from_dict(sketch_payload)


def test_null_sections_are_empty():
    sketch = sketch_from_dict({"walls": None, "openings": None, "detectedRooms": None})

    assert sketch.walls == ()
    assert sketch.openings == ()
    assert sketch.detected_rooms == ()


def test_section_must_be_a_list():
    with pytest.raises(ValueError, match="Invalid walls: expected a list"):
        sketch_from_dict({"walls": {"id": "w1"}})


def test_payload_must_be_an_object():
    with pytest.raises(ValueError):
        sketch_from_dict([1, 2, 3])


def test_sketch_to_dict_keeps_host_layout(sketch_payload):
    assert sketch_to_dict(sketch_from_dict(sketch_payload)) == sketch_payload


def test_build_save_payload_detects_rooms(sketch_payload):
    sketch_payload["detectedRooms"] = [{"points": [], "area": 1.0, "perimeter": 1.0}]

    payload = build_save_payload(sketch_from_dict(sketch_payload), 12)

    assert [room["area"] for room in payload["detectedRooms"]] == [100.0]
    room = payload["rooms"][0]
    assert room["name"] == "Room 1"
    assert room["squareFeet"] == 100.0
    assert room["perimeterLf"] == 40.0
    assert room["centroid"] == {"x": 60, "y": 60}
    assert len(room["polygon"]) == 4
    assert payload["walls"] == sketch_payload["walls"]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sketch(str(tmp_path / "missing.json"))


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_sketch(str(path))


def test_save_and_load(tmp_path, sketch_payload):
    sketch = sketch_from_dict(sketch_payload)
    path = tmp_path / "nested" / "sketch.json"

    save_sketch(sketch, str(path))

    assert load_sketch(str(path)) == sketch
