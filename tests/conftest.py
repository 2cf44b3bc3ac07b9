import json

import pytest

from floorsketch.core.model import Wall


def _rectangle(x, y, width, height, prefix="w"):
    """Four walls drawn counter-clockwise around an axis-aligned rectangle."""
    return [
        Wall(f"{prefix}1", x, y, x + width, y),
        Wall(f"{prefix}2", x + width, y, x + width, y + height),
        Wall(f"{prefix}3", x + width, y + height, x, y + height),
        Wall(f"{prefix}4", x, y + height, x, y),
    ]


@pytest.fixture
def rectangle():
    return _rectangle


@pytest.fixture
def square_walls():
    """A 10 x 10 ft room at 12 units per foot."""
    return _rectangle(0, 0, 120, 120)


@pytest.fixture
def sketch_payload():
    return {
        "walls": [
            {"id": "w1", "startX": 0, "startY": 0, "endX": 120, "endY": 0, "thickness": 6},
            {"id": "w2", "startX": 120, "startY": 0, "endX": 120, "endY": 120, "thickness": 6},
            {"id": "w3", "startX": 120, "startY": 120, "endX": 0, "endY": 120, "thickness": 6},
            {"id": "w4", "startX": 0, "startY": 120, "endX": 0, "endY": 0, "thickness": 6},
        ],
        "openings": [
            {
                "id": "d1",
                "wallId": "w1",
                "type": "door",
                "position": 0.5,
                "width": 32,
                "subtype": "single",
                "swingDirection": "left",
            }
        ],
        "fixtures": [
            {
                "id": "f1",
                "type": "toilet",
                "category": "bathroom",
                "x": 30,
                "y": 30,
                "width": 18,
                "height": 28,
                "rotation": 0,
            }
        ],
        "staircases": [
            {
                "id": "s1",
                "type": "l-shaped",
                "x": 70,
                "y": 10,
                "width": 36,
                "length": 86,
                "rotation": 0,
                "treads": 13,
                "riserHeight": 7.384615384615385,
                "treadDepth": 10,
                "turnDirection": "right",
                "landingWidth": 36,
            }
        ],
        "detectedRooms": [],
    }


@pytest.fixture
def sketch_file(tmp_path, sketch_payload):
    path = tmp_path / "sketch.json"
    path.write_text(json.dumps(sketch_payload), encoding="utf-8")
    return path
