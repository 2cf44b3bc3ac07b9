"""Free-standing fixtures: default sizes and rotation-aware hit testing."""

from __future__ import annotations

import uuid
from typing import Dict, Optional, Tuple

from ..core.model import BoundingBox, Fixture, FixtureCategory, FixtureType, Point
from .primitives import rotate_point

# Default fixture dimensions (width, height) in inches
FIXTURE_DIMENSIONS: Dict[FixtureType, Tuple[float, float]] = {
    # Kitchen
    FixtureType.SINK: (33, 22),
    FixtureType.STOVE: (30, 26),
    FixtureType.FRIDGE: (36, 30),
    FixtureType.DISHWASHER: (24, 24),
    FixtureType.MICROWAVE: (24, 14),
    FixtureType.ISLAND: (48, 36),
    # Bathroom
    FixtureType.TOILET: (18, 28),
    FixtureType.TUB: (60, 32),
    FixtureType.SHOWER: (36, 36),
    FixtureType.VANITY: (48, 22),
    FixtureType.BIDET: (15, 25),
    # Laundry
    FixtureType.WASHER: (27, 27),
    FixtureType.DRYER: (27, 27),
    FixtureType.UTILITY_SINK: (25, 22),
}

FIXTURE_CATEGORIES: Dict[FixtureType, FixtureCategory] = {
    FixtureType.SINK: FixtureCategory.KITCHEN,
    FixtureType.STOVE: FixtureCategory.KITCHEN,
    FixtureType.FRIDGE: FixtureCategory.KITCHEN,
    FixtureType.DISHWASHER: FixtureCategory.KITCHEN,
    FixtureType.MICROWAVE: FixtureCategory.KITCHEN,
    FixtureType.ISLAND: FixtureCategory.KITCHEN,
    FixtureType.TOILET: FixtureCategory.BATHROOM,
    FixtureType.TUB: FixtureCategory.BATHROOM,
    FixtureType.SHOWER: FixtureCategory.BATHROOM,
    FixtureType.VANITY: FixtureCategory.BATHROOM,
    FixtureType.BIDET: FixtureCategory.BATHROOM,
    FixtureType.WASHER: FixtureCategory.LAUNDRY,
    FixtureType.DRYER: FixtureCategory.LAUNDRY,
    FixtureType.UTILITY_SINK: FixtureCategory.LAUNDRY,
}


def create_fixture(
    type: FixtureType,
    x: float,
    y: float,
    rotation: float = 0.0,
    fixture_id: Optional[str] = None,
) -> Fixture:
    """Create a fixture centred on (x, y) with its default dimensions."""
    type = FixtureType(type)
    width, height = FIXTURE_DIMENSIONS[type]
    return Fixture(
        id=fixture_id or str(uuid.uuid4()),
        type=type,
        category=FIXTURE_CATEGORIES[type],
        x=x,
        y=y,
        width=width,
        height=height,
        rotation=rotation,
    )


def fixture_bounds(fixture: Fixture) -> BoundingBox:
    """Unrotated bounding box of a fixture."""
    half_w = fixture.width / 2
    half_h = fixture.height / 2
    return BoundingBox(fixture.x - half_w, fixture.y - half_h, fixture.x + half_w, fixture.y + half_h)


def fixture_contains_point(fixture: Fixture, point: Point) -> bool:
    bounds = fixture_bounds(fixture)
    if fixture.rotation:
        point = rotate_point(point, Point(fixture.x, fixture.y), -fixture.rotation)
    return bounds.min_x <= point.x <= bounds.max_x and bounds.min_y <= point.y <= bounds.max_y
