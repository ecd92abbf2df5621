from bodysize.gameobjects import Body, Fixture, Transform
from bodysize.gameobjects.shapes import (
    ChainShape,
    CircleShape,
    EdgeShape,
    PolygonShape,
    ShapeType,
)
from bodysize.physics.extents import Extents
from bodysize.physics.sizer import body_bounds, body_size, fixture_extents

__version__ = "0.1.0"

__all__ = [
    "Body",
    "Fixture",
    "Transform",
    "ChainShape",
    "CircleShape",
    "EdgeShape",
    "PolygonShape",
    "ShapeType",
    "Extents",
    "body_bounds",
    "body_size",
    "fixture_extents",
]
