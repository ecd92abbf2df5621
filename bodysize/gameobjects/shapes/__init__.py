from bodysize.gameobjects.shapes.shape import Shape, ShapeType
from bodysize.gameobjects.shapes.polygon import PolygonShape, MAX_POLYGON_VERTICES
from bodysize.gameobjects.shapes.chain import ChainShape
from bodysize.gameobjects.shapes.edge import EdgeShape
from bodysize.gameobjects.shapes.circle import CircleShape

__all__ = [
    "Shape",
    "ShapeType",
    "PolygonShape",
    "MAX_POLYGON_VERTICES",
    "ChainShape",
    "EdgeShape",
    "CircleShape",
]
