from bodysize.gameobjects.shapes import (
    ChainShape,
    CircleShape,
    EdgeShape,
    PolygonShape,
    Shape,
)


def _polygon(data: dict) -> PolygonShape:
    box = data.get("box")
    if box is not None:
        return PolygonShape.box(
            box[0], box[1],
            center=data.get("center", (0.0, 0.0)),
            angle=data.get("angle", 0.0),
        )
    return PolygonShape(data["vertices"])


def _edge(data: dict) -> EdgeShape:
    vertices = data["vertices"]
    if len(vertices) != 2:
        raise ValueError(f"Edge needs exactly 2 vertices, got {len(vertices)}")
    return EdgeShape(vertices[0], vertices[1])


SHAPE_TABLE = {
    "polygon": _polygon,
    "box": _polygon,
    "chain": lambda d: ChainShape(d["vertices"], loop=d.get("loop", False)),
    "edge": _edge,
    "circle": lambda d: CircleShape(d["radius"], position=d.get("center", (0.0, 0.0))),
}


class ShapeRegistry:
    @staticmethod
    def build(data: dict) -> Shape:
        """
        Create a shape from its level description.

        :param data: dict with a "shape" key naming an entry of SHAPE_TABLE
        :type data: dict
        """
        name = data.get("shape")
        if name not in SHAPE_TABLE:
            raise ValueError(f"Unknown shape: {name}")
        try:
            return SHAPE_TABLE[name](data)
        except KeyError as exc:
            raise ValueError(f"Shape '{name}' is missing field {exc}") from exc
