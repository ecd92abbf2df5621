import logging
from typing import Optional

import numpy as np

from bodysize.gameobjects.body import Body
from bodysize.gameobjects.fixture import Fixture
from bodysize.gameobjects.shapes import ShapeType
from bodysize.physics.extents import Extents

logger = logging.getLogger(__name__)

# Shape kinds fixture_extents can measure
SUPPORTED_TYPES = (
    ShapeType.POLYGON,
    ShapeType.CHAIN,
    ShapeType.EDGE,
    ShapeType.CIRCLE,
)


# -------------------------------------------------
# Per fixture
# -------------------------------------------------
def fixture_extents(fixture: Fixture, transform=None) -> Optional[Extents]:
    """
    Outermost points of a fixture's shape.

    Returns None for a shape with no vertices yet (an unset polygon or chain).

    :param fixture: The fixture being measured
    :param transform: Optional body transform; measures in world space when given
    """
    shape = fixture.shape
    shape_type = getattr(shape, "type", None)
    if shape_type not in SUPPORTED_TYPES:
        raise ValueError(f"Unsupported shape type: {shape_type!r}")

    if shape_type is not ShapeType.CIRCLE and shape.vertex_count == 0:
        return None

    if transform is None:
        extents = shape.extents()
    else:
        extents = shape.world_extents(transform)

    logger.debug("%s fixture extents: %r", shape_type.name.lower(), extents)
    return extents


# -------------------------------------------------
# Per body
# -------------------------------------------------
def body_bounds(body: Body, world: bool = False) -> Optional[Extents]:
    """
    Combined extents of every fixture on body.

    Extents are seeded from the first measured fixture, so geometry lying
    entirely on the negative side of an axis keeps its real bounds.

    :param body: The body to measure
    :param world: Map shapes through the body transform first
    """
    transform = body.transform if world else None

    bounds = None
    for fixture in body.fixtures:
        extents = fixture_extents(fixture, transform)
        if extents is None:
            continue
        bounds = extents if bounds is None else bounds.merge(extents)

    if bounds is None:
        logger.debug("Body %r has no measurable fixtures", body.name)
    return bounds


def body_size(body: Body, scale=None) -> np.ndarray:
    """
    Width and height of a body, found from its fixtures' shapes.

    :param body: The body to find the size of
    :param scale: Optional scaling factor (e.g. pixels per metre), scalar or (sx, sy)
    :return: float32 array [width, height]
    """
    bounds = body_bounds(body)
    if bounds is None:
        return np.zeros(2, dtype=np.float32)

    if scale is not None:
        bounds = bounds.scaled(scale)
    return bounds.size
