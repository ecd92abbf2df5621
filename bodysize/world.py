# world.py
import json
import logging
from pathlib import Path

from bodysize.gameobjects.body import Body
from bodysize.gameobjects.transform import Transform
from bodysize.gameobjects.shape_lookup import ShapeRegistry
from bodysize.physics.sizer import body_size

logger = logging.getLogger(__name__)

DEFAULT_PPM = 32.0

FIXTURE_KEYS = ("density", "friction", "restitution", "is_sensor", "user_data")


class World:
    def __init__(self, level_path: str | None = None):
        """
        Bodies of a level, loaded from a JSON file.

        :param self: The object itself
        :param level_path: Optional level file to load right away
        """
        self.bodies: list[Body] = []
        self.ppm: float = DEFAULT_PPM
        if level_path:
            self.load_level(level_path)

    def _create_body(self, data: dict, index: int) -> Body:
        """
        :param self: The object itself
        :param data: dict with body parameters
        :type data: dict
        :param index: position in the level, used for unnamed bodies
        """
        # ---------- transform ----------
        position = data.get("position", [0, 0])
        angle = data.get("angle", 0.0)
        transform = Transform(position=position, angle=angle)

        body = Body(transform=transform, name=data.get("name", f"body_{index}"))

        # ---------- fixtures ----------
        for fixture_data in data.get("fixtures", []):
            shape = ShapeRegistry.build(fixture_data)
            options = {k: fixture_data[k] for k in FIXTURE_KEYS if k in fixture_data}
            body.create_fixture(shape, **options)

        if not body.fixtures:
            logger.warning("Body %r has no fixtures; its size is (0, 0)", body.name)

        self._register(body)
        return body

    def _register(self, body: Body):
        # sizes() and get() key bodies by name
        if any(other.name == body.name for other in self.bodies):
            raise ValueError(f"Duplicate body name: {body.name!r}")
        self.bodies.append(body)

    def add_body(self, body: Body):
        if body.name is None:
            body.name = f"body_{len(self.bodies)}"
        self._register(body)

    def get(self, name: str) -> Body:
        for body in self.bodies:
            if body.name == name:
                return body
        raise KeyError(f"No body named {name!r}")

    def sizes(self, scale=None) -> dict:
        """
        Width and height of every body, keyed by name.

        :param scale: Optional scaling factor; pass self.ppm for pixel sizes
        """
        return {body.name: body_size(body, scale) for body in self.bodies}

    def load_level(self, level_path: str):
        """
        :param self: The object itself
        :param level_path: Path to the level file
        :type level_path: str
        """
        path = Path(level_path)
        if not path.exists():
            raise FileNotFoundError(f"Level file not found: {level_path}")

        with open(path, "r") as f:
            data = json.load(f)

        self.ppm = float(data.get("ppm", DEFAULT_PPM))
        if self.ppm <= 0:
            raise ValueError(f"ppm must be positive, got {self.ppm}")

        for entry in data.get("bodies", []):
            self._create_body(entry, len(self.bodies))

        logger.info("Loaded %d bodies from %s", len(self.bodies), path)
