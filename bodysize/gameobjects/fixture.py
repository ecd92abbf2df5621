from bodysize.gameobjects.shapes import Shape, ShapeType


class Fixture:
    def __init__(
        self,
        shape: Shape,
        density: float = 0.0,
        friction: float = 0.2,
        restitution: float = 0.0,
        is_sensor: bool = False,
        user_data=None,
    ):
        """
        Attaches a shape to a body together with its material properties.

        :param self: The object itself
        :param shape: The collision shape
        :param density: Mass per area
        :param friction: Coulomb friction coefficient
        :param restitution: Bounciness
        :param is_sensor: Sensors detect contacts without responding
        :param user_data: Anything the game wants to hang on the fixture
        """
        if shape is None:
            raise ValueError("Fixture must have a shape")
        if density < 0:
            raise ValueError(f"Fixture density must be >= 0, got {density}")

        self.shape = shape
        self.density = float(density)
        self.friction = float(friction)
        self.restitution = float(restitution)
        self.is_sensor = is_sensor
        self.user_data = user_data
        self.body = None

    @property
    def type(self) -> ShapeType:
        return self.shape.type
