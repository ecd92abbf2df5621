from typing import Optional

from bodysize.gameobjects.fixture import Fixture
from bodysize.gameobjects.shapes import Shape
from bodysize.gameobjects.transform import Transform


class Body:
    def __init__(self, transform: Optional[Transform] = None, name: Optional[str] = None):
        """
        Rigid body: a transform plus the fixtures attached to it.

        :param self: The object itself
        :param transform: The transform of the body
        :param name: Optional name used by levels and the viewer
        """
        self.transform = transform if transform is not None else Transform()
        self.name = name
        self.fixtures: list[Fixture] = []

    # -------------------------------------------------
    # Fixtures
    # -------------------------------------------------
    def create_fixture(self, shape: Shape, **kwargs) -> Fixture:
        """
        Attach a new fixture built from shape.
        Keyword arguments are passed on to Fixture.
        """
        fixture = Fixture(shape, **kwargs)
        fixture.body = self
        self.fixtures.append(fixture)
        return fixture

    def destroy_fixture(self, fixture: Fixture):
        if fixture not in self.fixtures:
            raise ValueError("Fixture does not belong to this body")
        self.fixtures.remove(fixture)
        fixture.body = None

    @property
    def position(self):
        return self.transform.position

    @property
    def angle(self) -> float:
        return self.transform.angle

    def __repr__(self):
        return f"Body(name={self.name!r}, fixtures={len(self.fixtures)})"
