from bodysize.gameobjects.body import Body
from bodysize.gameobjects.fixture import Fixture
from bodysize.gameobjects.transform import Transform

__all__ = ["Body", "Fixture", "Transform"]
