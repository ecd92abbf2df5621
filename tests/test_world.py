import json
import os
import tempfile
import unittest
from pathlib import Path

import numpy as np

import bodysize
from bodysize.gameobjects.body import Body
from bodysize.gameobjects.shapes import CircleShape, PolygonShape, ShapeType
from bodysize.gameobjects.shape_lookup import ShapeRegistry
from bodysize.world import DEFAULT_PPM, World

DEMO_LEVEL = Path(bodysize.__file__).resolve().parent / "levels" / "demo.json"


class TestWorld(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_level(self, data) -> str:
        path = os.path.join(self.tmpdir.name, "level.json")
        with open(path, "w") as f:
            json.dump(data, f)
        return path

    def test_load_level(self):
        path = self.write_level({
            "ppm": 50,
            "bodies": [
                {
                    "name": "cart",
                    "position": [4.0, -1.0],
                    "angle": 0.5,
                    "fixtures": [
                        {"shape": "box", "box": [2.0, 0.5], "density": 3.0},
                        {"shape": "circle", "radius": 0.5, "center": [-1.5, -0.5]},
                    ],
                },
                {"fixtures": [{"shape": "edge", "vertices": [[0, 0], [1, 1]]}]},
            ],
        })

        world = World(path)

        self.assertEqual(world.ppm, 50.0)
        self.assertEqual(len(world.bodies), 2)

        cart = world.get("cart")
        np.testing.assert_allclose(cart.position, [4.0, -1.0])
        self.assertAlmostEqual(cart.angle, 0.5)
        self.assertEqual([f.type for f in cart.fixtures], [ShapeType.POLYGON, ShapeType.CIRCLE])
        self.assertEqual(cart.fixtures[0].density, 3.0)

        # Unnamed bodies are named by their index
        self.assertEqual(world.bodies[1].name, "body_1")

        sizes = world.sizes(world.ppm)
        np.testing.assert_allclose(sizes["cart"], [200.0, 75.0])
        np.testing.assert_allclose(sizes["body_1"], [50.0, 50.0])

    def test_demo_level(self):
        world = World(str(DEMO_LEVEL))
        sizes = world.sizes()

        self.assertEqual(world.ppm, 32.0)
        np.testing.assert_allclose(sizes["crate"], [2.0, 2.0])
        np.testing.assert_allclose(sizes["snowman"], [2.0, 4.15], rtol=1e-5)
        np.testing.assert_allclose(sizes["sunken_ledge"], [4.0, 1.75])
        np.testing.assert_allclose(sizes["terrain"], [36.0, 2.0])
        np.testing.assert_allclose(sizes["island"], [4.0, 3.5])

    def test_default_ppm(self):
        world = World(self.write_level({"bodies": []}))
        self.assertEqual(world.ppm, DEFAULT_PPM)
        self.assertEqual(world.sizes(), {})

    def test_missing_level(self):
        with self.assertRaises(FileNotFoundError):
            World(os.path.join(self.tmpdir.name, "nope.json"))

    def test_bad_ppm(self):
        with self.assertRaises(ValueError):
            World(self.write_level({"ppm": 0, "bodies": []}))

    def test_unknown_shape(self):
        path = self.write_level({"bodies": [{"fixtures": [{"shape": "rope"}]}]})
        with self.assertRaises(ValueError):
            World(path)

    def test_edge_with_3d_vertices(self):
        path = self.write_level({
            "bodies": [{"fixtures": [{"shape": "edge", "vertices": [[0, 0, 5], [10, 0, 5]]}]}]
        })
        with self.assertRaises(ValueError):
            World(path)

    def test_duplicate_body_names_in_level(self):
        path = self.write_level({
            "bodies": [
                {"name": "rock", "fixtures": [{"shape": "circle", "radius": 1.0}]},
                {"name": "rock", "fixtures": [{"shape": "circle", "radius": 5.0}]},
            ]
        })
        with self.assertRaises(ValueError):
            World(path)

    def test_add_body_with_duplicate_name(self):
        world = World()
        small = Body(name="rock")
        small.create_fixture(CircleShape(1.0))
        world.add_body(small)

        big = Body(name="rock")
        big.create_fixture(CircleShape(5.0))
        with self.assertRaises(ValueError):
            world.add_body(big)

        self.assertEqual(len(world.bodies), 1)
        np.testing.assert_allclose(world.sizes()["rock"], [2.0, 2.0])

    def test_unknown_body(self):
        with self.assertRaises(KeyError):
            World().get("nobody")

    def test_add_body(self):
        world = World()
        body = Body()
        body.create_fixture(PolygonShape.box(0.5, 0.5))
        world.add_body(body)

        self.assertEqual(body.name, "body_0")
        self.assertIs(world.get("body_0"), body)


class TestShapeRegistry(unittest.TestCase):
    def test_polygon_from_vertices(self):
        shape = ShapeRegistry.build({"shape": "polygon", "vertices": [[0, 0], [2, 0], [1, 1]]})
        self.assertEqual(shape.vertex_count, 3)

    def test_loop_chain(self):
        shape = ShapeRegistry.build(
            {"shape": "chain", "loop": True, "vertices": [[0, 0], [1, 0], [1, 1]]}
        )
        self.assertTrue(shape.loop)

    def test_edge_needs_two_vertices(self):
        with self.assertRaises(ValueError):
            ShapeRegistry.build({"shape": "edge", "vertices": [[0, 0], [1, 0], [2, 0]]})

    def test_missing_field(self):
        with self.assertRaises(ValueError):
            ShapeRegistry.build({"shape": "circle"})


if __name__ == "__main__":
    unittest.main()
