import os
import tempfile
import unittest

from aoc.algorithms.astar import find_path
from aoc.core.config import ToolkitConfig
from aoc.rendering.renderer import PathRenderer
from aoc.world.points import Point


class TestPathRenderer(unittest.TestCase):
    def setUp(self):
        self.config = ToolkitConfig(TILE_SIZE=4)
        self.renderer = PathRenderer(self.config)
        self.blocked = {Point(1, 0), Point(1, 1)}
        self.start = Point(0, 0)
        self.end = Point(2, 0)
        self.path = find_path(
            self.start,
            self.end,
            lambda _current, candidate: candidate not in self.blocked,
            3,
            3,
        )

    def test_surface_size(self):
        surface = self.renderer.render(3, 3)
        self.assertEqual(surface.get_size(), (12, 12))

    def test_cells_are_coloured(self):
        surface = self.renderer.render(3, 3, self.blocked, self.path, self.start, self.end)

        self.assertEqual(self.renderer.color_at(surface, Point(1, 0)), self.config.BLOCKED)
        self.assertEqual(self.renderer.color_at(surface, self.start), self.config.START)
        self.assertEqual(self.renderer.color_at(surface, self.end), self.config.END)
        self.assertEqual(self.renderer.color_at(surface, Point(0, 1)), self.config.PATH)
        self.assertNotIn(
            self.renderer.color_at(surface, Point(2, 2)),
            (self.config.FREE, self.config.BLOCKED),
        )

    def test_path_shades_from_path_to_end_colour(self):
        surface = self.renderer.render(3, 3, self.blocked, self.path)

        self.assertEqual(self.renderer.color_at(surface, self.path[0]), self.config.PATH)
        self.assertEqual(self.renderer.color_at(surface, self.path[-1]), self.config.END)
        middle = self.renderer.color_at(surface, self.path[3])
        self.assertNotIn(middle, (self.config.PATH, self.config.END))

    def test_save(self):
        surface = self.renderer.render(3, 3, self.blocked, self.path, self.start, self.end)
        with tempfile.TemporaryDirectory() as tmp:
            filename = os.path.join(tmp, "path.bmp")
            self.renderer.save(surface, filename)
            self.assertTrue(os.path.getsize(filename) > 0)


if __name__ == "__main__":
    unittest.main()
