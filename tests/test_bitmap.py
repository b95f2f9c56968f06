import unittest
import random
import sys
import os
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid, create_maze
from maze_carver.algo.dfs import generate
from maze_carver.viz.bitmap import OPEN, WALL, cell_view, render, to_rgb

W = WALL
O = OPEN

class TestBitmap(unittest.TestCase):
    def test_shape_and_dtype(self):
        grid = create_maze(7, 4)
        img = render(grid)
        self.assertEqual(img.shape, (2 * 4 + 1, 2 * 7 + 1))
        self.assertEqual(img.dtype, np.uint8)

    def test_single_cell(self):
        grid = create_maze(1, 1)
        generate(grid, random.Random(0))
        expected = np.array([
            [W, W, W],
            [W, O, W],
            [W, W, W],
        ], dtype=np.uint8)
        np.testing.assert_array_equal(render(grid), expected)

    def test_two_by_one(self):
        grid = create_maze(2, 1)
        generate(grid, random.Random(0))
        expected = np.array([
            [W, W, W, W, W],
            [W, O, O, O, W],
            [W, W, W, W, W],
        ], dtype=np.uint8)
        np.testing.assert_array_equal(render(grid), expected)

    def test_wall_pixels_follow_bits(self):
        grid = create_maze(2, 2)
        grid.carve((0, 0), Grid.RIGHT)
        grid.carve((1, 0), Grid.BOTTOM)
        grid.carve((1, 1), Grid.LEFT)
        expected = np.array([
            [W, W, W, W, W],
            [W, O, O, O, W],
            [W, W, W, O, W],
            [W, O, O, O, W],
            [W, W, W, W, W],
        ], dtype=np.uint8)
        np.testing.assert_array_equal(render(grid), expected)

    def test_fresh_grid_is_closed_cells(self):
        img = render(create_maze(3, 2))
        # Interior pixels open, everything else wall
        self.assertTrue((img[1::2, 1::2] == OPEN).all())
        mask = np.ones_like(img, dtype=bool)
        mask[1::2, 1::2] = False
        self.assertTrue((img[mask] == WALL).all())

    def test_borders_and_corners_always_wall(self):
        grid = create_maze(9, 6)
        generate(grid, random.Random(11))
        img = render(grid)
        self.assertTrue((img[0, :] == WALL).all())
        self.assertTrue((img[:, 0] == WALL).all())
        self.assertTrue((img[-1, :] == WALL).all())
        self.assertTrue((img[:, -1] == WALL).all())
        self.assertTrue((img[2::2, 2::2] == WALL).all())
        self.assertTrue((img[1::2, 1::2] == OPEN).all())

    def test_open_pixel_count_matches_passages(self):
        w, h = 12, 8
        grid = create_maze(w, h)
        generate(grid, random.Random(99))
        img = render(grid)
        # One interior pixel per cell plus one pixel per carved wall
        self.assertEqual(int((img == OPEN).sum()), w * h + (w * h - 1))

    def test_render_is_idempotent_and_read_only(self):
        grid = create_maze(10, 10)
        generate(grid, random.Random(5))
        before = grid.cells.tobytes()
        first = render(grid)
        second = render(grid)
        np.testing.assert_array_equal(first, second)
        self.assertEqual(grid.cells.tobytes(), before)
        self.assertIsNot(first, second)

    def test_cell_view_shares_layout(self):
        grid = create_maze(4, 3)
        grid.carve((2, 1), Grid.RIGHT)
        view = cell_view(grid)
        self.assertEqual(view.shape, (3, 4))
        self.assertEqual(view[1, 2], grid.cells[grid.get_index(2, 1)])

    def test_to_rgb(self):
        img = render(create_maze(2, 2))
        rgb = to_rgb(img)
        self.assertEqual(rgb.shape, img.shape + (3,))
        self.assertEqual(tuple(rgb[0, 0]), (0, 0, 0))
        self.assertEqual(tuple(rgb[1, 1]), (255, 255, 255))

if __name__ == '__main__':
    unittest.main()
