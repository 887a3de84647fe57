"""
test_canvas.py
Unit tests for the square byte canvas helper.
"""
import unittest

import numpy as np

from thickline import BACKGROUND, SENTINEL, Canvas, Rasterizer


class TestCanvas(unittest.TestCase):
    def setUp(self):
        self.canvas = Canvas(4)

    def test_initial_fill(self):
        self.assertEqual(self.canvas.get_buffer(), bytes([BACKGROUND]) * 16)
        self.assertEqual(Canvas(3, fill=7).get_buffer(), bytes([7]) * 9)
        self.assertEqual(self.canvas.drawn(), set())

    def test_get_and_bounds(self):
        self.canvas.buffer[2 * 4 + 3] = SENTINEL
        self.assertEqual(self.canvas.get(3, 2), SENTINEL)
        self.assertEqual(self.canvas.get(2, 3), BACKGROUND)
        self.assertIsNone(self.canvas.get(4, 0))
        self.assertIsNone(self.canvas.get(0, -1))

    def test_rows_and_array_view(self):
        self.canvas.rasterizer().draw_line(0, 1, 3, 1)
        self.assertEqual(self.canvas.get_row(1), bytes(4))
        self.assertEqual(self.canvas.get_row(0), bytes([BACKGROUND]) * 4)
        arr = self.canvas.to_array()
        self.assertEqual(arr.shape, (4, 4))
        self.assertTrue(np.all(arr[1] == SENTINEL))
        arr[3, 0] = SENTINEL
        self.assertEqual(self.canvas.get(0, 3), SENTINEL)

    def test_drawn_and_clear(self):
        self.canvas.rasterizer().draw_line(0, 0, 3, 3)
        self.assertEqual(self.canvas.drawn(), {(0, 0), (1, 1), (2, 2), (3, 3)})
        self.canvas.clear()
        self.assertEqual(self.canvas.drawn(), set())
        self.canvas.clear(SENTINEL)
        self.assertEqual(len(self.canvas.drawn()), 16)

    def test_rasterizer_shares_buffer(self):
        rast = self.canvas.rasterizer()
        self.assertIsInstance(rast, Rasterizer)
        self.assertIs(rast.canvas, self.canvas.buffer)
        self.assertEqual(rast.edge_length, 4)


if __name__ == "__main__":
    unittest.main()
