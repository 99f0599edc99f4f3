from __future__ import annotations

import unittest

import numpy as np

from braille_plot.raster import BRAILLE_EMPTY, DotCanvas, cell_char


# (dx, dy, bit) in Unicode braille dot order 1..8.
DOT_LAYOUT = (
    (0, 0, 0x01),
    (0, 1, 0x02),
    (0, 2, 0x04),
    (1, 0, 0x08),
    (1, 1, 0x10),
    (1, 2, 0x20),
    (0, 3, 0x40),
    (1, 3, 0x80),
)


class DotCanvasTests(unittest.TestCase):
    def test_dimensions_are_two_by_four_per_cell(self) -> None:
        canvas = DotCanvas(10, 5)
        self.assertEqual((canvas.dots_width, canvas.dots_height), (20, 20))
        self.assertEqual(canvas.dots.shape, (20, 20))

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            DotCanvas(0, 3)
        with self.assertRaises(ValueError):
            DotCanvas(3, -1)

    def test_empty_canvas_renders_blank_braille_rows(self) -> None:
        out = DotCanvas(10, 5).render()
        self.assertEqual(out, (chr(BRAILLE_EMPTY) * 10 + "\n") * 5)

    def test_every_mask_round_trips_through_render(self) -> None:
        for mask in range(256):
            canvas = DotCanvas(1, 1)
            for dx, dy, bit in DOT_LAYOUT:
                if mask & bit:
                    canvas.set(dx, dy)
            self.assertEqual(canvas.render(), chr(0x2800 | mask) + "\n", msg=f"mask={mask:#04x}")

    def test_cell_char_matches_mask(self) -> None:
        self.assertEqual(cell_char(0), "⠀")
        self.assertEqual(cell_char(0xFF), "⣿")
        with self.assertRaises(ValueError):
            cell_char(256)

    def test_set_out_of_bounds_is_ignored(self) -> None:
        canvas = DotCanvas(2, 1)
        for x, y in ((-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)):
            canvas.set(x, y)
        self.assertFalse(np.any(canvas.dots))
        self.assertFalse(canvas.is_set(-1, 0))

    def test_set_is_idempotent(self) -> None:
        canvas = DotCanvas(1, 1)
        canvas.set(1, 3)
        once = canvas.render()
        canvas.set(1, 3)
        self.assertEqual(canvas.render(), once)
        self.assertEqual(once, "⢀\n")

    def test_dots_view_is_read_only(self) -> None:
        canvas = DotCanvas(1, 1)
        with self.assertRaises(ValueError):
            canvas.dots[0, 0] = True

    def test_set_many_clips_like_set(self) -> None:
        canvas = DotCanvas(2, 1)
        canvas.set_many(np.asarray([0, 3, 4, -1]), np.asarray([0, 3, 0, 2]))
        self.assertTrue(canvas.is_set(0, 0))
        self.assertTrue(canvas.is_set(3, 3))
        self.assertEqual(int(np.count_nonzero(canvas.dots)), 2)

    def test_compose_offsets_and_clips(self) -> None:
        small = DotCanvas(1, 1)
        small.set(0, 0)
        small.set(1, 3)
        big = DotCanvas(2, 1)
        big.compose(small, 2, 0)
        self.assertTrue(big.is_set(2, 0))
        self.assertTrue(big.is_set(3, 3))

        clipped = DotCanvas(2, 1)
        clipped.compose(small, 3, 1)
        self.assertEqual(int(np.count_nonzero(clipped.dots)), 0)

    def test_compose_keeps_existing_dots(self) -> None:
        base = DotCanvas(1, 1)
        base.set(0, 0)
        other = DotCanvas(1, 1)
        other.set(1, 0)
        base.compose(other, 0, 0)
        self.assertEqual(base.render(), chr(0x2800 | 0x01 | 0x08) + "\n")

    def test_lines_are_clipped_to_the_grid(self) -> None:
        canvas = DotCanvas(2, 1)
        canvas.draw_hline(-5, 10, 1)
        canvas.draw_vline(1, 3, -3)
        canvas.draw_hline(0, 3, 9)
        self.assertEqual(int(np.count_nonzero(canvas.dots[1])), 4)
        self.assertTrue(all(canvas.is_set(1, y) for y in range(4)))
        self.assertEqual(canvas.render(), chr(0x2800 | 0x02 | 0x08 | 0x10 | 0x20 | 0x80) + chr(0x2800 | 0x02 | 0x10) + "\n")


if __name__ == "__main__":
    unittest.main()
