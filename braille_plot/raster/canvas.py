from __future__ import annotations

import numpy as np

from braille_plot.raster.braille import BRAILLE_DOT_BITS, BRAILLE_EMPTY, CELL_DOTS_X, CELL_DOTS_Y


class DotCanvas:
    """Boolean dot grid at 2x4 dots per character cell, rendered as braille."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas width and height must be > 0")
        self._width = width
        self._height = height
        self._dots = np.zeros((height * CELL_DOTS_Y, width * CELL_DOTS_X), dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dots_width(self) -> int:
        return self._dots.shape[1]

    @property
    def dots_height(self) -> int:
        return self._dots.shape[0]

    @property
    def dots(self) -> np.ndarray:
        view = self._dots.view()
        view.flags.writeable = False
        return view

    def set(self, x: int, y: int) -> None:
        if 0 <= x < self.dots_width and 0 <= y < self.dots_height:
            self._dots[y, x] = True

    def set_many(self, xs: np.ndarray, ys: np.ndarray) -> None:
        xs = np.asarray(xs, dtype=np.int64)
        ys = np.asarray(ys, dtype=np.int64)
        keep = (xs >= 0) & (xs < self.dots_width) & (ys >= 0) & (ys < self.dots_height)
        self._dots[ys[keep], xs[keep]] = True

    def is_set(self, x: int, y: int) -> bool:
        if 0 <= x < self.dots_width and 0 <= y < self.dots_height:
            return bool(self._dots[y, x])
        return False

    def compose(self, other: DotCanvas, offset_x: int = 0, offset_y: int = 0) -> None:
        ys, xs = np.nonzero(other._dots)
        self.set_many(xs + offset_x, ys + offset_y)

    def draw_hline(self, x0: int, x1: int, y: int) -> None:
        if y < 0 or y >= self.dots_height:
            return
        xa = max(0, min(x0, x1))
        xb = min(self.dots_width - 1, max(x0, x1))
        if xa > xb:
            return
        self._dots[y, xa : xb + 1] = True

    def draw_vline(self, x: int, y0: int, y1: int) -> None:
        if x < 0 or x >= self.dots_width:
            return
        ya = max(0, min(y0, y1))
        yb = min(self.dots_height - 1, max(y0, y1))
        if ya > yb:
            return
        self._dots[ya : yb + 1, x] = True

    def cell_masks(self) -> np.ndarray:
        # (rows, dy, cols, dx) so each cell's 2x4 block lines up with BRAILLE_DOT_BITS.
        blocks = self._dots.reshape(self._height, CELL_DOTS_Y, self._width, CELL_DOTS_X)
        weighted = blocks * BRAILLE_DOT_BITS[None, :, None, :]
        return weighted.sum(axis=(1, 3)).astype(np.uint32)

    def rows(self) -> list[str]:
        codes = self.cell_masks() | BRAILLE_EMPTY
        return ["".join(map(chr, row)) for row in codes.tolist()]

    def render(self) -> str:
        return "".join(f"{row}\n" for row in self.rows())

    def __str__(self) -> str:
        return self.render()
