from __future__ import annotations

import numpy as np


BRAILLE_EMPTY = 0x2800
CELL_DOTS_X = 2
CELL_DOTS_Y = 4

# Unicode braille dot numbering, indexed [dy][dx] inside one 2x4 cell.
BRAILLE_DOT_BITS = np.asarray(
    [
        [0x01, 0x08],  # dot 1, dot 4
        [0x02, 0x10],  # dot 2, dot 5
        [0x04, 0x20],  # dot 3, dot 6
        [0x40, 0x80],  # dot 7, dot 8
    ],
    dtype=np.uint32,
)


def cell_char(mask: int) -> str:
    if mask < 0 or mask > 0xFF:
        raise ValueError("braille mask must be in [0, 255]")
    return chr(BRAILLE_EMPTY | mask)
