from .braille import BRAILLE_DOT_BITS, BRAILLE_EMPTY, cell_char
from .canvas import DotCanvas

__all__ = [
    "BRAILLE_DOT_BITS",
    "BRAILLE_EMPTY",
    "DotCanvas",
    "cell_char",
]
