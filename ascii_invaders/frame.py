"""Frame buffer: one rendered screen as columns of rows of glyphs"""
from typing import List, Protocol

from .config import BLANK, NUM_COLS, NUM_ROWS

# frame[col][row] -> glyph
Frame = List[List[str]]


def new_frame() -> Frame:
    """Create a blank frame of the fixed playfield size"""
    return [[BLANK] * NUM_ROWS for _ in range(NUM_COLS)]


class Drawable(Protocol):
    """Anything that can paint itself into a frame"""

    def draw(self, frame: Frame) -> None: ...
