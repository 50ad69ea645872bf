"""
Invader swarm

The whole formation moves as one: a step sideways every move interval, or a
step down with a change of direction when the next sideways step would leave
the playfield. The interval shrinks as invaders are destroyed.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import (
    BASE_MOVE_INTERVAL,
    BOTTOM_ROW,
    INVADER_COLS,
    INVADER_GLYPHS,
    INVADER_ROWS,
    INVADER_SPACING,
    INVADER_TOP_ROW,
    MIN_MOVE_INTERVAL,
    NUM_COLS,
)
from .frame import Frame

logger = logging.getLogger(__name__)


def move_interval(population: int, total: int) -> float:
    """Seconds between move steps for the given number of live invaders"""
    if total <= 0:
        return MIN_MOVE_INTERVAL
    ratio = max(0, min(population, total)) / total
    return MIN_MOVE_INTERVAL + (BASE_MOVE_INTERVAL - MIN_MOVE_INTERVAL) * ratio


@dataclass
class Invader:
    """A single live invader"""
    row: int
    col: int


def initial_formation() -> List[Invader]:
    """Rows x columns of invaders centered in the upper playfield, row-major"""
    span = (INVADER_COLS - 1) * INVADER_SPACING + 1
    first_col = (NUM_COLS - span) // 2
    return [
        Invader(INVADER_TOP_ROW + r * INVADER_SPACING, first_col + c * INVADER_SPACING)
        for r in range(INVADER_ROWS)
        for c in range(INVADER_COLS)
    ]


class Swarm:
    """Invader formation and its collective movement"""

    def __init__(self, invaders: Optional[List[Invader]] = None):
        # Kept in row-major order so hit resolution is deterministic
        self.invaders: List[Invader] = list(invaders) if invaders is not None else initial_formation()
        self.total = len(self.invaders)
        self.direction = 1  # 1=right, -1=left
        self.move_timer = 0.0
        self.steps = 0  # Move steps taken, drives the glyph animation

    @property
    def move_interval(self) -> float:
        return move_interval(len(self.invaders), self.total)

    def update(self, delta: float) -> bool:
        """Accumulate time and take a move step when due. Returns True if the swarm moved."""
        self.move_timer += delta
        if not self.invaders or self.move_timer < self.move_interval:
            return False
        self.move_timer = 0.0
        self.steps += 1

        if self._at_edge():
            self.direction = -self.direction
            for invader in self.invaders:
                invader.row += 1
        else:
            for invader in self.invaders:
                invader.col += self.direction
        return True

    def _at_edge(self) -> bool:
        """True if the next sideways step would carry the formation off the playfield"""
        if self.direction < 0:
            return min(inv.col for inv in self.invaders) + self.direction < 0
        return max(inv.col for inv in self.invaders) + self.direction >= NUM_COLS

    def kill_invader_at(self, col: int, row: int) -> bool:
        """Remove the first invader found at (col, row). Returns True if one was removed."""
        for index, invader in enumerate(self.invaders):
            if invader.col == col and invader.row == row:
                del self.invaders[index]
                logger.debug("Invader destroyed at (%d, %d), %d left", col, row, len(self.invaders))
                return True
        return False

    def all_killed(self) -> bool:
        return not self.invaders

    def reached_bottom(self) -> bool:
        return any(invader.row >= BOTTOM_ROW for invader in self.invaders)

    def draw(self, frame: Frame) -> None:
        glyph = INVADER_GLYPHS[self.steps % len(INVADER_GLYPHS)]
        for invader in self.invaders:
            if 0 <= invader.row < len(frame[invader.col]):
                frame[invader.col][invader.row] = glyph
