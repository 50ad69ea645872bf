"""Player ship and its shots"""
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from .config import (
    NUM_COLS,
    PLAYER_GLYPH,
    PLAYER_ROW,
    PLAYER_START_COL,
    SHOT_COOLDOWN,
    SHOT_GLYPH,
    SHOT_SPEED,
)
from .frame import Frame

if TYPE_CHECKING:
    from .swarm import Swarm


@dataclass
class Projectile:
    """Player shot travelling up the playfield"""
    col: int
    row: float
    velocity: float = -SHOT_SPEED  # Rows per second, negative is up
    prev_row: Optional[float] = field(default=None, repr=False)  # Row before the last update

    def __post_init__(self):
        if self.prev_row is None:
            self.prev_row = self.row

    @property
    def cell_row(self) -> int:
        """Row of the cell the shot currently occupies"""
        return int(self.row)

    def swept_rows(self) -> range:
        """Cell rows crossed since the last update, in travel order"""
        return range(int(self.prev_row), self.cell_row - 1, -1)


class Player:
    """Player's ship"""

    def __init__(self):
        self.col = PLAYER_START_COL
        self.row = PLAYER_ROW
        self.shots: List[Projectile] = []
        self.since_last_shot = SHOT_COOLDOWN  # Cooldown starts elapsed

    def move_left(self) -> None:
        if self.col > 0:
            self.col -= 1

    def move_right(self) -> None:
        if self.col < NUM_COLS - 1:
            self.col += 1

    def shoot(self) -> bool:
        """Fire a shot if the cooldown has elapsed. Returns True if a shot was fired."""
        if self.since_last_shot < SHOT_COOLDOWN:
            return False
        self.shots.append(Projectile(self.col, float(self.row)))
        self.since_last_shot = 0.0
        return True

    def update(self, delta: float) -> None:
        """Advance the cooldown and every shot by delta seconds"""
        self.since_last_shot += delta
        for shot in self.shots:
            shot.prev_row = shot.row
            shot.row += shot.velocity * delta
        # Shots leaving the top of the playfield are gone
        self.shots = [shot for shot in self.shots if shot.row >= 0]

    def detect_hits(self, swarm: 'Swarm') -> bool:
        """Remove every shot that hit an invader, and the first invader in its path"""
        hit_something = False
        for shot in self.shots[:]:
            # Every cell crossed this tick, so a slow tick can't skip an invader
            if any(swarm.kill_invader_at(shot.col, row) for row in shot.swept_rows()):
                self.shots.remove(shot)
                hit_something = True
        return hit_something

    def draw(self, frame: Frame) -> None:
        # Shots first so a shot fired this tick doesn't hide the ship
        for shot in self.shots:
            frame[shot.col][shot.cell_row] = SHOT_GLYPH
        frame[self.col][self.row] = PLAYER_GLYPH
