"""
Configuration & Constants
=========================
Playfield dimensions, timings and glyphs used throughout the game, plus the
handful of settings that can be changed through environment variables.

Environment:
    INVADERS_SOUNDS_DIR: Directory with optional <cue>.wav files.
    INVADERS_LOG_LEVEL: Logging level name (default WARNING).
    INVADERS_LOG_FILE: Log file path. Nothing is logged when unset.
"""
import logging
import os
from pathlib import Path
from typing import Optional

# Playfield
NUM_COLS: int = 40
NUM_ROWS: int = 20
BOTTOM_ROW: int = NUM_ROWS - 1  # Player row, invaders reaching it win the game for them

# Player
PLAYER_START_COL: int = NUM_COLS // 2
PLAYER_ROW: int = NUM_ROWS - 1
SHOT_COOLDOWN: float = 0.3  # Seconds between shots
SHOT_SPEED: float = 20.0    # Rows per second (one row every 50ms)

# Invader formation
INVADER_ROWS: int = 4
INVADER_COLS: int = 12
INVADER_SPACING: int = 2
INVADER_TOP_ROW: int = 2

# Swarm speed - interval between move steps shrinks with population
BASE_MOVE_INTERVAL: float = 2.0
MIN_MOVE_INTERVAL: float = 0.25

# Loop yield, not a frame rate
TICK_SLEEP: float = 0.001

# Glyphs
BLANK = " "
PLAYER_GLYPH = "A"
SHOT_GLYPH = "|"
INVADER_GLYPHS = ("x", "+")  # Alternates on every move step

# Sound cues
CUE_EXPLODE = "explode"
CUE_LOSE = "lose"
CUE_MOVE = "move"
CUE_PEW = "pew"
CUE_STARTUP = "startup"
CUE_WIN = "win"
CUES = (CUE_EXPLODE, CUE_LOSE, CUE_MOVE, CUE_PEW, CUE_STARTUP, CUE_WIN)


def get_resource_path(relative_path: str) -> str:
    """Resolve a path relative to the project root (one level above the package)."""
    project_root: Path = Path(__file__).resolve().parent.parent
    return os.path.join(str(project_root), relative_path)


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


SOUNDS_DIR: str = os.environ.get("INVADERS_SOUNDS_DIR") or get_resource_path("sounds")
LOG_LEVEL: int = _log_level(os.environ.get("INVADERS_LOG_LEVEL", "WARNING"))
LOG_FILE: Optional[str] = os.environ.get("INVADERS_LOG_FILE") or None
