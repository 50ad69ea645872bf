"""Game loop: input, update, collisions, drawing and end conditions once per tick"""
import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Protocol

from .config import (
    CUE_EXPLODE,
    CUE_LOSE,
    CUE_MOVE,
    CUE_PEW,
    CUE_STARTUP,
    CUE_WIN,
    TICK_SLEEP,
)
from .events import Key, KeyEvent
from .frame import Drawable, Frame, new_frame
from .player import Player
from .swarm import Swarm

logger = logging.getLogger(__name__)

QUIT_KEYS = (Key.ESC, 'q')


class Outcome(Enum):
    """How a game ended"""
    QUIT = "quit"
    WIN = "win"
    LOSS = "loss"


class Keys(Protocol):
    def poll(self, timeout: float = 0.0) -> bool: ...

    def read(self) -> KeyEvent: ...


class Audio(Protocol):
    def play(self, name: str) -> None: ...


class FrameSink(Protocol):
    def send(self, frame: Frame) -> None: ...


class Game:
    """Owns the player and the swarm and runs them against real time"""

    def __init__(self, keys: Keys, audio: Audio, frames: FrameSink,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.keys = keys
        self.audio = audio
        self.frames = frames
        self.clock = clock
        self.sleep = sleep
        self.player = Player()
        self.swarm = Swarm()
        self.quit_requested = False

    def handle_input(self) -> None:
        """Drain pending key events without blocking"""
        while self.keys.poll(0):
            key = self.keys.read()
            if key is Key.LEFT:
                self.player.move_left()
            elif key is Key.RIGHT:
                self.player.move_right()
            elif key is Key.SPACE:
                if self.player.shoot():
                    self.audio.play(CUE_PEW)
            elif key in QUIT_KEYS:
                self.quit_requested = True
                break

    def tick(self, delta: float) -> Optional[Outcome]:
        """Run one tick with delta seconds elapsed. Returns the outcome once the game is over."""
        self.handle_input()

        # Update
        self.player.update(delta)
        if self.swarm.update(delta):
            self.audio.play(CUE_MOVE)
        if self.player.detect_hits(self.swarm):
            self.audio.play(CUE_EXPLODE)

        # Draw and hand off - the frame belongs to the renderer after send
        frame = new_frame()
        drawables: List[Drawable] = [self.player, self.swarm]
        for drawable in drawables:
            drawable.draw(frame)
        self.frames.send(frame)

        # End conditions, in priority order
        if self.quit_requested:
            self.audio.play(CUE_LOSE)
            return Outcome.QUIT
        if self.swarm.all_killed():
            self.audio.play(CUE_WIN)
            return Outcome.WIN
        if self.swarm.reached_bottom():
            self.audio.play(CUE_LOSE)
            return Outcome.LOSS
        return None

    def run(self) -> Outcome:
        """Main game loop"""
        self.audio.play(CUE_STARTUP)
        last_tick = self.clock()
        while True:
            now = self.clock()
            delta, last_tick = now - last_tick, now

            outcome = self.tick(delta)
            if outcome is not None:
                logger.info("Game over: %s (%d invaders left)", outcome.value, len(self.swarm.invaders))
                return outcome
            self.sleep(TICK_SLEEP)
