"""Terminal output over curses"""
import curses
import logging

from . import InvadersError
from .config import NUM_COLS, NUM_ROWS

logger = logging.getLogger(__name__)


class TerminalTooSmall(InvadersError):
    """Terminal can't fit the playfield"""


class Screen:
    """Curses window the renderer writes frames into"""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()

    def setup(self) -> None:
        """Hide the cursor and switch to raw input (keys come from pynput, not curses)"""
        if self.height < NUM_ROWS or self.width < NUM_COLS:
            raise TerminalTooSmall(
                f"Terminal size must be at least {NUM_COLS}x{NUM_ROWS}, "
                f"current size: {self.width}x{self.height}")
        curses.curs_set(0)
        curses.raw()
        curses.noecho()
        logger.debug("Screen ready (%dx%d)", self.width, self.height)

    def teardown(self) -> None:
        """Drop keystrokes curses buffered during play and restore input mode"""
        curses.flushinp()
        curses.noraw()
        try:
            curses.curs_set(1)
        except curses.error:
            pass  # Terminal without cursor visibility support

    def clear(self) -> None:
        self.stdscr.clear()

    def write(self, col: int, row: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            # Writing the bottom-right cell can't advance the cursor; the text is still drawn
            if not (row == self.height - 1 and col + len(text) == self.width):
                raise

    def flush(self) -> None:
        self.stdscr.refresh()
