"""Entry point: python -m ascii_invaders"""
import curses
import logging
import sys

from . import config
from .controls import keyboard_listener
from .events import KeyQueue
from .game import Game, Outcome
from .logging_config import setup_logging
from .render import RenderThread
from .screen import Screen, TerminalTooSmall
from .sound import Synth, register_cues

logger = logging.getLogger(__name__)


def play(stdscr, synth: Synth, keys: KeyQueue) -> Outcome:
    """Run one game on the curses screen; the screen is restored by curses.wrapper"""
    screen = Screen(stdscr)
    screen.setup()

    # Render loop in a separate thread
    renderer = RenderThread(screen)
    renderer.start()
    try:
        outcome = Game(keys, synth, renderer).run()
    finally:
        try:
            renderer.close()
        finally:
            screen.teardown()

    # Let the final cue finish before leaving the alternate screen
    synth.wait()
    return outcome


def main() -> int:
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    logger.info("Starting up")

    synth = Synth()
    register_cues(synth, config.SOUNDS_DIR)

    keys = KeyQueue()
    listener = keyboard_listener(keys)
    listener.start()
    try:
        outcome = curses.wrapper(play, synth, keys)
    except (TerminalTooSmall, curses.error) as exc:
        logger.error("Terminal setup failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        # Clean up keyboard listener and mixer
        listener.stop()
        synth.close()

    logger.info("Shutting down after %s", outcome.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
