"""Keyboard input through pynput, translated into game key events"""
import logging

from pynput import keyboard

from .events import Key, KeyQueue

logger = logging.getLogger(__name__)

SPECIAL_KEYS = {
    keyboard.Key.left: Key.LEFT,
    keyboard.Key.right: Key.RIGHT,
    keyboard.Key.space: Key.SPACE,
    keyboard.Key.esc: Key.ESC,
}


def translate(key):
    """pynput key -> game key event, or None for keys without a character"""
    if key in SPECIAL_KEYS:
        return SPECIAL_KEYS[key]
    char = getattr(key, 'char', None)
    return char.lower() if char else None


def keyboard_listener(keys: KeyQueue) -> keyboard.Listener:
    """Create (not start) a background listener pushing key presses into keys"""
    def on_press(key):
        event = translate(key)
        if event is not None:
            keys.push(event)

    logger.debug("Creating keyboard listener")
    return keyboard.Listener(on_press=on_press)
