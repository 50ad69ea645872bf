"""Keyboard events as consumed by the game loop"""
import queue
from enum import Enum
from typing import Optional, Union


class Key(Enum):
    """Special keys the game cares about"""
    LEFT = 1
    RIGHT = 2
    SPACE = 3
    ESC = 4


# A special key or a single printable character
KeyEvent = Union[Key, str]


class KeyQueue:
    """Thread-safe key event queue with poll/read semantics"""

    def __init__(self):
        self._events: queue.Queue = queue.Queue()
        self._pending: Optional[KeyEvent] = None

    def push(self, key: KeyEvent) -> None:
        self._events.put(key)

    def poll(self, timeout: float = 0.0) -> bool:
        """True if an event is available within timeout seconds"""
        if self._pending is not None:
            return True
        try:
            if timeout > 0:
                self._pending = self._events.get(timeout=timeout)
            else:
                self._pending = self._events.get_nowait()
        except queue.Empty:
            return False
        return True

    def read(self) -> KeyEvent:
        """Next event, blocking until one arrives"""
        if self._pending is not None:
            key, self._pending = self._pending, None
            return key
        return self._events.get()
