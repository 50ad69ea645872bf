"""
Frame rendering

Only cells that changed since the previous frame are written to the terminal.
Rendering runs on its own thread, fed by an unbounded queue of frames; the
simulation never waits for the terminal.
"""
import logging
import queue
import threading
from typing import List, Optional, Protocol, Tuple

from . import InvadersError
from .frame import Frame, new_frame

logger = logging.getLogger(__name__)

# (col, row, glyph)
Write = Tuple[int, int, str]

_CLOSED = None  # Queue sentinel ending the render loop


class RenderError(InvadersError):
    """Rendering thread failed or frames were sent after it was closed"""


class Output(Protocol):
    """Terminal output the renderer writes to"""

    def clear(self) -> None: ...

    def write(self, col: int, row: int, text: str) -> None: ...

    def flush(self) -> None: ...


def diff_frames(last_frame: Frame, curr_frame: Frame, force: bool = False) -> List[Write]:
    """Cells of curr_frame that differ from last_frame (every cell when forced)"""
    writes = []
    for col, column in enumerate(curr_frame):
        last_column = last_frame[col]
        for row, glyph in enumerate(column):
            if force or glyph != last_column[row]:
                writes.append((col, row, glyph))
    return writes


def render(out: Output, last_frame: Frame, curr_frame: Frame, force: bool = False) -> None:
    """Write the changed cells of curr_frame to out and flush"""
    if force:
        out.clear()
    for col, row, glyph in diff_frames(last_frame, curr_frame, force):
        out.write(col, row, glyph)
    out.flush()


class RenderThread(threading.Thread):
    """Consumes frames from an unbounded queue and renders each against the last"""

    def __init__(self, out: Output):
        super().__init__(name="render")
        self.out = out
        self.frames: queue.SimpleQueue = queue.SimpleQueue()
        self.error: Optional[BaseException] = None
        self.closed = False

    def run(self):
        try:
            last_frame = new_frame()
            render(self.out, last_frame, last_frame, force=True)
            while True:
                curr_frame = self.frames.get()
                if curr_frame is _CLOSED:
                    break
                render(self.out, last_frame, curr_frame)
                last_frame = curr_frame
        except Exception as exc:
            logger.error("Render thread failed: %s", exc)
            self.error = exc

    def send(self, frame: Frame) -> None:
        """Hand a finished frame to the render thread. The caller must not touch it afterwards."""
        if self.closed:
            raise RenderError("frame sent after the render channel was closed")
        if self.error is not None:
            raise RenderError("render thread failed") from self.error
        self.frames.put(frame)

    def close(self) -> None:
        """Close the channel, wait for queued frames to render and re-raise any render failure"""
        if not self.closed:
            self.closed = True
            self.frames.put(_CLOSED)
        if self.is_alive():
            self.join()
        if self.error is not None:
            raise RenderError("render thread failed") from self.error
