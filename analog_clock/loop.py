"""
Render loop: merges timer ticks and key presses into one sequence of frames.
"""

import logging
import time
from typing import Callable, Optional, Tuple

from .keys import InputHandler, Outcome
from .render import DEFAULT_LABELS, HandLabels, compose_frame
from .screen import ScreenBuffer
from .state import DisplayState, SecondMode
from .timesource import TimeSample

logger = logging.getLogger(__name__)

# Sweep needs a smooth second hand, the other modes only need responsive keys
SWEEP_INTERVAL = 0.05
TICK_INTERVAL = 0.1

MAX_KEYS_PER_TICK = 16


class RenderLoop:
    """Single owner of the display state; draws one frame per tick."""

    def __init__(self, state: DisplayState,
                 time_source: Callable[[], TimeSample],
                 key_source: Callable[[], Optional[str]],
                 flush: Callable[[ScreenBuffer], None],
                 size_source: Optional[Callable[[], Tuple[int, int]]] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 on_shutdown: Optional[Callable[[], None]] = None,
                 labels: HandLabels = DEFAULT_LABELS):
        self.state = state
        self.handler = InputHandler(state)
        self.time_source = time_source
        self.key_source = key_source
        self.flush = flush
        self.size_source = size_source
        self.sleep = sleep
        self.on_shutdown = on_shutdown
        self.labels = labels
        self.frames = 0
        self._stop_requested = False

    def request_stop(self):
        """Ask the loop to finish before its next frame (safe from signal handlers)."""
        self._stop_requested = True

    def interval(self) -> float:
        """Seconds to wait between frames for the current second mode."""
        if self.state.second_mode == SecondMode.SWEEP:
            return SWEEP_INTERVAL
        return TICK_INTERVAL

    def process_input(self) -> bool:
        """Drain pending keys; return False once quit was pressed."""
        for _ in range(MAX_KEYS_PER_TICK):
            key = self.key_source()
            if key is None:
                break
            if self.handler.handle(key) == Outcome.QUIT:
                return False
        return True

    def tick(self):
        """Render and emit one frame."""
        if self.size_source is not None:
            cols, rows = self.size_source()
            self.state.fit_to(cols, rows)
        buffer = compose_frame(self.state, self.time_source(), self.labels)
        self.flush(buffer)
        self.frames += 1

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until quit, a stop request or max_frames; return frames emitted."""
        logger.info("Clock started: %r", self.state)
        try:
            while not self._stop_requested:
                if not self.process_input():
                    break
                if self._stop_requested:
                    break
                self.tick()
                if max_frames is not None and self.frames >= max_frames:
                    break
                self.sleep(self.interval())
        finally:
            self._shutdown()
        return self.frames

    def _shutdown(self):
        logger.info("Clock shutting down after %d frames", self.frames)
        if self.on_shutdown is not None:
            self.on_shutdown()
