"""
Keyboard commands for the running clock.

Controls:
- s: Cycle second hand (off, tick, sweep)
- c: Cycle face (full circle, ticks, hour ticks, blank)
- n: Cycle hour markers (off, numbers, dots)
- m: Toggle continuous minute hand
- e: Toggle drawing only the tip of the second hand
- +/-: Widen/narrow the clock
- q: Quit
"""

import logging
from typing import Optional

from .state import DisplayState

logger = logging.getLogger(__name__)


class Outcome:
    HANDLED = "handled"
    IGNORED = "ignored"
    QUIT = "quit"


class InputHandler:
    """Maps decoded key symbols onto display state transitions."""

    QUIT_KEY = "q"

    def __init__(self, state: DisplayState):
        self.state = state
        self.bindings = {
            "s": state.cycle_second_mode,
            "c": state.cycle_face_style,
            "n": state.cycle_marker_style,
            "m": state.toggle_continuous_minutes,
            "e": state.toggle_second_tip_only,
            "+": state.grow,
            "-": state.shrink,
        }

    def handle(self, key: Optional[str]) -> str:
        """Apply one key; unknown keys leave the state untouched."""
        if not key:
            return Outcome.IGNORED
        key = key.lower()
        if key == self.QUIT_KEY:
            logger.info("Quit requested from keyboard")
            return Outcome.QUIT
        action = self.bindings.get(key)
        if action is None:
            return Outcome.IGNORED
        action()
        return Outcome.HANDLED
