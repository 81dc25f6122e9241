"""
Display state for the analog clock.

Every toggle is a small cyclic state machine. The state object is owned by the
render loop and only changes through the transition methods below, so it always
holds one of the legal combinations.
"""

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide
ASPECT = 0.5

MIN_WIDTH = 25
DEFAULT_WIDTH = 41
WIDTH_STEP = 4

# Columns kept free outside the face for hour markers
MARKER_MARGIN = 3


class SecondMode:
    OFF = "off"
    TICK = "tick"
    SWEEP = "sweep"

    ORDER = (OFF, TICK, SWEEP)


class FaceStyle:
    FULL_CIRCLE = "full"
    TICKS = "ticks"
    HOUR_TICKS_ONLY = "hours"
    BLANK = "blank"

    ORDER = (FULL_CIRCLE, TICKS, HOUR_TICKS_ONLY, BLANK)


class MarkerStyle:
    OFF = "off"
    NUMERIC = "numeric"
    DOTS = "dots"

    ORDER = (OFF, NUMERIC, DOTS)


def next_in_cycle(order: Tuple[str, ...], current: str) -> str:
    """Return the value after current, wrapping from last to first."""
    return order[(order.index(current) + 1) % len(order)]


def frame_size(width: int) -> Tuple[int, int]:
    """Return (rows, cols) of a frame for the given width."""
    half_height = round((width // 2) * ASPECT)
    return 2 * half_height + 1, width


def face_radius(width: int) -> int:
    """Horizontal face radius in columns for the given width."""
    return width // 2 - MARKER_MARGIN


def widest_fitting(cols: int, rows: int) -> int:
    """Largest width whose frame fits a cols x rows terminal, never below MIN_WIDTH."""
    for width in range(cols, MIN_WIDTH - 1, -1):
        if frame_size(width)[0] <= rows:
            return width
    return MIN_WIDTH


class DisplayState:
    """Current toggle configuration of the clock."""

    def __init__(self, second_mode: str = SecondMode.TICK,
                 face_style: str = FaceStyle.FULL_CIRCLE,
                 marker_style: str = MarkerStyle.NUMERIC,
                 width: int = DEFAULT_WIDTH,
                 max_width: Optional[int] = None,
                 continuous_minutes: bool = True,
                 second_tip_only: bool = False):
        if second_mode not in SecondMode.ORDER:
            raise ValueError(f"Unknown second mode: {second_mode!r}")
        if face_style not in FaceStyle.ORDER:
            raise ValueError(f"Unknown face style: {face_style!r}")
        if marker_style not in MarkerStyle.ORDER:
            raise ValueError(f"Unknown marker style: {marker_style!r}")
        if width < MIN_WIDTH:
            raise ValueError(f"Width must be at least {MIN_WIDTH}, got {width}")
        if max_width is not None and max_width < MIN_WIDTH:
            raise ValueError(f"Maximum width must be at least {MIN_WIDTH}, got {max_width}")

        self.second_mode = second_mode
        self.face_style = face_style
        self.marker_style = marker_style
        self.max_width = max_width
        self.width = width if max_width is None else min(width, max_width)
        self.continuous_minutes = continuous_minutes
        self.second_tip_only = second_tip_only

    def __repr__(self):
        return (f"DisplayState(second_mode={self.second_mode!r}, face_style={self.face_style!r}, "
                f"marker_style={self.marker_style!r}, width={self.width}, max_width={self.max_width}, "
                f"continuous_minutes={self.continuous_minutes}, second_tip_only={self.second_tip_only})")

    @property
    def rows(self) -> int:
        return frame_size(self.width)[0]

    @property
    def cols(self) -> int:
        return self.width

    @property
    def center(self) -> Tuple[int, int]:
        return self.rows // 2, self.cols // 2

    @property
    def radius(self) -> int:
        return face_radius(self.width)

    def cycle_second_mode(self):
        """Off -> Tick -> Sweep -> Off."""
        self.second_mode = next_in_cycle(SecondMode.ORDER, self.second_mode)
        logger.debug("Second mode is now %s", self.second_mode)

    def cycle_face_style(self):
        """FullCircle -> Ticks -> HourTicksOnly -> Blank -> FullCircle."""
        self.face_style = next_in_cycle(FaceStyle.ORDER, self.face_style)
        logger.debug("Face style is now %s", self.face_style)

    def cycle_marker_style(self):
        """Off -> Numeric -> Dots -> Off."""
        self.marker_style = next_in_cycle(MarkerStyle.ORDER, self.marker_style)
        logger.debug("Marker style is now %s", self.marker_style)

    def toggle_continuous_minutes(self):
        self.continuous_minutes = not self.continuous_minutes
        logger.debug("Continuous minutes %s", "on" if self.continuous_minutes else "off")

    def toggle_second_tip_only(self):
        self.second_tip_only = not self.second_tip_only
        logger.debug("Second hand tip only %s", "on" if self.second_tip_only else "off")

    def _clamp_width(self, width: int) -> int:
        upper = self.max_width if self.max_width is not None else width
        return max(MIN_WIDTH, min(upper, width))

    def _step_width(self, step: int):
        width = self.width + step
        if self._clamp_width(width) != width:
            logger.debug("Width %d is out of range, staying at %d", width, self.width)
            return
        self.width = width
        logger.debug("Width is now %d", self.width)

    def grow(self):
        """Widen the clock by one step unless that passes the maximum."""
        self._step_width(WIDTH_STEP)

    def shrink(self):
        """Narrow the clock by one step unless that passes the minimum."""
        self._step_width(-WIDTH_STEP)

    def fit_to(self, cols: int, rows: int):
        """Bound the width by the terminal size and clamp the current width."""
        self.max_width = widest_fitting(cols, rows)
        clamped = self._clamp_width(self.width)
        if clamped != self.width:
            logger.info("Terminal is %dx%d, width clamped from %d to %d",
                        cols, rows, self.width, clamped)
            self.width = clamped
