"""
Frame composition: display state and a time sample in, character buffer out.
"""

from itertools import cycle
from typing import Iterable, NamedTuple

from .face import marker_cells, outline_cells
from .geometry import Cell, hand_cells, hand_fractions, segment_cells
from .screen import Layer, ScreenBuffer
from .state import DisplayState
from .timesource import TimeSample

HOUR_LENGTH = 0.5
MINUTE_LENGTH = 0.75
SECOND_LENGTH = 0.9

# Tip-only second hands start at this share of their length
SECOND_TIP_START = 0.8


class HandLabels(NamedTuple):
    """Text repeated along each hand, read from the center outward."""

    hour: str = "HOURS"
    minute: str = "minutes"
    second: str = "."


DEFAULT_LABELS = HandLabels()


def _plot_hand(buffer: ScreenBuffer, cells: Iterable[Cell], label: str, layer: str):
    for (row, col), glyph in zip(cells, cycle(label)):
        buffer.plot(row, col, glyph, layer)


def compose_frame(state: DisplayState, sample: TimeSample,
                  labels: HandLabels = DEFAULT_LABELS) -> ScreenBuffer:
    """Draw face, markers, then hour, minute and second hands into a fresh buffer."""
    buffer = ScreenBuffer(state.rows, state.cols)
    center = state.center
    radius = state.radius

    for (row, col), glyph in outline_cells(center, radius, state.face_style).items():
        buffer.plot(row, col, glyph, Layer.FACE)
    for (row, col), glyph in marker_cells(center, radius, state.marker_style).items():
        buffer.plot(row, col, glyph, Layer.MARKER)

    hour, minute, second = hand_fractions(sample, state.second_mode, state.continuous_minutes)
    _plot_hand(buffer, hand_cells(center, radius, hour, HOUR_LENGTH), labels.hour, Layer.HOUR)
    _plot_hand(buffer, hand_cells(center, radius, minute, MINUTE_LENGTH),
               labels.minute, Layer.MINUTE)

    if second is not None:
        if state.second_tip_only:
            cells = segment_cells(center, radius * SECOND_LENGTH, second, SECOND_TIP_START, 1.0)
        else:
            cells = hand_cells(center, radius, second, SECOND_LENGTH)
        _plot_hand(buffer, cells, labels.second, Layer.SECOND)
    return buffer
