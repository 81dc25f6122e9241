"""
Clock geometry on a grid of terminal cells.

Positions around the dial are fractions of a full turn: 0.0 is 12 o'clock and
values grow clockwise. Cells are (row, col) pairs with rows growing downward.
"""

import math
from typing import List, Optional, Set, Tuple

from .state import ASPECT, SecondMode
from .timesource import TimeSample

Cell = Tuple[int, int]


def polar_to_cell(center: Cell, radius: float, fraction: float, aspect: float = ASPECT) -> Cell:
    """Convert a dial position into a cell offset from center."""
    theta = (fraction % 1.0) * 2 * math.pi
    row, col = center
    return (row - round(radius * math.cos(theta) * aspect),
            col + round(radius * math.sin(theta)))


def line_cells(start: Cell, end: Cell) -> List[Cell]:
    """Bresenham line from start to end, both included, ordered from start."""
    y0, x0 = start
    y1, x1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    cells = []
    while True:
        cells.append((y0, x0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return cells


def hand_cells(center: Cell, radius: float, fraction: float, length_ratio: float,
               aspect: float = ASPECT) -> List[Cell]:
    """Cells of a hand drawn from center to its tip."""
    length = max(radius, 0) * length_ratio
    tip = polar_to_cell(center, length, fraction, aspect)
    return line_cells(center, tip)


def segment_cells(center: Cell, radius: float, fraction: float, inner_ratio: float,
                  outer_ratio: float, aspect: float = ASPECT) -> List[Cell]:
    """Cells of a radial segment between two distances from center."""
    radius = max(radius, 0)
    start = polar_to_cell(center, radius * inner_ratio, fraction, aspect)
    end = polar_to_cell(center, radius * outer_ratio, fraction, aspect)
    return line_cells(start, end)


def ellipse_cells(center: Cell, a: int, b: int) -> Set[Cell]:
    """
    Outline of an ellipse with horizontal radius a and vertical radius b.

    Uses the integer midpoint ellipse algorithm, mirroring one quadrant into
    the other three. A zero radius degenerates into a segment on the other axis.
    """
    cy, cx = center
    a = max(a, 0)
    b = max(b, 0)
    if a == 0 or b == 0:
        cells = {(cy, cx + x) for x in range(-a, a + 1)}
        cells.update((cy + y, cx) for y in range(-b, b + 1))
        return cells

    cells = set()

    def mirror(x, y):
        cells.update({(cy + y, cx + x), (cy + y, cx - x),
                      (cy - y, cx + x), (cy - y, cx - x)})

    a2 = a * a
    b2 = b * b
    x, y = 0, b
    dx, dy = 0, 2 * a2 * y

    # Region 1: slope shallower than -1
    d1 = b2 - a2 * b + 0.25 * a2
    while dx < dy:
        mirror(x, y)
        x += 1
        dx += 2 * b2
        if d1 < 0:
            d1 += dx + b2
        else:
            y -= 1
            dy -= 2 * a2
            d1 += dx - dy + b2

    # Region 2: slope steeper than -1
    d2 = b2 * (x + 0.5) ** 2 + a2 * (y - 1) ** 2 - a2 * b2
    while y >= 0:
        mirror(x, y)
        y -= 1
        dy -= 2 * a2
        if d2 > 0:
            d2 += a2 - dy
        else:
            x += 1
            dx += 2 * b2
            d2 += dx - dy + a2
    return cells


def hand_fractions(sample: TimeSample, second_mode: str,
                   continuous_minutes: bool = True) -> Tuple[float, float, Optional[float]]:
    """
    Dial positions of the hour, minute and second hands.

    The second hand position is None when seconds are switched off. Tick mode
    only moves on whole seconds; Sweep mode follows the fractional second.
    """
    seconds = float(sample.second)
    if second_mode == SecondMode.SWEEP:
        seconds += sample.fraction

    hour = ((sample.hour % 12) + sample.minute / 60.0) / 12.0
    if continuous_minutes:
        minute = (sample.minute + seconds / 60.0) / 60.0
    else:
        minute = sample.minute / 60.0

    if second_mode == SecondMode.OFF:
        second = None
    else:
        second = (seconds / 60.0) % 1.0
    return hour % 1.0, minute % 1.0, second
