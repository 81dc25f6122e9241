"""
Clock face decorations: outline, tick marks and hour markers.
"""

from collections import Counter
from typing import Dict, Set, Tuple

from .geometry import Cell, ellipse_cells, polar_to_cell, segment_cells
from .state import ASPECT, FaceStyle, MarkerStyle

OUTLINE_GLYPH = "*"
HOUR_TICK_GLYPH = "*"
MINUTE_TICK_GLYPH = "."
DOT_GLYPH = "•"

# Hour ticks run inward from the rim to this share of the radius
HOUR_TICK_INNER = 0.85

# Markers sit this many columns outside the face radius
MARKER_OFFSET = 2

NUMERALS = {0: "12", 3: "3", 6: "6", 9: "9"}


def _hour_ticks(center: Cell, radius: int) -> Dict[Cell, str]:
    cells = {}
    for hour in range(12):
        for cell in segment_cells(center, radius, hour / 12.0, HOUR_TICK_INNER, 1.0):
            cells[cell] = HOUR_TICK_GLYPH
    return cells


def _minute_ticks(center: Cell, radius: int) -> Dict[Cell, str]:
    positions = [polar_to_cell(center, radius, minute / 60.0) for minute in range(60)]
    hits = Counter(positions)
    # Cells shared by neighbouring minutes would blur into one mark
    return {cell: MINUTE_TICK_GLYPH
            for minute, cell in enumerate(positions) if minute % 5 and hits[cell] == 1}


def outline_cells(center: Cell, radius: int, face_style: str) -> Dict[Cell, str]:
    """Cells of the face outline or tick marks for the given style."""
    if face_style == FaceStyle.FULL_CIRCLE:
        return {cell: OUTLINE_GLYPH
                for cell in ellipse_cells(center, radius, round(radius * ASPECT))}
    if face_style == FaceStyle.TICKS:
        cells = _minute_ticks(center, radius)
        cells.update(_hour_ticks(center, radius))
        return cells
    if face_style == FaceStyle.HOUR_TICKS_ONLY:
        return _hour_ticks(center, radius)
    return {}


def marker_cells(center: Cell, radius: int, marker_style: str) -> Dict[Cell, str]:
    """Cells of the hour markers, placed just outside the face."""
    distance = max(radius, 0) + MARKER_OFFSET
    cells = {}
    if marker_style == MarkerStyle.NUMERIC:
        for hour, label in NUMERALS.items():
            row, col = polar_to_cell(center, distance, hour / 12.0)
            start = col - len(label) // 2
            for offset, char in enumerate(label):
                cells[(row, start + offset)] = char
    elif marker_style == MarkerStyle.DOTS:
        for hour in range(12):
            cells[polar_to_cell(center, distance, hour / 12.0)] = DOT_GLYPH
    return cells


def face_cells(center: Cell, radius: int, face_style: str,
               marker_style: str) -> Set[Tuple[int, int, str]]:
    """All static face cells as (row, col, glyph); markers win on shared cells."""
    cells = outline_cells(center, radius, face_style)
    cells.update(marker_cells(center, radius, marker_style))
    return {(row, col, glyph) for (row, col), glyph in cells.items()}
