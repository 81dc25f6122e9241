"""
Character buffer for one clock frame.
"""

from typing import List, Optional, Tuple


class Layer:
    """Tags telling flush backends which part of the clock a cell belongs to."""
    FACE = "face"
    MARKER = "marker"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    ALL = (FACE, MARKER, HOUR, MINUTE, SECOND)


class ScreenBuffer:
    """Rectangular grid of characters, rebuilt for every frame."""

    BLANK = " "

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Buffer size must not be negative: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._glyphs: List[List[str]] = []
        self._layers: List[List[Optional[str]]] = []
        self.clear()

    def clear(self):
        """Reset every cell to blank."""
        self._glyphs = [[self.BLANK] * self.cols for _ in range(self.rows)]
        self._layers = [[None] * self.cols for _ in range(self.rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def plot(self, row: int, col: int, glyph: str, layer: Optional[str] = None):
        """Write a single character; cells outside the grid are clipped."""
        if len(glyph) != 1:
            raise ValueError(f"Expected a single character, got {glyph!r}")
        if not self.in_bounds(row, col):
            return
        self._glyphs[row][col] = glyph
        self._layers[row][col] = layer

    def glyph_at(self, row: int, col: int) -> str:
        return self._glyphs[row][col]

    def layer_at(self, row: int, col: int) -> Optional[str]:
        return self._layers[row][col]

    def render(self) -> List[str]:
        """Return the buffer as rows of text."""
        return ["".join(line) for line in self._glyphs]

    def runs(self) -> List[List[Tuple[str, Optional[str]]]]:
        """Split every row into (text, layer) runs of equally tagged cells."""
        result = []
        for glyphs, layers in zip(self._glyphs, self._layers):
            row_runs = []
            for glyph, layer in zip(glyphs, layers):
                if row_runs and row_runs[-1][1] == layer:
                    row_runs[-1] = (row_runs[-1][0] + glyph, layer)
                else:
                    row_runs.append((glyph, layer))
            result.append(row_runs)
        return result
