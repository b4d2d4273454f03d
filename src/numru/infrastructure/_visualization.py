"""
Text rendering of arrays.

`VisualizeBuilder` renders rank-1, rank-2 and rank-3 arrays as bracketed
text. Floating-point elements are printed with a configurable number of
decimal places; integers ignore the precision. In rank-2 and rank-3 output
every column is padded to the width of its widest entry.

    >>> print(arr([[1, 20], [300, 4]]).visualize().render())
    [
       [1  , 20]
       [300, 4 ]
    ]
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO

import numpy as np

from .._config import get_config
from ..domain._array import IArray

_INDENT = "   "


def format_value(value: Any, precision: int) -> str:
    """
    Format one element: integers verbatim, floats with `precision` decimals.
    """
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):.{precision}f}"


class VisualizeBuilder:
    """
    Configurable text rendering of one array.

    Parameters
    ----------
    array : IArray
        Array to render. Only read.
    """

    def __init__(self, array: IArray) -> None:
        self._array = array
        self._decimal_points = get_config().decimal_points

    def decimal_points(self, points: int) -> "VisualizeBuilder":
        """
        Set the number of decimal places used for floating-point elements.

        Raises
        ------
        ValueError
            If `points` is negative or not an integer.
        """
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise ValueError(f"decimal points must be a non-negative int, got {points!r}")
        self._decimal_points = points
        return self

    def render(self) -> str:
        """
        Return the rendered text (without a trailing newline).
        """
        dims = self._array.shape().dims()
        cells = [format_value(v, self._decimal_points) for v in self._array.data().tolist()]

        if len(dims) == 1:
            return "[" + ", ".join(cells) + "]"
        if len(dims) == 2:
            rows, cols = dims
            widths = _column_widths(cells, cols)
            lines = ["["]
            for r in range(rows):
                lines.append(_INDENT + _row(cells, r * cols, widths))
            lines.append("]")
            return "\n".join(lines)
        if len(dims) == 3:
            depth, rows, cols = dims
            widths = _column_widths(cells, cols)
            lines = ["["]
            for d in range(depth):
                lines.append(_INDENT + "[")
                for r in range(rows):
                    start = d * rows * cols + r * cols
                    lines.append(_INDENT * 2 + _row(cells, start, widths))
                lines.append(_INDENT + "]")
            lines.append("]")
            return "\n".join(lines)
        return f"Unsupported dimension: {len(dims)}"

    def execute(self, file: Optional[TextIO] = None) -> str:
        """
        Print the rendering to `file` (stdout by default) and return it.
        """
        text = self.render()
        print(text, file=file if file is not None else sys.stdout)
        return text


def _column_widths(cells: List[str], cols: int) -> List[int]:
    widths = [0] * cols
    for i, cell in enumerate(cells):
        j = i % cols
        widths[j] = max(widths[j], len(cell))
    return widths


def _row(cells: List[str], start: int, widths: List[int]) -> str:
    padded = [cells[start + j].ljust(w) for j, w in enumerate(widths)]
    return "[" + ", ".join(padded) + "]"
