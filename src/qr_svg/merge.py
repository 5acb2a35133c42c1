"""Merge dark QR modules into a small set of rectangles."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .errors import InvalidArgumentError
from .geometry import LogoBox, Rectangle

logger = logging.getLogger(__name__)


def merge_rectangles(
    matrix: Sequence[Sequence[bool]],
    module_size: float,
    exclusion: Optional[LogoBox] = None,
) -> List[Rectangle]:
    """Cover the dark modules of a square ``matrix`` with rectangles.

    Rows are first split into maximal horizontal runs of dark modules, then
    runs that start in the same column with the same length on consecutive
    rows are stacked into one rectangle. Modules touching ``exclusion`` are
    treated as light. Rectangles come back in the order their top-left module
    is found, scanning rows top to bottom and columns left to right.
    """

    if module_size <= 0:
        raise InvalidArgumentError("module size must be positive")
    size = len(matrix)
    runs = horizontal_runs(matrix, module_size, exclusion)

    rectangles: List[Rectangle] = []
    for y in range(size):
        for x in range(size):
            index = y * size + x
            run_length = runs[index]
            if run_length == 0:
                continue
            run_rows = 1
            below = index + size
            while below < len(runs) and runs[below] == run_length:
                runs[below] = 0
                run_rows += 1
                below += size
            rectangles.append(
                Rectangle(
                    x=x * module_size,
                    y=y * module_size,
                    width=run_length * module_size,
                    height=run_rows * module_size,
                )
            )

    logger.debug("Merged %dx%d matrix into %d rectangles", size, size, len(rectangles))
    return rectangles


def horizontal_runs(
    matrix: Sequence[Sequence[bool]],
    module_size: float,
    exclusion: Optional[LogoBox] = None,
) -> List[int]:
    """Return a flat ``size * size`` buffer of horizontal run lengths.

    ``runs[y * size + x]`` holds the length of the run starting at module
    ``(x, y)``, or 0 if no run starts there.
    """

    size = len(matrix)
    runs = [0] * (size * size)
    for y, row in enumerate(matrix):
        top = y * module_size
        start = -1
        length = 0
        for x, value in enumerate(row):
            eligible = bool(value) and (
                exclusion is None or not exclusion.blocks(x * module_size, top, module_size)
            )
            if eligible:
                if start == -1:
                    start = x
                length += 1
            elif length > 0:
                runs[y * size + start] = length
                start = -1
                length = 0
        if length > 0:
            runs[y * size + start] = length
    return runs
