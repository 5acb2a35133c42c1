"""Utilities for working with QR code matrices."""

from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvalidArgumentError

Matrix = Tuple[Tuple[bool, ...], ...]

QUIET_ZONE_MODULES = 4


def matrix_size(matrix: Sequence[Sequence[bool]]) -> int:
    """Return the side length of ``matrix``.

    Raises :class:`InvalidArgumentError` for an empty, ragged or non-square
    matrix.
    """

    size = len(matrix)
    if size == 0:
        raise InvalidArgumentError("matrix must not be empty")
    for y, row in enumerate(matrix):
        if len(row) != size:
            raise InvalidArgumentError(
                f"matrix must be square: row {y} has {len(row)} modules, expected {size}"
            )
    return size


def quiet_zone_offset(draw_quiet_zones: bool) -> int:
    return 0 if draw_quiet_zones else QUIET_ZONE_MODULES


def crop_matrix(matrix: Sequence[Sequence[bool]], offset: int) -> Matrix:
    """Return ``matrix`` with ``offset`` modules removed from every edge.

    The result is a fresh tuple of tuples so later passes never observe
    changes the caller makes to its own matrix.
    """

    size = matrix_size(matrix)
    drawable = size - offset * 2
    if drawable <= 0:
        raise InvalidArgumentError(
            f"a {size}x{size} matrix has no drawable modules after cropping {offset} per side"
        )
    return tuple(
        tuple(bool(value) for value in matrix[y][offset:offset + drawable])
        for y in range(offset, offset + drawable)
    )

