"""Shared test fixtures."""

from __future__ import annotations

import random
from typing import List, Set, Tuple

import pytest


LOGO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10" fill="#FF6B6B"/>
</svg>'''

XLINK_LOGO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">
  <defs><rect id="dot" width="2" height="2"/></defs>
  <use xlink:href="#dot" x="4" y="4"/>
</svg>'''

CHECKERBOARD = [
    [True, False],
    [False, True],
]


def filled(size: int) -> List[List[bool]]:
    return [[True] * size for _ in range(size)]


def random_matrix(size: int, seed: int = 7) -> List[List[bool]]:
    rng = random.Random(seed)
    return [[rng.random() < 0.5 for _ in range(size)] for _ in range(size)]


def dark_modules(matrix: List[List[bool]]) -> Set[Tuple[int, int]]:
    return {(x, y) for y, row in enumerate(matrix) for x, value in enumerate(row) if value}


def with_quiet_zone(matrix: List[List[bool]], border: int = 4) -> List[List[bool]]:
    size = len(matrix) + border * 2
    padded = [[False] * size for _ in range(size)]
    for y, row in enumerate(matrix):
        for x, value in enumerate(row):
            padded[y + border][x + border] = value
    return padded


@pytest.fixture
def logo_svg() -> str:
    return LOGO_SVG


@pytest.fixture
def symbol_matrix() -> List[List[bool]]:
    """A 17x17 matrix: 9x9 of random modules inside a 4-module quiet zone."""
    return with_quiet_zone(random_matrix(9, seed=11))
