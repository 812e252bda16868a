"""Grid coordinates and the sentinel values used with them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator

NO_VALUE = -(2**31)

NO_BITE = -1
NO_CONTOUR = -2
NO_CONNECTION = -3
NO_CONTOUR_HEIGHT = 0
MAX_CONTOUR_HEIGHT = 9
NO_NAME = "!NO_NAME!"
NO_COST = 0.0

DEF_MAZE_WIDTH = 100
DEF_MAZE_HEIGHT = 100

DEFAULT_MAX_HEIGHT = 100
DEFAULT_MIN_HEIGHT = 1
ROOT_BIAS_MULTIPLIER = 0.05
LEAF_BIAS_MULTIPLIER = 0.5


@total_ordering
@dataclass(frozen=True)
class Coord:
    """An (x, y) grid position, ordered by row first and then by column."""

    x: int = NO_VALUE
    y: int = NO_VALUE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


NO_COORD = Coord(NO_VALUE, NO_VALUE)
DEFAULT_MIN_COORD = Coord(1, 1)
DEFAULT_MAX_COORD = Coord(10000, 10000)


def random_in_range(start: int, end: int, rng: random.Random | None = None) -> int:
    """Return a uniformly chosen integer in the closed range [start, end]."""
    if end < start:
        raise ValueError(f"empty range {start}..{end}")
    generator = rng if rng is not None else random.Random()
    return start + generator.randint(0, end - start)