"""Axis-aligned grid rectangles and the terrain levels built from them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from algodrills.coords import Coord

_DIVIDE_THRESHOLD = 3

Level = Tuple[int, List[Coord]]


@dataclass(frozen=True)
class Rectangle:
    """A rectangle spanning top_left to bottom_right, both corners inclusive."""

    top_left: Coord
    bottom_right: Coord

    def __post_init__(self) -> None:
        c1, c2 = self.top_left, self.bottom_right
        if c1.x > c2.x or c1.y > c2.y:
            raise ValueError("Not a valid rect with these coords")

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def divide(self, slices: int) -> List[Rectangle]:
        """Cut the rectangle along its longer side into `slices` pieces with gaps."""
        if self.width < _DIVIDE_THRESHOLD and self.height < _DIVIDE_THRESHOLD:
            return [self]
        if slices <= 0:
            raise ValueError("Number of slices must be a positive integer")

        tl, br = self.top_left, self.bottom_right
        pieces = []
        if self.width >= self.height:
            step = self.width // slices
            for i in range(slices):
                start = Coord(tl.x + i * step, tl.y)
                end = br if i == slices - 1 else Coord(tl.x + (i + 1) * step - 2, br.y)
                pieces.append(Rectangle(start, end))
        else:
            step = self.height // slices
            for i in range(slices):
                start = Coord(tl.x, tl.y + i * step)
                end = br if i == slices - 1 else Coord(br.x, tl.y + (i + 1) * step - 2)
                pieces.append(Rectangle(start, end))
        return pieces

    def get_coords(self) -> List[Coord]:
        """Border cells: top and bottom rows, left and right columns, then the corner."""
        tl, br = self.top_left, self.bottom_right
        coords = [Coord(x, y) for y in (tl.y, br.y) for x in range(tl.x, br.x + 1)]
        coords += [Coord(x, y) for x in (tl.x, br.x) for y in range(tl.y, br.y + 1)]
        coords.append(Coord(br.x, br.y))
        return coords

    def get_all_coords(self) -> List[Coord]:
        """Every cell of the rectangle, column by column."""
        tl, br = self.top_left, self.bottom_right
        return [
            Coord(x, y)
            for x in range(tl.x, br.x + 1)
            for y in range(tl.y, br.y + 1)
        ]

    def shrunk(self) -> Rectangle:
        """The rectangle one cell smaller on every side."""
        tl, br = self.top_left, self.bottom_right
        return Rectangle(Coord(tl.x + 1, tl.y + 1), Coord(br.x - 1, br.y - 1))

    def __str__(self) -> str:
        tl, br = self.top_left, self.bottom_right
        return f"{tl.x},{tl.y} ({br.x},{br.y})"


def betweens(rects: Sequence[Rectangle]) -> List[Coord]:
    """Cells in the one-cell gaps that follow each rectangle but the last."""
    if len(rects) < 2:
        return []
    first = rects[0]
    if all(r.top_left.y == first.top_left.y for r in rects):
        ys = range(first.top_left.y, first.bottom_right.y + 1)
        return [Coord(r.bottom_right.x + 1, y) for r in rects[:-1] for y in ys]
    xs = range(first.top_left.x, first.bottom_right.x + 1)
    return [Coord(x, r.bottom_right.y + 1) for r in rects[:-1] for x in xs]


def _next_level(z: int) -> int:
    return z - 1 if z < 0 else z + 1


def _build_levels(
    levels: List[Level], rect: Rectangle, z: int, max_levels: int, rng: random.Random
) -> None:
    if rect.width < 0 or rect.height < 0 or abs(z) > max_levels:
        return
    try:
        if abs(z) == 1 and rect.height > 2 and rect.width > 2:
            peaks = rect.shrunk().divide(rng.randint(1, 4))
            for peak in peaks:
                _build_levels(levels, peak, _next_level(z), max_levels, rng)
            if peaks:
                levels.append((z, rect.get_coords() + betweens(peaks)))
                return

        cont = abs(z) < max_levels and rect.width > 1 and rect.height > 1
        levels.append((z, rect.get_coords() if cont else rect.get_all_coords()))
        if cont:
            _build_levels(levels, rect.shrunk(), _next_level(z), max_levels, rng)
    except ValueError:
        return


def hilo_levels(
    rect: Rectangle, z: int, max_levels: int, rng: random.Random | None = None
) -> List[Level]:
    """Nest ever higher (or deeper) contour rings inside `rect`.

    Returns (height, cells) pairs; inner levels come before the ring that
    encloses them when a level splits into several peaks.
    """
    levels: List[Level] = []
    _build_levels(levels, rect, z, max_levels, rng if rng is not None else random.Random())
    return levels


def get_rects(
    count: int, x1: int, y1: int, x2: int, y2: int, rng: random.Random | None = None
) -> List[Rectangle]:
    """Lay out `count` rectangles on a grid inside the area (x1, y1)-(x2, y2)."""
    if count < 1:
        raise ValueError("Number of rectangles must be a positive integer")
    generator = rng if rng is not None else random.Random()
    w, h = x2 - x1, y2 - y1
    s = math.sqrt(count)
    n = math.ceil(s) if generator.randint(0, 1) else math.floor(s)
    m = math.floor(s) if n == math.ceil(s) else math.ceil(s)
    while n * m < count:
        if generator.randint(0, 1):
            n += 1
        else:
            m += 1

    w0, h0 = w // n, h // m
    rects = [
        Rectangle(
            Coord(x1 + w0 * col + 1, y1 + h0 * row + 1),
            Coord(x1 + w0 * (col + 1) - 1, y1 + h0 * (row + 1) - 1),
        )
        for row in range(m)
        for col in range(n)
    ]
    if n * m == count:
        return rects

    keep = [True] * count + [False] * (n * m - count)
    generator.shuffle(keep)
    return [rect for rect, kept in zip(rects, keep) if kept]