# ballistics/world/trace.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

from ballistics.world.grid import Cell, Grid

def ballistic_line(source: Cell, dest: Cell, size: int) -> Iterator[Cell]:
    """Cells from source toward dest (inclusive), stopping early if the line leaves the grid.

    Integer Bresenham with an error accumulator seeded at half the major delta.
    X is the major axis only when |dx| > |dy|; diagonals step along Y.
    """
    x, y = source
    x1, y1 = dest
    dx = x1 - x
    dy = y1 - y
    sx = 1 if dx > 0 else -1
    sy = 1 if dy > 0 else -1
    dx = abs(dx)
    dy = abs(dy)

    x_major = dx > dy
    if x_major:
        d_major, d_minor = dx, dy
    else:
        d_major, d_minor = dy, dx

    err = d_major // 2
    while 0 <= x < size and 0 <= y < size:
        yield (x, y)
        if x == x1 and y == y1:
            return
        err += d_minor
        if x_major:
            x += sx
            if err >= d_major:
                err -= d_major
                y += sy
        else:
            y += sy
            if err >= d_major:
                err -= d_major
                x += sx


@dataclass(frozen=True, slots=True)
class TraceResult:
    blocked: bool
    path: tuple[Cell, ...]
    blocker: Optional[Cell] = None

    def reached(self, dest: Cell) -> bool:
        return not self.blocked and self.path[-1] == dest


def trace(grid: Grid, source: Cell, dest: Cell) -> TraceResult:
    """Follow the line source -> dest until it reaches dest, hits a blocking cell, or leaves the grid.

    The source cell is never tested. A blocking cell is included as the last
    path element; the blocker is the cell just before it.
    """
    grid.require_in_bounds(source)
    path: list[Cell] = []
    previous: Optional[Cell] = None
    for cell in ballistic_line(source, dest, grid.size):
        if cell != source and grid.is_blocking(cell):
            path.append(cell)
            return TraceResult(True, tuple(path), previous if previous is not None else cell)
        path.append(cell)
        previous = cell
    return TraceResult(False, tuple(path))
