# ballistics/view/board.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ballistics import settings
from ballistics.world.grid import Cell

@dataclass(slots=True)
class Board:
    """A square of `size` x `size` cells drawn inside a `pixels` wide square at (left, top)."""
    size: int = settings.GRID_SIZE
    pixels: int = settings.WINDOW_SIZE
    left: int = 0
    top: int = 0

    @property
    def cell_size(self) -> float:
        return self.pixels / self.size

    # --- math ---
    def to_px(self, cell: Cell) -> tuple[int, int]:
        x, y = cell
        cs = self.cell_size
        return self.left + int(x * cs), self.top + int(y * cs)

    def center_px(self, cell: Cell) -> tuple[int, int]:
        x, y = cell
        cs = self.cell_size
        return self.left + int(x * cs + cs / 2), self.top + int(y * cs + cs / 2)

    def from_px(self, px: float, py: float) -> Optional[Cell]:
        cs = self.cell_size
        x = int((px - self.left) // cs)
        y = int((py - self.top) // cs)
        if 0 <= x < self.size and 0 <= y < self.size:
            return (x, y)
        return None

    def cell_rect(self, cell: Cell, inset: int = 0) -> tuple[int, int, int, int]:
        """(left, top, width, height) of a cell in pixels, shrunk by `inset` on every side."""
        x0, y0 = self.to_px(cell)
        x1, y1 = self.to_px((cell[0] + 1, cell[1] + 1))
        return x0 + inset, y0 + inset, (x1 - x0) - 2 * inset, (y1 - y0) - 2 * inset
