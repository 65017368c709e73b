# ballistics/world/grid.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from ballistics import settings

Cell = tuple[int, int]

logger = logging.getLogger(__name__)


class Category(Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    OBSTACLE = "obstacle"
    WALL = "wall"


class GridError(ValueError):
    """Base class for rejected grid edits."""


class OutOfBounds(GridError):
    def __init__(self, cell: Cell, size: int) -> None:
        super().__init__(f"cell {cell} is outside the {size}x{size} grid")
        self.cell = cell
        self.size = size


class AlreadyOccupied(GridError):
    def __init__(self, cell: Cell, occupant: Category) -> None:
        super().__init__(f"cell {cell} is already occupied by {occupant.value}")
        self.cell = cell
        self.occupant = occupant


class InvalidSnapshot(GridError):
    pass


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    """Immutable copy of a grid's occupancy, one frozenset per category."""
    size: int = settings.GRID_SIZE
    players: frozenset[Cell] = frozenset()
    enemies: frozenset[Cell] = frozenset()
    obstacles: frozenset[Cell] = frozenset()
    walls: frozenset[Cell] = frozenset()

    def cells(self, category: Category) -> frozenset[Cell]:
        return getattr(self, _FIELDS[category])


_FIELDS: dict[Category, str] = {
    Category.PLAYER: "players",
    Category.ENEMY: "enemies",
    Category.OBSTACLE: "obstacles",
    Category.WALL: "walls",
}


@dataclass(slots=True)
class Grid:
    size: int = settings.GRID_SIZE
    players: set[Cell] = field(default_factory=set)
    enemies: set[Cell] = field(default_factory=set)
    obstacles: set[Cell] = field(default_factory=set)
    walls: set[Cell] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise GridError(f"grid size must be positive, got {self.size}")

    # --- queries ---
    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def require_in_bounds(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.size)

    def cells(self, category: Category) -> set[Cell]:
        return getattr(self, _FIELDS[category])

    def category_at(self, cell: Cell) -> Optional[Category]:
        for category in Category:
            if cell in self.cells(category):
                return category
        return None

    def occupied(self, cell: Cell) -> bool:
        self.require_in_bounds(cell)
        return self.category_at(cell) is not None

    def is_blocking(self, cell: Cell) -> bool:
        self.require_in_bounds(cell)
        return cell in self.obstacles or cell in self.walls

    @property
    def player(self) -> Optional[Cell]:
        return next(iter(self.players), None)

    # --- edits ---
    def place(self, category: Category, cell: Cell) -> None:
        self.require_in_bounds(cell)
        occupant = self.category_at(cell)
        if occupant is not None:
            raise AlreadyOccupied(cell, occupant)
        if category is Category.PLAYER:
            self.players.clear()  # only one player
        self.cells(category).add(cell)
        logger.debug("placed %s at %s", category.value, cell)

    def remove(self, cell: Cell) -> Optional[Category]:
        self.require_in_bounds(cell)
        occupant = self.category_at(cell)
        if occupant is not None:
            self.cells(occupant).discard(cell)
            logger.debug("removed %s at %s", occupant.value, cell)
        return occupant

    def clear(self) -> None:
        for category in Category:
            self.cells(category).clear()

    # --- snapshots ---
    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            size=self.size,
            players=frozenset(self.players),
            enemies=frozenset(self.enemies),
            obstacles=frozenset(self.obstacles),
            walls=frozenset(self.walls),
        )

    def replace(self, snapshot: GridSnapshot) -> None:
        """Swap in the snapshot's contents wholesale. The grid is untouched if it is inconsistent."""
        validate_snapshot(snapshot)
        self.size = snapshot.size
        for category in Category:
            cells = self.cells(category)
            cells.clear()
            cells.update(snapshot.cells(category))


def validate_snapshot(snapshot: GridSnapshot) -> None:
    if snapshot.size <= 0:
        raise InvalidSnapshot(f"grid size must be positive, got {snapshot.size}")
    if len(snapshot.players) > 1:
        raise InvalidSnapshot(f"at most one player allowed, got {len(snapshot.players)}")
    seen: dict[Cell, Category] = {}
    for category in Category:
        for cell in snapshot.cells(category):
            x, y = cell
            if not (0 <= x < snapshot.size and 0 <= y < snapshot.size):
                raise InvalidSnapshot(f"{category.value} at {cell} is outside the {snapshot.size}x{snapshot.size} grid")
            if cell in seen:
                raise InvalidSnapshot(f"cell {cell} holds both {seen[cell].value} and {category.value}")
            seen[cell] = category


def snapshot_of(size: int, **categories: Iterable[Cell]) -> GridSnapshot:
    """Build a snapshot from plain iterables, e.g. snapshot_of(5, players=[(0, 0)], walls=[(2, 0)])."""
    return GridSnapshot(size=size, **{name: frozenset(map(tuple, cells)) for name, cells in categories.items()})
