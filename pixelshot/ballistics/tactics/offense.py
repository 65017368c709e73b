# ballistics/tactics/offense.py
"""Attack positions: cells a shot from the player would pass through an enemy on the way to.

A cell only counts while the player is itself covered, i.e. every enemy's
line to the player's *current* cell is blocked. Those enemy lines do not
depend on the candidate, so they are traced once per call.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from ballistics.world.grid import Cell, Grid
from ballistics.world.trace import trace

logger = logging.getLogger(__name__)

@dataclass(frozen=True, slots=True)
class OffenseCandidate:
    cell: Cell
    hits: tuple[Cell, ...]

    @property
    def hit_count(self) -> int:
        return len(self.hits)


def player_covered(grid: Grid, player: Cell) -> bool:
    return all(trace(grid, enemy, player).blocked for enemy in grid.enemies)


def enemies_hit(grid: Grid, player: Cell, target: Cell) -> tuple[Cell, ...]:
    """Enemies on the player -> target path, in path order (the player's own cell never counts)."""
    shot = trace(grid, player, target)
    return tuple(c for c in shot.path[1:] if c in grid.enemies)


def recommend_offenses(grid: Grid) -> list[OffenseCandidate]:
    player = grid.player
    if player is None or not grid.enemies:
        return []
    if not player_covered(grid, player):
        logger.debug("player at %s is exposed; no attack positions", player)
        return []

    out: list[OffenseCandidate] = []
    for y in range(grid.size):
        for x in range(grid.size):
            cell = (x, y)
            if grid.occupied(cell):
                continue
            hits = enemies_hit(grid, player, cell)
            if hits:
                out.append(OffenseCandidate(cell, hits))
    logger.debug("%d attack positions from %s", len(out), player)
    return out
