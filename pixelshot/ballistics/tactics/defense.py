# ballistics/tactics/defense.py
from __future__ import annotations
import logging
from typing import Iterable

from ballistics.tactics.threat import ThreatReport
from ballistics.world.grid import Cell, Grid

logger = logging.getLogger(__name__)

def recommend_defenses(grid: Grid, reports: Iterable[ThreatReport]) -> list[Cell]:
    """Free interior cells of every open enemy line, deduplicated in first-seen order."""
    seen: dict[Cell, None] = {}
    for report in reports:
        if report.blocked:
            continue
        for cell in report.path[1:-1]:  # endpoints are the enemy and the player
            if cell not in seen and not grid.occupied(cell):
                seen[cell] = None
    logger.debug("%d defensive cells", len(seen))
    return list(seen)
