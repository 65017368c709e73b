# ballistics/tactics/threat.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

from ballistics.world.grid import Cell, Grid
from ballistics.world.trace import TraceResult, trace

Status = Literal["ok", "missing_player", "no_enemies"]

logger = logging.getLogger(__name__)

@dataclass(frozen=True, slots=True)
class ThreatReport:
    enemy: Cell
    player: Cell
    result: TraceResult

    @property
    def blocked(self) -> bool:
        return self.result.blocked

    @property
    def path(self) -> tuple[Cell, ...]:
        return self.result.path

    @property
    def blocker(self) -> Optional[Cell]:
        return self.result.blocker


@dataclass(slots=True)
class ThreatAssessment:
    status: Status
    reports: list[ThreatReport] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def all_blocked(self) -> bool:
        return self.ok and all(r.blocked for r in self.reports)

    @property
    def open_lines(self) -> list[ThreatReport]:
        return [r for r in self.reports if not r.blocked]


def evaluate_threats(grid: Grid) -> ThreatAssessment:
    """Trace every enemy's line of fire to the player (enemy is always the source)."""
    player = grid.player
    if player is None:
        return ThreatAssessment("missing_player")
    if not grid.enemies:
        return ThreatAssessment("no_enemies")

    reports = [ThreatReport(enemy, player, trace(grid, enemy, player)) for enemy in sorted(grid.enemies)]
    assessment = ThreatAssessment("ok", reports)
    logger.debug(
        "threats vs %s: %d enemies, %d open lines",
        player, len(reports), len(assessment.open_lines),
    )
    return assessment


def describe(assessment: ThreatAssessment) -> str:
    if assessment.status == "missing_player":
        return "Place the player first!"
    if assessment.status == "no_enemies":
        return "Place at least one enemy!"
    if assessment.all_blocked:
        return "All lines of fire are blocked - you are safe!"
    n = len(assessment.open_lines)
    return f"{n} line{'s' if n != 1 else ''} of fire open - place obstacles!"
