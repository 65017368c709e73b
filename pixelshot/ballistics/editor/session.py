# ballistics/editor/session.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

from ballistics.editor.history import History
from ballistics.scenarios.loader import Scenario
from ballistics.tactics.defense import recommend_defenses
from ballistics.tactics.offense import OffenseCandidate, recommend_offenses
from ballistics.tactics.threat import ThreatAssessment, describe, evaluate_threats
from ballistics.world.grid import Category, Cell, Grid, GridError, GridSnapshot

Tool = Literal["player", "enemy", "obstacle", "wall"]
Mode = Literal["defend", "attack"]

TOOLS: tuple[Tool, ...] = ("player", "enemy", "obstacle", "wall")

logger = logging.getLogger(__name__)


@dataclass
class EditSession:
    """
    Input-side state of the calculator:
    - current tool and defend/attack mode
    - click-to-toggle editing (remove occupant, else place), always undoable
    - last calculation (threat lines + recommendations) and the status line
    """
    grid: Grid = field(default_factory=Grid)
    history: History = field(default_factory=History)
    tool: Optional[Tool] = None
    mode: Mode = "defend"

    status: str = "Select a tool, then click the grid"
    safe: Optional[bool] = None

    # last calculation; cleared on every edit
    show_calculation: bool = False
    assessment: Optional[ThreatAssessment] = None
    defenses: list[Cell] = field(default_factory=list)
    offenses: list[OffenseCandidate] = field(default_factory=list)

    # ---- tools / mode ----
    def select_tool(self, tool: Tool) -> None:
        if tool not in TOOLS:
            raise ValueError(f"unknown tool {tool!r}")
        self.tool = tool
        self._set_status(f"Selected: {tool}")
        self._invalidate()

    def toggle_mode(self) -> Mode:
        self.mode = "attack" if self.mode == "defend" else "defend"
        self._set_status(f"Mode: {self.mode}")
        self._invalidate()
        return self.mode

    # ---- edits ----
    def click(self, cell: Cell) -> bool:
        """Toggle the clicked cell. Returns True if the grid changed."""
        if self.tool is None:
            self._set_status("Pick something to place first")
            return False
        if not self.grid.in_bounds(cell):
            return False

        before = self.grid.snapshot()
        if self.grid.occupied(cell):
            removed = self.grid.remove(cell)
            self._set_status(f"Removed {removed.value} at {cell}")
        else:
            self.grid.place(Category(self.tool), cell)
            self._set_status(f"Placed {self.tool} at {cell}")
        logger.info(self.status)
        self.history.record(before)
        self._invalidate()
        return True

    def clear(self) -> None:
        before = self.grid.snapshot()
        self.grid.clear()
        self.history.record(before)
        self._invalidate()
        self._set_status("Cleared everything")
        logger.info("grid cleared")

    def load_scenario(self, scenario: Scenario) -> bool:
        before = self.grid.snapshot()
        try:
            self.grid.replace(scenario.to_snapshot(self.grid.size))
        except GridError as e:
            logger.warning("scenario %r rejected: %s", scenario.id, e)
            self._set_status(f"Cannot load {scenario.name}: {e}", safe=False)
            return False
        self.history.record(before)
        self._invalidate()
        self._set_status(f"Loaded scenario: {scenario.name} - {scenario.description}")
        logger.info("loaded scenario %r", scenario.id)
        return True

    def undo(self) -> bool:
        return self._restore(self.history.undo(self.grid.snapshot()), "Undo")

    def redo(self) -> bool:
        return self._restore(self.history.redo(self.grid.snapshot()), "Redo")

    def _restore(self, snapshot: Optional[GridSnapshot], label: str) -> bool:
        if snapshot is None:
            self._set_status(f"Nothing to {label.lower()}")
            return False
        try:
            self.grid.replace(snapshot)
        except GridError as e:
            logger.warning("%s rejected: %s", label.lower(), e)
            self._set_status(f"Cannot {label.lower()}: {e}", safe=False)
            return False
        self._invalidate()
        self._set_status(label)
        return True

    # ---- calculation ----
    def calculate(self) -> ThreatAssessment:
        assessment = evaluate_threats(self.grid)
        self.assessment = assessment
        self.show_calculation = True
        if not assessment.ok:
            self.defenses, self.offenses = [], []
            self._set_status(describe(assessment), safe=False)
            return assessment

        self.defenses = recommend_defenses(self.grid, assessment.reports)
        self.offenses = recommend_offenses(self.grid) if self.mode == "attack" else []
        text = describe(assessment)
        if self.mode == "attack":
            text += f" | {len(self.offenses)} attack position{'s' if len(self.offenses) != 1 else ''}"
        self._set_status(text, safe=assessment.all_blocked)
        return assessment

    # ---- helpers ----
    def _invalidate(self) -> None:
        self.show_calculation = False
        self.assessment = None
        self.defenses = []
        self.offenses = []

    def _set_status(self, text: str, safe: Optional[bool] = None) -> None:
        self.status = text
        self.safe = safe
