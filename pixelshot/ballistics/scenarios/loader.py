# ballistics/scenarios/loader.py
"""Scenario files: named, pre-built grids loaded wholesale into the editor.

File layout:

    {"scenarios": [
        {"id": "corridor", "name": "Corridor", "description": "...",
         "entities": {"players": [{"x": 0, "y": 0}], "enemies": [...],
                      "obstacles": [...], "walls": [...]}}
    ]}

Coordinates are not range-checked here; that happens when the snapshot is
applied to a grid of a given size.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from ballistics import settings
from ballistics.world.grid import GridSnapshot, snapshot_of

logger = logging.getLogger(__name__)


class ScenarioError(Exception):
    pass


class Point(BaseModel):
    x: int
    y: int

    def as_cell(self) -> tuple[int, int]:
        return (self.x, self.y)


class Entities(BaseModel):
    players: list[Point] = Field(default_factory=list)
    enemies: list[Point] = Field(default_factory=list)
    obstacles: list[Point] = Field(default_factory=list)
    walls: list[Point] = Field(default_factory=list)


class Scenario(BaseModel):
    id: str
    name: str
    description: str = ""
    entities: Entities = Field(default_factory=Entities)

    def to_snapshot(self, size: int = settings.GRID_SIZE) -> GridSnapshot:
        e = self.entities
        return snapshot_of(
            size,
            players=(p.as_cell() for p in e.players),
            enemies=(p.as_cell() for p in e.enemies),
            obstacles=(p.as_cell() for p in e.obstacles),
            walls=(p.as_cell() for p in e.walls),
        )


class ScenarioFile(BaseModel):
    scenarios: list[Scenario] = Field(default_factory=list)


def parse_scenarios(text: str) -> list[Scenario]:
    try:
        return ScenarioFile.model_validate_json(text).scenarios
    except ValidationError as e:
        raise ScenarioError(f"invalid scenario data: {e}") from e


def load_scenarios(path: Optional[Path] = None) -> list[Scenario]:
    path = path or settings.SCENARIOS_PATH
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"cannot read scenarios from {path}: {e}") from e
    scenarios = parse_scenarios(text)
    logger.info("loaded %d scenarios from %s", len(scenarios), path)
    return scenarios


def find_scenario(scenarios: list[Scenario], scenario_id: str) -> Optional[Scenario]:
    return next((s for s in scenarios if s.id == scenario_id), None)
