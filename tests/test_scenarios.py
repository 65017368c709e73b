"""Tests for scenario file parsing and the bundled scenarios."""

from pathlib import Path

import pytest

from ballistics import settings
from ballistics.scenarios.loader import (
    ScenarioError,
    find_scenario,
    load_scenarios,
    parse_scenarios,
)
from ballistics.world.grid import Grid


def test_bundled_scenarios_fit_a_twenty_cell_grid():
    scenarios = load_scenarios(settings.SCENARIOS_PATH)

    assert scenarios
    for s in scenarios:
        grid = Grid(size=20)
        grid.replace(s.to_snapshot(20))
        assert grid.player is not None
        assert grid.enemies


def test_corridor_scenario_is_safe_behind_wall():
    from ballistics.tactics.threat import evaluate_threats

    corridor = find_scenario(load_scenarios(), "corridor")
    grid = Grid(size=20)
    grid.replace(corridor.to_snapshot(20))

    assert evaluate_threats(grid).all_blocked


def test_parse_minimal_scenario():
    text = '{"scenarios": [{"id": "a", "name": "A", "entities": {"walls": [{"x": 1, "y": 2}]}}]}'

    (s,) = parse_scenarios(text)
    snap = s.to_snapshot(5)

    assert s.description == ""
    assert snap.walls == frozenset({(1, 2)})
    assert snap.players == frozenset()
    assert snap.size == 5


def test_find_scenario_missing_returns_none():
    assert find_scenario(parse_scenarios('{"scenarios": []}'), "nope") is None


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"scenarios": [{"name": "no id"}]}',
        '{"scenarios": [{"id": "a", "name": "A", "entities": {"walls": [{"x": "left"}]}}]}',
    ],
)
def test_malformed_scenarios_raise(text):
    with pytest.raises(ScenarioError):
        parse_scenarios(text)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ScenarioError):
        load_scenarios(tmp_path / "missing.json")


def test_load_from_custom_path(tmp_path: Path):
    path = tmp_path / "custom.json"
    path.write_text('{"scenarios": [{"id": "x", "name": "X"}]}', encoding="utf-8")

    assert [s.id for s in load_scenarios(path)] == ["x"]
