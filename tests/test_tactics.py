"""Tests for threat evaluation and the defensive/offensive recommendations."""

from ballistics.tactics.defense import recommend_defenses
from ballistics.tactics.offense import enemies_hit, recommend_offenses
from ballistics.tactics.threat import describe, evaluate_threats
from ballistics.world.grid import Grid, snapshot_of
from ballistics.world.trace import trace


def make_grid(size=5, **cells):
    grid = Grid(size=size)
    grid.replace(snapshot_of(size, **cells))
    return grid


# ---- threats ----

def test_open_line_is_reported():
    grid = make_grid(players=[(0, 0)], enemies=[(4, 0)])

    a = evaluate_threats(grid)

    assert a.status == "ok"
    assert len(a.reports) == 1
    report = a.reports[0]
    assert report.enemy == (4, 0)
    assert report.player == (0, 0)
    assert not report.blocked
    assert report.path == ((4, 0), (3, 0), (2, 0), (1, 0), (0, 0))
    assert not a.all_blocked
    assert a.open_lines == [report]


def test_wall_blocks_enemy_line():
    grid = make_grid(players=[(0, 0)], enemies=[(4, 0)], walls=[(2, 0)])

    a = evaluate_threats(grid)

    assert a.reports[0].blocked
    # traced from the enemy, so the blocker is on the enemy's side of the wall
    assert a.reports[0].blocker == (3, 0)
    assert a.all_blocked
    assert a.open_lines == []


def test_lines_are_traced_from_the_enemy():
    # (2, 1) -> (0, 0) steps through (1, 0); the reverse line goes through (1, 1)
    grid = make_grid(players=[(0, 0)], enemies=[(2, 1)], walls=[(1, 0)])

    a = evaluate_threats(grid)

    assert a.all_blocked
    assert a.reports[0].blocker == (2, 1)
    assert not trace(grid, (0, 0), (2, 1)).blocked


def test_all_blocked_needs_every_enemy_blocked():
    grid = make_grid(players=[(2, 2)], enemies=[(0, 2), (4, 2)], walls=[(1, 2)])

    a = evaluate_threats(grid)

    assert [r.enemy for r in a.reports] == [(0, 2), (4, 2)]
    assert [r.blocked for r in a.reports] == [True, False]
    assert not a.all_blocked


def test_missing_player_is_a_status():
    a = evaluate_threats(make_grid(enemies=[(1, 1)]))

    assert a.status == "missing_player"
    assert a.reports == []
    assert not a.all_blocked
    assert describe(a) == "Place the player first!"


def test_no_enemies_is_a_status():
    a = evaluate_threats(make_grid(players=[(1, 1)]))

    assert a.status == "no_enemies"
    assert not a.all_blocked
    assert describe(a) == "Place at least one enemy!"


def test_describe_counts_open_lines():
    safe = evaluate_threats(make_grid(players=[(0, 0)], enemies=[(4, 0)], walls=[(2, 0)]))
    one = evaluate_threats(make_grid(players=[(0, 0)], enemies=[(4, 0)]))
    two = evaluate_threats(make_grid(players=[(0, 0)], enemies=[(4, 0), (0, 4)]))

    assert "safe" in describe(safe)
    assert describe(one).startswith("1 line of fire open")
    assert describe(two).startswith("2 lines of fire open")


# ---- defenses ----

def test_defenses_are_interior_of_open_line():
    grid = make_grid(players=[(0, 0)], enemies=[(0, 4)])

    cells = recommend_defenses(grid, evaluate_threats(grid).reports)

    assert cells == [(0, 3), (0, 2), (0, 1)]


def test_defenses_skip_blocked_lines():
    grid = make_grid(players=[(0, 0)], enemies=[(0, 4)], walls=[(0, 2)])

    assert recommend_defenses(grid, evaluate_threats(grid).reports) == []


def test_defenses_dedupe_and_skip_occupied_cells():
    grid = make_grid(players=[(0, 0)], enemies=[(0, 3), (0, 4)])

    cells = recommend_defenses(grid, evaluate_threats(grid).reports)

    # (0, 3) lies on the far enemy's line but holds the near enemy
    assert cells == [(0, 2), (0, 1)]


def test_defenses_never_include_endpoints():
    grid = make_grid(7, players=[(3, 3)], enemies=[(0, 0), (6, 1), (1, 6)])
    reports = evaluate_threats(grid).reports

    cells = recommend_defenses(grid, reports)

    assert cells
    for cell in cells:
        assert not grid.occupied(cell)
        assert any(cell in r.path[1:-1] for r in reports if not r.blocked)


# ---- offenses ----

def test_offense_needs_player_and_enemy():
    assert recommend_offenses(make_grid(players=[(0, 0)])) == []
    assert recommend_offenses(make_grid(enemies=[(0, 0)])) == []


def test_exposed_player_gets_no_attack_positions():
    grid = make_grid(players=[(0, 0)], enemies=[(2, 1)])

    assert recommend_offenses(grid) == []


def test_attack_position_through_enemy():
    grid = make_grid(players=[(0, 0)], enemies=[(2, 1)], walls=[(1, 0)])

    result = recommend_offenses(grid)

    cells = {c.cell: c.hit_count for c in result}
    assert cells[(4, 2)] == 1
    assert (2, 1) not in cells
    assert (4, 0) not in cells


def test_hit_count_counts_every_enemy_on_the_line():
    grid = make_grid(8, players=[(0, 0)], enemies=[(2, 1), (4, 2)], walls=[(1, 0)])

    result = {c.cell: c for c in recommend_offenses(grid)}

    assert result[(6, 3)].hits == ((2, 1), (4, 2))
    assert result[(6, 3)].hit_count == 2


def test_corner_enemy_behind_diagonal_wall_has_no_attack_positions():
    grid = make_grid(players=[(0, 0)], enemies=[(4, 4)], walls=[(2, 2)])

    assert evaluate_threats(grid).all_blocked
    assert enemies_hit(grid, (0, 0), (4, 0)) == ()
    assert recommend_offenses(grid) == []


def test_attack_positions_are_free_and_scanned_row_by_row():
    grid = make_grid(8, players=[(0, 0)], enemies=[(2, 1), (4, 2)], walls=[(1, 0)])

    cells = [c.cell for c in recommend_offenses(grid)]

    assert cells == sorted(cells, key=lambda c: (c[1], c[0]))
    assert all(not grid.occupied(c) for c in cells)


def test_attack_positions_hold_up_when_retraced():
    grid = make_grid(
        10,
        players=[(0, 0)],
        enemies=[(2, 1), (4, 2), (9, 2)],
        walls=[(1, 0), (8, 1)],
    )
    player = grid.player
    assert evaluate_threats(grid).all_blocked

    result = recommend_offenses(grid)

    assert result
    for cand in result:
        shot = trace(grid, player, cand.cell)
        on_path = [c for c in shot.path[1:] if c in grid.enemies]
        assert len(on_path) == cand.hit_count
        assert all(trace(grid, e, player).blocked for e in grid.enemies)
