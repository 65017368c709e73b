# ballistics/scenes/calculator.py
from __future__ import annotations
import math
import pygame
from dataclasses import dataclass, field

from ballistics import settings
from ballistics.editor.session import TOOLS, EditSession
from ballistics.scenarios.loader import Scenario
from ballistics.view.board import Board


@dataclass
class CalculatorScene:
    """
    Ballistics calculator window:
    - 1..4 pick player / enemy / obstacle / wall, LMB toggles the cell
    - C or Enter calculates, A toggles attack mode
    - X clears, Ctrl+Z / Ctrl+Y undo / redo, [ and ] cycle scenarios
    """
    screen: pygame.Surface
    session: EditSession = field(default_factory=EditSession)
    scenarios: list[Scenario] = field(default_factory=list)
    board: Board = field(init=False)
    _scenario_index: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        sw, sh = self.screen.get_size()
        self.board = Board(self.session.grid.size, max(1, min(sw, sh - settings.HUD_HEIGHT)))
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self._label_font = pygame.font.Font(None, max(12, int(self.board.cell_size * 0.6)))

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cell = self.board.from_px(*event.pos)
            if cell is not None:
                self.session.click(cell)

    def _handle_key(self, event: pygame.event.Event) -> None:
        ctrl = bool(event.mod & pygame.KMOD_CTRL)
        key = event.key
        if key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif pygame.K_1 <= key <= pygame.K_4:
            self.session.select_tool(TOOLS[key - pygame.K_1])
        elif key in (pygame.K_c, pygame.K_RETURN):
            self.session.calculate()
        elif key == pygame.K_a:
            self.session.toggle_mode()
        elif key == pygame.K_x:
            self.session.clear()
        elif ctrl and key == pygame.K_z:
            self.session.undo()
        elif ctrl and key == pygame.K_y:
            self.session.redo()
        elif key == pygame.K_RIGHTBRACKET:
            self._cycle_scenario(+1)
        elif key == pygame.K_LEFTBRACKET:
            self._cycle_scenario(-1)

    def _cycle_scenario(self, step: int) -> None:
        if not self.scenarios:
            return
        self._scenario_index = (self._scenario_index + step) % len(self.scenarios)
        self.session.load_scenario(self.scenarios[self._scenario_index])

    # ---- Render ----
    def draw(self, surface: pygame.Surface, mouse_pos: tuple[int, int] | None = None) -> None:
        surface.fill(settings.BG_COLOR)
        self._draw_grid_lines(surface)

        if self.session.show_calculation:
            self._draw_recommendations(surface)
            self._draw_trajectories(surface)

        # tokens last so they sit on top of the overlays
        self._draw_tokens(surface)
        self._draw_highlight(surface, mouse_pos if mouse_pos is not None else pygame.mouse.get_pos())
        self._draw_hud(surface)

    def _draw_grid_lines(self, surface: pygame.Surface) -> None:
        n = self.board.size
        for i in range(n + 1):
            x, y = self.board.to_px((i, i))
            pygame.draw.line(surface, settings.GRID_COLOR, (x, self.board.top), (x, self.board.top + self.board.pixels), 1)
            pygame.draw.line(surface, settings.GRID_COLOR, (self.board.left, y), (self.board.left + self.board.pixels, y), 1)

    def _draw_highlight(self, surface: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        cell = self.board.from_px(*mouse_pos)
        if cell is None:
            return
        pygame.draw.rect(surface, settings.GRID_HILITE, pygame.Rect(self.board.cell_rect(cell)), width=2)

    def _draw_trajectories(self, surface: pygame.Surface) -> None:
        assessment = self.session.assessment
        if assessment is None:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for report in assessment.reports:
            start = self.board.center_px(report.enemy)
            end = self.board.center_px(report.player)
            if report.blocked:
                _dashed_line(overlay, settings.LOF_BLOCKED_RGBA, start, end, settings.LOF_WIDTH, settings.DASH_PX)
            else:
                pygame.draw.line(overlay, settings.LOF_OPEN_RGBA, start, end, width=settings.LOF_WIDTH)
        surface.blit(overlay, (0, 0))
        for report in assessment.reports:
            if report.blocker is not None:
                pygame.draw.circle(surface, settings.BLOCKER_RGB, self.board.center_px(report.blocker), 6)

    def _draw_recommendations(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        inset = settings.RECOMMEND_INSET
        for cell in self.session.defenses:
            rect = pygame.Rect(self.board.cell_rect(cell, inset))
            overlay.fill(settings.DEFENSE_RGBA, rect)
            pygame.draw.rect(overlay, settings.DEFENSE_BORDER_RGB, rect, width=2)
        for cand in self.session.offenses:
            rect = pygame.Rect(self.board.cell_rect(cand.cell, inset))
            overlay.fill(settings.OFFENSE_RGBA, rect)
            pygame.draw.rect(overlay, settings.OFFENSE_BORDER_RGB, rect, width=2)
        surface.blit(overlay, (0, 0))
        for cand in self.session.offenses:
            label = self._label_font.render(str(cand.hit_count), True, settings.OFFENSE_BORDER_RGB)
            surface.blit(label, label.get_rect(center=self.board.center_px(cand.cell)))

    def _draw_tokens(self, surface: pygame.Surface) -> None:
        grid = self.session.grid
        cs = self.board.cell_size

        for cell in grid.walls:
            pygame.draw.rect(surface, settings.WALL_COLOR, pygame.Rect(self.board.cell_rect(cell)))

        for cell in grid.obstacles:
            pygame.draw.circle(surface, settings.OBSTACLE_COLOR, self.board.center_px(cell), max(2, int(cs / 3)))

        half = cs / 2.5
        for cell in grid.enemies:
            cx, cy = self.board.center_px(cell)
            pts = [(cx, cy - half), (cx + half, cy + half), (cx - half, cy + half)]
            pygame.draw.polygon(surface, settings.ENEMY_COLOR, pts)

        for cell in grid.players:
            pygame.draw.rect(surface, settings.PLAYER_COLOR, pygame.Rect(self.board.cell_rect(cell, int(cs / 4))))

    # ---- HUD ----
    def _draw_hud(self, surface: pygame.Surface) -> None:
        s = self.session
        top = self.board.top + self.board.pixels
        sw, _ = surface.get_size()

        pieces = [f"Tool: {s.tool or '-'}", f"Mode: {s.mode}"]
        if self.scenarios and self._scenario_index >= 0:
            pieces.append(f"Scenario: {self.scenarios[self._scenario_index].name}")
        info = "  |  ".join(pieces)

        if s.safe is True:
            status_rgb = settings.HUD_SAFE_RGB
        elif s.safe is False:
            status_rgb = settings.HUD_DANGER_RGB
        else:
            status_rgb = settings.HUD_TEXT_RGB

        pill = pygame.Surface((sw, settings.HUD_HEIGHT), pygame.SRCALPHA)
        pill.fill(settings.HUD_BG_RGBA)
        pad = 8
        pill.blit(self._font.render(info, True, settings.HUD_TEXT_RGB), (pad, pad))
        pill.blit(self._font.render(s.status, True, status_rgb), (pad, pad + settings.HUD_FONT_SIZE))
        surface.blit(pill, (0, top))


def _dashed_line(
    surface: pygame.Surface,
    color: tuple[int, ...],
    start: tuple[int, int],
    end: tuple[int, int],
    width: int,
    dash: int,
) -> None:
    sx, sy = start
    ex, ey = end
    length = math.hypot(ex - sx, ey - sy)
    if length == 0:
        return
    ux, uy = (ex - sx) / length, (ey - sy) / length
    d = 0.0
    while d < length:
        d2 = min(d + dash, length)
        pygame.draw.line(surface, color, (sx + ux * d, sy + uy * d), (sx + ux * d2, sy + uy * d2), width)
        d += dash * 2
