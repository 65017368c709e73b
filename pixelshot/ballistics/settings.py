# ballistics/settings.py
from __future__ import annotations
import os
from pathlib import Path

# Grid (square, cells per side)
GRID_SIZE: int = int(os.getenv("PIXELSHOT_GRID_SIZE", "20"))

# Window / render
WINDOW_SIZE: int = 720
HUD_HEIGHT: int = 64
SCREEN_SIZE: tuple[int, int] = (WINDOW_SIZE, WINDOW_SIZE + HUD_HEIGHT)
WINDOW_TITLE: str = "pixelshot - ballistics calculator"
FPS: int = 30

# Logging
LOG_LEVEL: str = os.getenv("PIXELSHOT_LOG_LEVEL", "INFO")

# Undo/redo depth
HISTORY_LIMIT: int = 100

# Bundled scenarios
SCENARIOS_PATH: Path = Path(__file__).parent / "data" / "scenarios.json"

# Colors
BG_COLOR: tuple[int, int, int] = (22, 33, 62)
GRID_COLOR: tuple[int, int, int] = (42, 63, 95)
GRID_HILITE: tuple[int, int, int] = (90, 120, 170)
PLAYER_COLOR: tuple[int, int, int] = (78, 204, 163)
ENEMY_COLOR: tuple[int, int, int] = (255, 107, 107)
OBSTACLE_COLOR: tuple[int, int, int] = (255, 217, 61)
WALL_COLOR: tuple[int, int, int] = (108, 117, 125)

# Trajectory overlay
LOF_OPEN_RGBA: tuple[int, int, int, int] = (255, 107, 107, 220)
LOF_BLOCKED_RGBA: tuple[int, int, int, int] = (78, 204, 163, 200)
BLOCKER_RGB: tuple[int, int, int] = (78, 204, 163)
LOF_WIDTH: int = 3
DASH_PX: int = 5

# Recommendations
DEFENSE_RGBA: tuple[int, int, int, int] = (255, 217, 61, 100)
DEFENSE_BORDER_RGB: tuple[int, int, int] = (255, 217, 61)
OFFENSE_RGBA: tuple[int, int, int, int] = (61, 200, 255, 100)
OFFENSE_BORDER_RGB: tuple[int, int, int] = (61, 200, 255)
RECOMMEND_INSET: int = 2

# HUD
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 150)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_SAFE_RGB: tuple[int, int, int] = (78, 204, 163)
HUD_DANGER_RGB: tuple[int, int, int] = (255, 107, 107)
HUD_FONT_SIZE: int = 20
