# ballistics/app.py
from __future__ import annotations
import logging
import pygame
from ballistics import settings
from ballistics.scenarios.loader import ScenarioError, load_scenarios
from ballistics.scenes.calculator import CalculatorScene

logger = logging.getLogger(__name__)

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        scenarios = load_scenarios(settings.SCENARIOS_PATH)
    except ScenarioError as e:
        logger.warning("starting without scenarios: %s", e)
        scenarios = []

    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(settings.SCREEN_SIZE)
    clock = pygame.time.Clock()

    scene = CalculatorScene(screen, scenarios=scenarios)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Render --
        scene.draw(screen)
        pygame.display.flip()
        clock.tick(settings.FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
