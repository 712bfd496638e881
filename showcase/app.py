from __future__ import annotations

import logging
import pygame

from showcase.settings import AppCfg, load_settings
from showcase.scenes.carousels import CarouselScene

logger = logging.getLogger(__name__)


class ShowcaseApp:
    """
    Minimal app shell: window, clock and event pump around one CarouselScene.
    """

    def __init__(self, cfg: AppCfg):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        self._flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=self._flags,
        )
        self.clock = pygame.time.Clock()
        self.running = True
        self.scene = CarouselScene(self.screen, cfg)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(self.cfg.fps) / 1000.0

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                    break

                # App-level resize: update display first, then forward event
                if e.type == pygame.VIDEORESIZE:
                    self._resize_to(e.w, e.h)

                if self.scene.handle_event(e):
                    continue

                if e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    self.running = False

            self.scene.update(dt)
            self.scene.draw(self.screen)
            pygame.display.flip()

        pygame.quit()

    def _resize_to(self, w: int, h: int) -> None:
        w = max(1, int(w))
        h = max(1, int(h))
        self.screen = pygame.display.set_mode((w, h), flags=self._flags)
        self.scene.screen = self.screen


def main(settings_path: str | None = None) -> None:
    cfg = load_settings(settings_path) if settings_path else load_settings()
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting showcase with %d carousel(s)", len(cfg.carousels))
    ShowcaseApp(cfg).run()
