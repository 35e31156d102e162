from typing import Dict, Tuple

import pygame
from pygame import Rect

from embedlab_sim import SimulationState
from embedlab_ui.core.ApplicationModel import ApplicationModel, VIEWS
from embedlab_ui.utils.colors import BACKGROUND, GREY, LIGHT_GREY, PRIMARY, WHITE, DANGER
from embedlab_ui.utils.fonts import BOLD_MONO_FONT, LABEL_FONT
from embedlab_ui.widgets import KeyHintWidget
from embedlab_ui.views import (
  ControlView,
  DeadlineView,
  HomeView,
  InterruptView,
  MemoryView,
  TemperatureView,
  View,
)

HEADER_HEIGHT = 40
FOOTER_HEIGHT = 30


class Renderer:
    def __init__(self, size: Tuple[int, int]) -> None:
        self.width, self.height = size

        area = Rect(0, HEADER_HEIGHT, self.width, self.height - HEADER_HEIGHT - FOOTER_HEIGHT)
        self.views: Dict[str, View] = {
            "home": HomeView(area),
            "temperature": TemperatureView(area),
            "control": ControlView(area),
            "interrupt": InterruptView(area),
            "deadline": DeadlineView(area),
            "memory": MemoryView(area),
        }

        self.footer = KeyHintWidget((0, self.height - FOOTER_HEIGHT), (self.width, FOOTER_HEIGHT))

    def render_all(
        self,
        screen: pygame.Surface,
        state: SimulationState,
        model: ApplicationModel
    ) -> None:
        screen.fill(BACKGROUND)

        view = self.views[model.view]
        view.draw(screen, state)

        self._render_header(screen, state, model.view)
        self._render_footer(screen, view)

        pygame.display.flip()

    def _render_header(self, screen: pygame.Surface, state: SimulationState, active: str) -> None:
        pygame.draw.rect(screen, GREY, Rect(0, 0, self.width, HEADER_HEIGHT))

        x = 10
        for i, name in enumerate(VIEWS):
            color = WHITE if name == active else LIGHT_GREY
            surface, rect = BOLD_MONO_FONT.render(f"{i} {self.views[name].title}", color)
            rect.midleft = (x, HEADER_HEIGHT // 2)
            if name == active:
                pygame.draw.rect(screen, PRIMARY, rect.inflate(10, 10))
            screen.blit(surface, rect)
            x = rect.right + 20

        clock = state.clock
        status = "RUN" if clock.running else "PAUSED"
        surface, rect = LABEL_FONT.render(f"{status} t={clock.tick}", WHITE if clock.running else DANGER)
        rect.midright = (self.width - 10, HEADER_HEIGHT // 2)
        screen.blit(surface, rect)

    def _render_footer(self, screen: pygame.Surface, view: View) -> None:
        keys = list(view.help) + [("SPACE", "pause"), ("R", "reset")]
        self.footer.draw(screen, keys)
