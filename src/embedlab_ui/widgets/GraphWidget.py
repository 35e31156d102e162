from typing import Iterable, List, Optional, Tuple

import numpy as np
import pygame
from pygame import Surface

from embedlab_ui.utils.colors import GRID, SECONDARY, WHITE
from embedlab_ui.utils.fonts import BOLD_MONO_FONT
from embedlab_ui.widgets.Widget import Widget


class GraphWidget(Widget):
    """
    Scope style line graph over a fixed value range.

    The x axis is the sample index, the newest sample is drawn at the right
    edge once the history is full.
    """
    def __init__(
        self,
        position: Tuple[int, int],
        size: Tuple[int, int],
        label: str,
        value_range: Tuple[float, float],
        samples: int,
        color: Tuple[int, int, int] = SECONDARY,
        grid: Tuple[int, int] = (10, 4),
        unit: str = ""
    ) -> None:
        super().__init__()

        self.position = position
        self.size = size
        self.width, self.height = self.size

        self.value_range = value_range
        self.samples = samples
        self.color = color
        self.unit = unit
        self.graph_alpha = 180

        self.font = BOLD_MONO_FONT
        self.label, self.label_rect = self.font.render(label, WHITE)
        self.label_rect.topleft = (6, 4)

        # Label and grid never change
        self._background_surface = Surface((self.width, self.height), pygame.SRCALPHA)
        self._background_surface.fill((0, 0, 0, self.graph_alpha))
        self._draw_grid(self._background_surface, *grid)
        self._background_surface.blit(self.label, self.label_rect)

        self.surface = Surface((self.width, self.height), pygame.SRCALPHA)

    def points(self, history: Iterable[float]) -> List[Tuple[int, int]]:
        values = np.fromiter(history, dtype=float)
        if values.size == 0:
            return []

        low, high = self.value_range
        span = max(high - low, 1e-9)
        normalized = np.clip((values - low) / span, 0.0, 1.0)

        xs = (np.arange(values.size) / self.samples * self.width).astype(int)
        ys = ((1.0 - normalized) * (self.height - 1)).astype(int)

        return list(zip(xs.tolist(), ys.tolist()))

    def draw(self, screen: Surface, history: Iterable[float], value: Optional[float] = None) -> None:
        self.surface.fill((0, 0, 0, 0))
        self.surface.blit(self._background_surface, (0, 0))

        graph_points = self.points(history)
        if len(graph_points) >= 2:
            pygame.draw.lines(self.surface, self.color, False, graph_points, 2)

        if value is not None:
            text, rect = self.font.render(f"{value:.2f}{self.unit}", WHITE)
            rect.topright = (self.width - 6, 4)
            self.surface.blit(text, rect)

        screen.blit(self.surface, self.position)

    def _draw_grid(self, surface: Surface, columns: int, rows: int) -> None:
        for i in range(columns + 1):
            x = int(i * self.width / columns)
            pygame.draw.line(surface, GRID, (x, 0), (x, self.height))
        for i in range(rows + 1):
            y = int(i * self.height / rows)
            pygame.draw.line(surface, GRID, (0, y), (self.width, y))
