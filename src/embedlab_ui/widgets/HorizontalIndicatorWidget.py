from typing import Tuple, Any

from pygame import draw, Surface, Rect

from embedlab_helper import clamp
from embedlab_ui.utils.colors import WHITE
from embedlab_ui.widgets.BaseIndicatorWidget import BaseIndicatorWidget


class HorizontalIndicatorWidget(BaseIndicatorWidget):
    """
    Symmetric mode draws a marker around the center, positive mode fills the
    bar from the left edge.
    """
    def __init__(
        self,
        position: Tuple[int, int],
        size: Tuple[int, int],
        bar_size: Tuple[int, int] = (20, 10),
        **kwargs: Any
    ) -> None:
        super().__init__(position, size, **kwargs)

        self.bar_width, self.bar_height = bar_size
        self.center_x = self.position[0] + self.width // 2
        self.y = self.position[1] + (self.height - self.bar_height) // 2

    def draw(self, screen: Surface, value: float) -> None:
        value = clamp(value, -1.0, 1.0)
        color = self.color_fn(value) if self.color_fn else WHITE

        self.draw_background(screen)

        if self.range_mode == "symmetric":
            offset_range = (self.width - self.bar_width - self.padding * 2) // 2
            offset = int(value * offset_range)
            x = self.center_x - self.bar_width // 2 + offset
            bar_rect = Rect(x, self.y, self.bar_width, self.bar_height)
        else:
            fill_width = int(max(value, 0.0) * (self.width - self.padding * 2))
            if fill_width <= 0:
                return
            bar_rect = Rect(self.position[0] + self.padding, self.y, fill_width, self.bar_height)

        draw.rect(screen, color, bar_rect)
        draw.rect(screen, WHITE, bar_rect, width=1)
