from typing import List, Tuple

from pygame import Surface, Rect, SRCALPHA, draw

from embedlab_ui.utils.colors import GREY, LIGHT_GREY, PRIMARY, WHITE
from embedlab_ui.utils.fonts import BOLD_MONO_FONT
from embedlab_ui.widgets.Widget import Widget


class KeyHintWidget(Widget):
    """
    Bar listing the keys of the active view, each key is drawn as a small
    cap followed by its action.
    """
    def __init__(
        self,
        position: Tuple[int, int],
        size: Tuple[int, int],
        spacing: int = 18,
        padding: int = 10
    ) -> None:
        super().__init__()

        self.position = position
        self.width, self.height = size
        self.spacing = spacing
        self.padding = padding
        self.background_alpha = 200

        self.font = BOLD_MONO_FONT
        self.surface = Surface((self.width, self.height), SRCALPHA)
        self.cap_rects: List[Rect] = []

    def draw(self, screen: Surface, hints: List[Tuple[str, str]]) -> None:
        self.surface.fill((*GREY, self.background_alpha))
        self.cap_rects = []

        center_y = self.height // 2
        x = self.padding
        for key, action in hints:
            key_surface, key_rect = self.font.render(key, WHITE)
            key_rect.midleft = (x + 4, center_y)

            cap = key_rect.inflate(8, 6)
            draw.rect(self.surface, PRIMARY, cap, border_radius=3)
            self.surface.blit(key_surface, key_rect)
            self.cap_rects.append(cap)

            action_surface, action_rect = self.font.render(action, LIGHT_GREY)
            action_rect.midleft = (cap.right + 6, center_y)
            self.surface.blit(action_surface, action_rect)

            x = action_rect.right + self.spacing

        screen.blit(self.surface, self.position)
