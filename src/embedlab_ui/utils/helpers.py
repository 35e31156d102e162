from typing import List, Optional, Tuple

import pygame
from pygame.freetype import Font

from embedlab_ui.utils.colors import WHITE
from embedlab_ui.utils.fonts import TEXT_FONT


def render_lines(
    screen: pygame.Surface,
    data: List[Tuple[str, Optional[str]]],
    x: int,
    y: int,
    line_height: int = 24,
    color: Tuple[int, int, int] = WHITE
) -> None:
    """
    Render "key: value" rows with all values aligned on one column. Rows
    without a value are rendered as headlines.
    """
    base_y = y

    max_label_width = 0
    for i, (key, val) in enumerate(data):
        y = base_y + i * line_height

        label = f"{key}"
        if val is not None:
            label += ":"

        key_surf, key_rect = TEXT_FONT.render(label, color)
        key_rect.topleft = (x, y)
        screen.blit(key_surf, key_rect)

        if val is not None and key_rect.width > max_label_width:
            max_label_width = key_rect.width

    val_x = x + max_label_width + 15
    for i, (key, val) in enumerate(data):
        if val is not None:
            y = base_y + i * line_height
            val_surf, val_rect = TEXT_FONT.render(val, color)
            val_rect.topleft = (val_x, y)
            screen.blit(val_surf, val_rect)


def render_text(
    screen: pygame.Surface,
    text: str,
    center: Tuple[int, int],
    color: Tuple[int, int, int] = WHITE,
    font: Optional[Font] = None
) -> pygame.Rect:
    surface, rect = (font or TEXT_FONT).render(text, color)
    rect.center = center
    screen.blit(surface, rect)

    return rect
