from typing import Tuple

import pygame
from pygame import display, time

from embedlab_ui.utils.Settings import Settings


class Init:
    """
    Factory to help with initialization of core components
    """

    @classmethod
    def settings(cls, path: str = "settings.toml") -> Settings:
        """
        Initialize settings from a file. Create settings file in case it does
        not exist.
        """
        settings = Settings(path)
        settings.save()

        return settings

    @classmethod
    def ui(
        cls,
        size: Tuple[int, int],
        title: str,
        fullscreen: bool = False
    ) -> Tuple[pygame.Surface, pygame.time.Clock]:
        try:
            pygame.init()

            flags = pygame.DOUBLEBUF | pygame.SCALED
            if fullscreen:
                flags |= pygame.FULLSCREEN

            screen = display.set_mode(size, flags)
            display.set_caption(title)
        except pygame.error as e:
            raise RuntimeError(f"Display error: {e}") from e

        clock = time.Clock()

        # Repeat keydown events when button is held
        pygame.key.set_repeat(400, 40)

        return screen, clock
