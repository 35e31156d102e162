import pygame
from pygame.freetype import Font

pygame.init()
pygame.freetype.init()

# No bundled assets, use the default font shipped with pygame
BOLD_MONO_FONT = Font(None, 16)

MAIN_FONT = Font(None, 30)
LABEL_FONT = Font(None, 20)
TEXT_FONT = Font(None, 16)
