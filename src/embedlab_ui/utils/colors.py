WHITE = (255, 255, 255)
GREY = (80, 80, 80)
LIGHT_GREY = (170, 170, 170)
BACKGROUND = (30, 30, 38)
GRID = (60, 60, 70)

PRIMARY = (108, 92, 231)
SECONDARY = (0, 206, 201)
ACCENT = (255, 0, 85)
DANGER = (255, 118, 117)
GREEN = (46, 204, 113)
LIGHT_GREEN = (169, 223, 191)
RED = (231, 76, 60)
