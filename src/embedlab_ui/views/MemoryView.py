from pygame import Rect, Surface, draw

from embedlab_sim import MemoryModel, SimulationState
from embedlab_sim.readouts import memory_heights, stack_percent
from embedlab_ui.utils.colors import ACCENT, DANGER, PRIMARY, SECONDARY, WHITE
from embedlab_ui.utils.fonts import LABEL_FONT
from embedlab_ui.utils.helpers import render_lines, render_text
from embedlab_ui.views.View import View


class MemoryView(View):
    """Stack grows up from the bottom of the tower, heap grows down from the top."""
    title = "Stack & heap"
    help = [("UP/DOWN", "stack depth"), ("A", "malloc 256 bytes")]

    def __init__(self, area: Rect) -> None:
        super().__init__(area)
        self.tower = Rect(area.left + 80, area.top + 20, 160, MemoryModel.TOWER_HEIGHT)

    def draw(self, screen: Surface, state: SimulationState) -> None:
        memory = state.memory
        tower = self.tower
        stack_h, heap_h = memory_heights(memory.stack, memory.heap)

        draw.rect(screen, DANGER if memory.crashed else WHITE, tower, 2)
        render_text(screen, "RAM", (tower.centerx, tower.top + MemoryModel.TOWER_HEADER // 2))

        region_top = tower.top + MemoryModel.TOWER_HEADER
        region_height = MemoryModel.CAPACITY

        # Blocks are clipped to the tower, the overflow itself is the crash flag
        heap_px = int(min(heap_h, region_height))
        stack_px = int(min(stack_h, region_height))
        if heap_px > 0:
            draw.rect(screen, ACCENT, Rect(tower.left + 2, region_top, tower.width - 4, heap_px))
        if stack_px > 0:
            draw.rect(screen, SECONDARY, Rect(tower.left + 2, tower.bottom - stack_px, tower.width - 4, stack_px))

        data = [
            ("Stack", f"{stack_percent(memory.stack)}%"),
            ("Heap", f"{memory.heap} bytes"),
            ("Used", f"{int(stack_h + heap_h)} / {MemoryModel.CAPACITY}px"),
        ]
        render_lines(screen, data, tower.right + 60, tower.top + 20)

        if memory.crashed:
            render_text(screen, "STACK OVERFLOW - out of memory", (tower.right + 200, tower.bottom - 40), DANGER, font=LABEL_FONT)
            render_text(screen, "lower the stack depth to recover", (tower.right + 200, tower.bottom - 10), PRIMARY)
