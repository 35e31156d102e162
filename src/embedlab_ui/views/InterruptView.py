from pygame import Rect, Surface, draw

from embedlab_sim import EventScheduler, EventState, SchedulerMode, SimulationState
from embedlab_ui.utils.colors import ACCENT, LIGHT_GREY, PRIMARY, SECONDARY, WHITE, GREY
from embedlab_ui.utils.helpers import render_lines, render_text
from embedlab_ui.views.View import View


class InterruptView(View):
    """
    Events scroll towards the CPU marker at a fixed screen position. The CPU
    turns into an ISR block while an event is being serviced.
    """
    title = "Interrupt vs. polling"
    help = [("M", "mode"), ("L", "ISR length"), ("T", "trigger event")]

    CPU_X = 100
    LANE_HEIGHT = 40

    def __init__(self, area: Rect) -> None:
        super().__init__(area)
        self.lane = Rect(area.left, area.top + 80, area.width, self.LANE_HEIGHT)

    def draw(self, screen: Surface, state: SimulationState) -> None:
        scheduler = state.scheduler
        lane = self.lane
        mid_y = lane.centery
        cpu_x = lane.left + self.CPU_X

        draw.rect(screen, GREY, lane)

        for event in scheduler.events:
            if event.state != EventState.PENDING:
                continue
            x = lane.left + event.start_x - scheduler.cursor + self.CPU_X
            if lane.left <= x <= lane.right:
                draw.circle(screen, ACCENT, (x, mid_y), 6)

        if scheduler.isr_active:
            draw.rect(screen, SECONDARY, Rect(cpu_x, lane.top, 20, lane.height))
            render_text(screen, "ISR", (cpu_x + 10, mid_y), WHITE)
        else:
            draw.circle(screen, PRIMARY, (cpu_x + 10, mid_y), 10)

        if scheduler.mode == SchedulerMode.POLLING:
            for x in EventScheduler.poll_markers(scheduler.cursor, lane.width, self.CPU_X):
                if 0 <= x <= lane.width:
                    draw.rect(screen, LIGHT_GREY, Rect(lane.left + x, lane.bottom + 5, 2, 10))

        counts = {s: 0 for s in EventState}
        for event in scheduler.events:
            counts[event.state] += 1

        data = [
            ("Mode", scheduler.mode.value),
            ("ISR length", f"{scheduler.isr_len} ({scheduler.isr_len * EventScheduler.TICKS_PER_ISR_UNIT} ticks)"),
            ("Cursor", str(scheduler.cursor)),
            ("Pending", str(counts[EventState.PENDING])),
            ("Running", str(counts[EventState.RUNNING])),
            ("Done", str(counts[EventState.DONE])),
        ]
        render_lines(screen, data, self.area.left + 40, lane.bottom + 40)
