from pygame import Rect, Surface, draw

from embedlab_sim import DeadlineStatus, PRESETS, SimulationState
from embedlab_sim.readouts import deadline_progress, is_overrun
from embedlab_ui.utils.colors import DANGER, PRIMARY, SECONDARY, WHITE
from embedlab_ui.utils.fonts import LABEL_FONT
from embedlab_ui.utils.helpers import render_lines, render_text
from embedlab_ui.views.View import View
from embedlab_ui.widgets import HorizontalIndicatorWidget

PROGRESS_SCALE = 120


class DeadlineView(View):
    title = "Deadline"
    help = [("Q/W/E", "light/heavy/overload task")]

    def __init__(self, area: Rect) -> None:
        super().__init__(area)

        self.status_color = SECONDARY
        self.bar = HorizontalIndicatorWidget(
            (area.left + 40, area.top + 60),
            (area.width - 80, 50),
            bar_size=(0, 30),
            range_mode="positive",
            color_fn=lambda _: self.status_color
        )

    def draw(self, screen: Surface, state: SimulationState) -> None:
        deadline = state.deadline
        message = ""

        match deadline.status:
            case DeadlineStatus.IDLE:
                self.status_color = PRIMARY
            case DeadlineStatus.RUNNING:
                self.status_color = PRIMARY
                message = f"Running: {deadline.current}ms"
                if is_overrun(deadline):
                    self.status_color = DANGER
                    message = "OVERRUN!"
            case DeadlineStatus.SUCCESS:
                self.status_color = SECONDARY
                message = "Success"
            case DeadlineStatus.CRASH:
                self.status_color = DANGER
                message = "DEADLINE MISSED"

        self.bar.draw(screen, deadline_progress(deadline) / PROGRESS_SCALE)

        # Deadline marker at 100%
        bar = self.bar
        usable = bar.width - bar.padding * 2
        x = bar.position[0] + bar.padding + int(usable * 100 / PROGRESS_SCALE)
        draw.line(screen, WHITE, (x, bar.position[1] - 10), (x, bar.position[1] + bar.height + 10), 2)
        render_text(screen, f"deadline {deadline.max}ms", (x, bar.position[1] - 20))

        if message:
            render_text(
                screen,
                message,
                (self.area.centerx, bar.position[1] + bar.height + 50),
                self.status_color,
                font=LABEL_FONT
            )

        presets = ", ".join(f"{name} {load}ms" for name, load in PRESETS.items())
        data = [
            ("Status", deadline.status.value),
            ("Elapsed", f"{deadline.current}ms"),
            ("Load", f"{deadline.load}ms"),
            ("Presets", presets),
        ]
        render_lines(screen, data, self.area.left + 40, bar.position[1] + bar.height + 90)
