from pygame import Surface

from embedlab_sim import SimulationState
from embedlab_ui.utils.fonts import MAIN_FONT
from embedlab_ui.utils.helpers import render_lines, render_text
from embedlab_ui.views.View import View


class HomeView(View):
    title = "Overview"
    help = [("0-5", "switch view"), ("F11", "fullscreen")]

    def draw(self, screen: Surface, state: SimulationState) -> None:
        render_text(screen, "Embedded Systems Lab", (self.area.centerx, self.area.top + 40), font=MAIN_FONT)

        scheduler = state.scheduler
        data = [
            ("[1] Temperature", f"{state.sensor.setpoint:.1f} C -> {state.sensor.voltage:.2f} V"),
            ("[2] Motor control", f"input {state.actuator.input:+.0f}%"),
            ("[3] Interrupts", f"{scheduler.mode.value}, {len(scheduler.events)} events"),
            ("[4] Deadline", state.deadline.status.value),
            ("[5] Memory", "CRASHED" if state.memory.crashed else "ok"),
        ]
        render_lines(screen, data, self.area.left + 80, self.area.top + 110, line_height=36)
