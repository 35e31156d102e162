import math

from pygame import Rect, Surface, draw

from embedlab_sim import Direction, SimulationState
from embedlab_sim.dataclasses import ACTUATOR_HISTORY_LENGTH
from embedlab_sim.readouts import direction, display_rpm, duty_cycle, pwm_segments
from embedlab_ui.utils.colors import ACCENT, GRID, LIGHT_GREY, SECONDARY, WHITE
from embedlab_ui.utils.fonts import LABEL_FONT
from embedlab_ui.utils.helpers import render_text
from embedlab_ui.views.View import View
from embedlab_ui.widgets import GraphWidget, VerticalIndicatorWidget


class ControlView(View):
    title = "Motor control"
    help = [("UP/DOWN", "command")]

    def __init__(self, area: Rect) -> None:
        super().__init__(area)

        column = area.width // 2
        scope_height = (area.height - 60) // 3

        self.command = VerticalIndicatorWidget(
            (area.left + 30, area.top + 20),
            (40, area.height - 40),
            range_mode="symmetric",
            color_fn=lambda v: ACCENT if v < 0 else SECONDARY
        )
        self.input_graph = GraphWidget(
            (area.left + column, area.top + 10),
            (column - 30, scope_height),
            "Input",
            (-100.0, 100.0),
            ACTUATOR_HISTORY_LENGTH
        )
        self.pwm_scope = Rect(area.left + column, area.top + 20 + scope_height, column - 30, scope_height)
        self.dir_scope = Rect(area.left + column, area.top + 30 + scope_height * 2, column - 30, scope_height)

        self.rotor_center = (area.left + column // 2 + 30, area.top + area.height // 2 - 20)
        self.rotor_radius = min(column // 3, area.height // 3)

    def draw(self, screen: Surface, state: SimulationState) -> None:
        actuator = state.actuator
        motor_direction = direction(actuator.input)
        color = ACCENT if actuator.input < 0 else SECONDARY

        self.command.draw(screen, actuator.input / 100)
        self.input_graph.draw(screen, actuator.input_history, actuator.input)
        self._draw_rotor(screen, actuator.angle, color)
        self._draw_pwm(screen, duty_cycle(actuator.input), color)
        self._draw_direction(screen, actuator.input < 0, color)

        label = {
            Direction.FORWARD: "FORWARD",
            Direction.REVERSE: "REVERSE",
            Direction.STOPPED: "STOP",
        }[motor_direction]
        label_color = LIGHT_GREY if motor_direction == Direction.STOPPED else color

        x, y = self.rotor_center
        render_text(screen, f"{display_rpm(actuator.rpm)} RPM", (x, y + self.rotor_radius + 30), font=LABEL_FONT)
        render_text(screen, label, (x, y + self.rotor_radius + 60), label_color, font=LABEL_FONT)

    def _draw_rotor(self, screen: Surface, angle: float, color: tuple[int, int, int]) -> None:
        draw.circle(screen, WHITE, self.rotor_center, self.rotor_radius, 2)

        # The model angle is unbounded, wrap it for display only
        radians = math.radians(angle % 360)
        for blade in range(3):
            theta = radians + blade * 2 * math.pi / 3
            tip = (
                int(self.rotor_center[0] + math.cos(theta) * (self.rotor_radius - 6)),
                int(self.rotor_center[1] + math.sin(theta) * (self.rotor_radius - 6))
            )
            draw.line(screen, color, self.rotor_center, tip, 4)

    def _draw_pwm(self, screen: Surface, duty: float, color: tuple[int, int, int]) -> None:
        scope = self.pwm_scope
        draw.rect(screen, GRID, scope, 1)

        high_y = scope.top + 10
        low_y = scope.bottom - 10
        points = []
        for start, end, high in pwm_segments(duty):
            y = high_y if high else low_y
            points.append((scope.left + int(start * scope.width), y))
            points.append((scope.left + int(end * scope.width), y))

        if len(points) >= 2:
            draw.lines(screen, color, False, points, 2)

    def _draw_direction(self, screen: Surface, reverse: bool, color: tuple[int, int, int]) -> None:
        scope = self.dir_scope
        draw.rect(screen, GRID, scope, 1)

        y = scope.top + 15 if reverse else scope.bottom - 15
        draw.line(screen, color, (scope.left, y), (scope.right, y), 2)
        draw.circle(screen, color, (scope.right - 10, y), 4)
