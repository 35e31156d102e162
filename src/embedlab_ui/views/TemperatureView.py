from pygame import Rect, Surface, draw

from embedlab_sim import SensorModel, SimulationState
from embedlab_sim.dataclasses import SENSOR_HISTORY_LENGTH
from embedlab_sim.readouts import adc_value, sensed_temperature
from embedlab_ui.utils.colors import GREEN, LIGHT_GREEN, RED, WHITE
from embedlab_ui.utils.helpers import render_lines
from embedlab_ui.views.View import View
from embedlab_ui.widgets import GraphWidget


class TemperatureView(View):
    """
    Datasheet style transfer characteristic next to the live voltage trace.
    """
    title = "Temperature sensor"
    help = [("UP/DOWN", "setpoint"), ("N", "noise")]

    T_MIN = -20
    T_MAX = 100
    V_MAX = 2.0

    def __init__(self, area: Rect) -> None:
        super().__init__(area)

        half = area.width // 2
        self.chart = Rect(area.left + 40, area.top + 20, half - 80, area.height // 2)
        self.graph = GraphWidget(
            (area.left + half + 20, area.top + 20),
            (half - 60, area.height // 2),
            "Voltage",
            (0.0, SensorModel.V_REF),
            SENSOR_HISTORY_LENGTH,
            unit="V"
        )

    def draw(self, screen: Surface, state: SimulationState) -> None:
        sensor = state.sensor
        self._draw_characteristic(screen, sensor.setpoint)
        self.graph.draw(screen, sensor.history, sensor.voltage)

        data = [
            ("Setpoint", f"{sensor.setpoint:.1f} C"),
            ("Voltage", f"{sensor.voltage:.2f} V"),
            ("ADC (12 bit)", str(adc_value(sensor.voltage))),
            ("Measured", f"{sensed_temperature(sensor.voltage):.1f} C"),
            ("Noise", "on" if sensor.noise else "off"),
        ]
        render_lines(screen, data, self.area.left + 40, self.chart.bottom + 30)

    def _map(self, celsius: float, volts: float) -> tuple[int, int]:
        x = self.chart.left + (celsius - self.T_MIN) / (self.T_MAX - self.T_MIN) * self.chart.width
        y = self.chart.bottom - (volts / self.V_MAX) * self.chart.height
        return int(x), int(y)

    def _draw_characteristic(self, screen: Surface, setpoint: float) -> None:
        draw.line(screen, WHITE, self.chart.topleft, self.chart.bottomleft, 2)
        draw.line(screen, WHITE, self.chart.bottomleft, self.chart.bottomright, 2)

        # Tolerance band of +/-50mV
        for offset in (-0.05, 0.05):
            draw.line(
                screen,
                LIGHT_GREEN,
                self._map(self.T_MIN, SensorModel.transfer(self.T_MIN) + offset),
                self._map(self.T_MAX, SensorModel.transfer(self.T_MAX) + offset),
                1
            )

        draw.line(
            screen,
            GREEN,
            self._map(self.T_MIN, SensorModel.transfer(self.T_MIN)),
            self._map(self.T_MAX, SensorModel.transfer(self.T_MAX)),
            3
        )

        point = self._map(setpoint, SensorModel.transfer(setpoint))
        if self.chart.collidepoint(point):
            draw.line(screen, RED, point, (point[0], self.chart.bottom), 1)
            draw.line(screen, RED, point, (self.chart.left, point[1]), 1)
            draw.circle(screen, RED, point, 4)
