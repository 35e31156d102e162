"""Input surface: everything a user can change between two ticks."""
import logging

from embedlab_helper import clamp
from embedlab_sim.DeadlineMonitor import PRESETS
from embedlab_sim.MemoryModel import MemoryModel
from embedlab_sim.Simulation import Simulation
from embedlab_sim.dataclasses import Event, SimulationState
from embedlab_sim.states import SchedulerMode


class Controls:
    TEMPERATURE_RANGE = (-50.0, 150.0)
    COMMAND_RANGE = (-100.0, 100.0)
    STACK_RANGE = (0, MemoryModel.STACK_MAX_LEVEL)
    ISR_LENGTHS = (5, 10, 20, 40)

    def __init__(self, simulation: Simulation) -> None:
        self.simulation = simulation

    @property
    def state(self) -> SimulationState:
        return self.simulation.state

    # Clock
    def toggle_running(self) -> bool:
        with self.simulation.lock:
            clock = self.state.clock
            clock.running = not clock.running
            logging.debug(f"Simulation {'running' if clock.running else 'paused'}")

            return clock.running

    def reset(self) -> None:
        self.simulation.reset()

    # Sensor
    def set_temperature(self, celsius: float) -> None:
        with self.simulation.lock:
            self.state.sensor.setpoint = clamp(celsius, *self.TEMPERATURE_RANGE)

    def step_temperature(self, delta: float) -> None:
        with self.simulation.lock:
            self.set_temperature(self.state.sensor.setpoint + delta)

    def set_noise(self, enabled: bool) -> None:
        with self.simulation.lock:
            self.state.sensor.noise = enabled

    def toggle_noise(self) -> bool:
        with self.simulation.lock:
            self.set_noise(not self.state.sensor.noise)

            return self.state.sensor.noise

    # Actuator
    def set_command(self, value: float) -> None:
        with self.simulation.lock:
            self.state.actuator.input = int(clamp(value, *self.COMMAND_RANGE))

    def step_command(self, delta: float) -> None:
        with self.simulation.lock:
            self.set_command(self.state.actuator.input + delta)

    # Scheduler
    def select_mode(self, mode: SchedulerMode | str) -> None:
        with self.simulation.lock:
            self.state.scheduler.mode = SchedulerMode(mode)

    def toggle_mode(self) -> SchedulerMode:
        with self.simulation.lock:
            current = self.state.scheduler.mode
            new_mode = SchedulerMode.INTERRUPT if current == SchedulerMode.POLLING else SchedulerMode.POLLING
            self.select_mode(new_mode)

            return new_mode

    def set_isr_length(self, length: int) -> None:
        with self.simulation.lock:
            self.state.scheduler.isr_len = max(0, int(length))

    def cycle_isr_length(self) -> int:
        """Step through the selectable handler durations, wrapping around."""
        with self.simulation.lock:
            current = self.state.scheduler.isr_len
            larger = [length for length in self.ISR_LENGTHS if length > current]
            length = larger[0] if larger else self.ISR_LENGTHS[0]
            self.set_isr_length(length)

            return length

    def trigger_event(self) -> Event:
        with self.simulation.lock:
            return self.simulation.scheduler.trigger()

    # Deadline
    def select_preset(self, preset: str | int) -> None:
        """Start the task with a named preset or a load in milliseconds."""
        load_ms = PRESETS[preset] if isinstance(preset, str) else int(preset)
        with self.simulation.lock:
            self.simulation.deadline.start(load_ms)

    # Memory
    def set_stack(self, level: int) -> None:
        with self.simulation.lock:
            self.simulation.memory.set_stack(int(clamp(level, *self.STACK_RANGE)))

    def step_stack(self, delta: int) -> None:
        with self.simulation.lock:
            self.set_stack(self.state.memory.stack + delta)

    def allocate_heap(self) -> None:
        with self.simulation.lock:
            self.simulation.memory.allocate_heap()
