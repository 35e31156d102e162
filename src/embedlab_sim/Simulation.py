import logging
from threading import RLock
from typing import Optional

import numpy as np

from embedlab_sim.ActuatorModel import ActuatorModel
from embedlab_sim.DeadlineMonitor import DeadlineMonitor
from embedlab_sim.EventScheduler import EventScheduler
from embedlab_sim.MemoryModel import MemoryModel
from embedlab_sim.SensorModel import SensorModel
from embedlab_sim.dataclasses import (
  ActuatorState,
  DeadlineState,
  MemoryState,
  SchedulerState,
  SensorState,
  SimulationState,
)


class Simulation:
    """
    Owns the simulation record and advances all subsystems one tick at a time.

    The driver decides when to call `tick()`: a frame loop, a timer or a test
    calling it N times. Writers are expected to hold `lock`, `advance()` and
    `reset()` take it themselves so a reader holding it never sees a half
    applied tick.
    """

    def __init__(
        self,
        state: Optional[SimulationState] = None,
        seed: Optional[int] = None
    ) -> None:
        self.lock = RLock()
        self.state = state if state is not None else SimulationState()
        self.rng = np.random.default_rng(seed)

        self._build_models()

    def tick(self) -> bool:
        """Advance once if the clock is running. Returns True if it did."""
        with self.lock:
            if not self.state.clock.running:
                return False

            self.advance()
            return True

    def advance(self) -> SimulationState:
        with self.lock:
            state = self.state
            state.clock.tick += 1

            self.sensor.advance(state.sensor.setpoint, state.sensor.noise)
            self.actuator.advance(state.actuator.input)
            self.scheduler.advance(state.scheduler.mode, state.scheduler.isr_len)
            self.deadline.advance()
            self.memory.advance()

            return state

    def refresh(self) -> None:
        """
        Re-evaluate state that is checked on every frame, even while the clock
        is paused.
        """
        with self.lock:
            self.memory.advance()

    def reset(self) -> None:
        with self.lock:
            handlers = self.deadline.status_handlers

            self.state.sensor = SensorState()
            self.state.actuator = ActuatorState()
            self.state.scheduler = SchedulerState()
            self.state.deadline = DeadlineState()
            self.state.memory = MemoryState()

            self._build_models()
            self.deadline.status_handlers = handlers

            logging.info(f"Simulation reset at tick {self.state.clock.tick}")

    def _build_models(self) -> None:
        self.sensor = SensorModel(self.state.sensor, self.rng)
        self.actuator = ActuatorModel(self.state.actuator)
        self.scheduler = EventScheduler(self.state.scheduler)
        self.deadline = DeadlineMonitor(self.state.deadline)
        self.memory = MemoryModel(self.state.memory)
