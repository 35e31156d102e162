"""Tests for Simulation - the tick driver entry point."""
from unittest.mock import Mock

import pytest

from embedlab_sim import (
  ActuatorState,
  DeadlineState,
  DeadlineStatus,
  EventState,
  MemoryState,
  SchedulerMode,
  SchedulerState,
  SensorState,
  Simulation,
)


class TestTick:

    def test_tick_advances_when_running(self):
        sim = Simulation()

        assert sim.tick() is True
        assert sim.state.clock.tick == 1

    def test_tick_is_noop_when_paused(self):
        sim = Simulation()
        sim.state.clock.running = False

        assert sim.tick() is False
        assert sim.state.clock.tick == 0
        assert sim.state.scheduler.cursor == 0

    def test_pause_keeps_applied_state(self):
        sim = Simulation()
        for _ in range(10):
            sim.tick()

        sim.state.clock.running = False
        sim.tick()

        assert sim.state.clock.tick == 10
        assert sim.state.scheduler.cursor == 20

    def test_advance_ignores_pause(self):
        sim = Simulation()
        sim.state.clock.running = False

        sim.advance()

        assert sim.state.clock.tick == 1


class TestAdvance:

    def test_all_subsystems_advance(self):
        sim = Simulation()
        sim.state.actuator.input = 100
        sim.deadline.start(30)

        state = sim.advance()

        assert state is sim.state
        assert state.sensor.voltage == pytest.approx(0.75)
        assert state.sensor.history[-1] == state.sensor.voltage
        assert state.actuator.rpm == pytest.approx(2.5)
        assert state.scheduler.cursor == 2
        assert state.deadline.current == 1

    def test_memory_checked_every_tick(self):
        sim = Simulation()
        sim.state.memory.stack = 9

        sim.advance()

        assert sim.state.memory.crashed is True

    def test_refresh_evaluates_memory_while_paused(self):
        sim = Simulation()
        sim.state.clock.running = False
        sim.state.memory.stack = 9

        sim.tick()
        assert sim.state.memory.crashed is False

        sim.refresh()
        assert sim.state.memory.crashed is True

    def test_scheduler_uses_state_mode(self):
        sim = Simulation()
        sim.state.scheduler.mode = SchedulerMode.INTERRUPT
        sim.state.scheduler.cursor = 10
        event = sim.scheduler.trigger()

        for _ in range(100):
            sim.advance()

        assert event.state == EventState.RUNNING

    def test_seed_makes_noise_reproducible(self):
        first = Simulation(seed=5)
        second = Simulation(seed=5)
        first.state.sensor.noise = True
        second.state.sensor.noise = True

        for _ in range(20):
            first.advance()
            second.advance()

        assert list(first.state.sensor.history) == list(second.state.sensor.history)


class TestReset:

    def _dirty(self, sim: Simulation) -> None:
        sim.state.sensor.setpoint = 80
        sim.state.actuator.input = -60
        sim.state.scheduler.mode = SchedulerMode.INTERRUPT
        sim.scheduler.trigger()
        sim.deadline.start(150)
        sim.memory.allocate_heap()
        for _ in range(50):
            sim.advance()

    def test_reset_restores_initial_values(self):
        sim = Simulation()
        self._dirty(sim)

        sim.reset()

        assert sim.state.sensor == SensorState()
        assert sim.state.actuator == ActuatorState()
        assert sim.state.scheduler == SchedulerState()
        assert sim.state.deadline == DeadlineState()
        assert sim.state.memory == MemoryState()

    def test_reset_keeps_clock(self):
        sim = Simulation()
        self._dirty(sim)
        sim.state.clock.running = False

        sim.reset()

        assert sim.state.clock.tick == 50
        assert sim.state.clock.running is False

    def test_reset_is_idempotent(self):
        once = Simulation()
        self._dirty(once)
        once.reset()

        twice = Simulation()
        self._dirty(twice)
        twice.reset()
        twice.reset()

        assert once.state == twice.state

    def test_models_follow_new_state(self):
        sim = Simulation()
        self._dirty(sim)

        sim.reset()
        sim.advance()

        assert sim.scheduler.state is sim.state.scheduler
        assert sim.state.scheduler.cursor == 2
        assert sim.memory.state is sim.state.memory

    def test_reset_keeps_deadline_handlers(self):
        sim = Simulation()
        on_crash = Mock()
        sim.deadline.on(DeadlineStatus.CRASH, on_crash)

        sim.reset()
        sim.deadline.start(101)
        for _ in range(101):
            sim.advance()

        on_crash.assert_called_once()
