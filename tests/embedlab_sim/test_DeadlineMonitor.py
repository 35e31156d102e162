"""Tests for DeadlineMonitor - task execution against a deadline."""
from unittest.mock import Mock

from embedlab_sim import DeadlineMonitor, DeadlineState, DeadlineStatus, PRESETS


def run(monitor: DeadlineMonitor, ticks: int) -> None:
    for _ in range(ticks):
        monitor.advance()


class TestStart:

    def test_initial_state(self):
        state = DeadlineState()

        assert state.status == DeadlineStatus.IDLE
        assert state.max == 100
        assert state.current == 0
        assert state.load == 30

    def test_start_resets_progress(self):
        state = DeadlineState(current=77, status=DeadlineStatus.CRASH)
        monitor = DeadlineMonitor(state)

        monitor.start(50)

        assert state.status == DeadlineStatus.RUNNING
        assert state.current == 0
        assert state.load == 50

    def test_idle_does_not_advance(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)

        run(monitor, 10)

        assert state.current == 0
        assert state.status == DeadlineStatus.IDLE


class TestResolution:

    def test_still_running_before_load(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)
        monitor.start(30)

        run(monitor, 29)

        assert state.status == DeadlineStatus.RUNNING
        assert state.current == 29

    def test_success_within_deadline(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)
        monitor.start(PRESETS["light"])

        run(monitor, 30)

        assert state.status == DeadlineStatus.SUCCESS
        assert state.current == 30

    def test_exactly_at_deadline_is_success(self):
        """current == max at resolution counts as deadline met."""
        state = DeadlineState(max=100)
        monitor = DeadlineMonitor(state)
        monitor.start(100)

        run(monitor, 100)

        assert state.current == state.max
        assert state.status == DeadlineStatus.SUCCESS

    def test_one_past_deadline_is_crash(self):
        state = DeadlineState(max=100)
        monitor = DeadlineMonitor(state)
        monitor.start(101)

        run(monitor, 100)
        assert state.status == DeadlineStatus.RUNNING

        monitor.advance()

        assert state.current == 101
        assert state.status == DeadlineStatus.CRASH

    def test_outcome_is_terminal(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)
        monitor.start(PRESETS["overload"])

        run(monitor, 300)

        assert state.status == DeadlineStatus.CRASH
        assert state.current == 150

    def test_restart_after_crash(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)
        monitor.start(150)
        run(monitor, 150)

        monitor.start(80)
        run(monitor, 80)

        assert state.status == DeadlineStatus.SUCCESS


class TestStatusHandlers:

    def test_handler_called_on_crash(self):
        state = DeadlineState()
        monitor = DeadlineMonitor(state)
        on_crash = Mock()
        on_success = Mock()
        monitor.on(DeadlineStatus.CRASH, on_crash)
        monitor.on(DeadlineStatus.SUCCESS, on_success)

        monitor.start(120)
        run(monitor, 120)

        on_crash.assert_called_once_with(state)
        on_success.assert_not_called()

    def test_handler_called_on_start(self):
        monitor = DeadlineMonitor(DeadlineState())
        on_running = Mock()
        monitor.on(DeadlineStatus.RUNNING, on_running)

        monitor.start(10)

        on_running.assert_called_once()
