"""Tests for ActuatorModel - first order lag motor response."""
import pytest

from embedlab_sim import ActuatorModel, ActuatorState


class TestActuatorStep:

    def test_single_step(self):
        """One tick moves 5% of the way to half the command."""
        state = ActuatorState()
        model = ActuatorModel(state)

        rpm, angle = model.advance(100)

        assert rpm == pytest.approx(2.5)
        assert angle == pytest.approx(2.5)
        assert state.output == 100

    def test_angle_accumulates_rpm(self):
        state = ActuatorState()
        model = ActuatorModel(state)

        total = 0.0
        for _ in range(10):
            rpm, angle = model.advance(60)
            total += rpm

        assert angle == pytest.approx(total)

    def test_angle_is_not_wrapped(self):
        state = ActuatorState()
        model = ActuatorModel(state)

        for _ in range(500):
            model.advance(100)

        assert state.angle > 360

    def test_output_is_magnitude(self):
        state = ActuatorState()
        model = ActuatorModel(state)

        model.advance(-40)

        assert state.output == 40

    def test_input_history_window(self):
        state = ActuatorState()
        model = ActuatorModel(state)

        for i in range(150):
            model.advance(i - 75)

        assert len(state.input_history) == 100
        assert state.input_history[-1] == 74


class TestConvergence:
    """rpm approaches input * 0.5 monotonically and never overshoots."""

    @pytest.mark.parametrize("command", [100, 37, -80, -5])
    def test_monotonic_without_overshoot(self, command):
        state = ActuatorState()
        model = ActuatorModel(state)
        target = command * 0.5

        previous_error = abs(target - state.rpm)
        for _ in range(300):
            model.advance(command)
            error = abs(target - state.rpm)

            assert error <= previous_error
            # rpm stays on the same side of the target it started from
            if target > 0:
                assert state.rpm <= target
            else:
                assert state.rpm >= target

            previous_error = error

        assert state.rpm == pytest.approx(target, abs=1e-3)

    def test_decays_towards_zero_when_released(self):
        state = ActuatorState(rpm=40.0)
        model = ActuatorModel(state)

        for _ in range(50):
            previous = state.rpm
            model.advance(0)
            assert 0 <= state.rpm < previous
