from typing import Tuple

from embedlab_sim.dataclasses import ActuatorState


class ActuatorModel:
    """
    Motor driven by a signed command in percent.

    Speed follows the command with a first order lag to mimic the inertia of
    the rotor, the angle integrates speed and is never wrapped here.
    """
    SPEED_GAIN = 0.5
    SMOOTHING = 0.05

    def __init__(self, state: ActuatorState) -> None:
        self.state = state

    def advance(self, command_input: float) -> Tuple[float, float]:
        target = command_input * self.SPEED_GAIN
        self.state.rpm += (target - self.state.rpm) * self.SMOOTHING
        self.state.angle += self.state.rpm

        self.state.output = abs(command_input)
        self.state.input_history.append(command_input)

        return self.state.rpm, self.state.angle
