"""
Analog temperature sensor feeding an ADC.

The transducer is linear with 10mV/°C and a 0.5V offset, the ADC reference
limits the readable range to 0..3.3V.
"""
from typing import Optional

import numpy as np

from embedlab_helper import clamp
from embedlab_sim.dataclasses import SensorState


class SensorModel:
    OFFSET_V = 0.5
    VOLTS_PER_DEGREE = 0.01
    NOISE_AMPLITUDE_V = 0.05
    V_REF = 3.3

    def __init__(
        self,
        state: SensorState,
        rng: Optional[np.random.Generator] = None
    ) -> None:
        self.state = state
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def transfer(cls, setpoint_celsius: float) -> float:
        return cls.OFFSET_V + setpoint_celsius * cls.VOLTS_PER_DEGREE

    def advance(self, setpoint_celsius: float, noise_enabled: bool) -> float:
        voltage = self.transfer(setpoint_celsius)
        if noise_enabled:
            voltage += float(self.rng.uniform(-self.NOISE_AMPLITUDE_V, self.NOISE_AMPLITUDE_V))

        voltage = clamp(voltage, 0.0, self.V_REF)

        # deque with maxlen drops the oldest sample
        self.state.history.append(voltage)
        self.state.voltage = voltage

        return voltage
