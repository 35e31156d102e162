"""Derived values for the render pass. Pure functions over simulation state."""
import math
from typing import List, Tuple

from embedlab_helper import sign
from embedlab_sim.MemoryModel import MemoryModel
from embedlab_sim.SensorModel import SensorModel
from embedlab_sim.dataclasses import DeadlineState
from embedlab_sim.states import DeadlineStatus, Direction

ADC_MAX = 4095
DEAD_ZONE = 5


def adc_value(voltage: float) -> int:
    return math.floor((voltage / SensorModel.V_REF) * ADC_MAX)


def sensed_temperature(voltage: float) -> float:
    return (voltage - SensorModel.OFFSET_V) / SensorModel.VOLTS_PER_DEGREE


def duty_cycle(command_input: float) -> float:
    return abs(command_input) / 100


def direction(command_input: float) -> Direction:
    if abs(command_input) <= DEAD_ZONE:
        return Direction.STOPPED

    return Direction.FORWARD if sign(command_input) > 0 else Direction.REVERSE


def display_rpm(rpm: float) -> int:
    return round(abs(rpm) * 10)


def pwm_segments(duty: float, cycles: int = 5) -> List[Tuple[float, float, bool]]:
    """
    One (start, end, high) triple per level change across `cycles` periods,
    positions normalized to 0..1.
    """
    period = 1 / cycles
    segments = []
    for i in range(cycles):
        start = i * period
        if duty <= 0.02:
            segments.append((start, start + period, False))
        elif duty >= 0.98:
            segments.append((start, start + period, True))
        else:
            segments.append((start, start + period * duty, True))
            segments.append((start + period * duty, start + period, False))

    return segments


def deadline_progress(state: DeadlineState) -> float:
    """Percent of the deadline used, capped at 120 so overruns stay visible."""
    if state.max <= 0:
        return 120.0

    return min(120.0, (state.current / state.max) * 100)


def is_overrun(state: DeadlineState) -> bool:
    return state.status == DeadlineStatus.RUNNING and state.current > state.max


def stack_percent(stack: int) -> int:
    return round((stack / MemoryModel.STACK_MAX_LEVEL) * 100)


def memory_heights(stack: int, heap: int) -> Tuple[int, float]:
    return MemoryModel.stack_height(stack), MemoryModel.heap_height(heap)
