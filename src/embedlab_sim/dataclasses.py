"""Simulation state containers, one per subsystem plus the aggregate record."""
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

from embedlab_sim.states import DeadlineStatus, EventState, SchedulerMode

SENSOR_HISTORY_LENGTH = 50
ACTUATOR_HISTORY_LENGTH = 100


def _zeros(length: int) -> deque[float]:
    return deque([0.0] * length, maxlen=length)


@dataclass
class SimulationClock:
    tick: int = 0
    running: bool = True


@dataclass
class SensorState:
    setpoint: float = 25.0
    noise: bool = False
    voltage: float = 0.0
    history: deque[float] = field(default_factory=lambda: _zeros(SENSOR_HISTORY_LENGTH))


@dataclass
class ActuatorState:
    input: float = 0.0
    output: float = 0.0
    rpm: float = 0.0
    angle: float = 0.0
    input_history: deque[float] = field(default_factory=lambda: _zeros(ACTUATOR_HISTORY_LENGTH))


@dataclass
class Event:
    start_x: int
    state: EventState = EventState.PENDING
    end_x: int = 0


@dataclass
class SchedulerState:
    mode: SchedulerMode = SchedulerMode.POLLING
    isr_len: int = 10
    cursor: int = 0
    events: List[Event] = field(default_factory=list)
    isr_active: bool = False

    def running_event(self) -> Optional[Event]:
        for event in self.events:
            if event.state == EventState.RUNNING:
                return event

        return None


@dataclass
class DeadlineState:
    max: int = 100
    current: int = 0
    load: int = 30
    status: DeadlineStatus = DeadlineStatus.IDLE


@dataclass
class MemoryState:
    stack: int = 1
    heap: int = 0
    crashed: bool = False


@dataclass
class SimulationState:
    """
    The single simulation record. The clock survives a reset, every other
    member is replaced with a fresh instance.
    """
    clock: SimulationClock = field(default_factory=SimulationClock)
    sensor: SensorState = field(default_factory=SensorState)
    actuator: ActuatorState = field(default_factory=ActuatorState)
    scheduler: SchedulerState = field(default_factory=SchedulerState)
    deadline: DeadlineState = field(default_factory=DeadlineState)
    memory: MemoryState = field(default_factory=MemoryState)
