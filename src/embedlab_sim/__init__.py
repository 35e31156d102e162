from embedlab_sim.ActuatorModel import ActuatorModel
from embedlab_sim.Controls import Controls
from embedlab_sim.DeadlineMonitor import DeadlineMonitor, PRESETS
from embedlab_sim.EventScheduler import EventScheduler
from embedlab_sim.MemoryModel import MemoryModel
from embedlab_sim.SensorModel import SensorModel
from embedlab_sim.Simulation import Simulation
from embedlab_sim.dataclasses import (
  ActuatorState,
  DeadlineState,
  Event,
  MemoryState,
  SchedulerState,
  SensorState,
  SimulationClock,
  SimulationState,
)
from embedlab_sim.states import (
  DeadlineStatus,
  Direction,
  EventState,
  SchedulerMode,
)

__all__ = [
  "ActuatorModel",
  "Controls",
  "DeadlineMonitor",
  "PRESETS",
  "EventScheduler",
  "MemoryModel",
  "SensorModel",
  "Simulation",
  "ActuatorState",
  "DeadlineState",
  "Event",
  "MemoryState",
  "SchedulerState",
  "SensorState",
  "SimulationClock",
  "SimulationState",
  "DeadlineStatus",
  "Direction",
  "EventState",
  "SchedulerMode",
]
