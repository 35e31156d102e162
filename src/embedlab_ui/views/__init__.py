from .ControlView import ControlView
from .DeadlineView import DeadlineView
from .HomeView import HomeView
from .InterruptView import InterruptView
from .MemoryView import MemoryView
from .TemperatureView import TemperatureView
from .View import View

__all__ = [
  "ControlView",
  "DeadlineView",
  "HomeView",
  "InterruptView",
  "MemoryView",
  "TemperatureView",
  "View",
]
