from dataclasses import dataclass, field
from collections import deque

VIEWS = ("home", "temperature", "control", "interrupt", "deadline", "memory")


@dataclass
class ApplicationModel:
    # Navigation
    view: str = "home"

    # Display
    fullscreen: bool = False

    # Timing
    loop_history: deque[float] = field(default_factory=lambda: deque(maxlen=300))
    simulation_interval: float = 0.0
    last_simulation_update: float = 0.0

    # Lifecycle
    running: bool = True
