from enum import Enum


class SchedulerMode(Enum):
    POLLING = "polling"
    INTERRUPT = "interrupt"


class EventState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"


class DeadlineStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCESS = "success"
    CRASH = "crash"


class Direction(Enum):
    FORWARD = "forward"
    REVERSE = "reverse"
    STOPPED = "stopped"
