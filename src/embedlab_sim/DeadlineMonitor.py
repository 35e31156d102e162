"""
Single task run against a deadline.

A preset starts the task, afterwards it runs one millisecond per tick until
its load is used up. Finishing at or before the deadline is a success,
anything later is a crash. Both outcomes are terminal until the next start.
"""
from collections import defaultdict
import logging
from typing import Callable, Dict, List

from embedlab_sim.dataclasses import DeadlineState
from embedlab_sim.states import DeadlineStatus

PRESETS: Dict[str, int] = {
    "light": 30,
    "heavy": 80,
    "overload": 150,
}


class DeadlineMonitor:
    def __init__(self, state: DeadlineState) -> None:
        self.state = state
        self.status_handlers: Dict[DeadlineStatus, List[Callable[[DeadlineState], None]]] = defaultdict(list)

    def on(self, status: DeadlineStatus, handler: Callable[[DeadlineState], None]) -> None:
        self.status_handlers[status].append(handler)

    def start(self, load_ms: int) -> None:
        self.state.current = 0
        self.state.load = load_ms
        self.handle_status_change(DeadlineStatus.RUNNING)

    def advance(self) -> None:
        match self.state.status:
            case DeadlineStatus.RUNNING:
                self.state.current += 1
                if self.state.current >= self.state.load:
                    if self.state.current <= self.state.max:
                        self.handle_status_change(DeadlineStatus.SUCCESS)
                    else:
                        self.handle_status_change(DeadlineStatus.CRASH)

            case DeadlineStatus.IDLE | DeadlineStatus.SUCCESS | DeadlineStatus.CRASH:
                pass

    def handle_status_change(self, new_status: DeadlineStatus) -> None:
        logging.debug(f"Deadline status changed from '{self.state.status.value}' to '{new_status.value}'")
        self.state.status = new_status

        if new_status == DeadlineStatus.CRASH:
            logging.info(f"Deadline missed: {self.state.current}ms > {self.state.max}ms")

        for fn in self.status_handlers[new_status]:
            fn(self.state)
