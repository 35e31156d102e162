"""
Interrupt vs. polling dispatch of asynchronous events.

A cursor sweeps a window of `wrap_at` positions. Events become ready once the
cursor passes their start position. In interrupt mode a ready event is
serviced right away, in polling mode only while the cursor is inside a poll
window at the start of every poll period. There is a single handler, so at
most one event is ever running.
"""
import logging
from typing import List, Optional, assert_never

from embedlab_sim.dataclasses import Event, SchedulerState
from embedlab_sim.states import EventState, SchedulerMode


class EventScheduler:
    CURSOR_STEP = 2
    WRAP_AT = 800
    POLL_PERIOD = 200
    POLL_WINDOW = 5
    TICKS_PER_ISR_UNIT = 4
    TRIGGER_OFFSET = 200

    def __init__(self, state: SchedulerState) -> None:
        self.state = state

    def trigger(self) -> Event:
        event = Event(start_x=self.state.cursor + self.TRIGGER_OFFSET)
        self.state.events.append(event)
        logging.debug(f"Event queued at {event.start_x} (cursor {self.state.cursor})")

        return event

    def advance(
        self,
        mode: SchedulerMode,
        isr_len: int,
        cursor_step: int = CURSOR_STEP,
        wrap_at: int = WRAP_AT
    ) -> Optional[Event]:
        """
        Move the cursor one step and service the handler.

        Returns the event that changed state during this step, if any.
        """
        state = self.state
        state.cursor = (state.cursor + cursor_step) % wrap_at

        # The cursor never exceeds wrap_at, so this only drops events that
        # were placed at negative positions
        state.events = [e for e in state.events if e.start_x > state.cursor - wrap_at]

        active = state.running_event()
        if active is not None:
            if state.cursor >= active.end_x:
                active.state = EventState.DONE
                state.isr_active = False
                logging.debug(f"Handler finished at {state.cursor}")
                return active

            return None

        for event in state.events:
            if event.state == EventState.PENDING and self.is_ready(event, mode):
                event.state = EventState.RUNNING
                event.end_x = state.cursor + isr_len * self.TICKS_PER_ISR_UNIT
                state.isr_active = True
                logging.debug(
                    f"Dispatched event {event.start_x} in {mode.value} mode "
                    f"at {state.cursor}, latency {state.cursor - event.start_x}"
                )
                return event

        return None

    def is_ready(self, event: Event, mode: SchedulerMode) -> bool:
        cursor = self.state.cursor
        if cursor < event.start_x:
            return False

        match mode:
            case SchedulerMode.INTERRUPT:
                return True
            case SchedulerMode.POLLING:
                return self.in_poll_window(cursor)
            case _:
                assert_never(mode)

    @classmethod
    def in_poll_window(cls, cursor: int) -> bool:
        return cursor % cls.POLL_PERIOD < cls.POLL_WINDOW

    @classmethod
    def poll_markers(cls, cursor: int, width: int, origin: int = 100) -> List[int]:
        """
        Screen x positions of upcoming poll windows relative to a cursor drawn
        at `origin`.
        """
        offset = cursor % cls.POLL_PERIOD
        return [i - offset + origin for i in range(0, width, cls.POLL_PERIOD)]
