"""
Stack and heap sharing one memory region.

Sizes are kept in the pixel space of the memory tower: each stack level is
40px, every 5 bytes of heap are 1px. The process dies once both together
no longer fit.
"""
import logging

from embedlab_sim.dataclasses import MemoryState


class MemoryModel:
    STACK_PX_PER_LEVEL = 40
    HEAP_BYTES_PER_PX = 5
    TOWER_HEIGHT = 300
    TOWER_HEADER = 40
    CAPACITY = TOWER_HEIGHT - TOWER_HEADER
    ALLOCATION_SIZE = 256
    STACK_MAX_LEVEL = 10

    def __init__(self, state: MemoryState) -> None:
        self.state = state

    @classmethod
    def stack_height(cls, stack: int) -> int:
        return stack * cls.STACK_PX_PER_LEVEL

    @classmethod
    def heap_height(cls, heap: int) -> float:
        return heap / cls.HEAP_BYTES_PER_PX

    def set_stack(self, level: int) -> None:
        self.state.stack = level
        if self.state.crashed:
            logging.debug("Stack level changed, clearing memory crash")
            self.state.crashed = False

    def allocate_heap(self, amount: int = ALLOCATION_SIZE) -> None:
        if self.state.crashed:
            return

        self.state.heap += amount

    def advance(self) -> bool:
        """Evaluate overflow, returns the (sticky) crash flag."""
        if not self.state.crashed:
            used = self.stack_height(self.state.stack) + self.heap_height(self.state.heap)
            if used > self.CAPACITY:
                logging.info(
                    f"Memory overflow: stack {self.state.stack}, heap {self.state.heap} bytes"
                )
                self.state.crashed = True

        return self.state.crashed
