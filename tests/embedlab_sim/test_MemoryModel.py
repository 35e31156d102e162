"""Tests for MemoryModel - stack/heap exhaustion."""
from embedlab_sim import MemoryModel, MemoryState


class TestHeap:

    def test_allocate_increments_heap(self):
        state = MemoryState()
        model = MemoryModel(state)

        model.allocate_heap()
        model.allocate_heap()

        assert state.heap == 512

    def test_allocate_custom_amount(self):
        state = MemoryState()
        model = MemoryModel(state)

        model.allocate_heap(100)

        assert state.heap == 100


class TestOverflow:

    def test_no_crash_within_capacity(self):
        """Stack 1 (40px) + 1024 bytes heap (204.8px) fits into 260px."""
        state = MemoryState()
        model = MemoryModel(state)

        for _ in range(4):
            model.allocate_heap()

        assert model.advance() is False
        assert state.crashed is False

    def test_crash_when_capacity_exceeded(self):
        state = MemoryState()
        model = MemoryModel(state)

        for _ in range(5):
            model.allocate_heap()

        assert model.advance() is True
        assert state.crashed is True

    def test_stack_alone_can_overflow(self):
        state = MemoryState(stack=7)
        model = MemoryModel(state)

        assert model.advance() is True

    def test_exactly_full_is_not_a_crash(self):
        state = MemoryState(stack=6, heap=100)  # 240 + 20 = 260
        model = MemoryModel(state)

        assert model.advance() is False

    def test_heights(self):
        assert MemoryModel.stack_height(3) == 120
        assert MemoryModel.heap_height(1280) == 256


class TestStickyCrash:

    def test_allocation_ignored_after_crash(self):
        state = MemoryState()
        model = MemoryModel(state)
        for _ in range(5):
            model.allocate_heap()
        model.advance()

        for _ in range(10):
            model.allocate_heap()

        assert state.heap == 1280
        assert state.crashed is True

    def test_crash_survives_advance(self):
        state = MemoryState(stack=8)
        model = MemoryModel(state)
        model.advance()

        state.heap = 0
        model.advance()

        assert state.crashed is True

    def test_set_stack_clears_crash(self):
        state = MemoryState(stack=8)
        model = MemoryModel(state)
        model.advance()

        model.set_stack(2)

        assert state.stack == 2
        assert state.crashed is False

    def test_crash_returns_if_still_over_capacity(self):
        state = MemoryState()
        model = MemoryModel(state)
        for _ in range(5):
            model.allocate_heap()
        model.advance()

        model.set_stack(1)
        assert model.advance() is True

        model.set_stack(0)  # 0 + 256px fits
        assert model.advance() is False
