import pytest

from intcode.common.errors import NegativeAddress, WordOverflow, MemoryExhausted
from intcode.common.hwconf import WORD_MIN, WORD_MAX
from intcode.runtime.memory import Memory


def test_read_past_end_is_zero():
    memory = Memory([1, 0, 0, 0, 99])

    assert memory.read(5) == 0
    assert memory.read(1000) == 0
    assert memory.read(1 << 40) == 0
    # Reads do not allocate
    assert len(memory) == 5
    assert memory.snapshot() == [1, 0, 0, 0, 99]


def test_write_grows_with_zero_fill():
    memory = Memory([99])
    memory.write(10, 7)

    assert len(memory) == 11
    assert memory.snapshot() == [99] + [0] * 9 + [7]


def test_negative_address():
    memory = Memory([1, 2, 3])

    with pytest.raises(NegativeAddress) as e:
        memory.read(-1)

    assert e.value.address == -1

    with pytest.raises(NegativeAddress):
        memory.write(-5, 0)

    assert len(memory) == 3


def test_word_range():
    memory = Memory()
    memory.write(0, WORD_MAX)
    memory.write(1, WORD_MIN)

    with pytest.raises(WordOverflow):
        memory.write(2, WORD_MAX + 1)

    with pytest.raises(WordOverflow):
        memory.write(2, WORD_MIN - 1)

    assert memory.snapshot() == [WORD_MAX, WORD_MIN]


def test_snapshot_is_a_copy():
    memory = Memory([1, 2])
    cells = memory.snapshot()
    cells[0] = 42

    assert memory.read(0) == 1


def test_load_replaces_contents():
    memory = Memory([1, 2, 3])
    memory.load([9])

    assert memory.snapshot() == [9]


class FullList(list):
    def extend(self, items):
        raise MemoryError()


def test_growth_failure_is_a_fault():
    memory = Memory([1, 2])
    memory.cells = FullList(memory.cells)

    with pytest.raises(MemoryExhausted) as e:
        memory.write(10, 1)

    assert e.value.address == 10
    assert memory.snapshot() == [1, 2]
