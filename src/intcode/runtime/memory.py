# Auto-extending word memory

from typing import Iterable

from intcode.common.errors import NegativeAddress, WordOverflow, MemoryExhausted
from intcode.common.hwconf import WORD_MIN, WORD_MAX


class Memory:
    cells: list[int]

    def __init__(self, words: Iterable[int] = ()):
        self.cells = list(words)

    def __len__(self) -> int:
        return len(self.cells)

    def ensure(self, addr: int):
        if addr < 0:
            raise NegativeAddress(addr)

        if addr >= len(self.cells):
            try:
                self.cells.extend([0] * (addr + 1 - len(self.cells)))
            except MemoryError:
                raise MemoryExhausted(addr) from None

    def read(self, addr: int) -> int:
        if addr < 0:
            raise NegativeAddress(addr)

        # Cells past the end read as zero without being allocated
        if addr >= len(self.cells):
            return 0

        return self.cells[addr]

    def write(self, addr: int, value: int):
        if value < WORD_MIN or value > WORD_MAX:
            raise WordOverflow(value)

        self.ensure(addr)
        self.cells[addr] = value

    def load(self, words: Iterable[int]):
        self.cells = list(words)

    def snapshot(self) -> list[int]:
        return list(self.cells)
