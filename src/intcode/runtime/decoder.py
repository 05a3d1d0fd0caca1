from dataclasses import dataclass
from enum import IntEnum

import intcode.common.ops as ops
from intcode.common.errors import UnknownOpcode, UnknownMode


class Mode(IntEnum):
    POSITION = ops.POSITION
    IMMEDIATE = ops.IMMEDIATE
    RELATIVE = ops.RELATIVE


@dataclass(frozen=True)
class Instruction:
    opcode: int
    modes: tuple[Mode, Mode, Mode]

    @property
    def width(self) -> int:
        return 1 + ops.WIDTHS[self.opcode]

    def __str__(self) -> str:
        modes = ''.join(str(int(m)) for m in self.modes[:ops.WIDTHS[self.opcode]])
        return f'{ops.MNEMONICS[self.opcode]}/{modes or "-"}'


def decode_mode(digit: int) -> Mode:
    try:
        return Mode(digit)
    except ValueError:
        raise UnknownMode(digit) from None


def decode(word: int) -> Instruction:
    if word < 0:
        raise UnknownOpcode(word)

    opcode = word % 100

    if opcode not in ops.WIDTHS:
        raise UnknownOpcode(opcode)

    modes = (
        decode_mode(word // 100 % 10),
        decode_mode(word // 1000 % 10),
        decode_mode(word // 10000 % 10)
    )

    return Instruction(opcode, modes)
