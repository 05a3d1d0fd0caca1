import pytest

import intcode.common.ops as ops
from intcode.common.errors import UnknownOpcode, UnknownMode
from intcode.runtime.decoder import Mode, decode


def test_split_modes():
    inst = decode(1002)

    assert inst.opcode == ops.MUL
    assert inst.modes == (Mode.POSITION, Mode.IMMEDIATE, Mode.POSITION)
    assert inst.width == 4
    assert str(inst) == 'mul/010'


def test_relative_destination():
    inst = decode(21101)

    assert inst.opcode == ops.ADD
    assert inst.modes == (Mode.IMMEDIATE, Mode.IMMEDIATE, Mode.RELATIVE)


@pytest.mark.parametrize('word, width', [
    (1, 4), (2, 4), (3, 2), (4, 2), (5, 3), (6, 3), (7, 4), (8, 4), (9, 2), (99, 1)
])
def test_widths(word, width):
    assert decode(word).width == width


def test_halt_has_no_operands():
    assert str(decode(99)) == 'hlt/-'


@pytest.mark.parametrize('word, code', [(0, 0), (42, 42), (10, 10), (198, 98)])
def test_unknown_opcode(word, code):
    with pytest.raises(UnknownOpcode) as e:
        decode(word)

    assert e.value.code == code


def test_negative_word():
    with pytest.raises(UnknownOpcode):
        decode(-1)


def test_unknown_mode():
    with pytest.raises(UnknownMode) as e:
        decode(301)

    assert e.value.mode == 3

    # Modes are checked for every operand slot
    with pytest.raises(UnknownMode):
        decode(50099)
