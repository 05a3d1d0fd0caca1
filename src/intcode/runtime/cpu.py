import logging as lg
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

import intcode.common.ops as ops
from intcode.common.errors import IntCodeError, InvalidWriteTarget, NoMoreInput
from intcode.common.program import parse_program
from intcode.runtime.memory import Memory
from intcode.runtime.decoder import Mode, Instruction, decode


@dataclass(frozen=True)
class Halted:
    def __str__(self) -> str:
        return 'HALTED'


@dataclass(frozen=True)
class NeedsInput:
    def __str__(self) -> str:
        return 'NEEDS-INPUT'


@dataclass(frozen=True)
class Output:
    value: int

    def __str__(self) -> str:
        return f'OUTPUT {self.value}'


type Status = Halted | NeedsInput | Output

HALTED = Halted()
NEEDS_INPUT = NeedsInput()


class Blocked(Exception):
    ''' The processor stopped without producing the expected output '''

    def __init__(self, status: Status):
        super().__init__(f'Processor blocked on {status}')
        self.status = status


def resolve(operand: int, mode: Mode, relative_base: int) -> int:
    ''' Memory address designated by an operand '''

    if mode == Mode.POSITION:
        return operand

    if mode == Mode.RELATIVE:
        return operand + relative_base

    raise InvalidWriteTarget(mode)


TState = TypeVar('TState')


class Processor:
    memory: Memory
    ip: int  # Instruction pointer
    relative_base: int
    inputs: deque[int]
    halted: bool
    fault: IntCodeError | None
    trace: bool

    def __init__(self, program: Iterable[int], inputs: Iterable[int] = (), trace: bool = False):
        self.memory = Memory(program)
        self.ip = 0
        self.relative_base = 0
        self.inputs = deque(inputs)
        self.halted = False
        self.fault = None
        self.trace = trace

    @classmethod
    def from_text(cls, text: str, inputs: Iterable[int] = (), trace: bool = False) -> 'Processor':
        return cls(parse_program(text), inputs, trace=trace)

    # - Helpers - #

    def debug_dump(self, inst: Instruction):
        lg.debug(
            f'IP:{self.ip} RB:{self.relative_base} IN:{len(self.inputs)} '
            f'{inst} {self.memory.cells[self.ip:self.ip + inst.width]}'
        )

    def operand(self, index: int) -> int:
        return self.memory.read(self.ip + index)

    def load(self, inst: Instruction, index: int) -> int:
        mode = inst.modes[index - 1]
        operand = self.operand(index)

        if mode == Mode.IMMEDIATE:
            return operand

        return self.memory.read(resolve(operand, mode, self.relative_base))

    def store(self, inst: Instruction, index: int, value: int):
        addr = resolve(self.operand(index), inst.modes[index - 1], self.relative_base)
        self.memory.write(addr, value)

    def arithm_pair(self, inst: Instruction, op: Callable[[int, int], int]):
        a = self.load(inst, 1)
        b = self.load(inst, 2)
        self.store(inst, 3, op(a, b))
        self.ip += inst.width

    def jump_if(self, inst: Instruction, cond: Callable[[int], bool]):
        val = self.load(inst, 1)
        addr = self.load(inst, 2)

        if cond(val):
            self.ip = addr
        else:
            self.ip += inst.width

    # - Operations - #

    def add(self, inst: Instruction):
        self.arithm_pair(inst, lambda a, b: a + b)

    def mul(self, inst: Instruction):
        self.arithm_pair(inst, lambda a, b: a * b)

    def inp(self, inst: Instruction):
        if not self.inputs:
            return NEEDS_INPUT

        self.store(inst, 1, self.inputs.popleft())
        self.ip += inst.width

    def out(self, inst: Instruction):
        val = self.load(inst, 1)
        self.ip += inst.width
        return Output(val)

    def jnz(self, inst: Instruction):
        self.jump_if(inst, lambda v: v != 0)

    def jzr(self, inst: Instruction):
        self.jump_if(inst, lambda v: v == 0)

    def slt(self, inst: Instruction):
        self.arithm_pair(inst, lambda a, b: int(a < b))

    def seq(self, inst: Instruction):
        self.arithm_pair(inst, lambda a, b: int(a == b))

    def arb(self, inst: Instruction):
        self.relative_base += self.load(inst, 1)
        self.ip += inst.width

    def hlt(self, inst: Instruction):
        # IP stays on the halt instruction
        self.halted = True
        return HALTED

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.INP: inp,
        ops.OUT: out,
        ops.JNZ: jnz,
        ops.JZR: jzr,
        ops.SLT: slt,
        ops.SEQ: seq,
        ops.ARB: arb,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def exec_next(self) -> Status | None:
        inst = decode(self.memory.read(self.ip))

        if self.trace:
            self.debug_dump(inst)

        handler = self.HANDLERS[inst.opcode]
        return handler(self, inst)

    def step(self) -> Status | None:
        if self.fault is not None:
            raise self.fault

        if self.halted:
            return HALTED

        try:
            return self.exec_next()
        except IntCodeError as e:
            lg.debug(f'Processor fault at IP:{self.ip}: {e}')
            self.fault = e
            raise

    def run(self) -> Status:
        ''' Executes until the processor halts, needs input or produces output '''

        while True:
            status = self.step()

            if status is not None:
                return status

    # - Host interface - #

    def write_int(self, value: int):
        self.inputs.append(value)

    def write_ints(self, values: Iterable[int]):
        self.inputs.extend(values)

    def read_next(self) -> int:
        status = self.run()

        if isinstance(status, Output):
            return status.value

        raise Blocked(status)

    def read_outputs(self, limit: int) -> tuple[list[int], Status | None]:
        values: list[int] = []

        while len(values) < limit:
            status = self.run()

            if not isinstance(status, Output):
                return values, status

            values.append(status.value)

        return values, None

    def run_to_halt(self) -> list[int]:
        outputs: list[int] = []

        while True:
            match self.run():
                case Output(value):
                    outputs.append(value)
                case NeedsInput():
                    raise NoMoreInput(f'Program waits for input at {self.ip}')
                case Halted():
                    return outputs

    def run_with_callbacks(
        self,
        state: TState,
        input_provider: Callable[[TState], int | None],
        output_consumer: Callable[[TState, int], Status | None]
    ) -> tuple[Status, TState]:
        '''
        Drives the processor to completion through host callbacks.

        The input provider is asked for a value whenever the queue runs dry;
        returning None or raising NoMoreInput stops the run with NEEDS_INPUT.
        The output consumer receives every output; returning a status stops
        the run with that status.
        '''

        while True:
            match self.run():
                case Output(value):
                    stop = output_consumer(state, value)

                    if stop is not None:
                        return stop, state

                case NeedsInput():
                    try:
                        value = input_provider(state)
                    except NoMoreInput:
                        value = None

                    if value is None:
                        return NEEDS_INPUT, state

                    self.write_int(value)

                case Halted():
                    return HALTED, state
