''' Amplifier chains with optional feedback '''

import logging as lg
from itertools import permutations
from typing import Sequence

from intcode.common.errors import NoMoreInput
from intcode.runtime.cpu import Processor, Output, Halted, NeedsInput


def run_chain(program: Sequence[int], phases: Sequence[int], signal: int = 0) -> int:
    '''
    Passes the signal through one amplifier per phase setting.

    The last amplifier feeds back into the first until an amplifier halts.
    Returns the last signal emitted by the last amplifier.
    '''

    if not phases:
        raise ValueError('No phase settings given')

    amps = [Processor(program, [phase]) for phase in phases]
    last = len(amps) - 1
    thruster = None
    index = 0

    while True:
        amp = amps[index]
        amp.write_int(signal)

        match amp.run():
            case Output(value):
                signal = value

                if index == last:
                    thruster = value

            case Halted():
                if thruster is None:
                    raise NoMoreInput(f'Amplifier {index} halted before the chain produced a signal')

                return thruster

            case NeedsInput():
                raise NoMoreInput(f'Amplifier {index} waits for more than one signal')

        index = (index + 1) % len(amps)


def best_phases(program: Sequence[int], phases: Sequence[int]) -> tuple[int, tuple[int, ...]]:
    best = max(
        ((run_chain(program, order), order) for order in permutations(phases)),
        key=lambda result: result[0]
    )

    lg.info(f'Best phases {best[1]} give {best[0]}')
    return best
