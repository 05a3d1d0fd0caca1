import pytest

from intcode.common.errors import NoMoreInput
from intcode.host.amplifiers import run_chain, best_phases

import unit_utils


@pytest.mark.parametrize('name, signal, phases', [
    ('amp_single_1', 43210, (4, 3, 2, 1, 0)),
    ('amp_single_2', 54321, (0, 1, 2, 3, 4)),
    ('amp_single_3', 65210, (1, 0, 4, 3, 2)),
])
def test_single_pass(name, signal, phases):
    program = unit_utils.load_testdata(name)

    assert run_chain(program, phases) == signal
    assert best_phases(program, range(5)) == (signal, phases)


@pytest.mark.parametrize('name, signal, phases', [
    ('amp_feedback_1', 139629729, (9, 8, 7, 6, 5)),
    ('amp_feedback_2', 18216, (9, 7, 8, 5, 6)),
])
def test_feedback_loop(name, signal, phases):
    program = unit_utils.load_testdata(name)

    assert run_chain(program, phases) == signal
    assert best_phases(program, range(5, 10)) == (signal, phases)


def test_no_phases():
    with pytest.raises(ValueError):
        run_chain([99], [])


def test_amplifier_wants_more_input():
    with pytest.raises(NoMoreInput):
        run_chain([3, 0, 3, 1, 3, 2, 99], [0, 1])


def test_amplifier_halts_without_signal():
    with pytest.raises(NoMoreInput):
        run_chain([3, 0, 99], [0])
