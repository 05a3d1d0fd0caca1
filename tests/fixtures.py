# type: ignore
import pytest

from intcode.runtime.cpu import Processor

import unit_utils


@pytest.fixture
def echo_program():
    yield unit_utils.load_testdata('echo')


@pytest.fixture
def echo(echo_program):
    yield Processor(echo_program)


@pytest.fixture
def nic_program():
    yield unit_utils.load_testdata('nic')
