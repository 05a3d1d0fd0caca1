import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Sequence, Tuple

import click

from intcode.common.errors import IntCodeError, NoMoreInput
from intcode.common.program import load_program
from intcode.host.ascii import AsciiConsole
from intcode.runtime.cpu import Processor, NeedsInput


EXIT_HALT = 0
EXIT_NO_INPUT = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def read_stdin_line() -> str:
    return sys.stdin.readline()


def ask_int(_) -> int:
    # End of input is the only way out; KeyboardInterrupt goes to the caller
    while True:
        click.echo('input: ', nl=False)
        line = read_stdin_line()

        if not line:
            raise NoMoreInput('Standard input exhausted')

        try:
            return int(line.strip())
        except ValueError:
            click.echo(f'Error: {line.strip()!r} is not a valid integer', err=True)


def show_int(_, value: int):
    click.echo(value)


def ask_line(_) -> str | None:
    line = read_stdin_line()

    if not line:
        return None

    return line.rstrip('\n')


def show_line(_, line: str):
    click.echo(line, nl=False)


def execute(program: Sequence[int], inputs: Sequence[int], trace: bool = False):
    proc = Processor(program, inputs, trace=trace)
    status, _ = proc.run_with_callbacks(None, ask_int, show_int)

    if isinstance(status, NeedsInput):
        raise NoMoreInput('Standard input exhausted')


def execute_ascii(program: Sequence[int], inputs: Sequence[int], trace: bool = False):
    console = AsciiConsole(Processor(program, inputs, trace=trace))
    status, _ = console.run_with_callbacks(None, ask_line, show_line)

    if isinstance(status, NeedsInput):
        raise NoMoreInput('Standard input exhausted')


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Logs every executed instruction')
@click.option('-a', '--ascii', 'ascii_mode', is_flag=True, help='Line-oriented text I/O')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Queues an input value')
@click.argument('program_filename', type=Path)
def run(verbose: bool, trace: bool, ascii_mode: bool, inputs: Tuple[int], program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('INTCODE')

    try:
        program = load_program(program_filename)

        if ascii_mode:
            execute_ascii(program, inputs, trace)
        else:
            execute(program, inputs, trace)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except NoMoreInput as e:
        lg.info(f'Execution stopped waiting for input: {e}')
        sys.exit(EXIT_NO_INPUT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except IntCodeError as e:
        lg.error(f'Execution halted on processor fault: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except Exception as e:
        lg.error(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
