''' Line-oriented text I/O over a processor '''

import logging as lg
from typing import Callable, TypeVar

from intcode.common.hwconf import ASCII_LIMIT, NEWLINE
from intcode.runtime.cpu import Processor, Status, Output, NeedsInput, NEEDS_INPUT


def is_control(code: int) -> bool:
    return code < 32 or code == 127


TState = TypeVar('TState')


class AsciiConsole:
    processor: Processor

    def __init__(self, processor: Processor):
        self.processor = processor

    def write_text(self, text: str):
        self.processor.write_ints(text.encode('ascii'))

    def write_line(self, text: str):
        self.write_text(text)
        self.processor.write_int(NEWLINE)

    def read_line(self) -> tuple[str, Status | None]:
        '''
        Collects characters up to and including the next control character.

        A value outside the ASCII range ends the line and is appended in
        decimal on its own line. If the processor stops first, the partial
        line is returned with the stopping status.
        '''

        chars: list[str] = []

        while True:
            status = self.processor.run()

            if not isinstance(status, Output):
                return ''.join(chars), status

            code = status.value

            if code < 0 or code >= ASCII_LIMIT:
                lg.debug(f'Non-text output {code}')
                chars.append(f'\n{code}\n')
                return ''.join(chars), None

            chars.append(chr(code))

            if is_control(code):
                return ''.join(chars), None

    def run_with_callbacks(
        self,
        state: TState,
        input_provider: Callable[[TState], str | None],
        line_consumer: Callable[[TState, str], Status | None]
    ) -> tuple[Status, TState]:
        while True:
            line, status = self.read_line()

            if line:
                stop = line_consumer(state, line)

                if stop is not None:
                    return stop, state

            if status is None:
                continue

            if not isinstance(status, NeedsInput):
                return status, state

            text = input_provider(state)

            if text is None:
                return NEEDS_INPUT, state

            self.write_line(text)
