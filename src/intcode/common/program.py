''' Program text grammar '''

import logging as lg
from pathlib import Path

import pyparsing as pp

from intcode.common.errors import ProgramSyntaxError
from intcode.common.hwconf import WORD_MIN, WORD_MAX


word = pp.Regex('[+-]?[0-9]+').setParseAction(lambda r: int(r[0]))
program = word + pp.ZeroOrMore(pp.Suppress(',') + word)


def parse_program(text: str) -> list[int]:
    try:
        words = program.parse_string(text, parse_all=True).as_list()
    except pp.ParseException as e:
        raise ProgramSyntaxError(
            f'Malformed program at line {e.lineno}, column {e.col}'
        ) from e

    for position, value in enumerate(words):
        if value < WORD_MIN or value > WORD_MAX:
            raise ProgramSyntaxError(f'Word {position} out of range: {value}')

    return words


def load_program(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')
    return parse_program(filepath.read_text())
