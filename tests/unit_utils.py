from pathlib import Path

from intcode.common.program import load_program


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def load_testdata(name: str) -> list[int]:
    return load_program(find_file(f'testdata/{name}.intcode'))
