class IntCodeError(Exception):
    ''' Fault of a single processor, fatal to that instance '''
    pass


class NegativeAddress(IntCodeError):
    def __init__(self, address: int):
        super().__init__(f'Cannot access negative address {address}')
        self.address = address


class UnknownOpcode(IntCodeError):
    def __init__(self, code: int):
        super().__init__(f'Unknown opcode {code}')
        self.code = code


class UnknownMode(IntCodeError):
    def __init__(self, mode: int):
        super().__init__(f'Unknown addressing mode {mode}')
        self.mode = mode


class InvalidWriteTarget(IntCodeError):
    def __init__(self, mode: int):
        super().__init__(f'Addressing mode {mode} cannot be written to')
        self.mode = mode


class WordOverflow(IntCodeError):
    def __init__(self, value: int):
        super().__init__(f'Value {value} does not fit in a word')
        self.value = value


class MemoryExhausted(IntCodeError):
    def __init__(self, address: int):
        super().__init__(f'Cannot grow memory to address {address}')
        self.address = address


class NoMoreInput(Exception):
    ''' Raised by hosts to stop a run that waits for input '''
    pass


class ProgramSyntaxError(ValueError):
    pass
