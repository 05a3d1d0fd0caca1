# Opcodes
ADD = 1     # A + B -> [C]
MUL = 2     # A * B -> [C]
INP = 3     # input -> [A]
OUT = 4     # A -> output
JNZ = 5     # if A .ne 0 jmp B
JZR = 6     # if A .eq 0 jmp B
SLT = 7     # A .lt B -> [C]
SEQ = 8     # A .eq B -> [C]
ARB = 9     # RB + A -> RB
HLT = 99

# Addressing modes
POSITION = 0
IMMEDIATE = 1
RELATIVE = 2

# Operand count per opcode
WIDTHS = {
    ADD: 3,
    MUL: 3,
    INP: 1,
    OUT: 1,
    JNZ: 2,
    JZR: 2,
    SLT: 3,
    SEQ: 3,
    ARB: 1,
    HLT: 0
}

MNEMONICS = {
    ADD: 'add',
    MUL: 'mul',
    INP: 'inp',
    OUT: 'out',
    JNZ: 'jnz',
    JZR: 'jzr',
    SLT: 'slt',
    SEQ: 'seq',
    ARB: 'arb',
    HLT: 'hlt'
}
