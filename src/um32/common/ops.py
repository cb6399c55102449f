# Standard operators: A, B, C in bits 8..6, 5..3, 2..0
CMOV = 0x00      # if C .ne 0: B -> A
ARRIND = 0x01    # M[B][C] -> A
ARRAMEND = 0x02  # C -> M[A][B]
ADD = 0x03       # B + C -> A
MUL = 0x04       # B * C -> A
DIV = 0x05       # B // C -> A
NAND = 0x06      # ~(B & C) -> A
HALT = 0x07      # stop
ALLOC = 0x08     # new array of C words -> B
ABANDON = 0x09   # free M[C]
OUTPUT = 0x0A    # C -> console
INPUT = 0x0B     # console -> C
LOADPROG = 0x0C  # copy M[B] -> M[0]; C -> PC

# Special operator: A in bits 27..25, value in bits 24..0
ORTHOG = 0x0D    # value -> A

NAMES = {
    CMOV: 'cmov',
    ARRIND: 'arrind',
    ARRAMEND: 'arramend',
    ADD: 'add',
    MUL: 'mul',
    DIV: 'div',
    NAND: 'nand',
    HALT: 'halt',
    ALLOC: 'alloc',
    ABANDON: 'abandon',
    OUTPUT: 'output',
    INPUT: 'input',
    LOADPROG: 'loadprog',
    ORTHOG: 'orthog',
}

UNKNOWN = 'UNKNOWNOP'


def name(opcode: int) -> str:
    return NAMES.get(opcode, UNKNOWN)
