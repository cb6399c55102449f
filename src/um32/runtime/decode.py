from dataclasses import dataclass

import um32.common.ops as ops
import um32.common.hwconf as hw


@dataclass(frozen=True)
class Instruction:
    word: int
    opcode: int
    a: int
    b: int
    c: int
    value: int = 0  # orthography immediate only

    @property
    def name(self) -> str:
        return ops.name(self.opcode)

    def __str__(self):
        if self.opcode == ops.ORTHOG:
            return f'{self.name}\tA:{self.a}\tV:{self.value}'

        return f'{self.name}\tA:{self.a}\tB:{self.b}\tC:{self.c}'


def decode(word: int) -> Instruction:
    """Splits a platter into its opcode and operand fields.

    Orthography places register A right below the opcode and uses the
    remaining 25 bits as an immediate, so B and C are reported as 0.
    """
    opcode = (word >> hw.OPCODE_SHIFT) & hw.OPCODE_MASK

    if opcode == ops.ORTHOG:
        a = (word >> hw.ORTHOG_REG_SHIFT) & hw.REG_MASK
        return Instruction(word, opcode, a, 0, 0, word & hw.ORTHOG_VALUE_MASK)

    return Instruction(
        word,
        opcode,
        (word >> hw.REG_A_SHIFT) & hw.REG_MASK,
        (word >> hw.REG_B_SHIFT) & hw.REG_MASK,
        (word >> hw.REG_C_SHIFT) & hw.REG_MASK
    )


def format_state(pc: int, gp: list[int] | tuple[int, ...]) -> str:
    regs = ' '.join(f'R[{i}]={v}' for i, v in enumerate(gp))
    return f'PC={pc} {regs}'


@dataclass(frozen=True)
class Snapshot:
    """Machine state at the instruction that faulted.

    `address` is where the instruction was fetched from, `pc` is the
    program counter after the fetch. A fault raised by the fetch itself
    carries no instruction.
    """
    instruction: Instruction | None
    address: int
    pc: int
    registers: tuple[int, ...]
    cycles: int

    def __str__(self):
        if self.instruction is None:
            inst = f'<no instruction at {self.address}>'
        else:
            inst = f'{self.instruction}\t[{self.instruction.word:08X} at {self.address}]'

        return f'{inst}\n{format_state(self.pc, self.registers)} cycles={self.cycles}'
