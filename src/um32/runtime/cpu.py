import logging as lg
from typing import Callable

import um32.common.ops as ops
from um32.common.hwconf import REGISTERS, WORD_MASK
from um32.runtime.arrays import ArrayTable
from um32.runtime.console import Console
from um32.runtime.decode import Instruction, Snapshot, decode, format_state
from um32.runtime.faults import Fault, OutOfBounds, DivisionByZero, UnknownOpcode


class CPU():
    pc: int  # Program counter, offset into array 0
    gp: list[int]  # General purpose registers
    halted: bool
    cycles: int  # Executed instructions

    def __init__(self, program: list[int], console: Console, trace: bool = False):
        self.arrays = ArrayTable(program)
        self.console = console    # Ref. to Console
        self.trace = trace

        self.pc = 0
        self.gp = [0] * REGISTERS
        self.halted = False
        self.cycles = 0

    # - Helpers - #

    def debug_dump(self, pc: int | None = None):
        lg.debug(format_state(self.pc if pc is None else pc, self.gp))

    def snapshot(self, inst: Instruction | None, address: int) -> Snapshot:
        return Snapshot(inst, address, self.pc, tuple(self.gp), self.cycles)

    def arithm_pair(self, inst: Instruction, op: Callable[[int, int], int]):
        self.gp[inst.a] = op(self.gp[inst.b], self.gp[inst.c]) & WORD_MASK

    # - Operations - #

    def cmov(self, inst: Instruction):
        if self.gp[inst.c] != 0:
            self.gp[inst.a] = self.gp[inst.b]

    def arrind(self, inst: Instruction):
        self.gp[inst.a] = self.arrays.index(self.gp[inst.b], self.gp[inst.c])

    def arramend(self, inst: Instruction):
        self.arrays.amend(self.gp[inst.a], self.gp[inst.b], self.gp[inst.c])

    def add(self, inst: Instruction):
        self.arithm_pair(inst, lambda b, c: b + c)

    def mul(self, inst: Instruction):
        self.arithm_pair(inst, lambda b, c: b * c)

    def div(self, inst: Instruction):
        if self.gp[inst.c] == 0:
            raise DivisionByZero(f'Register {inst.c} holds a zero divisor')

        self.arithm_pair(inst, lambda b, c: b // c)

    def nand(self, inst: Instruction):
        self.arithm_pair(inst, lambda b, c: ~(b & c))

    def halt(self, inst: Instruction):
        self.halted = True

    def alloc(self, inst: Instruction):
        self.gp[inst.b] = self.arrays.allocate(self.gp[inst.c])

    def abandon(self, inst: Instruction):
        self.arrays.abandon(self.gp[inst.c])

    def output(self, inst: Instruction):
        self.console.write(self.gp[inst.c])

    def input(self, inst: Instruction):
        self.gp[inst.c] = self.console.read()

    def loadprog(self, inst: Instruction):
        self.arrays.load(self.gp[inst.b])
        self.pc = self.gp[inst.c]

    def orthog(self, inst: Instruction):
        self.gp[inst.a] = inst.value

    HANDLERS = {
        ops.CMOV: cmov,
        ops.ARRIND: arrind,
        ops.ARRAMEND: arramend,
        ops.ADD: add,
        ops.MUL: mul,
        ops.DIV: div,
        ops.NAND: nand,
        ops.HALT: halt,
        ops.ALLOC: alloc,
        ops.ABANDON: abandon,
        ops.OUTPUT: output,
        ops.INPUT: input,
        ops.LOADPROG: loadprog,
        ops.ORTHOG: orthog,
    }

    # -- Implementation -- #

    def fetch(self) -> int:
        program = self.arrays.program

        if self.pc >= len(program):
            raise OutOfBounds(f'Program counter {self.pc} outside program of {len(program)} words')

        word = program[self.pc]
        self.pc += 1
        return word

    def exec_next(self):
        address = self.pc

        try:
            word = self.fetch()
        except Fault as fault:
            fault.attach(self.snapshot(None, address))
            raise

        inst = decode(word)

        if self.trace:
            lg.debug(str(inst))
            self.debug_dump(address)

        try:
            handler = self.HANDLERS.get(inst.opcode)

            if handler is None:
                raise UnknownOpcode(f'Opcode {inst.opcode} is not defined')

            handler(self, inst)
        except Fault as fault:
            fault.attach(self.snapshot(inst, address))
            raise

        self.cycles += 1

    def run(self):
        while not self.halted:
            self.exec_next()
