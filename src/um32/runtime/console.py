from typing import BinaryIO

from um32.common.hwconf import CONSOLE_MAX, END_OF_INPUT
from um32.runtime.faults import IOContractViolation


class Console():
    """Byte-at-a-time console over a pair of binary streams."""

    def __init__(self, output: BinaryIO, input: BinaryIO):
        self.output = output
        self.input = input

    def write(self, value: int):
        if value > CONSOLE_MAX:
            raise IOContractViolation(f'Output value {value} is not a byte')

        self.output.write(bytes((value,)))
        self.output.flush()

    def read(self) -> int:
        # Blocks until a byte or end of stream
        buf = self.input.read(1)

        if not buf:
            return END_OF_INPUT

        return buf[0]

    def flush(self):
        self.output.flush()
