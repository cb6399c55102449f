import struct

from um32.common.hwconf import WORD_SIZE
from um32.runtime.faults import InvalidProgramSize


def decode_program(program: bytes) -> list[int]:
    """Converts a program image into big-endian platters."""
    size = len(program)

    if size == 0 or size % WORD_SIZE != 0:
        raise InvalidProgramSize(f'Program of {size} bytes is not a positive multiple of {WORD_SIZE}')

    return list(struct.unpack(f'>{size // WORD_SIZE}I', program))


def encode_program(words: list[int]) -> bytes:
    return struct.pack(f'>{len(words)}I', *words)
