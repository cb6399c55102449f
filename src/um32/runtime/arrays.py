import logging as lg
from dataclasses import dataclass, field

from um32.common.hwconf import PROGRAM_ARRAY
from um32.runtime.faults import InvalidArrayReference, InvalidAbandon, OutOfBounds


@dataclass
class MemoryArray:
    words: list[int] = field(default_factory=list)
    live: bool = True

    def __len__(self):
        return len(self.words)


class ArrayTable():
    """Id-indexed collection of platter arrays.

    Id 0 holds the running program and is always live. Abandoned ids go
    to a free list and are handed out again by `allocate` before any
    new id is minted.
    """

    arrays: list[MemoryArray]
    free: list[int]

    def __init__(self, program: list[int]):
        self.arrays = [MemoryArray(program)]
        self.free = []

    def __len__(self):
        return len(self.arrays)

    # - Helpers - #

    def live(self, ident: int) -> MemoryArray:
        if ident >= len(self.arrays) or not self.arrays[ident].live:
            raise InvalidArrayReference(f'Array {ident} is not allocated')

        return self.arrays[ident]

    @staticmethod
    def check_offset(ident: int, array: MemoryArray, offset: int):
        if offset >= len(array):
            raise OutOfBounds(f'Offset {offset} outside array {ident} of {len(array)} words')

    @property
    def program(self) -> list[int]:
        return self.arrays[PROGRAM_ARRAY].words

    # - Operations - #

    def index(self, ident: int, offset: int) -> int:
        array = self.live(ident)
        self.check_offset(ident, array, offset)
        return array.words[offset]

    def amend(self, ident: int, offset: int, value: int):
        array = self.live(ident)
        self.check_offset(ident, array, offset)
        array.words[offset] = value

    def allocate(self, size: int) -> int:
        array = MemoryArray([0] * size)

        if self.free:
            ident = self.free.pop()
            self.arrays[ident] = array
        else:
            ident = len(self.arrays)
            self.arrays.append(array)

        lg.debug(f'Allocating array {ident}, {size} words')
        return ident

    def abandon(self, ident: int):
        if ident == PROGRAM_ARRAY:
            raise InvalidAbandon('Array 0 cannot be abandoned')

        if ident >= len(self.arrays):
            raise InvalidArrayReference(f'Array {ident} is not allocated')

        array = self.arrays[ident]

        if not array.live:
            raise InvalidAbandon(f'Array {ident} is already abandoned')

        array.live = False
        array.words = []
        self.free.append(ident)
        lg.debug(f'Abandoned array {ident}')

    def load(self, ident: int) -> int:
        """Replaces the program array with a copy of array `ident`."""
        source = self.live(ident)

        if ident != PROGRAM_ARRAY:
            self.arrays[PROGRAM_ARRAY] = MemoryArray(list(source.words))
            lg.debug(f'Loaded array {ident} as program, {len(source)} words')

        return len(self.arrays[PROGRAM_ARRAY])
