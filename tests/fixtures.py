# type: ignore
import io

import pytest

from um32.runtime.arrays import ArrayTable
from um32.runtime.console import Console
import um32.runtime.cpu as cpu


@pytest.fixture
def with_table():
    yield ArrayTable([0, 0, 0, 0])


@pytest.fixture
def with_console():
    yield Console(io.BytesIO(), io.BytesIO())


@pytest.fixture
def with_cpu(with_console):
    # Bare machine: tests poke registers and call handlers directly
    yield cpu.CPU([0] * 8, with_console)
