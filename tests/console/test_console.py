# type: ignore
import io

import pytest

from um32.runtime.console import Console
from um32.runtime.faults import IOContractViolation

import unit_utils as u
from fixtures import with_cpu, with_console  # noqa: F401


def test_write_bytes(with_console):  # noqa: F811
    with_console.write(0x48)
    with_console.write(0)
    with_console.write(255)

    assert with_console.output.getvalue() == b'H\x00\xff'


def test_write_out_of_range(with_console):  # noqa: F811
    with pytest.raises(IOContractViolation):
        with_console.write(256)

    assert with_console.output.getvalue() == b''


def test_read_until_end():
    console = Console(io.BytesIO(), io.BytesIO(b'a\xff'))

    assert console.read() == ord('a')
    assert console.read() == 0xFF
    assert console.read() == 0xFFFFFFFF
    assert console.read() == 0xFFFFFFFF


def test_output_instruction(with_cpu):  # noqa: F811
    with_cpu.gp[3] = ord('K')
    u.step(with_cpu, u.output(3))

    assert with_cpu.console.output.getvalue() == b'K'


def test_output_contract(with_cpu):  # noqa: F811
    with_cpu.gp[3] = 0x148

    with pytest.raises(IOContractViolation) as info:
        u.step(with_cpu, u.output(3))

    assert info.value.snapshot.instruction.name == 'output'
    assert info.value.snapshot.registers[3] == 0x148
    assert with_cpu.console.output.getvalue() == b''


def test_input_instruction():
    proc, _ = u.execute([u.inp(1), u.inp(2), u.inp(3), u.halt()], stdin=b'\x00z')

    assert proc.gp[1:4] == [0, ord('z'), 0xFFFFFFFF]
