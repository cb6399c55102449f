import sys
from pathlib import Path
import logging as lg
import traceback
from typing import BinaryIO

import click

from um32.runtime.console import Console
from um32.runtime.faults import Fault
from um32.runtime.loader import decode_program
import um32.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_FAULT = 1
EXIT_KEYBOARD = 3
EXIT_READ_ERROR = 4
EXIT_EXEC_ERROR = 100


def execute(
    program: bytes,
    output: BinaryIO | None = None,
    input: BinaryIO | None = None,
    trace: bool = False
) -> cpu.CPU:
    """Bootstraps a machine from a program image and runs it until halt.

    Faults propagate to the caller with a snapshot attached. Console
    streams default to the process' standard streams.
    """
    if output is None:
        output = click.get_binary_stream('stdout')

    if input is None:
        input = click.get_binary_stream('stdin')

    console = Console(output, input)
    proc = cpu.CPU(decode_program(program), console, trace)
    lg.info(f'UM32 initialized, program {len(program)} bytes')

    try:
        proc.run()
    finally:
        console.flush()

    lg.info(f'Program halted after {proc.cycles} cycles')
    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Logs every executed instruction')
@click.argument('program_filename', type=Path)
def run(verbose: bool, trace: bool, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('UM32')

    try:
        program = program_filename.read_bytes()

    except OSError as e:
        lg.error(f'Cannot read program {program_filename}: {e.strerror}')
        sys.exit(EXIT_READ_ERROR)

    try:
        execute(program, trace=trace)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except Fault as fault:
        lg.error(f'Execution halted on fault {fault.report()}')
        sys.exit(EXIT_FAULT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


def main():
    run(auto_envvar_prefix='UM32')


if __name__ == '__main__':
    main()
