"""Interpreter for bfvm programs.

This module implements the execution half of the toolchain: it runs a
parsed `Program` against a `Tape`, a byte source and a byte sink with a
plain fetch-decode-execute loop. The instruction pointer starts at 0
and the program ends when it reaches `len(program)`; there is no halt
instruction, so a program that loops forever runs forever.

A byte source is any object with `read_byte() -> Optional[int]`
(None meaning end of stream) and a byte sink is any object with
`write_byte(int)`. See `bfvm.std.io` for adapters over Python streams.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type, Union

from .errors import ExecutionIOError
from .instructions import (
    Instruction, Increment, Decrement, MoveLeft, MoveRight,
    ReadByte, WriteByte, LoopOpen, LoopClose, Program,
)
from .parser import parse
from .std.io import memory_streams
from .tape import Tape, make_tape

Handler = Callable[[Instruction, int], int]


class Interpreter:
    """Executes resolved programs.

    `debug_level` controls how much is traced to `debug_file`:
    1 run summary, 2 I/O events, 3 loop jumps, 4 every instruction.
    """
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.steps = 0

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, program: Program, tape: Tape, source: Any, sink: Any) -> None:
        self.steps = 0
        try:
            if self.debug_level >= 1:
                self.debug(f"run {len(program)} instructions on {tape!r}")
            self.execute(program, self.build_handlers(tape, source, sink), tape)
            if self.debug_level >= 1:
                self.debug(f"finished after {self.steps} steps, cursor at {tape.cursor}")
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute(self, program: Program, handlers: Dict[Type[Instruction], Handler], tape: Tape) -> None:
        ip = 0
        size = len(program)
        trace = self.debug_level >= 4
        while ip < size:
            instr = program[ip]
            if trace:
                self.debug(f"{ip:>6} {instr.symbol} cursor={tape.cursor} cell={tape.read()}")
            # Jumps land on the matching bracket; the increment steps past it.
            ip = handlers[type(instr)](instr, ip) + 1
            self.steps += 1

    def build_handlers(self, tape: Tape, source: Any, sink: Any) -> Dict[Type[Instruction], Handler]:
        """Bind one handler per instruction type to this run's tape and streams."""
        trace_io = self.debug_level >= 2
        trace_jumps = self.debug_level >= 3

        def increment(instr: Instruction, ip: int) -> int:
            tape.increment()
            return ip

        def decrement(instr: Instruction, ip: int) -> int:
            tape.decrement()
            return ip

        def move_left(instr: Instruction, ip: int) -> int:
            tape.move_left()
            return ip

        def move_right(instr: Instruction, ip: int) -> int:
            tape.move_right()
            return ip

        def read_byte(instr: Instruction, ip: int) -> int:
            try:
                byte = source.read_byte()
            except OSError as e:
                raise ExecutionIOError('Error reading input', e) from e
            if byte is None:
                # End of input leaves the cell as it was
                if trace_io:
                    self.debug(f"read EOF at {ip}")
                return ip
            if trace_io:
                self.debug(f"read {byte} at {ip}")
            tape.write(byte)
            return ip

        def write_byte(instr: Instruction, ip: int) -> int:
            byte = tape.read()
            try:
                sink.write_byte(byte)
            except OSError as e:
                raise ExecutionIOError('Error writing output', e) from e
            if trace_io:
                self.debug(f"write {byte} at {ip}")
            return ip

        def loop_open(instr: LoopOpen, ip: int) -> int:
            if tape.read() == 0:
                if trace_jumps:
                    self.debug(f"skip loop {ip} -> {instr.target}")
                return instr.target
            return ip

        def loop_close(instr: LoopClose, ip: int) -> int:
            if tape.read() != 0:
                if trace_jumps:
                    self.debug(f"repeat loop {ip} -> {instr.target}")
                return instr.target
            return ip

        return {
            Increment: increment,
            Decrement: decrement,
            MoveLeft: move_left,
            MoveRight: move_right,
            ReadByte: read_byte,
            WriteByte: write_byte,
            LoopOpen: loop_open,
            LoopClose: loop_close,
        }


def execute(program: Program, tape: Tape, source: Any, sink: Any) -> None:
    """Run `program` on `tape`, reading from `source` and writing to `sink`."""
    Interpreter().run(program, tape, source, sink)


def run_program(source: str, stdin: Union[bytes, str] = b'', tape: Optional[Tape] = None,
                debug_level: int = 0) -> bytes:
    """Convenience function to parse and run program text, returning its output."""
    program = parse(source)
    if tape is None:
        tape = make_tape()
    reader, writer = memory_streams(stdin)
    interpreter = Interpreter(debug_level=debug_level)
    interpreter.run(program, tape, reader, writer)
    return writer.stream.getvalue()
