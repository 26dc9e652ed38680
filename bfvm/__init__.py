# bfvm package
# This package provides a parser and interpreter for a byte-tape esoteric language.
from .errors import (
    BfError, ParseError, UnmatchedLoopOpen, UnmatchedLoopClose,
    BfRuntimeError, TapeBoundsError, ExecutionIOError,
)
from .instructions import Program
from .interpreter import Interpreter, execute, run_program
from .parser import parse
from .tape import Tape, BoundedTape, CircularTape, make_tape

__all__ = [
    'parse',
    'execute',
    'run_program',
    'Interpreter',
    'Program',
    'Tape',
    'BoundedTape',
    'CircularTape',
    'make_tape',
    'BfError',
    'ParseError',
    'UnmatchedLoopOpen',
    'UnmatchedLoopClose',
    'BfRuntimeError',
    'TapeBoundsError',
    'ExecutionIOError',
]
