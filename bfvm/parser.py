"""Parser for bfvm programs.

This module implements a two-stage parsing pipeline:

1. **Lexing**: The raw source is fed into a Lark parser configured with
   a grammar that knows only the eight command characters. Every other
   character is a comment and is dropped by the lexer's ignore pattern.
   Each surviving token remembers its offset in the original source.

2. **Loop resolution**: The command tokens are scanned once from left
   to right. A stack of pending `[` instructions pairs each `]` with
   its opener, and both loop instructions are given the index of the
   other, so the interpreter can jump without searching.

The `parse` function is the public entry point and returns an
immutable `Program`. Structural errors are raised as `ParseError`
subclasses and no partial program is ever returned.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Lark, Token

from .errors import UnmatchedLoopClose, UnmatchedLoopOpen
from .instructions import SIMPLE_INSTRUCTIONS, Instruction, LoopClose, LoopOpen, Program


BF_GRAMMAR = r"""
    start: COMMAND*

    COMMAND: /[+\-<>,.\[\]]/

    // Anything that is not a command is a comment
    COMMENT: /[^+\-<>,.\[\]]+/
    %ignore COMMENT
"""


BF_PARSER = Lark(
    BF_GRAMMAR,
    parser='lalr',
    lexer='basic',
)


def tokenize(source: str) -> List[Token]:
    """Return the command tokens of `source`, comments removed."""
    tree = BF_PARSER.parse(source)
    return list(tree.children)


def parse(source: str) -> Program:
    """Parse program text into a Program with resolved loop targets."""
    instructions: List[Optional[Instruction]] = []
    # (source offset, instruction index) of every '[' still waiting for its ']'
    pending: List[Tuple[int, int]] = []
    for token in tokenize(source):
        symbol = token.value
        if symbol == '[':
            pending.append((token.start_pos, len(instructions)))
            instructions.append(None)  # patched when the ']' is seen
        elif symbol == ']':
            if not pending:
                raise UnmatchedLoopClose(token.start_pos)
            _, open_index = pending.pop()
            close_index = len(instructions)
            instructions.append(LoopClose(open_index))
            instructions[open_index] = LoopOpen(close_index)
        else:
            instructions.append(SIMPLE_INSTRUCTIONS[symbol])
    if pending:
        # Report the outermost unmatched bracket
        raise UnmatchedLoopOpen(pending[0][0])
    return Program(instructions)
