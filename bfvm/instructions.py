"""Instruction definitions for the bfvm virtual machine.

The classes defined in this module represent the resolved instruction
stream produced by the parser and consumed by the interpreter. Each
instruction corresponds to one of the eight command characters of the
language. Loop instructions carry the index of their matching bracket,
so the interpreter never has to search for it at run time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union, overload


@dataclass(frozen=True)
class Instruction:
    """Base class for all instructions."""
    symbol = ''


@dataclass(frozen=True)
class Increment(Instruction):
    symbol = '+'


@dataclass(frozen=True)
class Decrement(Instruction):
    symbol = '-'


@dataclass(frozen=True)
class MoveLeft(Instruction):
    symbol = '<'


@dataclass(frozen=True)
class MoveRight(Instruction):
    symbol = '>'


@dataclass(frozen=True)
class ReadByte(Instruction):
    symbol = ','


@dataclass(frozen=True)
class WriteByte(Instruction):
    symbol = '.'


@dataclass(frozen=True)
class LoopOpen(Instruction):
    target: int  # index of the matching LoopClose
    symbol = '['


@dataclass(frozen=True)
class LoopClose(Instruction):
    target: int  # index of the matching LoopOpen
    symbol = ']'


# Instructions without operands, keyed by their command character.
SIMPLE_INSTRUCTIONS = {
    '+': Increment(),
    '-': Decrement(),
    '<': MoveLeft(),
    '>': MoveRight(),
    ',': ReadByte(),
    '.': WriteByte(),
}


class Program:
    """An immutable, indexed sequence of resolved instructions."""

    __slots__ = ('_instructions',)

    def __init__(self, instructions: Iterable[Instruction] = ()):
        self._instructions: Tuple[Instruction, ...] = tuple(instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    @overload
    def __getitem__(self, index: int) -> Instruction: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Instruction, ...]: ...

    def __getitem__(self, index: Union[int, slice]):
        return self._instructions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self._instructions == other._instructions

    def __hash__(self) -> int:
        return hash(self._instructions)

    def __repr__(self) -> str:
        return f"Program({self.to_source()!r})"

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return self._instructions

    def to_source(self) -> str:
        """Render the program as canonical text (command characters only)."""
        return ''.join(instr.symbol for instr in self._instructions)

    def validate(self) -> None:
        """Check that every loop instruction points at its partner.

        Raises ValueError describing the first broken pair. Programs built
        by the parser always pass; this exists for programs assembled by
        hand or loaded from JSON.
        """
        size = len(self._instructions)
        for index, instr in enumerate(self._instructions):
            if isinstance(instr, LoopOpen):
                partner_type = LoopClose
            elif isinstance(instr, LoopClose):
                partner_type = LoopOpen
            else:
                continue
            target = instr.target
            if not 0 <= target < size:
                raise ValueError(f"{type(instr).__name__} at {index} targets {target}, outside the program")
            partner = self._instructions[target]
            if not isinstance(partner, partner_type) or partner.target != index:
                raise ValueError(
                    f"{type(instr).__name__} at {index} targets {target}, "
                    f"which is not its matching {partner_type.__name__}"
                )
            if isinstance(instr, LoopOpen) and target < index:
                raise ValueError(f"LoopOpen at {index} targets {target}, before itself")
