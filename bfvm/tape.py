"""Memory tapes for the bfvm interpreter.

A tape is a fixed number of byte cells and a cursor pointing at the
current cell. Cell arithmetic always wraps at 8 bits. The two variants
differ only in what happens when the cursor is moved past an edge:
`BoundedTape` refuses with a `TapeBoundsError`, `CircularTape` wraps
around to the other end.
"""

from __future__ import annotations

from .errors import TapeBoundsError

DEFAULT_CAPACITY = 1024


class Tape:
    """Byte cells plus a cursor. Subclasses decide how the cursor moves."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"tape capacity must be a positive integer, got {capacity!r}")
        self._cells = bytearray(capacity)
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._cells)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cells(self) -> bytes:
        """Snapshot of every cell."""
        return bytes(self._cells)

    def move_left(self) -> None:
        raise NotImplementedError

    def move_right(self) -> None:
        raise NotImplementedError

    def increment(self) -> None:
        self._cells[self._cursor] = (self._cells[self._cursor] + 1) & 0xFF

    def decrement(self) -> None:
        self._cells[self._cursor] = (self._cells[self._cursor] - 1) & 0xFF

    def read(self) -> int:
        return self._cells[self._cursor]

    def write(self, byte: int) -> None:
        self._cells[self._cursor] = byte & 0xFF

    def __repr__(self) -> str:
        return f"<{type(self).__name__} capacity={self.capacity} cursor={self._cursor}>"


class BoundedTape(Tape):
    """Tape whose edges are hard: moving past them is an error."""

    def move_left(self) -> None:
        if self._cursor == 0:
            raise TapeBoundsError(self._cursor, len(self._cells), 'left')
        self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor == len(self._cells) - 1:
            raise TapeBoundsError(self._cursor, len(self._cells), 'right')
        self._cursor += 1


class CircularTape(Tape):
    """Tape whose ends are joined into a ring."""

    def move_left(self) -> None:
        self._cursor = (self._cursor - 1) % len(self._cells)

    def move_right(self) -> None:
        self._cursor = (self._cursor + 1) % len(self._cells)


def make_tape(capacity: int = DEFAULT_CAPACITY, circular: bool = False) -> Tape:
    """Build a zeroed tape of `capacity` cells with the chosen edge policy."""
    if circular:
        return CircularTape(capacity)
    return BoundedTape(capacity)
