from typing import Optional, Tuple


class BfError(Exception):
    """Root of all errors raised by bfvm."""


class ParseError(BfError):
    """Structural error found while parsing program text.

    `position` is the offset of the offending bracket in the original
    source, comment characters included.
    """
    kind = 'ParseError'

    def __init__(self, position: int):
        super().__init__(f"{self.kind} at position {position}")
        self.position = position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.position == other.position

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.position))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.position})"

    def location(self, source: str) -> Tuple[int, int]:
        """Return the 1-based (line, column) of the error in `source`."""
        line = source.count('\n', 0, self.position) + 1
        column = self.position - (source.rfind('\n', 0, self.position) + 1) + 1
        return line, column


class UnmatchedLoopOpen(ParseError):
    kind = "unmatched '['"


class UnmatchedLoopClose(ParseError):
    kind = "unmatched ']'"


class BfRuntimeError(BfError):
    """Error that aborts a running program."""


class TapeBoundsError(BfRuntimeError):
    """The cursor of a bounded tape was moved past one of its edges."""
    def __init__(self, cursor: int, capacity: int, direction: str):
        super().__init__(f"cannot move {direction} from cell {cursor} of a {capacity}-cell tape")
        self.cursor = cursor
        self.capacity = capacity
        self.direction = direction


class ExecutionIOError(BfRuntimeError):
    """Reading from the input or writing to the output failed."""
    def __init__(self, message: str, cause: Optional[OSError] = None):
        super().__init__(message if cause is None else f"{message}: {cause}")
        self.cause = cause
