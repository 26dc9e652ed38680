from typing import BinaryIO, Optional

from bfvm.errors import ExecutionIOError


class ByteReader:
    """Byte source over a binary stream.

    `read_byte` returns the next byte as an int, or None once the stream
    is exhausted. Any OS-level failure becomes an ExecutionIOError.
    """
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        try:
            data = self.stream.read(1)
        except OSError as e:
            raise ExecutionIOError('Error reading input', e) from e
        if not data:
            return None
        return data[0]


class ByteWriter:
    """Byte sink over a binary stream."""
    def __init__(self, stream: BinaryIO, autoflush: bool = False):
        self.stream = stream
        self.autoflush = autoflush

    def write_byte(self, byte: int) -> None:
        try:
            self.stream.write(bytes((byte,)))
            if self.autoflush:
                self.stream.flush()
        except OSError as e:
            raise ExecutionIOError('Error writing output', e) from e

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise ExecutionIOError('Error flushing output', e) from e
