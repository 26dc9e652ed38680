import io
import sys
from typing import Tuple, Union

from .basic_io import ByteReader, ByteWriter

__all__ = ['ByteReader', 'ByteWriter', 'memory_streams', 'stdio_streams']


def memory_streams(data: Union[bytes, bytearray, str] = b'') -> Tuple[ByteReader, ByteWriter]:
    """Byte source preloaded with `data` and an in-memory byte sink.

    The sink's collected output is available as `writer.stream.getvalue()`.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return ByteReader(io.BytesIO(bytes(data))), ByteWriter(io.BytesIO())


def stdio_streams() -> Tuple[ByteReader, ByteWriter]:
    """Byte source and sink over the process's binary stdin and stdout."""
    stdout = sys.stdout.buffer
    return ByteReader(sys.stdin.buffer), ByteWriter(stdout, autoflush=stdout.isatty())
