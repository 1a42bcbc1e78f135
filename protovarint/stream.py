# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte sources and sinks for the varint codec.

The codec only needs two capabilities: read one byte and write one byte.
This module names them and adapts in-memory buffers, binary file objects
and sockets to them.
"""

import logging
import socket
from typing import BinaryIO, Protocol

from .errors import EndOfInput, IoFailure

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Anything that yields one byte at a time."""

    def read_byte(self) -> int:
        """Return the next byte (0-255), raising EndOfInput when exhausted."""
        ...


class ByteSink(Protocol):
    """Anything that accepts one byte at a time."""

    def write_byte(self, byte: int) -> None:
        ...


class BufferReader:
    """
    Cursor over an in-memory byte buffer.

    The buffer is never copied or modified; ``offset`` tracks how far
    reading has progressed.
    """

    def __init__(self, data: bytes, offset: int = 0):
        if offset < 0:
            raise ValueError("Offset must be non-negative")
        self._data = data
        self._offset = offset

    @property
    def offset(self) -> int:
        """Position of the next byte to read."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(0, len(self._data) - self._offset)

    def read_byte(self) -> int:
        if self._offset >= len(self._data):
            raise EndOfInput("Varint decode: unexpected end of data")
        byte = self._data[self._offset]
        self._offset += 1
        return byte


class BufferWriter:
    """Growable in-memory byte sink."""

    def __init__(self):
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_byte(self, byte: int) -> None:
        self._buffer.append(byte)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)


class StreamReader:
    """
    Byte source over a binary file object (io.BytesIO, open files, ...).

    Tracks the number of bytes consumed in ``pos``.
    """

    def __init__(self, stream: BinaryIO):
        self.pos = 0
        self._stream = stream

    def read_byte(self) -> int:
        try:
            b = self._stream.read(1)
        except OSError as e:
            raise IoFailure(f"Read failed at position {self.pos}: {e}") from e
        if not b:
            raise EndOfInput("Unexpected end of stream")
        self.pos += 1
        return b[0]


class StreamWriter:
    """Byte sink over a binary file object."""

    def __init__(self, stream: BinaryIO):
        self.pos = 0
        self._stream = stream

    def write_byte(self, byte: int) -> None:
        try:
            self._stream.write(bytes([byte]))
        except OSError as e:
            raise IoFailure(f"Write failed at position {self.pos}: {e}") from e
        self.pos += 1


class SocketStream:
    """
    Byte source and sink over a connected socket.

    Reads and writes are unbuffered, one byte per system call; wrap the
    socket with ``sock.makefile("rwb")`` and use StreamReader/StreamWriter
    when throughput matters.
    """

    def __init__(self, sock: socket.socket):
        self._sock = sock

    def read_byte(self) -> int:
        try:
            b = self._sock.recv(1)
        except OSError as e:
            raise IoFailure(f"Socket read failed: {e}") from e
        if not b:
            logger.debug("Peer closed connection")
            raise EndOfInput("Connection closed by peer")
        return b[0]

    def write_byte(self, byte: int) -> None:
        try:
            self._sock.sendall(bytes([byte]))
        except OSError as e:
            raise IoFailure(f"Socket write failed: {e}") from e
