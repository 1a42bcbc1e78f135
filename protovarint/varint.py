# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (Protocol Buffers wire format).

Each byte carries 7 payload bits, least-significant group first, and
bit 7 is set when more bytes follow. Signed values are zig-zag encoded
before being written as unsigned varints.

Decoders pull bytes one at a time from any object with a
``read_byte() -> int`` method and writers push them to any object with
a ``write_byte(byte)`` method (see ``protovarint.stream``).
"""

from typing import Callable, Iterator, NamedTuple, Tuple

from .errors import EndOfInput, Overflow
from .stream import BufferReader, ByteSink, ByteSource
from .zigzag import (
    zigzag_decode_32,
    zigzag_decode_64,
    zigzag_encode_32,
    zigzag_encode_64,
)

# Maximum encoded size of a 32-bit varint
VARINT_32_MAX_BYTES = 5

# Maximum encoded size of a 64-bit varint
VARINT_64_MAX_BYTES = 10

UINT32_MAX = 0xFFFF_FFFF
UINT64_MAX = 0xFFFF_FFFF_FFFF_FFFF
INT32_MIN = -0x8000_0000
INT32_MAX = 0x7FFF_FFFF
INT64_MIN = -0x8000_0000_0000_0000
INT64_MAX = 0x7FFF_FFFF_FFFF_FFFF


def _encode(value: int, limit: int, kind: str) -> bytes:
    if not 0 <= value <= limit:
        raise ValueError(f"Cannot encode {value} as {kind} varint")

    result = bytearray()
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def _decode(source: ByteSource, max_bytes: int, limit: int, kind: str) -> int:
    value = 0
    shift = 0
    count = 0

    while True:
        if count == max_bytes:
            raise Overflow(f"Varint decode: more than {max_bytes} bytes for {kind}")

        byte = source.read_byte()
        count += 1
        value |= (byte & 0x7F) << shift

        if not (byte & 0x80):
            break

        shift += 7

    # Last group of a maximum-length varint may carry bits above the width
    if value > limit:
        raise Overflow(f"Varint decode: value too large for {kind}")

    return value


def _write(sink: ByteSink, encoded: bytes) -> int:
    for byte in encoded:
        sink.write_byte(byte)
    return len(encoded)


def encode_unsigned_32(value: int) -> bytes:
    """
    Encode an unsigned 32-bit integer as a varint.

    Args:
        value: Integer in [0, 2**32 - 1]

    Returns:
        1 to 5 varint-encoded bytes

    Raises:
        ValueError: If value does not fit in a u32
    """
    return _encode(value, UINT32_MAX, "u32")


def encode_unsigned_64(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a varint.

    Args:
        value: Integer in [0, 2**64 - 1]

    Returns:
        1 to 10 varint-encoded bytes

    Raises:
        ValueError: If value does not fit in a u64
    """
    return _encode(value, UINT64_MAX, "u64")


def encode_signed_32(value: int) -> bytes:
    """Zig-zag encode an i32 and write it as a varint."""
    return encode_unsigned_32(zigzag_encode_32(value))


def encode_signed_64(value: int) -> bytes:
    """Zig-zag encode an i64 and write it as a varint."""
    return encode_unsigned_64(zigzag_encode_64(value))


def decode_unsigned_32(source: ByteSource) -> int:
    """
    Read an unsigned 32-bit varint from a byte source.

    Args:
        source: Object with a read_byte() method

    Returns:
        Decoded value

    Raises:
        EndOfInput: If the source runs out before the last byte
        Overflow: If the varint is longer than 5 bytes or exceeds 32 bits
    """
    return _decode(source, VARINT_32_MAX_BYTES, UINT32_MAX, "u32")


def decode_unsigned_64(source: ByteSource) -> int:
    """
    Read an unsigned 64-bit varint from a byte source.

    Args:
        source: Object with a read_byte() method

    Returns:
        Decoded value

    Raises:
        EndOfInput: If the source runs out before the last byte
        Overflow: If the varint is longer than 10 bytes or exceeds 64 bits
    """
    return _decode(source, VARINT_64_MAX_BYTES, UINT64_MAX, "u64")


def decode_signed_32(source: ByteSource) -> int:
    """Read a zig-zag encoded i32 varint from a byte source."""
    return zigzag_decode_32(decode_unsigned_32(source))


def decode_signed_64(source: ByteSource) -> int:
    """Read a zig-zag encoded i64 varint from a byte source."""
    return zigzag_decode_64(decode_unsigned_64(source))


def write_unsigned_32(sink: ByteSink, value: int) -> int:
    """Write a u32 varint to a byte sink, returning the number of bytes written."""
    return _write(sink, encode_unsigned_32(value))


def write_unsigned_64(sink: ByteSink, value: int) -> int:
    """Write a u64 varint to a byte sink, returning the number of bytes written."""
    return _write(sink, encode_unsigned_64(value))


def write_signed_32(sink: ByteSink, value: int) -> int:
    """Write a zig-zag encoded i32 varint to a byte sink."""
    return _write(sink, encode_signed_32(value))


def write_signed_64(sink: ByteSink, value: int) -> int:
    """Write a zig-zag encoded i64 varint to a byte sink."""
    return _write(sink, encode_signed_64(value))


def encoded_length_32(value: int) -> int:
    """Number of bytes encode_unsigned_32(value) produces."""
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"Cannot encode {value} as u32 varint")
    return max(1, (value.bit_length() + 6) // 7)


def encoded_length_64(value: int) -> int:
    """Number of bytes encode_unsigned_64(value) produces."""
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"Cannot encode {value} as u64 varint")
    return max(1, (value.bit_length() + 6) // 7)


class VarintCodec(NamedTuple):
    """Encode/decode/write callables for one varint flavour."""
    width: int
    signed: bool
    max_bytes: int
    encode: Callable[[int], bytes]
    decode: Callable[[ByteSource], int]
    write: Callable[[ByteSink, int], int]


_CODECS = {
    (32, False): VarintCodec(
        32, False, VARINT_32_MAX_BYTES,
        encode_unsigned_32, decode_unsigned_32, write_unsigned_32,
    ),
    (32, True): VarintCodec(
        32, True, VARINT_32_MAX_BYTES,
        encode_signed_32, decode_signed_32, write_signed_32,
    ),
    (64, False): VarintCodec(
        64, False, VARINT_64_MAX_BYTES,
        encode_unsigned_64, decode_unsigned_64, write_unsigned_64,
    ),
    (64, True): VarintCodec(
        64, True, VARINT_64_MAX_BYTES,
        encode_signed_64, decode_signed_64, write_signed_64,
    ),
}


def get_codec(width: int = 32, signed: bool = False) -> VarintCodec:
    """
    Look up the codec for a width and signedness.

    Raises:
        ValueError: If width is not 32 or 64
    """
    try:
        return _CODECS[(width, bool(signed))]
    except KeyError:
        raise ValueError(f"Unsupported varint width: {width}") from None


def encode_varint(value: int, width: int = 32, signed: bool = False) -> bytes:
    """
    Encode an integer as a varint.

    Args:
        value: Integer to encode
        width: Integer width, 32 or 64
        signed: Zig-zag encode the value first

    Returns:
        Varint-encoded bytes
    """
    return get_codec(width, signed).encode(value)


def decode_varint(
    data: bytes,
    offset: int = 0,
    width: int = 32,
    signed: bool = False,
) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data
        width: Integer width, 32 or 64
        signed: Zig-zag decode the result

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        EndOfInput: If the varint is truncated
        Overflow: If the varint is too long for the width
    """
    reader = BufferReader(data, offset)
    value = get_codec(width, signed).decode(reader)
    return value, reader.offset


class _Pushback:
    """Byte source that replays one already-read byte first."""

    def __init__(self, byte: int, source: ByteSource):
        self._byte = byte
        self._source = source

    def read_byte(self) -> int:
        if self._byte is None:
            return self._source.read_byte()
        byte, self._byte = self._byte, None
        return byte


def iter_varints(
    source: ByteSource,
    width: int = 32,
    signed: bool = False,
) -> Iterator[int]:
    """
    Decode consecutive varints until the source is exhausted.

    Stops cleanly only when the source ends on a varint boundary; a
    source ending inside a varint raises EndOfInput.
    """
    codec = get_codec(width, signed)
    while True:
        try:
            first = source.read_byte()
        except EndOfInput:
            return
        yield codec.decode(_Pushback(first, source))
