# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Protocol Buffers compatible varint and zig-zag codec.

Example usage:
    from protovarint import encode_unsigned_32, decode_unsigned_32, BufferReader

    data = encode_unsigned_32(3463465)       # b"\\xe9\\xb9\\xd4\\x01"
    value = decode_unsigned_32(BufferReader(data))

    # Signed values go through zig-zag first
    encode_signed_32(-4)                     # b"\\x07"

    # Over a serial port
    with SerialTransport("/dev/ttyACM0") as transport:
        transport.send_varint(-4, signed=True)
        print(transport.receive_varint(signed=True))
"""

from .errors import (
    VarintError,
    EndOfInput,
    TruncatedInput,
    Overflow,
    IoFailure,
    ReadTimeout,
)
from .stream import (
    ByteSource,
    ByteSink,
    BufferReader,
    BufferWriter,
    StreamReader,
    StreamWriter,
    SocketStream,
)
from .transport import SerialTransport
from .varint import (
    VARINT_32_MAX_BYTES,
    VARINT_64_MAX_BYTES,
    VarintCodec,
    encode_unsigned_32,
    encode_unsigned_64,
    encode_signed_32,
    encode_signed_64,
    decode_unsigned_32,
    decode_unsigned_64,
    decode_signed_32,
    decode_signed_64,
    write_unsigned_32,
    write_unsigned_64,
    write_signed_32,
    write_signed_64,
    encoded_length_32,
    encoded_length_64,
    encode_varint,
    decode_varint,
    get_codec,
    iter_varints,
)
from .zigzag import (
    zigzag_encode_8,
    zigzag_decode_8,
    zigzag_encode_16,
    zigzag_decode_16,
    zigzag_encode_32,
    zigzag_decode_32,
    zigzag_encode_64,
    zigzag_decode_64,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VarintError",
    "EndOfInput",
    "TruncatedInput",
    "Overflow",
    "IoFailure",
    "ReadTimeout",
    # Byte sources/sinks
    "ByteSource",
    "ByteSink",
    "BufferReader",
    "BufferWriter",
    "StreamReader",
    "StreamWriter",
    "SocketStream",
    "SerialTransport",
    # Varint
    "VARINT_32_MAX_BYTES",
    "VARINT_64_MAX_BYTES",
    "VarintCodec",
    "encode_unsigned_32",
    "encode_unsigned_64",
    "encode_signed_32",
    "encode_signed_64",
    "decode_unsigned_32",
    "decode_unsigned_64",
    "decode_signed_32",
    "decode_signed_64",
    "write_unsigned_32",
    "write_unsigned_64",
    "write_signed_32",
    "write_signed_64",
    "encoded_length_32",
    "encoded_length_64",
    "encode_varint",
    "decode_varint",
    "get_codec",
    "iter_varints",
    # Zig-zag
    "zigzag_encode_8",
    "zigzag_decode_8",
    "zigzag_encode_16",
    "zigzag_decode_16",
    "zigzag_encode_32",
    "zigzag_decode_32",
    "zigzag_encode_64",
    "zigzag_decode_64",
]
