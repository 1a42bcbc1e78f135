# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Zig-zag encoding of signed integers.

Maps signed values onto unsigned values of the same width so that small
magnitudes of either sign stay small:

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, 2 -> 4, ...

Python integers are unbounded, so every function checks that its argument
is representable at the given width and masks the result back to it.
"""


def _check_range(value: int, low: int, high: int, kind: str):
    if not low <= value <= high:
        raise ValueError(f"Value {value} out of range for {kind}")


def zigzag_encode_8(value: int) -> int:
    """Encode an i8 as a zig-zagged u8."""
    _check_range(value, -0x80, 0x7F, "i8")
    return ((value << 1) ^ (value >> 7)) & 0xFF


def zigzag_decode_8(value: int) -> int:
    """Decode a zig-zagged u8 back into an i8."""
    _check_range(value, 0, 0xFF, "u8")
    return (value >> 1) ^ -(value & 1)


def zigzag_encode_16(value: int) -> int:
    """Encode an i16 as a zig-zagged u16."""
    _check_range(value, -0x8000, 0x7FFF, "i16")
    return ((value << 1) ^ (value >> 15)) & 0xFFFF


def zigzag_decode_16(value: int) -> int:
    """Decode a zig-zagged u16 back into an i16."""
    _check_range(value, 0, 0xFFFF, "u16")
    return (value >> 1) ^ -(value & 1)


def zigzag_encode_32(value: int) -> int:
    """
    Encode an i32 as a zig-zagged u32.

    Args:
        value: Signed integer in [-2**31, 2**31 - 1]

    Returns:
        Unsigned integer in [0, 2**32 - 1]

    Raises:
        ValueError: If value does not fit in an i32
    """
    _check_range(value, -0x8000_0000, 0x7FFF_FFFF, "i32")
    return ((value << 1) ^ (value >> 31)) & 0xFFFF_FFFF


def zigzag_decode_32(value: int) -> int:
    """
    Decode a zig-zagged u32 back into an i32.

    Args:
        value: Unsigned integer in [0, 2**32 - 1]

    Returns:
        Signed integer in [-2**31, 2**31 - 1]

    Raises:
        ValueError: If value does not fit in a u32
    """
    _check_range(value, 0, 0xFFFF_FFFF, "u32")
    return (value >> 1) ^ -(value & 1)


def zigzag_encode_64(value: int) -> int:
    """Encode an i64 as a zig-zagged u64."""
    _check_range(value, -0x8000_0000_0000_0000, 0x7FFF_FFFF_FFFF_FFFF, "i64")
    return ((value << 1) ^ (value >> 63)) & 0xFFFF_FFFF_FFFF_FFFF


def zigzag_decode_64(value: int) -> int:
    """Decode a zig-zagged u64 back into an i64."""
    _check_range(value, 0, 0xFFFF_FFFF_FFFF_FFFF, "u64")
    return (value >> 1) ^ -(value & 1)
