# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the varint codec and its byte sources/sinks."""


class VarintError(Exception):
    """Base exception for varint errors."""
    pass


class EndOfInput(VarintError, EOFError):
    """Byte source exhausted before a terminating byte was read."""
    pass


# Name used by the decoding algorithm description
TruncatedInput = EndOfInput


class Overflow(VarintError, ValueError):
    """Varint does not fit the requested integer width."""
    pass


class IoFailure(VarintError, OSError):
    """Underlying byte source or sink failed."""
    pass


class ReadTimeout(EndOfInput):
    """Timeout waiting for the next byte."""
    pass
