#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command line tool for Protocol Buffers varints.

Usage:
    python varint_tool.py encode 3463465
    python varint_tool.py encode -4 --signed
    python varint_tool.py decode "e9 b9 d4 01"
    python varint_tool.py --port /dev/ttyACM0 send 1 300 70000
    python varint_tool.py --port /dev/ttyACM0 listen --count 3
"""

import argparse
import logging
import sys

import serial

from protovarint import BufferReader, SerialTransport, get_codec, iter_varints
from protovarint.errors import VarintError


def configure_logging(verbose: bool = False):
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_int(text: str) -> int:
    """Parse a decimal or 0x/0o/0b prefixed integer."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def parse_hex(text: str) -> bytes:
    """Parse hex bytes, allowing whitespace between them."""
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex string: {text!r}")


def cmd_encode(values, width: int, signed: bool):
    """Print the varint encoding of each value."""
    codec = get_codec(width, signed)
    for value in values:
        encoded = codec.encode(value)
        print(f"{value}: {encoded.hex(' ')}")


def cmd_decode(data: bytes, width: int, signed: bool):
    """Print every varint found in data."""
    for value in iter_varints(BufferReader(data), width, signed):
        print(value)


def cmd_send(transport: SerialTransport, values, width: int, signed: bool):
    """Send values over the serial port."""
    total = 0
    for value in values:
        total += transport.send_varint(value, width, signed)
    print(f"Sent {len(values)} varints ({total} bytes) to {transport.port}")


def cmd_listen(transport: SerialTransport, count: int, width: int, signed: bool):
    """Print varints received on the serial port."""
    received = 0
    for value in iter_varints(transport, width, signed):
        print(value)
        received += 1
        if count and received >= count:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode Protocol Buffers varints"
    )
    parser.add_argument(
        "--port", "-p",
        help="Serial port for send/listen (e.g., /dev/ttyACM0)"
    )
    parser.add_argument("--baudrate", type=int, default=115200,
                        help="Baud rate (default 115200)")
    parser.add_argument("--timeout", type=float, default=5.0,
                        help="Read timeout in seconds (default 5.0)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging")

    # Options shared by every command
    codec_opts = argparse.ArgumentParser(add_help=False)
    codec_opts.add_argument("--width", "-w", type=int, default=32, choices=[32, 64],
                            help="Integer width (default 32)")
    codec_opts.add_argument("--signed", "-s", action="store_true",
                            help="Zig-zag encode signed values")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", parents=[codec_opts],
                                          help="Encode integers as varints")
    encode_parser.add_argument("values", type=parse_int, nargs="+", help="Integers to encode")

    decode_parser = subparsers.add_parser("decode", parents=[codec_opts],
                                          help="Decode hex varint bytes")
    decode_parser.add_argument("data", type=parse_hex, help="Hex bytes, e.g. 'e9 b9 d4 01'")

    send_parser = subparsers.add_parser("send", parents=[codec_opts],
                                        help="Send varints over the serial port")
    send_parser.add_argument("values", type=parse_int, nargs="+", help="Integers to send")

    listen_parser = subparsers.add_parser("listen", parents=[codec_opts],
                                          help="Print varints received on the serial port")
    listen_parser.add_argument("--count", "-n", type=int, default=0,
                               help="Stop after this many varints (default: until timeout)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "encode":
            cmd_encode(args.values, args.width, args.signed)
            return
        if args.command == "decode":
            cmd_decode(args.data, args.width, args.signed)
            return
    except (VarintError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not args.port:
        parser.error(f"--port is required for {args.command}")

    try:
        transport = SerialTransport(args.port, args.baudrate, args.timeout)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)

    try:
        if args.command == "send":
            cmd_send(transport, args.values, args.width, args.signed)
        elif args.command == "listen":
            cmd_listen(transport, args.count, args.width, args.signed)
    except (VarintError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        transport.close()


if __name__ == "__main__":
    main()
