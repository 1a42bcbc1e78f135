# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial port byte source/sink.

Lets the varint codec read from and write to a device over a serial
port (USB CDC, UART, ...).
"""

import logging
import time

import serial

from .errors import IoFailure, ReadTimeout
from .varint import get_codec

logger = logging.getLogger(__name__)


class SerialTransport:
    """
    Serial port transport for varint streams.

    Can be used as a context manager:
        with SerialTransport("/dev/ttyACM0") as t:
            t.send_varint(300)
            value = t.receive_varint()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
        """
        self._ser = serial.Serial(port, baudrate, timeout=timeout)
        logger.debug(f"Opened {port} at {baudrate} baud (timeout {timeout}s)")
        time.sleep(0.1)  # Let the device settle

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.debug(f"Closed {self._ser.port}")

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def read_byte(self) -> int:
        """
        Read one byte.

        Raises:
            ReadTimeout: If no byte arrives within the timeout
            IoFailure: If the port reports an error
        """
        try:
            b = self._ser.read(1)
        except serial.SerialException as e:
            raise IoFailure(f"Serial read failed: {e}") from e
        if not b:
            raise ReadTimeout("Timeout waiting for data")
        return b[0]

    def write_byte(self, byte: int) -> None:
        """Write one byte (not flushed)."""
        try:
            self._ser.write(bytes([byte]))
        except serial.SerialException as e:
            raise IoFailure(f"Serial write failed: {e}") from e

    def reset_input(self) -> None:
        """Discard bytes already received but not yet read."""
        self._ser.reset_input_buffer()

    def flush(self) -> None:
        """Wait until all written bytes are transmitted."""
        try:
            self._ser.flush()
        except serial.SerialException as e:
            raise IoFailure(f"Serial flush failed: {e}") from e

    def send_varint(self, value: int, width: int = 32, signed: bool = False) -> int:
        """
        Encode and send a varint, then flush.

        Returns:
            Number of bytes sent
        """
        count = get_codec(width, signed).write(self, value)
        self.flush()
        logger.debug(f"Sent {value} as {count} byte varint")
        return count

    def receive_varint(self, width: int = 32, signed: bool = False) -> int:
        """
        Receive and decode one varint.

        Raises:
            ReadTimeout: If the device stops sending mid-varint
            Overflow: If the varint does not fit the width
        """
        value = get_codec(width, signed).decode(self)
        logger.debug(f"Received {value}")
        return value
