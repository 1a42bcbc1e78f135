# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the varint_tool command line."""

import pytest
import serial
from unittest.mock import patch
from io import BytesIO

import varint_tool


class FakeSerial:
    """Minimal serial port double."""

    def __init__(self, incoming: bytes = b""):
        self.incoming = BytesIO(incoming)
        self.written = BytesIO()
        self.is_open = True
        self.port = "/dev/ttyTEST"

    def read(self, size: int) -> bytes:
        return self.incoming.read(size)

    def write(self, data: bytes) -> int:
        return self.written.write(data)

    def flush(self):
        pass

    def close(self):
        self.is_open = False


@pytest.fixture
def fake_port():
    port = FakeSerial()
    with patch('protovarint.transport.serial.Serial', return_value=port), \
            patch('protovarint.transport.time.sleep'):
        yield port


class TestEncodeCommand:
    """Tests for `encode`."""

    def test_encode_unsigned(self, capsys):
        varint_tool.main(["encode", "3463465", "300"])
        out = capsys.readouterr().out
        assert "3463465: a9 b2 d3 01" in out
        assert "300: ac 02" in out

    def test_encode_signed(self, capsys):
        varint_tool.main(["encode", "--signed", "-4"])
        assert capsys.readouterr().out.strip() == "-4: 07"

    def test_encode_hex_argument(self, capsys):
        varint_tool.main(["encode", "0xFFFFFFFF"])
        assert "ff ff ff ff 0f" in capsys.readouterr().out

    def test_encode_64_bit(self, capsys):
        varint_tool.main(["encode", "--width", "64", str((1 << 64) - 1)])
        assert "ff ff ff ff ff ff ff ff ff 01" in capsys.readouterr().out

    def test_encode_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["encode", str(1 << 32)])
        assert exc_info.value.code == 1
        assert "Error: Cannot encode" in capsys.readouterr().out

    def test_invalid_integer(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["encode", "twelve"])
        assert exc_info.value.code == 2


class TestDecodeCommand:
    """Tests for `decode`."""

    def test_decode_sequence(self, capsys):
        varint_tool.main(["decode", "a9 b2 d3 01 ac02 00"])
        assert capsys.readouterr().out.split() == ["3463465", "300", "0"]

    def test_decode_signed(self, capsys):
        varint_tool.main(["decode", "--signed", "07"])
        assert capsys.readouterr().out.strip() == "-4"

    def test_decode_truncated(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "80"])
        assert exc_info.value.code == 1
        assert "unexpected end of data" in capsys.readouterr().out

    def test_decode_overflow(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "ff ff ff ff ff ff"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_invalid_hex(self):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "zz"])
        assert exc_info.value.code == 2


class TestSerialCommands:
    """Tests for `send` and `listen`."""

    def test_send_requires_port(self):
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["send", "1"])
        assert exc_info.value.code == 2

    def test_send(self, fake_port, capsys):
        varint_tool.main(["--port", "/dev/ttyTEST", "send", "1", "300"])

        assert fake_port.written.getvalue() == b"\x01\xAC\x02"
        assert "Sent 2 varints (3 bytes)" in capsys.readouterr().out
        assert fake_port.is_open is False

    def test_listen_until_timeout(self, fake_port, capsys):
        fake_port.incoming = BytesIO(b"\x01\xAC\x02")

        varint_tool.main(["--port", "/dev/ttyTEST", "listen"])

        assert capsys.readouterr().out.split() == ["1", "300"]

    def test_listen_count(self, fake_port, capsys):
        fake_port.incoming = BytesIO(b"\x07\x08\x09")

        varint_tool.main(["-p", "/dev/ttyTEST", "listen", "--signed", "-n", "2"])

        assert capsys.readouterr().out.split() == ["-4", "4"]

    def test_open_failure(self, capsys):
        with patch('protovarint.transport.serial.Serial',
                   side_effect=serial.SerialException("no such port")):
            with pytest.raises(SystemExit) as exc_info:
                varint_tool.main(["--port", "/dev/nope", "send", "1"])

        assert exc_info.value.code == 1
        assert "Error opening /dev/nope" in capsys.readouterr().out
