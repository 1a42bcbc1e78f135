# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for loopback integration tests."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--device",
        action="store",
        default=None,
        help="Serial port wired as a loopback (e.g., /dev/ttyUSB0 with TX->RX)",
    )
    parser.addoption(
        "--baudrate",
        action="store",
        type=int,
        default=115200,
        help="Baud rate for the loopback device",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless a device is given."""
    if config.getoption("--device"):
        return
    skip = pytest.mark.skip(reason="needs --device")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def device_port(request):
    """Get the device port from command line."""
    return request.config.getoption("--device")


@pytest.fixture
def transport(device_port, request):
    """
    Open the loopback device.

    Function-scoped so each test starts with an empty input buffer.
    """
    from protovarint.transport import SerialTransport

    transport = SerialTransport(
        device_port,
        baudrate=request.config.getoption("--baudrate"),
        timeout=1.0,
    )
    transport.reset_input()
    yield transport
    transport.close()
