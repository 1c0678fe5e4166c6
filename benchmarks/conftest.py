"""
Shared fixtures for benchmark tests.
"""

import pytest

from buffered_statsd.reporters.buffered import StatsdClient


class NullTransport:
    """Transport that counts datagrams and discards them."""

    def __init__(self):
        self.packets = 0
        self.bytes = 0

    def write(self, data: bytes) -> int:
        self.packets += 1
        self.bytes += len(data)
        return len(data)

    def close(self) -> None:
        pass


@pytest.fixture
def null_transport():
    return NullTransport()


@pytest.fixture
def bench_client(null_transport):
    return StatsdClient(null_transport, prefix="bench.")
