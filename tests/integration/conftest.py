"""
UDP receiver fixtures for end-to-end tests.

Usage:
    These fixtures are automatically available in tests under tests/integration/.
    They bind a datagram socket on the loopback interface, so no external
    services are required.

Example:
    def test_roundtrip(udp_receiver):
        reporter, err = new(udp_receiver.address, "it.")
        reporter.count("hits", 1)
        reporter.flush()
        assert udp_receiver.receive() == b"it.hits:1|c"
"""

from __future__ import annotations

import socket

import pytest


class UDPReceiver:
    """Loopback datagram socket standing in for a statsd daemon."""

    def __init__(self, timeout: float = 2.0) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.settimeout(timeout)
        self.port = self._sock.getsockname()[1]

    @property
    def address(self) -> str:
        return f"127.0.0.1:{self.port}"

    def receive(self) -> bytes:
        """Wait for the next datagram."""
        data, _ = self._sock.recvfrom(65535)
        return data

    def receive_lines(self, expected: int) -> tuple[list[bytes], list[str]]:
        """
        Collect datagrams until ``expected`` lines have arrived.

        Returns:
            Tuple of (datagrams, lines)
        """
        packets: list[bytes] = []
        lines: list[str] = []
        while len(lines) < expected:
            packet = self.receive()
            packets.append(packet)
            lines.extend(packet.decode("utf-8").split("\n"))
        return packets, lines

    def close(self) -> None:
        self._sock.close()


@pytest.fixture
def udp_receiver():
    receiver = UDPReceiver()
    yield receiver
    receiver.close()
