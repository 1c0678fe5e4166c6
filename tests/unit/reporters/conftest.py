# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for reporter tests."""

from __future__ import annotations

import pytest

from buffered_statsd.observability.stats import ClientStats
from buffered_statsd.reporters.buffered import StatsdClient


class RecordingTransport:
    """In-memory transport that keeps every datagram written to it."""

    def __init__(self) -> None:
        self.writes: list[bytes] = []
        self.closed = False
        self.fail_with: OSError | None = None

    def write(self, data: bytes) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self.writes.append(bytes(data))
        return len(data)

    def close(self) -> None:
        self.closed = True

    @property
    def lines(self) -> list[str]:
        """Every line from every datagram, in write order."""
        return [
            line
            for packet in self.writes
            for line in packet.decode("utf-8").split("\n")
        ]


class FixedRandom:
    """Random source returning a scripted value on every draw."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def stats() -> ClientStats:
    return ClientStats(enable_prometheus=False)


@pytest.fixture
def client(transport: RecordingTransport, stats: ClientStats) -> StatsdClient:
    """Client with the default packet size and no prefix."""
    return StatsdClient(transport, stats=stats)


@pytest.fixture
def make_client(transport: RecordingTransport, stats: ClientStats):
    """Factory for clients sharing the recording transport."""

    def _make(**kwargs) -> StatsdClient:
        kwargs.setdefault("stats", stats)
        return StatsdClient(transport, **kwargs)

    return _make


@pytest.fixture
def fixed_random():
    return FixedRandom
