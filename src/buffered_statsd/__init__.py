# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Buffered Statsd - A thread-safe statsd client that batches metrics.

This library converts counters, gauges, timings and unique-value sets
into statsd lines and packs them into bounded-size UDP datagrams.

Key Features:
    - Buffering into datagrams no larger than a configurable packet size
    - Probabilistic sampling with server-side rescaling (``|@rate``)
    - Thread-safe accumulation from any number of callers
    - Degrade-to-silence: failed setup yields a working no-op reporter
    - A test double for asserting on emitted values without a network

Quick Start:
    >>> from buffered_statsd import new
    >>>
    >>> stats, err = new("127.0.0.1:8125", "myapp.")
    >>> if err is not None:
    ...     logger.warning(f"Metrics disabled: {err}")
    >>> stats.count("requests", 1, 0.1)
    >>> stats.timing("db.query", 4.2)
    >>> stats.flush()

Main Exports:
    - new, new_with_packet_size, from_config: Reporter factories
    - StatsdClient: Buffering client
    - NoOpClient: Reporter returned when setup fails
    - StatsReporter: Protocol shared by every reporter
    - ClientConfig: Configuration options

Note: Prometheus export of the client's own counters requires the
'prometheus' extra. Install with:
    pip install buffered-statsd[prometheus]

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import (
    from_config,
    new,
    new_with_packet_size,
)
from .config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PACKET_SIZE,
    DEFAULT_PORT,
    ClientConfig,
    parse_address,
)
from .exceptions import (
    ConfigurationError,
    StatsdError,
    TransportConnectionError,
    TransportWriteError,
)
from .observability import ClientStats
from .protocols import (
    StatsReporter,
    TransportProtocol,
)
from .reporters import (
    BaseReporter,
    NoOpClient,
    StatsdClient,
)
from .transport import UDPTransport
from .wire import MetricKind

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_PACKET_SIZE",
    "DEFAULT_PORT",
    # Reporters
    "BaseReporter",
    # Configuration
    "ClientConfig",
    # Observability
    "ClientStats",
    "ConfigurationError",
    "MetricKind",
    "NoOpClient",
    # Exceptions
    "StatsdError",
    # Protocols
    "StatsReporter",
    "StatsdClient",
    "TransportConnectionError",
    "TransportProtocol",
    "TransportWriteError",
    # Transport
    "UDPTransport",
    # Factories
    "from_config",
    "new",
    "new_with_packet_size",
    "parse_address",
]
