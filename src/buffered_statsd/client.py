# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Factory functions for creating reporters.

The factories never raise for transport or address problems. On failure
they return a NoOpClient together with the error, so callers may log
the error and keep using the returned reporter as if nothing happened.
"""

from __future__ import annotations

import logging
import random
from typing import Any

from .config import DEFAULT_PACKET_SIZE, ClientConfig
from .exceptions import StatsdError
from .protocols.reporter import StatsReporter
from .reporters.buffered import StatsdClient
from .reporters.noop import NoOpClient

logger = logging.getLogger(__name__)


def new(host: str, prefix: str) -> tuple[StatsReporter, StatsdError | None]:
    """
    Same as ``new_with_packet_size`` with a 512 byte packet size.

    Args:
        host: Daemon address as ``host:port`` (port defaults to 8125)
        prefix: Prepended verbatim to every bucket name

    Returns:
        Tuple of (reporter, error); error is None on success
    """
    return new_with_packet_size(host, prefix, DEFAULT_PACKET_SIZE)


def new_with_packet_size(
    host: str,
    prefix: str,
    packet_size: int,
) -> tuple[StatsReporter, StatsdError | None]:
    """
    Connect to a statsd daemon using the given prefix for every bucket.

    If the prefix is ``"foo.bar."``, a count on ``"baz.biz"`` is sent as
    ``"foo.bar.baz.biz"``. The prefix can be an empty string.

    Args:
        host: Daemon address as ``host:port`` (port defaults to 8125)
        prefix: Prepended verbatim to every bucket name
        packet_size: Maximum size in bytes of a single datagram

    Returns:
        Tuple of (reporter, error). When the address is invalid or the
        transport cannot be set up, the reporter is a NoOpClient.

    Example:
        >>> stats, err = new_with_packet_size("127.0.0.1:8125", "web.", 1432)
        >>> if err is not None:
        ...     logger.warning(f"Metrics disabled: {err}")
        >>> stats.count("requests", 1, 1.0)
    """
    try:
        config = ClientConfig.from_address(host, prefix=prefix, packet_size=packet_size)
    except StatsdError as e:
        logger.warning(f"Invalid statsd configuration, metrics disabled: {e}")
        return NoOpClient(), e
    return from_config(config)


def from_config(
    config: ClientConfig,
    rng: random.Random | None = None,
    registry: Any | None = None,
) -> tuple[StatsReporter, StatsdError | None]:
    """
    Create a reporter from a ClientConfig, degrading to a NoOpClient.

    Args:
        config: Client configuration
        rng: Random source for sampling decisions
        registry: Optional Prometheus registry for the client's own stats

    Returns:
        Tuple of (reporter, error); error is None on success
    """
    try:
        client = StatsdClient.from_config(config, rng=rng, registry=registry)
    except StatsdError as e:
        logger.warning(
            f"Failed to connect to statsd at {config.address}, "
            f"metrics disabled: {e}"
        )
        return NoOpClient(), e
    return client, None


__all__ = [
    "from_config",
    "new",
    "new_with_packet_size",
]
