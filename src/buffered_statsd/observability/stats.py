# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client-side counters for the buffering statsd client.

Statsd is fire-and-forget, so a misbehaving client is otherwise silent.
ClientStats keeps a handful of counters (packets sent, lines dropped,
flush errors, ...) that can be read as a dict or, when prometheus_client
is installed, scraped from a Prometheus registry.

Thread Safety:
    All operations are thread-safe. The client calls ``inc()`` while
    holding its own buffer lock, so ClientStats never calls back into it.

Usage:
    >>> stats = ClientStats(enable_prometheus=False)
    >>> stats.inc(PACKETS_SENT)
    >>> stats.get_stats()[PACKETS_SENT]
    1
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .constants import STAT_DESCRIPTIONS, prometheus_name

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType
else:
    CounterType = object

# Check Prometheus availability with aliased imports to avoid no-redef
try:
    from prometheus_client import REGISTRY as _REGISTRY, Counter as _Counter

    Counter: type[CounterType] | None = _Counter
    REGISTRY: Any | None = _REGISTRY
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    REGISTRY = None
    PROMETHEUS_AVAILABLE = False


class ClientStats:
    """
    Thread-safe counters describing what a client did with its metrics.

    The dict snapshot is always maintained. Prometheus counters are only
    created when ``enable_prometheus`` is set and prometheus_client is
    installed; pass a dedicated ``registry`` to keep several clients (or
    tests) from colliding on the default one.
    """

    def __init__(
        self,
        enable_prometheus: bool = False,
        registry: Any | None = None,
    ) -> None:
        """
        Initialize the counters.

        Args:
            enable_prometheus: Mirror counters to Prometheus (if available)
            registry: Optional Prometheus CollectorRegistry
        """
        self._enable_prometheus = enable_prometheus and PROMETHEUS_AVAILABLE
        self._registry = registry if registry is not None else REGISTRY
        self._counts: dict[str, int] = dict.fromkeys(STAT_DESCRIPTIONS, 0)
        self._lock = threading.Lock()
        self._prom_counters: dict[str, Any] = {}

        if self._enable_prometheus:
            self._register_prometheus()

        logger.debug(
            f"ClientStats initialized "
            f"(prometheus={'enabled' if self._enable_prometheus else 'disabled'})"
        )

    def _register_prometheus(self) -> None:
        """Create one Prometheus counter per tracked stat."""
        if Counter is None:
            return

        for name, description in STAT_DESCRIPTIONS.items():
            # prometheus_client appends _total to counter names itself
            metric_name = prometheus_name(name).removesuffix("_total")
            try:
                self._prom_counters[name] = Counter(
                    metric_name,
                    description,
                    registry=self._registry,
                )
            except ValueError as e:
                logger.warning(f"Failed to create Prometheus counter {metric_name}: {e}")

    def inc(self, name: str, value: int = 1) -> None:
        """
        Increment a counter.

        Args:
            name: One of the names in STAT_DESCRIPTIONS
            value: Amount to add (must be >= 0)

        Raises:
            ValueError: If value is negative
            KeyError: If the counter name is unknown
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        with self._lock:
            if name not in self._counts:
                raise KeyError(f"Unknown client stat: {name}")
            self._counts[name] += value

        prom_counter = self._prom_counters.get(name)
        if prom_counter is not None:
            prom_counter.inc(value)

    def get(self, name: str) -> int:
        """Current value of one counter."""
        with self._lock:
            return self._counts[name]

    def get_stats(self) -> dict[str, int]:
        """Snapshot of every counter."""
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        """
        Reset the dict counters to zero.

        Prometheus counters are monotonic and are left alone.
        """
        with self._lock:
            for name in self._counts:
                self._counts[name] = 0

    @property
    def prometheus_enabled(self) -> bool:
        """Check if Prometheus counters are being updated."""
        return self._enable_prometheus


__all__ = [
    "PROMETHEUS_AVAILABLE",
    "ClientStats",
]
