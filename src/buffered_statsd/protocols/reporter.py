# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definition for metric reporters.

Every producer of metrics depends on this capability set only. The
buffering client, the no-op client returned when setup fails, and the
test double all satisfy it, so callers never branch on which one they
were handed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatsReporter(Protocol):
    """
    Protocol for statsd metric reporters.

    Recording operations are fire-and-forget: they do not block on the
    network in the common case and never raise transport errors. Only
    ``flush`` reports delivery problems.

    Example:
        >>> class PrintReporter:
        ...     def flush(self): pass
        ...     def count(self, bucket, value, sample_rate=1.0): print(bucket, value)
        ...     def gauge(self, bucket, value): pass
        ...     def timing(self, bucket, duration_ms): pass
        ...     def count_unique(self, bucket, value): pass
        >>>
        >>> isinstance(PrintReporter(), StatsReporter)
        True
    """

    def flush(self) -> None:
        """
        Transmit any buffered lines now.

        Raises:
            TransportWriteError: If the transport rejected the write
        """
        ...

    def count(self, bucket: str, value: float, sample_rate: float = 1.0) -> None:
        """
        Record a counter delta.

        Args:
            bucket: Metric name, appended to the client prefix
            value: Amount to add (negative values decrement)
            sample_rate: Probability in (0, 1] that this event is sent
        """
        ...

    def gauge(self, bucket: str, value: float) -> None:
        """Record an absolute instantaneous value."""
        ...

    def timing(self, bucket: str, duration_ms: float) -> None:
        """Record an elapsed-time sample in milliseconds."""
        ...

    def count_unique(self, bucket: str, value: str) -> None:
        """Record a value for server-side unique counting (statsd sets)."""
        ...


__all__ = ["StatsReporter"]
