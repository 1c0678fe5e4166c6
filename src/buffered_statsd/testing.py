# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Test double for code that emits metrics.

MockStatsdClient satisfies StatsReporter without a network endpoint and
remembers the last value written to each bucket, so tests can assert
"this bucket was last set to this value".

Example:
    >>> stats = MockStatsdClient()
    >>> handle_request(stats)
    >>> stats.counts["requests"]
    '1'
"""

from __future__ import annotations

from .reporters.base import BaseReporter
from .wire import format_decimal


class MockStatsdClient(BaseReporter):
    """
    Reporter recording the last value per bucket per metric kind.

    Values are stored as plain decimal strings. No sampling, prefixing or
    wire encoding takes place, and unique values are ignored.
    """

    def __init__(self) -> None:
        self.counts: dict[str, str] = {}
        self.gauges: dict[str, str] = {}
        self.timings: dict[str, str] = {}

    def flush(self) -> None:
        pass

    def count(self, bucket: str, value: float, sample_rate: float = 1.0) -> None:
        self.counts[bucket] = format_decimal(value)

    def gauge(self, bucket: str, value: float) -> None:
        self.gauges[bucket] = format_decimal(value)

    def timing(self, bucket: str, duration_ms: float) -> None:
        self.timings[bucket] = format_decimal(duration_ms)

    def count_unique(self, bucket: str, value: str) -> None:
        pass

    def reset(self) -> None:
        """Forget every recorded value."""
        self.counts.clear()
        self.gauges.clear()
        self.timings.clear()


__all__ = ["MockStatsdClient"]
