# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base Reporter for the buffered statsd client

This module provides the BaseReporter abstract class shared by the
buffering client, the no-op client and the test double. It declares the
five StatsReporter operations and builds the timing helpers on top of
``timing()`` so every reporter gets them for free.
"""

import abc
import contextlib
import time
from collections.abc import Iterator
from datetime import timedelta
from types import TracebackType


class BaseReporter(abc.ABC):
    """
    Abstract base class for metric reporters.

    Subclasses implement the recording operations; ``timing_duration``,
    ``timed`` and the context manager protocol are inherited.
    """

    @abc.abstractmethod
    def flush(self) -> None:
        """
        Transmit any buffered lines now.

        Raises:
            TransportWriteError: If the transport rejected the write
        """
        pass

    @abc.abstractmethod
    def count(self, bucket: str, value: float, sample_rate: float = 1.0) -> None:
        """
        Increment (or decrement) a counter.

        Counters are reset to zero by the daemon on every flush interval.

        Args:
            bucket: Metric name
            value: Amount to add
            sample_rate: Probability in (0, 1] that this event is sent
        """
        pass

    @abc.abstractmethod
    def gauge(self, bucket: str, value: float) -> None:
        """
        Set an arbitrary value.

        Only the value of the gauge at daemon flush time is stored.
        """
        pass

    @abc.abstractmethod
    def timing(self, bucket: str, duration_ms: float) -> None:
        """
        Record a time interval in milliseconds.

        Percentiles, mean, standard deviation, sum and bounds are computed
        by the daemon.
        """
        pass

    @abc.abstractmethod
    def count_unique(self, bucket: str, value: str) -> None:
        """Record a value for distinct counting between daemon flushes."""
        pass

    def timing_duration(self, bucket: str, duration: timedelta) -> None:
        """Record a ``timedelta`` as a timing in milliseconds."""
        self.timing(bucket, duration.total_seconds() * 1000.0)

    @contextlib.contextmanager
    def timed(self, bucket: str) -> Iterator[None]:
        """
        Time the wrapped block and record it as a timing.

        The timing is recorded even when the block raises.

        Example:
            with reporter.timed("db.query"):
                run_query()
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timing(bucket, (time.perf_counter() - start) * 1000.0)

    def close(self) -> None:
        """Release any resources held by the reporter."""
        pass

    def __enter__(self) -> "BaseReporter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
