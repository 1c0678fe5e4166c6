# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Buffering statsd client.

Formatted metric lines are packed into a byte buffer, newline-separated,
and written to the transport as a single datagram when the next line
would push the buffer to the packet size, or when ``flush()`` is called.

Thread Safety:
    One lock guards the buffer and the whole check-flush-append sequence,
    so a flush triggered by one caller serializes with every other
    caller's append and no line is ever split across datagrams.

Flushing:
    There is no background timer. Services that emit low-volume buckets
    should call ``flush()`` periodically, otherwise those lines wait in
    the buffer until enough traffic arrives to fill a packet.
"""

from __future__ import annotations

import logging
import math
import random
import threading
from typing import Any

from ..config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PACKET_SIZE,
    DEFAULT_PORT,
    ClientConfig,
)
from ..exceptions import ConfigurationError, TransportWriteError
from ..observability.constants import (
    BYTES_SENT,
    FLUSH_ERRORS,
    LINES_BUFFERED,
    LINES_DROPPED,
    LINES_OVERSIZED,
    LINES_SAMPLED_OUT,
    PACKETS_SENT,
)
from ..observability.stats import ClientStats
from ..protocols.transport import TransportProtocol
from ..transport import UDPTransport
from ..wire import (
    MetricKind,
    format_line,
    format_value,
    sanitize_unique_value,
)
from .base import BaseReporter

logger = logging.getLogger(__name__)


class StatsdClient(BaseReporter):
    """
    Statsd reporter that buffers lines into bounded-size datagrams.

    Recording operations never raise transport errors. If the flush that
    has to precede an append fails, the new line is dropped and the error
    is logged at DEBUG; the buffered lines stay in place for the next
    ``flush()``, which does raise.

    Example:
        >>> client = StatsdClient.connect("127.0.0.1", prefix="web.")
        >>> client.count("requests", 1)
        >>> client.timing("render", 12.5)
        >>> client.flush()
    """

    def __init__(
        self,
        transport: TransportProtocol,
        prefix: str = "",
        packet_size: int = DEFAULT_PACKET_SIZE,
        rng: random.Random | None = None,
        stats: ClientStats | None = None,
    ) -> None:
        """
        Initialize the client around an already-connected transport.

        Args:
            transport: Datagram sink, owned by the client from now on
            prefix: Prepended verbatim to every bucket name
            packet_size: Maximum size in bytes of a single datagram
            rng: Random source for sampling decisions
            stats: Optional counters describing what the client did

        Raises:
            ConfigurationError: If packet_size is smaller than one byte
        """
        if packet_size < 1:
            raise ConfigurationError("packet_size must be at least 1")

        self.prefix = prefix
        self.packet_size = packet_size
        self._transport = transport
        self._rng = rng if rng is not None else random.Random()
        self._stats = stats

        self._lock = threading.Lock()
        self._buffer = bytearray()
        self._closed = False

    @classmethod
    def connect(
        cls,
        host: str,
        port: int = DEFAULT_PORT,
        prefix: str = "",
        packet_size: int = DEFAULT_PACKET_SIZE,
        timeout: float = DEFAULT_CONNECT_TIMEOUT,
        rng: random.Random | None = None,
        stats: ClientStats | None = None,
    ) -> StatsdClient:
        """
        Connect a UDP transport and wrap it in a client.

        Raises:
            TransportConnectionError: If the host cannot be resolved or connected
            ConfigurationError: If packet_size is invalid
        """
        if packet_size < 1:
            raise ConfigurationError("packet_size must be at least 1")
        transport = UDPTransport.connect(host, port, timeout=timeout)
        return cls(
            transport,
            prefix=prefix,
            packet_size=packet_size,
            rng=rng,
            stats=stats,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        rng: random.Random | None = None,
        registry: Any | None = None,
    ) -> StatsdClient:
        """
        Connect a client described by a ClientConfig.

        Args:
            config: Client configuration
            rng: Random source for sampling decisions
            registry: Prometheus registry to export client stats to; stats
                are only exported when one is given

        Raises:
            TransportConnectionError: If the host cannot be resolved or connected
        """
        stats = None
        if config.enable_stats:
            stats = ClientStats(
                enable_prometheus=registry is not None, registry=registry
            )
        return cls.connect(
            config.host,
            port=config.port,
            prefix=config.prefix,
            packet_size=config.packet_size,
            timeout=config.connect_timeout,
            rng=rng,
            stats=stats,
        )

    # ==========================================================================
    # Recording
    # ==========================================================================

    def count(self, bucket: str, value: float, sample_rate: float = 1.0) -> None:
        self._record(bucket, format_value(value), MetricKind.COUNT, sample_rate)

    def gauge(self, bucket: str, value: float) -> None:
        self._record(bucket, format_value(value), MetricKind.GAUGE)

    def timing(self, bucket: str, duration_ms: float) -> None:
        self._record(bucket, format_value(duration_ms), MetricKind.TIMING)

    def count_unique(self, bucket: str, value: str) -> None:
        self._record(bucket, sanitize_unique_value(value), MetricKind.SET)

    def _record(
        self,
        bucket: str,
        value: str,
        kind: MetricKind,
        sample_rate: float = 1.0,
    ) -> None:
        """Apply sampling, format the line and hand it to the buffer."""
        # Rates above 1 are clamped. A NaN rate cannot be rescaled by the
        # daemon, so it is dropped like a rate of zero.
        if sample_rate > 1:
            logger.debug(f"Clamping sample rate {sample_rate} to 1 for {bucket}")
            sample_rate = 1.0
        elif math.isnan(sample_rate):
            self._inc(LINES_SAMPLED_OUT)
            return

        if sample_rate < 1 and self._rng.random() >= sample_rate:
            self._inc(LINES_SAMPLED_OUT)
            return

        line = format_line(self.prefix, bucket, value, kind, sample_rate)
        try:
            self._send(line)
        except TransportWriteError as e:
            logger.debug(f"Dropped metric line for {self.prefix}{bucket}: {e}")

    # ==========================================================================
    # Buffering
    # ==========================================================================

    def _send(self, line: str) -> None:
        """
        Append one line to the buffer, flushing first if it would not fit.

        Raises:
            TransportWriteError: If the preceding flush failed; the line is
                not appended
        """
        data = line.encode("utf-8", "backslashreplace")

        with self._lock:
            if self._closed:
                return

            if len(data) > self.packet_size:
                self._inc(LINES_OVERSIZED)
                logger.warning(
                    f"Dropping {len(data)} byte metric line larger than "
                    f"packet size {self.packet_size}: {line[:64]!r}"
                )
                return

            if len(self._buffer) + len(data) + 1 >= self.packet_size:
                try:
                    self._flush_locked()
                except TransportWriteError:
                    self._inc(LINES_DROPPED)
                    raise

            if self._buffer:
                self._buffer += b"\n"
            self._buffer += data
            self._inc(LINES_BUFFERED)

    def flush(self) -> None:
        """
        Write all buffered lines to the transport as one datagram.

        Flushing an empty buffer does nothing. On failure the buffer is
        left untouched so the same payload can be retried.

        Raises:
            TransportWriteError: If the transport rejected the write
        """
        with self._lock:
            self._flush_locked()

    def _flush_locked(self) -> None:
        """Flush body; the caller must hold ``self._lock``."""
        if not self._buffer:
            return

        payload = bytes(self._buffer)
        try:
            self._transport.write(payload)
        except OSError as e:
            self._inc(FLUSH_ERRORS)
            raise TransportWriteError(
                f"Failed to write {len(payload)} byte packet: {e}",
                payload_size=len(payload),
            ) from e

        self._buffer.clear()
        self._inc(PACKETS_SENT)
        self._inc(BYTES_SENT, len(payload))

    def _inc(self, name: str, value: int = 1) -> None:
        if self._stats is not None:
            self._stats.inc(name, value)

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def close(self) -> None:
        """
        Flush what is left and close the transport.

        A failing final flush is logged, not raised. Recording after close
        is silently ignored. Safe to call more than once.
        """
        with self._lock:
            if self._closed:
                return
            try:
                self._flush_locked()
            except TransportWriteError as e:
                logger.debug(f"Final flush failed on close: {e}")
            finally:
                self._closed = True
                self._transport.close()

        logger.debug("Statsd client closed")

    def __enter__(self) -> StatsdClient:
        return self

    @property
    def buffered_bytes(self) -> int:
        """Number of bytes currently waiting in the buffer."""
        with self._lock:
            return len(self._buffer)

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    @property
    def stats(self) -> ClientStats | None:
        """Client counters, if tracking is enabled."""
        return self._stats

    def __repr__(self) -> str:
        return (
            f"StatsdClient(prefix={self.prefix!r}, "
            f"packet_size={self.packet_size})"
        )


__all__ = ["StatsdClient"]
