# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Names of the client's own counters.

Each counter is tracked in the dict snapshot under its short name and,
when Prometheus export is enabled, as ``buffered_statsd_<name>_total``.
"""

METRIC_PREFIX = "buffered_statsd"
"""Prefix for all Prometheus metrics exported by this library."""

LINES_BUFFERED = "lines_buffered"
"""Lines appended to the send buffer."""

LINES_SAMPLED_OUT = "lines_sampled_out"
"""Events skipped by the sampling decision."""

LINES_DROPPED = "lines_dropped"
"""Lines discarded because the flush that had to precede them failed."""

LINES_OVERSIZED = "lines_oversized"
"""Lines discarded because they can never fit in one packet."""

PACKETS_SENT = "packets_sent"
"""Datagrams written to the transport."""

BYTES_SENT = "bytes_sent"
"""Payload bytes written to the transport."""

FLUSH_ERRORS = "flush_errors"
"""Transport writes that raised."""

STAT_DESCRIPTIONS: dict[str, str] = {
    LINES_BUFFERED: "Total metric lines appended to the send buffer",
    LINES_SAMPLED_OUT: "Total metric events skipped by sampling",
    LINES_DROPPED: "Total metric lines dropped after a failed flush",
    LINES_OVERSIZED: "Total metric lines larger than the packet size",
    PACKETS_SENT: "Total datagrams written to the transport",
    BYTES_SENT: "Total payload bytes written to the transport",
    FLUSH_ERRORS: "Total failed transport writes",
}
"""Every tracked counter with its Prometheus help text."""


def prometheus_name(stat_name: str) -> str:
    """
    Convert a short counter name to its Prometheus name.

    Example:
        >>> prometheus_name("packets_sent")
        'buffered_statsd_packets_sent_total'
    """
    return f"{METRIC_PREFIX}_{stat_name}_total"


__all__ = [
    "BYTES_SENT",
    "FLUSH_ERRORS",
    "LINES_BUFFERED",
    "LINES_DROPPED",
    "LINES_OVERSIZED",
    "LINES_SAMPLED_OUT",
    "METRIC_PREFIX",
    "PACKETS_SENT",
    "STAT_DESCRIPTIONS",
    "prometheus_name",
]
