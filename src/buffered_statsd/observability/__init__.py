# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the buffered statsd client.

Classes:
    ClientStats: Thread-safe counters with optional Prometheus export.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
    All counter name constants from the constants module.
"""

from .constants import (
    BYTES_SENT,
    FLUSH_ERRORS,
    LINES_BUFFERED,
    LINES_DROPPED,
    LINES_OVERSIZED,
    LINES_SAMPLED_OUT,
    METRIC_PREFIX,
    PACKETS_SENT,
    STAT_DESCRIPTIONS,
    prometheus_name,
)
from .stats import PROMETHEUS_AVAILABLE, ClientStats

__all__ = [
    "BYTES_SENT",
    "FLUSH_ERRORS",
    "LINES_BUFFERED",
    "LINES_DROPPED",
    "LINES_OVERSIZED",
    "LINES_SAMPLED_OUT",
    "METRIC_PREFIX",
    "PACKETS_SENT",
    "PROMETHEUS_AVAILABLE",
    "STAT_DESCRIPTIONS",
    "ClientStats",
    "prometheus_name",
]
