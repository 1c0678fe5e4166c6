# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for client components.

Available protocols:
- StatsReporter: Interface shared by every metric reporter
- TransportProtocol: Interface for the datagram sink behind a client
"""

from .reporter import StatsReporter
from .transport import TransportProtocol

__all__ = [
    "StatsReporter",
    "TransportProtocol",
]
