# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Reporter implementations.

Available reporters:
- BaseReporter: Abstract base class defining the reporter interface
- StatsdClient: Buffering client writing datagrams to a statsd daemon
- NoOpClient: Reporter that discards everything, used when setup fails

The test double lives in ``buffered_statsd.testing``.
"""

from buffered_statsd.reporters.base import BaseReporter
from buffered_statsd.reporters.buffered import StatsdClient
from buffered_statsd.reporters.noop import NoOpClient

__all__ = [
    "BaseReporter",
    "NoOpClient",
    "StatsdClient",
]
