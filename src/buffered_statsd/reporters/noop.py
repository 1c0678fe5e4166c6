# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""No-op reporter returned when the client cannot be set up."""

from .base import BaseReporter


class NoOpClient(BaseReporter):
    """
    Reporter that discards everything.

    Returned by the ``new()`` factories when the transport cannot be set
    up, so code mixed with metric calls keeps running unchanged.
    """

    def flush(self) -> None:
        pass

    def count(self, bucket: str, value: float, sample_rate: float = 1.0) -> None:
        pass

    def gauge(self, bucket: str, value: float) -> None:
        pass

    def timing(self, bucket: str, duration_ms: float) -> None:
        pass

    def count_unique(self, bucket: str, value: str) -> None:
        pass

    def __repr__(self) -> str:
        return "NoOpClient()"
