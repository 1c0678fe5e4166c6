# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the datagram transport used by the buffering client."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Minimal protocol for a connectionless, best-effort byte sink.

    The transport is bound to its destination before it is handed to a
    client. There is no acknowledgment, no delivery guarantee and no
    ordering guarantee across writes.
    """

    def write(self, data: bytes) -> int:
        """
        Send one datagram.

        Returns:
            Number of bytes written

        Raises:
            OSError: If the operating system rejected the write
        """
        ...

    def close(self) -> None:
        """Release the underlying socket."""
        ...
