# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
UDP transport for the buffering client.

The socket is connected once at construction. For UDP, "connecting" only
resolves the destination and fixes the peer address; nothing is sent
and no handshake takes place. Writes after that are single ``send()``
calls with no acknowledgment.
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import Any

from .config import DEFAULT_CONNECT_TIMEOUT
from .exceptions import TransportConnectionError

logger = logging.getLogger(__name__)


def _resolve(host: str, port: int, timeout: float) -> list[Any]:
    """
    Resolve a datagram destination, giving up after ``timeout`` seconds.

    The lookup runs on a daemon thread. A lookup that outlives the timeout
    is abandoned rather than joined, so a hung resolver never holds up
    interpreter shutdown.
    """
    result: list[Any] = []
    error: list[OSError] = []

    def lookup() -> None:
        try:
            result.extend(socket.getaddrinfo(host, port, 0, socket.SOCK_DGRAM))
        except OSError as e:
            error.append(e)

    resolver = threading.Thread(target=lookup, name="statsd-resolve", daemon=True)
    resolver.start()
    resolver.join(timeout)

    if resolver.is_alive():
        raise TransportConnectionError(
            f"Timed out resolving {host}:{port} after {timeout}s",
            host=host,
            port=port,
        )
    if error:
        raise TransportConnectionError(
            f"Failed to resolve {host}:{port}: {error[0]}", host=host, port=port
        ) from error[0]
    return result


class UDPTransport:
    """
    Connected UDP socket satisfying TransportProtocol.

    Use ``UDPTransport.connect()`` to build one; the constructor takes an
    already-connected socket.
    """

    def __init__(self, sock: socket.socket, peer: tuple[Any, ...]) -> None:
        self._sock = sock
        self._peer = peer
        self._closed = False

    @classmethod
    def connect(
        cls,
        host: str,
        port: int,
        timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> UDPTransport:
        """
        Resolve ``host`` and connect a datagram socket to it.

        Every resolved address is tried in order until one connects.

        Args:
            host: Host name or IP literal
            port: UDP port
            timeout: Bound on resolution and on each socket operation

        Returns:
            A connected transport

        Raises:
            TransportConnectionError: If no resolved address could be used
        """
        last_error: OSError | None = None

        for family, socktype, proto, _, sockaddr in _resolve(host, port, timeout):
            sock: socket.socket | None = None
            try:
                sock = socket.socket(family, socktype, proto)
                sock.settimeout(timeout)
                sock.connect(sockaddr)
            except OSError as e:
                last_error = e
                if sock is not None:
                    sock.close()
                continue

            logger.info(f"Statsd transport connected to {host}:{port}")
            return cls(sock, sockaddr)

        raise TransportConnectionError(
            f"Failed to connect to {host}:{port}: {last_error}",
            host=host,
            port=port,
        ) from last_error

    def write(self, data: bytes) -> int:
        """Send ``data`` as one datagram."""
        return self._sock.send(data)

    def close(self) -> None:
        """Close the socket. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._sock.close()

    @property
    def peer(self) -> tuple[Any, ...]:
        """The resolved address the socket is connected to."""
        return self._peer

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed


__all__ = ["UDPTransport"]
