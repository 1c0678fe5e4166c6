# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client Configuration for the buffered statsd client

This module provides the configuration dataclass for the client and the
parser for ``host:port`` address strings.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_PORT = 8125
"""Standard statsd UDP port."""

DEFAULT_PACKET_SIZE = 512
"""Default datagram ceiling, kept under common MTUs to avoid fragmentation."""

DEFAULT_CONNECT_TIMEOUT = 1.0
"""Default bound on transport setup, in seconds."""


def parse_address(address: str) -> tuple[str, int]:
    """
    Split a ``host:port`` address into its parts.

    IPv6 literals must be bracketed (``[::1]:8125``). When the port is
    omitted the standard statsd port is used.

    Args:
        address: Address string such as ``"127.0.0.1:8125"``

    Returns:
        Tuple of (host, port)

    Raises:
        ConfigurationError: If the host is empty or the port is invalid
    """
    address = address.strip()
    port_str = ""

    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep:
            raise ConfigurationError(f"Unterminated IPv6 literal in address: {address!r}")
        if rest:
            if not rest.startswith(":"):
                raise ConfigurationError(f"Invalid address: {address!r}")
            port_str = rest[1:]
    elif address.count(":") > 1:
        # Bare IPv6 literal without a port
        host = address
    else:
        host, _, port_str = address.partition(":")

    if not host:
        raise ConfigurationError(f"Missing host in address: {address!r}")

    if not port_str:
        return host, DEFAULT_PORT

    try:
        port = int(port_str)
    except ValueError as e:
        raise ConfigurationError(f"Invalid port in address: {address!r}") from e

    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range in address: {address!r}")

    return host, port


@dataclass
class ClientConfig:
    """
    Configuration for a buffering statsd client.

    Only the host is required; everything else has production defaults.
    """

    host: str
    """Host name or IP literal of the statsd daemon."""

    port: int = DEFAULT_PORT
    """UDP port of the statsd daemon."""

    prefix: str = ""
    """Prepended verbatim to every bucket name (include any trailing dot)."""

    packet_size: int = DEFAULT_PACKET_SIZE
    """Maximum size in bytes of a single flushed datagram."""

    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    """Timeout for transport setup in seconds."""

    enable_stats: bool = True
    """Track client-side counters (packets sent, lines dropped, ...)."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.host:
            raise ConfigurationError("host must not be empty")
        if not 0 < self.port < 65536:
            raise ConfigurationError("port must be between 1 and 65535")
        if self.packet_size < 1:
            raise ConfigurationError("packet_size must be at least 1")
        if self.connect_timeout <= 0:
            raise ConfigurationError("connect_timeout must be positive")

    @classmethod
    def from_address(cls, address: str, prefix: str = "", **kwargs: object) -> "ClientConfig":
        """Build a config from a ``host:port`` string."""
        host, port = parse_address(address)
        return cls(host=host, port=port, prefix=prefix, **kwargs)  # type: ignore[arg-type]

    @property
    def address(self) -> str:
        """The ``host:port`` form of this config, bracketing IPv6 hosts."""
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_PACKET_SIZE",
    "DEFAULT_PORT",
    "ClientConfig",
    "parse_address",
]
