# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the buffered statsd client.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from StatsdError, making it easy to catch
all client-related exceptions with a single except clause.

Recording operations (count, gauge, timing, count_unique) never raise
these errors. They surface only from explicit calls such as
``StatsdClient.flush()`` or the strict ``StatsdClient.connect()``.
"""


class StatsdError(Exception):
    """Base exception for all statsd client errors.

    Example:
        try:
            client.flush()
        except StatsdError as e:
            logger.warning(f"Metrics flush failed: {e}")
    """

    pass


class ConfigurationError(StatsdError, ValueError):
    """Raised when client configuration is invalid.

    Common causes include:
    - A packet size smaller than one byte
    - A non-positive connect timeout
    - A malformed ``host:port`` address or an out-of-range port

    Subclasses ValueError so callers validating plain values can keep
    catching the builtin type.
    """

    pass


class TransportConnectionError(StatsdError):
    """Raised when the datagram transport cannot be set up.

    For UDP this usually means the host could not be resolved or the
    socket could not be created. The ``new()`` factories catch this error
    and return a no-op reporter alongside it.

    Attributes:
        host: The host the client tried to connect to.
        port: The port the client tried to connect to.

    Example:
        reporter, err = new("statsd.internal:8125", "web.")
        if err is not None:
            logger.warning(f"Metrics disabled: {err}")
    """

    def __init__(
        self,
        message: str,
        host: str | None = None,
        port: int | None = None,
    ):
        super().__init__(message)
        self.host = host
        self.port = port


class TransportWriteError(StatsdError):
    """Raised when writing a buffered packet to the transport fails.

    The buffer is left untouched so that a later ``flush()`` can retry
    the same payload.

    Attributes:
        payload_size: Size in bytes of the packet that could not be written.
    """

    def __init__(self, message: str, payload_size: int | None = None):
        super().__init__(message)
        self.payload_size = payload_size


__all__ = [
    "ConfigurationError",
    "StatsdError",
    "TransportConnectionError",
    "TransportWriteError",
]
