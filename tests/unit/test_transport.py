# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the UDP transport."""

from __future__ import annotations

import socket
import threading
import time
from unittest.mock import MagicMock, patch

import pytest

from buffered_statsd.exceptions import TransportConnectionError
from buffered_statsd.transport import UDPTransport


class TestUDPTransportConnect:
    """Tests for UDPTransport.connect."""

    def test_connects_to_loopback(self):
        """Connecting a datagram socket needs no listener."""
        transport = UDPTransport.connect("127.0.0.1", 8125)
        try:
            assert transport.peer[:2] == ("127.0.0.1", 8125)
            assert transport.closed is False
        finally:
            transport.close()

    def test_resolution_failure(self):
        """An unresolvable host raises TransportConnectionError."""
        with patch(
            "socket.getaddrinfo", side_effect=socket.gaierror(-2, "Name not known")
        ):
            with pytest.raises(TransportConnectionError) as exc_info:
                UDPTransport.connect("nowhere.invalid", 8125)

        error = exc_info.value
        assert error.host == "nowhere.invalid"
        assert error.port == 8125
        assert isinstance(error.__cause__, socket.gaierror)

    def test_resolution_timeout(self):
        """Resolution is abandoned after the connect timeout."""

        def slow_getaddrinfo(*args, **kwargs):
            time.sleep(0.5)
            return []

        with patch("socket.getaddrinfo", side_effect=slow_getaddrinfo):
            start = time.perf_counter()
            with pytest.raises(TransportConnectionError, match="Timed out"):
                UDPTransport.connect("slow.example", 8125, timeout=0.05)
            elapsed = time.perf_counter() - start

        assert elapsed < 0.4

    def test_resolution_runs_on_daemon_thread(self):
        """An abandoned lookup must not keep the interpreter alive."""
        release = threading.Event()
        seen = []

        def hung_getaddrinfo(*args, **kwargs):
            seen.append(threading.current_thread())
            release.wait(5)
            return []

        try:
            with patch("socket.getaddrinfo", side_effect=hung_getaddrinfo):
                with pytest.raises(TransportConnectionError, match="Timed out"):
                    UDPTransport.connect("hung.example", 8125, timeout=0.05)
        finally:
            release.set()

        assert len(seen) == 1
        assert seen[0].daemon is True

    def test_connect_failure_on_every_address(self):
        """If no resolved address connects, the last error is raised."""
        addrinfo = [
            (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("10.0.0.1", 8125)),
            (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("10.0.0.2", 8125)),
        ]
        sock = MagicMock()
        sock.connect.side_effect = OSError("network unreachable")

        with patch("socket.getaddrinfo", return_value=addrinfo), patch(
            "buffered_statsd.transport.socket.socket", return_value=sock
        ):
            with pytest.raises(TransportConnectionError, match="network unreachable"):
                UDPTransport.connect("statsd", 8125)

        assert sock.connect.call_count == 2
        assert sock.close.call_count == 2

    def test_falls_back_to_next_address(self):
        """The first address that connects is used."""
        addrinfo = [
            (socket.AF_INET6, socket.SOCK_DGRAM, 17, "", ("::1", 8125, 0, 0)),
            (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("127.0.0.1", 8125)),
        ]
        bad_sock = MagicMock()
        bad_sock.connect.side_effect = OSError("no ipv6")
        good_sock = MagicMock()

        with patch("socket.getaddrinfo", return_value=addrinfo), patch(
            "buffered_statsd.transport.socket.socket",
            side_effect=[bad_sock, good_sock],
        ):
            transport = UDPTransport.connect("localhost", 8125, timeout=0.5)

        assert transport.peer == ("127.0.0.1", 8125)
        good_sock.settimeout.assert_called_once_with(0.5)
        good_sock.connect.assert_called_once_with(("127.0.0.1", 8125))
        bad_sock.close.assert_called_once()

    def test_logs_connection(self, caplog):
        """A successful connection is logged at INFO."""
        with caplog.at_level("INFO", logger="buffered_statsd.transport"):
            transport = UDPTransport.connect("127.0.0.1", 8125)
        transport.close()
        assert "connected to 127.0.0.1:8125" in caplog.text


class TestUDPTransportIO:
    """Tests for write and close."""

    def test_write_sends_whole_payload(self):
        """write() hands the payload to send() in one call."""
        sock = MagicMock()
        sock.send.return_value = 11
        transport = UDPTransport(sock, ("127.0.0.1", 8125))

        assert transport.write(b"hits:1|c\nx") == 11
        sock.send.assert_called_once_with(b"hits:1|c\nx")

    def test_write_propagates_os_error(self):
        """Socket errors are not swallowed by the transport."""
        sock = MagicMock()
        sock.send.side_effect = ConnectionRefusedError()
        transport = UDPTransport(sock, ("127.0.0.1", 8125))

        with pytest.raises(ConnectionRefusedError):
            transport.write(b"hits:1|c")

    def test_close_is_idempotent(self):
        """The socket is closed exactly once."""
        sock = MagicMock()
        transport = UDPTransport(sock, ("127.0.0.1", 8125))
        transport.close()
        transport.close()
        sock.close.assert_called_once()
        assert transport.closed is True
