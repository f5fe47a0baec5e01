# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Whole-request deadline for the httpx transport.

httpx timeouts apply per socket operation, so a server that trickles its status line
and headers one byte at a time can hold a request open indefinitely. The network
backend here clamps every connect, read and write to whatever remains of the deadline
set for the calling thread, which covers connecting, sending, reading headers and
reading the body, including on pooled keep-alive connections.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import httpcore
import httpx

_state = threading.local()


@contextmanager
def request_deadline(seconds: float | None) -> Iterator[float | None]:
    """Bound all network I/O performed by this thread to ``seconds`` from now."""
    previous = getattr(_state, "deadline", None)
    deadline = time.monotonic() + seconds if seconds and seconds > 0 else None
    _state.deadline = deadline
    try:
        yield deadline
    finally:
        _state.deadline = previous


def _clamp(timeout: float | None, exc_type: type[Exception]) -> float | None:
    deadline = getattr(_state, "deadline", None)
    if deadline is None:
        return timeout
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise exc_type("request deadline exceeded")
    return remaining if timeout is None else min(timeout, remaining)


class DeadlineStream(httpcore.NetworkStream):
    def __init__(self, stream: httpcore.NetworkStream):
        self._stream = stream

    def read(self, max_bytes: int, timeout: float | None = None) -> bytes:
        return self._stream.read(max_bytes, _clamp(timeout, httpcore.ReadTimeout))

    def write(self, buffer: bytes, timeout: float | None = None) -> None:
        self._stream.write(buffer, _clamp(timeout, httpcore.WriteTimeout))

    def close(self) -> None:
        self._stream.close()

    def start_tls(self, ssl_context, server_hostname: str | None = None, timeout: float | None = None) -> httpcore.NetworkStream:
        stream = self._stream.start_tls(ssl_context, server_hostname, _clamp(timeout, httpcore.ConnectTimeout))
        return DeadlineStream(stream)

    def get_extra_info(self, info: str):
        return self._stream.get_extra_info(info)


class DeadlineBackend(httpcore.NetworkBackend):
    """Synchronous network backend whose streams honour the per-thread deadline."""

    def __init__(self, backend: httpcore.NetworkBackend | None = None):
        self._backend = backend or httpcore.SyncBackend()

    def connect_tcp(
        self,
        host: str,
        port: int,
        timeout: float | None = None,
        local_address: str | None = None,
        socket_options: Iterable | None = None,
    ) -> httpcore.NetworkStream:
        stream = self._backend.connect_tcp(
            host,
            port,
            timeout=_clamp(timeout, httpcore.ConnectTimeout),
            local_address=local_address,
            socket_options=socket_options,
        )
        return DeadlineStream(stream)

    def connect_unix_socket(
        self,
        path: str,
        timeout: float | None = None,
        socket_options: Iterable | None = None,
    ) -> httpcore.NetworkStream:
        stream = self._backend.connect_unix_socket(
            path,
            timeout=_clamp(timeout, httpcore.ConnectTimeout),
            socket_options=socket_options,
        )
        return DeadlineStream(stream)

    def sleep(self, seconds: float) -> None:
        self._backend.sleep(seconds)


class DeadlineTransport(httpx.HTTPTransport):
    """httpx transport backed by a connection pool that uses DeadlineBackend."""

    def __init__(
        self,
        *,
        verify: bool = True,
        limits: httpx.Limits | None = None,
        network_backend: httpcore.NetworkBackend | None = None,
    ):
        limits = limits or httpx.Limits()
        self._pool = httpcore.ConnectionPool(
            ssl_context=httpx.create_ssl_context(verify=verify),
            max_connections=limits.max_connections,
            max_keepalive_connections=limits.max_keepalive_connections,
            keepalive_expiry=limits.keepalive_expiry,
            network_backend=network_backend or DeadlineBackend(),
        )
