# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class AuthCheckError(Exception):
    """Base class for errors raised by AuthCheck."""


class ConfigurationError(AuthCheckError):
    """Raised when a comparison mode cannot be built from the supplied credentials."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    INVALID_URL = "INVALID_URL"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _exception_chain(exc: BaseException, limit: int = 8):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen and len(seen) < limit:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError, httpx.TooManyRedirects)):
        return ErrorCategory.PROTOCOL_ERROR

    # httpx wraps the underlying socket/ssl error (through httpcore), so walk the chain.
    chain = list(_exception_chain(exc))
    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    # Request construction in httpx raises plain ValueError/TypeError for malformed targets.
    if isinstance(exc, ValueError):
        return ErrorCategory.INVALID_URL

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.INVALID_URL: "Malformed endpoint URL",
        ErrorCategory.PROTOCOL_ERROR: "Malformed HTTP response",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


__all__ = [
    "AuthCheckError",
    "ConfigurationError",
    "ErrorCategory",
    "categorize_exception",
    "error_category_to_reason",
]
