# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient, build_limits
from .models import Headers, HttpRequest, HttpResponse, RetryConfig
from .retry import build_default_retry_config, send_with_retries

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "RetryConfig",
    "StubHttpClient",
    "build_default_retry_config",
    "build_limits",
    "create_default_http_client",
    "send_with_retries",
]
