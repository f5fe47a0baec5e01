# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
AuthCheck package entrypoint.

AuthCheck probes a list of HTTP endpoints under two authentication contexts and
flags endpoints whose responses cannot be told apart (same status code, same body
size), a triage signal for authentication bypasses. HTTP behavior is abstracted
behind an injectable client interface, and domain objects are modeled with typed
dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .errors import AuthCheckError, ConfigurationError, ErrorCategory
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RetryConfig,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    AuthContext,
    ComparisonOutcome,
    ComparisonStatus,
    ProbeOutcome,
    ProbeStatus,
    RunSummary,
)
from .modes import ComparisonMode, build_contexts
from .report import ConsolePresenter
from .runtime import AuthCheck
from .scan import ComparisonRunner, FanOutScheduler, Prober, compare, is_potential_bypass
from .version import __version__

__all__ = [
    "AuthCheck",
    "AuthCheckError",
    "AuthContext",
    "ComparisonMode",
    "ComparisonOutcome",
    "ComparisonRunner",
    "ComparisonStatus",
    "ConfigurationError",
    "ConsolePresenter",
    "ErrorCategory",
    "FanOutScheduler",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "ProbeOutcome",
    "ProbeStatus",
    "Prober",
    "RetryConfig",
    "RunSummary",
    "StubHttpClient",
    "build_contexts",
    "compare",
    "create_default_http_client",
    "is_potential_bypass",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
