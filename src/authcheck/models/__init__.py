# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for AuthCheck."""

from ..http.models import Headers, HttpRequest, HttpResponse, RetryConfig
from .context import AuthContext
from .outcome import ComparisonOutcome, ComparisonStatus, ProbeOutcome, ProbeStatus
from .report import RunSummary

__all__ = [
    "AuthContext",
    "ComparisonOutcome",
    "ComparisonStatus",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeOutcome",
    "ProbeStatus",
    "RetryConfig",
    "RunSummary",
]
