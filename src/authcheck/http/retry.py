# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry helper for HttpClient implementations."""

from __future__ import annotations

import time

from ..config import load_http_settings
from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpRequest, HttpResponse, RetryConfig

# Retrying cannot fix these; the request would fail the same way again.
_NON_RETRYABLE = {ErrorCategory.INVALID_URL}


def build_default_retry_config() -> RetryConfig:
    """Create a RetryConfig from environment-backed HttpSettings."""
    settings = load_http_settings()
    return RetryConfig.from_settings(settings)


def send_with_retries(
    client: HttpClient,
    request: HttpRequest,
    *,
    retry_config: RetryConfig | None = None,
) -> HttpResponse:
    """Execute a request with basic retry/backoff semantics."""
    cfg = retry_config or build_default_retry_config()

    attempt = 0
    delay = cfg.initial_delay
    last_response: HttpResponse | None = None

    while attempt < cfg.max_attempts:
        try:
            response = client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc),
                error_type=exc.__class__.__name__,
                error_category=ErrorCategory.UNKNOWN_ERROR,
            )
        last_response = response
        attempt += 1

        if response.ok:
            response.meta["attempts"] = attempt
            return response

        # Only retry transport-level failures (no status code). A status code means the
        # server answered, which is a result, not a flaky transport.
        if response.status_code is not None or response.error_category in _NON_RETRYABLE:
            response.meta["attempts"] = attempt
            return response

        if attempt >= cfg.max_attempts:
            break
        time.sleep(delay)
        delay *= cfg.backoff_factor

    if last_response is not None:
        last_response.meta["attempts"] = attempt
        last_response.meta["retry_exhausted"] = True
        return last_response

    return HttpResponse(ok=False, url=request.url, error_message="No attempts made", meta={"attempts": 0, "retry_exhausted": True})
