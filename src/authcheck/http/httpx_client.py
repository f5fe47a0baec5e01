# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .deadline import DeadlineTransport, request_deadline
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def build_limits(settings: HttpSettings) -> httpx.Limits:
    """Connection pool limits; the pool never holds fewer slots than there are workers."""
    return httpx.Limits(
        max_connections=max(settings.max_connections, settings.max_workers),
        max_keepalive_connections=settings.max_keepalive_connections,
        keepalive_expiry=settings.keepalive_expiry,
    )


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper shared by all worker threads of a run."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            transport=DeadlineTransport(verify=self.settings.verify_ssl, limits=build_limits(self.settings)),
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = {
            "User-Agent": self.settings.user_agent,
            # Sizes are compared as sent on the wire, so never negotiate compression.
            "Accept-Encoding": "identity",
        }
        headers.update(request.headers or {})

        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            url = httpx.URL(request.url)
            if url.scheme not in ("http", "https") or not url.host:
                raise httpx.UnsupportedProtocol(f"Endpoint is not an absolute http(s) URL: {request.url!r}")

            with request_deadline(timeout) as deadline, self._client.stream(
                request.method,
                url,
                headers=headers,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                body_size = 0
                # Checked here too for transports that do not go through the socket backend.
                for chunk in resp.iter_raw():
                    body_size += len(chunk)
                    if deadline is not None and time.monotonic() > deadline:
                        raise httpx.ReadTimeout(f"response body not read within {timeout}s", request=resp.request)

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                body_size=body_size,
                url=str(resp.url),
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed: %s (%s)", request.method, request.url, exc, category.value)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc),
                error_type=type(exc).__name__,
                error_category=category,
            )

    def close(self) -> None:
        self._client.close()
