# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test-friendly HttpClient implementations."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import replace

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


def _fresh(response: HttpResponse) -> HttpResponse:
    # Callers annotate meta per attempt; configured fixtures are shared across threads.
    return replace(response, headers=dict(response.headers), meta=dict(response.meta))


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are looked up by URL, or computed by a responder callable when one is
    given (useful when the answer depends on the request headers). Calls are recorded
    under a lock because the scheduler drives the client from several threads.
    """

    def __init__(
        self,
        responses: dict[str, HttpResponse] | None = None,
        responder: Responder | None = None,
    ):
        self._responses = responses or {}
        self._responder = responder
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if self._responder is not None:
            return _fresh(self._responder(request))
        if request.url in self._responses:
            return _fresh(self._responses[request.url])
        return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")

    def calls_for(self, url: str) -> list[HttpRequest]:
        with self._lock:
            return [req for req in self.requests if req.url == url]

    def close(self) -> None:
        self.closed = True
