# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-request prober: one endpoint, one method, one header set."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..config import HttpSettings, load_http_settings
from ..http.client import HttpClient
from ..http.models import HttpRequest, RetryConfig
from ..http.retry import send_with_retries
from ..models.outcome import ProbeOutcome

logger = logging.getLogger(__name__)


class Prober:
    """
    Issue one bodiless request and reduce the response to (status code, body size).

    Transport failures never escape: they become an inconclusive ProbeOutcome. The
    prober holds no per-request state, so one instance is shared by every worker.
    """

    def __init__(
        self,
        http_client: HttpClient,
        settings: HttpSettings | None = None,
        retry_config: RetryConfig | None = None,
    ):
        self.http_client = http_client
        self.settings = settings or load_http_settings()
        self.retry_config = retry_config or RetryConfig.from_settings(self.settings)

    def probe(self, url: str, method: str, headers: Mapping[str, str] | None = None) -> ProbeOutcome:
        request = HttpRequest(
            url=url,
            method=method,
            headers=dict(headers or {}),
            timeout=self.settings.timeout,
            allow_redirects=self.settings.allow_redirects,
        )
        response = send_with_retries(self.http_client, request, retry_config=self.retry_config)
        attempts = int(response.meta.get("attempts", 1))

        if not response.ok or response.status_code is None:
            logger.debug(
                "Inconclusive probe %s %s after %d attempt(s): %s",
                method,
                url,
                attempts,
                response.error_message or response.error_type or "no status code",
            )
            return ProbeOutcome.inconclusive(
                error_category=response.error_category,
                error_type=response.error_type,
                error_message=response.error_message,
                attempts=attempts,
            )

        return ProbeOutcome.completed(response.status_code, response.body_size, attempts=attempts)
