# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level AuthCheck facade wiring the HTTP client, engine and presentation."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models.context import AuthContext
from .models.report import RunSummary
from .report.console import ConsolePresenter
from .scan.prober import Prober
from .scan.runner import ComparisonRunner
from .scan.scheduler import FanOutScheduler


class AuthCheck:
    """
    Convenience wrapper that shares one HTTP client (and its connection pool) across
    every comparison task of a run.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: HttpSettings | None = None,
        *,
        max_workers: int | None = None,
    ):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.prober = Prober(self.http_client, self.http_settings)
        self.scheduler = FanOutScheduler(self.prober, max_workers=max_workers, settings=self.http_settings)
        self.runner = ComparisonRunner(self.scheduler)

    def run(
        self,
        endpoints: Iterable[str],
        context_a: AuthContext,
        context_b: AuthContext,
        *,
        presenter: ConsolePresenter | None = None,
    ) -> RunSummary:
        summary = self.runner.run(
            endpoints,
            context_a,
            context_b,
            progress_sink=presenter,
            finding_sink=presenter,
        )
        if presenter is not None:
            presenter.finish()
        return summary

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> AuthCheck:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
