# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fan-out scheduler: run every (endpoint, method) comparison on a bounded worker pool."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from ..config import HttpSettings, load_http_settings
from ..models.context import AuthContext
from ..models.outcome import ComparisonOutcome
from .compare import compare
from .prober import Prober

logger = logging.getLogger(__name__)

DEFAULT_METHODS: tuple[str, ...] = ("GET", "POST")


class FanOutScheduler:
    """
    Schedule one comparison task per (endpoint, method) pair and stream the outcomes.

    Tasks are queued on a ThreadPoolExecutor capped at ``max_workers``. Outcomes are
    yielded in completion order; the stream ends only once every task has produced
    exactly one outcome.
    """

    def __init__(
        self,
        prober: Prober,
        *,
        max_workers: int | None = None,
        methods: Iterable[str] = DEFAULT_METHODS,
        settings: HttpSettings | None = None,
    ):
        settings = settings or prober.settings or load_http_settings()
        self.prober = prober
        self.max_workers = max(1, max_workers if max_workers is not None else settings.max_workers)
        self.methods = tuple(methods)

    def total_for(self, endpoints: list[str]) -> int:
        return len(endpoints) * len(self.methods)

    def run(
        self,
        endpoints: Iterable[str],
        context_a: AuthContext,
        context_b: AuthContext,
    ) -> Iterator[ComparisonOutcome]:
        endpoints = list(endpoints)
        if not endpoints:
            return

        executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="authcheck")
        pending: dict[Future[ComparisonOutcome], tuple[str, str]] = {}
        try:
            for endpoint in endpoints:
                for method in self.methods:
                    future = executor.submit(compare, self.prober, endpoint, method, context_a, context_b)
                    pending[future] = (endpoint, method)
            logger.debug("Queued %d comparison tasks on %d workers", len(pending), self.max_workers)

            for future in as_completed(pending):
                endpoint, method = pending[future]
                try:
                    outcome = future.result()
                except Exception as exc:  # noqa: BLE001
                    logger.error("Comparison task %s %s raised: %s", method, endpoint, exc, exc_info=exc)
                    outcome = ComparisonOutcome.failed(
                        endpoint,
                        method,
                        label_a=context_a.label,
                        label_b=context_b.label,
                        reason=f"Unexpected error: {exc}",
                    )
                yield outcome
        finally:
            # Only matters when the consumer stops early: drop tasks that never started.
            executor.shutdown(wait=True, cancel_futures=True)
