# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run a full comparison: fan out, then dispatch every outcome to the presentation sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.context import AuthContext
from ..models.outcome import ComparisonStatus
from ..models.report import RunSummary
from ..report.sinks import FindingSink, ProgressSink
from .policy import is_potential_bypass
from .scheduler import FanOutScheduler

logger = logging.getLogger(__name__)


class ComparisonRunner:
    """Single consumer of the scheduler's outcome stream."""

    def __init__(self, scheduler: FanOutScheduler):
        self.scheduler = scheduler

    def run(
        self,
        endpoints: Iterable[str],
        context_a: AuthContext,
        context_b: AuthContext,
        *,
        progress_sink: ProgressSink | None = None,
        finding_sink: FindingSink | None = None,
    ) -> RunSummary:
        endpoints = list(endpoints)
        summary = RunSummary(total=self.scheduler.total_for(endpoints))
        logger.info(
            "Comparing %d endpoint(s) as %r vs %r (%d tasks)",
            len(endpoints),
            context_a.label,
            context_b.label,
            summary.total,
        )

        for outcome in self.scheduler.run(endpoints, context_a, context_b):
            summary.record(outcome)
            if progress_sink is not None:
                progress_sink.on_progress(summary.processed, summary.total)

            if outcome.status is ComparisonStatus.SKIPPED:
                logger.debug("Skipped %s [%s]: %s", outcome.endpoint, outcome.method, outcome.reason)
                continue
            if outcome.status is ComparisonStatus.INCONCLUSIVE:
                logger.debug("Inconclusive %s [%s]: %s", outcome.endpoint, outcome.method, outcome.reason)
                continue

            if is_potential_bypass(outcome):
                summary.findings.append(outcome)
                if finding_sink is not None:
                    finding_sink.on_finding(outcome)

        logger.info(
            "Run finished: %d processed, %d compared, %d skipped, %d inconclusive, %d finding(s)",
            summary.processed,
            summary.completed,
            summary.skipped,
            summary.inconclusive,
            summary.finding_count,
        )
        return summary
