# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run summary model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .outcome import ComparisonOutcome, ComparisonStatus


@dataclass
class RunSummary:
    """Counters for a finished comparison run, plus the findings themselves."""

    total: int = 0
    processed: int = 0
    completed: int = 0
    skipped: int = 0
    inconclusive: int = 0
    findings: list[ComparisonOutcome] = field(default_factory=list)

    def record(self, outcome: ComparisonOutcome) -> None:
        self.processed += 1
        if outcome.status is ComparisonStatus.COMPLETED:
            self.completed += 1
        elif outcome.status is ComparisonStatus.SKIPPED:
            self.skipped += 1
        else:
            self.inconclusive += 1

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "processed": self.processed,
            "completed": self.completed,
            "skipped": self.skipped,
            "inconclusive": self.inconclusive,
            "findings": [
                {
                    "endpoint": finding.endpoint,
                    "method": finding.method,
                    "label_a": finding.label_a,
                    "label_b": finding.label_b,
                    "status_a": finding.result_a.status_code if finding.result_a else None,
                    "status_b": finding.result_b.status_code if finding.result_b else None,
                    "size_a": finding.result_a.body_size if finding.result_a else None,
                    "size_b": finding.result_b.body_size if finding.result_b else None,
                }
                for finding in self.findings
            ],
        }
