# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Event sinks fed by the comparison runner."""

from typing import Protocol

from ..models.outcome import ComparisonOutcome


class ProgressSink(Protocol):
    """Receives one call per outcome, including skipped and inconclusive ones."""

    def on_progress(self, current: int, total: int) -> None: ...


class FindingSink(Protocol):
    """Receives only outcomes that matched the bypass rule."""

    def on_finding(self, outcome: ComparisonOutcome) -> None: ...
