# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable finding blocks."""

from __future__ import annotations

from ..models.outcome import ComparisonOutcome, ProbeOutcome

FINDING_HEADLINE = "Potential Auth Bypass Found!"


def _context_line(label: str, result: ProbeOutcome | None) -> str:
    status = result.status_code if result is not None else 0
    size = result.body_size if result is not None else 0
    return f"{label}: {status} ({size} bytes)"


def format_finding(outcome: ComparisonOutcome) -> tuple[str, str, str, str]:
    """Return the headline, endpoint line and one line per context."""
    return (
        FINDING_HEADLINE,
        f"Endpoint: {outcome.endpoint} [{outcome.method}]",
        _context_line(outcome.label_a, outcome.result_a),
        _context_line(outcome.label_b, outcome.result_b),
    )
