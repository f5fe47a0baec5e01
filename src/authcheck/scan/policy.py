# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bypass detection rule."""

from __future__ import annotations

from ..models.outcome import ComparisonOutcome

BYPASS_STATUS_CODE = 200


def is_potential_bypass(outcome: ComparisonOutcome) -> bool:
    """
    Flag a comparison whose two responses cannot be told apart.

    Both contexts must answer 200 with bodies of the same size. Identical size does not
    prove identical content, so this is a triage heuristic and false positives are
    expected. Skipped and inconclusive outcomes never match.
    """
    if not outcome.completed or outcome.result_a is None or outcome.result_b is None:
        return False
    a, b = outcome.result_a, outcome.result_b
    return a.status_code == BYPASS_STATUS_CODE and b.status_code == BYPASS_STATUS_CODE and a.body_size == b.body_size
