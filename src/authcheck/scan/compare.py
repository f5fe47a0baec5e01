# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Comparison task: probe one endpoint/method under both authentication contexts."""

from __future__ import annotations

from urllib.parse import urlsplit

from ..errors import error_category_to_reason
from ..models.context import AuthContext
from ..models.outcome import ComparisonOutcome, ComparisonStatus, ProbeOutcome
from .prober import Prober

STATIC_ASSET_SUFFIXES = (".js", ".map", ".svg")


def _endpoint_path(endpoint: str) -> str:
    try:
        return urlsplit(endpoint).path
    except ValueError:
        return endpoint


def is_static_asset(endpoint: str) -> bool:
    """True when the URL path ends in a static asset suffix (case-sensitive)."""
    return _endpoint_path(endpoint).endswith(STATIC_ASSET_SUFFIXES)


def _failure_reason(label: str, result: ProbeOutcome) -> str:
    reason = error_category_to_reason(result.error_category) or "Probe failed"
    return f"{label}: {reason}" if label else reason


def compare(
    prober: Prober,
    endpoint: str,
    method: str,
    context_a: AuthContext,
    context_b: AuthContext,
) -> ComparisonOutcome:
    """
    Gather both probe results for one (endpoint, method) pair.

    No detection policy is applied here; a COMPLETED outcome is returned whenever both
    probes produced a status code.
    """
    if is_static_asset(endpoint):
        return ComparisonOutcome.skipped(endpoint, method)

    result_a = prober.probe(endpoint, method, context_a.headers)
    if not result_a.ok:
        # Context B is not worth a request once the pair can no longer be compared.
        return ComparisonOutcome.failed(
            endpoint,
            method,
            label_a=context_a.label,
            label_b=context_b.label,
            result_a=result_a,
            reason=_failure_reason(context_a.label, result_a),
        )

    result_b = prober.probe(endpoint, method, context_b.headers)
    if not result_b.ok:
        return ComparisonOutcome.failed(
            endpoint,
            method,
            label_a=context_a.label,
            label_b=context_b.label,
            result_a=result_a,
            result_b=result_b,
            reason=_failure_reason(context_b.label, result_b),
        )

    return ComparisonOutcome(
        endpoint=endpoint,
        method=method,
        status=ComparisonStatus.COMPLETED,
        label_a=context_a.label,
        label_b=context_b.label,
        result_a=result_a,
        result_b=result_b,
    )
