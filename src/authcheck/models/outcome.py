# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe and comparison outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ErrorCategory


class ProbeStatus(str, Enum):
    COMPLETED = "COMPLETED"
    INCONCLUSIVE = "INCONCLUSIVE"


class ComparisonStatus(str, Enum):
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"
    INCONCLUSIVE = "INCONCLUSIVE"


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a single request against one endpoint under one context."""

    status: ProbeStatus
    status_code: int = 0
    body_size: int = 0
    attempts: int = 1
    error_category: ErrorCategory | None = None
    error_type: str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.COMPLETED

    @classmethod
    def completed(cls, status_code: int, body_size: int, *, attempts: int = 1) -> ProbeOutcome:
        return cls(ProbeStatus.COMPLETED, status_code=status_code, body_size=body_size, attempts=attempts)

    @classmethod
    def inconclusive(
        cls,
        *,
        error_category: ErrorCategory | None = None,
        error_type: str | None = None,
        error_message: str | None = None,
        attempts: int = 1,
    ) -> ProbeOutcome:
        return cls(
            ProbeStatus.INCONCLUSIVE,
            attempts=attempts,
            error_category=error_category,
            error_type=error_type,
            error_message=error_message,
        )


@dataclass(frozen=True)
class ComparisonOutcome:
    """
    Paired result of probing one endpoint/method under both contexts.

    ``result_a``/``result_b`` are only both populated when ``status`` is COMPLETED.
    An INCONCLUSIVE outcome keeps whichever probe results were gathered so the cause
    stays observable; a SKIPPED outcome carries none.
    """

    endpoint: str
    method: str
    status: ComparisonStatus
    label_a: str = ""
    label_b: str = ""
    result_a: ProbeOutcome | None = None
    result_b: ProbeOutcome | None = None
    reason: str = ""

    @property
    def completed(self) -> bool:
        return self.status is ComparisonStatus.COMPLETED

    @classmethod
    def skipped(cls, endpoint: str, method: str, reason: str = "static asset") -> ComparisonOutcome:
        return cls(endpoint=endpoint, method=method, status=ComparisonStatus.SKIPPED, reason=reason)

    @classmethod
    def failed(
        cls,
        endpoint: str,
        method: str,
        *,
        label_a: str = "",
        label_b: str = "",
        result_a: ProbeOutcome | None = None,
        result_b: ProbeOutcome | None = None,
        reason: str = "",
    ) -> ComparisonOutcome:
        return cls(
            endpoint=endpoint,
            method=method,
            status=ComparisonStatus.INCONCLUSIVE,
            label_a=label_a,
            label_b=label_b,
            result_a=result_a,
            result_b=result_b,
            reason=reason,
        )
