# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication context (header configuration) model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class AuthContext:
    """
    A named, read-only set of header overrides representing one authentication context.

    The headers are copied into a mappingproxy at construction so the same instance can
    be shared by every worker thread without any locking.
    """

    label: str
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def as_request_headers(self) -> dict[str, str]:
        """Return a fresh mutable copy for a single request."""
        return dict(self.headers)
