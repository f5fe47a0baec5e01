# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Comparison modes: turn credentials into the two authentication contexts."""

from __future__ import annotations

from enum import IntEnum

from .errors import ConfigurationError
from .models.context import AuthContext


class ComparisonMode(IntEnum):
    COOKIE_VS_NONE = 1
    COOKIE_VS_COOKIE = 2
    TOKEN_VS_NONE = 3
    TOKEN_VS_TOKEN = 4


MODE_DESCRIPTIONS: dict[ComparisonMode, str] = {
    ComparisonMode.COOKIE_VS_NONE: "Cookies -> No Cookies",
    ComparisonMode.COOKIE_VS_COOKIE: "Compare Two Cookies",
    ComparisonMode.TOKEN_VS_NONE: "Bearer Token -> No Bearer Token",
    ComparisonMode.TOKEN_VS_TOKEN: "Compare Two Bearer Tokens",
}


def _cookie(value: str) -> dict[str, str]:
    return {"Cookie": value}


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def build_contexts(
    mode: int,
    *,
    cookie1: str | None = None,
    cookie2: str | None = None,
    token1: str | None = None,
    token2: str | None = None,
) -> tuple[AuthContext, AuthContext]:
    """Return (context A, context B) for ``mode`` or raise ConfigurationError."""
    try:
        selected = ComparisonMode(mode)
    except ValueError:
        raise ConfigurationError("Invalid mode. Must be 1-4") from None

    if selected is ComparisonMode.COOKIE_VS_NONE:
        if not cookie1:
            raise ConfigurationError("Cookie (-c1) is required for mode 1")
        return AuthContext("With Cookie", _cookie(cookie1)), AuthContext("Without Cookie")

    if selected is ComparisonMode.COOKIE_VS_COOKIE:
        if not cookie1 or not cookie2:
            raise ConfigurationError("Both cookies (-c1 and -c2) are required for mode 2")
        return AuthContext("Cookie 1", _cookie(cookie1)), AuthContext("Cookie 2", _cookie(cookie2))

    if selected is ComparisonMode.TOKEN_VS_NONE:
        if not token1:
            raise ConfigurationError("Bearer token (-t1) is required for mode 3")
        return AuthContext("With Token", _bearer(token1)), AuthContext("Without Token")

    if not token1 or not token2:
        raise ConfigurationError("Both tokens (-t1 and -t2) are required for mode 4")
    return AuthContext("Token 1", _bearer(token1)), AuthContext("Token 2", _bearer(token2))


__all__ = ["ComparisonMode", "MODE_DESCRIPTIONS", "build_contexts"]
