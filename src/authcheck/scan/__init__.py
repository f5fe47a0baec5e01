# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Comparison engine exports."""

from .compare import STATIC_ASSET_SUFFIXES, compare, is_static_asset
from .policy import is_potential_bypass
from .prober import Prober
from .runner import ComparisonRunner
from .scheduler import DEFAULT_METHODS, FanOutScheduler

__all__ = [
    "ComparisonRunner",
    "DEFAULT_METHODS",
    "FanOutScheduler",
    "Prober",
    "STATIC_ASSET_SUFFIXES",
    "compare",
    "is_potential_bypass",
    "is_static_asset",
]
