# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint list loading."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def parse_endpoints(lines: Iterable[str]) -> list[str]:
    """Strip each line. Blank lines are kept; they fail later as malformed URLs."""
    return [line.strip() for line in lines]


def load_endpoints(path: str | Path) -> list[str]:
    """Read a newline-delimited endpoint file. OSError propagates to the caller."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_endpoints(handle)
