# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fixed-width textual progress bar."""

from __future__ import annotations

PROGRESS_WIDTH = 50


def render_progress(current: int, total: int, width: int = PROGRESS_WIDTH) -> str:
    """Return ``Progress: [###---] NN.N%`` for ``current`` out of ``total``."""
    ratio = current / total if total > 0 else 0.0
    filled = int(width * ratio)
    bar = "#" * min(filled, width) + "-" * max(width - filled, 0)
    return f"Progress: [{bar}] {ratio * 100:.1f}%"
