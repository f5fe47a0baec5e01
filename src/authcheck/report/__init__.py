# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console presentation exports."""

from .console import ConsolePresenter
from .findings import FINDING_HEADLINE, format_finding
from .progress import PROGRESS_WIDTH, render_progress
from .sinks import FindingSink, ProgressSink

__all__ = [
    "ConsolePresenter",
    "FINDING_HEADLINE",
    "FindingSink",
    "PROGRESS_WIDTH",
    "ProgressSink",
    "format_finding",
    "render_progress",
]
