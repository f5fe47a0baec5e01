# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Live console presentation: progress line with interleaved finding blocks."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console
from colorama.ansi import clear_line

from ..models.outcome import ComparisonOutcome
from .findings import format_finding
from .progress import render_progress

# Return to column 0 and erase to the end of the line.
_CLEAR = "\r" + clear_line(0)


class ConsolePresenter:
    """
    Multiplex the progress sink and the finding sink onto one terminal stream.

    The progress line is redrawn in place with a carriage return. Before a finding is
    printed the line is cleared, and afterwards the last progress state is drawn again
    below the block.
    """

    def __init__(self, stream: TextIO | None = None, *, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color
        self._last_progress: tuple[int, int] | None = None
        self._lock = threading.Lock()
        if color:
            just_fix_windows_console()

    def _paint(self, color: str, text: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def _draw_progress(self) -> None:
        if self._last_progress is None:
            return
        current, total = self._last_progress
        self.stream.write("\r" + render_progress(current, total))

    def on_progress(self, current: int, total: int) -> None:
        with self._lock:
            self._last_progress = (current, total)
            self._draw_progress()
            self.stream.flush()

    def on_finding(self, outcome: ComparisonOutcome) -> None:
        headline, endpoint_line, line_a, line_b = format_finding(outcome)
        with self._lock:
            self.stream.write(_CLEAR)
            self.stream.write(self._paint(Fore.GREEN, headline) + "\n")
            self.stream.write(self._paint(Fore.GREEN, endpoint_line) + "\n")
            self.stream.write(self._paint(Fore.YELLOW, line_a) + "\n")
            self.stream.write(self._paint(Fore.YELLOW, line_b) + "\n")
            self.stream.write("\n")
            self._draw_progress()
            self.stream.flush()

    def finish(self) -> None:
        with self._lock:
            self.stream.write(_CLEAR)
            self.stream.write("Done.\n")
            self.stream.flush()
