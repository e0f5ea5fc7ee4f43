"""Terminal screen control.

Raw mode for single-key reads is scoped to each click.getchar() call.
The screen itself (cursor visibility, attributes) is acquired for the whole
session by terminal_session() and restored on every exit path.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

CSI = "\033["


class TerminalScreen:
    """Thin wrapper over ANSI escape sequences."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        clear_each_frame: bool = True,
        hide_cursor: bool = True,
    ):
        self.stream = stream or sys.stdout
        self.clear_each_frame = clear_each_frame
        self.cursor_hidden_while_active = hide_cursor
        self._hidden_cursor = False

    def hide_cursor(self) -> None:
        if not self._hidden_cursor:
            self.stream.write(CSI + "?25l")
            self._hidden_cursor = True

    def show_cursor(self) -> None:
        if self._hidden_cursor:
            self.stream.write(CSI + "?25h")
            self._hidden_cursor = False

    def clear(self) -> None:
        # clear + home
        if self.clear_each_frame:
            self.stream.write(CSI + "2J" + CSI + "1;1H")

    def flush(self) -> None:
        self.stream.flush()

    def begin(self) -> None:
        self.stream.write(CSI + "0m")
        if self.cursor_hidden_while_active:
            self.hide_cursor()
        self.clear()
        self.flush()

    def end(self) -> None:
        self.show_cursor()
        self.stream.write(CSI + "0m\n")
        self.flush()


@contextmanager
def terminal_session(screen: TerminalScreen) -> Iterator[TerminalScreen]:
    """Hold the screen for the duration of a game."""
    screen.begin()
    try:
        yield screen
    finally:
        screen.end()
