"""Text console control: colours, cursor placement and repeated output.

The console writes ANSI escape sequences to a text stream. It also keeps
its own record of the cursor position, the current colours and the window
title, so callers can read them back.
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

__all__ = ["Color", "CursorState", "Console"]


class Color(IntEnum):
    """The sixteen console colours, in console attribute order."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    PINK = 5
    YELLOW = 6
    WHITE = 7
    HBLACK = 8
    HBLUE = 9
    HGREEN = 10
    HCYAN = 11
    HRED = 12
    HPINK = 13
    HYELLOW = 14
    HWHITE = 15


class CursorState(IntEnum):
    """Cursor appearance."""

    VISIBLE_FULL = 0
    VISIBLE_HALF = 1
    VISIBLE_NORMAL = 2
    INVISIBLE = 3


# Console colour order (blue before red) differs from the ANSI order.
_ANSI_BASE = (0, 4, 2, 6, 1, 5, 3, 7)

_CURSOR_SEQUENCES = {
    CursorState.VISIBLE_FULL: "\x1b[?25h\x1b[2 q",
    CursorState.VISIBLE_HALF: "\x1b[?25h\x1b[4 q",
    CursorState.VISIBLE_NORMAL: "\x1b[?25h\x1b[0 q",
    CursorState.INVISIBLE: "\x1b[?25l",
}


def _ansi_color(bg: Color, fg: Color) -> str:
    fg_code = (90 if fg >= 8 else 30) + _ANSI_BASE[fg % 8]
    bg_code = (100 if bg >= 8 else 40) + _ANSI_BASE[bg % 8]
    return f"\x1b[{fg_code};{bg_code}m"


class Console:
    """A console bound to an output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._bg = Color.BLACK
        self._fg = Color.WHITE
        self._x = 0
        self._y = 0
        self._title = ""
        self.cursor = CursorState.VISIBLE_NORMAL

    def _write(self, text: str) -> None:
        self._stream.write(text)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def _emit(self, text: str) -> None:
        """Write visible text and advance the tracked cursor."""
        self._write(text)
        self._x += len(text)

    def cls(self) -> None:
        """Clear the screen with the current colours and home the cursor."""
        self._write(_ansi_color(self._bg, self._fg) + "\x1b[2J\x1b[H")
        self._x = 0
        self._y = 0

    def set_color(self, bg_color: int = Color.BLACK, fg_color: int = Color.WHITE) -> None:
        """Set the background and foreground colours for later output."""
        bg, fg = Color(bg_color), Color(fg_color)
        self._bg, self._fg = bg, fg
        self._write(_ansi_color(bg, fg))

    def get_color(self) -> tuple[Color, Color]:
        """Return the current ``(background, foreground)`` colours."""
        return self._bg, self._fg

    def goto_xy(self, x: int, y: int) -> None:
        """Move the cursor to column ``x``, line ``y`` (both 0-based)."""
        if x < 0 or y < 0:
            raise ValueError(f"cursor position must not be negative: ({x}, {y})")
        self._x, self._y = x, y
        self._write(f"\x1b[{y + 1};{x + 1}H")

    def get_xy(self) -> tuple[int, int]:
        """Return the current cursor position as ``(x, y)``."""
        return self._x, self._y

    def set_cursor(self, state: int) -> None:
        """Change the cursor appearance; unknown states mean the normal cursor."""
        try:
            chosen = CursorState(state)
        except ValueError:
            chosen = CursorState.VISIBLE_NORMAL
        self.cursor = chosen
        self._write(_CURSOR_SEQUENCES[chosen])

    def show_ch(
        self,
        x: int,
        y: int,
        ch: str,
        bg_color: int = Color.BLACK,
        fg_color: int = Color.WHITE,
        rpt: int = 1,
    ) -> None:
        """Show ``ch`` ``rpt`` times at ``(x, y)`` in the given colours."""
        if len(ch) != 1:
            raise ValueError("ch must be a single character")
        self.goto_xy(x, y)
        self.set_color(bg_color, fg_color)
        self._emit(ch * max(rpt, 0))

    def show_str(
        self,
        x: int,
        y: int,
        text: str | None,
        bg_color: int = Color.BLACK,
        fg_color: int = Color.WHITE,
        rpt: int = 1,
        max_len: int = -1,
    ) -> None:
        """Show ``text`` repeated ``rpt`` times in a field of ``max_len`` columns.

        The repeated text is cut at ``max_len`` and padded with spaces up to
        it. A negative ``max_len`` means the full repeated length. An empty
        or missing string fills the field with spaces.
        """
        self.goto_xy(x, y)
        self.set_color(bg_color, fg_color)
        if not text:
            self._emit(" " * max(max_len, 0))
            return
        rpt = max(rpt, 1)
        if max_len < 0:
            max_len = len(text) * rpt
        self._emit((text * rpt)[:max_len].ljust(max_len))

    def show_int(
        self,
        x: int,
        y: int,
        num: int,
        bg_color: int = Color.BLACK,
        fg_color: int = Color.WHITE,
        rpt: int = 1,
    ) -> None:
        """Show the decimal form of ``num`` ``rpt`` times at ``(x, y)``."""
        self.goto_xy(x, y)
        self.set_color(bg_color, fg_color)
        self._emit(str(num) * max(rpt, 0))

    def set_title(self, title: str) -> None:
        """Set the window title."""
        self._title = title
        self._write(f"\x1b]0;{title}\x07")

    def get_title(self) -> str:
        """Return the window title last set."""
        return self._title