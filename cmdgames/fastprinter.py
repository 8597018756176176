"""Off-screen character grid with per-cell true colour, flushed in one write.

Text, foreground colours and background colours are kept in flat row-major
buffers. Drawing either writes the characters alone or builds a single
string of 24-bit ANSI colour sequences that only changes colour where a
cell differs from the one before it.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

__all__ = ["Rect", "FastPrinter"]

RGB = tuple[int, int, int]

_BLANK = "\0"
_BLACK: RGB = (0, 0, 0)
_WHITE: RGB = (255, 255, 255)


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells; ``right`` and ``bottom`` are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def _rgb(value: Sequence[int]) -> RGB:
    components = tuple(value)
    if len(components) != 3 or any(not 0 <= c <= 255 for c in components):
        raise ValueError(f"not an RGB triple of bytes: {value!r}")
    return components  # type: ignore[return-value]


def _color_sequence(layer: int, color: RGB) -> str:
    r, g, b = color
    return f"\x1b[{layer};2;{r:03d};{g:03d};{b:03d}m"


class FastPrinter:
    """A ``width`` x ``height`` character buffer drawn to a text stream."""

    def __init__(self, width: int, height: int, stream: TextIO | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._stream = stream if stream is not None else sys.stdout
        size = width * height
        self._data = [_BLANK] * size
        self._front: list[RGB] = [_BLACK] * size
        self._back: list[RGB] = [_BLACK] * size

    # -- helpers -----------------------------------------------------------

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def _check_area(self, area: Rect) -> None:
        if not (
            0 <= area.left <= area.right <= self.width
            and 0 <= area.top <= area.bottom <= self.height
        ):
            raise IndexError(f"{area!r} outside {self.width}x{self.height}")

    def _put(self, index: int, ch: str, front: RGB, back: RGB) -> None:
        self._data[index] = ch
        self._front[index] = front
        self._back[index] = back

    @staticmethod
    def _check_char(value: str) -> str:
        if len(value) != 1:
            raise ValueError("value must be a single character")
        return value

    # -- filling the buffer ------------------------------------------------

    def set_data(
        self,
        data: str,
        front_color: Sequence[Sequence[int]],
        back_color: Sequence[Sequence[int]],
    ) -> None:
        """Replace the whole buffer with row-major characters and colours."""
        size = self.width * self.height
        if len(data) != size or len(front_color) != size or len(back_color) != size:
            raise ValueError(f"expected {size} cells of data and colours")
        self._data = list(data)
        self._front = [_rgb(c) for c in front_color]
        self._back = [_rgb(c) for c in back_color]

    def set_data_area(
        self,
        data: str,
        front_color: Sequence[Sequence[int]],
        back_color: Sequence[Sequence[int]],
        area: Rect,
    ) -> None:
        """Copy a row-major block of cells into ``area``."""
        self._check_area(area)
        size = area.width * area.height
        if len(data) != size or len(front_color) != size or len(back_color) != size:
            raise ValueError(f"expected {size} cells of data and colours")
        fronts = [_rgb(c) for c in front_color]
        backs = [_rgb(c) for c in back_color]
        row = area.width
        for offset, y in enumerate(range(area.top, area.bottom)):
            start = y * self.width + area.left
            source = slice(offset * row, (offset + 1) * row)
            target = slice(start, start + row)
            self._data[target] = data[source]
            self._front[target] = fronts[source]
            self._back[target] = backs[source]

    def set_rect(
        self,
        area: Rect,
        value: str,
        text_rgb: Sequence[int],
        back_rgb: Sequence[int],
    ) -> None:
        """Draw the outline of ``area`` with ``value`` in the given colours."""
        self._check_area(area)
        ch = self._check_char(value)
        front, back = _rgb(text_rgb), _rgb(back_rgb)
        if area.width <= 0 or area.height <= 0:
            return
        for x in range(area.left, area.right):
            self._put(self._index(x, area.top), ch, front, back)
            self._put(self._index(x, area.bottom - 1), ch, front, back)
        for y in range(area.top, area.bottom):
            self._put(self._index(area.left, y), ch, front, back)
            self._put(self._index(area.right - 1, y), ch, front, back)

    def fill_rect(
        self,
        area: Rect,
        value: str,
        text_rgb: Sequence[int],
        back_rgb: Sequence[int],
    ) -> None:
        """Fill every cell of ``area`` with ``value`` in the given colours."""
        self._check_area(area)
        ch = self._check_char(value)
        front, back = _rgb(text_rgb), _rgb(back_rgb)
        for y in range(area.top, area.bottom):
            for x in range(area.left, area.right):
                self._put(self._index(x, y), ch, front, back)

    def set_text(
        self,
        x: int,
        y: int,
        text: str,
        text_rgb: Sequence[int] = _WHITE,
        back_rgb: Sequence[int] = _BLACK,
    ) -> None:
        """Write ``text`` from cell ``(x, y)``; long text runs on into the next row."""
        start = self._index(x, y)
        if start + len(text) > len(self._data):
            raise IndexError("text runs past the end of the buffer")
        front, back = _rgb(text_rgb), _rgb(back_rgb)
        for index, ch in enumerate(text, start):
            self._put(index, ch, front, back)

    def clear(self) -> None:
        """Blank every cell and reset its colours to black."""
        size = self.width * self.height
        self._data = [_BLANK] * size
        self._front = [_BLACK] * size
        self._back = [_BLACK] * size

    # -- reading the buffer ------------------------------------------------

    def char_at(self, x: int, y: int) -> str:
        """The character stored at ``(x, y)``."""
        return self._data[self._index(x, y)]

    def colors_at(self, x: int, y: int) -> tuple[RGB, RGB]:
        """The ``(foreground, background)`` colours at ``(x, y)``."""
        index = self._index(x, y)
        return self._front[index], self._back[index]

    # -- output ------------------------------------------------------------

    def _row_text(self, y: int) -> str:
        row = self._data[y * self.width:(y + 1) * self.width]
        return "".join(" " if ch == _BLANK else ch for ch in row)

    def render_plain(self) -> str:
        """All rows, each placed at its line, without colour."""
        return "".join(
            f"\x1b[{y + 1};1H" + self._row_text(y) for y in range(self.height)
        )

    def render_color(self) -> str:
        """All rows with 24-bit colour sequences emitted only on change."""
        parts: list[str] = []
        last_front: RGB | None = None
        last_back: RGB | None = None
        for y in range(self.height):
            parts.append(f"\x1b[{y + 1:03d};001H")
            for index in range(y * self.width, (y + 1) * self.width):
                front, back = self._front[index], self._back[index]
                if front != last_front:
                    parts.append(_color_sequence(38, front))
                    last_front = front
                if back != last_back:
                    parts.append(_color_sequence(48, back))
                    last_back = back
                ch = self._data[index]
                parts.append(" " if ch == _BLANK else ch)
        return "".join(parts)

    def draw(self, with_color: bool = True) -> None:
        """Flush the whole buffer to the stream."""
        self._stream.write(self.render_color() if with_color else self.render_plain())
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()