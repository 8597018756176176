"""Tic-tac-toe board, win detection and a simple move-choosing strategy."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

__all__ = [
    "BOARD_SIZE",
    "Cell",
    "Board",
    "check_win",
    "find_next_move_to_win",
    "winner_message",
]

BOARD_SIZE = 3


class Cell(IntEnum):
    """State of one board cell, which is also the player who owns it."""

    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @property
    def symbol(self) -> str:
        """The two-column text drawn for this cell."""
        return {Cell.EMPTY: "  ", Cell.FIRST: "×", Cell.SECOND: "○"}[self]

    @property
    def label(self) -> str:
        """The player's name as shown in prompts; empty for an empty cell."""
        return {Cell.EMPTY: "", Cell.FIRST: "先手(×)", Cell.SECOND: "后手(○)"}[self]


# Rows, then columns, then the two diagonals: the order wins are looked for.
_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    tuple((i, i) for i in range(BOARD_SIZE)),
    tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)

# Where to play when nothing wins or blocks.
_PREFERRED = (
    (1, 1),
    (0, 1),
    (1, 0),
    (2, 1),
    (1, 2),
    (0, 0),
    (0, 2),
    (2, 0),
    (2, 2),
)

Grid = Sequence[Sequence[int]]


def _normalise(grid: Grid) -> list[list[Cell]]:
    """Copy ``grid`` into a fresh 3x3 list of cells, checking its shape."""
    rows = [[Cell(value) for value in row] for row in grid]
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"a board must be {BOARD_SIZE}x{BOARD_SIZE}")
    return rows


def check_win(grid: Grid) -> Cell:
    """Return the player holding a full row, column or diagonal, else EMPTY."""
    cells = _normalise(grid)
    for line in _LINES:
        first, *rest = (cells[r][c] for r, c in line)
        if first is not Cell.EMPTY and all(cell is first for cell in rest):
            return first
    return Cell.EMPTY


def find_next_move_to_win(grid: Grid) -> tuple[int, int, Cell]:
    """Choose a move as ``(row, col, winner)`` with 0-based coordinates.

    A cell where the first player would complete a line is chosen first,
    then one where the second player would; ``winner`` names who that line
    belongs to. Otherwise the first free cell in a fixed preference order
    is chosen and ``winner`` is EMPTY. A full board raises ValueError.
    """
    cells = _normalise(grid)
    empties = [
        (r, c)
        for r, row in enumerate(cells)
        for c, cell in enumerate(row)
        if cell is Cell.EMPTY
    ]
    if not empties:
        raise ValueError("the board is full")
    for player in (Cell.FIRST, Cell.SECOND):
        for r, c in empties:
            cells[r][c] = player
            winner = check_win(cells)
            cells[r][c] = Cell.EMPTY
            if winner is not Cell.EMPTY:
                return r, c, winner
    r, c = next((r, c) for r, c in _PREFERRED if cells[r][c] is Cell.EMPTY)
    return r, c, Cell.EMPTY


def winner_message(winner: Cell) -> str:
    """The end-of-game line for ``winner``; empty when nobody has won."""
    winner = Cell(winner)
    if winner is Cell.EMPTY:
        return ""
    return f"游戏结束! {winner.label}胜利!"


class Board:
    """A 3x3 tic-tac-toe board."""

    def __init__(self, cells: Grid | None = None) -> None:
        if cells is None:
            self.cells = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        else:
            self.cells = _normalise(cells)

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, col = position
        return self.cells[row][col]

    @property
    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.cells for cell in row)

    def place(self, row: int, col: int, cell: Cell) -> None:
        """Put ``cell`` at ``(row, col)``; the target must be free."""
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"position ({row}, {col}) is off the board")
        cell = Cell(cell)
        if cell is Cell.EMPTY:
            raise ValueError("a move must be made by a player")
        if self.cells[row][col] is not Cell.EMPTY:
            raise ValueError(f"position ({row}, {col}) is already taken")
        self.cells[row][col] = cell

    def winner(self) -> Cell:
        """The winning player, or EMPTY."""
        return check_win(self.cells)

    def next_move(self) -> tuple[int, int, Cell]:
        """The move the strategy picks for this board."""
        return find_next_move_to_win(self.cells)

    def render(self) -> str:
        """The board as text, with 1-based row and column labels."""
        border = "   +--+--+--+"
        lines = ["     1  2  3"]
        for number, row in enumerate(self.cells, 1):
            lines.append(border)
            lines.append(f" {number} " + "".join(f"|{cell.symbol}" for cell in row) + "|")
        lines.append(border)
        return "\n".join(lines) + "\n"