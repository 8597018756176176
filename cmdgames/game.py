"""Interactive tic-tac-toe: menu, human and computer turns, game loop."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable
from enum import IntEnum
from typing import TextIO

from cmdgames.console import Console
from cmdgames.tictactoe import BOARD_SIZE, Board, Cell, winner_message

__all__ = ["GameMode", "menu_text", "read_menu_option", "input_digit", "play", "main"]

KeyReader = Callable[[], str]

_RULE = "-----------------------------------------"
_ROW_PROMPT = "请输入本轮落子行数: "
_COL_PROMPT = "请输入本轮落子列数: "
_OCCUPIED = "\n>>> 该位置已被占用，请重新输入!\n\n"
_DRAW = ">>> 游戏结束! 平局!\n\n"
_PAUSE = "请按任意键继续. . ."


class GameMode(IntEnum):
    """Menu choices."""

    QUIT = 0
    PLAYER_VS_PLAYER = 1
    AI_FIRST = 2
    AI_SECOND = 3
    AI_VS_AI = 4

    def is_ai(self, player: Cell) -> bool:
        """Whether ``player`` is driven by the computer in this mode."""
        if self is GameMode.AI_VS_AI:
            return True
        if self is GameMode.AI_FIRST:
            return player is Cell.FIRST
        if self is GameMode.AI_SECOND:
            return player is Cell.SECOND
        return False


def menu_text() -> str:
    """The main menu, ending with the selection prompt."""
    lines = [
        "               Tic Tac Toe",
        "               井字棋游戏",
        _RULE,
        "  1.双人对战模式",
        "    Player vs. Player Mode",
        _RULE,
        "  2.人机对战模式（AI先手）",
        "    Player vs. AI Mode (AI Goes First)",
        _RULE,
        "  3.人机对战模式（AI后手）",
        "    Player vs. AI Mode (AI Goes Second)",
        _RULE,
        "  4.AI对战模式",
        "    AI vs. AI Mode",
        _RULE,
        "  0.退出",
        "    Quit",
        _RULE,
    ]
    return "\n".join(lines) + "\n  [请选择:] "


def _next_key(read_key: KeyReader) -> str:
    key = read_key()
    if not key:
        raise EOFError("no more input")
    return key


def input_digit(lower: int, upper: int, read_key: KeyReader) -> int:
    """Read keys until a digit between ``lower`` and ``upper`` arrives."""
    low, high = ord("0") + lower, ord("0") + upper
    while True:
        key = _next_key(read_key)
        if len(key) == 1 and low <= ord(key) <= high:
            return ord(key) - ord("0")


def read_menu_option(read_key: KeyReader) -> GameMode:
    """Read keys until one names a menu entry."""
    return GameMode(input_digit(GameMode.QUIT, GameMode.AI_VS_AI, read_key))


def _choose(
    mode: GameMode, player: Cell, board: Board, read_key: KeyReader, out: TextIO
) -> tuple[int, int]:
    """Ask the player (or the strategy) for a 0-based position, echoing it."""
    if mode.is_ai(player):
        row, col, _ = board.next_move()
        out.write(f"{player.label}{_ROW_PROMPT}{row + 1}\n")
        out.write(f"{player.label}{_COL_PROMPT}{col + 1}\n")
        return row, col
    out.write(f"{player.label}{_ROW_PROMPT}")
    row = input_digit(1, BOARD_SIZE, read_key)
    out.write(f"{row}\n")
    out.write(f"{player.label}{_COL_PROMPT}")
    col = input_digit(1, BOARD_SIZE, read_key)
    out.write(f"{col}\n")
    return row - 1, col - 1


def play(mode: GameMode, read_key: KeyReader, out: TextIO) -> Cell:
    """Play one game in ``mode``, writing to ``out``; return the winner or EMPTY."""
    mode = GameMode(mode)
    if mode is GameMode.QUIT:
        raise ValueError("QUIT is not a playable mode")
    board = Board()
    for turn in range(BOARD_SIZE * BOARD_SIZE):
        player = Cell.SECOND if turn % 2 else Cell.FIRST
        out.write(f">>> 第 {turn + 1} 轮\n\n")
        while True:
            row, col = _choose(mode, player, board, read_key, out)
            try:
                board.place(row, col, player)
            except ValueError:
                out.write(_OCCUPIED)
                continue
            out.write("\n" + board.render() + "\n")
            break
        winner = board.winner()
        if winner is not Cell.EMPTY:
            out.write(winner_message(winner) + "\n\n")
            return winner
    out.write(_DRAW)
    return Cell.EMPTY


def _read_key() -> str:
    """Read one key press without waiting for Enter where the terminal allows."""
    if not sys.stdin.isatty():
        return sys.stdin.read(1)
    if os.name == "nt":
        import msvcrt

        key = msvcrt.getwch()
    else:
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if key == "\x03":
        raise KeyboardInterrupt
    return key


def main(argv: list[str] | None = None) -> int:
    """Show the menu and play games until the player quits."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Tic Tac Toe")
    parser.parse_args(argv)
    out = sys.stdout
    console = Console(out)
    console.set_title("Tic Tac Toe")
    try:
        while True:
            console.cls()
            out.write(menu_text())
            out.flush()
            mode = read_menu_option(_read_key)
            out.write(f"{int(mode)}\n\n")
            out.flush()
            time.sleep(0.3)
            if mode is GameMode.QUIT:
                return 0
            play(mode, _read_key, out)
            out.write(_PAUSE)
            out.flush()
            _next_key(_read_key)
            out.write("\n")
    except EOFError:
        return 0