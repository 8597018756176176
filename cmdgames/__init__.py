"""Terminal tic-tac-toe with an AI opponent, ANSI console drawing and C-style string helpers."""

__version__ = "0.1.0"

__all__ = ["console", "fastprinter", "game", "strfuncs", "tictactoe"]