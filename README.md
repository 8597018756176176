# cmdgames

A small terminal tic-tac-toe game with a built-in computer opponent, together
with the console helpers it is built on.

## Playing

Install the package and start the game:

```
pip install .
cmdgames-tictactoe
```

The screen is cleared and a menu offers five choices, each picked with a
single key (other keys are ignored):

- `1`: two players on one keyboard
- `2`: player against the AI, AI moves first (×)
- `3`: player against the AI, AI moves second (○)
- `4`: AI against AI
- `0`: quit

A human move is entered as a row digit followed by a column digit, each from
1 to 3; any other key is ignored. An occupied cell is refused and the same
player is asked again. After each move the board is printed. The game ends
with a win message or, after nine moves, a draw; any key then returns to the
menu. The program also exits when its input runs out.

The AI first looks for a free cell that would complete a line for the first
player, then one that would complete a line for the second player, so it takes
a win or blocks one. If neither exists it takes the first free cell in a fixed
order: centre, top middle, middle left, bottom middle, middle right, then the
four corners.

## Using the library

- `cmdgames.tictactoe`: `Cell` (`EMPTY`, `FIRST`, `SECOND`, with `symbol`
  and `label`), `Board` (`place`, `winner`, `next_move`, `render`,
  `is_full`, indexing by `(row, col)`), and the functions `check_win`,
  `find_next_move_to_win` (returns `(row, col, winner)`, 0-based; raises
  `ValueError` on a full board) and `winner_message`.
- `cmdgames.game`: `GameMode`, `menu_text`, `read_menu_option`,
  `input_digit`, `play` and `main`. `play(mode, read_key, out)` takes a
  function returning one key per call and a text stream, so a game can be
  driven from a script; it returns the winning `Cell` or `Cell.EMPTY`.
- `cmdgames.console`: `Console`, `Color` and `CursorState`. A `Console`
  writes ANSI escape sequences to a stream for clearing, colours, cursor
  movement and shape, window title and repeated characters, strings
  (`show_str`, with repeat count and field width) and integers.
- `cmdgames.fastprinter`: `FastPrinter` and `Rect`, an off-screen character
  grid with per-cell RGB foreground and background colours. Cells are filled
  with `set_data`, `set_data_area`, `set_rect`, `fill_rect` and `set_text`,
  read back with `char_at` and `colors_at`, and output with `render_plain`,
  `render_color` (24-bit colour sequences emitted only where the colour
  changes) or `draw`.
- `cmdgames.strfuncs`: C-style string helpers (`str_len`, `str_cat`,
  `str_ncat`, `str_cpy`, `str_ncpy`, `str_cmp`, `str_casecmp`, `str_ncmp`,
  `str_casencmp`, `str_upper`, `str_lower`, `str_chr`, `str_str`,
  `str_rchr`, `str_rstr`, `str_rev`). Comparisons return the difference of
  the first differing character codes, searches return a 1-based position or
  0, and `None` plays the part of a null string.

## What it does not do

The console helpers only write escape sequences to a stream. They do not
resize the terminal window or its buffer, change fonts, or read mouse input,
and `Console.get_xy`, `get_color` and `get_title` report the values the
console last set rather than querying the terminal.

## Tests

```
pip install .[test]
pytest
```