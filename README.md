# tiktaktoe

Tic-tac-toe for the terminal. Two players share a keyboard, or one player
plays against a computer opponent that marks random free cells. Each turn
runs against a clock. When the clock runs out, a random free cell is marked
for the waiting player. Against the computer, a random cell is also marked
for the computer.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
tiktaktoe
```

The game reads keys from standard input. On a POSIX terminal it switches
the terminal to unbuffered input without echo while it runs, and restores
the previous mode when it exits.

The main menu offers:

1. Player vs Player
2. Player vs Computer
3. Controls
4. Credits
5. Quit
6. Reset (start the menu again with a fresh game)

Press the number of the option you want.

### Command-line options

| Option                                | Default | Meaning                                     |
|---------------------------------------|---------|---------------------------------------------|
| `--rows N`                            | 3       | cells per column                            |
| `--cols N`                            | 3       | cells per row                               |
| `--ticks-per-turn N`                  | 20      | timer ticks before a move is forced         |
| `--tick-speed N`                      | 12      | timer prescaler exponent; larger is slower  |
| `--unicode` / `--no-unicode`          | on      | draw with Unicode box characters or ASCII   |
| `--ascii-art` / `--no-ascii-art`      | on      | show large banners or one-line titles       |

Run `tiktaktoe --help` to see them listed.

## Controls

| Key               | Action                                             |
|-------------------|----------------------------------------------------|
| Arrow keys        | Move the selection                                 |
| Space / Enter     | Mark the selected cell                             |
| `p` / `P`         | Pause or resume (the field is hidden while paused) |
| `q` / `Q`         | Quit the running game                              |
| `+` / `-`         | Make the cells larger or smaller (three sizes)     |
| `?`               | Show the controls                                  |

## Rules

A player wins by filling a whole row or a whole column. A diagonal run
through the last marked cell also wins once it is as long as the shorter
side of the board. When every cell is marked and nobody has won, the game
is a tie. After each game a summary shows the rounds played, the fields
marked, the total ticks, the average ticks per turn, and the same totals
and averages for cross and circle.

## Using the package

The parts can be used on their own:

- `tiktaktoe.board`: `Board`, `Cell`, `Player`, `Mode`, `GameState`,
  `find_winning_line` and `check_for_winner`
- `tiktaktoe.config`: `GameConfig`, the board size, turn length and
  drawing options
- `tiktaktoe.input_buffer`: `InputBuffer`, a bounded FIFO of key bytes that
  raises `BufferFullError` when full
- `tiktaktoe.keyboard`: `KeyReader`, which reads key bytes from a stream
  into an `InputBuffer`
- `tiktaktoe.timer`: `GameTimer`, which counts ticks and calls back when a
  turn runs out
- `tiktaktoe.terminal`: `Terminal`, which writes styled text and moves the
  cursor, and `move_sequence`
- `tiktaktoe.style`: `Style` and the ANSI escape codes
- `tiktaktoe.conversion`: `int_to_str` and `int_to_char`
- `tiktaktoe.art`: `artwork` and `glyphs`, the banners and drawing characters
- `tiktaktoe.render`: `FieldRenderer`, `Size` and `cell_pattern`
- `tiktaktoe.ui`: `GameUI` and `timer_style`
- `tiktaktoe.menu`: `Screens`, the controls, credits, main menu and summary
  pages
- `tiktaktoe.game`: `Game`, which plays one match
- `tiktaktoe.app`: `show_main_menu`, `handle_error`, `build_parser` and
  `main`

## Limitations

The computer opponent only picks random free cells; it does not play to
win. Results are not stored between games or sessions. Key input relies on
a POSIX-style terminal.