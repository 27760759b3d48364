"""Main menu, error screen and the command that starts the game."""

from __future__ import annotations

import argparse
from typing import Protocol

from .board import Mode
from .config import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_TICK_SPEED,
    DEFAULT_TICKS_PER_TURN,
    GameConfig,
)
from .game import Game
from .keyboard import KeyReader
from .menu import RETURN_MENU_HINT, Screens
from .render import FieldRenderer
from .style import BOLD, DEFAULT_BOLD, DIM, FG_RED, HIDE_CURSOR, ITALIC_DIM, RESET, SHOW_CURSOR
from .terminal import Terminal
from .ui import GameUI

HARD_FAULT_HINT = (
    "You have encountered a hard fault. If this error persists please contact the developer!"
)
UNEXPECTED_INTERRUPT_HINT = (
    "An unexpected interrupt occurred. If this error persists please contact the developer!"
)


class _Keys(Protocol):
    def poll(self, timeout: float | None = ...) -> int | None: ...

    def wait_key(self) -> int: ...


class _HardFault(RuntimeError):
    """Raised by the hidden menu option that simulates a crash."""


def show_main_menu(game: Game, screens: Screens, keys: _Keys) -> bool:
    """Run the main menu; ``True`` if a reset was chosen, ``False`` to quit."""
    screens.terminal.write(HIDE_CURSOR)
    screens.print_main_menu()
    while True:
        choice = chr(keys.wait_key())
        if choice == "1":
            game.run(Mode.PVP)
        elif choice == "2":
            game.run(Mode.PVE)
        elif choice == "3":
            screens.show_controls(RETURN_MENU_HINT)
        elif choice == "4":
            screens.show_credits()
        elif choice == "5":
            return False
        elif choice == "6":
            return True
        elif choice == "7":
            raise _HardFault("undefined instruction")
        else:
            continue
        screens.print_main_menu()


def handle_error(terminal: Terminal, ui: GameUI, keys: _Keys, hint: str) -> None:
    """Show the error screen and wait for a key before the game is reset."""
    terminal.clear()
    ui.print_heading()
    terminal.write(FG_RED + BOLD + "Ooops, something went very wrong!\n" + RESET)
    terminal.println(hint)
    terminal.write("\nPress any key to try to reset the game... ")
    terminal.write(DIM)
    terminal.println("(This is not guaranteed to fix the error)")
    terminal.write(RESET)
    try:
        keys.wait_key()
    except EOFError:
        pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiktaktoe", description="Tic-tac-toe in the terminal."
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="cells per column")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="cells per row")
    parser.add_argument(
        "--ticks-per-turn",
        type=int,
        default=DEFAULT_TICKS_PER_TURN,
        help="timer ticks before a move is forced",
    )
    parser.add_argument(
        "--tick-speed",
        type=int,
        default=DEFAULT_TICK_SPEED,
        help="timer prescaler exponent; larger is slower",
    )
    parser.add_argument(
        "--unicode",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="draw with Unicode box characters",
    )
    parser.add_argument(
        "--ascii-art",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="show large banners",
    )
    return parser


def _session(config: GameConfig, terminal: Terminal, keys: KeyReader) -> int:
    while True:
        renderer = FieldRenderer(terminal, config)
        ui = GameUI(terminal, renderer)
        screens = Screens(terminal, ui, renderer, keys)
        game = Game(config, terminal, keys, renderer, ui, screens, None)
        try:
            reset = show_main_menu(game, screens, keys)
        except EOFError:
            reset = False
        except _HardFault:
            handle_error(terminal, ui, keys, HARD_FAULT_HINT)
            continue
        except Exception:
            handle_error(terminal, ui, keys, UNEXPECTED_INTERRUPT_HINT)
            continue

        if not reset:
            break
        terminal.clear()
        ui.print_heading()
        terminal.println_styled("The game will be reset...", DEFAULT_BOLD)
        terminal.println_styled("Press any key to continue...", ITALIC_DIM)
        try:
            keys.wait_key()
        except EOFError:
            break

    terminal.clear()
    ui.print_heading()
    terminal.println_styled("Thanks for playing!", DEFAULT_BOLD)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig(
            rows=args.rows,
            cols=args.cols,
            ticks_per_turn=args.ticks_per_turn,
            tick_speed=args.tick_speed,
            unicode=args.unicode,
            ascii_art=args.ascii_art,
        )
    except ValueError as exc:
        parser.error(str(exc))

    terminal = Terminal()
    with KeyReader() as keys:
        try:
            return _session(config, terminal, keys)
        finally:
            terminal.write(SHOW_CURSOR)