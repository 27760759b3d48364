"""Full-screen pages: controls, credits, main menu and the match summary."""

from __future__ import annotations

from typing import Protocol

from .art import Glyphs
from .board import GameState, Player
from .render import FieldRenderer
from .style import (
    BOLD_CIRCLE,
    BOLD_CROSS,
    BOLD_DIM,
    DEFAULT_BOLD,
    DEFAULT_ITALIC,
    DIM,
    ERASE_LINE_FROM_CURSOR,
    ITALIC_DIM,
    RESET,
)
from .terminal import Terminal
from .ui import GameUI

RETURN_MENU_HINT = "\nPress any key to return to the menu..."
SUMMARY_HINT = "\nPress any key to see the summary..."


class _Keys(Protocol):
    def poll(self, timeout: float | None = ...) -> int | None: ...

    def wait_key(self) -> int: ...


class Screens:
    """Draws the pages shown between and after matches."""

    def __init__(
        self,
        terminal: Terminal,
        ui: GameUI,
        renderer: FieldRenderer,
        keys: _Keys,
        glyphs: Glyphs | None = None,
    ) -> None:
        self.terminal = terminal
        self.ui = ui
        self.renderer = renderer
        self.keys = keys
        self.glyphs = glyphs if glyphs is not None else renderer.glyphs

    def any_key_to_continue(self, hint: str) -> None:
        """Show ``hint``, wait for a key and discard anything typed ahead."""
        self.terminal.println_styled(hint, ITALIC_DIM)
        self.keys.wait_key()
        while self.keys.poll(0) is not None:
            pass

    def _page(self) -> None:
        self.terminal.clear()
        self.ui.print_heading()

    def show_controls(self, hint: str = RETURN_MENU_HINT) -> None:
        term = self.terminal
        g = self.glyphs
        self._page()
        term.println_styled("Controls:\n", DEFAULT_BOLD)

        for arrow, text in (
            (g.arrow_right, "\t Move selection right"),
            (g.arrow_up, "\t Move selection up"),
            (g.arrow_left, "\t Move selection left"),
            (g.arrow_down, "\t Move selection down\n"),
        ):
            term.write("\t")
            term.print_styled(arrow, BOLD_CROSS)
            term.println(text)

        term.print_styled("\t<SPACE>", BOLD_CROSS)
        term.println("\t Mark the selected field")
        term.print_styled("\t<ENTER>", BOLD_CROSS)
        term.println("\t Mark the selected field\n")

        term.print_styled("\tp / P", BOLD_CROSS)
        term.println("\t Pause the game")
        term.println_styled(
            "\t\t You won't be able to see the field while paused!\n", ITALIC_DIM
        )
        term.print_styled("\tq / Q", BOLD_CROSS)
        term.println("\t Quit the running game\n")

        term.print_styled("\t+", BOLD_CROSS)
        term.println("\t Increase cell size")
        term.print_styled("\t-", BOLD_CROSS)
        term.println("\t Decrease cell size\n")

        term.print_styled("\t?", BOLD_CROSS)
        term.println("\t Open this overview")

        self.any_key_to_continue(hint)

    def show_credits(self) -> None:
        self._page()
        self.terminal.println("Credits")
        self.any_key_to_continue(RETURN_MENU_HINT)

    def show_game_over(self, state: GameState) -> None:
        """Announce the result over the field, then show the match summary."""
        term = self.terminal
        self.ui.game_over()

        bottom = self.renderer.field_height() + self.ui.art.heading_lines
        term.move_to(1, bottom + 1)
        term.write(ERASE_LINE_FROM_CURSOR)
        term.move_to(1, bottom)
        self.print_winner_banner(state.winner)

        self.any_key_to_continue(SUMMARY_HINT)

        self._page()
        self.print_winner_banner(state.winner)
        term.println_styled("\nGame Summary:\n", DEFAULT_BOLD)

        for label, value in (
            ("\tRounds needed:\t", state.round),
            ("\tFields marked:\t", state.fields_marked),
            ("\tTotal ticks:\t", state.total_ticks),
            ("\tØ ticks/turn:\t", state.average_ticks),
        ):
            term.print_styled(label, DEFAULT_ITALIC)
            term.println_int(value)

        for name, style, total, average in (
            ("cross", BOLD_CROSS, state.cross_total_ticks, state.cross_average_ticks),
            ("circle", BOLD_CIRCLE, state.circle_total_ticks, state.circle_average_ticks),
        ):
            term.print_styled("\n\tTotal ticks by ", DEFAULT_ITALIC)
            term.print_styled(name, style)
            term.write(":\t")
            term.println_int(total)

            term.print_styled("\tØ ticks/turn by ", DEFAULT_ITALIC)
            term.print_styled(name, style)
            term.write(":\t")
            term.println_int(average)
        term.write(RESET)

        self.any_key_to_continue(RETURN_MENU_HINT)

    def print_main_menu(self) -> None:
        term = self.terminal
        self._page()
        term.println_styled("Choose your option:\n", DEFAULT_BOLD)
        term.println("\t(1) Player vs Player")
        term.println("\t(2) Player vs Computer")
        term.println("\t(3) Controls")
        term.println("\t(4) Credits")
        term.println("\t(5) Quit\n")

        term.println(DIM)
        term.println("\t(6) Reset\n")
        term.println("\tResetting the game may help if an unexpected error occurs.")
        term.println("\tIf the error persists, please contact the developer.\n")
        term.write(RESET)
        term.println_styled(
            "Hint: Press the number corresponding to your desired option", ITALIC_DIM
        )

    def print_winner_banner(self, winner: Player) -> None:
        art = self.ui.art
        if winner is Player.CIRCLE:
            self.terminal.print_styled(art.circle_wins, BOLD_CIRCLE)
        elif winner is Player.CROSS:
            self.terminal.print_styled(art.cross_wins, BOLD_CROSS)
        else:
            self.terminal.print_styled(art.tie, BOLD_DIM)