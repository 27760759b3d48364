"""Status lines around the field: round, waiting player and turn timer."""

from __future__ import annotations

from .art import Artwork, Glyphs
from .board import Mode, Player
from .render import FieldRenderer
from .style import (
    BOLD,
    BOLD_CIRCLE,
    BOLD_CROSS,
    DEFAULT_BOLD,
    DEFAULT_CIRCLE,
    DEFAULT_CROSS,
    DEFAULT_ITALIC,
    DIM,
    ERASE_LINE_FROM_CURSOR,
    FG_GREEN,
    FG_MAGENTA,
    FG_RED,
    FG_YELLOW,
    HEADING_STYLE,
    ITALIC_DIM,
    Style,
)
from .terminal import Terminal

START_HINT = "Press any key to start the game..."
CONTROLS_HINT = 'Hint: Press "?" to see all controls!'


def timer_style(remaining: int, total: int, running: bool) -> Style:
    """Colour of the progress bar for the share of time left."""
    if total <= 0:
        raise ValueError("total time must be positive")
    if not running:
        return Style(font_style=DIM)
    percent = int(remaining / total * 100)
    if percent > 66:
        return Style(fg_color=FG_GREEN)
    if percent > 33:
        return Style(fg_color=FG_YELLOW)
    return Style(fg_color=FG_RED)


class GameUI:
    """Writes the heading, the turn line and the timer bar."""

    def __init__(
        self,
        terminal: Terminal,
        renderer: FieldRenderer,
        art: Artwork | None = None,
        glyphs: Glyphs | None = None,
    ) -> None:
        self.terminal = terminal
        self.renderer = renderer
        self.art = art if art is not None else renderer.art
        self.glyphs = glyphs if glyphs is not None else renderer.glyphs

    def _turn_row(self) -> int:
        return 1 + self.art.heading_lines

    def _timer_row(self) -> int:
        height = self.renderer.field_height()
        return height + (height % 2) - 1 + self.art.heading_lines

    def display_timer(self, remaining: int, total: int, running: bool = True) -> None:
        """Draw the timer bar together with the controls hint below it."""
        row = self._timer_row()
        self.terminal.move_to(2, row)
        self.update_timer(remaining, total, running)
        self.terminal.move_to(2, row + 2)
        self.terminal.print_styled(CONTROLS_HINT, ITALIC_DIM)

    def update_timer(self, remaining: int, total: int, running: bool = True) -> None:
        """Redraw the progress bar for ``remaining`` of ``total`` ticks."""
        term = self.terminal
        row = self._timer_row()
        term.move_to(2, row)
        term.write(ERASE_LINE_FROM_CURSOR)
        term.write(BOLD)

        style = timer_style(remaining, total, running)
        g = self.glyphs
        for i in range(total):
            if i < remaining:
                element = g.full_progress
            elif i == remaining:
                element = g.half_progress
            else:
                element = g.empty_progress
            term.print_styled(element, style)

        term.move_to(2, row + 1)
        if not running:
            term.println_styled("Paused...", ITALIC_DIM)
            return
        term.write(ERASE_LINE_FROM_CURSOR + "\n")

    def display_turn(self, round_number: int, player: Player) -> None:
        """Draw the round label and whose turn it is."""
        row = self._turn_row()
        self.terminal.move_to(1, row)
        self.terminal.print_styled("Round", DEFAULT_BOLD)
        self.terminal.move_to(1 + 6 + 3, row)
        self.terminal.print_styled(" Waiting for ", DEFAULT_ITALIC)
        self.update_turn(round_number, player)

    def update_turn(self, round_number: int, player: Player) -> None:
        """Rewrite the round number and the waiting player's name."""
        row = self._turn_row()
        self.terminal.move_to(1 + 6, row)
        self.terminal.print_int(round_number)
        self.terminal.move_to(1 + 6 + 3 + 13, row)
        if player is Player.CIRCLE:
            self.terminal.write(FG_MAGENTA)
            self.terminal.print_styled("Circle... ", BOLD_CIRCLE)
        elif player is Player.CROSS:
            self.terminal.write(FG_GREEN)
            self.terminal.print_styled("Cross...", BOLD_CROSS)

    def print_starting_player(self, player: Player, mode: Mode) -> None:
        """Show a screen announcing who makes the first move."""
        self.terminal.clear()
        self.print_heading()
        art = self.art
        if player is Player.CROSS:
            banner = art.player_starts if mode is Mode.PVE else art.cross_starts
            self.terminal.print_styled(banner, DEFAULT_CROSS)
        elif player is Player.CIRCLE:
            banner = art.computer_starts if mode is Mode.PVE else art.circle_starts
            self.terminal.print_styled(banner, DEFAULT_CIRCLE)
        else:
            self.terminal.print_styled(
                "Something went very wrong...", Style(fg_color=FG_RED, font_style=BOLD)
            )

    def print_heading(self) -> None:
        self.terminal.move_to(0, 0)
        self.terminal.print_styled(self.art.heading, HEADING_STYLE)

    def game_over(self) -> None:
        """Replace the turn line with "Game Over!" and clear the timer."""
        self.terminal.move_to(1, self._turn_row())
        self.terminal.write(ERASE_LINE_FROM_CURSOR)
        self.terminal.print_styled("Game Over!", DEFAULT_BOLD)
        self.terminal.move_to(0, self._timer_row())
        self.terminal.write(ERASE_LINE_FROM_CURSOR)