"""Banners and box-drawing glyphs in Unicode and plain ASCII flavours."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_X_OFFSET = 1


@dataclass(frozen=True)
class Artwork:
    """The heading and the banners shown during a match."""

    heading: str
    heading_lines: int
    cross_wins: str
    circle_wins: str
    tie: str
    player_starts: str
    computer_starts: str
    circle_starts: str
    cross_starts: str

    @property
    def field_y_offset(self) -> int:
        """Row above which the field is drawn."""
        return 2 + self.heading_lines


@dataclass(frozen=True)
class Glyphs:
    """Characters for the field frame, marks, arrows and progress bar."""

    corner_top_left: str
    corner_bot_left: str
    corner_top_right: str
    corner_bot_right: str
    t_left: str
    t_right: str
    t_top: str
    t_bot: str
    cross: str
    side: str
    top_bottom: str
    empty: str
    diagonal_fw: str
    diagonal_bw: str
    diagonal_mid: str
    arrow_left: str
    arrow_up: str
    arrow_right: str
    arrow_down: str
    full_progress: str
    half_progress: str
    empty_progress: str


_HEADING_BODY = (
    ".___________. __   __  ___ .___________.    ___       __  ___ .___________.  ______    _______  \n"
    "|           ||  | |  |/  / |           |   /   \\     |  |/  / |           | /  __  \\  |   ____| \n"
    "`---|  |----`|  | |  '  /  `---|  |----`  /  ^  \\    |  '  /  `---|  |----`|  |  |  | |  |__    \n"
    "    |  |     |  | |    <       |  |      /  /_\\  \\   |    <       |  |     |  |  |  | |   __|   \n"
    "    |  |     |  | |  .  \\      |  |     /  _____  \\  |  .  \\      |  |     |  `--'  | |  |____  \n"
    "    |__|     |__| |__|\\__\\     |__|    /__/     \\__\\ |__|\\__\\     |__|      \\______/  |_______| \n"
)

_HEADING_RULE_UNICODE = (
    "───────────────────────────────────────────────────────────────────────────────────────────────\n"
)
_HEADING_RULE_ASCII = (
    "_______________________________________________________________________________________________\n"
)

_CROSS_WINS = (
    "  ____                    __        ___           _ \n"
    " / ___|_ __ ___  ___ ___  \\ \\      / (_)_ __  ___| |\n"
    "| |   | '__/ _ \\/ __/ __|  \\ \\ /\\ / /| | '_ \\/ __| |\n"
    "| |___| | | (_) \\__ \\__ \\   \\ V  V / | | | | \\__ \\_|\n"
    " \\____|_|  \\___/|___/___/    \\_/\\_/  |_|_| |_|___(_)\n"
)

_CIRCLE_WINS = (
    "  ____ _          _       __        ___           _ \n"
    " / ___(_)_ __ ___| | ___  \\ \\      / (_)_ __  ___| |\n"
    "| |   | | '__/ __| |/ _ \\  \\ \\ /\\ / /| | '_ \\/ __| |\n"
    "| |___| | | | (__| |  __/   \\ V  V / | | | | \\__ \\_|\n"
    " \\____|_|_|  \\___|_|\\___|    \\_/\\_/  |_|_| |_|___(_)\n"
)

_ITS_A_TIE = (
    " ___ _   _               _____ _      _ \n"
    "|_ _| |_( )___    __ _  |_   _(_) ___| |\n"
    " | || __|// __|  / _` |   | | | |/ _ \\ |\n"
    " | || |_  \\__ \\ | (_| |   | | | |  __/_|\n"
    "|___|\\__| |___/  \\__,_|   |_| |_|\\___(_)\n"
)

_PLAYER_STARTS = (
    " ____  _                             _             _       _ \n"
    "|  _ \\| | __ _ _   _  ___ _ __   ___| |_ __ _ _ __| |_ ___| |\n"
    "| |_) | |/ _` | | | |/ _ \\ '__| / __| __/ _` | '__| __/ __| |\n"
    "|  __/| | (_| | |_| |  __/ |    \\__ \\ || (_| | |  | |_\\__ \\_|\n"
    "|_|   |_|\\__,_|\\__, |\\___|_|    |___/\\__\\__,_|_|   \\__|___(_)\n"
    "               |___/                                         \n"
)

_COMPUTER_STARTS = (
    "  ____                            _                  _             _       _ \n"
    " / ___|___  _ __ ___  _ __  _   _| |_ ___ _ __   ___| |_ __ _ _ __| |_ ___| |\n"
    "| |   / _ \\| '_ ` _ \\| '_ \\| | | | __/ _ \\ '__| / __| __/ _` | '__| __/ __| |\n"
    "| |__| (_) | | | | | | |_) | |_| | ||  __/ |    \\__ \\ || (_| | |  | |_\\__ \\_|\n"
    " \\____\\___/|_| |_| |_| .__/ \\__,_|\\__\\___|_|    |___/\\__\\__,_|_|   \\__|___(_)\n"
    "                     |_|                                                     \n"
)

_CIRCLE_STARTS = (
    "  ____ _          _            _             _       _ \n"
    " / ___(_)_ __ ___| | ___   ___| |_ __ _ _ __| |_ ___| |\n"
    "| |   | | '__/ __| |/ _ \\ / __| __/ _` | '__| __/ __| |\n"
    "| |___| | | | (__| |  __/ \\__ \\ || (_| | |  | |_\\__ \\_|\n"
    " \\____|_|_|  \\___|_|\\___| |___/\\__\\__,_|_|   \\__|___(_)\n"
)

_CROSS_STARTS = (
    "  ____                         _             _       _ \n"
    " / ___|_ __ ___  ___ ___   ___| |_ __ _ _ __| |_ ___| |\n"
    "| |   | '__/ _ \\/ __/ __| / __| __/ _` | '__| __/ __| |\n"
    "| |___| | | (_) \\__ \\__ \\ \\__ \\ || (_| | |  | |_\\__ \\_|\n"
    " \\____|_|  \\___/|___/___/ |___/\\__\\__,_|_|   \\__|___(_)\n"
)

_PLAIN_ARTWORK = Artwork(
    heading="\n TikTakToe \n",
    heading_lines=3,
    cross_wins="\n Cross Wins! \n",
    circle_wins="\n Circle Wins! \n",
    tie="\n It's a Tie! \n",
    player_starts="\n Player starts! \n",
    computer_starts="\n Computer starts! \n",
    circle_starts="\n Circle starts! \n",
    cross_starts="\n Cross starts! \n",
)

_UNICODE_GLYPHS = Glyphs(
    corner_top_left="╭",
    corner_bot_left="╰",
    corner_top_right="╮",
    corner_bot_right="╯",
    t_left="├",
    t_right="┤",
    t_top="┬",
    t_bot="┴",
    cross="┼",
    side="│",
    top_bottom="─",
    empty=" ",
    diagonal_fw="╱",
    diagonal_bw="╲",
    diagonal_mid="╳",
    arrow_left="←",
    arrow_up="↑",
    arrow_right="→",
    arrow_down="↓",
    full_progress="█",
    half_progress="▆",
    empty_progress="▁",
)

_ASCII_GLYPHS = Glyphs(
    corner_top_left="+",
    corner_bot_left="+",
    corner_top_right="+",
    corner_bot_right="+",
    t_left="+",
    t_right="+",
    t_top="+",
    t_bot="+",
    cross="+",
    side="|",
    top_bottom="-",
    empty=" ",
    diagonal_fw="/",
    diagonal_bw="\\",
    diagonal_mid="X",
    arrow_left="<LEFT>",
    arrow_up="<UP>",
    arrow_right="<RIGHT>",
    arrow_down="<DOWN>",
    full_progress="-",
    half_progress="_",
    empty_progress="",
)


def artwork(ascii_art: bool = True, unicode: bool = True) -> Artwork:
    """The banners for the chosen options."""
    if not ascii_art:
        return _PLAIN_ARTWORK
    rule = _HEADING_RULE_UNICODE if unicode else _HEADING_RULE_ASCII
    return Artwork(
        heading=_HEADING_BODY + rule,
        heading_lines=9,
        cross_wins=_CROSS_WINS,
        circle_wins=_CIRCLE_WINS,
        tie=_ITS_A_TIE,
        player_starts=_PLAYER_STARTS,
        computer_starts=_COMPUTER_STARTS,
        circle_starts=_CIRCLE_STARTS,
        cross_starts=_CROSS_STARTS,
    )


def glyphs(unicode: bool = True) -> Glyphs:
    """The drawing characters for the chosen option."""
    return _UNICODE_GLYPHS if unicode else _ASCII_GLYPHS