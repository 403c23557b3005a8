"""ANSI escape codes for terminal output."""

from __future__ import annotations

import re
from enum import Enum

ESCAPE = "\033"
CLEAN_SCREEN = ESCAPE + "[2J"
CURSOR_HOME = ESCAPE + "[H"


class Attribute(str, Enum):
    """Select Graphic Rendition attribute codes."""

    RESET = "0"

    BOLD = "1"
    FAINT = "2"
    ITALIC = "3"
    UNDERLINE = "4"
    SLOW_BLINK = "5"
    RAPID_BLINK = "6"
    REVERSE_VIDEO = "7"
    CONCEAL = "8"
    CROSSED_OUT = "9"

    PRIMARY_FONT = "10"
    ALTERNATIVE_FONT_0 = "11"
    ALTERNATIVE_FONT_1 = "12"
    ALTERNATIVE_FONT_2 = "13"
    ALTERNATIVE_FONT_3 = "14"
    ALTERNATIVE_FONT_4 = "15"
    ALTERNATIVE_FONT_5 = "16"
    ALTERNATIVE_FONT_6 = "17"
    ALTERNATIVE_FONT_7 = "18"
    ALTERNATIVE_FONT_8 = "19"
    FRAKTUR = "20"

    DOUBLY_UNDERLINE = "21"
    NORMAL_INTENSITY = "22"
    NOT_ITALIC = "23"
    NOT_UNDERLINE = "24"
    NOT_BLINK = "25"
    PROPORTIONAL_SPACING = "26"
    NOT_REVERSE_VIDEO = "27"
    REVEAL = "28"
    NOT_CROSSED_OUT = "29"

    BLACK_FOREGROUND = "30"
    RED_FOREGROUND = "31"
    GREEN_FOREGROUND = "32"
    YELLOW_FOREGROUND = "33"
    BLUE_FOREGROUND = "34"
    MAGENTA_FOREGROUND = "35"
    CYAN_FOREGROUND = "36"
    WHITE_FOREGROUND = "37"
    RGB_FOREGROUND = "38"
    DEFAULT_FOREGROUND = "39"

    BLACK_BACKGROUND = "40"
    RED_BACKGROUND = "41"
    GREEN_BACKGROUND = "42"
    YELLOW_BACKGROUND = "43"
    BLUE_BACKGROUND = "44"
    MAGENTA_BACKGROUND = "45"
    CYAN_BACKGROUND = "46"
    WHITE_BACKGROUND = "47"
    RGB_BACKGROUND = "48"
    DEFAULT_BACKGROUND = "49"

    NOT_PROPORTIONAL_SPACING = "50"
    FRAMED = "51"
    ENCIRCLED = "52"
    OVERLINED = "53"
    NOT_FRAMED = "54"
    NOT_OVERLINED = "55"
    UNDERLINE_COLOR = "58"
    DEFAULT_UNDERLINE_COLOR = "59"
    IDEOGRAM_UNDERLINE = "60"
    IDEOGRAM_DOUBLE_UNDERLINE = "61"
    IDEOGRAM_OVERLINE = "62"
    IDEOGRAM_DOUBLE_OVERLINE = "63"
    IDEOGRAM_STRESS_MARKING = "64"
    NO_IDEOGRAM_ATTRIBUTES = "65"
    SUPERSCRIPT = "73"
    SUBSCRIPT = "74"
    NOT_SUPERSCRIPT_OR_SUBSCRIPT = "75"

    BRIGHT_BLACK_FOREGROUND = "90"
    BRIGHT_RED_FOREGROUND = "91"
    BRIGHT_GREEN_FOREGROUND = "92"
    BRIGHT_YELLOW_FOREGROUND = "93"
    BRIGHT_BLUE_FOREGROUND = "94"
    BRIGHT_MAGENTA_FOREGROUND = "95"
    BRIGHT_CYAN_FOREGROUND = "96"
    BRIGHT_WHITE_FOREGROUND = "97"

    BRIGHT_BLACK_BACKGROUND = "100"
    BRIGHT_RED_BACKGROUND = "101"
    BRIGHT_GREEN_BACKGROUND = "102"
    BRIGHT_YELLOW_BACKGROUND = "103"
    BRIGHT_BLUE_BACKGROUND = "104"
    BRIGHT_MAGENTA_BACKGROUND = "105"
    BRIGHT_CYAN_BACKGROUND = "106"
    BRIGHT_WHITE_BACKGROUND = "107"


CONTROL_CODE_RE = re.compile("\033\\[[0-9;]*m")


def sgr(*args: Attribute | str) -> str:
    """Build a Select Graphic Rendition sequence from the given attributes."""
    codes = (a.value if isinstance(a, Attribute) else str(a) for a in args)
    return ESCAPE + "[" + ";".join(codes) + "m"


def strip_escape_codes(text: str) -> str:
    """Remove anything that looks like an SGR control code."""
    return CONTROL_CODE_RE.sub("", text)