"""ANSI terminal escape sequences for text styles and colours."""

from __future__ import annotations

from enum import Enum

_CSI = "\x1b["


class Code(Enum):
    """Select Graphic Rendition codes; ``str()`` gives the escape sequence."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    INVERSE = 7
    CONCEAL = 8
    CROSSED_OUT = 9
    DEFAULT_FONT = 10
    ALT_FONT_1 = 11
    ALT_FONT_2 = 12
    ALT_FONT_3 = 13
    ALT_FONT_4 = 14
    ALT_FONT_5 = 15
    ALT_FONT_6 = 16
    ALT_FONT_7 = 17
    ALT_FONT_8 = 18
    ALT_FONT_9 = 19
    FRAKTUR = 20
    DOUBLY_UNDERLINE = 21
    NORMAL = 22
    NOT_ITALIC_NOT_FRAKTUR = 23
    UNDERLINE_OFF = 24
    BLINK_OFF = 25
    INVERSE_OFF = 27
    REVEAL = 28
    NOT_CROSSED_OUT = 29
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT_FOREGROUND_COLOR = 39
    BLACK_BG = 40
    RED_BG = 41
    GREEN_BG = 42
    YELLOW_BG = 43
    BLUE_BG = 44
    MAGENTA_BG = 45
    CYAN_BG = 46
    WHITE_BG = 47
    DEFAULT_BACKGROUND_COLOR = 49
    FRAMED = 51
    ENCIRCLED = 52
    OVERLINED = 53
    NOT_FRAMED_OR_ENCIRCLED = 54
    NOT_OVERLINED = 55
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97
    BRIGHT_BLACK_BG = 100
    BRIGHT_RED_BG = 101
    BRIGHT_GREEN_BG = 102
    BRIGHT_YELLOW_BG = 103
    BRIGHT_BLUE_BG = 104
    BRIGHT_MAGENTA_BG = 105
    BRIGHT_CYAN_BG = 106
    BRIGHT_WHITE_BG = 107

    def __str__(self) -> str:
        return f"{_CSI}{self.value}m"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


def _byte(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"colour component must be in 0..255, got {value!r}")
    return value


def color_n(n: int) -> str:
    """Foreground colour from the 256-colour palette."""
    return f"{_CSI}38;5;{_byte(n)}m"


def color_bg_n(n: int) -> str:
    """Background colour from the 256-colour palette."""
    return f"{_CSI}48;5;{_byte(n)}m"


def color_rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground colour."""
    return f"{_CSI}38;2;{_byte(r)};{_byte(g)};{_byte(b)}m"


def color_bg_rgb(r: int, g: int, b: int) -> str:
    """24-bit background colour."""
    return f"{_CSI}48;2;{_byte(r)};{_byte(g)};{_byte(b)}m"