"""ANSI escape sequence builders.

The builder mode is a module-wide setting. In the default mode sequences
are built on every platform except Windows, where they come out empty.
While the mode is disabled every builder returns an empty string.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum, IntEnum

ARG_DELIMITER = ";"
ESC_CHAR = "\x1b"

# Sequence types
SS2 = "N"
SS3 = "O"
DCS = "P"
CSI = "["
ST = "\\"
OSC = "]"
SOS = "X"
PM = "^"
APC = "_"
RIS = "c"

SINGLE_SHIFT_TWO = SS2
SINGLE_SHIFT_THREE = SS3
DEVICE_CONTROL_STRING = DCS
CONTROL_SEQUENCE_INTRODUCER = CSI
STRING_TERMINATOR = ST
OS_COMMAND = OSC
START_OF_STRING = SOS
PRIVACY_MESSAGE = PM
APP_PROGRAM_COMMAND = APC
RESET_TO_INITIAL_STATE = RIS

# Arguments of the erase control sequences
FROM_CUR_TO_END = 0
FROM_CUR_TO_BEGIN = 1
ENTIRE = 2
ENTIRE_AND_SCRL_BK = 3

# Used as the first argument after SET_*_COLOR in sgr_seq()
SET_COLOR_8BIT = 5
SET_COLOR_RGB = 2

# 8-bit colours
COL8BIT_STANDARD_BLACK = 0
COL8BIT_STANDARD_BLUE = 1
COL8BIT_STANDARD_CYAN = 2
COL8BIT_STANDARD_GREEN = 3
COL8BIT_STANDARD_MAGENTA = 4
COL8BIT_STANDARD_RED = 5
COL8BIT_STANDARD_WHITE = 6
COL8BIT_STANDARD_YELLOW = 7
COL8BIT_BRIGHT_BLACK = 8
COL8BIT_BRIGHT_BLUE = 9
COL8BIT_BRIGHT_CYAN = 10
COL8BIT_BRIGHT_GREEN = 11
COL8BIT_BRIGHT_MAGENTA = 12
COL8BIT_BRIGHT_RED = 13
COL8BIT_BRIGHT_WHITE = 14
COL8BIT_BRIGHT_YELLOW = 15

#: Grayscale from black to white in 24 steps, excluding black and white.
COL8BIT_GRAYSCALE = tuple(range(232, 256))
#: Grayscale including black and white.
COL8BIT_FULL_GRAYSCALE = (16, *COL8BIT_GRAYSCALE, 231)


class Mode(IntEnum):
    """Builder mode."""

    DEFAULT = 0
    DISABLED = 1
    ENABLED = 2


class CsiType(str, Enum):
    """Final characters of control sequences."""

    CUU = "A"
    CUD = "B"
    CUF = "C"
    CUB = "D"
    CUP = "H"
    ED = "J"
    EL = "K"
    SU = "S"
    SD = "T"
    HVP = "f"
    SGR = "m"

    CURSOR_UP = "A"
    CURSOR_DOWN = "B"
    CURSOR_FWD = "C"
    CURSOR_BACK = "D"
    CURSOR_POS = "H"
    ERASE_DISPLAY = "J"
    ERASE_LINE = "K"
    SCROLL_UP = "S"
    SCROLL_DOWN = "T"


_FONT_BASE = 10
_FOREGROUND_BASE = 30
_BACKGROUND_BASE = 40
_BRIGHT_FOREGROUND_BASE = 90
_BRIGHT_BACKGROUND_BASE = 100


class Sgr(IntEnum):
    """Select Graphic Rendition parameters."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_FAST = 6
    REVERSE_VIDEO = 7
    CONCEAL = 8
    STRIKE = 9
    DEFAULT_FONT = _FONT_BASE
    FONT0 = _FONT_BASE + 0
    FONT1 = _FONT_BASE + 1
    FONT2 = _FONT_BASE + 2
    FONT3 = _FONT_BASE + 3
    FONT4 = _FONT_BASE + 4
    FONT5 = _FONT_BASE + 5
    FONT6 = _FONT_BASE + 6
    FONT7 = _FONT_BASE + 7
    FONT8 = _FONT_BASE + 8
    FONT9 = _FONT_BASE + 9
    FRAKTUR = 20
    BOLD_FAINT_OFF = 22
    BOLD_OFF = 22
    FAINT_OFF = 22
    ITALIC_FRAKTUR_OFF = 23
    ITALIC_OFF = 23
    FRAKTUR_OFF = 23
    UNDERLINE_OFF = 24
    BLINK_OFF = 25
    REVERSE_VIDEO_OFF = 27
    CONCEAL_OFF = 28
    REVEAL = 28
    STRIKE_OFF = 29
    FG_COLOR_BLACK = _FOREGROUND_BASE + 0
    FG_COLOR_RED = _FOREGROUND_BASE + 1
    FG_COLOR_GREEN = _FOREGROUND_BASE + 2
    FG_COLOR_YELLOW = _FOREGROUND_BASE + 3
    FG_COLOR_BLUE = _FOREGROUND_BASE + 4
    FG_COLOR_MAGENTA = _FOREGROUND_BASE + 5
    FG_COLOR_CYAN = _FOREGROUND_BASE + 6
    FG_COLOR_WHITE = _FOREGROUND_BASE + 7
    SET_FORE_COLOR = 38
    DEFAULT_FORE_COLOR = 39
    FG_COLOR_DEFAULT = 39
    BG_COLOR_BLACK = _BACKGROUND_BASE + 0
    BG_COLOR_RED = _BACKGROUND_BASE + 1
    BG_COLOR_GREEN = _BACKGROUND_BASE + 2
    BG_COLOR_YELLOW = _BACKGROUND_BASE + 3
    BG_COLOR_BLUE = _BACKGROUND_BASE + 4
    BG_COLOR_MAGENTA = _BACKGROUND_BASE + 5
    BG_COLOR_CYAN = _BACKGROUND_BASE + 6
    BG_COLOR_WHITE = _BACKGROUND_BASE + 7
    SET_BACK_COLOR = 48
    DEFAULT_BACK_COLOR = 49
    BG_COLOR_DEFAULT = 49
    FRAMED = 51
    ENCIRCLED = 52
    OVERLINED = 53
    FRAMED_ENCIRCLED_OFF = 54
    FRAMED_OFF = 54
    ENCIRCLED_OFF = 54
    OVERLINED_OFF = 55
    SET_UNDERLINE_COLOR = 58
    DEFAULT_UNDERLINE_COLOR = 59
    SUPER = 73
    SUB = 74
    SUPER_SUB_OFF = 75
    SUPER_OFF = 75
    SUB_OFF = 75
    FG_COLOR_BRIGHT_BLACK = _BRIGHT_FOREGROUND_BASE + 0
    FG_COLOR_BRIGHT_RED = _BRIGHT_FOREGROUND_BASE + 1
    FG_COLOR_BRIGHT_GREEN = _BRIGHT_FOREGROUND_BASE + 2
    FG_COLOR_BRIGHT_YELLOW = _BRIGHT_FOREGROUND_BASE + 3
    FG_COLOR_BRIGHT_BLUE = _BRIGHT_FOREGROUND_BASE + 4
    FG_COLOR_BRIGHT_MAGENTA = _BRIGHT_FOREGROUND_BASE + 5
    FG_COLOR_BRIGHT_CYAN = _BRIGHT_FOREGROUND_BASE + 6
    FG_COLOR_BRIGHT_WHITE = _BRIGHT_FOREGROUND_BASE + 7
    BG_COLOR_BRIGHT_BLACK = _BRIGHT_BACKGROUND_BASE + 0
    BG_COLOR_BRIGHT_RED = _BRIGHT_BACKGROUND_BASE + 1
    BG_COLOR_BRIGHT_GREEN = _BRIGHT_BACKGROUND_BASE + 2
    BG_COLOR_BRIGHT_YELLOW = _BRIGHT_BACKGROUND_BASE + 3
    BG_COLOR_BRIGHT_BLUE = _BRIGHT_BACKGROUND_BASE + 4
    BG_COLOR_BRIGHT_MAGENTA = _BRIGHT_BACKGROUND_BASE + 5
    BG_COLOR_BRIGHT_CYAN = _BRIGHT_BACKGROUND_BASE + 6
    BG_COLOR_BRIGHT_WHITE = _BRIGHT_BACKGROUND_BASE + 7


_mode = Mode.DEFAULT


def set_mode(mode: Mode | int) -> None:
    """Set the builder mode; raises ValueError for an unknown mode."""
    global _mode
    _mode = Mode(mode)


def get_mode() -> Mode:
    """Return the builder mode."""
    return _mode


def enable(state: bool = True) -> None:
    """Enable the builders, or disable them if ``state`` is false."""
    set_mode(Mode.ENABLED if state else Mode.DISABLED)


def disable() -> None:
    """Disable the builders."""
    set_mode(Mode.DISABLED)


def is_enabled() -> bool:
    """True if the builders currently produce sequences."""
    if _mode is Mode.DEFAULT:
        return sys.platform != "win32"
    return _mode is Mode.ENABLED


def _type_char(value, what: str) -> str:
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def _arg_string(args: tuple) -> str:
    if len(args) == 1 and isinstance(args[0], str):
        return args[0]
    if len(args) == 1 and isinstance(args[0], Sequence):
        args = tuple(args[0])
    numbers = []
    for arg in args:
        if not isinstance(arg, int) or isinstance(arg, bool):
            raise TypeError(f"sequence arguments must be integers, got {arg!r}")
        numbers.append(str(int(arg)))
    return ARG_DELIMITER.join(numbers)


def seq(seq_type: str, argstr: str = "") -> str:
    """Build ``ESC <seq_type> <argstr>``, or "" while disabled."""
    type_char = _type_char(seq_type, "sequence type")
    if not isinstance(argstr, str):
        raise TypeError("argstr must be a string")
    if not is_enabled():
        return ""
    return ESC_CHAR + type_char + argstr


def csi_seq(ctrl_seq_type: CsiType | str, *args) -> str:
    """Build a control sequence.

    The arguments are either one preformatted argument string, or integers
    (given separately or as one sequence) joined with ``;``.
    """
    final = _type_char(ctrl_seq_type, "control sequence type")
    return seq(CSI, _arg_string(args) + final)


def sgr_seq(*args) -> str:
    """Build an SGR sequence from an argument string or integer parameters."""
    return csi_seq(CsiType.SGR, *args)