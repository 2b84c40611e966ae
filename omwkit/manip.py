"""SGR shortcuts: styles, fonts and colours for terminal output.

Every function returns the escape sequence as a string, ready to be
written to a terminal. While the builders of :mod:`omwkit.ansiesc` are
disabled every function returns an empty string.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansiesc import SET_COLOR_8BIT, SET_COLOR_RGB, Sgr, sgr_seq

_FONT_COUNT = 10


def style(*args) -> str:
    """Return an SGR sequence for the given parameters.

    The parameters are :class:`Sgr` members or plain integers, e.g.
    ``style(Sgr.BOLD)`` or ``style(Sgr.UNDERLINE_OFF, Sgr.FG_COLOR_GREEN)``.
    A single preformatted argument string is passed through unchanged.
    """
    return sgr_seq(*args)


def normal() -> str:
    """Reset all attributes."""
    return sgr_seq(Sgr.RESET)


def default_colors() -> str:
    """Reset the background, foreground and underline colours."""
    return sgr_seq(Sgr.DEFAULT_BACK_COLOR, Sgr.DEFAULT_FORE_COLOR, Sgr.DEFAULT_UNDERLINE_COLOR)


def font(index: int) -> str:
    """Select font ``index`` (0 is the default font, 1 to 9 alternatives)."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"font index must be an integer, got {index!r}")
    if not 0 <= index < _FONT_COUNT:
        raise ValueError(f"font index must be in 0..{_FONT_COUNT - 1}, got {index}")
    return sgr_seq(Sgr.DEFAULT_FONT + index)


def _channel(value, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be in 0..255, got {value}")
    return int(value)


def _color(target: Sgr, args: tuple) -> str:
    if len(args) == 1 and isinstance(args[0], Sequence) and not isinstance(args[0], str):
        args = tuple(args[0])
    if len(args) == 1:
        return sgr_seq(target, SET_COLOR_8BIT, _channel(args[0], "8-bit colour"))
    if len(args) == 3:
        r, g, b = (_channel(v, name) for v, name in zip(args, ("red", "green", "blue")))
        return sgr_seq(target, SET_COLOR_RGB, r, g, b)
    raise TypeError("expected an 8-bit colour index or red, green and blue values")


def fore_color(*args) -> str:
    """Set the foreground colour.

    Takes an 8-bit colour index, or red, green and blue values given
    separately or as one sequence.
    """
    return _color(Sgr.SET_FORE_COLOR, args)


def back_color(*args) -> str:
    """Set the background colour; arguments as for :func:`fore_color`."""
    return _color(Sgr.SET_BACK_COLOR, args)


def underline_color(*args) -> str:
    """Set the underline colour; arguments as for :func:`fore_color`."""
    return _color(Sgr.SET_UNDERLINE_COLOR, args)