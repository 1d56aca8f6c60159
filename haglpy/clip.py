"""Cohen-Sutherland line clipping against a rectangular window."""

from __future__ import annotations

from dataclasses import dataclass

_INSIDE = 0b0000
_LEFT = 0b0001
_RIGHT = 0b0010
_BOTTOM = 0b0100
_TOP = 0b1000


@dataclass(frozen=True)
class Window:
    """An inclusive rectangular area from (x0, y0) to (x1, y1)."""

    x0: int
    y0: int
    x1: int
    y1: int


def _outcode(x: int, y: int, window: Window) -> int:
    code = _INSIDE
    if x < window.x0:
        code |= _LEFT
    elif x > window.x1:
        code |= _RIGHT
    if y < window.y0:
        code |= _BOTTOM
    elif y > window.y1:
        code |= _TOP
    return code


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def clip_line(
    x0: int, y0: int, x1: int, y1: int, window: Window
) -> tuple[int, int, int, int] | None:
    """Clip a line to the window; return the clipped endpoints or None if outside."""
    code0 = _outcode(x0, y0, window)
    code1 = _outcode(x1, y1, window)

    while True:
        if not (code0 | code1):
            return x0, y0, x1, y1
        if code0 & code1:
            return None

        outside = code0 or code1
        if outside & _TOP:
            x = x0 + _div((x1 - x0) * (window.y1 - y0), y1 - y0)
            y = window.y1
        elif outside & _BOTTOM:
            x = x0 + _div((x1 - x0) * (window.y0 - y0), y1 - y0)
            y = window.y0
        elif outside & _RIGHT:
            y = y0 + _div((y1 - y0) * (window.x1 - x0), x1 - x0)
            x = window.x1
        else:
            y = y0 + _div((y1 - y0) * (window.x0 - x0), x1 - x0)
            x = window.x0

        if outside == code0:
            x0, y0 = x, y
            code0 = _outcode(x0, y0, window)
        else:
            x1, y1 = x, y
            code1 = _outcode(x1, y1, window)