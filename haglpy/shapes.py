"""Circles, ellipses, polygons and rounded rectangles drawn on a Surface."""

from __future__ import annotations

from typing import Sequence

from haglpy.surface import Surface

Point = tuple[int, int]


def _plot_octants(surface: Surface, xc: int, yc: int, x: int, y: int, color: int) -> None:
    for px, py in (
        (xc + x, yc + y), (xc - x, yc + y), (xc + x, yc - y), (xc - x, yc - y),
        (xc + y, yc + x), (xc - y, yc + x), (xc + y, yc - x), (xc - y, yc - x),
    ):
        surface.put_pixel(px, py, color)


def _midpoint_step(x: int, y: int, d: int) -> tuple[int, int, int]:
    """Advance the midpoint circle algorithm by one step."""
    x += 1
    if d > 0:
        y -= 1
        d = d + 4 * (x - y) + 10
    else:
        d = d + 4 * x + 6
    return x, y, d


def draw_circle(surface: Surface, xc: int, yc: int, r: int, color: int) -> None:
    """Draw the outline of a circle centred on (xc, yc)."""
    x, y, d = 0, r, 3 - 2 * r
    _plot_octants(surface, xc, yc, x, y, color)
    while y >= x:
        x, y, d = _midpoint_step(x, y, d)
        _plot_octants(surface, xc, yc, x, y, color)


def fill_circle(surface: Surface, x0: int, y0: int, r: int, color: int) -> None:
    """Draw a filled circle centred on (x0, y0)."""
    x, y, d = 0, r, 3 - 2 * r
    while y >= x:
        surface.draw_hline(x0 - x, y0 + y, x * 2, color)
        surface.draw_hline(x0 - x, y0 - y, x * 2, color)
        surface.draw_hline(x0 - y, y0 + x, y * 2, color)
        surface.draw_hline(x0 - y, y0 - x, y * 2, color)
        x, y, d = _midpoint_step(x, y, d)


def _ellipse_spans(a: int, b: int):
    """Yield the (wx, wy) offsets visited by the midpoint ellipse algorithm.

    The first region is yielded before a marker of None, then the second.
    """
    asq = a * a
    bsq = b * b

    wx, wy = 0, b
    xa, ya = 0, asq * 2 * b
    t = asq // 4 - asq * b
    while True:
        t += xa + bsq
        if t >= 0:
            ya -= asq * 2
            t -= ya
            wy -= 1
        xa += bsq * 2
        wx += 1
        if xa >= ya:
            break
        yield wx, wy

    yield None

    wx, wy = a, 0
    xa, ya = bsq * 2 * a, 0
    t = bsq // 4 - bsq * a
    while True:
        t += ya + asq
        if t >= 0:
            xa -= bsq * 2
            t -= xa
            wx -= 1
        ya += asq * 2
        wy += 1
        if ya > xa:
            break
        yield wx, wy


def draw_ellipse(surface: Surface, x0: int, y0: int, a: int, b: int, color: int) -> None:
    """Draw an ellipse outline with horizontal radius a and vertical radius b."""
    surface.put_pixel(x0, y0 + b, color)
    surface.put_pixel(x0, y0 - b, color)
    for span in _ellipse_spans(a, b):
        if span is None:
            surface.put_pixel(x0 + a, y0, color)
            surface.put_pixel(x0 - a, y0, color)
            continue
        wx, wy = span
        surface.put_pixel(x0 + wx, y0 - wy, color)
        surface.put_pixel(x0 - wx, y0 - wy, color)
        surface.put_pixel(x0 + wx, y0 + wy, color)
        surface.put_pixel(x0 - wx, y0 + wy, color)


def fill_ellipse(surface: Surface, x0: int, y0: int, a: int, b: int, color: int) -> None:
    """Draw a filled ellipse with horizontal radius a and vertical radius b."""
    surface.put_pixel(x0, y0 + b, color)
    surface.put_pixel(x0, y0 - b, color)
    for span in _ellipse_spans(a, b):
        if span is None:
            surface.draw_hline(x0 - a, y0, a * 2, color)
            continue
        wx, wy = span
        surface.draw_hline(x0 - wx, y0 - wy, wx * 2, color)
        surface.draw_hline(x0 - wx, y0 + wy, wx * 2, color)


def _points(vertices: Sequence[Point]) -> list[Point]:
    points = [(int(x), int(y)) for x, y in vertices]
    if not points:
        raise ValueError("a polygon needs at least one vertex")
    return points


def draw_polygon(surface: Surface, vertices: Sequence[Point], color: int) -> None:
    """Draw the outline of a polygon given as a sequence of (x, y) vertices."""
    points = _points(vertices)
    for (xa, ya), (xb, yb) in zip(points, points[1:]):
        surface.draw_line(xa, ya, xb, yb, color)
    (xf, yf), (xl, yl) = points[0], points[-1]
    surface.draw_line(xf, yf, xl, yl, color)


def fill_polygon(surface: Surface, vertices: Sequence[Point], color: int) -> None:
    """Fill a polygon (convex, concave or complex) using scanline node lists."""
    points = _points(vertices)
    miny = min(surface.display.height, *(y for _, y in points))
    maxy = max(0, *(y for _, y in points))

    for y in range(miny, maxy):
        nodes = []
        previous = points[-1]
        for current in points:
            x0, y0 = float(current[0]), float(current[1])
            x1, y1 = float(previous[0]), float(previous[1])
            if (y0 < y <= y1) or (y1 < y <= y0):
                nodes.append(int(x0 + (y - y0) / (y1 - y0) * (x1 - x0)))
            previous = current
        nodes.sort()
        for start, end in zip(nodes[0::2], nodes[1::2]):
            surface.draw_hline(start, y, end - start, color)


def draw_triangle(
    surface: Surface, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
) -> None:
    """Draw a triangle outline."""
    draw_polygon(surface, [(x0, y0), (x1, y1), (x2, y2)], color)


def fill_triangle(
    surface: Surface, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
) -> None:
    """Draw a filled triangle."""
    fill_polygon(surface, [(x0, y0), (x1, y1), (x2, y2)], color)


def _normalise_rect(
    surface: Surface, x0: int, y0: int, x1: int, y1: int, r: int
) -> tuple[int, int, int, int, int, int, int] | None:
    x0, x1 = min(x0, x1), max(x0, x1)
    y0, y1 = min(y0, y1), max(y0, y1)
    w = surface.clip_window
    if x1 < w.x0 or y1 < w.y0 or x0 > w.x1 or y0 > w.y1:
        return None
    width = x1 - x0 + 1
    height = y1 - y0 + 1
    r = min(r, width // 2, height // 2)
    return x0, y0, x1, y1, width, height, r


def draw_rounded_rectangle(
    surface: Surface, x0: int, y0: int, x1: int, y1: int, r: int, color: int
) -> None:
    """Draw a rectangle outline with corners of radius r."""
    rect = _normalise_rect(surface, x0, y0, x1, y1, r)
    if rect is None:
        return
    x0, y0, x1, y1, width, height, r = rect

    surface.draw_hline(x0 + r, y0, width - 2 * r, color)
    surface.draw_hline(x0 + r, y1, width - 2 * r, color)
    surface.draw_vline(x0, y0 + r, height - 2 * r, color)
    surface.draw_vline(x1, y0 + r, height - 2 * r, color)

    x, y, d = 0, r, 3 - 2 * r
    while y >= x:
        x, y, d = _midpoint_step(x, y, d)
        for px, py in (
            (x1 - r + x, y0 + r - y), (x1 - r + y, y0 + r - x),
            (x0 + r - x, y0 + r - y), (x0 + r - y, y0 + r - x),
            (x1 - r + x, y1 - r + y), (x1 - r + y, y1 - r + x),
            (x0 + r - x, y1 - r + y), (x0 + r - y, y1 - r + x),
        ):
            surface.put_pixel(px, py, color)


def fill_rounded_rectangle(
    surface: Surface, x0: int, y0: int, x1: int, y1: int, r: int, color: int
) -> None:
    """Draw a filled rectangle with corners of radius r."""
    rect = _normalise_rect(surface, x0, y0, x1, y1, r)
    if rect is None:
        return
    x0, y0, x1, y1, _, _, r = rect

    x, y, d = 0, r, 3 - 2 * r
    while y >= x:
        x, y, d = _midpoint_step(x, y, d)
        for row, left, right in (
            (y0 + r - x, x0 + r - y, x1 - r + y),
            (y0 + r - y, x0 + r - x, x1 - r + x),
            (y1 - r + y, x0 + r - x, x1 - r + x),
            (y1 - r + x, x0 + r - y, x1 - r + y),
        ):
            surface.draw_hline(left, row, right - left, color)

    surface.fill_rectangle(x0, y0 + r, x1, y1 - r, color)