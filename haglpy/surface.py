"""A drawing surface with a clip window on top of an in-memory frame buffer."""

from __future__ import annotations

from haglpy.bitmap import Bitmap
from haglpy.clip import Window, clip_line
from haglpy.fontx import GlyphNotFoundError, font_glyph, font_meta

BLACK = 0x0000


def rgb565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue into a 16-bit RGB565 colour."""
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | ((b & 0xF8) >> 3)


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


class FrameBuffer:
    """Pixel storage for a display of a given size and colour depth."""

    def __init__(self, width: int, height: int, depth: int = 16) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("display dimensions must be positive")
        self.bitmap = Bitmap(width, height, depth)

    @property
    def width(self) -> int:
        return self.bitmap.width

    @property
    def height(self) -> int:
        return self.bitmap.height

    @property
    def depth(self) -> int:
        return self.bitmap.depth

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; writes outside the display are dropped."""
        if self._inside(x, y):
            self.bitmap.set_pixel(x, y, color)

    def get_pixel(self, x: int, y: int) -> int:
        """Read a pixel; anything outside the display reads as black."""
        if self._inside(x, y):
            return self.bitmap.get_pixel(x, y)
        return BLACK


class Surface:
    """Drawing primitives clipped to a window on a frame buffer."""

    def __init__(self, display: FrameBuffer) -> None:
        self.display = display
        self.clip_window = Window(0, 0, display.width - 1, display.height - 1)

    def color(self, r: int, g: int, b: int) -> int:
        """Convert RGB to the display colour format."""
        return rgb565(r, g, b)

    def set_clip_window(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Restrict drawing to the inclusive area (x0, y0)-(x1, y1)."""
        self.clip_window = Window(x0, y0, x1, y1)

    def _in_clip(self, x: int, y: int) -> bool:
        w = self.clip_window
        return w.x0 <= x <= w.x1 and w.y0 <= y <= w.y1

    def put_pixel(self, x0: int, y0: int, color: int) -> None:
        if self._in_clip(x0, y0):
            self.display.put_pixel(x0, y0, color)

    def get_pixel(self, x0: int, y0: int) -> int:
        """Read a pixel; outside the clip window the result is black."""
        if not self._in_clip(x0, y0):
            return self.color(0, 0, 0)
        return self.display.get_pixel(x0, y0)

    def draw_hline(self, x0: int, y0: int, width: int, color: int) -> None:
        self.draw_line(x0, y0, x0 + width, y0, color)

    def draw_vline(self, x0: int, y0: int, height: int, color: int) -> None:
        self.draw_line(x0, y0, x0, y0 + height, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line with Bresenham's algorithm after clipping it."""
        clipped = clip_line(x0, y0, x1, y1, self.clip_window)
        if clipped is None:
            return
        x0, y0, x1, y1 = clipped

        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = _half(dx if dx > dy else -dy)

        while True:
            self.put_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = err + err
            if e2 > -dx:
                err -= dy
                x0 += sx
            if e2 < dy:
                err += dx
                y0 += sy

    def _outside(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        w = self.clip_window
        return x1 < w.x0 or y1 < w.y0 or x0 > w.x1 or y0 > w.y1

    def draw_rectangle(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        x0, x1 = min(x0, x1), max(x0, x1)
        y0, y1 = min(y0, y1), max(y0, y1)
        if self._outside(x0, y0, x1, y1):
            return
        width = x1 - x0 + 1
        height = y1 - y0 + 1
        self.draw_hline(x0, y0, width, color)
        self.draw_hline(x0, y1, width, color)
        self.draw_vline(x0, y0, height, color)
        self.draw_vline(x1, y0, height, color)

    def fill_rectangle(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        x0, x1 = min(x0, x1), max(x0, x1)
        y0, y1 = min(y0, y1), max(y0, y1)
        if self._outside(x0, y0, x1, y1):
            return
        w = self.clip_window
        x0, y0 = max(x0, w.x0), max(y0, w.y0)
        x1, y1 = min(x1, w.x1), min(y1, w.y1)
        width = x1 - x0 + 1
        for row in range(y1 - y0 + 1):
            self.draw_hline(x0, y0 + row, width, color)

    def get_glyph(self, code: int | str, color: int, font: bytes) -> Bitmap:
        """Render a glyph into a new bitmap; raise GlyphNotFoundError if absent."""
        glyph = font_glyph(code, font)
        bitmap = Bitmap(glyph.width, glyph.height, self.display.depth)
        for y in range(glyph.height):
            for x in range(glyph.width):
                bitmap.set_pixel(x, y, color if glyph.is_set(x, y) else BLACK)
        return bitmap

    def put_char(self, code: int | str, x0: int, y0: int, color: int, font: bytes) -> int:
        """Draw a character and return its width, or 0 if the font lacks it."""
        try:
            bitmap = self.get_glyph(code, color, font)
        except GlyphNotFoundError:
            return 0
        self.blit(x0, y0, bitmap)
        return bitmap.width

    def put_text(self, text: str, x0: int, y0: int, color: int, font: bytes) -> int:
        """Draw a string; CR and LF start a new line at x = 0. Return the advance."""
        meta = font_meta(font)
        original = x0
        for char in text:
            if char in "\r\n":
                x0 = 0
                y0 += meta.height
            else:
                x0 += self.put_char(char, x0, y0, color, font)
        return x0 - original

    def blit(self, x0: int, y0: int, source: Bitmap) -> None:
        """Copy a bitmap onto the surface, clipped to the clip window."""
        for y in range(source.height):
            for x in range(source.width):
                self.put_pixel(x0 + x, y0 + y, source.get_pixel(x, y))

    def scale_blit(self, x0: int, y0: int, w: int, h: int, source: Bitmap) -> None:
        """Copy a bitmap scaled to w x h using nearest-neighbour sampling."""
        if w <= 0 or h <= 0:
            raise ValueError("target dimensions must be positive")
        x_ratio = (source.width << 16) // w
        y_ratio = (source.height << 16) // h
        for y in range(h):
            py = (y * y_ratio) >> 16
            for x in range(w):
                px = (x * x_ratio) >> 16
                self.put_pixel(x0 + x, y0 + y, source.get_pixel(px, py))

    def clear_screen(self) -> None:
        """Clear the whole display regardless of the clip window."""
        saved = self.clip_window
        last_x = self.display.width - 1
        last_y = self.display.height - 1
        self.set_clip_window(0, 0, last_x, last_y)
        self.fill_rectangle(0, 0, last_x, last_y, BLACK)
        self.clip_window = saved

    def clear_clip_window(self) -> None:
        w = self.clip_window
        self.fill_rectangle(w.x0, w.y0, w.x1, w.y1, BLACK)