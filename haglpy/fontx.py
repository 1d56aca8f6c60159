"""Reading FONTX2 bitmap fonts: metadata and glyph lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_NAME = 6
_NAME_LENGTH = 8
_WIDTH = 14
_HEIGHT = 15
_TYPE = 16
_GLYPH_DATA_START = 17
_BLOCK_TABLE_SIZE = 17
_BLOCK_TABLE_START = 18


class FontType(IntEnum):
    """Code page layout of a FONTX font."""

    SBCS = 0
    DBCS = 1


class GlyphNotFoundError(LookupError):
    """The font has no glyph for the requested code point."""


@dataclass(frozen=True)
class FontMeta:
    """Header information of a FONTX font."""

    name: str
    width: int
    height: int
    type: FontType


@dataclass(frozen=True)
class Glyph:
    """A single glyph bitmap, one bit per pixel, rows padded to whole bytes."""

    width: int
    height: int
    size: int
    pitch: int
    buffer: bytes

    def is_set(self, x: int, y: int) -> bool:
        """Return True if the pixel at (x, y) of the glyph is set."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} glyph")
        byte = self.buffer[y * self.pitch + x // 8]
        return bool(byte & (0x80 >> (x % 8)))


def _code_point(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError("a single character is expected")
        return ord(code)
    return code


def font_meta(font: bytes) -> FontMeta:
    """Read the header of a FONTX font."""
    if len(font) < _GLYPH_DATA_START:
        raise ValueError("font data too short for a FONTX header")
    raw_name = bytes(font[_NAME:_NAME + _NAME_LENGTH])
    name = raw_name.decode("ascii", errors="replace").rstrip("\x00")
    font_type = FontType.SBCS if font[_TYPE] == FontType.SBCS else FontType.DBCS
    return FontMeta(name=name, width=font[_WIDTH], height=font[_HEIGHT], type=font_type)


def _glyph_at(font: bytes, offset: int, meta: FontMeta, pitch: int, size: int) -> Glyph:
    data = bytes(font[offset:offset + size])
    if len(data) < size:
        raise ValueError("font data truncated")
    return Glyph(width=meta.width, height=meta.height, size=size, pitch=pitch, buffer=data)


def font_glyph(code: int | str, font: bytes) -> Glyph:
    """Look up the glyph for a code point; raise GlyphNotFoundError if absent."""
    code = _code_point(code)
    meta = font_meta(font)
    pitch = (meta.width + 7) // 8
    size = pitch * meta.height

    if meta.type is FontType.SBCS:
        if 0 <= code < 0x100:
            return _glyph_at(font, _GLYPH_DATA_START + code * size, meta, pitch, size)
        raise GlyphNotFoundError(code)

    block_count = font[_BLOCK_TABLE_SIZE]
    data_start = _BLOCK_TABLE_START + 4 * block_count
    preceding = 0
    for block in range(block_count):
        entry = _BLOCK_TABLE_START + 4 * block
        start = font[entry] | (font[entry + 1] << 8)
        end = font[entry + 2] | (font[entry + 3] << 8)
        if start <= code <= end:
            offset = data_start + (preceding + code - start) * size
            return _glyph_at(font, offset, meta, pitch, size)
        preceding += end - start + 1

    raise GlyphNotFoundError(code)