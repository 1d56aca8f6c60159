import pytest

from haglpy.fontx import (
    FontMeta,
    FontType,
    Glyph,
    GlyphNotFoundError,
    font_glyph,
    font_meta,
)


def _sbcs_font():
    header = b"FONTX2" + b"TESTFONT" + bytes([8, 2, FontType.SBCS])
    data = bytearray()
    for code in range(256):
        data += bytes([code, 0xFF - code])
    return header + bytes(data)


def _dbcs_font():
    header = b"FONTX2" + b"WIDEFONT" + bytes([5, 8, FontType.DBCS])
    blocks = [(0x20, 0x21), (0x100, 0x101)]
    table = bytes([len(blocks)])
    for start, end in blocks:
        table += bytes([start & 0xFF, start >> 8, end & 0xFF, end >> 8])
    glyphs = b"".join(bytes([index + 1] * 8) for index in range(4))
    return header + table + glyphs


def test_meta_reads_header():
    meta = font_meta(_sbcs_font())
    assert meta == FontMeta(name="TESTFONT", width=8, height=2, type=FontType.SBCS)


def test_meta_of_dbcs_font():
    meta = font_meta(_dbcs_font())
    assert meta.type is FontType.DBCS
    assert (meta.width, meta.height) == (5, 8)


def test_meta_rejects_short_data():
    with pytest.raises(ValueError):
        font_meta(b"FONTX2")


def test_sbcs_glyph_points_at_code_data():
    glyph = font_glyph(0x41, _sbcs_font())
    assert glyph.pitch == 1
    assert glyph.size == 2
    assert glyph.buffer == bytes([0x41, 0xFF - 0x41])


def test_sbcs_accepts_character():
    font = _sbcs_font()
    assert font_glyph("A", font) == font_glyph(ord("A"), font)


def test_sbcs_code_out_of_range():
    with pytest.raises(GlyphNotFoundError):
        font_glyph(0x100, _sbcs_font())


def test_dbcs_glyph_in_first_block():
    glyph = font_glyph(0x21, _dbcs_font())
    assert glyph.buffer == bytes([2] * 8)


def test_dbcs_glyph_in_second_block_counts_previous_blocks():
    glyph = font_glyph(0x101, _dbcs_font())
    assert glyph.buffer == bytes([4] * 8)
    assert (glyph.width, glyph.height) == (5, 8)


def test_dbcs_missing_code():
    with pytest.raises(GlyphNotFoundError):
        font_glyph(0x50, _dbcs_font())


def test_glyph_is_set_reads_bits_msb_first():
    glyph = Glyph(width=3, height=2, size=2, pitch=1, buffer=bytes([0b10100000, 0b01000000]))
    assert [glyph.is_set(x, 0) for x in range(3)] == [True, False, True]
    assert [glyph.is_set(x, 1) for x in range(3)] == [False, True, False]


def test_glyph_is_set_outside_raises():
    glyph = font_glyph(0x20, _dbcs_font())
    with pytest.raises(IndexError):
        glyph.is_set(5, 0)


def test_truncated_font_raises():
    with pytest.raises(ValueError):
        font_glyph(0xFF, _sbcs_font()[:100])