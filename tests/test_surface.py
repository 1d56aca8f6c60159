import pytest

from haglpy.bitmap import Bitmap
from haglpy.clip import Window
from haglpy.fontx import GlyphNotFoundError
from haglpy.surface import FrameBuffer, Surface, rgb565

RED = 0xF800


def make_font():
    header = b"FONTX2" + b"TESTFONT" + bytes([8, 8, 0])
    glyphs = bytearray(256 * 8)
    base = ord("A") * 8
    glyphs[base] = 0x80
    glyphs[base + 7] = 0x01
    return header + bytes(glyphs)


FONT = make_font()


def make_surface(width=32, height=24):
    return Surface(FrameBuffer(width, height))


def lit(surface):
    fb = surface.display
    return {
        (x, y)
        for y in range(fb.height)
        for x in range(fb.width)
        if fb.get_pixel(x, y)
    }


def test_rgb565_fixed_values():
    assert rgb565(0, 0, 0) == 0
    assert rgb565(255, 255, 255) == 0xFFFF
    assert rgb565(255, 0, 0) == RED


def test_color_matches_rgb565():
    surface = make_surface()
    assert surface.color(12, 200, 77) == rgb565(12, 200, 77)


def test_put_and_get_pixel_round_trip():
    surface = make_surface()
    surface.put_pixel(3, 4, RED)
    assert surface.get_pixel(3, 4) == RED
    assert lit(surface) == {(3, 4)}


def test_put_pixel_outside_clip_is_ignored():
    surface = make_surface()
    surface.set_clip_window(5, 5, 10, 10)
    surface.put_pixel(2, 2, RED)
    surface.put_pixel(11, 7, RED)
    assert lit(surface) == set()


def test_get_pixel_outside_clip_is_black():
    surface = make_surface()
    surface.put_pixel(1, 1, RED)
    surface.set_clip_window(5, 5, 10, 10)
    assert surface.get_pixel(1, 1) == 0
    assert surface.display.get_pixel(1, 1) == RED


def test_set_clip_window():
    surface = make_surface()
    surface.set_clip_window(1, 2, 3, 4)
    assert surface.clip_window == Window(1, 2, 3, 4)


def test_framebuffer_ignores_out_of_range():
    fb = FrameBuffer(4, 4)
    fb.put_pixel(10, 10, RED)
    assert fb.get_pixel(10, 10) == 0
    assert all(b == 0 for b in fb.bitmap.buffer)


def test_draw_line_horizontal():
    surface = make_surface()
    surface.draw_line(2, 5, 9, 5, RED)
    assert lit(surface) == {(x, 5) for x in range(2, 10)}


def test_draw_line_is_clipped():
    surface = make_surface()
    surface.set_clip_window(4, 4, 12, 12)
    surface.draw_line(-20, 8, 40, 8, RED)
    assert lit(surface) == {(x, 8) for x in range(4, 13)}


def test_draw_line_fully_outside_draws_nothing():
    surface = make_surface()
    surface.set_clip_window(4, 4, 12, 12)
    surface.draw_line(0, 0, 30, 0, RED)
    assert lit(surface) == set()


def test_draw_hline_and_vline_cover_length():
    surface = make_surface()
    surface.draw_hline(1, 1, 5, RED)
    surface.draw_vline(20, 2, 4, RED)
    expected = {(x, 1) for x in range(1, 7)} | {(20, y) for y in range(2, 7)}
    assert lit(surface) == expected


def test_draw_rectangle_outline():
    surface = make_surface()
    surface.draw_rectangle(10, 10, 3, 3, RED)
    pixels = lit(surface)
    for corner in [(3, 3), (10, 3), (3, 10), (10, 10)]:
        assert corner in pixels
    assert (6, 6) not in pixels


def test_fill_rectangle_stays_in_clip():
    surface = make_surface()
    surface.set_clip_window(5, 5, 15, 15)
    surface.fill_rectangle(0, 0, 30, 20, RED)
    pixels = lit(surface)
    assert pixels == {(x, y) for x in range(5, 16) for y in range(5, 16)}


def test_fill_rectangle_covers_area():
    surface = make_surface()
    surface.fill_rectangle(2, 3, 6, 8, RED)
    pixels = lit(surface)
    assert {(x, y) for x in range(2, 7) for y in range(3, 9)} <= pixels


def test_get_glyph_renders_bits():
    surface = make_surface()
    bitmap = surface.get_glyph("A", RED, FONT)
    assert (bitmap.width, bitmap.height) == (8, 8)
    assert bitmap.get_pixel(0, 0) == RED
    assert bitmap.get_pixel(7, 7) == RED
    assert bitmap.get_pixel(1, 0) == 0


def test_get_glyph_missing_raises():
    surface = make_surface()
    with pytest.raises(GlyphNotFoundError):
        surface.get_glyph(0x1000, RED, FONT)


def test_put_char_draws_and_returns_width():
    surface = make_surface()
    assert surface.put_char("A", 4, 2, RED, FONT) == 8
    assert lit(surface) == {(4, 2), (11, 9)}


def test_put_char_missing_returns_zero():
    surface = make_surface()
    assert surface.put_char(0x1000, 0, 0, RED, FONT) == 0
    assert lit(surface) == set()


def test_put_text_advances():
    surface = make_surface()
    assert surface.put_text("AA", 0, 0, RED, FONT) == 16
    assert lit(surface) == {(0, 0), (7, 7), (8, 0), (15, 7)}


def test_put_text_newline_starts_at_left_edge():
    surface = make_surface()
    surface.put_text("A\nA", 0, 0, RED, FONT)
    assert (0, 8) in lit(surface)
    assert (7, 15) in lit(surface)


def test_blit_copies_bitmap():
    surface = make_surface()
    source = Bitmap(2, 2)
    source.set_pixel(0, 0, 0x1234)
    source.set_pixel(1, 1, 0x4321)
    surface.blit(5, 6, source)
    assert surface.get_pixel(5, 6) == 0x1234
    assert surface.get_pixel(6, 7) == 0x4321
    assert lit(surface) == {(5, 6), (6, 7)}


def test_blit_is_clipped():
    surface = make_surface()
    surface.set_clip_window(0, 0, 5, 5)
    source = Bitmap(4, 4)
    for y in range(4):
        for x in range(4):
            source.set_pixel(x, y, RED)
    surface.blit(4, 4, source)
    assert lit(surface) == {(4, 4), (5, 4), (4, 5), (5, 5)}


def test_scale_blit_doubles():
    surface = make_surface()
    source = Bitmap(2, 2)
    source.set_pixel(0, 0, 0x1111)
    source.set_pixel(1, 0, 0x2222)
    source.set_pixel(0, 1, 0x3333)
    source.set_pixel(1, 1, 0x4444)
    surface.scale_blit(0, 0, 4, 4, source)
    for y in range(4):
        for x in range(4):
            assert surface.get_pixel(x, y) == source.get_pixel(x // 2, y // 2)


def test_scale_blit_rejects_zero_size():
    surface = make_surface()
    with pytest.raises(ValueError):
        surface.scale_blit(0, 0, 0, 4, Bitmap(2, 2))


def test_clear_screen_restores_clip_window():
    surface = make_surface()
    surface.fill_rectangle(0, 0, 31, 23, RED)
    surface.set_clip_window(2, 2, 5, 5)
    surface.clear_screen()
    assert lit(surface) == set()
    assert surface.clip_window == Window(2, 2, 5, 5)


def test_clear_clip_window_leaves_outside():
    surface = make_surface()
    surface.fill_rectangle(0, 0, 31, 23, RED)
    surface.set_clip_window(2, 2, 5, 5)
    surface.clear_clip_window()
    pixels = lit(surface)
    assert all(not (2 <= x <= 5 and 2 <= y <= 5) for x, y in pixels)
    assert (0, 0) in pixels
    assert (10, 10) in pixels