# haglpy

A small pixel graphics library that draws into an in-memory frame buffer.
The frame buffer uses 16-bit pixels by default, and `Surface.color()` packs
colours as RGB565. The library can clip and draw pixels, lines, rectangles,
circles, ellipses, polygons and rounded rectangles. It also renders text from
FONTX bitmap fonts, copies and scales bitmaps, and includes a smoothed
frames-per-second counter.

The package has two more helpers:

- `haglpy.clock` works out the core clock frequency from a snapshot of
  clock-control register values that you supply.
- `haglpy.usart` describes the settings of a serial port and its pins.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install .[test]
```

## Drawing

```python
from haglpy.surface import FrameBuffer, Surface
from haglpy import shapes

fb = FrameBuffer(160, 128)          # width, height, depth=16
surface = Surface(fb)

red = surface.color(255, 0, 0)      # RGB565
surface.draw_line(0, 0, 159, 127, red)
surface.fill_rectangle(10, 10, 40, 30, surface.color(0, 255, 0))
shapes.draw_circle(surface, 80, 64, 20, red)
shapes.fill_polygon(surface, [(10, 100), (50, 90), (30, 120)], red)

print(fb.get_pixel(0, 0))
```

Every drawing call is limited to the current clip window. The clip window
starts out as the whole display. Change it with
`surface.set_clip_window(x0, y0, x1, y1)`; the corners are inclusive.
`surface.get_pixel()` returns black for points outside the clip window.
`surface.clear_screen()` clears the whole display whatever the clip window is,
and `surface.clear_clip_window()` clears only the clip window.

`haglpy.shapes` has these functions. Each takes the surface as its first
argument:

- `draw_circle`, `fill_circle`
- `draw_ellipse`, `fill_ellipse`
- `draw_polygon`, `fill_polygon`, which take a sequence of `(x, y)` vertices
- `draw_triangle`, `fill_triangle`
- `draw_rounded_rectangle`, `fill_rounded_rectangle`

## Text

Text is drawn with FONTX fonts, which you pass in as `bytes`:

```python
from haglpy.fontx import font_meta, font_glyph, GlyphNotFoundError

meta = font_meta(font_bytes)
print(meta.name, meta.width, meta.height, meta.type)

glyph = font_glyph("A", font_bytes)
print(glyph.is_set(0, 0))

width = surface.put_text("Hello", 0, 0, red, font_bytes)
```

`font_glyph` accepts a code point or a single character. It raises
`GlyphNotFoundError` when the font has no glyph for it.

`Surface.put_char` returns the width it drew, or 0 if the font has no glyph
for the character. `Surface.put_text` moves to x = 0 on the next line whenever
it meets `"\r"` or `"\n"`, and returns how far x advanced. `Surface.get_glyph`
renders one glyph into a new `Bitmap`.

## Bitmaps

```python
from haglpy.bitmap import Bitmap, bitmap_blit, bitmap_scale_blit

src = Bitmap(4, 4)                  # depth=16 by default
src.set_pixel(1, 1, 0xF800)
dst = Bitmap(32, 32)
bitmap_blit(-2, 3, src, dst)
bitmap_scale_blit(0, 0, 8, 8, src, dst)
```

`bitmap_blit` copies one bitmap into another and drops whatever falls outside
the destination. `bitmap_scale_blit` does the same copy with nearest-neighbour
scaling. Both raise `ValueError` when the two bitmaps have different depths.
`bitmap_scale_blit` also raises `ValueError` when a target dimension is not
positive. To draw a bitmap on a surface, use `Surface.blit` or
`Surface.scale_blit`.

## Line clipping

```python
from haglpy.clip import Window, clip_line

result = clip_line(-10, 5, 50, 5, Window(0, 0, 39, 39))   # (0, 5, 39, 5)
```

`clip_line` returns the clipped endpoints. It returns `None` when the line
lies wholly outside the window.

## Frame rate

```python
from haglpy.fps import FpsCounter

counter = FpsCounter()
fps = counter.update()   # call once per frame
```

`update()` returns a smoothed frames-per-second value. The same value is
available afterwards as `counter.current`.

## Clock and serial settings

```python
from haglpy.clock import RccRegisters, ClockConfig, system_core_clock
from haglpy.usart import usart2_config, usart2_pins

system_core_clock(RccRegisters(), ClockConfig())   # 4000000
usart2_config().frame_bits()                       # 10.0
[pin.name for pin in usart2_pins()]                # ['PA2', 'PA3']
```

`msi_frequency` raises `ValueError` when the registers select a reserved MSI
range.

## What it does not do

- It only draws into memory. It does not drive a physical display, and it has
  no init, flush or close step for one.
- It cannot load image files such as JPEG. Pixels reach the frame buffer only
  through drawing calls and bitmaps.
- `haglpy.clock` and `haglpy.usart` do not read or write hardware registers or
  open serial ports. They only compute and describe settings.

## Running the tests

```
pytest
```