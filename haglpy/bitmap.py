"""Raw pixel bitmaps and blitting between them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Bitmap:
    """A bitmap of width x height pixels, depth bits each, stored row by row."""

    width: int
    height: int
    depth: int = 16
    buffer: bytearray = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depth <= 0 or self.depth % 8:
            raise ValueError("depth must be a positive multiple of 8")
        if self.width < 0 or self.height < 0:
            raise ValueError("dimensions must not be negative")
        if self.buffer is None:
            self.buffer = bytearray(self.size)
        elif not isinstance(self.buffer, bytearray):
            self.buffer = bytearray(self.buffer)
        if len(self.buffer) < self.size:
            raise ValueError("buffer smaller than bitmap size")

    @property
    def bytes_per_pixel(self) -> int:
        return self.depth // 8

    @property
    def pitch(self) -> int:
        """Bytes per row."""
        return self.width * self.bytes_per_pixel

    @property
    def size(self) -> int:
        """Size of the pixel data in bytes."""
        return self.pitch * self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return y * self.pitch + x * self.bytes_per_pixel

    def get_pixel(self, x: int, y: int) -> int:
        offset = self._offset(x, y)
        return int.from_bytes(self.buffer[offset:offset + self.bytes_per_pixel], "little")

    def set_pixel(self, x: int, y: int, color: int) -> None:
        offset = self._offset(x, y)
        bpp = self.bytes_per_pixel
        self.buffer[offset:offset + bpp] = (color & ((1 << self.depth) - 1)).to_bytes(bpp, "little")


def bitmap_blit(x0: int, y0: int, src: Bitmap, dst: Bitmap) -> None:
    """Copy src into dst at (x0, y0), dropping whatever falls outside dst."""
    if src.depth != dst.depth:
        raise ValueError("source and destination depths differ")
    if x0 > dst.width or y0 > dst.height:
        return

    srcw, srch = src.width, src.height
    sx = sy = 0
    if x0 < 0:
        srcw += x0
        sx = -x0
        x0 = 0
    if y0 < 0:
        srch += y0
        sy = -y0
        y0 = 0
    srcw = min(srcw, dst.width - x0)
    srch = min(srch, dst.height - y0)
    if srcw <= 0 or srch <= 0:
        return

    bpp = dst.bytes_per_pixel
    span = srcw * bpp
    for row in range(srch):
        s = src.pitch * (sy + row) + sx * bpp
        d = dst.pitch * (y0 + row) + x0 * bpp
        dst.buffer[d:d + span] = src.buffer[s:s + span]


def bitmap_scale_blit(x0: int, y0: int, dstw: int, dsth: int, src: Bitmap, dst: Bitmap) -> None:
    """Scale src to dstw x dsth with nearest-neighbour sampling and copy it into dst."""
    if src.depth != dst.depth:
        raise ValueError("source and destination depths differ")
    if dstw <= 0 or dsth <= 0:
        raise ValueError("target dimensions must be positive")

    x_ratio = (src.width << 16) // dstw
    y_ratio = (src.height << 16) // dsth

    if x0 > dst.width or y0 > dst.height:
        return
    if x0 < 0:
        dstw += x0
        x0 = 0
    if y0 < 0:
        dsth += y0
        y0 = 0
    dstw = min(dstw, dst.width - x0)
    dsth = min(dsth, dst.height - y0)
    if dstw <= 0 or dsth <= 0:
        return

    for y in range(dsth):
        py = (y * y_ratio) >> 16
        for x in range(dstw):
            px = (x * x_ratio) >> 16
            dst.set_pixel(x0 + x, y0 + y, src.get_pixel(px, py))