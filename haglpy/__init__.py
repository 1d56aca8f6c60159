"""Pixel graphics on an in-memory frame buffer: shapes, FONTX text, bitmaps, clipping, plus clock and serial settings helpers."""

__version__ = "0.1.0"

__all__ = ["bitmap", "clip", "clock", "fontx", "fps", "shapes", "surface", "usart"]