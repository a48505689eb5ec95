"""
palettekit Colors Module

Provides the RGBA color model, dominant color extraction, the harmony
engine and palettes built on top of them.
"""

from .model import Color, color_distance
from .pixels import ArrayPixelSource, GridPixelSource, PixelSource, as_pixel_source, image_pixel_source
from .extraction import extract_colors
from .palette import Palette, make_palette, palette_from_hex, sort_by_hsl

__version__ = "1.0.0"

__all__ = [
    "Color",
    "color_distance",
    "PixelSource",
    "GridPixelSource",
    "ArrayPixelSource",
    "image_pixel_source",
    "as_pixel_source",
    "extract_colors",
    "Palette",
    "make_palette",
    "palette_from_hex",
    "sort_by_hsl",
]
