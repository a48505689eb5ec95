"""
palettekit

Dominant color extraction from raster images, RGBA/HSL color model and
color-theory palette derivation (shades, complementary, analogous, triadic,
tetradic, analogous-accent).
"""

from palettekit.colors import (
    ArrayPixelSource,
    Color,
    GridPixelSource,
    Palette,
    PixelSource,
    as_pixel_source,
    color_distance,
    extract_colors,
    image_pixel_source,
    make_palette,
    palette_from_hex,
    sort_by_hsl,
)
from palettekit.colors import harmony
from palettekit.config import Config, config

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
    "harmony",
    "Palette",
    "make_palette",
    "palette_from_hex",
    "sort_by_hsl",
    "Config",
    "config",
]
