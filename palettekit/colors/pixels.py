"""
Pixel sources for color extraction.

The extractor only needs bounds and a per-pixel RGBA accessor. Decoding is
left to the caller; these adapters wrap grids that are already in memory
(nested sequences, numpy arrays, Pillow images).
"""

from typing import Any, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np
from PIL import Image
from loguru import logger

from palettekit.config import config

Bounds = Tuple[int, int, int, int]
RGBA = Tuple[int, int, int, int]


@runtime_checkable
class PixelSource(Protocol):
    """
    Anything exposing bounds and a per-pixel RGBA accessor.

    Sources may also expose ``bit_depth`` (8 or 16); without it channels are
    read as 8-bit.
    """

    @property
    def bounds(self) -> Bounds:
        """(min_x, min_y, max_x, max_y); max values are exclusive."""
        ...

    def at(self, x: int, y: int) -> RGBA:
        ...


class GridPixelSource:
    """Pixel source over rows of RGBA tuples indexed ``rows[y][x]``."""

    def __init__(self, rows: Sequence[Sequence[Sequence[int]]],
                 bit_depth: int = 8,
                 origin: Tuple[int, int] = (0, 0)):
        if not config.validate_bit_depth(bit_depth):
            raise ValueError(f"Unsupported bit depth: {bit_depth}")
        self._rows = rows
        self._bit_depth = bit_depth
        self._origin = origin
        self._height = len(rows)
        self._width = len(rows[0]) if self._height else 0

    @property
    def bounds(self) -> Bounds:
        x0, y0 = self._origin
        return x0, y0, x0 + self._width, y0 + self._height

    @property
    def bit_depth(self) -> int:
        return self._bit_depth

    def at(self, x: int, y: int) -> RGBA:
        x0, y0 = self._origin
        r, g, b, a = self._rows[y - y0][x - x0]
        return r, g, b, a


class ArrayPixelSource(GridPixelSource):
    """
    Pixel source over an (H, W, 4) or (H, W, 3) numpy array.

    uint8 arrays are 8-bit, uint16 arrays 16-bit. Three-channel arrays are
    treated as fully opaque.
    """

    def __init__(self, array: np.ndarray):
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3|4) array, got shape {array.shape}")

        if array.dtype == np.uint8:
            bit_depth = 8
        elif array.dtype == np.uint16:
            bit_depth = 16
        else:
            raise ValueError(f"Unsupported pixel dtype: {array.dtype}")

        if array.shape[2] == 3:
            opaque = np.full(array.shape[:2] + (1,), np.iinfo(array.dtype).max, dtype=array.dtype)
            array = np.concatenate([array, opaque], axis=2)
            logger.debug(f"Added opaque alpha to {array.shape[1]}x{array.shape[0]} RGB array")

        super().__init__(array.tolist(), bit_depth=bit_depth)


def image_pixel_source(image: Image.Image) -> ArrayPixelSource:
    """Wrap an already-decoded Pillow image, converting it to RGBA."""
    if image.mode != "RGBA":
        logger.debug(f"Converting image from {image.mode} to RGBA")
        image = image.convert("RGBA")
    return ArrayPixelSource(np.asarray(image, dtype=np.uint8))


def as_pixel_source(obj: Any) -> PixelSource:
    """
    Coerce supported inputs into a pixel source.

    Args:
        obj: A PixelSource, numpy array, Pillow image or nested RGBA rows

    Returns:
        A PixelSource

    Raises:
        TypeError: If the object cannot be used as a pixel source
    """
    if isinstance(obj, PixelSource):
        return obj
    if isinstance(obj, np.ndarray):
        return ArrayPixelSource(obj)
    if isinstance(obj, Image.Image):
        return image_pixel_source(obj)
    if isinstance(obj, (list, tuple)):
        return GridPixelSource(obj)
    raise TypeError(f"Unsupported pixel source: {type(obj).__name__}")
