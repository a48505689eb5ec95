"""
Palette

Ordered collection of colors with HSL sorting, flattening to float arrays
and bulk harmony derivations. Derivations always return a new Palette;
``sort_by_hsl`` is the only operation that mutates in place.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence

from loguru import logger

from palettekit.config import config
from palettekit.colors import harmony
from palettekit.colors.extraction import extract_colors
from palettekit.colors.model import Color


def sort_by_hsl(colors: List[Color], by_hue: bool, by_saturation: bool,
                by_lightness: bool) -> None:
    """
    Sort colors in place by HSL components.

    Keys are compared in priority hue -> saturation -> lightness; a disabled
    key is skipped. The sort is stable, so colors equal on every enabled key
    keep their relative order.
    """
    enabled = [i for i, flag in enumerate((by_hue, by_saturation, by_lightness)) if flag]
    if not enabled:
        return

    def key(color: Color):
        hsl = color.to_hsl()
        return tuple(hsl[i] for i in enabled)

    colors.sort(key=key)


class Palette:
    """An ordered sequence of colors; duplicates allowed."""

    def __init__(self, colors: Optional[Iterable[Color]] = None):
        self._colors: List[Color] = list(colors) if colors is not None else []

    @classmethod
    def from_image(cls, source: Any, num_colors: int, **kwargs) -> "Palette":
        """
        Build a palette from the dominant colors of an image.

        Args:
            source: Pixel source accepted by ``extract_colors``
            num_colors: Number of representatives requested (must be > 0)
            **kwargs: Forwarded to ``extract_colors`` (threshold, workers)

        Raises:
            ValueError: If num_colors <= 0
        """
        return cls(extract_colors(source, num_colors, **kwargs))

    def unpack(self) -> List[Color]:
        """Member colors as a new list."""
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Palette(self._colors[index])
        return self._colors[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __str__(self) -> str:
        return "colors: " + ", ".join(c.to_hex() for c in self._colors)

    def __repr__(self) -> str:
        return f"Palette({self._colors!r})"

    # Flattening

    def to_flat_rgb(self) -> List[float]:
        """Concatenated normalized (r, g, b) of every member."""
        flat: List[float] = []
        for color in self._colors:
            flat.extend(color.to_floats()[:3])
        return flat

    def to_flat_rgba(self) -> List[float]:
        """Concatenated normalized (r, g, b, a) of every member."""
        flat: List[float] = []
        for color in self._colors:
            flat.extend(color.to_floats())
        return flat

    # Sorting

    def sort_by_hsl(self, by_hue: bool, by_saturation: bool, by_lightness: bool) -> None:
        """Sort members in place; see the module-level ``sort_by_hsl``."""
        sort_by_hsl(self._colors, by_hue, by_saturation, by_lightness)

    # Harmony derivations

    def _expand(self, derive: Callable[[Color], List[Color]]) -> List[Color]:
        """Members followed by the derived colors of each member."""
        result = list(self._colors)
        for color in self._colors:
            result.extend(derive(color))
        return result

    def shades(self, n: Optional[int] = None, strength: Optional[float] = None) -> "Palette":
        """
        Lightness ladder for every member, merged and sorted by lightness.

        Originals are not added separately: each member's own lightness is
        already part of its ladder.
        """
        if n is None:
            n = config.DEFAULT_SHADES
        if strength is None:
            strength = config.DEFAULT_SHADE_STRENGTH

        result: List[Color] = []
        for color in self._colors:
            result.extend(harmony.shades(color, n, strength))
        sort_by_hsl(result, False, False, True)

        logger.debug(f"Palette shades: {len(self._colors)} members -> {len(result)} colors")
        return Palette(result)

    def complementary(self) -> "Palette":
        """Members plus their complements, sorted by hue."""
        result = self._expand(harmony.complementary)
        sort_by_hsl(result, True, False, False)
        return Palette(result)

    def analogous(self) -> "Palette":
        """Members plus their ±30° neighbours, sorted by lightness."""
        result = self._expand(harmony.analogous)
        sort_by_hsl(result, False, False, True)
        return Palette(result)

    def triadic(self) -> "Palette":
        return Palette(self._expand(harmony.triadic))

    def tetradic(self) -> "Palette":
        return Palette(self._expand(harmony.tetradic))

    def analogous_accent(self) -> "Palette":
        return Palette(self._expand(harmony.analogous_accent))


def make_palette(*colors: Color) -> Palette:
    """Build a palette from colors given as arguments."""
    return Palette(colors)


def palette_from_hex(hex_colors: Sequence[str]) -> Palette:
    """Build a palette by parsing hex strings with ``Color.from_hex``."""
    return Palette(Color.from_hex(h) for h in hex_colors)
