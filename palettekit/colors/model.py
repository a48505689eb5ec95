"""
Color Model

Immutable RGBA color value with conversions to and from hex strings,
normalized floats and HSL, plus the redness-weighted RGB distance used
by the extractor's distinctness filter.
"""

import math
import operator
import re
from dataclasses import dataclass
from typing import List, Tuple

from loguru import logger

from palettekit.config import config

HSL = Tuple[float, float, float]

_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{2}")


def clamp(v: float) -> float:
    """Clamp a float into [0, 1]. NaN maps to 0."""
    if v != v:
        return 0.0
    if v < 0:
        return 0.0
    if v > 1:
        return 1.0
    return v


def _parse_hex_byte(s: str, source: str) -> int:
    """Parse a two-digit hex group; invalid groups become 0 unless strict."""
    if _HEX_BYTE.fullmatch(s):
        return int(s, 16)
    if config.STRICT_HEX:
        raise ValueError(f"Invalid hex color format: {source}")
    logger.warning(f"Invalid hex byte '{s}' in '{source}', using 0")
    return 0


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA color compared and hashed by value."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = operator.index(getattr(self, name))
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} outside [0, 255]")
            object.__setattr__(self, name, value)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a color directly from 8-bit channel values."""
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """
        Parse a hex color string.

        Accepts ``RRGGBB`` or ``RRGGBBAA`` with an optional leading ``#``,
        case-insensitive. Six digits imply an opaque color.

        Args:
            hex_color: Hex color string

        Returns:
            Parsed color. Any other length yields ``Color(0, 0, 0, 0)``
            (or raises ``ValueError`` when ``Config.STRICT_HEX`` is set).
        """
        hex_clean = hex_color[1:] if hex_color.startswith("#") else hex_color
        if len(hex_clean) == 6:
            hex_clean += "FF"
        if len(hex_clean) != 8:
            if config.STRICT_HEX:
                raise ValueError(f"Invalid hex color format: {hex_color}")
            logger.warning(f"Invalid hex color '{hex_color}', falling back to zero color")
            return cls(0, 0, 0, 0)

        r, g, b, a = (_parse_hex_byte(hex_clean[i:i + 2], hex_color) for i in (0, 2, 4, 6))
        return cls(r, g, b, a)

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Build a color from [0, 1] floats; values are clamped, then truncated."""
        return cls(
            int(clamp(r) * 255),
            int(clamp(g) * 255),
            int(clamp(b) * 255),
            int(clamp(a) * 255),
        )

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        """
        Build a color from hue/saturation/lightness.

        Args:
            h: Hue in degrees, any value (wrapped modulo 360)
            s: Saturation [0, 1]
            l: Lightness [0, 1]
            a: Alpha [0, 1]

        Returns:
            Color with channels truncated through ``from_floats``
        """
        h = h % 360
        c = (1 - abs(2 * l - 1)) * s
        x = c * (1 - abs((h / 60) % 2 - 1))
        m = l - c / 2

        if h < 60:
            rf, gf, bf = c, x, 0.0
        elif h < 120:
            rf, gf, bf = x, c, 0.0
        elif h < 180:
            rf, gf, bf = 0.0, c, x
        elif h < 240:
            rf, gf, bf = 0.0, x, c
        elif h < 300:
            rf, gf, bf = x, 0.0, c
        else:
            rf, gf, bf = c, 0.0, x

        return cls.from_floats(rf + m, gf + m, bf + m, a)

    def to_hsl(self) -> HSL:
        """
        Convert to HSL.

        Returns:
            Tuple of (H, S, L) where H ∈ [0,360), S ∈ [0,1], L ∈ [0,1].
            Achromatic colors have H = S = 0.
        """
        r = self.r / 255
        g = self.g / 255
        b = self.b / 255

        cmax = max(r, g, b)
        cmin = min(r, g, b)
        d = cmax - cmin

        l = (cmax + cmin) / 2

        h = 0.0
        s = 0.0
        if d != 0:
            if l < 0.5:
                s = d / (cmax + cmin)
            else:
                s = d / (2.0 - cmax - cmin)

            # Channel precedence R > G > B when several share the maximum
            if cmax == r:
                h = (g - b) / d
                if g < b:
                    h += 6
            elif cmax == g:
                h = (b - r) / d + 2
            else:
                h = (r - g) / d + 4
            h *= 60

        return h, s, l

    def to_floats(self) -> Tuple[float, float, float, float]:
        """Normalized (r, g, b, a) in [0, 1]."""
        return self.r / 255, self.g / 255, self.b / 255, self.a / 255

    def to_hex(self) -> str:
        """Hex string ``#RRGGBB``; alpha is not included."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()

    # Harmony shortcuts

    def shades(self, n: int, strength: float) -> List["Color"]:
        """Lightness ladder of ``n`` colors, sorted by ascending lightness."""
        return _harmony().shades(self, n, strength)

    def complementary(self) -> List["Color"]:
        """Complementary color (+180°)."""
        return _harmony().complementary(self)

    def triadic(self) -> List["Color"]:
        """Triadic colors (+120°, +240°)."""
        return _harmony().triadic(self)

    def tetradic(self) -> List["Color"]:
        """Tetradic colors (+90°, +180°, +270°)."""
        return _harmony().tetradic(self)

    def analogous(self) -> List["Color"]:
        """Analogous colors (+30°, -30°)."""
        return _harmony().analogous(self)

    def analogous_accent(self) -> List["Color"]:
        """Accent-30, accent (+180°), accent+30."""
        return _harmony().analogous_accent(self)


def _harmony():
    # harmony imports Color, so it is bound on first use
    from palettekit.colors import harmony
    return harmony


def color_distance(c1: Color, c2: Color) -> float:
    """
    Redness-weighted Euclidean distance over RGB.

    Not a CIE metric; the weighting drives the extractor's distinctness
    threshold. Alpha is ignored.
    """
    r1, g1, b1 = float(c1.r), float(c1.g), float(c1.b)
    r2, g2, b2 = float(c2.r), float(c2.g), float(c2.b)
    r_mean = (r1 + r2) / 2
    return math.sqrt(
        (2 + r_mean / 256) * (r1 - r2) ** 2
        + 4 * (g1 - g2) ** 2
        + (2 + (255 - r_mean) / 256) * (b1 - b2) ** 2
    )
