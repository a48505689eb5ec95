"""
palettekit Harmony Engine

Implements color theory rules for deriving shades, complementary, analogous,
triadic, tetradic and analogous-accent colors from a single base color.
Every derived color keeps the base hue offset, saturation, lightness and
alpha; only the hue (or, for shades, the lightness) changes.
"""

from dataclasses import replace
from typing import List, Sequence

from loguru import logger

from palettekit.colors.model import Color, clamp

COMPLEMENTARY_OFFSETS = (180.0,)
TRIADIC_OFFSETS = (120.0, 240.0)
TETRADIC_OFFSETS = (90.0, 180.0, 270.0)
ANALOGOUS_OFFSETS = (30.0, -30.0)
ANALOGOUS_ACCENT_OFFSETS = (180.0 - 30.0, 180.0, 180.0 + 30.0)


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue [0, 360)
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue [0, 360) with proper wraparound
    """
    return (h + degrees) % 360


def _rebuild(base: Color, h: float, s: float, l: float) -> Color:
    """Rebuild a color from HSL, keeping the base alpha byte exactly."""
    return replace(Color.from_hsl(h, s, l), a=base.a)


def lightness_of(color: Color) -> float:
    return color.to_hsl()[2]


def rotate_all(color: Color, offsets: Sequence[float]) -> List[Color]:
    """
    Derive one color per hue offset.

    Args:
        color: Base color
        offsets: Hue offsets in degrees, applied in order

    Returns:
        Derived colors in offset order (base not included)
    """
    h, s, l = color.to_hsl()
    return [_rebuild(color, rotate_hue(h, offset), s, l) for offset in offsets]


def shades(color: Color, n: int, strength: float) -> List[Color]:
    """
    Generate a lightness ladder around the base color.

    The base lightness comes first, then offsets of ``strength * i / (n - 1)``
    alternating lighter (odd i) and darker (even i), each clamped to [0, 1].

    Args:
        color: Base color
        n: Number of shades to produce (n <= 0 yields nothing)
        strength: Maximum lightness offset

    Returns:
        Exactly ``max(n, 0)`` colors sorted by ascending lightness
    """
    if n <= 0:
        return []

    h, s, l0 = color.to_hsl()
    result = [_rebuild(color, h, s, clamp(l0))]

    steps = n - 1
    for i in range(1, steps + 1):
        shift = strength * i / steps
        if i % 2 == 1:
            result.append(_rebuild(color, h, s, clamp(l0 + shift)))
        else:
            result.append(_rebuild(color, h, s, clamp(l0 - shift)))

    if len(result) > 1:
        result.sort(key=lightness_of)

    logger.debug(f"Shades of {color}: n={n} strength={strength} -> {len(result)} colors")
    return result


def complementary(color: Color) -> List[Color]:
    """Complementary color (+180°)."""
    return rotate_all(color, COMPLEMENTARY_OFFSETS)


def triadic(color: Color) -> List[Color]:
    """Triadic colors (+120°, +240°)."""
    return rotate_all(color, TRIADIC_OFFSETS)


def tetradic(color: Color) -> List[Color]:
    """Tetradic colors (+90°, +180°, +270°)."""
    return rotate_all(color, TETRADIC_OFFSETS)


def analogous(color: Color) -> List[Color]:
    """Analogous colors (+30°, -30°)."""
    return rotate_all(color, ANALOGOUS_OFFSETS)


def analogous_accent(color: Color) -> List[Color]:
    """Accent (complement) flanked by its ±30° neighbours: accent-30, accent, accent+30."""
    return rotate_all(color, ANALOGOUS_ACCENT_OFFSETS)

