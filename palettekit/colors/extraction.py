"""
Color extraction service.

Builds an exact-match RGBA histogram from a pixel source, ranks colors by
occurrence and greedily keeps the most frequent colors that are perceptually
distinct from every color already kept.
"""

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, NamedTuple, Optional, Sequence

from loguru import logger

from palettekit.config import config
from palettekit.colors.model import Color, color_distance
from palettekit.colors.pixels import PixelSource, as_pixel_source
from palettekit.observability import performance_monitor


class ColorFrequency(NamedTuple):
    """A histogram entry: color and its pixel count."""
    color: Color
    count: int


def _count_rows(source: PixelSource, y_start: int, y_end: int) -> Counter:
    """Histogram of the non-transparent pixels in rows [y_start, y_end)."""
    min_x, _, max_x, _ = source.bounds
    shift = getattr(source, "bit_depth", 8) - 8
    counts: Counter = Counter()

    for y in range(y_start, y_end):
        for x in range(min_x, max_x):
            r, g, b, a = source.at(x, y)
            if a == 0:
                continue
            counts[Color(r >> shift, g >> shift, b >> shift, a >> shift)] += 1

    return counts


def _row_bands(min_y: int, max_y: int, workers: int) -> List[tuple]:
    """Split [min_y, max_y) into at most ``workers`` contiguous bands."""
    height = max_y - min_y
    band = -(-height // workers)  # Ceiling division
    return [(y, min(y + band, max_y)) for y in range(min_y, max_y, band)]


def count_colors(source: Any, workers: int = 1) -> Counter:
    """
    Count exact RGBA colors over every pixel in the source bounds.

    Fully transparent pixels are skipped. Wider channels are scaled down to
    8 bits. Keys keep first-seen (row-major) insertion order, also when the
    scan is split across worker threads.

    Args:
        source: Pixel source or anything ``as_pixel_source`` accepts
        workers: Number of row bands scanned concurrently

    Returns:
        Counter mapping Color -> occurrence count
    """
    source = as_pixel_source(source)
    _, min_y, _, max_y = source.bounds

    if workers <= 1 or max_y - min_y <= 1:
        return _count_rows(source, min_y, max_y)

    bands = _row_bands(min_y, max_y, workers)
    logger.debug(f"Scanning {max_y - min_y} rows in {len(bands)} bands")

    counts: Counter = Counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields in band order, so merged keys keep scan order
        for band_counts in pool.map(lambda band: _count_rows(source, *band), bands):
            counts.update(band_counts)
    return counts


def rank_color_frequencies(counts: Counter) -> List[ColorFrequency]:
    """Rank histogram entries by descending count; ties keep first-seen order."""
    entries = [ColorFrequency(color, count) for color, count in counts.items()]
    entries.sort(key=lambda entry: -entry.count)
    return entries


def is_color_distinct(color: Color, existing: Sequence[Color],
                      threshold: Optional[float] = None) -> bool:
    """True if ``color`` is at least ``threshold`` away from every existing color."""
    if threshold is None:
        threshold = config.DISTINCT_THRESHOLD
    for other in existing:
        if color_distance(color, other) < threshold:
            return False
    return True


def filter_distinct_colors(ranked: Sequence[ColorFrequency], limit: int,
                           threshold: Optional[float] = None) -> List[Color]:
    """
    Greedily select up to ``limit`` mutually distinct colors.

    The most frequent color is always kept; each following candidate is kept
    only if it is distinct from all colors kept so far.

    Args:
        ranked: Entries sorted by descending count
        limit: Maximum number of colors to keep
        threshold: Minimum distance between kept colors

    Returns:
        Selected colors in rank order
    """
    distinct: List[Color] = []
    if not ranked:
        return distinct

    distinct.append(ranked[0].color)
    for entry in ranked[1:]:
        if len(distinct) >= limit:
            break
        if is_color_distinct(entry.color, distinct, threshold):
            distinct.append(entry.color)
        else:
            logger.debug(f"Dropped {entry.color} ({entry.count} px): too close to selection")

    return distinct


def extract_colors(source: Any, num_colors: int,
                   threshold: Optional[float] = None,
                   workers: Optional[int] = None) -> List[Color]:
    """
    Extract up to ``num_colors`` dominant, mutually distinct colors.

    Args:
        source: Pixel source, numpy array, Pillow image or nested RGBA rows
        num_colors: Number of representatives requested (must be > 0)
        threshold: Distinctness threshold (defaults to Config.DISTINCT_THRESHOLD)
        workers: Row bands to scan concurrently (defaults to Config.EXTRACTION_WORKERS)

    Returns:
        Colors ordered by descending frequency; fewer than requested when the
        image does not hold enough distinct colors

    Raises:
        ValueError: If num_colors <= 0 or the threshold/worker count is invalid
    """
    if num_colors <= 0:
        raise ValueError("num_colors must be > 0")

    if threshold is None:
        threshold = config.DISTINCT_THRESHOLD
    if not config.validate_threshold(threshold):
        raise ValueError(f"Invalid distinctness threshold: {threshold}")

    if workers is None:
        workers = config.EXTRACTION_WORKERS
    if not config.validate_workers(workers):
        raise ValueError(f"Invalid worker count: {workers}")

    source = as_pixel_source(source)
    min_x, min_y, max_x, max_y = source.bounds
    pixel_count = max(0, max_x - min_x) * max(0, max_y - min_y)

    logger.info(f"Starting color extraction: {pixel_count} pixels, num_colors={num_colors}")

    with performance_monitor("color_extraction", pixel_count=pixel_count):
        start_time = time.time()
        counts = count_colors(source, workers=workers)
        scan_duration = (time.time() - start_time) * 1000
        logger.debug(f"Histogram: {len(counts)} unique colors in {scan_duration:.1f}ms")

        ranked = rank_color_frequencies(counts)
        colors = filter_distinct_colors(ranked, num_colors, threshold)

    logger.info(f"Extraction selected {len(colors)}/{num_colors} colors: "
                f"{[c.to_hex() for c in colors]}")
    return colors
