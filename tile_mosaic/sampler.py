"""Randomised estimate of a region's average colour."""

from __future__ import annotations

import numpy as np

from tile_mosaic.color_utils import Region, narrow, widen
from tile_mosaic.config import SAMPLE_COUNT
from tile_mosaic.errors import InvalidRegion, RegionOutOfBounds


def average_color(
    image: np.ndarray,
    region: Region,
    rng: np.random.Generator,
    samples: int = SAMPLE_COUNT,
) -> np.ndarray:
    """Estimate the average colour of *region* by random pixel sampling.

    Coordinates are drawn uniformly and independently per axis, with
    replacement. Channels are accumulated at 16-bit precision, averaged with
    integer division, then narrowed back to 8 bits.

    Args:
        image:   (H, W, 3|4) uint8.
        region:  Area to sample; must be non-empty and inside *image*.
        rng:     Random source (seed it for reproducible output).
        samples: Number of pixels drawn.

    Returns:
        (3,) uint8 colour.

    Raises:
        InvalidRegion: *region* has zero width or height.
        RegionOutOfBounds: *region* is not fully inside *image*.
    """
    if samples < 1:
        msg = f"samples must be >= 1, got {samples}"
        raise ValueError(msg)
    if region.is_empty:
        msg = f"Cannot sample empty region {tuple(region)}"
        raise InvalidRegion(msg)
    bounds = Region.from_shape(image)
    if not bounds.contains(region):
        msg = f"Region {tuple(region)} exceeds image bounds {tuple(bounds)}"
        raise RegionOutOfBounds(msg)

    xs = rng.integers(region.min_x, region.max_x, size=samples)
    ys = rng.integers(region.min_y, region.max_y, size=samples)

    total = widen(image[ys, xs, :3]).sum(axis=0)
    return narrow(total // samples)
