"""Regions, channel widening, and colour distance."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from scipy.spatial.distance import cdist

from tile_mosaic.config import CHANNEL_SCALE


class Region(NamedTuple):
    """Half-open pixel rectangle ``[min_x, max_x) x [min_y, max_y)``."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_shape(cls, image: np.ndarray) -> Region:
        """The full bounds of an ``(H, W, C)`` image."""
        h, w = image.shape[:2]
        return cls(0, 0, w, h)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: Region) -> bool:
        return (
            self.min_x <= other.min_x
            and self.min_y <= other.min_y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )

    def clip(self, width: int, height: int) -> Region:
        """Intersect with ``[0, width) x [0, height)``."""
        return Region(
            max(self.min_x, 0),
            max(self.min_y, 0),
            min(self.max_x, width),
            min(self.max_y, height),
        )


def widen(color: np.ndarray) -> np.ndarray:
    """8-bit channels -> 16-bit channels as int64 (signed-safe for differences)."""
    return np.asarray(color, dtype=np.int64) * CHANNEL_SCALE


def narrow(wide: np.ndarray) -> np.ndarray:
    """16-bit channels -> 8-bit uint8 channels (truncating)."""
    return (np.asarray(wide, dtype=np.int64) // CHANNEL_SCALE).astype(np.uint8)


def color_distance(c1: np.ndarray, c2: np.ndarray) -> float:
    """Euclidean RGB distance measured on 16-bit channels."""
    d = widen(c2)[:3] - widen(c1)[:3]
    return float(np.sqrt(np.sum(d * d)))


def distances_to(target: np.ndarray, colors: np.ndarray) -> np.ndarray:
    """Distance from *target* to every row of an ``(N, 3)`` colour array.

    Returns:
        (N,) float64.
    """
    t = widen(target)[:3].astype(np.float64).reshape(1, 3)
    c = widen(colors)[:, :3].astype(np.float64)
    return cdist(t, c)[0]
