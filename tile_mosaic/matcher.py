"""Nearest-colour thumbnail lookup."""

from __future__ import annotations

import numpy as np

from tile_mosaic.color_utils import distances_to
from tile_mosaic.errors import InsufficientThumbnails
from tile_mosaic.thumbnails import ThumbnailEntry, ThumbnailIndex


def best_match_index(target: np.ndarray, index: ThumbnailIndex) -> int:
    """Position in *index* of the entry closest to *target*.

    Ties go to the earliest entry.
    """
    if len(index) == 0:
        msg = "Thumbnail index is empty; no tile can fill the cell"
        raise InsufficientThumbnails(msg)
    return int(np.argmin(distances_to(target, index.colors)))


def best_match(target: np.ndarray, index: ThumbnailIndex) -> ThumbnailEntry:
    """Entry whose colour has the smallest 16-bit RGB distance to *target*."""
    return index[best_match_index(target, index)]
