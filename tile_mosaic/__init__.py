"""
Tile Mosaic
===========

Rebuild an image as a grid of small photographs. Every cell of the
source is sampled for its average colour and filled with the thumbnail
whose own average colour is nearest in RGB space.
"""

__version__ = "1.0.0"

from tile_mosaic.color_utils import Region, color_distance
from tile_mosaic.composer import (
    CellAssignment,
    compose,
    grid_origins,
    plan_mosaic,
    render_mosaic,
)
from tile_mosaic.config import MosaicConfig
from tile_mosaic.errors import (
    InputImageError,
    InsufficientThumbnails,
    InvalidRegion,
    MosaicError,
    OutputImageError,
    RegionOutOfBounds,
)
from tile_mosaic.image_io import load_image, save_mosaic
from tile_mosaic.matcher import best_match, best_match_index
from tile_mosaic.sampler import average_color
from tile_mosaic.thumbnails import ThumbnailEntry, ThumbnailIndex, build_index

__all__ = [
    "CellAssignment",
    "InputImageError",
    "InsufficientThumbnails",
    "InvalidRegion",
    "MosaicConfig",
    "MosaicError",
    "OutputImageError",
    "Region",
    "RegionOutOfBounds",
    "ThumbnailEntry",
    "ThumbnailIndex",
    "average_color",
    "best_match",
    "best_match_index",
    "build_index",
    "color_distance",
    "compose",
    "grid_origins",
    "load_image",
    "plan_mosaic",
    "render_mosaic",
    "save_mosaic",
]
