"""Grid partitioning, per-cell matching, and tile compositing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np
from PIL import Image

from tile_mosaic.color_utils import Region
from tile_mosaic.config import OPAQUE, SAMPLE_COUNT
from tile_mosaic.errors import InsufficientThumbnails, InvalidRegion
from tile_mosaic.matcher import best_match_index
from tile_mosaic.sampler import average_color
from tile_mosaic.thumbnails import ThumbnailIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellAssignment:
    """Sampled colour and chosen tile for the cell at ``(origin_x, origin_y)``."""

    origin_x: int
    origin_y: int
    color: np.ndarray  # (3,) uint8
    tile_index: int


def _check_edge(cell_edge_size: int) -> None:
    if cell_edge_size < 1:
        msg = f"cell_edge_size must be >= 1, got {cell_edge_size}"
        raise ValueError(msg)


def grid_origins(width: int, height: int, cell_edge_size: int) -> list[tuple[int, int]]:
    """Top-left ``(x, y)`` of every cell, row by row.

    The last row / column may extend past *width* / *height*.
    """
    _check_edge(cell_edge_size)
    return [
        (x, y)
        for y in range(0, height, cell_edge_size)
        for x in range(0, width, cell_edge_size)
    ]


def resize_tile(tile: np.ndarray, cell_edge_size: int) -> np.ndarray:
    """Nearest-neighbour resize to ``cell_edge_size`` square, as RGBA."""
    img = Image.fromarray(tile).convert("RGBA")
    img = img.resize((cell_edge_size, cell_edge_size), Image.NEAREST)
    return np.array(img, dtype=np.uint8)


def plan_mosaic(
    source: np.ndarray,
    index: ThumbnailIndex,
    cell_edge_size: int,
    rng: np.random.Generator,
    samples: int = SAMPLE_COUNT,
) -> list[CellAssignment]:
    """Pick a tile for every cell of *source*.

    Edge cells are sampled over the part of the cell that lies inside the
    source image.

    Args:
        source:         (H, W, 3|4) uint8.
        index:          Candidate tiles.
        cell_edge_size: Cell edge length in pixels.
        rng:            Random source for colour sampling.
        samples:        Pixels sampled per cell.

    Returns:
        One :class:`CellAssignment` per cell, row-major.
    """
    _check_edge(cell_edge_size)
    if len(index) == 0:
        msg = "Cannot compose a mosaic without any thumbnails"
        raise InsufficientThumbnails(msg)
    h, w = source.shape[:2]
    if h == 0 or w == 0:
        msg = f"Source image is empty ({w}x{h})"
        raise InvalidRegion(msg)

    plan = []
    for x, y in grid_origins(w, h, cell_edge_size):
        cell = Region(x, y, x + cell_edge_size, y + cell_edge_size).clip(w, h)
        color = average_color(source, cell, rng, samples)
        plan.append(CellAssignment(x, y, color, best_match_index(color, index)))
    return plan


def render_mosaic(
    plan: list[CellAssignment],
    index: ThumbnailIndex,
    width: int,
    height: int,
    cell_edge_size: int,
) -> np.ndarray:
    """Paint the planned tiles onto a fresh ``(height, width, 4)`` canvas.

    Each tile overwrites its cell; parts falling outside the canvas are
    dropped.
    """
    _check_edge(cell_edge_size)
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[..., 3] = OPAQUE

    resized: dict[int, np.ndarray] = {}
    for cell in plan:
        tile = resized.get(cell.tile_index)
        if tile is None:
            tile = resize_tile(index[cell.tile_index].image, cell_edge_size)
            resized[cell.tile_index] = tile

        x, y = cell.origin_x, cell.origin_y
        dst = canvas[y:y + cell_edge_size, x:x + cell_edge_size]
        dst[...] = tile[:dst.shape[0], :dst.shape[1]]

    logger.debug("Rendered %d cells using %d distinct tiles", len(plan), len(resized))
    return canvas


def compose(
    source: np.ndarray,
    index: ThumbnailIndex,
    cell_edge_size: int,
    rng: np.random.Generator,
    samples: int = SAMPLE_COUNT,
) -> tuple[np.ndarray, list[CellAssignment]]:
    """Build the mosaic of *source* from the tiles in *index*.

    Returns:
        (H, W, 4) uint8 RGBA canvas with the source's dimensions, and the
        per-cell assignments it was painted from.
    """
    h, w = source.shape[:2]
    logger.info("Planning %dx%d mosaic (cell %d px) …", w, h, cell_edge_size)
    t0 = time.perf_counter()
    plan = plan_mosaic(source, index, cell_edge_size, rng, samples)
    logger.info("Matched %d cells  (%.1f s)", len(plan), time.perf_counter() - t0)

    t0 = time.perf_counter()
    canvas = render_mosaic(plan, index, w, h, cell_edge_size)
    logger.info("Canvas rendered  (%.1f s)", time.perf_counter() - t0)
    return canvas, plan
