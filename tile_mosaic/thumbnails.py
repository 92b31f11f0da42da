"""Thumbnail loading and the colour index the matcher scans."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from tile_mosaic.color_utils import Region
from tile_mosaic.config import JPEG_FORMATS, SAMPLE_COUNT, TILE_FORMAT
from tile_mosaic.sampler import average_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThumbnailEntry:
    """A decoded tile and its precomputed average colour."""

    path: Path | None
    image: np.ndarray  # (H, W, 3) uint8
    color: np.ndarray  # (3,) uint8


class ThumbnailIndex:
    """Ordered, read-only collection of :class:`ThumbnailEntry`.

    Entries keep insertion order; two tiles may share a colour. Tile and
    colour arrays are frozen on construction.
    """

    def __init__(self, entries: Iterable[ThumbnailEntry] = ()) -> None:
        self._entries = tuple(entries)
        for e in self._entries:
            e.image.setflags(write=False)
            e.color.setflags(write=False)
        if self._entries:
            self._colors = np.stack([e.color for e in self._entries])
        else:
            self._colors = np.empty((0, 3), dtype=np.uint8)
        self._colors.setflags(write=False)

    @classmethod
    def from_images(
        cls,
        images: Iterable[np.ndarray],
        rng: np.random.Generator,
        samples: int = SAMPLE_COUNT,
    ) -> ThumbnailIndex:
        """Index in-memory (H, W, 3) uint8 tiles."""
        entries = []
        for img in images:
            rgb = np.asarray(img, dtype=np.uint8)[..., :3]
            color = average_color(rgb, Region.from_shape(rgb), rng, samples)
            entries.append(ThumbnailEntry(path=None, image=rgb, color=color))
        return cls(entries)

    @property
    def colors(self) -> np.ndarray:
        """(N, 3) uint8 - entry colours in index order."""
        return self._colors

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ThumbnailEntry]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> ThumbnailEntry:
        return self._entries[i]


def _decode_tile(path: Path) -> np.ndarray | None:
    """Decode *path* as a tile, or ``None`` if it is not a readable JPEG."""
    try:
        with Image.open(path) as img:
            if img.format not in JPEG_FORMATS:
                logger.debug("Skipping %s: %s is not %s", path.name, img.format, TILE_FORMAT)
                return None
            img.seek(0)
            return np.array(img.convert("RGB"), dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        logger.debug("Skipping %s: %s", path.name, exc)
        return None


def build_index(
    directory: str | Path,
    rng: np.random.Generator,
    samples: int = SAMPLE_COUNT,
) -> ThumbnailIndex:
    """Load every decodable tile in *directory* and compute its colour.

    Files are visited in sorted name order, so the index order (and thus
    tie-breaking in the matcher) is stable across runs. Files that fail to
    decode are skipped.

    Args:
        directory: Folder containing candidate tiles.
        rng:       Random source for colour sampling.
        samples:   Pixels sampled per tile.

    Returns:
        The index; empty if nothing could be decoded.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Thumbnail directory %s does not exist", directory)
        return ThumbnailIndex()

    entries: list[ThumbnailEntry] = []
    skipped = 0
    for path in sorted(directory.iterdir()):
        if not path.is_file():
            continue
        tile = _decode_tile(path)
        if tile is None:
            skipped += 1
            continue
        color = average_color(tile, Region.from_shape(tile), rng, samples)
        entries.append(ThumbnailEntry(path=path, image=tile, color=color))

    logger.info(
        "Loaded %d thumbnails from %s (%d skipped)", len(entries), directory, skipped,
    )
    return ThumbnailIndex(entries)
