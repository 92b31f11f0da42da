"""Source image decoding and mosaic encoding."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from tile_mosaic.config import JPEG_FORMATS, OUTPUT_QUALITY, TILE_FORMAT
from tile_mosaic.errors import InputImageError, OutputImageError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> np.ndarray:
    """Open and decode the source JPEG.

    Returns:
        (H, W, 3) uint8 array.

    Raises:
        InputImageError: the file cannot be opened or is not a decodable JPEG.
    """
    path = Path(path)
    try:
        fh = path.open("rb")
    except OSError as exc:
        msg = f"unable to open file {str(path)!r}"
        raise InputImageError(msg) from exc

    with fh:
        try:
            with Image.open(fh) as img:
                if img.format not in JPEG_FORMATS:
                    msg = f"unable to decode file to jpg image ({img.format})"
                    raise InputImageError(msg)
                img.seek(0)
                arr = np.array(img.convert("RGB"), dtype=np.uint8)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            msg = f"unable to decode file to jpg image: {exc}"
            raise InputImageError(msg) from exc

    h, w = arr.shape[:2]
    logger.info("Source: %s  %dx%d", path.name, w, h)
    return arr


def save_mosaic(
    canvas: np.ndarray,
    path: str | Path,
    quality: int = OUTPUT_QUALITY,
) -> None:
    """Encode an (H, W, 3|4) uint8 canvas as JPEG at *path*."""
    img = Image.fromarray(canvas.astype(np.uint8)).convert("RGB")
    try:
        img.save(path, TILE_FORMAT, quality=quality)
    except OSError as exc:
        msg = f"unable to create file {str(path)!r}"
        raise OutputImageError(msg) from exc
    logger.info("Mosaic written to %s (quality %d)", path, quality)
