"""Centralised configuration: named constants and a frozen run config."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Pixels drawn per region when estimating its average colour
SAMPLE_COUNT = 30

# 8-bit -> 16-bit channel factor (65535 / 255)
CHANNEL_SCALE = 0x101

OPAQUE = 255

# Codec of the output; tiles and the source must decode as one of JPEG_FORMATS
TILE_FORMAT = "JPEG"

# Pillow reports multi-picture JPEGs (phones, stereo cameras) as MPO;
# their first frame is an ordinary JPEG stream
JPEG_FORMATS = frozenset({"JPEG", "MPO"})

OUTPUT_FILENAME = "mosaic.jpg"
OUTPUT_QUALITY = 100


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic run.

    Attributes:
        thumbnails_dir:      Folder scanned for candidate tile images.
        thumbnail_edge_size: Edge length (px) of every square cell / tile.
        input_path:          Source image; ``None`` means not provided.
        seed:                Sampling seed (None = non-deterministic).
        samples:             Pixels sampled per region for its average colour.
        output_path:         Where the mosaic is written.
        output_quality:      JPEG quality for the output.
    """

    thumbnails_dir: Path = field(default_factory=lambda: Path("."))
    thumbnail_edge_size: int = 30
    input_path: Path | None = None
    seed: int | None = None
    samples: int = SAMPLE_COUNT

    output_path: Path = field(default_factory=lambda: Path(OUTPUT_FILENAME))
    output_quality: int = OUTPUT_QUALITY

    def validate(self) -> None:
        """Raise ``ValueError`` on settings no run could honour."""
        if self.thumbnail_edge_size < 1:
            msg = f"thumbnail_edge_size must be >= 1, got {self.thumbnail_edge_size}"
            raise ValueError(msg)
        if self.samples < 1:
            msg = f"samples must be >= 1, got {self.samples}"
            raise ValueError(msg)
        if not 1 <= self.output_quality <= 100:
            msg = f"output_quality must be in [1, 100], got {self.output_quality}"
            raise ValueError(msg)
