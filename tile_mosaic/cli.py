"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from tile_mosaic.composer import compose
from tile_mosaic.config import MosaicConfig
from tile_mosaic.errors import MosaicError
from tile_mosaic.image_io import load_image, save_mosaic
from tile_mosaic.thumbnails import build_index

app = typer.Typer(
    name="tile-mosaic",
    help="Rebuild an image from a folder of thumbnail tiles.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

logger = logging.getLogger("tile_mosaic")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


@app.command()
def mosaic(
    thumbnails_dir: Path = typer.Option(
        _DEFAULTS.thumbnails_dir,
        "--thumbnails-dir", "--thumbnailsDir", "-thumbnailsDir", "-t",
        help="Folder with candidate tile images (JPEG)",
    ),
    thumbnail_edge_size: int = typer.Option(
        _DEFAULTS.thumbnail_edge_size,
        "--thumbnail-edge-size", "--thumbnailEdgeSize", "-thumbnailEdgeSize", "-e",
        min=1, help="Edge length of each square tile / cell (px)",
    ),
    input_path: Path | None = typer.Option(
        _DEFAULTS.input_path, "--input", "-input", "-i", help="Source JPEG to rebuild",
    ),
    seed: int | None = typer.Option(
        _DEFAULTS.seed, "--seed", "-s", help="Sampling seed (None = random)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Build [bold]mosaic.jpg[/bold] in the working directory from INPUT and THUMBNAILS_DIR."""
    _setup_logging(verbose)

    cfg = MosaicConfig(
        thumbnails_dir=thumbnails_dir,
        thumbnail_edge_size=thumbnail_edge_size,
        input_path=input_path,
        seed=seed,
    )
    t_total = time.perf_counter()

    try:
        cfg.validate()
        rng = np.random.default_rng(cfg.seed)
        index = build_index(cfg.thumbnails_dir, rng, cfg.samples)

        if cfg.input_path is None:
            msg = "unable to open file: no --input given"
            raise MosaicError(msg)
        source = load_image(cfg.input_path)
        h, w = source.shape[:2]

        canvas, plan = compose(source, index, cfg.thumbnail_edge_size, rng, cfg.samples)
        save_mosaic(canvas, cfg.output_path, cfg.output_quality)
    except (MosaicError, ValueError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(1) from exc

    used = len({cell.tile_index for cell in plan})
    elapsed = time.perf_counter() - t_total
    console.print(Panel.fit(
        f"[bold green]MOSAIC DONE[/bold green] - [bold]{cfg.output_path}[/bold]\n"
        f"Size: {w}x{h}  |  Cells: {len(plan)}  |  Cell edge: {cfg.thumbnail_edge_size}px\n"
        f"Tiles: {len(index)} loaded, {used} used  |  time={elapsed:.1f}s",
        border_style="green",
    ))


if __name__ == "__main__":
    app()
