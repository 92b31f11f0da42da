#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

Put JPEG tiles into ``thumbnails/`` and run:

    python main.py --thumbnails-dir thumbnails --input photo.jpg

Or use the module directly:

    python -m tile_mosaic.cli --help
"""

from tile_mosaic.cli import app

if __name__ == "__main__":
    app()
