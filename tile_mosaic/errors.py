"""Exceptions raised by the mosaic pipeline."""

from __future__ import annotations


class MosaicError(Exception):
    """Base class for every failure the pipeline reports."""


class InvalidRegion(MosaicError, ValueError):
    """A sampling region with no pixels in it."""


class RegionOutOfBounds(InvalidRegion):
    """A sampling region reaching outside the image it samples."""


class InsufficientThumbnails(MosaicError):
    """No thumbnail is available to fill a cell."""


class InputImageError(MosaicError):
    """The source image could not be opened or decoded."""


class OutputImageError(MosaicError):
    """The mosaic could not be written."""
