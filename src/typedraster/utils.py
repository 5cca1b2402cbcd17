# src/typedraster/utils.py

"""
This module provides shared utility functions for band access.

Functions include path resolution for ENVI files and
window normalization/bounds checking.
"""
import logging
from pathlib import Path
from typing import Tuple, Union

from rasterio.windows import Window

from .exceptions import RasterIOError

log = logging.getLogger(__name__)

__all__ = [
    "resolve_envi_path",
    "to_window",
    "check_window"
]

def resolve_envi_path(path: Union[str, Path]) -> Path:
    """
    Resolve ENVI header/binary file confusion.
    If 'image.hdr' is passed, redirects to 'image' (binary).
    """
    path = Path(path)
    if path.suffix.lower() == '.hdr':
        binary_path = path.with_suffix('')
        if binary_path.exists():
            log.debug(f"Redirecting {path.name} to binary file {binary_path.name}")
            return binary_path
    return path

def to_window(window: Tuple[int, int], window_size: Tuple[int, int]) -> Window:
    """
    Build a rasterio Window from an (x, y) origin and a (width, height) size.
    """
    col_off, row_off = window
    width, height = window_size
    return Window(col_off, row_off, width, height)

def check_window(
    window: Tuple[int, int],
    window_size: Tuple[int, int],
    band_size: Tuple[int, int]
):
    """
    Ensure a window lies entirely inside the band's pixel grid.

    Args:
        window: (x, y) pixel origin of the window.
        window_size: (width, height) of the window in pixels.
        band_size: (width, height) of the band.

    Raises:
        RasterIOError: If the window is empty or extends past the band extent.
    """
    col_off, row_off = window
    width, height = window_size
    band_w, band_h = band_size

    if width <= 0 or height <= 0:
        raise RasterIOError(f"Window size must be positive, got {window_size}")

    if col_off < 0 or row_off < 0 or col_off + width > band_w or row_off + height > band_h:
        raise RasterIOError(
            f"Access window out of range: origin {window}, size {window_size} "
            f"on a {band_w}x{band_h} band"
        )
