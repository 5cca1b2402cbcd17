# src/typedraster/io.py

"""
This module opens raster files on disk and hands out band handles.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

import rasterio

from .band import RasterBand
from .exceptions import RasterIOError
from .typed_band import ReadConfig, TypedRasterBand
from .utils import resolve_envi_path

log = logging.getLogger(__name__)

__all__ = [
    "open_band",
    "open_typed_band"
]

@contextmanager
def open_band(
    path: Union[str, Path],
    index: int = 1,
    mode: str = "r",
    driver: Optional[str] = None
) -> Iterator[RasterBand]:
    """
    Open a raster file and yield a handle on one of its bands.

    The dataset is closed when the block exits, after which the handle
    (and any typed view built on it) must not be used.

    Args:
        path: Path to raster file. All supported GDAL formats are accepted.
        index: 1-based band index.
        mode: 'r' for reading, 'r+' to also allow writes.
        driver: Optional GDAL driver name.

    Yields:
        RasterBand: Handle on band `index`.
    """
    path = resolve_envi_path(Path(path))

    if not path.exists():
        raise FileNotFoundError(f"Raster file not found: {path}")

    if mode not in ("r", "r+"):
        raise ValueError(f"Invalid mode '{mode}'. Must be one of: ['r', 'r+']")

    log.debug(f"Opening band {index} of {path.name} ({mode})")

    try:
        src = rasterio.open(path, mode, driver=driver)
    except rasterio.RasterioIOError as e:
        raise RasterIOError(f"Failed to open raster {path}: {e}") from e

    with src:
        yield RasterBand(src, index)

@contextmanager
def open_typed_band(
    path: Union[str, Path],
    dtype,
    index: int = 1,
    mode: str = "r",
    config: Optional[ReadConfig] = None
) -> Iterator[TypedRasterBand]:
    """
    Shortcut for `open_band` followed by `TypedRasterBand.from_band`.

    Raises:
        BandTypeMismatchError: If band `index` does not store `dtype` pixels.
    """
    with open_band(path, index=index, mode=mode) as band:
        yield TypedRasterBand.from_band(band, dtype, config)
