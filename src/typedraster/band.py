# src/typedraster/band.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
This module exposes a single band of an open rasterio dataset as an untyped handle.

The handle borrows the dataset: it never opens or closes it, and it must not be
used after the dataset is closed. It reports its storage type only at runtime,
which is what TypedRasterBand validates against.
"""

import logging
import math
from typing import Any, Optional, Tuple, Union

from rasterio.enums import Resampling
from rasterio.io import DatasetReader, DatasetWriter

from .buffer import Buffer
from .exceptions import RasterIOError
from .dtypes import BandType, pixel_type_for
from .utils import check_window, to_window

log = logging.getLogger(__name__)

__all__ = ["RasterBand", "Dataset"]

Dataset = Union[DatasetReader, DatasetWriter]

class RasterBand:
    """
    Untyped handle over band `index` (1-based) of an open rasterio dataset.

    Attributes:
        dataset: The owning rasterio dataset (DatasetReader or DatasetWriter).
        index (int): 1-based band index.
    """

    def __init__(self, dataset: Dataset, index: int = 1):
        if dataset.closed:
            raise RasterIOError(f"Dataset {dataset.name} is closed")

        if not 1 <= index <= dataset.count:
            raise RasterIOError(
                f"Band index {index} out of range for {dataset.name} "
                f"(1..{dataset.count})"
            )

        self.dataset = dataset
        self.index = index

    def __repr__(self) -> str:
        return f"RasterBand({self.dataset.name!r}, index={self.index})"

    def _require_open(self):
        if self.dataset.closed:
            raise RasterIOError(f"Dataset {self.dataset.name} is closed")

    @property
    def x_size(self) -> int:
        return self.dataset.width

    @property
    def y_size(self) -> int:
        return self.dataset.height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) of the band in pixels."""
        return self.x_size, self.y_size

    def owning_dataset(self) -> Dataset:
        return self.dataset

    def band_type(self) -> BandType:
        self._require_open()
        return BandType.from_dtype(self.dataset.dtypes[self.index - 1])

    def no_data_value(self) -> Optional[float]:
        """
        The band's no-data sentinel as a float, or None when it is not set.
        """
        self._require_open()
        nodata = self.dataset.nodatavals[self.index - 1]
        return float(nodata) if nodata is not None else None

    def scale(self) -> Optional[float]:
        self._require_open()
        return _optional_float(self.dataset.scales, self.index)

    def offset(self) -> Optional[float]:
        self._require_open()
        return _optional_float(self.dataset.offsets, self.index)

    def read_as(
        self,
        window: Tuple[int, int],
        window_size: Tuple[int, int],
        size: Tuple[int, int],
        dtype: Any,
        resampling: Optional[Resampling] = None
    ) -> Buffer:
        """
        Read a window of the band into a new buffer of `dtype`.

        Args:
            window: (x, y) pixel origin of the window.
            window_size: (width, height) of the window in the band's grid.
            size: (width, height) of the output buffer. When it differs from
                  `window_size` the store resamples the window.
            dtype: Element type of the returned buffer.
            resampling: Resampling used when `size != window_size`. Defaults to nearest.

        Returns:
            Buffer: Fresh buffer sized `size`.

        Raises:
            RasterIOError: If the window is outside the band or rasterio fails.
        """
        self._require_open()
        pixel_type = pixel_type_for(dtype)
        check_window(window, window_size, self.size)

        out_w, out_h = size
        if out_w <= 0 or out_h <= 0:
            raise RasterIOError(f"Output size must be positive, got {size}")

        log.debug(f"Reading band {self.index} window {window} {window_size} -> {size} of {self.dataset.name}")

        try:
            data = self.dataset.read(
                self.index,
                window=to_window(window, window_size),
                out_shape=(out_h, out_w),
                out_dtype=pixel_type.dtype,
                resampling=resampling if resampling is not None else Resampling.nearest
            )
        except Exception as e:
            raise RasterIOError(f"Failed to read band {self.index} of {self.dataset.name}: {e}") from e

        return Buffer(data)

    def read_band_as(self, dtype: Any) -> Buffer:
        """Read the full band at native resolution."""
        self._require_open()
        return self.read_as((0, 0), self.size, self.size, dtype)

    def write(
        self,
        window: Tuple[int, int],
        window_size: Tuple[int, int],
        buffer: Buffer
    ):
        """
        Write `buffer` into the window at `window` of size `window_size`.

        The dataset must be open for writing ('w' or 'r+').

        Raises:
            RasterIOError: If the buffer size differs from `window_size`, the window
                           is outside the band, or rasterio fails.
        """
        self._require_open()
        check_window(window, window_size, self.size)

        if buffer.size != tuple(window_size):
            raise RasterIOError(
                f"Buffer size {buffer.size} does not match window size {tuple(window_size)}"
            )

        log.debug(f"Writing band {self.index} window {window} {window_size} of {self.dataset.name}")

        try:
            self.dataset.write(buffer.data, self.index, window=to_window(window, window_size))
        except Exception as e:
            raise RasterIOError(f"Failed to write band {self.index} of {self.dataset.name}: {e}") from e

def _optional_float(values, index: int) -> Optional[float]:
    """Pick the 1-based entry of a per-band metadata tuple, None if missing or NaN."""
    if not values or index > len(values):
        return None
    value = values[index - 1]
    if value is None or math.isnan(value):
        return None
    return float(value)
