# src/typedraster/typed_band.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
This module provides TypedRasterBand, a view over a RasterBand whose element
type is fixed by the caller and checked once against the band's storage type.

After construction every read returns buffers of that element type, every
write only accepts them, and the no-data sentinel is reported in it.
"""

import logging
from typing import Any, Generic, Optional, Tuple, Type, Union

import numpy as np
from rasterio.enums import Resampling

from .band import Dataset, RasterBand
from .buffer import Buffer
from .exceptions import BandTypeMismatchError
from .dtypes import BandType, PixelT, PixelType, pixel_type_for

log = logging.getLogger(__name__)

__all__ = [
    "ReadConfig",
    "TypedRasterBand"
]

class ReadConfig:
    """Configuration for reads through a typed band.

    Args:
        resampling: Resampling used when the output size differs from the
            window size. Accepts a Resampling member or its name. Default=nearest.
    """
    def __init__(self, resampling: Union[Resampling, str] = Resampling.nearest):
        if isinstance(resampling, str):
            try:
                resampling = Resampling[resampling]
            except KeyError:
                valid = [r.name for r in Resampling]
                raise ValueError(f"Invalid resampling '{resampling}'. Must be one of: {valid}")
        self.resampling = resampling

class TypedRasterBand(Generic[PixelT]):
    """
    A RasterBand viewed with a fixed element type.

    Build it with `from_band`, which rejects bands whose storage type differs
    from the requested one:

        band = RasterBand(dataset, 1)
        typed = TypedRasterBand.from_band(band, np.uint16)
        typed.no_data_value()   # np.uint16 or None

    The view borrows the band; it must not be used once the dataset is closed.
    Several views over the same band may coexist.
    """

    def __init__(
        self,
        band: RasterBand,
        pixel_type: PixelType,
        config: Optional[ReadConfig] = None
    ):
        # Not validated here; use from_band or from_band_unchecked.
        self._band = band
        self._pixel_type = pixel_type
        self.config = config or ReadConfig()

    @classmethod
    def from_band(
        cls,
        band: RasterBand,
        dtype: Type[PixelT],
        config: Optional[ReadConfig] = None
    ) -> "TypedRasterBand[PixelT]":
        """
        Build a typed view after checking the band stores `dtype` pixels.

        Args:
            band: Open band handle.
            dtype: One of np.uint8, np.uint16, np.uint32, np.int16, np.int32,
                   np.float32, np.float64.
            config: Optional ReadConfig.

        Returns:
            TypedRasterBand: The validated view.

        Raises:
            UnsupportedPixelTypeError: If `dtype` is not a supported element type.
            BandTypeMismatchError: If the band's storage type is not `dtype`.
        """
        pixel_type = pixel_type_for(dtype)
        actual = band.band_type()

        if actual != pixel_type.band_type:
            log.debug(f"Rejecting {pixel_type.dtype.name} view over {actual.value} band {band!r}")
            raise BandTypeMismatchError(expected=pixel_type.band_type, actual=actual)

        return cls(band, pixel_type, config)

    @classmethod
    def from_band_unchecked(
        cls,
        band: RasterBand,
        dtype: Type[PixelT],
        config: Optional[ReadConfig] = None
    ) -> "TypedRasterBand[PixelT]":
        """
        Build a typed view WITHOUT checking the band's storage type.

        This is an escape hatch: reads still come back as `dtype` because the
        store converts on the fly, but values may be clipped or reinterpreted
        and writes are converted to the band's storage type. Prefer `from_band`.
        """
        pixel_type = pixel_type_for(dtype)
        actual = band.band_type()
        if actual != pixel_type.band_type:
            log.warning(
                f"Unchecked {pixel_type.dtype.name} view over {actual.value} band {band!r}"
            )
        return cls(band, pixel_type, config)

    def __repr__(self) -> str:
        return f"TypedRasterBand[{self._pixel_type.dtype.name}]({self._band!r})"

    @property
    def band(self) -> RasterBand:
        return self._band

    @property
    def pixel_type(self) -> PixelType:
        return self._pixel_type

    @property
    def dtype(self) -> np.dtype:
        return self._pixel_type.dtype

    def owning_dataset(self) -> Dataset:
        return self._band.owning_dataset()

    def read(
        self,
        window: Tuple[int, int],
        window_size: Tuple[int, int],
        size: Tuple[int, int]
    ) -> Buffer[PixelT]:
        """
        Read the window at `window` of `window_size`, resampled to `size`.

        Raises:
            RasterIOError: If the window is outside the band or the read fails.
        """
        return self._band.read_as(
            window, window_size, size, self._pixel_type, resampling=self.config.resampling
        )

    def read_band(self) -> Buffer[PixelT]:
        return self._band.read_band_as(self._pixel_type)

    def write(
        self,
        window: Tuple[int, int],
        window_size: Tuple[int, int],
        buffer: Buffer[PixelT]
    ):
        """
        Write `buffer` into the window at `window`. The buffer must hold this
        view's element type and be exactly `window_size`.

        Raises:
            TypeError: If the buffer's dtype is not the view's element type.
            RasterIOError: If the size does not match, the window is outside the
                           band or the write fails.
        """
        if not isinstance(buffer, Buffer):
            raise TypeError(f"Expected a Buffer, got {type(buffer)}")

        if buffer.dtype != self._pixel_type.dtype:
            raise TypeError(
                f"Buffer holds {buffer.dtype.name} pixels, "
                f"this band view holds {self._pixel_type.dtype.name}"
            )

        self._band.write(window, window_size, buffer)

    def band_type(self) -> BandType:
        return self._band.band_type()

    def no_data_value(self) -> Optional[Any]:
        """
        The band's no-data sentinel converted to the element type, or None when unset.
        """
        no_data = self._band.no_data_value()
        if no_data is None:
            return None
        return self._pixel_type.convert(no_data)

    def scale(self) -> Optional[float]:
        return self._band.scale()

    def offset(self) -> Optional[float]:
        return self._band.offset()
