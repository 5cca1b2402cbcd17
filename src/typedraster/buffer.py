# src/typedraster/buffer.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
This module defines the pixel buffer moved in and out of a typed band.
"""

from dataclasses import dataclass
from typing import Any, Generic, Tuple

import numpy as np

from .exceptions import RasterValidationError, UnsupportedPixelTypeError
from .dtypes import PixelT, pixel_type_for

__all__ = ["Buffer"]

@dataclass(frozen=True, eq=False)
class Buffer(Generic[PixelT]):
    """
    A rectangular, row-major block of pixels.

    Attributes:
        data (np.ndarray): Pixel array in (Height, Width) format.
    """
    data: np.ndarray

    def __post_init__(self):
        if not isinstance(self.data, np.ndarray):
            raise TypeError(f"Data must be numpy.ndarray, got {type(self.data)}")

        if self.data.ndim != 2:
            raise RasterValidationError(f"Data must be 2D, got shape {self.data.shape}")

        try:
            pixel_type_for(self.data.dtype)
        except UnsupportedPixelTypeError as e:
            raise RasterValidationError(str(e)) from e

    @classmethod
    def filled(cls, size: Tuple[int, int], dtype: Any, value: float = 0) -> "Buffer":
        """
        Build a buffer of `size` (width, height) where every pixel is `value`.

        The fill value goes through the element type's conversion, so it never wraps.
        """
        pixel_type = pixel_type_for(dtype)
        width, height = size
        return cls(np.full((height, width), pixel_type.convert(value), dtype=pixel_type.dtype))

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), the same order used for windows."""
        return self.width, self.height

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def equals(self, other: "Buffer") -> bool:
        """Bit-identical comparison: same dtype, same shape, same bytes."""
        if not isinstance(other, Buffer):
            return False
        return (
            self.dtype == other.dtype
            and self.data.shape == other.data.shape
            and self.data.tobytes() == other.data.tobytes()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.equals(other)
