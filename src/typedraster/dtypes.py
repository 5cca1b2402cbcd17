# src/typedraster/dtypes.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
This module defines the element types a typed band may carry.

It contains two pieces:
- BandType: the runtime tag a band reports for its storage type
- PixelType: the per-type capability that narrows a float64 metadata value
  (such as a no-data sentinel) into the element type
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

import numpy as np

from .exceptions import UnsupportedPixelTypeError

log = logging.getLogger(__name__)

__all__ = [
    "BandType",
    "PixelType",
    "PixelT",
    "SUPPORTED_PIXEL_TYPES",
    "pixel_type_for"
]

# Constrained so that static checkers reject anything outside the closed set.
PixelT = TypeVar(
    "PixelT",
    np.uint8, np.uint16, np.uint32,
    np.int16, np.int32,
    np.float32, np.float64
)

class BandType(Enum):
    """
    Runtime storage type of a raster band.

    Values are the dtype names rasterio reports in `dataset.dtypes`.
    UNKNOWN stands for any storage type without a PixelType (int8, int64, complex...).
    """
    UINT8 = "uint8"
    UINT16 = "uint16"
    INT16 = "int16"
    UINT32 = "uint32"
    INT32 = "int32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    UNKNOWN = "unknown"

    @classmethod
    def from_dtype(cls, dtype: Any) -> "BandType":
        """Map a rasterio dtype name (or numpy dtype) to its tag."""
        if dtype is None:
            return cls.UNKNOWN
        try:
            name = np.dtype(dtype).name
        except TypeError:
            return cls.UNKNOWN
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN

def _saturating_int(scalar_type: Type[np.integer]) -> Callable[[float], Any]:
    info = np.iinfo(scalar_type)
    lo, hi = float(info.min), float(info.max)

    def convert(value: float):
        value = float(value)
        if math.isnan(value):
            return scalar_type(0)
        if value <= lo:
            return scalar_type(info.min)
        if value >= hi:
            return scalar_type(info.max)
        return scalar_type(math.trunc(value))

    return convert

def _narrow_float(scalar_type: Type[np.floating]) -> Callable[[float], Any]:
    def convert(value: float):
        with np.errstate(over="ignore"):
            return scalar_type(float(value))

    return convert

@dataclass(frozen=True)
class PixelType:
    """
    Conversion capability of one supported element type.

    Args:
        scalar_type: numpy scalar type of the pixels (np.uint16, np.float32, ...)
        band_type: tag a band must report to be viewed as this type
        converter: total float64 -> scalar_type narrowing function
    """
    scalar_type: type
    band_type: BandType
    converter: Callable[[float], Any]

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.scalar_type)

    def convert(self, value: float):
        """
        Narrow a float64 value into this element type. Never raises.

        Integer types truncate toward zero and saturate at their bounds (NaN -> 0).
        float32 follows IEEE narrowing (overflow -> inf), float64 is the identity.
        """
        return self.converter(value)

SUPPORTED_PIXEL_TYPES: Tuple[PixelType, ...] = (
    PixelType(np.uint8, BandType.UINT8, _saturating_int(np.uint8)),
    PixelType(np.uint16, BandType.UINT16, _saturating_int(np.uint16)),
    PixelType(np.uint32, BandType.UINT32, _saturating_int(np.uint32)),
    PixelType(np.int16, BandType.INT16, _saturating_int(np.int16)),
    PixelType(np.int32, BandType.INT32, _saturating_int(np.int32)),
    PixelType(np.float32, BandType.FLOAT32, _narrow_float(np.float32)),
    PixelType(np.float64, BandType.FLOAT64, _narrow_float(np.float64)),
)

_REGISTRY: Dict[np.dtype, PixelType] = {p.dtype: p for p in SUPPORTED_PIXEL_TYPES}

def pixel_type_for(dtype: Any) -> PixelType:
    """
    Resolve the conversion capability for an element type.

    Args:
        dtype: numpy scalar type, numpy dtype, dtype name or an existing PixelType.

    Returns:
        PixelType: The capability bound to that element type.

    Raises:
        UnsupportedPixelTypeError: If the type is not one of the seven supported types.
    """
    if isinstance(dtype, PixelType):
        return dtype
    if dtype is None:
        # np.dtype(None) would silently mean float64
        raise UnsupportedPixelTypeError("An element type is required, got None")
    try:
        key = np.dtype(dtype)
    except TypeError as e:
        raise UnsupportedPixelTypeError(f"Not a numeric element type: {dtype!r}") from e

    pixel_type = _REGISTRY.get(key)
    if pixel_type is None:
        supported = [p.dtype.name for p in SUPPORTED_PIXEL_TYPES]
        raise UnsupportedPixelTypeError(
            f"Element type '{key.name}' is not supported. Must be one of: {supported}"
        )
    return pixel_type
