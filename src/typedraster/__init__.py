# src/typedraster/__init__.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
typedraster provides type-checked access to single raster bands.

A band reports its storage type only at runtime; a TypedRasterBand pins the
element type chosen by the caller, checks it once against the band, and from
then on reads, writes and reports metadata in that type.
"""
# Element types
from .dtypes import (
    BandType,
    PixelType,
    SUPPORTED_PIXEL_TYPES,
    pixel_type_for
)

# Pixel buffers
from .buffer import (
    Buffer
)

# Band handles
from .band import (
    RasterBand
)

# Typed views
from .typed_band import (
    ReadConfig,
    TypedRasterBand
)

# I/O operations
from .io import (
    open_band,
    open_typed_band
)

# Errors
from .exceptions import (
    RasterError,
    RasterIOError,
    RasterValidationError,
    BandTypeMismatchError,
    UnsupportedPixelTypeError
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "BandType",
    "PixelType",
    "SUPPORTED_PIXEL_TYPES",
    "pixel_type_for",

    # Buffers
    "Buffer",

    # Bands
    "RasterBand",
    "ReadConfig",
    "TypedRasterBand",

    # I/O
    "open_band",
    "open_typed_band",

    # Errors
    "RasterError",
    "RasterIOError",
    "RasterValidationError",
    "BandTypeMismatchError",
    "UnsupportedPixelTypeError"
]
