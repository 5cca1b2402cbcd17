# src/typedraster/exceptions.py
#
# Copyright (c) The typedraster project contributors
# This software is distributed under the Apache-2.0 license.
# See the NOTICE file for more information

"""
Exception hierarchy for typed band access.
"""

from typing import Optional

__all__ = [
    "RasterError",
    "RasterIOError",
    "RasterValidationError",
    "BandTypeMismatchError",
    "UnsupportedPixelTypeError"
]

class RasterError(Exception):
    """Base error for all typedraster operations."""

class RasterIOError(RasterError, IOError):
    """The underlying store failed to read or write (bad window, closed dataset, GDAL error)."""

class RasterValidationError(RasterError, ValueError):
    """A pixel buffer is malformed (wrong rank or unsupported dtype)."""

class UnsupportedPixelTypeError(RasterError, TypeError):
    """The requested element type has no conversion capability."""

class BandTypeMismatchError(RasterError):
    """
    The element type chosen by the caller does not match the band's storage type.

    Attributes:
        expected: Tag bound to the requested element type.
        actual: Tag reported by the band.
    """

    def __init__(self, expected: Optional[object] = None, actual: Optional[object] = None):
        self.expected = expected
        self.actual = actual
        super().__init__("band type doesn't match type specified in caller")
