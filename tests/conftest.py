# tests/conftest.py

import pytest
import numpy as np
import rasterio
from rasterio.transform import Affine
from rasterio.crs import CRS

@pytest.fixture
def mock_raster_factory(tmp_path):
    """
    Fixture: returns a function writing a synthetic GeoTIFF into tmp_path.

    Pixel values are a small ramp so every supported dtype can hold them.
    """
    def _factory(
        name,
        dtype="uint8",
        width=10,
        height=10,
        count=1,
        nodata=None,
        scales=None,
        offsets=None,
        data=None
    ):
        path = tmp_path / name
        dtype = np.dtype(dtype).name

        if data is None:
            ramp = (np.arange(width * height) % 200).reshape(height, width)
            data = np.stack([ramp + i for i in range(count)]).astype(dtype)

        profile = {
            'driver': 'GTiff',
            'height': height,
            'width': width,
            'count': count,
            'dtype': dtype,
            'crs': CRS.from_epsg(32619),
            'transform': Affine.translation(500000, 5000000) * Affine.scale(1.0, -1.0)
        }
        if nodata is not None:
            profile['nodata'] = nodata

        with rasterio.open(path, 'w', **profile) as dst:
            dst.write(data)
            if scales is not None:
                dst.scales = scales
            if offsets is not None:
                dst.offsets = offsets

        return str(path)

    return _factory

@pytest.fixture
def u8_path(mock_raster_factory):
    """Single-band 8-bit raster."""
    return mock_raster_factory("test_u8.tif", dtype="uint8")

@pytest.fixture
def u16_path(mock_raster_factory):
    """Single-band 16-bit raster."""
    return mock_raster_factory("test_u16.tif", dtype="uint16")

@pytest.fixture
def u16_nodata_path(mock_raster_factory):
    """Single-band 16-bit raster with a no-data sentinel of 42."""
    return mock_raster_factory("test_u16_nodata.tif", dtype="uint16", nodata=42.0)
