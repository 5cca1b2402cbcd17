# tests/helpers.py

import numpy as np
from typedraster.buffer import Buffer

ALL_DTYPES = [np.uint8, np.uint16, np.uint32, np.int16, np.int32, np.float32, np.float64]

def assert_buffer_identical(current: Buffer, reference: Buffer):
    """Strictly verify two buffers hold the same bytes."""
    assert current.dtype == reference.dtype, \
        f"Dtype mismatch: {current.dtype} != {reference.dtype}"

    assert current.size == reference.size, \
        f"Size mismatch: {current.size} != {reference.size}"

    assert current.data.tobytes() == reference.data.tobytes(), \
        f"Pixel mismatch at {np.argwhere(current.data != reference.data)[:5].tolist()}"
