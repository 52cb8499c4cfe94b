# tests/test_validate.py
# Dimension and pixel-buffer validation.
# RELEVANT FILES:python/imgkit/_validate.py

import numpy as np
import pytest

from imgkit._validate import rgba_buffer, size_wh
from imgkit.errors import InvalidDimensions


def test_size_wh_accepts_numpy_ints():
    assert size_wh(np.int64(3), np.uint16(2)) == (3, 2)


@pytest.mark.parametrize("w,h", [(0, 1), (1, 0), (-3, 2), (True, 1), ("4", 4), (2**31, 1)])
def test_size_wh_rejects(w, h):
    with pytest.raises(InvalidDimensions):
        size_wh(w, h)


def test_rgba_buffer_bytes_like():
    data = bytes(range(8))
    assert rgba_buffer(bytearray(data), 2, 1) == data
    assert rgba_buffer(memoryview(data), 1, 2) == data


def test_rgba_buffer_length_mismatch_message():
    with pytest.raises(InvalidDimensions, match="expected 16"):
        rgba_buffer(bytes(12), 2, 2)


def test_rgba_buffer_numpy_shape_mismatch():
    arr = np.zeros((2, 3, 4), dtype=np.uint8)
    with pytest.raises(InvalidDimensions):
        rgba_buffer(arr, 2, 3)
    assert len(rgba_buffer(arr, 3, 2)) == 24


def test_rgba_buffer_numpy_dtype():
    with pytest.raises(InvalidDimensions):
        rgba_buffer(np.zeros((1, 1, 4), dtype=np.float32), 1, 1)


def test_rgba_buffer_numpy_flat():
    arr = np.arange(8, dtype=np.uint8)
    assert rgba_buffer(arr, 1, 2) == arr.tobytes()


def test_rgba_buffer_numpy_rgb_rejected():
    with pytest.raises(InvalidDimensions):
        rgba_buffer(np.zeros((2, 2, 3), dtype=np.uint8), 2, 2)
