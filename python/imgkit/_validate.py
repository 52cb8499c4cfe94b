# python/imgkit/_validate.py
# Argument validation for pixel buffers and image dimensions.
# Fails fast with InvalidDimensions instead of letting the encoder emit a corrupt container.
# RELEVANT FILES:python/imgkit/png.py,python/imgkit/errors.py,tests/test_validate.py
from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from .errors import InvalidDimensions

# PNG stores dimensions as 31-bit unsigned values
_MAX_DIM = 2**31 - 1


def _as_int(name: str, v) -> int:
    if isinstance(v, bool):
        raise InvalidDimensions(f"{name} must be an integer, got bool")
    if isinstance(v, (int, np.integer)):
        return int(v)
    raise InvalidDimensions(f"{name} must be an integer, got {type(v).__name__}")


def size_wh(width, height) -> Tuple[int, int]:
    w = _as_int("width", width)
    h = _as_int("height", height)
    if w <= 0 or h <= 0:
        raise InvalidDimensions(f"width and height must be > 0, got {w}x{h}")
    if w > _MAX_DIM or h > _MAX_DIM:
        raise InvalidDimensions(f"width/height must be <= {_MAX_DIM}")
    return w, h


def rgba_buffer(pixels: Any, width: int, height: int) -> bytes:
    """Return ``pixels`` as RGBA bytes after checking it holds ``width*height*4`` bytes.

    Accepts bytes-like objects and uint8 numpy arrays, either flat or shaped
    ``(height, width, 4)``.
    """
    w, h = size_wh(width, height)
    expected = w * h * 4

    if isinstance(pixels, np.ndarray):
        if pixels.dtype != np.uint8:
            raise InvalidDimensions(f"pixel array must be uint8, got {pixels.dtype}")
        if pixels.ndim == 3 and pixels.shape != (h, w, 4):
            raise InvalidDimensions(
                f"pixel array shape {pixels.shape} does not match (height={h}, width={w}, 4)"
            )
        if pixels.ndim not in (1, 3):
            raise InvalidDimensions("pixel array must be flat or shaped (H, W, 4)")
        data = np.ascontiguousarray(pixels).tobytes()
    elif isinstance(pixels, (bytes, bytearray, memoryview)):
        data = bytes(pixels)
    else:
        raise TypeError(f"pixels must be bytes-like or a numpy array, got {type(pixels).__name__}")

    if len(data) != expected:
        raise InvalidDimensions(
            f"pixel buffer holds {len(data)} bytes, expected {expected} for {w}x{h} RGBA"
        )
    return data
