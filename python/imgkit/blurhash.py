# python/imgkit/blurhash.py
# BlurHash placeholders computed by the native engine.
# RELEVANT FILES:python/imgkit/_native.py,python/imgkit/results.py,tests/test_blurhash.py

from __future__ import annotations

import asyncio

from . import _native
from .results import BlurHashResult, native_field


def _components(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if not 1 <= value <= 9:
        raise ValueError(f"{name} must be in 1..9, got {value}")
    return value


def blurhash(image: bytes, components_x: int = 4, components_y: int = 3) -> BlurHashResult:
    """Compute the BlurHash string of an encoded image.

    Args:
        image: Encoded image bytes.
        components_x: Horizontal DCT components (1..9).
        components_y: Vertical DCT components (1..9).
    """
    if not isinstance(image, (bytes, bytearray, memoryview)):
        raise TypeError(f"image must be bytes-like, got {type(image).__name__}")
    data = bytes(image)
    if not data:
        raise ValueError("image must not be empty")
    cx = _components("components_x", components_x)
    cy = _components("components_y", components_y)

    result = _native.require_native("blurhash")(data, cx, cy)
    return BlurHashResult(
        hash=str(native_field(result, "hash")),
        width=int(native_field(result, "width")),
        height=int(native_field(result, "height")),
    )


async def blurhash_async(image: bytes, components_x: int = 4, components_y: int = 3) -> BlurHashResult:
    return await asyncio.to_thread(blurhash, image, components_x, components_y)
