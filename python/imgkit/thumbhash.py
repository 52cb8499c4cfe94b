# python/imgkit/thumbhash.py
# ThumbHash placeholders: hashing and decoding run in the native engine,
# the data URL is serialized locally by imgkit.png.
# RELEVANT FILES:python/imgkit/_native.py,python/imgkit/png.py,python/imgkit/results.py,tests/test_thumbhash.py
"""
ThumbHash is a compact (~25 byte) image placeholder that keeps the aspect
ratio and alpha channel of the source image.

Example:
    result = thumbhash(image_bytes)
    html = f'<img src="{result.data_url}">'
    stored = result.hash
    later = thumbhash_to_data_url(stored)
"""

from __future__ import annotations

import asyncio
import logging

from . import _native
from .errors import NativeEngineError
from .png import rgba_to_data_uri
from .results import ThumbHashDecodeResult, ThumbHashResult, native_field

logger = logging.getLogger(__name__)


def _require_bytes(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    data = bytes(value)
    if not data:
        raise ValueError(f"{name} must not be empty")
    return data


def thumbhash_to_rgba(hash: bytes) -> ThumbHashDecodeResult:
    """Decode a ThumbHash to RGBA pixels using the native engine."""
    data = _require_bytes("hash", hash)
    decoded = _native.require_native("thumbhash_to_rgba")(data)

    rgba = bytes(native_field(decoded, "rgba"))
    width = int(native_field(decoded, "width"))
    height = int(native_field(decoded, "height"))
    if len(rgba) != width * height * 4:
        raise NativeEngineError(
            f"thumbhash_to_rgba returned {len(rgba)} bytes for {width}x{height}"
        )
    return ThumbHashDecodeResult(rgba=rgba, width=width, height=height)


def thumbhash_to_data_url(hash: bytes) -> str:
    """Render a stored ThumbHash as a ``data:image/png;base64,`` URL."""
    decoded = thumbhash_to_rgba(hash)
    return rgba_to_data_uri(decoded.rgba, decoded.width, decoded.height)


def thumbhash(image: bytes) -> ThumbHashResult:
    """Compute the ThumbHash of an encoded image (JPEG, PNG, WebP, ...).

    Returns the hash, a ready-to-use data URL, the source dimensions and
    whether the source has an alpha channel.
    """
    data = _require_bytes("image", image)
    result = _native.require_native("thumbhash")(data)

    hash_bytes = bytes(native_field(result, "hash"))
    data_url = thumbhash_to_data_url(hash_bytes)
    logger.debug("thumbhash: %d byte hash, %d char data url", len(hash_bytes), len(data_url))

    return ThumbHashResult(
        hash=hash_bytes,
        data_url=data_url,
        width=int(native_field(result, "width")),
        height=int(native_field(result, "height")),
        has_alpha=bool(native_field(result, "has_alpha", "hasAlpha")),
    )


async def thumbhash_async(image: bytes) -> ThumbHashResult:
    return await asyncio.to_thread(thumbhash, image)


async def thumbhash_to_rgba_async(hash: bytes) -> ThumbHashDecodeResult:
    return await asyncio.to_thread(thumbhash_to_rgba, hash)
