# python/imgkit/png.py
# Minimal PNG writer turning decoded RGBA placeholder pixels into a base64 data URI.
# Writes 8-bit RGBA, non-interlaced, filter "None" containers with IHDR/IDAT/IEND only.
# RELEVANT FILES:python/imgkit/_crc.py,python/imgkit/compression.py,python/imgkit/thumbhash.py,tests/test_png.py

from __future__ import annotations

import base64
import logging
import struct
from typing import Any, Optional, Union

from ._crc import crc32
from ._validate import rgba_buffer, size_wh
from .compression import Deflate, zlib_deflate
from .config import ConfigSource, load_config

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
DATA_URI_PREFIX = "data:image/png;base64,"

BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
FILTER_NONE = 0


def _crc(chunk_type: bytes, data: bytes) -> int:
    return crc32(chunk_type + data)


def create_chunk(chunk_type: Union[bytes, str], data: bytes) -> bytes:
    """Frame ``data`` as a PNG chunk: length, type, data, CRC over type+data."""
    if isinstance(chunk_type, str):
        try:
            chunk_type = chunk_type.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ValueError(f"chunk type must be ASCII, got {chunk_type!r}") from exc
    if len(chunk_type) != 4 or not chunk_type.isalpha():
        raise ValueError(f"chunk type must be 4 ASCII letters, got {chunk_type!r}")
    data = bytes(data)
    length = struct.pack(">I", len(data))
    crc = struct.pack(">I", _crc(chunk_type, data))
    return length + chunk_type + data + crc


def build_header(width: int, height: int) -> bytes:
    """13-byte IHDR payload for an 8-bit RGBA, non-interlaced image."""
    w, h = size_wh(width, height)
    return struct.pack(
        ">IIBBBBB",
        w,
        h,
        BIT_DEPTH,
        COLOR_TYPE_RGBA,
        0,  # compression
        0,  # filter method
        0,  # interlace
    )


def build_raw_stream(pixels: Any, width: int, height: int) -> bytes:
    """Prefix each RGBA scanline with filter byte 0 (None)."""
    data = rgba_buffer(pixels, width, height)
    stride = int(width) * 4
    filter_byte = bytes((FILTER_NONE,))
    return b"".join(
        filter_byte + data[row * stride:(row + 1) * stride] for row in range(int(height))
    )


def rgba_to_png_bytes(
    pixels: Any,
    width: int,
    height: int,
    *,
    config: ConfigSource = None,
    deflate: Optional[Deflate] = None,
) -> bytes:
    """Serialize RGBA pixels to a standalone PNG.

    Args:
        pixels: ``width*height*4`` bytes, row-major RGBA, or a uint8 numpy
            array shaped ``(height, width, 4)``.
        width: Image width in pixels.
        height: Image height in pixels.
        config: ``EncoderConfig`` or mapping; defaults to level 9.
        deflate: Replacement for ``zlib_deflate`` taking ``(raw, level)``.

    Raises:
        InvalidDimensions: dimensions are not positive or disagree with the
            buffer length.
    """
    cfg = load_config(config)
    compress = deflate or zlib_deflate

    header = build_header(width, height)
    raw = build_raw_stream(pixels, width, height)
    compressed = compress(raw, cfg.compression_level)

    png = b"".join(
        [
            PNG_SIGNATURE,
            create_chunk(b"IHDR", header),
            create_chunk(b"IDAT", compressed),
            create_chunk(b"IEND", b""),
        ]
    )
    logger.debug(
        "encoded %dx%d RGBA: raw=%d idat=%d png=%d bytes",
        int(width), int(height), len(raw), len(compressed), len(png),
    )
    return png


def rgba_to_data_uri(
    pixels: Any,
    width: int,
    height: int,
    *,
    config: ConfigSource = None,
    deflate: Optional[Deflate] = None,
) -> str:
    """Encode RGBA pixels as a ``data:image/png;base64,...`` URI.

    Output is deterministic for identical inputs and compression settings.
    """
    png = rgba_to_png_bytes(pixels, width, height, config=config, deflate=deflate)
    return DATA_URI_PREFIX + base64.b64encode(png).decode("ascii")
