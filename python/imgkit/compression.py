# python/imgkit/compression.py
# DEFLATE capability consumed by the PNG serializer.
# Any zlib-compatible compressor with the same call shape can be substituted.
# RELEVANT FILES:python/imgkit/png.py,python/imgkit/config.py

from __future__ import annotations

import zlib
from typing import Callable

MAX_COMPRESSION_LEVEL = 9

# (raw bytes, level) -> zlib stream
Deflate = Callable[[bytes, int], bytes]


def zlib_deflate(raw: bytes, level: int = MAX_COMPRESSION_LEVEL) -> bytes:
    """Compress ``raw`` into a zlib stream as PNG IDAT data expects."""
    return zlib.compress(raw, level)
