# python/imgkit/__init__.py
# Public entry points for imgkit: placeholder hashes and the PNG data-URI encoder.
# RELEVANT FILES:python/imgkit/png.py,python/imgkit/thumbhash.py,python/imgkit/blurhash.py,python/imgkit/_native.py
"""
imgkit - Python bindings for a native image engine.

Hashing and decoding are delegated to the native engine; turning decoded
placeholder pixels into a displayable PNG data URI happens in pure Python.
"""

from ._crc import crc32, crc_table
from ._native import (
    get_native_module,
    refresh_native_module,
    set_native_module,
)
from .blurhash import blurhash, blurhash_async
from .compression import zlib_deflate
from .config import EncoderConfig, load_config
from .errors import (
    ImgkitError,
    InvalidDimensions,
    NativeEngineError,
    NativeUnavailableError,
)
from .png import create_chunk, rgba_to_data_uri, rgba_to_png_bytes
from .thumbhash import (
    thumbhash,
    thumbhash_async,
    thumbhash_to_data_url,
    thumbhash_to_rgba,
    thumbhash_to_rgba_async,
)
from .results import BlurHashResult, ThumbHashDecodeResult, ThumbHashResult

__version__ = "0.1.0"


def has_native() -> bool:
    """True when the native engine is loaded."""
    return get_native_module() is not None


__all__ = [
    "__version__",
    "has_native",
    # encoder
    "rgba_to_data_uri",
    "rgba_to_png_bytes",
    "create_chunk",
    "crc32",
    "crc_table",
    "zlib_deflate",
    "EncoderConfig",
    "load_config",
    # placeholders
    "thumbhash",
    "thumbhash_async",
    "thumbhash_to_rgba",
    "thumbhash_to_rgba_async",
    "thumbhash_to_data_url",
    "blurhash",
    "blurhash_async",
    "ThumbHashResult",
    "ThumbHashDecodeResult",
    "BlurHashResult",
    # native
    "get_native_module",
    "refresh_native_module",
    "set_native_module",
    # errors
    "ImgkitError",
    "InvalidDimensions",
    "NativeUnavailableError",
    "NativeEngineError",
]
