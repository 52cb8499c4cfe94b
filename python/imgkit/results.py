# python/imgkit/results.py
# Result records returned by the placeholder-hash API.
# RELEVANT FILES:python/imgkit/thumbhash.py,python/imgkit/blurhash.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import NativeEngineError


@dataclass(frozen=True)
class ThumbHashResult:
    hash: bytes
    data_url: str
    width: int
    height: int
    has_alpha: bool


@dataclass(frozen=True)
class ThumbHashDecodeResult:
    """RGBA pixels decoded from a ThumbHash; ``len(rgba) == width * height * 4``."""

    rgba: bytes
    width: int
    height: int


@dataclass(frozen=True)
class BlurHashResult:
    hash: str
    width: int
    height: int


def native_field(result: Any, *names: str) -> Any:
    """Read a field from an engine result given as a mapping or an object."""
    for name in names:
        if isinstance(result, Mapping):
            if name in result:
                return result[name]
        elif hasattr(result, name):
            return getattr(result, name)
    raise NativeEngineError(
        f"native result {type(result).__name__} is missing field {names[0]!r}"
    )
