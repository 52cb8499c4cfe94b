# python/imgkit/config.py
# Encoder configuration parsing for the PNG data-URI serializer.
# Exists to keep compression settings in one validated structure.
# RELEVANT FILES:python/imgkit/png.py,tests/test_config.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Union

from .compression import MAX_COMPRESSION_LEVEL

COMPRESSION_LEVEL_ENV = "IMGKIT_COMPRESSION_LEVEL"

ConfigSource = Union["EncoderConfig", Mapping[str, Any], None]


@dataclass(frozen=True)
class EncoderConfig:
    """Settings for ``rgba_to_png_bytes`` / ``rgba_to_data_uri``.

    compression_level: zlib effort 0..9; placeholders default to maximum.
    """

    compression_level: int = MAX_COMPRESSION_LEVEL

    def __post_init__(self) -> None:
        level = self.compression_level
        if isinstance(level, bool) or not isinstance(level, int):
            raise ValueError(f"compression_level must be an integer, got {type(level).__name__}")
        if not 0 <= level <= MAX_COMPRESSION_LEVEL:
            raise ValueError(f"compression_level must be in 0..{MAX_COMPRESSION_LEVEL}, got {level}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EncoderConfig":
        unknown = set(data) - {"compression_level"}
        if unknown:
            raise ValueError(f"Unknown encoder config keys: {', '.join(sorted(unknown))}")
        cfg = cls()
        if "compression_level" in data:
            cfg = replace(cfg, compression_level=data["compression_level"])
        return cfg

    @classmethod
    def from_env(cls) -> "EncoderConfig":
        raw = os.environ.get(COMPRESSION_LEVEL_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            level = int(raw)
        except ValueError as exc:
            raise ValueError(f"{COMPRESSION_LEVEL_ENV} must be an integer, got {raw!r}") from exc
        return cls(compression_level=level)

    def to_dict(self) -> dict:
        return {"compression_level": self.compression_level}


def load_config(source: ConfigSource = None) -> EncoderConfig:
    if source is None:
        return EncoderConfig()
    if isinstance(source, EncoderConfig):
        return source
    if isinstance(source, Mapping):
        return EncoderConfig.from_mapping(source)
    raise TypeError(f"Unsupported config source: {type(source).__name__}")
