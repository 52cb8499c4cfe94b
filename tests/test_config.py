# tests/test_config.py
# Encoder configuration parsing and environment overrides.
# RELEVANT FILES:python/imgkit/config.py,python/imgkit/png.py

import pytest

import imgkit
from imgkit.config import EncoderConfig, load_config


def test_defaults():
    cfg = load_config()
    assert cfg.compression_level == 9
    assert cfg.to_dict() == {"compression_level": 9}


def test_default_ignores_env(monkeypatch):
    monkeypatch.setenv("IMGKIT_COMPRESSION_LEVEL", "0")
    assert load_config().compression_level == 9


def test_env_does_not_change_data_uri(monkeypatch):
    pixels = bytes((i * 31) % 256 for i in range(16 * 16 * 4))
    before = imgkit.rgba_to_data_uri(pixels, 16, 16)
    monkeypatch.setenv("IMGKIT_COMPRESSION_LEVEL", "0")
    assert imgkit.rgba_to_data_uri(pixels, 16, 16) == before
    monkeypatch.setenv("IMGKIT_COMPRESSION_LEVEL", "max")
    assert imgkit.rgba_to_data_uri(pixels, 16, 16) == before


def test_from_env(monkeypatch):
    monkeypatch.setenv("IMGKIT_COMPRESSION_LEVEL", "3")
    assert EncoderConfig.from_env().compression_level == 3
    assert load_config(EncoderConfig.from_env()).compression_level == 3


def test_from_env_unset():
    assert EncoderConfig.from_env() == EncoderConfig()


def test_from_env_invalid(monkeypatch):
    monkeypatch.setenv("IMGKIT_COMPRESSION_LEVEL", "max")
    with pytest.raises(ValueError, match="IMGKIT_COMPRESSION_LEVEL"):
        EncoderConfig.from_env()


def test_mapping_and_passthrough():
    cfg = load_config({"compression_level": 0})
    assert cfg.compression_level == 0
    assert load_config(cfg) is cfg


@pytest.mark.parametrize("level", [True, 8.9, "7"])
def test_mapping_level_not_coerced(level):
    with pytest.raises(ValueError):
        load_config({"compression_level": level})


@pytest.mark.parametrize("level", [-1, 10, True])
def test_level_bounds(level):
    with pytest.raises(ValueError):
        EncoderConfig(compression_level=level)


def test_unknown_keys():
    with pytest.raises(ValueError, match="filter"):
        load_config({"filter": "paeth"})


def test_unsupported_source():
    with pytest.raises(TypeError):
        load_config("level=9")
