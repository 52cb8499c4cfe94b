# tests/conftest.py
# Make `import imgkit` work from a fresh clone and provide a fake native engine.
# RELEVANT FILES:python/imgkit/_native.py,tests/test_thumbhash.py,tests/test_blurhash.py
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


def _ensure_python_path():
    pkg_dir = Path(__file__).resolve().parents[1] / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()


def pytest_configure(config):
    config.addinivalue_line("markers", "native: tests that need the compiled engine")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("IMGKIT_COMPRESSION_LEVEL", raising=False)


# 2x2 placeholder: red, green / blue, half-transparent white
FAKE_RGBA = bytes(
    [
        255, 0, 0, 255, 0, 255, 0, 255,
        0, 0, 255, 255, 255, 255, 255, 128,
    ]
)


@pytest.fixture
def fake_engine():
    from imgkit import _native

    calls = []

    def thumbhash(data):
        calls.append(("thumbhash", data))
        return {"hash": b"\x1b\x08\x06\x0d", "width": 200, "height": 150, "hasAlpha": True}

    def thumbhash_to_rgba(data):
        calls.append(("thumbhash_to_rgba", data))
        return SimpleNamespace(rgba=FAKE_RGBA, width=2, height=2)

    def blurhash(data, components_x, components_y):
        calls.append(("blurhash", data, components_x, components_y))
        return {"hash": "LEHV6nWB2yk8pyo0adR*.7kCMdnj", "width": 200, "height": 150}

    engine = SimpleNamespace(
        thumbhash=thumbhash,
        thumbhash_to_rgba=thumbhash_to_rgba,
        blurhash=blurhash,
        calls=calls,
    )
    previous = _native.set_native_module(engine)
    try:
        yield engine
    finally:
        _native.set_native_module(previous)


@pytest.fixture
def no_engine():
    from imgkit import _native

    previous = _native.set_native_module(None)
    try:
        yield
    finally:
        _native.set_native_module(previous)
