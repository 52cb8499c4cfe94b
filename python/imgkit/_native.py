# python/imgkit/_native.py
# Provide shared access to the compiled imgkit engine extension.
# Keeps loading logic in one place so API modules can query availability without import cycles.
# RELEVANT FILES:python/imgkit/__init__.py,python/imgkit/thumbhash.py,python/imgkit/blurhash.py

from __future__ import annotations

import importlib
import importlib.util
import logging
import os
from types import ModuleType
from typing import Any, List, Optional

from .errors import NativeUnavailableError

logger = logging.getLogger(__name__)

NATIVE_PATH_ENV = "IMGKIT_NATIVE_PATH"
_EXTENSION_NAME = "imgkit._imgkit"

_load_errors: List[str] = []


def _load_from_path(path: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(_EXTENSION_NAME, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot create module spec for {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _load_native() -> Optional[ModuleType]:
    _load_errors.clear()

    custom = os.environ.get(NATIVE_PATH_ENV)
    if custom:
        if os.path.exists(custom):
            try:
                module = _load_from_path(custom)
                logger.debug("loaded native engine from %s", custom)
                return module
            except Exception as exc:
                _load_errors.append(f"{NATIVE_PATH_ENV}={custom}: {exc}")
        else:
            logger.warning("%s points at a missing file: %s", NATIVE_PATH_ENV, custom)
            _load_errors.append(f"{NATIVE_PATH_ENV}={custom}: file not found")

    try:
        module = importlib.import_module(_EXTENSION_NAME)
        logger.debug("loaded native engine %s", _EXTENSION_NAME)
        return module
    except Exception as exc:
        _load_errors.append(f"{_EXTENSION_NAME}: {exc}")

    logger.debug("native engine unavailable: %s", "; ".join(_load_errors))
    return None


NATIVE_MODULE: Optional[Any] = _load_native()
NATIVE_AVAILABLE: bool = NATIVE_MODULE is not None


def get_native_module() -> Optional[Any]:
    """Expose the cached engine module (if available)."""
    return NATIVE_MODULE


def refresh_native_module() -> Optional[Any]:
    """Reload the engine and update global availability flags."""
    global NATIVE_MODULE, NATIVE_AVAILABLE
    NATIVE_MODULE = _load_native()
    NATIVE_AVAILABLE = NATIVE_MODULE is not None
    return NATIVE_MODULE


def set_native_module(engine: Optional[Any]) -> Optional[Any]:
    """Install ``engine`` as the active native engine and return the previous one.

    Any object exposing the engine functions (``thumbhash``,
    ``thumbhash_to_rgba``, ``blurhash``) is accepted, which lets tests and
    embedders substitute their own implementation.
    """
    global NATIVE_MODULE, NATIVE_AVAILABLE
    previous = NATIVE_MODULE
    NATIVE_MODULE = engine
    NATIVE_AVAILABLE = engine is not None
    return previous


def require_native(function: str) -> Any:
    """Return the engine, raising if it is missing or lacks ``function``."""
    engine = NATIVE_MODULE
    if engine is None:
        tried = "\n".join(f"  - {err}" for err in _load_errors) or "  - (nothing tried)"
        raise NativeUnavailableError(
            f"imgkit native engine is not available; {function}() needs it.\n"
            f"Tried:\n{tried}\n"
            f"Set {NATIVE_PATH_ENV} to the engine library path or install a platform wheel."
        )
    fn = getattr(engine, function, None)
    if fn is None:
        raise NativeUnavailableError(f"native engine does not provide {function}()")
    return fn
