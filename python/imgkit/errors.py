# python/imgkit/errors.py
# Exception hierarchy shared by the encoder and the native engine glue.
# RELEVANT FILES:python/imgkit/_validate.py,python/imgkit/_native.py,python/imgkit/png.py

from __future__ import annotations


class ImgkitError(Exception):
    """Base class for errors raised by imgkit."""


class InvalidDimensions(ImgkitError, ValueError):
    """Width/height are not positive integers or disagree with the pixel buffer length."""


class NativeUnavailableError(ImgkitError, ImportError):
    """The native engine could not be loaded or lacks a required function."""


class NativeEngineError(ImgkitError, RuntimeError):
    """The native engine returned a result that does not match its contract."""
