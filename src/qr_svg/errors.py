"""Exceptions raised while rendering QR matrices to SVG."""

from __future__ import annotations


class QRSvgError(ValueError):
    """Base class for all rendering errors."""


class InvalidArgumentError(QRSvgError):
    """A size, matrix or logo parameter is out of range."""


class MarkupParseError(QRSvgError):
    """Logo markup has no well-formed root element."""


class UnsupportedMediaTypeError(QRSvgError):
    """A logo payload uses a media type the renderer cannot embed."""
