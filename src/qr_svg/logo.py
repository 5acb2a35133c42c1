"""Logo payloads that can be drawn on top of a QR code."""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from typing import Union

from PIL import Image

from .errors import InvalidArgumentError, UnsupportedMediaTypeError

PNG_MIME_TYPE = "image/png"
SVG_MIME_TYPE = "image/svg+xml"

DEFAULT_SIZE_PERCENT = 15


@dataclass(frozen=True)
class RasterPayload:
    """Raster image bytes, or a str that is already base64 encoded."""

    data: Union[bytes, str]
    mime_type: str = PNG_MIME_TYPE


@dataclass(frozen=True)
class LinkedSvgPayload:
    """SVG markup referenced through an ``<image>`` data URI."""

    markup: str


@dataclass(frozen=True)
class EmbeddedSvgPayload:
    """SVG markup inlined into the output document."""

    markup: str


LogoPayload = Union[RasterPayload, LinkedSvgPayload, EmbeddedSvgPayload]


@dataclass(frozen=True)
class Logo:
    payload: LogoPayload
    size_percent: int = DEFAULT_SIZE_PERCENT
    fill_background: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.size_percent <= 100:
            raise InvalidArgumentError(
                f"logo size must be between 0 and 100 percent, got {self.size_percent}"
            )

    @classmethod
    def from_png(
        cls,
        data: Union[bytes, str],
        size_percent: int = DEFAULT_SIZE_PERCENT,
        fill_background: bool = True,
    ) -> "Logo":
        return cls(RasterPayload(data), size_percent, fill_background)

    @classmethod
    def from_svg(
        cls,
        markup: str,
        size_percent: int = DEFAULT_SIZE_PERCENT,
        fill_background: bool = True,
        embedded: bool = True,
    ) -> "Logo":
        payload = EmbeddedSvgPayload(markup) if embedded else LinkedSvgPayload(markup)
        return cls(payload, size_percent, fill_background)

    @classmethod
    def from_image(
        cls,
        image: Image.Image,
        size_percent: int = DEFAULT_SIZE_PERCENT,
        fill_background: bool = True,
    ) -> "Logo":
        """Save a Pillow image as PNG and use it as a raster logo."""
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return cls.from_png(buffer.getvalue(), size_percent, fill_background)

    @property
    def media_type(self) -> str:
        return media_type(self.payload)


def media_type(payload: LogoPayload) -> str:
    """Return the MIME type of ``payload``.

    Raises :class:`UnsupportedMediaTypeError` when the payload is not one of
    the known kinds, or is a raster payload that is not PNG.
    """

    if isinstance(payload, RasterPayload):
        mime_type = payload.mime_type.strip().lower()
        if mime_type != PNG_MIME_TYPE:
            raise UnsupportedMediaTypeError(f"unsupported raster logo type: {payload.mime_type}")
        return mime_type
    if isinstance(payload, (LinkedSvgPayload, EmbeddedSvgPayload)):
        return SVG_MIME_TYPE
    raise UnsupportedMediaTypeError(f"unsupported logo payload: {type(payload).__name__}")


def data_uri(payload: LogoPayload) -> str:
    mime_type = media_type(payload)
    if isinstance(payload, RasterPayload):
        if isinstance(payload.data, str):
            encoded = payload.data
        else:
            encoded = base64.b64encode(payload.data).decode("ascii")
    else:
        encoded = base64.b64encode(payload.markup.encode("utf-8")).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
