"""QR to SVG conversion toolkit."""

from .errors import InvalidArgumentError, MarkupParseError, QRSvgError, UnsupportedMediaTypeError
from .generator import matrix_from_bytes, matrix_from_text, text_to_svg
from .geometry import LogoBox, Rectangle, ViewBox, logo_bounding_box
from .logo import EmbeddedSvgPayload, LinkedSvgPayload, Logo, RasterPayload
from .merge import merge_rectangles
from .svg import SizingMode, qr_matrix_to_svg, render_svg

__all__ = [
    "qr_matrix_to_svg",
    "render_svg",
    "text_to_svg",
    "matrix_from_bytes",
    "matrix_from_text",
    "merge_rectangles",
    "logo_bounding_box",
    "SizingMode",
    "ViewBox",
    "Rectangle",
    "LogoBox",
    "Logo",
    "RasterPayload",
    "LinkedSvgPayload",
    "EmbeddedSvgPayload",
    "QRSvgError",
    "InvalidArgumentError",
    "MarkupParseError",
    "UnsupportedMediaTypeError",
]
