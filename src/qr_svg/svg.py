"""SVG export for QR modules."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .errors import InvalidArgumentError
from .geometry import LogoBox, Rectangle, ViewBox, logo_bounding_box
from .logo import EmbeddedSvgPayload, Logo, data_uri, media_type
from .markup import SVG_NAMESPACE, XLINK_NAMESPACE, MarkupElement, format_number
from .matrix_utils import crop_matrix, matrix_size, quiet_zone_offset
from .merge import merge_rectangles

logger = logging.getLogger(__name__)

Color = Union[str, Tuple[int, int, int]]

DEFAULT_DARK_COLOR = "#000000"
DEFAULT_LIGHT_COLOR = "#FFFFFF"


class SizingMode(str, Enum):
    """How the root ``<svg>`` element declares its size."""

    WIDTH_HEIGHT_ATTRIBUTE = "widthHeight"
    VIEW_BOX_ATTRIBUTE = "viewBox"


def qr_matrix_to_svg(
    matrix: Sequence[Sequence[bool]],
    pixels_per_module: int = 1,
    dark_color: Color = DEFAULT_DARK_COLOR,
    light_color: Color = DEFAULT_LIGHT_COLOR,
    *,
    draw_quiet_zones: bool = True,
    sizing_mode: SizingMode = SizingMode.WIDTH_HEIGHT_ATTRIBUTE,
    logo: Optional[Logo] = None,
) -> str:
    """Render ``matrix`` with every module ``pixels_per_module`` units wide."""
    if pixels_per_module <= 0:
        raise InvalidArgumentError("pixels_per_module must be positive")
    drawable = matrix_size(matrix) - 2 * quiet_zone_offset(draw_quiet_zones)
    if drawable <= 0:
        raise InvalidArgumentError("matrix has no drawable modules without its quiet zone")
    return render_svg(
        matrix,
        ViewBox.square(drawable * pixels_per_module),
        dark_color,
        light_color,
        draw_quiet_zones=draw_quiet_zones,
        sizing_mode=sizing_mode,
        logo=logo,
    )


def render_svg(
    matrix: Sequence[Sequence[bool]],
    view_box: Union[ViewBox, Tuple[float, float]],
    dark_color: Color = DEFAULT_DARK_COLOR,
    light_color: Color = DEFAULT_LIGHT_COLOR,
    *,
    draw_quiet_zones: bool = True,
    sizing_mode: SizingMode = SizingMode.WIDTH_HEIGHT_ATTRIBUTE,
    logo: Optional[Logo] = None,
) -> str:
    """Render ``matrix`` so that it fills ``view_box``.

    The code is drawn as a light background square plus merged dark
    rectangles. When ``draw_quiet_zones`` is false the four-module border is
    cropped and the remaining modules are scaled up to fill the view box.
    A logo, if given, is centered on top; with ``fill_background`` set the
    modules it touches are left out.
    """

    if not isinstance(view_box, ViewBox):
        view_box = ViewBox(*view_box)
    try:
        sizing_mode = SizingMode(sizing_mode)
    except ValueError as exc:
        raise InvalidArgumentError(f"unknown sizing mode: {sizing_mode!r}") from exc
    modules = crop_matrix(matrix, quiet_zone_offset(draw_quiet_zones))
    drawable = len(modules)

    logo_element: Optional[MarkupElement] = None
    if logo is not None:
        logo_type = media_type(logo.payload)
        logger.debug("Drawing %s logo at %s%%", logo_type, logo.size_percent)
        if isinstance(logo.payload, EmbeddedSvgPayload):
            logo_element = MarkupElement.parse(logo.payload.markup)

    module_size = min(view_box.width, view_box.height) / drawable
    qr_size = drawable * module_size
    logger.debug("Rendering %d drawable modules at %s units each", drawable, module_size)

    logo_box: Optional[LogoBox] = None
    if logo is not None:
        logo_box = logo_bounding_box(view_box, logo.size_percent)
    exclusion = logo_box if logo is not None and logo.fill_background else None
    rectangles = merge_rectangles(modules, module_size, exclusion)

    dark = _hex_color(dark_color)
    light = _hex_color(light_color)
    lines = [
        _svg_open(view_box, sizing_mode)
        + _rect(Rectangle(0, 0, qr_size, qr_size), light)
    ]
    lines.extend(_rect(rectangle, dark) for rectangle in rectangles)

    if logo is not None and logo_box is not None:
        if logo_element is not None:
            lines.append(_embedded_logo(logo_element, logo_box))
        else:
            lines.extend(_linked_logo(logo, logo_box))

    return "".join(line + "\n" for line in lines) + "</svg>"


def _hex_color(color: Color) -> str:
    if isinstance(color, str):
        return color
    red, green, blue = color[:3]
    return "#{:02X}{:02X}{:02X}".format(red, green, blue)


def _svg_open(view_box: ViewBox, sizing_mode: SizingMode) -> str:
    width = format_number(view_box.width)
    height = format_number(view_box.height)
    if sizing_mode is SizingMode.WIDTH_HEIGHT_ATTRIBUTE:
        size_attributes = f'width="{width}" height="{height}"'
    else:
        size_attributes = f'viewBox="0 0 {width} {height}"'
    return (
        f'<svg version="1.1" baseProfile="full" shape-rendering="crispEdges" {size_attributes} '
        f'xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}">'
    )


def _rect(rectangle: Rectangle, fill: str) -> str:
    return (
        f'<rect x="{format_number(rectangle.x)}" y="{format_number(rectangle.y)}" '
        f'width="{format_number(rectangle.width)}" height="{format_number(rectangle.height)}" '
        f'fill="{fill}" />'
    )


def _linked_logo(logo: Logo, box: LogoBox) -> List[str]:
    return [
        f'<svg width="100%" height="100%" version="1.1" xmlns="{SVG_NAMESPACE}">',
        f'<image x="{format_number(box.x)}" y="{format_number(box.y)}" '
        f'width="{format_number(box.width)}" height="{format_number(box.height)}" '
        f'xlink:href="{data_uri(logo.payload)}" />',
        "</svg>",
    ]


def _embedded_logo(element: MarkupElement, box: LogoBox) -> str:
    for name, value in (
        ("x", format_number(box.x)),
        ("y", format_number(box.y)),
        ("width", format_number(box.width)),
        ("height", format_number(box.height)),
        ("shape-rendering", "geometricPrecision"),
    ):
        element.set(name, value)
    return element.serialize()
