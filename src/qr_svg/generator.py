"""QR data helpers."""

from __future__ import annotations

from typing import List, Optional, Union

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from .logo import Logo
from .matrix_utils import QUIET_ZONE_MODULES
from .svg import DEFAULT_DARK_COLOR, DEFAULT_LIGHT_COLOR, Color, SizingMode, qr_matrix_to_svg

_ECC_LEVELS = {
    "low": ERROR_CORRECT_L,
    "medium": ERROR_CORRECT_M,
    "quartile": ERROR_CORRECT_Q,
    "high": ERROR_CORRECT_H,
}


def matrix_from_text(
    text: str, ecc: str = "medium", border: int = QUIET_ZONE_MODULES, version: Optional[int] = None
) -> List[List[bool]]:
    """Encode ``text`` into a matrix of booleans representing the QR code."""
    return _encode(text, ecc, border, version)


def matrix_from_bytes(
    data: bytes, ecc: str = "medium", border: int = QUIET_ZONE_MODULES, version: Optional[int] = None
) -> List[List[bool]]:
    return _encode(data, ecc, border, version)


def text_to_svg(
    text: str,
    pixels_per_module: int,
    dark_color: Color = DEFAULT_DARK_COLOR,
    light_color: Color = DEFAULT_LIGHT_COLOR,
    *,
    ecc: str = "medium",
    version: Optional[int] = None,
    draw_quiet_zones: bool = True,
    sizing_mode: SizingMode = SizingMode.WIDTH_HEIGHT_ATTRIBUTE,
    logo: Optional[Logo] = None,
) -> str:
    """Encode ``text`` and render it to an SVG document in one call."""
    matrix = matrix_from_text(text, ecc=ecc, version=version)
    return qr_matrix_to_svg(
        matrix,
        pixels_per_module,
        dark_color,
        light_color,
        draw_quiet_zones=draw_quiet_zones,
        sizing_mode=sizing_mode,
        logo=logo,
    )


def _encode(
    data: Union[str, bytes], ecc: str, border: int, version: Optional[int]
) -> List[List[bool]]:
    try:
        ecl = _ECC_LEVELS[ecc.lower()]
    except KeyError as exc:
        raise ValueError(f"unknown ECC level: {ecc}") from exc
    if border < 0:
        raise ValueError("border must not be negative")
    qr = qrcode.QRCode(version=version, error_correction=ecl, border=border)
    qr.add_data(data)
    qr.make(fit=version is None)
    return [list(row) for row in qr.get_matrix()]
