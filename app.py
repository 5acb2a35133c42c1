from __future__ import annotations

import base64
import binascii
import io
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Tuple

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from flask import Flask, Response, jsonify, request, send_file
from PIL import Image, UnidentifiedImageError
from qrcode.exceptions import DataOverflowError

from qr_svg.generator import matrix_from_text
from qr_svg.logo import PNG_MIME_TYPE, SVG_MIME_TYPE, Logo
from qr_svg.svg import SizingMode, qr_matrix_to_svg


class ErrorCorrection(str, Enum):
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"

    @property
    def level_name(self) -> str:
        return {
            ErrorCorrection.L: "low",
            ErrorCorrection.M: "medium",
            ErrorCorrection.Q: "quartile",
            ErrorCorrection.H: "high",
        }[self]


MAX_PIXELS_PER_MODULE = 1000

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(payload: Mapping[str, object], key: str, default: bool) -> bool:
    raw_value = payload.get(key, default)
    if raw_value in (None, ""):
        return default
    if isinstance(raw_value, bool):
        return raw_value
    text = str(raw_value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be true or false.")


def _parse_int(payload: Mapping[str, object], key: str, default: int) -> int:
    raw_value = payload.get(key, default)
    if isinstance(raw_value, bool):
        raise ValueError(f"{key} must be an integer.")
    if isinstance(raw_value, float):
        if not raw_value.is_integer():
            raise ValueError(f"{key} must be an integer.")
        return int(raw_value)
    try:
        return int(raw_value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer.") from exc


@dataclass(frozen=True)
class SvgRequest:
    data: str
    error_correction: ErrorCorrection
    pixels_per_module: int
    dark_color: str
    light_color: str
    draw_quiet_zones: bool
    sizing_mode: SizingMode
    icon_data: Optional[str]
    icon_size: int
    icon_embedded: bool
    fill_icon_background: bool

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "SvgRequest":
        data = str(payload.get("data") or "").strip()
        if not data:
            raise ValueError("data must not be empty.")

        try:
            error_correction = ErrorCorrection(payload.get("errorCorrection", "M"))
        except ValueError as exc:
            raise ValueError("Unknown error correction level.") from exc

        pixels_per_module = _parse_int(payload, "pixelsPerModule", 10)
        if not 0 < pixels_per_module <= MAX_PIXELS_PER_MODULE:
            raise ValueError(f"pixelsPerModule must be between 1 and {MAX_PIXELS_PER_MODULE}.")

        try:
            sizing_mode = SizingMode(payload.get("sizingMode", SizingMode.WIDTH_HEIGHT_ATTRIBUTE.value))
        except ValueError as exc:
            raise ValueError("sizingMode must be widthHeight or viewBox.") from exc

        icon_size = _parse_int(payload, "iconSize", 15)
        if not 0 <= icon_size <= 100:
            raise ValueError("iconSize must be between 0 and 100.")

        icon_data = payload.get("iconData")
        return cls(
            data=data,
            error_correction=error_correction,
            pixels_per_module=pixels_per_module,
            dark_color=str(payload.get("darkColor") or "#000000"),
            light_color=str(payload.get("lightColor") or "#FFFFFF"),
            draw_quiet_zones=_parse_bool(payload, "drawQuietZones", True),
            sizing_mode=sizing_mode,
            icon_data=icon_data if isinstance(icon_data, str) and icon_data else None,
            icon_size=icon_size,
            icon_embedded=_parse_bool(payload, "iconEmbedded", True),
            fill_icon_background=_parse_bool(payload, "fillIconBackground", True),
        )

    @classmethod
    def from_request(cls, req: request) -> "SvgRequest":
        payload = req.get_json(force=True, silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object.")
        return cls.from_payload(payload)


def decode_data_url(data_url: str) -> Optional[Tuple[str, bytes]]:
    """Return ``(mime_type, data)`` for a base64 data URL, or None."""
    if not data_url:
        return None

    if not data_url.startswith("data:"):
        return None

    try:
        header, encoded = data_url.split(",", 1)
    except ValueError:
        return None

    if "base64" not in header:
        return None

    mime_type = header[len("data:"):].split(";", 1)[0].strip().lower()
    try:
        return mime_type, base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        return None


def build_logo(svg_request: SvgRequest) -> Optional[Logo]:
    if svg_request.icon_data is None:
        return None
    decoded = decode_data_url(svg_request.icon_data)
    if decoded is None:
        raise ValueError("iconData must be a base64 data URL.")
    mime_type, icon_bytes = decoded

    if mime_type == SVG_MIME_TYPE:
        try:
            markup = icon_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("SVG icons must be UTF-8 encoded.") from exc
        return Logo.from_svg(
            markup,
            size_percent=svg_request.icon_size,
            fill_background=svg_request.fill_icon_background,
            embedded=svg_request.icon_embedded,
        )
    if mime_type == PNG_MIME_TYPE:
        return Logo.from_png(icon_bytes, svg_request.icon_size, svg_request.fill_icon_background)

    try:
        with Image.open(io.BytesIO(icon_bytes)) as icon:
            return Logo.from_image(icon, svg_request.icon_size, svg_request.fill_icon_background)
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"Unsupported icon type: {mime_type or 'unknown'}.") from exc


def render_request(svg_request: SvgRequest) -> str:
    logo = build_logo(svg_request)
    matrix = matrix_from_text(svg_request.data, ecc=svg_request.error_correction.level_name)
    return qr_matrix_to_svg(
        matrix,
        svg_request.pixels_per_module,
        svg_request.dark_color,
        svg_request.light_color,
        draw_quiet_zones=svg_request.draw_quiet_zones,
        sizing_mode=svg_request.sizing_mode,
        logo=logo,
    )


def create_app() -> Flask:
    app = Flask(__name__)

    @app.post("/api/qr-svg")
    def qr_svg():
        try:
            svg_request = SvgRequest.from_request(request)
            svg_text = render_request(svg_request)
        except (ValueError, DataOverflowError) as exc:
            return jsonify({"message": str(exc)}), 400

        buffer = io.BytesIO(svg_text.encode("utf-8"))
        buffer.seek(0)
        filename = f"qr_{svg_request.data[:20].replace(' ', '_')}.svg"
        return send_file(
            buffer,
            as_attachment=True,
            download_name=filename,
            mimetype=SVG_MIME_TYPE,
        )

    @app.route("/api/qr-preview", methods=["GET", "POST"])
    def qr_preview():
        if request.method == "GET":
            payload = {key: value for key, value in request.args.items()}
        else:
            payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"message": "Request body must be a JSON object."}), 400

        try:
            svg_request = SvgRequest.from_payload(payload)
            svg_text = render_request(svg_request)
        except (ValueError, DataOverflowError) as exc:
            return jsonify({"message": str(exc)}), 400

        return Response(svg_text, mimetype=SVG_MIME_TYPE)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
