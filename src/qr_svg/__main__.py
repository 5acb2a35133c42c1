"""Command line interface for generating SVG QR codes."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from PIL import Image
from qrcode.exceptions import DataOverflowError

from . import generator
from . import svg as svg_export
from .logging_config import setup_logging
from .logo import DEFAULT_SIZE_PERCENT, Logo

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate QR codes as SVG documents")
    data_group = parser.add_mutually_exclusive_group(required=True)
    data_group.add_argument("--text", help="Literal text/URL to encode")
    data_group.add_argument("--file", type=Path, help="Read the payload from a file")

    parser.add_argument("-o", "--output", type=Path, default=Path("qr_code.svg"), help="Output SVG file path")
    parser.add_argument("--pixels-per-module", type=int, default=10, help="Size of a single module")
    parser.add_argument("--dark", default=svg_export.DEFAULT_DARK_COLOR, help="Color of dark modules (#RRGGBB)")
    parser.add_argument("--light", default=svg_export.DEFAULT_LIGHT_COLOR, help="Background color (#RRGGBB)")
    parser.add_argument("--no-quiet-zones", action="store_true", help="Crop the 4-module quiet zone")
    parser.add_argument("--viewbox", action="store_true", help="Declare a viewBox instead of width/height")
    parser.add_argument("--ecc", choices=["low", "medium", "quartile", "high"], default="medium", help="Error correction level")
    parser.add_argument("--version", type=int, default=None, help="Fixed QR version (1-40)")

    parser.add_argument("--logo", type=Path, help="Logo image (.svg or any raster format Pillow reads)")
    parser.add_argument("--logo-size", type=int, default=DEFAULT_SIZE_PERCENT, help="Logo size in percent of the code")
    parser.add_argument("--logo-linked", action="store_true", help="Reference SVG logos as an image instead of inlining them")
    parser.add_argument("--no-logo-background", action="store_true", help="Keep the modules underneath the logo")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    return parser


def resolve_payload(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    raise SystemExit("No payload provided")


def load_logo(path: Path, size_percent: int, linked: bool, fill_background: bool) -> Logo:
    """Build a logo from ``path``; raster files that are not PNG are converted."""
    if path.suffix.lower() == ".svg":
        return Logo.from_svg(
            path.read_text(encoding="utf-8"),
            size_percent=size_percent,
            fill_background=fill_background,
            embedded=not linked,
        )
    with Image.open(path) as image:
        if image.format == "PNG":
            return Logo.from_png(path.read_bytes(), size_percent, fill_background)
        logger.debug("Converting %s logo %s to PNG", image.format, path)
        return Logo.from_image(image, size_percent, fill_background)


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        logging.DEBUG if args.verbose else logging.WARNING,
        log_file=str(args.log_file) if args.log_file else None,
    )
    payload = resolve_payload(args)

    try:
        logo = None
        if args.logo is not None:
            logo = load_logo(args.logo, args.logo_size, args.logo_linked, not args.no_logo_background)
        sizing_mode = (
            svg_export.SizingMode.VIEW_BOX_ATTRIBUTE
            if args.viewbox
            else svg_export.SizingMode.WIDTH_HEIGHT_ATTRIBUTE
        )
        svg_text = generator.text_to_svg(
            payload,
            args.pixels_per_module,
            args.dark,
            args.light,
            ecc=args.ecc,
            version=args.version,
            draw_quiet_zones=not args.no_quiet_zones,
            sizing_mode=sizing_mode,
            logo=logo,
        )
    except (ValueError, DataOverflowError, OSError) as exc:
        parser.error(str(exc))

    args.output.write_text(svg_text, encoding="utf-8")
    parser.exit(0, f"Saved SVG to {args.output}\n")


if __name__ == "__main__":
    main()
