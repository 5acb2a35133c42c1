"""Tests for the command line interface."""

from __future__ import annotations

import pytest
from PIL import Image

from qr_svg.__main__ import build_parser, main
from tests.conftest import LOGO_SVG


def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_writes_svg(tmp_path):
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output)]) == 0
    svg = output.read_text(encoding="utf-8")
    assert svg.startswith("<svg ")
    assert 'width="290" height="290"' in svg


def test_reads_payload_from_file(tmp_path):
    source = tmp_path / "payload.txt"
    source.write_text("hello", encoding="utf-8")
    output = tmp_path / "code.svg"
    assert _run(["--file", str(source), "-o", str(output), "--pixels-per-module", "2"]) == 0
    assert 'width="58" height="58"' in output.read_text(encoding="utf-8")


def test_view_box_without_quiet_zones(tmp_path):
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--viewbox", "--no-quiet-zones"]) == 0
    assert 'viewBox="0 0 210 210"' in output.read_text(encoding="utf-8")


def test_colors(tmp_path):
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--dark", "#123456", "--light", "#FEDCBA"]) == 0
    svg = output.read_text(encoding="utf-8")
    assert 'fill="#123456"' in svg
    assert 'fill="#FEDCBA"' in svg


def test_svg_logo(tmp_path):
    logo = tmp_path / "logo.svg"
    logo.write_text(LOGO_SVG, encoding="utf-8")
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--logo", str(logo), "--logo-size", "20"]) == 0
    assert 'shape-rendering="geometricPrecision"' in output.read_text(encoding="utf-8")


def test_linked_svg_logo(tmp_path):
    logo = tmp_path / "logo.svg"
    logo.write_text(LOGO_SVG, encoding="utf-8")
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--logo", str(logo), "--logo-linked"]) == 0
    assert "data:image/svg+xml;base64," in output.read_text(encoding="utf-8")


def test_jpeg_logo_is_converted_to_png(tmp_path):
    logo = tmp_path / "logo.jpg"
    Image.new("RGB", (8, 8), "blue").save(logo, format="JPEG")
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--logo", str(logo)]) == 0
    assert "data:image/png;base64,iVBORw0KGgo" in output.read_text(encoding="utf-8")


def test_invalid_pixels_per_module(tmp_path, capsys):
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "--pixels-per-module", "0"]) == 2
    assert "pixels_per_module must be positive" in capsys.readouterr().err
    assert not output.exists()


def test_malformed_logo(tmp_path):
    logo = tmp_path / "logo.svg"
    logo.write_text("<svg>", encoding="utf-8")
    assert _run(["--text", "hello", "-o", str(tmp_path / "code.svg"), "--logo", str(logo)]) == 2


def test_payload_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_log_file(tmp_path):
    log_file = tmp_path / "qr.log"
    output = tmp_path / "code.svg"
    assert _run(["--text", "hello", "-o", str(output), "-v", "--log-file", str(log_file)]) == 0
    log_text = log_file.read_text(encoding="utf-8")
    assert "qr_svg.merge - DEBUG - Merged" in log_text
    assert "qr_svg.svg - DEBUG - Rendering 29 drawable modules" in log_text
