"""Tests for number formatting and the logo markup tree."""

from __future__ import annotations

import pytest

from qr_svg.errors import MarkupParseError
from qr_svg.markup import MarkupElement, format_number
from tests.conftest import LOGO_SVG, XLINK_LOGO_SVG


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (30.0, "30"),
            (30, "30"),
            (12.5, "12.5"),
            (0.1 + 0.2, "0.3"),
            (1 / 3, "0.333333333333333"),
            (-0.0, "0"),
            (1234567.25, "1234567.25"),
        ],
    )
    def test_values(self, value, expected):
        assert format_number(value) == expected

    def test_never_uses_a_comma(self):
        assert "," not in format_number(100 / 9)


class TestParse:
    @pytest.mark.parametrize("text", ["", "not markup", "<svg>", "<svg></g>"])
    def test_rejects_malformed_markup(self, text):
        with pytest.raises(MarkupParseError):
            MarkupElement.parse(text)

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            MarkupElement.parse("<<")

    def test_parse_keeps_existing_attributes(self):
        result = MarkupElement.parse(LOGO_SVG).serialize()
        assert result.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">')


class TestSerialize:
    def test_single_line_with_default_namespace(self):
        result = MarkupElement.parse(LOGO_SVG).serialize()
        assert result == (
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
            '<circle cx="12" cy="12" r="10" fill="#FF6B6B" />'
            "</svg>"
        )

    def test_set_appends_attributes(self):
        element = MarkupElement.parse(LOGO_SVG)
        element.set("x", "1").set("shape-rendering", "geometricPrecision")
        assert element.serialize().startswith(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" x="1" '
            'shape-rendering="geometricPrecision">'
        )

    def test_set_replaces_existing_attribute(self):
        element = MarkupElement.parse('<svg width="5" height="5"/>')
        element.set("width", "20")
        assert element.serialize() == '<svg width="20" height="5" />'

    def test_svg_prefix_is_stripped(self):
        markup = (
            '<svg:svg xmlns:svg="http://www.w3.org/2000/svg">'
            '<svg:rect width="1" height="1"/>'
            "</svg:svg>"
        )
        assert MarkupElement.parse(markup).serialize() == (
            '<svg xmlns="http://www.w3.org/2000/svg"><rect width="1" height="1" /></svg>'
        )

    def test_xlink_prefix_is_kept(self):
        result = MarkupElement.parse(XLINK_LOGO_SVG).serialize()
        assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in result
        assert '<use xlink:href="#dot" x="4" y="4" />' in result
        assert "ns0:" not in result
        assert "ns1:" not in result

    def test_xml_declaration_is_dropped(self):
        markup = '<?xml version="1.0" encoding="UTF-8"?>\n<svg xmlns="http://www.w3.org/2000/svg"/>'
        assert MarkupElement.parse(markup).serialize() == '<svg xmlns="http://www.w3.org/2000/svg" />'

    def test_serialize_does_not_change_the_tree(self):
        element = MarkupElement.parse(XLINK_LOGO_SVG)
        first = element.serialize()
        assert element.serialize() == first
        assert first.startswith("<svg ")
