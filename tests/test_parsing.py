# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for color string parsing and hex formatting."""

import numpy as np
import pytest

from contrastkit.schema.color import ColorSpace, HSLColor, LabColor, SRGBColor
from contrastkit.space.parsing import (
    hex_to_srgb,
    parse_color,
    parse_color_string,
    srgb_to_hex,
)


class TestHex:

    def test_six_digit(self):
        c = hex_to_srgb("#ff8000")
        np.testing.assert_allclose(c.to_array(), [1.0, 128 / 255, 0.0])
        assert c.alpha == 1.0

    def test_three_digit_expands(self):
        assert hex_to_srgb("#f80") == hex_to_srgb("#ff8800")

    def test_case_and_whitespace(self):
        assert hex_to_srgb("  #ABCDEF ") == hex_to_srgb("#abcdef")

    def test_eight_digit_alpha(self):
        assert hex_to_srgb("#ff000080").alpha == 0.5

    def test_four_digit_alpha(self):
        assert hex_to_srgb("#abcd").alpha == 0.87

    @pytest.mark.parametrize("text", ["#ggg", "#12345", "fff", "#", "#1234567"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid hex"):
            hex_to_srgb(text)

    def test_format_roundtrip(self):
        for text in ("#000000", "#ffffff", "#3366cc", "#12345678"):
            assert srgb_to_hex(hex_to_srgb(text)) == text


class TestRGBFunction:

    def test_comma_syntax(self):
        c = parse_color_string("rgb(255, 0, 0)")
        assert isinstance(c, SRGBColor)
        np.testing.assert_allclose(c.to_array(), [1.0, 0.0, 0.0])

    def test_rgba_alpha(self):
        assert parse_color_string("rgba(0, 0, 255, 0.5)").alpha == 0.5

    def test_space_syntax_with_percent_alpha(self):
        c = parse_color_string("rgb(100% 0% 50% / 25%)")
        np.testing.assert_allclose(c.to_array(), [1.0, 0.0, 0.5])
        assert c.alpha == 0.25

    @pytest.mark.parametrize(
        "text",
        [
            "rgb(300, 0, 0)",
            "rgb(-1, 0, 0)",
            "rgb(1, 2)",
            "rgb(1, 2, 3, 4, 5)",
            "rgb(1 2 3 / 2)",
            "rgb(a, b, c)",
            "rgb(10deg, 0, 0)",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_color_string(text)


class TestHSLFunction:

    def test_comma_syntax(self):
        c = parse_color_string("hsl(120, 100%, 50%)")
        assert c == HSLColor(h=120.0, s=1.0, l=0.5)

    def test_space_syntax(self):
        c = parse_color_string("hsl(120deg 100% 50% / 0.25)")
        assert c == HSLColor(h=120.0, s=1.0, l=0.5, alpha=0.25)

    def test_hue_wraps(self):
        assert parse_color_string("hsl(480, 100%, 50%)").h == pytest.approx(120.0)

    def test_bare_numbers_are_percentages(self):
        assert parse_color_string("hsl(0 50 25)") == HSLColor(h=0.0, s=0.5, l=0.25)

    def test_percentage_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_color_string("hsl(0, 150%, 50%)")

    def test_hue_percentage_rejected(self):
        with pytest.raises(ValueError, match="Hue"):
            parse_color_string("hsl(10%, 50%, 50%)")


class TestParseColorString:

    @pytest.mark.parametrize("text", ["", "   ", "blue", "lab(50 0 0)", "rgb 1 2 3"])
    def test_unsupported(self, text):
        with pytest.raises(ValueError):
            parse_color_string(text)


class TestParseColor:

    def test_defaults_to_srgb(self):
        c = parse_color("hsl(120, 100%, 50%)")
        assert isinstance(c, SRGBColor)
        np.testing.assert_allclose(c.to_array(), [0.0, 1.0, 0.0], atol=1e-12)

    def test_target_space(self):
        c = parse_color("#ffffff", ColorSpace.LAB)
        assert isinstance(c, LabColor)
        assert c.L == pytest.approx(100.0, abs=1e-6)

    def test_target_space_string(self):
        assert isinstance(parse_color("#000", "hsl"), HSLColor)

    def test_color_value_converted(self):
        c = parse_color(LabColor(100.0, 0.0, 0.0), ColorSpace.SRGB)
        np.testing.assert_allclose(c.to_array(), [1.0, 1.0, 1.0], atol=1e-6)

    def test_color_value_same_space(self):
        color = SRGBColor(0.1, 0.2, 0.3)
        assert parse_color(color) is color

    def test_alpha_preserved(self):
        assert parse_color("#00000080", "lab").alpha == 0.5

    @pytest.mark.parametrize("value", [42, None, (0.1, 0.2, 0.3)])
    def test_wrong_type(self, value):
        with pytest.raises(TypeError):
            parse_color(value)

    def test_unknown_space(self):
        with pytest.raises(ValueError, match="Unknown color space"):
            parse_color("#fff", "cmyk")
