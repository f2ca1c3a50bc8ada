# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ HSL ↔ XYZ ↔ Lab)."""

import numpy as np
import pytest

from contrastkit.schema.color import (
    ColorSpace,
    HSLColor,
    LabColor,
    SRGBColor,
    XYZColor,
)
from contrastkit.space.colorspace import (
    D65_WHITE,
    convert,
    convert_array,
    hsl_to_srgb,
    lab_to_xyz,
    linear_to_srgb,
    srgb_to_hsl,
    srgb_to_lab,
    srgb_to_linear,
    srgb_to_xyz,
    xyz_to_lab,
    xyz_to_srgb,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_black_and_white(self):
        srgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_random(self):
        rng = np.random.default_rng(42)
        srgb = rng.random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values near the 0.04045 threshold should be handled correctly."""
        srgb = np.array([0.04045, 0.04046, 0.04044])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_negative_values_use_linear_segment(self):
        assert srgb_to_linear(np.array([-0.1]))[0] == pytest.approx(-0.1 / 12.92)
        assert linear_to_srgb(np.array([-0.01]))[0] == pytest.approx(-0.1292)


class TestXYZ:
    def test_white_is_d65(self):
        xyz = srgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(xyz, D65_WHITE, atol=1e-6)

    def test_white_luminance_is_one(self):
        assert srgb_to_xyz(np.array([1.0, 1.0, 1.0]))[1] == pytest.approx(1.0)

    def test_black_is_zero(self):
        np.testing.assert_allclose(srgb_to_xyz(np.zeros(3)), np.zeros(3), atol=1e-12)

    def test_roundtrip_random(self):
        rng = np.random.default_rng(7)
        srgb = rng.random((50, 3))
        recovered = xyz_to_srgb(srgb_to_xyz(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-9)


class TestLab:
    def test_white_is_l100(self):
        lab = xyz_to_lab(D65_WHITE)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-6)

    def test_black_is_l0(self):
        lab = xyz_to_lab(np.zeros(3))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-9)

    def test_mid_gray_lightness(self):
        lab = srgb_to_lab(np.array([0.5, 0.5, 0.5]))
        assert lab[0] == pytest.approx(53.39, abs=0.05)
        assert abs(lab[1]) < 1e-3
        assert abs(lab[2]) < 1e-3

    def test_red_is_positive_a(self):
        lab = srgb_to_lab(np.array([1.0, 0.0, 0.0]))
        assert lab[1] > 50

    def test_roundtrip_random(self):
        rng = np.random.default_rng(3)
        xyz = rng.random((50, 3)) * D65_WHITE
        recovered = lab_to_xyz(xyz_to_lab(xyz))
        np.testing.assert_allclose(recovered, xyz, atol=1e-9)

    def test_roundtrip_dark_segment(self):
        """Very dark colors take the linear κ segment both ways."""
        xyz = np.array([0.001, 0.001, 0.001])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-12)


class TestHSL:
    @pytest.mark.parametrize(
        "srgb, expected",
        [
            ([1.0, 0.0, 0.0], [0.0, 1.0, 0.5]),
            ([0.0, 1.0, 0.0], [120.0, 1.0, 0.5]),
            ([0.0, 0.0, 1.0], [240.0, 1.0, 0.5]),
            ([0.5, 0.5, 0.5], [0.0, 0.0, 0.5]),
            ([0.2, 0.4, 0.8], [220.0, 0.6, 0.5]),
        ],
    )
    def test_known_colors(self, srgb, expected):
        np.testing.assert_allclose(srgb_to_hsl(np.array(srgb)), expected, atol=1e-9)

    def test_hsl_to_srgb_known(self):
        srgb = hsl_to_srgb(np.array([220.0, 0.6, 0.5]))
        np.testing.assert_allclose(srgb, [0.2, 0.4, 0.8], atol=1e-9)

    def test_lightness_extremes(self):
        np.testing.assert_allclose(hsl_to_srgb(np.array([220.0, 0.6, 0.0])), np.zeros(3), atol=1e-12)
        np.testing.assert_allclose(hsl_to_srgb(np.array([220.0, 0.6, 1.0])), np.ones(3), atol=1e-12)

    def test_hue_in_range(self):
        rng = np.random.default_rng(11)
        hsl = srgb_to_hsl(rng.random((200, 3)))
        assert np.all(hsl[:, 0] >= 0.0)
        assert np.all(hsl[:, 0] < 360.0)

    def test_roundtrip_random(self):
        rng = np.random.default_rng(5)
        srgb = rng.random((100, 3))
        recovered = hsl_to_srgb(srgb_to_hsl(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestConvertArray:
    def test_same_space_is_identity(self):
        values = np.array([0.1, 0.2, 0.3])
        np.testing.assert_array_equal(convert_array(values, "srgb", "srgb"), values)

    def test_xyz_lab_direct_matches_chain(self):
        rng = np.random.default_rng(9)
        srgb = rng.random((20, 3))
        xyz = srgb_to_xyz(srgb)
        np.testing.assert_allclose(
            convert_array(xyz, ColorSpace.XYZ, ColorSpace.LAB),
            srgb_to_lab(srgb),
            atol=1e-9,
        )

    def test_hsl_to_lab(self):
        lab = convert_array(np.array([0.0, 0.0, 1.0]), "hsl", "lab")
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-6)

    def test_unknown_space_raises(self):
        with pytest.raises(ValueError, match="Unknown color space"):
            convert_array(np.zeros(3), "srgb", "cmyk")


class TestConvert:
    def test_returns_target_type(self):
        red = SRGBColor(1.0, 0.0, 0.0)
        assert isinstance(convert(red, ColorSpace.HSL), HSLColor)
        assert isinstance(convert(red, ColorSpace.XYZ), XYZColor)
        assert isinstance(convert(red, "lab"), LabColor)

    def test_same_space_returns_input(self):
        color = LabColor(50.0, 10.0, -10.0)
        assert convert(color, ColorSpace.LAB) is color

    def test_alpha_carried(self):
        color = SRGBColor(0.2, 0.4, 0.8, alpha=0.3)
        for space in ColorSpace:
            assert convert(color, space).alpha == 0.3

    def test_out_of_gamut_not_clipped(self):
        srgb = convert(LabColor(50.0, 120.0, 0.0), ColorSpace.SRGB)
        assert min(srgb.r, srgb.g, srgb.b) < 0.0 or max(srgb.r, srgb.g, srgb.b) > 1.0

    def test_to_method_matches_convert(self):
        color = SRGBColor(0.3, 0.6, 0.9)
        assert color.to("xyz") == convert(color, ColorSpace.XYZ)

    def test_roundtrip_through_every_space(self):
        color = SRGBColor(0.25, 0.5, 0.75, alpha=0.5)
        for space in ColorSpace:
            back = convert(convert(color, space), ColorSpace.SRGB)
            np.testing.assert_allclose(back.to_array(), color.to_array(), atol=1e-9)
            assert back.alpha == 0.5
