# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Luminance-ratio contrast metrics on XYZ Y.

All three are symmetric, ignore alpha, and clamp negative luminance to 0.
Degenerate denominators resolve to named clamp constants, never errors.
"""

from __future__ import annotations

from contrastkit.contrast.constants import (
    MICHELSON_CLAMP,
    WCAG21_LUMINANCE_OFFSET,
    WEBER_CLAMP,
)
from contrastkit.contrast.support import clamped_luminance_pair
from contrastkit.schema.color import XYZColor


def contrast_michelson(color1: XYZColor, color2: XYZColor) -> float:
    """
    Michelson contrast, (Ymax - Ymin) / (Ymax + Ymin).

    Returns:
        Value in [0, 1]; MICHELSON_CLAMP when both luminances are zero
    """
    lighter, darker = clamped_luminance_pair(color1.Y, color2.Y)
    denominator = lighter + darker
    if denominator == 0:
        return MICHELSON_CLAMP
    return (lighter - darker) / denominator


def contrast_wcag21(color1: XYZColor, color2: XYZColor) -> float:
    """
    WCAG 2.1 contrast ratio, (Ymax + 0.05) / (Ymin + 0.05).

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

    Returns:
        Ratio in [1, 21] for in-gamut colors
    """
    lighter, darker = clamped_luminance_pair(color1.Y, color2.Y)
    return (lighter + WCAG21_LUMINANCE_OFFSET) / (darker + WCAG21_LUMINANCE_OFFSET)


def contrast_weber(color1: XYZColor, color2: XYZColor) -> float:
    """
    Weber contrast, (Ymax - Ymin) / Ymin.

    Suited to small targets on a uniform background.

    Returns:
        Value >= 0; WEBER_CLAMP when the darker luminance is zero
    """
    lighter, darker = clamped_luminance_pair(color1.Y, color2.Y)
    if darker == 0:
        return WEBER_CLAMP
    return (lighter - darker) / darker
