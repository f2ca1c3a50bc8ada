# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
APCA: polarity-aware perceptual contrast.

APCA (Accessible Perceptual Contrast Algorithm, Andrew Somers) predicts
text readability better than the WCAG 2.x ratio on modern displays. It is
asymmetric: the order of text and background matters, and the sign of the
result encodes polarity.

Output (Lc):
- Positive: dark text on a light background (black on white ≈ 106)
- Negative: light text on a dark background (white on black ≈ -108)
- Zero: imperceptible difference, or luminance outside the valid range

Rough readability floors: 75 small/thin text, 60 body text, 45 large
or bold text, 30 non-essential text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from contrastkit.contrast.constants import (
    APCA_BOW_BG_EXPONENT,
    APCA_BOW_OFFSET,
    APCA_BOW_SCALE,
    APCA_BOW_TXT_EXPONENT,
    APCA_LOW_CLIP,
    APCA_MIN_DELTA_Y,
    APCA_OUTPUT_SCALE,
    APCA_WOB_BG_EXPONENT,
    APCA_WOB_OFFSET,
    APCA_WOB_SCALE,
    APCA_WOB_TXT_EXPONENT,
)
from contrastkit.contrast.support import (
    alpha_blend_srgb,
    apply_black_soft_clamp,
    derive_apca_luminance,
    input_conforms_to_clamp,
)
from contrastkit.schema.color import SRGBColor


class Polarity(Enum):
    """Which of text and background is lighter."""
    DARK_ON_LIGHT = "dark_on_light"  # background lighter → positive Lc
    LIGHT_ON_DARK = "light_on_dark"  # text lighter → negative Lc


@dataclass(frozen=True, slots=True)
class PolarityConstants:
    """
    Constant bundle for one polarity branch.

    Attributes:
        background_exponent: Exponent applied to background luminance
        text_exponent: Exponent applied to text luminance
        scale: Multiplier on the exponentiated difference
        offset: Subtracted from |raw| once above the low clip
        sign: +1 for DARK_ON_LIGHT, -1 for LIGHT_ON_DARK
    """
    background_exponent: float
    text_exponent: float
    scale: float
    offset: float
    sign: float


POLARITY_CONSTANTS = {
    Polarity.DARK_ON_LIGHT: PolarityConstants(
        background_exponent=APCA_BOW_BG_EXPONENT,
        text_exponent=APCA_BOW_TXT_EXPONENT,
        scale=APCA_BOW_SCALE,
        offset=APCA_BOW_OFFSET,
        sign=1.0,
    ),
    Polarity.LIGHT_ON_DARK: PolarityConstants(
        background_exponent=APCA_WOB_BG_EXPONENT,
        text_exponent=APCA_WOB_TXT_EXPONENT,
        scale=APCA_WOB_SCALE,
        offset=APCA_WOB_OFFSET,
        sign=-1.0,
    ),
}


def polarity_of(text_luminance: float, background_luminance: float) -> Polarity:
    """Classify a (soft-clamped) luminance pair."""
    if background_luminance > text_luminance:
        return Polarity.DARK_ON_LIGHT
    return Polarity.LIGHT_ON_DARK


def luminance_to_contrast(text_luminance: float, background_luminance: float) -> float:
    """
    Lc contrast for a pair of APCA luminances.

    Applies the range check, black soft clamp, minimum-delta cut-off and
    polarity branch. Never raises.
    """
    if not (
        input_conforms_to_clamp(text_luminance)
        and input_conforms_to_clamp(background_luminance)
    ):
        return 0.0

    txt_y = apply_black_soft_clamp(text_luminance)
    bg_y = apply_black_soft_clamp(background_luminance)

    if abs(bg_y - txt_y) < APCA_MIN_DELTA_Y:
        return 0.0

    pc = POLARITY_CONSTANTS[polarity_of(txt_y, bg_y)]
    raw = (bg_y ** pc.background_exponent - txt_y ** pc.text_exponent) * pc.scale

    if raw * pc.sign < APCA_LOW_CLIP:
        return 0.0
    return (raw - pc.sign * pc.offset) * APCA_OUTPUT_SCALE


def contrast_apca(foreground: SRGBColor, background: SRGBColor) -> float:
    """
    APCA contrast (Lc) of foreground text on a background.

    A translucent foreground is first composited over the background; the
    background's alpha is never used.

    Args:
        foreground: Text color, gamma-encoded sRGB
        background: Background color, gamma-encoded sRGB

    Returns:
        Signed Lc value, roughly within [-108, 106] for in-gamut input.
        0.0 for near-identical colors or out-of-range luminance.
    """
    if foreground.alpha < 1.0:
        foreground = alpha_blend_srgb(foreground, background)

    return luminance_to_contrast(
        derive_apca_luminance(foreground),
        derive_apca_luminance(background),
    )
