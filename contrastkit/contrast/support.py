# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Luminance and clamping primitives shared by the contrast metrics.
"""

from __future__ import annotations

import numpy as np

from contrastkit.contrast.constants import (
    APCA_BLACK_CLAMP,
    APCA_BLACK_THRESHOLD,
    APCA_INPUT_CLAMP_MAX,
    APCA_INPUT_CLAMP_MIN,
    APCA_MONITOR_GAMMA,
    APCA_SRGB_COEFFICIENTS,
)
from contrastkit.schema.color import SRGBColor


def derive_apca_luminance(color: SRGBColor) -> float:
    """
    Estimate screen luminance (Y) of an sRGB color the way APCA does.

    Each channel is raised to a plain 2.4 gamma (not the piecewise sRGB
    curve) and weighted by the APCA coefficients. Negative channels keep
    their sign, so strongly out-of-gamut input produces a luminance that
    fails input_conforms_to_clamp instead of a complex number.
    """
    rgb = color.to_array()
    linear = np.sign(rgb) * np.abs(rgb) ** APCA_MONITOR_GAMMA
    return float(np.dot(APCA_SRGB_COEFFICIENTS, linear))


def input_conforms_to_clamp(luminance: float) -> bool:
    """True if a luminance lies in the accepted APCA input range (NaN fails)."""
    return APCA_INPUT_CLAMP_MIN <= luminance <= APCA_INPUT_CLAMP_MAX


def apply_black_soft_clamp(luminance: float) -> float:
    """
    Lift near-black luminance to model flare in very dark tones.

    Values above the black threshold pass through; values at or below it
    are raised by (threshold - Y) ^ 1.414.
    """
    if luminance > APCA_BLACK_THRESHOLD:
        return luminance
    return luminance + (APCA_BLACK_THRESHOLD - luminance) ** APCA_BLACK_CLAMP


def alpha_blend_srgb(foreground: SRGBColor, background: SRGBColor) -> SRGBColor:
    """
    Composite a translucent foreground over a background.

    composite = background * (1 - α) + foreground * α per channel, with α
    clamped to [0, 1] and each result channel clamped to [0, 1]. The
    background's own alpha is ignored; the result is opaque.
    """
    alpha = min(max(foreground.alpha, 0.0), 1.0)
    blended = background.to_array() * (1.0 - alpha) + foreground.to_array() * alpha
    return SRGBColor.from_array(np.clip(blended, 0.0, 1.0), alpha=1.0)


def clamped_luminance_pair(y1: float, y2: float) -> tuple[float, float]:
    """Clamp two luminances to >= 0 and return them as (lighter, darker)."""
    y1 = max(y1, 0.0)
    y2 = max(y2, 0.0)
    return max(y1, y2), min(y1, y2)
