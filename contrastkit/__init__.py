# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Contrastkit -- Perceptual color contrast and contrast-targeting search.

Computes contrast between colors with several metrics (APCA, ΔΦ*,
Michelson, WCAG 2.1, Weber, ΔL*) and finds lightness-adjusted colors that
reach a target contrast while keeping hue and saturation.

Quick start::

    from contrastkit import contrast, find_optimal_color

    contrast("#222222", "#ffffff")            # APCA Lc, dark on light > 0
    contrast("#222222", "#ffffff", "WCAG21")  # WCAG 2.1 ratio
    find_optimal_color("#3366cc", "#ffffff", 60).hex
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from contrastkit.a11y import (
    check_apca_contrast,
    check_wcag21_contrast,
    find_optimal_color,
)
from contrastkit.contrast import (
    ContrastAlgorithm,
    contrast,
    contrast_apca,
    contrast_delta_phi_star,
    contrast_michelson,
    contrast_wcag21,
)
from contrastkit.schema import (
    ColorSpace,
    HSLColor,
    LabColor,
    SRGBColor,
    XYZColor,
)
from contrastkit.space import convert, parse_color

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "contrast",
    "find_optimal_color",
    "ContrastAlgorithm",
    # Metrics (commonly needed)
    "contrast_apca",
    "contrast_delta_phi_star",
    "contrast_michelson",
    "contrast_wcag21",
    # Checks
    "check_apca_contrast",
    "check_wcag21_contrast",
    # Types
    "ColorSpace",
    "SRGBColor",
    "HSLColor",
    "XYZColor",
    "LabColor",
    # Conversion
    "convert",
    "parse_color",
    # Version
    "__version__",
]
