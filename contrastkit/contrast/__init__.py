# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Contrast metrics.

Every metric is a pure function of two colors and never raises on numeric
degeneracies: invalid input ranges give 0.0 and zero denominators give a
named clamp constant.

Input spaces:
- APCA: sRGB (signed, polarity-aware)
- ΔΦ*, ΔL*: Lab (L* only)
- Michelson, WCAG 2.1, Weber: XYZ (Y only)
"""

from contrastkit.contrast.apca import Polarity, contrast_apca
from contrastkit.contrast.auto import ContrastAlgorithm, contrast, resolve_algorithm
from contrastkit.contrast.lightness import contrast_delta_lstar, contrast_delta_phi_star
from contrastkit.contrast.ratios import contrast_michelson, contrast_wcag21, contrast_weber

__all__ = [
    # Dispatcher
    "contrast",
    "ContrastAlgorithm",
    "resolve_algorithm",
    # Metrics
    "contrast_apca",
    "contrast_delta_phi_star",
    "contrast_delta_lstar",
    "contrast_michelson",
    "contrast_wcag21",
    "contrast_weber",
    # Types
    "Polarity",
]
