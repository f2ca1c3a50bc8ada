# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Lightness-based contrast metrics on CIE Lab L*.

Both metrics read only L*; a*, b* and alpha are ignored.
"""

from __future__ import annotations

from contrastkit.contrast.constants import (
    DELTA_PHI_OFFSET,
    DELTA_PHI_THRESHOLD,
    PHI,
    SQRT2,
)
from contrastkit.schema.color import LabColor


def contrast_delta_phi_star(
    color1: LabColor,
    color2: LabColor,
    threshold: float = DELTA_PHI_THRESHOLD,
) -> float:
    """
    ΔΦ* (Delta Phi Star) lightness contrast.

    Formula: |L1^φ - L2^φ|^(1/φ) · √2 - 40, with φ the golden ratio and
    both L* clamped to >= 0. Symmetric in its arguments.

    Args:
        color1: First color in Lab
        color2: Second color in Lab
        threshold: Results below this are reported as 0.0 (default: 7.5)

    Returns:
        The ΔΦ* value, or 0.0 if it falls below threshold
    """
    l1 = max(0.0, color1.L)
    l2 = max(0.0, color2.L)

    delta = abs(l1 ** PHI - l2 ** PHI)
    contrast = delta ** (1.0 / PHI) * SQRT2 - DELTA_PHI_OFFSET

    return 0.0 if contrast < threshold else contrast


def contrast_delta_lstar(color1: LabColor, color2: LabColor) -> float:
    """Absolute L* difference, |L1 - L2|."""
    return abs(color1.L - color2.L)
