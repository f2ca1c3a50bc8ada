# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Accessibility helpers built on the contrast metrics.

- Optimal-color search: adjust a foreground's lightness to hit a target
- Compliance checks: APCA and WCAG 2.1 minimums per content type
"""

from contrastkit.a11y.checks import (
    APCAContentType,
    WCAG21ContentType,
    check_apca_contrast,
    check_wcag21_contrast,
    is_apca_compliant,
    is_wcag21_compliant,
)
from contrastkit.a11y.optimal import (
    OptimalContrastMethod,
    SearchConfig,
    find_optimal_color,
    find_optimal_color_apca,
    find_optimal_color_generic,
    find_optimal_color_wcag21,
)

__all__ = [
    # Optimal-color search
    "find_optimal_color",
    "find_optimal_color_apca",
    "find_optimal_color_wcag21",
    "find_optimal_color_generic",
    "OptimalContrastMethod",
    "SearchConfig",
    # Compliance checks
    "is_apca_compliant",
    "is_wcag21_compliant",
    "check_apca_contrast",
    "check_wcag21_contrast",
    "APCAContentType",
    "WCAG21ContentType",
]
