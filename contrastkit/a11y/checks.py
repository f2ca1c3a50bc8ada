# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Accessibility compliance checks.

Compare a contrast value (or the contrast of a color pair) against the
minimum for a content type. Comparisons use |contrast|, so APCA's negative
light-on-dark values are judged by magnitude.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from contrastkit.contrast.auto import ContrastAlgorithm, contrast
from contrastkit.schema.color import Color


# =============================================================================
# Thresholds
# =============================================================================

# WCAG 2.1 minimum ratios
# Large text: at least 18pt (24px), or 14pt (18.7px) bold
WCAG21_AA_NORMAL_MIN_RATIO = 4.5
WCAG21_AA_LARGE_MIN_RATIO = 3.0
WCAG21_AAA_NORMAL_MIN_RATIO = 7.0
WCAG21_AAA_LARGE_MIN_RATIO = 4.5

# APCA minimum Lc
APCA_BODY_MIN_RATIO = 60.0
APCA_LARGE_MIN_RATIO = 45.0
APCA_PLACEHOLDER_MIN_RATIO = 30.0
APCA_UI_MIN_RATIO = 60.0


class APCAContentType(Enum):
    """Content categories with an APCA minimum."""
    BODY_TEXT = "BodyText"
    LARGE_TEXT = "LargeText"
    NON_ESSENTIAL_TEXT = "NonEssentialText"  # placeholders, disabled labels
    UI_CONTROLS = "UIControls"


class WCAG21ContentType(Enum):
    """WCAG 2.1 conformance level and text size."""
    AA_NORMAL = "AANormal"
    AA_LARGE = "AALarge"
    AAA_NORMAL = "AAANormal"
    AAA_LARGE = "AAALarge"


APCA_THRESHOLDS = {
    APCAContentType.BODY_TEXT: APCA_BODY_MIN_RATIO,
    APCAContentType.LARGE_TEXT: APCA_LARGE_MIN_RATIO,
    APCAContentType.NON_ESSENTIAL_TEXT: APCA_PLACEHOLDER_MIN_RATIO,
    APCAContentType.UI_CONTROLS: APCA_UI_MIN_RATIO,
}

WCAG21_THRESHOLDS = {
    WCAG21ContentType.AA_NORMAL: WCAG21_AA_NORMAL_MIN_RATIO,
    WCAG21ContentType.AA_LARGE: WCAG21_AA_LARGE_MIN_RATIO,
    WCAG21ContentType.AAA_NORMAL: WCAG21_AAA_NORMAL_MIN_RATIO,
    WCAG21ContentType.AAA_LARGE: WCAG21_AAA_LARGE_MIN_RATIO,
}


def _resolve_content(content, enum_cls):
    if isinstance(content, enum_cls):
        return content
    try:
        return enum_cls(content)
    except ValueError:
        raise ValueError(f"Unknown content type: {content!r}") from None


# =============================================================================
# APCA
# =============================================================================


def is_apca_compliant(
    contrast_value: float,
    content: Union[APCAContentType, str],
) -> bool:
    """
    True if an APCA Lc value meets the minimum for a content type.

    Raises:
        ValueError: If content is not a known APCAContentType
    """
    content = _resolve_content(content, APCAContentType)
    return abs(contrast_value) >= APCA_THRESHOLDS[content]


def check_apca_contrast(
    foreground: Union[str, Color],
    background: Union[str, Color],
    content: Union[APCAContentType, str],
) -> bool:
    """True if the APCA contrast of a color pair meets the content minimum."""
    content = _resolve_content(content, APCAContentType)
    return is_apca_compliant(
        contrast(foreground, background, ContrastAlgorithm.APCA), content
    )


# =============================================================================
# WCAG 2.1
# =============================================================================


def is_wcag21_compliant(
    contrast_value: float,
    content: Union[WCAG21ContentType, str],
) -> bool:
    """
    True if a WCAG 2.1 ratio meets the minimum for a content type.

    Raises:
        ValueError: If content is not a known WCAG21ContentType
    """
    content = _resolve_content(content, WCAG21ContentType)
    return abs(contrast_value) >= WCAG21_THRESHOLDS[content]


def check_wcag21_contrast(
    foreground: Union[str, Color],
    background: Union[str, Color],
    content: Union[WCAG21ContentType, str],
) -> bool:
    """True if the WCAG 2.1 ratio of a color pair meets the content minimum."""
    content = _resolve_content(content, WCAG21ContentType)
    return is_wcag21_compliant(
        contrast(foreground, background, ContrastAlgorithm.WCAG21), content
    )
