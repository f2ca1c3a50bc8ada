# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Algorithm-selecting contrast entry point.

Accepts color values or color strings and routes them to the metric of the
chosen algorithm, converting to the space that metric expects.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Union

from contrastkit.contrast.apca import contrast_apca
from contrastkit.contrast.lightness import contrast_delta_lstar, contrast_delta_phi_star
from contrastkit.contrast.ratios import contrast_michelson, contrast_wcag21, contrast_weber
from contrastkit.schema.color import Color, ColorSpace
from contrastkit.space.colorspace import convert
from contrastkit.space.parsing import parse_color

logger = logging.getLogger(__name__)


class ContrastAlgorithm(Enum):
    """Contrast algorithms available through `contrast`."""
    APCA = "APCA"
    DELTA_LSTAR = "DeltaL*"
    DELTA_PHI_STAR = "DeltaPhi*"
    MICHELSON = "Michelson"
    WCAG21 = "WCAG21"
    WEBER = "Weber"


# Metric and the color space its inputs must be in
_METRICS: dict[ContrastAlgorithm, tuple[ColorSpace, Callable[..., float]]] = {
    ContrastAlgorithm.APCA: (ColorSpace.SRGB, contrast_apca),
    ContrastAlgorithm.DELTA_LSTAR: (ColorSpace.LAB, contrast_delta_lstar),
    ContrastAlgorithm.DELTA_PHI_STAR: (ColorSpace.LAB, contrast_delta_phi_star),
    ContrastAlgorithm.MICHELSON: (ColorSpace.XYZ, contrast_michelson),
    ContrastAlgorithm.WCAG21: (ColorSpace.XYZ, contrast_wcag21),
    ContrastAlgorithm.WEBER: (ColorSpace.XYZ, contrast_weber),
}


def resolve_algorithm(algorithm: Union[ContrastAlgorithm, str]) -> ContrastAlgorithm:
    """
    Accept a ContrastAlgorithm member or its string value.

    Raises:
        ValueError: If the value names no known algorithm
    """
    if isinstance(algorithm, ContrastAlgorithm):
        return algorithm
    try:
        return ContrastAlgorithm(algorithm)
    except ValueError:
        raise ValueError(f"Unknown contrast algorithm: {algorithm!r}") from None


def contrast(
    foreground: Union[str, Color],
    background: Union[str, Color],
    algorithm: Union[ContrastAlgorithm, str] = ContrastAlgorithm.APCA,
) -> float:
    """
    Contrast between two colors using the chosen algorithm.

    Both inputs are first read as sRGB. If their r, g, b channels are equal
    the result is 0.0 for every algorithm, so identical colors compare the
    same way regardless of each metric's natural floor (WCAG 2.1 would
    otherwise report 1.0).

    Args:
        foreground: Text color (string such as "#333" or a color value)
        background: Background color
        algorithm: One of ContrastAlgorithm or its value: "APCA" (default),
            "DeltaL*", "DeltaPhi*", "Michelson", "WCAG21", "Weber"

    Returns:
        The metric's contrast value

    Raises:
        ValueError: Unknown algorithm or malformed color string
    """
    algorithm = resolve_algorithm(algorithm)

    fg_srgb = parse_color(foreground, ColorSpace.SRGB)
    bg_srgb = parse_color(background, ColorSpace.SRGB)

    if (fg_srgb.r, fg_srgb.g, fg_srgb.b) == (bg_srgb.r, bg_srgb.g, bg_srgb.b):
        logger.debug("Identical colors, %s contrast is 0", algorithm.value)
        return 0.0

    space, metric = _METRICS[algorithm]
    logger.debug("Computing %s contrast in %s", algorithm.value, space.value)
    return metric(convert(fg_srgb, space), convert(bg_srgb, space))
