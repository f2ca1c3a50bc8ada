# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Optimal-color search.

Finds a variant of a foreground color, same hue and saturation with only
HSL lightness changed, whose contrast against a fixed background is as
close as possible to a target value. The search is a bounded binary search
over lightness in [0, 1] and works with any contrast metric taking two
sRGB colors.

Unreachable targets are not an error: the closest candidate seen during
the search is returned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from contrastkit.contrast.apca import contrast_apca
from contrastkit.contrast.ratios import contrast_wcag21
from contrastkit.schema.color import Color, ColorSpace, HSLColor, SRGBColor
from contrastkit.space.colorspace import convert
from contrastkit.space.parsing import parse_color

logger = logging.getLogger(__name__)


ContrastFunction = Callable[[SRGBColor, SRGBColor], float]


@dataclass
class SearchConfig:
    """Configuration for the lightness search."""

    # Upper bound on loop iterations (two metric evaluations each)
    max_iterations: int = 32

    # Stop once the lightness interval is no wider than this
    epsilon: float = 0.001


_DEFAULTS = SearchConfig()


@dataclass
class _SearchState:
    """Lightness interval and best candidate for a single search."""
    low: float = 0.0
    high: float = 1.0
    closest_lightness: float = 0.0
    min_diff: float = math.inf


class OptimalContrastMethod(Enum):
    """Metrics supported by `find_optimal_color`."""
    APCA = "APCA"
    WCAG21 = "WCAG21"


def find_optimal_color_generic(
    foreground: Color,
    background: SRGBColor,
    target_contrast: float,
    contrast_fn: ContrastFunction,
    max_iterations: int = _DEFAULTS.max_iterations,
    epsilon: float = _DEFAULTS.epsilon,
) -> SRGBColor:
    """
    Binary-search HSL lightness for the contrast closest to a target.

    Each iteration evaluates the metric at the interval midpoint and keeps
    the midpoint if it is the closest (by magnitude) seen so far. It then
    evaluates the metric again at the lower bound and narrows the interval:

        current < target, f(low) <  target → low = mid
        current < target, f(low) >= target → high = mid
        current >= target, f(low) <  target → high = mid
        current >= target, f(low) >= target → low = mid

    Args:
        foreground: Color whose hue and saturation are kept (any space)
        background: Fixed background color in sRGB
        target_contrast: Desired contrast value (sign matters to the
            interval narrowing; closeness is judged on magnitudes)
        contrast_fn: Metric called as contrast_fn(candidate, background)
        max_iterations: Iteration cap (default: 32)
        epsilon: Minimum interval width to keep searching (default: 0.001)

    Returns:
        Opaque sRGB color at the best lightness found
    """
    fg_hsl = convert(foreground, ColorSpace.HSL)

    def tone(lightness: float) -> SRGBColor:
        return convert(fg_hsl.with_lightness(lightness), ColorSpace.SRGB)

    state = _SearchState()
    iterations = 0

    while iterations < max_iterations and state.high - state.low > epsilon:
        mid = (state.low + state.high) / 2
        current = contrast_fn(tone(mid), background)

        diff = abs(abs(target_contrast) - abs(current))
        if diff < state.min_diff:
            state.min_diff = diff
            state.closest_lightness = mid

        # TODO: probe the direction once up front instead of re-evaluating
        # the lower bound every iteration; the narrowing outcome must match.
        contrast_low = contrast_fn(tone(state.low), background)
        if current < target_contrast:
            if contrast_low < target_contrast:
                state.low = mid
            else:
                state.high = mid
        else:
            if contrast_low < target_contrast:
                state.high = mid
            else:
                state.low = mid

        iterations += 1

    logger.debug(
        "Lightness search for target %.4f: %d iterations, L=%.4f, diff=%.4f",
        target_contrast, iterations, state.closest_lightness, state.min_diff,
    )
    return tone(state.closest_lightness)


def _wcag21_srgb(foreground: SRGBColor, background: SRGBColor) -> float:
    """WCAG 2.1 ratio for sRGB inputs (converted to XYZ)."""
    return contrast_wcag21(
        convert(foreground, ColorSpace.XYZ),
        convert(background, ColorSpace.XYZ),
    )


_METHOD_FUNCTIONS: dict[OptimalContrastMethod, ContrastFunction] = {
    OptimalContrastMethod.APCA: contrast_apca,
    OptimalContrastMethod.WCAG21: _wcag21_srgb,
}


def find_optimal_color_apca(
    foreground: SRGBColor,
    background: SRGBColor,
    target_contrast: float,
    config: Optional[SearchConfig] = None,
) -> SRGBColor:
    """Lightness-adjusted foreground closest to an APCA (Lc) target."""
    cfg = config or SearchConfig()
    return find_optimal_color_generic(
        foreground, background, target_contrast, contrast_apca,
        max_iterations=cfg.max_iterations, epsilon=cfg.epsilon,
    )


def find_optimal_color_wcag21(
    foreground: SRGBColor,
    background: SRGBColor,
    target_contrast: float,
    config: Optional[SearchConfig] = None,
) -> SRGBColor:
    """Lightness-adjusted foreground closest to a WCAG 2.1 ratio target."""
    cfg = config or SearchConfig()
    return find_optimal_color_generic(
        foreground, background, target_contrast, _wcag21_srgb,
        max_iterations=cfg.max_iterations, epsilon=cfg.epsilon,
    )


def resolve_method(method: Union[OptimalContrastMethod, str]) -> OptimalContrastMethod:
    """
    Accept an OptimalContrastMethod member or its string value.

    Raises:
        ValueError: If the value names no supported method
    """
    if isinstance(method, OptimalContrastMethod):
        return method
    try:
        return OptimalContrastMethod(method)
    except ValueError:
        raise ValueError(f"Unknown contrast algorithm: {method!r}") from None


def find_optimal_color(
    foreground: Union[str, Color],
    background: Union[str, Color],
    target_contrast: float,
    method: Union[OptimalContrastMethod, str] = OptimalContrastMethod.APCA,
    config: Optional[SearchConfig] = None,
) -> SRGBColor:
    """
    Find a foreground with the requested contrast, keeping hue and saturation.

    Args:
        foreground: Text color (string or color value)
        background: Background color (string or color value)
        target_contrast: Desired contrast; Lc for APCA, ratio for WCAG21
        method: "APCA" (default) or "WCAG21"
        config: Search settings (uses defaults if None)

    Returns:
        Opaque sRGB color

    Raises:
        ValueError: Unknown method or malformed color string

    Example:
        >>> from contrastkit.a11y import find_optimal_color
        >>> fg = find_optimal_color("#3366cc", "#ffffff", 75)
        >>> fg.hex  # a darker #3366cc with Lc ≈ 75 on white
    """
    resolved = resolve_method(method)
    cfg = config or SearchConfig()

    fg_srgb = parse_color(foreground, ColorSpace.SRGB)
    bg_srgb = parse_color(background, ColorSpace.SRGB)

    logger.debug("Optimal color search using %s", resolved.value)
    return find_optimal_color_generic(
        fg_srgb, bg_srgb, target_contrast, _METHOD_FUNCTIONS[resolved],
        max_iterations=cfg.max_iterations, epsilon=cfg.epsilon,
    )
