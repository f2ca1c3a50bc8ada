# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color string parsing.

Supported notations:
- Hex: "#rgb", "#rgba", "#rrggbb", "#rrggbbaa"
- rgb() / rgba(): "rgb(255, 0, 0)", "rgb(100% 0% 0% / 0.5)"
- hsl() / hsla(): "hsl(120, 100%, 50%)", "hsl(120deg 100% 50% / 50%)"

Both the legacy comma syntax and the space-separated syntax with a "/"
alpha separator are accepted. Malformed input raises ValueError.
"""

from __future__ import annotations

import re
from typing import Union

import numpy as np

from contrastkit.schema.color import (
    COLOR_TYPES,
    Color,
    ColorSpace,
    HSLColor,
    SRGBColor,
    resolve_space,
)
from contrastkit.space.colorspace import convert


_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNCTION_RE = re.compile(r"^(rgba?|hsla?)\s*\((.*)\)$")
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))(%|deg)?$")


# =============================================================================
# Hex
# =============================================================================


def hex_to_srgb(hex_color: str) -> SRGBColor:
    """
    Parse a hex color string.

    Short forms expand by digit doubling ("#f80" == "#ff8800"). An alpha
    digit pair is rounded to two decimals.

    Raises:
        ValueError: If the string is not a valid hex color
    """
    text = hex_color.strip().lower()
    m = _HEX_RE.match(text)
    if not m:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    r, g, b = (int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    alpha = 1.0
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255.0, 2)

    return SRGBColor(r=r, g=g, b=b, alpha=alpha)


def srgb_to_hex(color: SRGBColor) -> str:
    """
    Format an sRGB color as "#rrggbb", or "#rrggbbaa" when translucent.

    Channels are clipped to [0, 1] before rounding to bytes.
    """
    channels = np.clip(color.to_array(), 0.0, 1.0)
    r, g, b = (channels * 255).round().astype(int)
    hex_str = f"#{r:02x}{g:02x}{b:02x}"
    if color.alpha < 1.0:
        hex_str += f"{int(round(color.alpha * 255)):02x}"
    return hex_str


# =============================================================================
# Functional notation
# =============================================================================


def _split_arguments(body: str, source: str) -> tuple[list[str], str | None]:
    """Split "a, b, c[, d]" or "a b c[ / d]" into channel tokens and alpha."""
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if len(parts) not in (3, 4) or any(not p for p in parts):
            raise ValueError(f"Expected 3 or 4 comma-separated values: {source!r}")
        return parts[:3], parts[3] if len(parts) == 4 else None

    alpha = None
    if "/" in body:
        body, alpha = body.split("/", 1)
        alpha = alpha.strip()
        if not alpha or "/" in alpha:
            raise ValueError(f"Malformed alpha component: {source!r}")
    parts = body.split()
    if len(parts) != 3:
        raise ValueError(f"Expected 3 space-separated values: {source!r}")
    return parts, alpha


def _parse_number(token: str, source: str) -> tuple[float, str | None]:
    m = _NUMBER_RE.match(token)
    if not m:
        raise ValueError(f"Invalid number {token!r} in {source!r}")
    return float(m.group(1)), m.group(2)


def _parse_alpha(token: str | None, source: str) -> float:
    if token is None:
        return 1.0
    value, unit = _parse_number(token, source)
    if unit == "deg":
        raise ValueError(f"Alpha cannot be an angle: {source!r}")
    if unit == "%":
        value /= 100.0
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Alpha must be 0-1: {source!r}")
    return value


def _parse_rgb_function(body: str, source: str) -> SRGBColor:
    tokens, alpha_token = _split_arguments(body, source)
    channels = []
    for token in tokens:
        value, unit = _parse_number(token, source)
        if unit == "deg":
            raise ValueError(f"rgb() channels cannot be angles: {source!r}")
        if value < 0:
            raise ValueError(f"rgb() channels cannot be negative: {source!r}")
        if unit == "%":
            value *= 2.55
        if value > 255:
            raise ValueError(f"rgb() channel out of range: {source!r}")
        channels.append(value / 255.0)
    r, g, b = channels
    return SRGBColor(r=r, g=g, b=b, alpha=_parse_alpha(alpha_token, source))


def _parse_hsl_function(body: str, source: str) -> HSLColor:
    tokens, alpha_token = _split_arguments(body, source)

    hue, hue_unit = _parse_number(tokens[0], source)
    if hue_unit == "%":
        raise ValueError(f"Hue cannot be a percentage: {source!r}")
    hue %= 360.0

    # Bare numbers for s and l are read as percentages (CSS Color 4)
    fractions = []
    for token in tokens[1:]:
        value, unit = _parse_number(token, source)
        if unit == "deg":
            raise ValueError(f"hsl() saturation/lightness cannot be angles: {source!r}")
        fraction = value / 100.0
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"hsl() percentage out of range: {source!r}")
        fractions.append(fraction)
    s, l = fractions  # noqa: E741
    return HSLColor(h=hue, s=s, l=l, alpha=_parse_alpha(alpha_token, source))


def parse_color_string(value: str) -> Color:
    """
    Parse a color string into the color type its notation implies.

    Hex and rgb() strings give SRGBColor; hsl() strings give HSLColor.

    Raises:
        ValueError: If the string uses an unsupported or malformed notation
    """
    text = value.strip().lower()
    if not text:
        raise ValueError("Cannot parse an empty color string")

    if text.startswith("#"):
        return hex_to_srgb(text)

    m = _FUNCTION_RE.match(text)
    if not m:
        raise ValueError(f"Unsupported color notation: {value!r}")

    name, body = m.group(1), m.group(2).strip()
    if name.startswith("rgb"):
        return _parse_rgb_function(body, value)
    return _parse_hsl_function(body, value)


def parse_color(
    value: Union[str, Color],
    space: Union[ColorSpace, str] = ColorSpace.SRGB,
) -> Color:
    """
    Parse a string, or take an existing color, into the requested space.

    Args:
        value: A color string (see module docstring) or a color value
        space: Target color space (default: sRGB)

    Returns:
        Color value in the target space

    Raises:
        ValueError: Malformed color string or unknown target space
        TypeError: If value is neither a string nor a color value
    """
    target = resolve_space(space)
    if isinstance(value, str):
        return convert(parse_color_string(value), target)
    if isinstance(value, tuple(COLOR_TYPES.values())):
        return convert(value, target)
    raise TypeError(
        f"Expected color string or color value, got {type(value)}"
    )
