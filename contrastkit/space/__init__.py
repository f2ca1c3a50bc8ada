# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color space conversion and parsing.

The contrast metrics consume colors in a specific space (sRGB for APCA,
XYZ for the luminance ratios, Lab for the lightness metrics); this package
provides the `convert` and `parse_color` capabilities they rely on.
"""

from contrastkit.space.colorspace import convert, convert_array
from contrastkit.space.parsing import (
    hex_to_srgb,
    parse_color,
    parse_color_string,
    srgb_to_hex,
)

__all__ = [
    "convert",
    "convert_array",
    "parse_color",
    "parse_color_string",
    "hex_to_srgb",
    "srgb_to_hex",
]
