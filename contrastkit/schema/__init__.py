# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
Channels are never range-validated; only alpha must lie in [0, 1].
"""

from contrastkit.schema.color import (
    COLOR_TYPES,
    Color,
    ColorSpace,
    HSLColor,
    LabColor,
    SRGBColor,
    XYZColor,
    color_from_dict,
    resolve_space,
)

__all__ = [
    # Space tags
    "ColorSpace",
    "COLOR_TYPES",
    "resolve_space",
    # Color variants
    "Color",
    "SRGBColor",
    "HSLColor",
    "XYZColor",
    "LabColor",
    # Serialization
    "color_from_dict",
]
