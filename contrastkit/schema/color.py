# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Tolerant: Channel values are never range-checked; metrics clamp instead
- Explicit opacity: alpha defaults to 1.0 (opaque) rather than being optional
- Serializable: to_dict / from_dict for every variant

Nominal channel ranges:
- sRGB: r, g, b in [0, 1] (gamma encoded)
- HSL:  h in degrees [0, 360), s and l in [0, 1]
- XYZ:  X, Y, Z relative to D65 white (Y = 1.0 for white)
- Lab:  L in [0, 100], a and b roughly [-128, 127]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

import numpy as np
from numpy.typing import NDArray


class ColorSpace(Enum):
    """Color spaces understood by the conversion layer."""
    SRGB = "srgb"
    HSL = "hsl"
    XYZ = "xyz"
    LAB = "lab"


def _validate_alpha(alpha: float) -> None:
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha must be 0-1, got {alpha}")


class _ColorBase:
    """Behaviour shared by every color variant."""

    __slots__ = ()

    space: ClassVar[ColorSpace]
    _channels: ClassVar[tuple[str, str, str]]

    def __post_init__(self) -> None:
        """Validate alpha is within [0, 1]."""
        _validate_alpha(self.alpha)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def to(self, space: Union[ColorSpace, str]) -> Color:
        """Convert this color to another color space."""
        from contrastkit.space.colorspace import convert
        return convert(self, space)

    def to_array(self) -> NDArray[np.float64]:
        """Channel values as a (3,) float array (alpha excluded)."""
        return np.array(
            [getattr(self, name) for name in self._channels],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, values: NDArray[np.float64], alpha: float = 1.0):
        """Build a color from a (3,) channel array."""
        if len(values) != 3:
            raise ValueError(f"Expected 3 channel values, got {len(values)}")
        kwargs = {name: float(v) for name, v in zip(cls._channels, values)}
        return cls(**kwargs, alpha=alpha)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict = {"space": self.space.value}
        for name in self._channels:
            d[name] = getattr(self, name)
        d["alpha"] = self.alpha
        return d

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from dictionary."""
        space = data.get("space", cls.space.value)
        if space != cls.space.value:
            raise ValueError(
                f"Cannot build {cls.__name__} from '{space}' data"
            )
        kwargs = {name: data[name] for name in cls._channels}
        return cls(**kwargs, alpha=data.get("alpha", 1.0))


@dataclass(frozen=True, slots=True)
class SRGBColor(_ColorBase):
    """
    A gamma-encoded sRGB color.

    Attributes:
        r, g, b: Channel values, nominally 0-1
        alpha: Opacity 0-1 (1.0 = opaque)
    """
    space: ClassVar[ColorSpace] = ColorSpace.SRGB
    _channels: ClassVar[tuple[str, str, str]] = ("r", "g", "b")

    r: float
    g: float
    b: float
    alpha: float = 1.0

    @property
    def hex(self) -> str:
        """
        Hex string like "#3941c8".

        Channels are clipped to [0, 1] before formatting; an alpha byte is
        appended only for translucent colors.
        """
        from contrastkit.space.parsing import srgb_to_hex
        return srgb_to_hex(self)

    @classmethod
    def from_hex(cls, hex_color: str) -> SRGBColor:
        """Parse "#rgb", "#rgba", "#rrggbb" or "#rrggbbaa"."""
        from contrastkit.space.parsing import hex_to_srgb
        return hex_to_srgb(hex_color)


@dataclass(frozen=True, slots=True)
class HSLColor(_ColorBase):
    """
    A cylindrical hue / saturation / lightness view of sRGB.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation 0-1
        l: Lightness 0-1
        alpha: Opacity 0-1 (1.0 = opaque)
    """
    space: ClassVar[ColorSpace] = ColorSpace.HSL
    _channels: ClassVar[tuple[str, str, str]] = ("h", "s", "l")

    h: float
    s: float
    l: float  # noqa: E741
    alpha: float = 1.0

    def with_lightness(self, lightness: float) -> HSLColor:
        """Same hue and saturation at a different lightness, fully opaque."""
        return HSLColor(h=self.h, s=self.s, l=lightness)


@dataclass(frozen=True, slots=True)
class XYZColor(_ColorBase):
    """
    CIE 1931 XYZ tristimulus values, D65 white point.

    Attributes:
        X, Y, Z: Tristimulus values; Y is relative luminance (white = 1.0)
        alpha: Opacity 0-1 (ignored by every luminance metric)
    """
    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    _channels: ClassVar[tuple[str, str, str]] = ("X", "Y", "Z")

    X: float
    Y: float
    Z: float
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class LabColor(_ColorBase):
    """
    CIE L*a*b* color, D65 white point.

    Attributes:
        L: Lightness (0 = black, 100 = white)
        a: Green-red axis
        b: Blue-yellow axis
        alpha: Opacity 0-1
    """
    space: ClassVar[ColorSpace] = ColorSpace.LAB
    _channels: ClassVar[tuple[str, str, str]] = ("L", "a", "b")

    L: float
    a: float
    b: float
    alpha: float = 1.0


Color = Union[SRGBColor, HSLColor, XYZColor, LabColor]

COLOR_TYPES: dict[ColorSpace, type] = {
    ColorSpace.SRGB: SRGBColor,
    ColorSpace.HSL: HSLColor,
    ColorSpace.XYZ: XYZColor,
    ColorSpace.LAB: LabColor,
}


def resolve_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """Accept a ColorSpace member or its string value ("srgb", "lab", ...)."""
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def color_from_dict(data: dict) -> Color:
    """Deserialize any color variant using its "space" tag."""
    if "space" not in data:
        raise KeyError("Color data is missing the 'space' tag")
    cls = COLOR_TYPES[resolve_space(data["space"])]
    return cls.from_dict(data)
