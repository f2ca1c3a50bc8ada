# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → XYZ (D65) → CIE Lab
                  sRGB ↔ HSL (direct)

References:
- sRGB: IEC 61966-2-1
- CIE Lab: CIE 15:2004, with the exact ϵ/κ constants

All array conversions are pure NumPy and operate on arrays of shape (..., 3).
`convert` wraps them for the color value types in contrastkit.schema.
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np
from numpy.typing import NDArray

from contrastkit.schema.color import (
    COLOR_TYPES,
    Color,
    ColorSpace,
    resolve_space,
)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Out-of-range input is not clipped.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Keep the power branch real-valued for the lanes np.where discards
    curved = np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4)
    return np.where(srgb <= 0.04045, srgb / 12.92, curved)


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values outside [0, 1] are passed through the
    curve unclipped; gamut mapping is left to the caller.
    """
    linear = np.asarray(linear, dtype=np.float64)
    curved = 1.055 * np.power(np.maximum(linear, 0.0031308), 1.0 / 2.4) - 0.055
    return np.where(linear <= 0.0031308, linear * 12.92, curved)


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================

# Linear sRGB to XYZ, D65 reference white
_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to XYZ.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 1.0 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ to linear RGB. Inverse of linear_rgb_to_xyz."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_SRGB)


# =============================================================================
# XYZ ↔ CIE Lab
# =============================================================================

# D65 reference white
D65_WHITE = np.array([0.9504559270516716, 1.0, 1.0890577507598784], dtype=np.float64)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE Lab.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with Lab values (L, a, b), L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    ratio = xyz / D65_WHITE

    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        (_LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab to XYZ.

    Args:
        lab: Array of shape (..., 3) with Lab values (L, a, b)

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]

    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3

    xr = np.where(fx3 > _LAB_EPSILON, fx3, (116.0 * fx - 16.0) / _LAB_KAPPA)
    yr = np.where(L > _LAB_KAPPA * _LAB_EPSILON, fy ** 3, L / _LAB_KAPPA)
    zr = np.where(fz3 > _LAB_EPSILON, fz3, (116.0 * fz - 16.0) / _LAB_KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * D65_WHITE


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to HSL.

    Args:
        srgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with (H, S, L); H in degrees [0, 360),
        0 for achromatic colors
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    c_max = np.max(srgb, axis=-1)
    c_min = np.min(srgb, axis=-1)
    delta = c_max - c_min
    achromatic = delta == 0

    # Avoid dividing by zero in lanes that are discarded below
    safe_delta = np.where(achromatic, 1.0, delta)

    H = np.where(
        c_max == r,
        (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
        np.where(
            c_max == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    ) * 60.0
    H = np.where(achromatic, 0.0, H)
    H = np.where(H < 0.0, H + 360.0, H)

    L = (c_max + c_min) * 0.5

    denom = np.where(L > 0.5, 2.0 - c_max - c_min, c_max + c_min)
    S = np.where(achromatic, 0.0, delta / np.where(denom == 0, 1.0, denom))

    return np.stack([H, S, L], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB.

    Args:
        hsl: Array of shape (..., 3) with (H, S, L), H in degrees

    Returns:
        Array of shape (..., 3) with sRGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    H, S, L = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    a = S * np.minimum(L, 1.0 - L)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 30.0) % 12.0
        return L - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


# =============================================================================
# Convenience: full chains
# =============================================================================


def srgb_to_xyz(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """sRGB → Linear RGB → XYZ."""
    return linear_rgb_to_xyz(srgb_to_linear(srgb))


def xyz_to_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """XYZ → Linear RGB → sRGB (not gamut clipped)."""
    return linear_to_srgb(xyz_to_linear_rgb(xyz))


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """sRGB → Linear RGB → XYZ → Lab."""
    return xyz_to_lab(srgb_to_xyz(srgb))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Lab → XYZ → Linear RGB → sRGB (not gamut clipped)."""
    return xyz_to_srgb(lab_to_xyz(lab))


def _identity(values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


# Every space reaches every other through sRGB, except the XYZ/Lab pair
# which converts directly to avoid a pointless gamma round trip.
_TO_SRGB: dict[ColorSpace, Callable[[NDArray[np.float64]], NDArray[np.float64]]] = {
    ColorSpace.SRGB: _identity,
    ColorSpace.HSL: hsl_to_srgb,
    ColorSpace.XYZ: xyz_to_srgb,
    ColorSpace.LAB: lab_to_srgb,
}

_FROM_SRGB: dict[ColorSpace, Callable[[NDArray[np.float64]], NDArray[np.float64]]] = {
    ColorSpace.SRGB: _identity,
    ColorSpace.HSL: srgb_to_hsl,
    ColorSpace.XYZ: srgb_to_xyz,
    ColorSpace.LAB: srgb_to_lab,
}

_DIRECT: dict[
    tuple[ColorSpace, ColorSpace],
    Callable[[NDArray[np.float64]], NDArray[np.float64]],
] = {
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
}


def convert_array(
    values: NDArray[np.float64],
    source: Union[ColorSpace, str],
    target: Union[ColorSpace, str],
) -> NDArray[np.float64]:
    """
    Convert an array of shape (..., 3) between any two supported spaces.

    Args:
        values: Channel values in the source space
        source: Space the values are expressed in
        target: Space to convert to

    Returns:
        Array of shape (..., 3) in the target space
    """
    source = resolve_space(source)
    target = resolve_space(target)

    if source == target:
        return _identity(values)
    direct = _DIRECT.get((source, target))
    if direct is not None:
        return direct(values)
    return _FROM_SRGB[target](_TO_SRGB[source](values))


def convert(color: Color, space: Union[ColorSpace, str]) -> Color:
    """
    Convert a color value to another color space.

    Total over the supported spaces: alpha is carried through unchanged and
    no gamut clipping is applied. Converting to the color's own space
    returns the color itself.

    Args:
        color: Any contrastkit color value
        space: Target ColorSpace (or its string value, e.g. "lab")

    Returns:
        Color value of the target space's type
    """
    target = resolve_space(space)
    if color.space == target:
        return color

    values = convert_array(color.to_array(), color.space, target)
    return COLOR_TYPES[target].from_array(values, alpha=color.alpha)
