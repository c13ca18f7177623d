# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Every space converts through linear sRGB:

    sRGB / Display P3 / XYZ D65 / OKLab / OKLCH ↔ Linear sRGB

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)
- CSS Color 4 sample code for the RGB and XYZ matrices

All conversions are pure NumPy and operate on arrays of shape (..., 3).
Transfer curves are sign-preserving, so out-of-gamut values produced by
interpolation survive a round trip instead of being clipped.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from smoothramp.schema.color import ColorspaceTag


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB values to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: value/12.92
    - For |value| > 0.04045: sign * ((|value| + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    mag = np.abs(srgb)
    linear = np.where(
        mag <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((mag + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear. Values are not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    mag = np.abs(linear)
    srgb = np.where(
        mag <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(mag, 1.0 / 2.4) - 0.055)
    )
    return srgb


# =============================================================================
# Linear RGB ↔ XYZ D65 / Display P3
# =============================================================================

# Linear sRGB to CIE XYZ (D65 white)
_SRGB_TO_XYZ = np.array([
    [0.4123907992659595, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151036, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559185, 0.11919477979462599, 0.9505321522496606],
], dtype=np.float64)

# Linear Display P3 to CIE XYZ (D65 white)
_P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)
_P3_TO_SRGB = _XYZ_TO_SRGB @ _P3_TO_XYZ
_SRGB_TO_P3 = np.linalg.inv(_P3_TO_SRGB)


def _apply(matrix: NDArray[np.float64], values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Multiply each trailing 3-vector by matrix."""
    return np.einsum('...j,ij->...i', values, matrix)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to CIE XYZ (D65)."""
    return _apply(_SRGB_TO_XYZ, np.asarray(rgb, dtype=np.float64))


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65) to linear sRGB."""
    return _apply(_XYZ_TO_SRGB, np.asarray(xyz, dtype=np.float64))


def display_p3_to_linear_rgb(p3: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded Display P3 to linear sRGB.

    Display P3 shares the sRGB transfer curve; only the primaries differ.
    """
    return _apply(_P3_TO_SRGB, srgb_to_linear(p3))


def linear_rgb_to_display_p3(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to gamma-encoded Display P3."""
    return linear_to_srgb(_apply(_SRGB_TO_P3, np.asarray(rgb, dtype=np.float64)))


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    lms = _apply(_M1, rgb)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    return _apply(_M2, lms_cbrt)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = _apply(_M2_INV, lab)
    lms = lms_cbrt ** 3

    return _apply(_M1_INV, lms)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # A tiny negative b rounds up to exactly 360.0
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Hub conversions (any tagged space ↔ any tagged space)
# =============================================================================


def to_linear_srgb(coords: NDArray[np.float64], cs: ColorspaceTag) -> NDArray[np.float64]:
    """Convert coordinates in colorspace `cs` to linear sRGB."""
    coords = np.asarray(coords, dtype=np.float64)
    if cs is ColorspaceTag.LINEAR_SRGB:
        return coords
    if cs is ColorspaceTag.SRGB:
        return srgb_to_linear(coords)
    if cs is ColorspaceTag.DISPLAY_P3:
        return display_p3_to_linear_rgb(coords)
    if cs is ColorspaceTag.XYZ_D65:
        return xyz_to_linear_rgb(coords)
    if cs is ColorspaceTag.OKLAB:
        return oklab_to_linear_rgb(coords)
    if cs is ColorspaceTag.OKLCH:
        return oklab_to_linear_rgb(oklch_to_oklab(coords))
    raise ValueError(f"Unsupported colorspace: {cs!r}")


def from_linear_srgb(rgb: NDArray[np.float64], cs: ColorspaceTag) -> NDArray[np.float64]:
    """Convert linear sRGB to coordinates in colorspace `cs`."""
    rgb = np.asarray(rgb, dtype=np.float64)
    if cs is ColorspaceTag.LINEAR_SRGB:
        return rgb
    if cs is ColorspaceTag.SRGB:
        return linear_to_srgb(rgb)
    if cs is ColorspaceTag.DISPLAY_P3:
        return linear_rgb_to_display_p3(rgb)
    if cs is ColorspaceTag.XYZ_D65:
        return linear_rgb_to_xyz(rgb)
    if cs is ColorspaceTag.OKLAB:
        return linear_rgb_to_oklab(rgb)
    if cs is ColorspaceTag.OKLCH:
        return oklab_to_oklch(linear_rgb_to_oklab(rgb))
    raise ValueError(f"Unsupported colorspace: {cs!r}")


def convert(
    coords: NDArray[np.float64],
    src: ColorspaceTag,
    dst: ColorspaceTag,
) -> NDArray[np.float64]:
    """
    Convert opaque coordinates from one colorspace to another.

    OKLab ↔ OKLCH is done directly to avoid a lossy trip through RGB.

    Args:
        coords: Array of shape (..., 3) in colorspace `src`
        src: Source colorspace
        dst: Target colorspace

    Returns:
        Array of shape (..., 3) in colorspace `dst`
    """
    coords = np.asarray(coords, dtype=np.float64)
    if src is dst:
        return coords.copy()
    if src is ColorspaceTag.OKLAB and dst is ColorspaceTag.OKLCH:
        return oklab_to_oklch(coords)
    if src is ColorspaceTag.OKLCH and dst is ColorspaceTag.OKLAB:
        return oklch_to_oklab(coords)
    return from_linear_srgb(to_linear_srgb(coords, src), dst)


# =============================================================================
# Hex output
# =============================================================================


def srgb_to_hex(rgb: NDArray[np.float64], alpha: Optional[float] = None) -> str:
    """
    Convert gamma-encoded sRGB [0,1] to a hex color string.

    Values are clipped to [0, 1] (gamut clipped). An alpha below 1.0 is
    appended as a fourth byte.

    Returns:
        Hex string like "#3941C8" or "#3941C880"
    """
    srgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = (srgb * 255).round().astype(int)
    hex_color = f"#{r:02X}{g:02X}{b:02X}"
    if alpha is not None and alpha < 1.0:
        a = int(np.round(np.clip(alpha, 0.0, 1.0) * 255))
        hex_color += f"{a:02X}"
    return hex_color


# =============================================================================
# ΔEOK (Perceptual Color Difference)
# =============================================================================


def delta_e_ok(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> float:
    """
    Euclidean distance between two OKLab colors (ΔEOK).

    Works on any trailing vector length, so premultiplied (L, a, b, alpha)
    4-vectors are measured including their alpha difference.

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (expert eye)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return float(np.sqrt(np.sum(delta ** 2)))

