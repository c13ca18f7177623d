# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color math for smoothramp.

Colorspace conversions, perceptual difference and continuous
interpolation. Everything here is pure and deterministic.
"""

from smoothramp.space.colorspace import convert, delta_e_ok, srgb_to_hex
from smoothramp.space.interpolate import Interpolator, fixup_hues

__all__ = [
    "convert",
    "delta_e_ok",
    "srgb_to_hex",
    "Interpolator",
    "fixup_hues",
]
