# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
smoothramp -- Adaptive stop placement for perceptually smooth gradients.

Finds the fewest gradient stops such that a renderer blending linearly
between them stays within a ΔEOK tolerance of the true interpolation.

Quick start::

    from smoothramp import CssColor, gradient

    red = CssColor.srgb(1.0, 0.0, 0.0)
    green = CssColor.srgb(0.0, 1.0, 0.0)
    for t, color in gradient(red, green, "oklch", tolerance=0.002, output_cs="srgb"):
        ...
"""

from __future__ import annotations

__version__ = "1.0.0"

from smoothramp.gradient import GradientIter, gradient, sample_gradient
from smoothramp.schema import (
    AlphaColor,
    ColorspaceTag,
    CssColor,
    GradientConfig,
    GradientStop,
    HueDirection,
    PremulColor,
)
from smoothramp.space import Interpolator

__all__ = [
    # Core API
    "gradient",
    "GradientIter",
    "sample_gradient",
    # Types (commonly needed)
    "CssColor",
    "AlphaColor",
    "PremulColor",
    "ColorspaceTag",
    "HueDirection",
    "GradientStop",
    "GradientConfig",
    "Interpolator",
    # Version
    "__version__",
]
