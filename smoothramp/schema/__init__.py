# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and gradients.

All types in this module are immutable (frozen dataclasses).
"""

from smoothramp.schema.color import (
    POWERLESS_CHROMA,
    AlphaColor,
    ColorspaceTag,
    CssColor,
    HueDirection,
    PremulColor,
)
from smoothramp.schema.gradient import (
    MAX_DEPTH_LIMIT,
    MAX_SUBDIVISION_DEPTH,
    GradientConfig,
    GradientStop,
)

__all__ = [
    # Enumerations
    "ColorspaceTag",
    "HueDirection",
    # Color types
    "AlphaColor",
    "PremulColor",
    "CssColor",
    "POWERLESS_CHROMA",
    # Gradient types
    "GradientStop",
    "GradientConfig",
    "MAX_SUBDIVISION_DEPTH",
    "MAX_DEPTH_LIMIT",
]
