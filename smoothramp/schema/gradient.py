# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Gradient stop and configuration types.

A gradient is delivered as an ordered tuple of GradientStop values: the
vertices of a piecewise-linear approximation that a renderer can blend
between with plain premultiplied lerps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from smoothramp.schema.color import ColorspaceTag, HueDirection, PremulColor


# Default cap on adaptive subdivision: the finest segment spans 2**-12 of
# the gradient, so one pass emits at most 4097 stops.
MAX_SUBDIVISION_DEPTH = 12

# The step size 2**-depth must stay an exact float with room to spare.
MAX_DEPTH_LIMIT = 52


def check_max_depth(max_depth: int) -> None:
    """Raise ValueError unless max_depth is an int in [0, MAX_DEPTH_LIMIT]."""
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ValueError(f"max_depth must be an integer, got {max_depth!r}")
    if not 0 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be 0-{MAX_DEPTH_LIMIT}, got {max_depth}")


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single stop in a gradient.

    Attributes:
        position: Normalized position along the gradient (0.0-1.0)
        color: Premultiplied color at this position
    """
    position: float
    color: PremulColor

    def __post_init__(self) -> None:
        """Validate position is in range."""
        if not 0.0 <= self.position <= 1.0:
            raise ValueError(f"Position must be 0-1, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"position": self.position, "color": self.color.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        """Deserialize from dictionary."""
        return cls(
            position=data["position"],
            color=PremulColor.from_dict(data["color"]),
        )


@dataclass(frozen=True)
class GradientConfig:
    """Configuration for adaptive gradient sampling."""

    # Space the continuous interpolation runs in
    interp_cs: Union[str, ColorspaceTag] = ColorspaceTag.OKLAB

    # Space the emitted stops are expressed in (the renderer's blending
    # space). None = same as interp_cs.
    output_cs: Optional[Union[str, ColorspaceTag]] = None

    # Hue arc for cylindrical interp_cs (ignored for rectangular spaces)
    direction: Union[str, HueDirection] = HueDirection.SHORTER

    # Maximum ΔEOK between the true midpoint and the linear one
    # 0.002 = indistinguishable
    # 0.01  = default, smooth at typical display sizes
    # 0.02  = barely perceptible
    tolerance: float = 0.01

    # Subdivision cap; a segment this deep is accepted unconditionally
    max_depth: int = MAX_SUBDIVISION_DEPTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "interp_cs", ColorspaceTag.parse(self.interp_cs))
        if self.output_cs is not None:
            object.__setattr__(self, "output_cs", ColorspaceTag.parse(self.output_cs))
        object.__setattr__(self, "direction", HueDirection.parse(self.direction))
        if math.isnan(self.tolerance) or self.tolerance < 0.0:
            raise ValueError(f"Tolerance must be >= 0, got {self.tolerance}")
        check_max_depth(self.max_depth)

    @property
    def resolved_output_cs(self) -> ColorspaceTag:
        return self.output_cs if self.output_cs is not None else self.interp_cs
