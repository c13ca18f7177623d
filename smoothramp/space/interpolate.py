# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Continuous color interpolation (CSS Color 4 §12).

An Interpolator evaluates the true blend between two colors at any
parameter t in [0, 1]:

1. Both colors are converted to the interpolation space; missing flags
   survive only for analogous components.
2. A hue whose chroma is negligible is powerless and becomes missing.
3. A component missing on one side takes the other side's value.
4. Components are premultiplied (hue excluded) and hues are fixed up for
   the requested arc.
5. eval(t) lerps, un-premultiplies and normalizes the hue.
"""

from __future__ import annotations

from typing import Union

from smoothramp.schema.color import (
    AlphaColor,
    ColorspaceTag,
    CssColor,
    HueDirection,
    PremulColor,
)


def fixup_hues(h0: float, h1: float, direction: HueDirection) -> tuple[float, float]:
    """
    Adjust a pair of hues (degrees) so a plain lerp follows `direction`.

    Args:
        h0: Start hue
        h1: End hue
        direction: Arc to take around the hue circle

    Returns:
        (h0, h1), either of which may be shifted by 360
    """
    h0 %= 360.0
    h1 %= 360.0
    d = h1 - h0
    if direction is HueDirection.SHORTER:
        if d > 180.0:
            h0 += 360.0
        elif d < -180.0:
            h1 += 360.0
    elif direction is HueDirection.LONGER:
        if 0.0 < d < 180.0:
            h0 += 360.0
        elif -180.0 < d <= 0.0:
            h1 += 360.0
    elif direction is HueDirection.INCREASING:
        if h1 < h0:
            h1 += 360.0
    elif direction is HueDirection.DECREASING:
        if h0 < h1:
            h0 += 360.0
    return h0, h1


class Interpolator:
    """
    Evaluates the blend of two colors in a chosen colorspace.

    Deterministic: eval(t) for the same t always returns the same color.
    """

    def __init__(
        self,
        color0: CssColor,
        color1: CssColor,
        cs: Union[str, ColorspaceTag] = ColorspaceTag.OKLAB,
        direction: Union[str, HueDirection] = HueDirection.SHORTER,
    ) -> None:
        self.cs = ColorspaceTag.parse(cs)
        self.direction = HueDirection.parse(direction)

        a = color0.convert(self.cs).powerless_to_missing()
        b = color1.convert(self.cs).powerless_to_missing()

        # Missing on both sides stays missing in every evaluated color
        self.missing = a.missing & b.missing

        c0 = list(a.components)
        c1 = list(b.components)
        for i in range(4):
            if i in a.missing and i not in b.missing:
                c0[i] = c1[i]
            elif i in b.missing and i not in a.missing:
                c1[i] = c0[i]

        hue = self.cs.hue_index
        if hue is not None and hue not in self.missing:
            c0[hue], c1[hue] = fixup_hues(c0[hue], c1[hue], self.direction)

        self._premul0 = AlphaColor(self.cs, c0).premultiply().components
        self._premul1 = AlphaColor(self.cs, c1).premultiply().components

    def eval(self, t: float) -> CssColor:
        """Color at parameter t (0 = first color, 1 = second color)."""
        premul = PremulColor(
            self.cs,
            tuple(a + (b - a) * t for a, b in zip(self._premul0, self._premul1)),
        )
        components = list(premul.un_premultiply().components)
        hue = self.cs.hue_index
        if hue is not None:
            components[hue] %= 360.0
        return CssColor(self.cs, components, self.missing)

    def __repr__(self) -> str:
        return f"Interpolator(cs={self.cs.value}, direction={self.direction.value})"
