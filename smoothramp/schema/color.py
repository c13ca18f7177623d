# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Tagged: Every color carries the colorspace its components live in
- Explicit alpha: Separated (AlphaColor) and premultiplied (PremulColor)
  alpha are distinct types, so a lerp can never mix them up

Components are always a 4-tuple with alpha last. In OKLCH the hue is the
third component, in degrees; premultiplication never scales it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Union

import numpy as np

if TYPE_CHECKING:
    from smoothramp.space.interpolate import Interpolator


Components = tuple[float, float, float, float]

ALPHA_INDEX = 3


# =============================================================================
# Enumerations
# =============================================================================


class ColorspaceTag(Enum):
    """Colorspaces a color can be tagged with. Values are CSS names."""
    SRGB = "srgb"
    LINEAR_SRGB = "srgb-linear"
    DISPLAY_P3 = "display-p3"
    XYZ_D65 = "xyz-d65"
    OKLAB = "oklab"
    OKLCH = "oklch"

    @property
    def hue_index(self) -> Optional[int]:
        """Index of the hue component, or None for rectangular spaces."""
        return 2 if self is ColorspaceTag.OKLCH else None

    @property
    def is_rgb_like(self) -> bool:
        """True for spaces whose components are red/green/blue analogues."""
        return self in _RGB_LIKE

    @classmethod
    def parse(cls, value: Union[str, ColorspaceTag]) -> ColorspaceTag:
        """Coerce a tag or a CSS colorspace name into a ColorspaceTag."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _COLORSPACE_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown colorspace: {value!r}") from None


_RGB_LIKE = frozenset({
    ColorspaceTag.SRGB,
    ColorspaceTag.LINEAR_SRGB,
    ColorspaceTag.DISPLAY_P3,
    ColorspaceTag.XYZ_D65,
})

_COLORSPACE_ALIASES = {
    "xyz": "xyz-d65",
    "linear-srgb": "srgb-linear",
    "p3": "display-p3",
}


class HueDirection(Enum):
    """Hue interpolation method for cylindrical spaces (CSS Color 4 §12.4)."""
    SHORTER = "shorter"
    LONGER = "longer"
    INCREASING = "increasing"
    DECREASING = "decreasing"

    @classmethod
    def parse(cls, value: Union[str, HueDirection]) -> HueDirection:
        """Coerce a direction or its CSS keyword into a HueDirection."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown hue direction: {value!r}") from None


# =============================================================================
# Helpers
# =============================================================================


def _as_components(values: Iterable[float]) -> Components:
    """Coerce any 4-element sequence of numbers to a tuple of floats."""
    comps = tuple(float(v) for v in values)
    if len(comps) != 4:
        raise ValueError(f"Expected 4 components, got {len(comps)}")
    return comps  # type: ignore[return-value]


def _convert_opaque(components: Components, src: ColorspaceTag, dst: ColorspaceTag) -> tuple[float, float, float]:
    from smoothramp.space.colorspace import convert
    converted = convert(np.array(components[:3]), src, dst)
    return tuple(converted.tolist())  # type: ignore[return-value]


# =============================================================================
# Alpha Colors
# =============================================================================


@dataclass(frozen=True, slots=True)
class AlphaColor:
    """
    A color with separated (straight) alpha.

    Attributes:
        cs: Colorspace of the components
        components: (c0, c1, c2, alpha)
    """
    cs: ColorspaceTag
    components: Components

    def __post_init__(self) -> None:
        object.__setattr__(self, "cs", ColorspaceTag.parse(self.cs))
        object.__setattr__(self, "components", _as_components(self.components))

    @property
    def alpha(self) -> float:
        return self.components[ALPHA_INDEX]

    def premultiply(self) -> PremulColor:
        """Multiply the non-hue components by alpha."""
        a = self.alpha
        hue = self.cs.hue_index
        scaled = [c if i == hue else c * a for i, c in enumerate(self.components[:3])]
        return PremulColor(self.cs, (*scaled, a))

    def convert(self, cs: ColorspaceTag) -> AlphaColor:
        """Convert to another colorspace. Alpha is carried unchanged."""
        cs = ColorspaceTag.parse(cs)
        if cs is self.cs:
            return self
        return AlphaColor(cs, (*_convert_opaque(self.components, self.cs, cs), self.alpha))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"cs": self.cs.value, "components": list(self.components)}

    @classmethod
    def from_dict(cls, data: dict) -> AlphaColor:
        """Deserialize from dictionary."""
        return cls(cs=ColorspaceTag.parse(data["cs"]), components=data["components"])


@dataclass(frozen=True, slots=True)
class PremulColor:
    """
    A color with premultiplied alpha.

    Premultiplied colors blend correctly with a plain component-wise lerp,
    which is what a gradient renderer does between two stops.

    Attributes:
        cs: Colorspace of the components
        components: (c0 * alpha, c1 * alpha, c2 * alpha, alpha), except
            that a hue component is stored unscaled
    """
    cs: ColorspaceTag
    components: Components

    def __post_init__(self) -> None:
        object.__setattr__(self, "cs", ColorspaceTag.parse(self.cs))
        object.__setattr__(self, "components", _as_components(self.components))

    @property
    def alpha(self) -> float:
        return self.components[ALPHA_INDEX]

    def un_premultiply(self) -> AlphaColor:
        """Divide the non-hue components by alpha. Alpha 0 leaves them as is."""
        a = self.alpha
        a_inv = 1.0 if a == 0.0 else 1.0 / a
        hue = self.cs.hue_index
        scaled = [c if i == hue else c * a_inv for i, c in enumerate(self.components[:3])]
        return AlphaColor(self.cs, (*scaled, a))

    def convert(self, cs: ColorspaceTag) -> PremulColor:
        """Convert to another colorspace, going through separated alpha."""
        cs = ColorspaceTag.parse(cs)
        if cs is self.cs:
            return self
        return self.un_premultiply().convert(cs).premultiply()

    def lerp_rect(self, other: PremulColor, t: float) -> PremulColor:
        """
        Component-wise linear interpolation.

        Hue is treated as an ordinary number, which is what a renderer
        blending premultiplied components does.
        """
        return PremulColor(
            self.cs,
            tuple(a + (b - a) * t for a, b in zip(self.components, other.components)),
        )

    def difference(self, other: PremulColor) -> float:
        """
        Euclidean distance over all four components.

        In OKLab this is ΔEOK extended with the alpha difference.
        """
        if other.cs is not self.cs:
            raise ValueError(
                f"Cannot compare colors in {self.cs.value} and {other.cs.value}"
            )
        from smoothramp.space.colorspace import delta_e_ok
        return delta_e_ok(np.array(self.components), np.array(other.components))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"cs": self.cs.value, "components": list(self.components)}

    @classmethod
    def from_dict(cls, data: dict) -> PremulColor:
        """Deserialize from dictionary."""
        return cls(cs=ColorspaceTag.parse(data["cs"]), components=data["components"])


# =============================================================================
# CSS Colors (missing components)
# =============================================================================

# Chroma below this makes the OKLCH hue powerless
POWERLESS_CHROMA = 1e-6


def _carry_missing(missing: frozenset[int], src: ColorspaceTag, dst: ColorspaceTag) -> frozenset[int]:
    """
    Missing flags that survive a conversion (CSS Color 4 §12.2).

    Only analogous components carry: red/green/blue (and X/Y/Z) among the
    RGB-like spaces, lightness between OKLab and OKLCH, and alpha always.
    """
    if src is dst:
        return missing
    carried = missing & {ALPHA_INDEX}
    if src.is_rgb_like and dst.is_rgb_like:
        carried |= missing & {0, 1, 2}
    elif not src.is_rgb_like and not dst.is_rgb_like:
        carried |= missing & {0}
    return frozenset(carried)


@dataclass(frozen=True, slots=True)
class CssColor:
    """
    A tagged color that may have missing ("none") components.

    Missing components are stored as 0.0, which is how they are treated
    whenever the color is used outside interpolation.

    Attributes:
        cs: Colorspace of the components
        components: (c0, c1, c2, alpha)
        missing: Indices of missing components
    """
    cs: ColorspaceTag
    components: Components
    missing: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cs", ColorspaceTag.parse(self.cs))
        missing = frozenset(self.missing)
        if not missing <= {0, 1, 2, 3}:
            raise ValueError(f"Missing component indices must be 0-3, got {sorted(missing)}")
        comps = _as_components(self.components)
        if missing:
            comps = tuple(0.0 if i in missing else c for i, c in enumerate(comps))
        object.__setattr__(self, "components", comps)
        object.__setattr__(self, "missing", missing)

    # -- constructors ---------------------------------------------------------

    @classmethod
    def from_components(
        cls,
        cs: Union[str, ColorspaceTag],
        components: Iterable[Optional[float]],
    ) -> CssColor:
        """Build a color where None marks a missing component."""
        values = list(components)
        missing = frozenset(i for i, v in enumerate(values) if v is None)
        return cls(
            ColorspaceTag.parse(cs),
            tuple(0.0 if v is None else v for v in values),
            missing,
        )

    @classmethod
    def srgb(cls, r: Optional[float], g: Optional[float], b: Optional[float],
             alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.SRGB, (r, g, b, alpha))

    @classmethod
    def linear_srgb(cls, r: Optional[float], g: Optional[float], b: Optional[float],
                    alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.LINEAR_SRGB, (r, g, b, alpha))

    @classmethod
    def display_p3(cls, r: Optional[float], g: Optional[float], b: Optional[float],
                   alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.DISPLAY_P3, (r, g, b, alpha))

    @classmethod
    def xyz_d65(cls, x: Optional[float], y: Optional[float], z: Optional[float],
                alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.XYZ_D65, (x, y, z, alpha))

    @classmethod
    def oklab(cls, L: Optional[float], a: Optional[float], b: Optional[float],
              alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.OKLAB, (L, a, b, alpha))

    @classmethod
    def oklch(cls, L: Optional[float], C: Optional[float], H: Optional[float],
              alpha: Optional[float] = 1.0) -> CssColor:
        return cls.from_components(ColorspaceTag.OKLCH, (L, C, H, alpha))

    @classmethod
    def from_alpha_color(cls, color: AlphaColor) -> CssColor:
        return cls(color.cs, color.components)

    # -- queries / conversions ------------------------------------------------

    @property
    def alpha(self) -> float:
        return self.components[ALPHA_INDEX]

    def convert(self, cs: ColorspaceTag) -> CssColor:
        """Convert to another colorspace, carrying analogous missing flags."""
        cs = ColorspaceTag.parse(cs)
        if cs is self.cs:
            return self
        opaque = _convert_opaque(self.components, self.cs, cs)
        return CssColor(cs, (*opaque, self.alpha), _carry_missing(self.missing, self.cs, cs))

    def powerless_to_missing(self) -> CssColor:
        """Mark a hue as missing when chroma is too small for it to matter."""
        hue = self.cs.hue_index
        if hue is None or hue in self.missing:
            return self
        if abs(self.components[1]) >= POWERLESS_CHROMA:
            return self
        return CssColor(self.cs, self.components, self.missing | {hue})

    def to_alpha_color(self, cs: Optional[ColorspaceTag] = None) -> AlphaColor:
        """
        Drop missing flags (as zeros) and convert.

        Args:
            cs: Target colorspace (default: this color's own)
        """
        return AlphaColor(self.cs, self.components).convert(cs or self.cs)

    def interpolate(
        self,
        other: CssColor,
        cs: Union[str, ColorspaceTag] = ColorspaceTag.OKLAB,
        direction: Union[str, HueDirection] = HueDirection.SHORTER,
    ) -> Interpolator:
        """Build an interpolator from this color to `other`."""
        from smoothramp.space.interpolate import Interpolator
        return Interpolator(self, other, cs, direction)
