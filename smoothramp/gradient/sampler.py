# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Adaptive gradient sampling.

Produces the stops of a piecewise-linear approximation of a color
interpolation, placing as few stops as possible while keeping the ΔEOK
between each segment's true midpoint and its linear midpoint within a
tolerance.

Subdivision is tracked as an integer counter `t0` and an exact power-of-two
step `dt`, so the segment start `t0 * dt` is exact in binary floating point.
Rejecting a segment doubles the counter and halves the step. Accepting one
increments the counter, then strips its trailing zero bits and scales the
step up by the same power of two, returning to the coarsest aligned step.
Over a pass this bounds the number of interpolator evaluations linearly in
the number of stops.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Union

from smoothramp.schema import (
    MAX_SUBDIVISION_DEPTH,
    ColorspaceTag,
    CssColor,
    HueDirection,
    PremulColor,
)
from smoothramp.schema.gradient import check_max_depth
from smoothramp.space.interpolate import Interpolator

log = logging.getLogger(__name__)

Stop = tuple[float, PremulColor]


def _trailing_zeros(n: int) -> int:
    """Number of trailing zero bits of a positive integer."""
    return (n & -n).bit_length() - 1


class GradientIter:
    """
    Lazy, finite, non-restartable sequence of gradient stops.

    Each stop is a (position, color) pair with the color premultiplied in
    the output colorspace. Positions start at exactly 0.0, strictly
    increase and end at exactly 1.0.

    Use advance() to pull one stop at a time, or iterate.
    """

    def __init__(
        self,
        interpolator: Interpolator,
        target0: PremulColor,
        target1: PremulColor,
        tolerance: float,
        max_depth: int = MAX_SUBDIVISION_DEPTH,
    ) -> None:
        self.interpolator = interpolator
        # ΔEOK units
        self.tolerance = tolerance
        self.max_depth = max_depth
        self.output_cs = target0.cs

        self.t0 = 0
        self.dt = 0.0
        self.target0 = target0
        self.target1 = target1
        self.end_color = target1

        self._min_dt = 2.0 ** -max_depth
        self._done = False

        # Work counters
        self.evaluations = 0
        self.subdivisions = 0
        self.forced = 0
        self.emitted = 0

    def __iter__(self) -> Iterator[Stop]:
        return self

    def __next__(self) -> Stop:
        stop = self.advance()
        if stop is None:
            raise StopIteration
        return stop

    def _eval(self, t: float) -> CssColor:
        self.evaluations += 1
        return self.interpolator.eval(t)

    def _to_output(self, color: CssColor) -> PremulColor:
        return color.to_alpha_color(self.output_cs).premultiply()

    def advance(self) -> Optional[Stop]:
        """
        Produce the next stop, or None once the stop at 1.0 has been emitted.

        Never raises.
        """
        if self.dt == 0.0:
            self.dt = 1.0
            self.emitted += 1
            return 0.0, self.target0

        t0 = self.t0 * self.dt
        if t0 == 1.0:
            if not self._done:
                self._done = True
                log.debug(
                    "gradient done: %d stops, %d evaluations, %d subdivisions, %d forced",
                    self.emitted, self.evaluations, self.subdivisions, self.forced,
                )
            return None

        while True:
            midpoint = self._eval(t0 + 0.5 * self.dt)
            midpoint_oklab = midpoint.to_alpha_color(ColorspaceTag.OKLAB).premultiply()
            approx = self.target0.lerp_rect(self.target1, 0.5)
            error = midpoint_oklab.difference(approx.convert(ColorspaceTag.OKLAB))

            within = error <= self.tolerance
            if within or self.dt <= self._min_dt:
                if not within:
                    self.forced += 1
                    log.debug(
                        "depth cap %d reached at t=%r (error %.6g > %.6g), accepting",
                        self.max_depth, t0, error, self.tolerance,
                    )
                t1 = t0 + self.dt
                self.t0 += 1
                shift = _trailing_zeros(self.t0)
                self.t0 >>= shift
                self.dt *= 1 << shift
                self.target0 = self.target1
                new_t1 = t1 + self.dt
                if new_t1 < 1.0:
                    self.target1 = self._to_output(self._eval(new_t1))
                else:
                    self.target1 = self.end_color
                self.emitted += 1
                return t1, self.target0

            self.t0 *= 2
            self.dt *= 0.5
            self.subdivisions += 1
            self.target1 = self._to_output(midpoint)


def gradient(
    color0: CssColor,
    color1: CssColor,
    interp_cs: Union[str, ColorspaceTag] = ColorspaceTag.OKLAB,
    direction: Union[str, HueDirection] = HueDirection.SHORTER,
    tolerance: float = 0.01,
    *,
    output_cs: Optional[Union[str, ColorspaceTag]] = None,
    max_depth: int = MAX_SUBDIVISION_DEPTH,
) -> GradientIter:
    """
    Start sampling the gradient from color0 to color1.

    Args:
        color0: Start color (missing components are resolved from color1)
        color1: End color (missing components are resolved from color0)
        interp_cs: Colorspace the continuous interpolation runs in
        direction: Hue arc when interp_cs is cylindrical
        tolerance: Maximum ΔEOK between each segment's true midpoint and
            the midpoint of its linear approximation. Zero or negative
            values are legal and subdivide down to max_depth.
        output_cs: Colorspace of the emitted premultiplied colors, i.e. the
            space the renderer blends in (default: interp_cs)
        max_depth: Subdivision cap. A segment spanning 2**-max_depth of the
            gradient is accepted unconditionally, so at most
            2**max_depth + 1 stops are emitted.

    Returns:
        GradientIter yielding (position, PremulColor) pairs

    Raises:
        ValueError: On an unknown colorspace or hue direction, or a
            max_depth outside 0-52. Iteration itself never raises.

    Example:
        >>> red = CssColor.srgb(1.0, 0.0, 0.0)
        >>> blue = CssColor.srgb(0.0, 0.0, 1.0)
        >>> [t for t, _ in gradient(red, blue, "oklab", tolerance=0.02)]
        [0.0, 1.0]
    """
    check_max_depth(max_depth)
    interp_cs = ColorspaceTag.parse(interp_cs)
    out_cs = ColorspaceTag.parse(output_cs) if output_cs is not None else interp_cs

    interpolator = color0.interpolate(color1, interp_cs, direction)
    if color0.missing:
        color0 = interpolator.eval(0.0)
    target0 = color0.to_alpha_color(out_cs).premultiply()
    if color1.missing:
        color1 = interpolator.eval(1.0)
    target1 = color1.to_alpha_color(out_cs).premultiply()

    log.debug(
        "gradient: %s -> %s in %s (%s), output %s, tolerance %g, max_depth %d",
        color0.cs.value, color1.cs.value, interp_cs.value,
        interpolator.direction.value, out_cs.value, tolerance, max_depth,
    )
    return GradientIter(interpolator, target0, target1, tolerance, max_depth)
