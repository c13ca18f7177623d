# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for continuous interpolation (missing components, hue arcs, alpha)."""

import pytest

from smoothramp.schema import ColorspaceTag, CssColor, HueDirection
from smoothramp.space.interpolate import Interpolator, fixup_hues


def _hue_at(c0, c1, direction, t=0.5):
    return c0.interpolate(c1, ColorspaceTag.OKLCH, direction).eval(t).components[2]


class TestFixupHues:

    def test_shorter_wraps_forward(self):
        assert fixup_hues(350.0, 10.0, HueDirection.SHORTER) == (350.0, 370.0)

    def test_shorter_wraps_backward(self):
        assert fixup_hues(10.0, 350.0, HueDirection.SHORTER) == (370.0, 350.0)

    def test_shorter_no_wrap(self):
        assert fixup_hues(30.0, 140.0, HueDirection.SHORTER) == (30.0, 140.0)

    def test_longer(self):
        assert fixup_hues(30.0, 140.0, HueDirection.LONGER) == (390.0, 140.0)
        assert fixup_hues(350.0, 10.0, HueDirection.LONGER) == (350.0, 10.0)

    def test_increasing(self):
        assert fixup_hues(350.0, 10.0, HueDirection.INCREASING) == (350.0, 370.0)
        assert fixup_hues(10.0, 350.0, HueDirection.INCREASING) == (10.0, 350.0)

    def test_decreasing(self):
        assert fixup_hues(10.0, 350.0, HueDirection.DECREASING) == (370.0, 350.0)
        assert fixup_hues(350.0, 10.0, HueDirection.DECREASING) == (350.0, 10.0)

    def test_normalizes_input(self):
        assert fixup_hues(-10.0, 370.0, HueDirection.SHORTER) == (350.0, 370.0)


class TestHueDirection:
    """Midpoint hue between 350° and 10° for each arc."""

    c0 = CssColor.oklch(0.7, 0.1, 350.0)
    c1 = CssColor.oklch(0.7, 0.1, 10.0)

    def test_shorter_through_zero(self):
        assert _hue_at(self.c0, self.c1, HueDirection.SHORTER) == pytest.approx(0.0, abs=1e-9)

    def test_longer_through_180(self):
        assert _hue_at(self.c0, self.c1, HueDirection.LONGER) == pytest.approx(180.0, abs=1e-9)

    def test_increasing_through_zero(self):
        assert _hue_at(self.c0, self.c1, HueDirection.INCREASING) == pytest.approx(0.0, abs=1e-9)

    def test_decreasing_through_180(self):
        assert _hue_at(self.c0, self.c1, HueDirection.DECREASING) == pytest.approx(180.0, abs=1e-9)

    def test_hue_normalized(self):
        hue = _hue_at(self.c0, self.c1, HueDirection.SHORTER, t=0.75)
        assert 0.0 <= hue < 360.0
        assert hue == pytest.approx(5.0, abs=1e-9)


class TestEndpoints:

    @pytest.mark.parametrize("cs", list(ColorspaceTag))
    def test_endpoints_match(self, cs):
        c0 = CssColor.srgb(0.9, 0.2, 0.1)
        c1 = CssColor.srgb(0.1, 0.4, 0.8)
        interp = c0.interpolate(c1, cs)
        start = interp.eval(0.0).to_alpha_color(ColorspaceTag.SRGB)
        end = interp.eval(1.0).to_alpha_color(ColorspaceTag.SRGB)
        assert start.components == pytest.approx(c0.components, abs=1e-8)
        assert end.components == pytest.approx(c1.components, abs=1e-8)

    def test_result_tagged_with_interp_space(self):
        interp = CssColor.srgb(1.0, 0.0, 0.0).interpolate(CssColor.srgb(0.0, 0.0, 1.0), "oklab")
        assert interp.eval(0.5).cs is ColorspaceTag.OKLAB

    def test_deterministic(self):
        interp = Interpolator(CssColor.srgb(1.0, 0.0, 0.0), CssColor.srgb(0.0, 1.0, 0.0), "oklch")
        assert interp.eval(0.3) == interp.eval(0.3)

    def test_string_arguments(self):
        interp = Interpolator(CssColor.srgb(1.0, 0.0, 0.0), CssColor.srgb(0.0, 1.0, 0.0), "oklch", "longer")
        assert interp.cs is ColorspaceTag.OKLCH
        assert interp.direction is HueDirection.LONGER


class TestMissingComponents:

    def test_missing_taken_from_other_side(self):
        interp = CssColor.oklch(0.7, 0.1, None).interpolate(CssColor.oklch(0.5, 0.2, 120.0), "oklch")
        start = interp.eval(0.0)
        assert start.components == pytest.approx((0.7, 0.1, 120.0, 1.0))
        assert start.missing == frozenset()

    def test_missing_on_both_sides_stays_missing(self):
        interp = CssColor.oklch(0.5, 0.0, None).interpolate(CssColor.oklch(0.6, 0.0, None), "oklch")
        mid = interp.eval(0.5)
        assert 2 in mid.missing
        assert mid.components[0] == pytest.approx(0.55)

    def test_powerless_hue_follows_other_color(self):
        gray = CssColor.oklch(0.5, 0.0, 200.0)
        orange = CssColor.oklch(0.7, 0.1, 40.0)
        mid = gray.interpolate(orange, "oklch").eval(0.5)
        assert mid.components[2] == pytest.approx(40.0)

    def test_missing_rgb_channel(self):
        interp = CssColor.srgb(None, 0.0, 0.0).interpolate(CssColor.srgb(0.8, 1.0, 0.0), "srgb")
        assert interp.eval(0.5).components == pytest.approx((0.8, 0.5, 0.0, 1.0))


class TestAlpha:

    def test_premultiplied_blend(self):
        """A transparent endpoint contributes no color."""
        clear_red = CssColor.srgb(1.0, 0.0, 0.0, 0.0)
        blue = CssColor.srgb(0.0, 0.0, 1.0, 1.0)
        mid = clear_red.interpolate(blue, "srgb").eval(0.5)
        assert mid.components == pytest.approx((0.0, 0.0, 1.0, 0.5))

    def test_alpha_interpolates_linearly(self):
        interp = CssColor.oklab(0.5, 0.0, 0.0, 0.2).interpolate(CssColor.oklab(0.5, 0.0, 0.0, 1.0))
        assert interp.eval(0.25).alpha == pytest.approx(0.4)
