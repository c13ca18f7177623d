# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for gradient stop serializers (JSON, CSS)."""

import json

import pytest

from smoothramp import ColorspaceTag, CssColor, GradientConfig, sample_gradient
from smoothramp.runtime import SerializerFormat, serialize, to_css_gradient, to_json
from smoothramp.schema import GradientStop, PremulColor


def _stop(position, components, cs=ColorspaceTag.SRGB):
    return GradientStop(position=position, color=PremulColor(cs, components))


RED_TO_BLUE = (
    _stop(0.0, (1.0, 0.0, 0.0, 1.0)),
    _stop(0.5, (0.25, 0.0, 0.25, 0.5)),
    _stop(1.0, (0.0, 0.0, 1.0, 1.0)),
)


class TestJSON:

    def test_compact(self):
        out = to_json(RED_TO_BLUE)
        assert " " not in out
        data = json.loads(out)
        assert [s["position"] for s in data["stops"]] == [0.0, 0.5, 1.0]
        assert data["stops"][0]["color"] == {"cs": "srgb", "components": [1.0, 0.0, 0.0, 1.0]}

    def test_pretty(self):
        out = to_json(RED_TO_BLUE, format=SerializerFormat.JSON_PRETTY)
        assert "\n" in out
        assert json.loads(out) == json.loads(to_json(RED_TO_BLUE))

    def test_roundtrip_to_stops(self):
        data = json.loads(to_json(RED_TO_BLUE))
        recovered = tuple(GradientStop.from_dict(s) for s in data["stops"])
        assert recovered == RED_TO_BLUE


class TestCSS:

    def test_linear_gradient(self):
        css = to_css_gradient(RED_TO_BLUE)
        assert css == "linear-gradient(to right, #FF0000 0%, #80008080 50%, #0000FF 100%)"

    def test_angle(self):
        css = to_css_gradient(RED_TO_BLUE, angle="45deg")
        assert css.startswith("linear-gradient(45deg, ")

    def test_fractional_positions(self):
        stops = (
            _stop(0.0, (1.0, 1.0, 1.0, 1.0)),
            _stop(0.0625, (0.5, 0.5, 0.5, 1.0)),
            _stop(1.0, (0.0, 0.0, 0.0, 1.0)),
        )
        assert " 6.25%" in to_css_gradient(stops)

    def test_converts_from_oklab(self):
        white = CssColor.srgb(1.0, 1.0, 1.0).to_alpha_color(ColorspaceTag.OKLAB).premultiply()
        black = CssColor.srgb(0.0, 0.0, 0.0).to_alpha_color(ColorspaceTag.OKLAB).premultiply()
        css = to_css_gradient((GradientStop(0.0, white), GradientStop(1.0, black)))
        assert css == "linear-gradient(to right, #FFFFFF 0%, #000000 100%)"

    def test_too_few_stops(self):
        with pytest.raises(ValueError, match="at least 2"):
            to_css_gradient(RED_TO_BLUE[:1])

    def test_sampled_gradient(self):
        stops = sample_gradient(
            CssColor.srgb(1.0, 0.0, 0.0),
            CssColor.srgb(0.0, 1.0, 0.0),
            GradientConfig(interp_cs="oklch", output_cs="srgb", tolerance=0.005),
        )
        css = to_css_gradient(stops)
        assert css.count("#") == len(stops)
        assert css.endswith("#00FF00 100%)")


class TestDispatch:

    def test_css(self):
        assert serialize(RED_TO_BLUE, SerializerFormat.CSS) == to_css_gradient(RED_TO_BLUE)

    def test_default_json(self):
        assert serialize(RED_TO_BLUE) == to_json(RED_TO_BLUE)
