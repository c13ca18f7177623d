# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Gradient stop serializers.

Formats a sequence of GradientStop for a renderer: structured JSON that
keeps the exact premultiplied components, or a CSS ``linear-gradient()``
with each stop gamut-clipped to sRGB hex.
"""

from __future__ import annotations

import json
from typing import Iterable, Sequence

from smoothramp.runtime.serializers.base import SerializerFormat
from smoothramp.schema import ColorspaceTag, GradientStop
from smoothramp.space.colorspace import srgb_to_hex


def to_json(
    stops: Iterable[GradientStop],
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize stops as JSON.

    Args:
        stops: Stops in position order.
        format: JSON (compact) or JSON_PRETTY.

    Returns:
        JSON string.

    Example::

        {"stops":[{"position":0.0,"color":{"cs":"oklab","components":[...]}}, ...]}
    """
    data = {"stops": [s.to_dict() for s in stops]}
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def _stop_hex(stop: GradientStop) -> str:
    """sRGB hex for a stop, with an alpha byte when translucent."""
    color = stop.color.un_premultiply().convert(ColorspaceTag.SRGB)
    return srgb_to_hex(color.components[:3], alpha=color.alpha)


def _format_percent(position: float) -> str:
    return f"{round(position * 100.0, 4):g}%"


def to_css_gradient(
    stops: Sequence[GradientStop],
    *,
    angle: str = "to right",
) -> str:
    """Serialize stops as a CSS linear-gradient.

    CSS blends stops in gamma-encoded sRGB, so the result is only as
    accurate as the tolerance when the stops were sampled with
    ``output_cs=srgb``.

    Args:
        stops: At least two stops in position order.
        angle: Gradient line, e.g. ``"to right"`` or ``"45deg"``.

    Returns:
        ``linear-gradient(...)`` string.

    Example::

        linear-gradient(to right, #FF0000 0%, #0000FF 100%)
    """
    if len(stops) < 2:
        raise ValueError("Gradient must have at least 2 stops")
    parts = [f"{_stop_hex(s)} {_format_percent(s.position)}" for s in stops]
    return f"linear-gradient({angle}, {', '.join(parts)})"


def serialize(
    stops: Sequence[GradientStop],
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize stops in any supported format."""
    if format == SerializerFormat.CSS:
        return to_css_gradient(stops)
    return to_json(stops, format=format)
