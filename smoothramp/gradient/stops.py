# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Stop extraction API.

This is the primary entry point for callers that want a finished list of
stops rather than a lazy sampler.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from smoothramp.schema import CssColor, GradientConfig, GradientStop
from smoothramp.gradient.sampler import gradient


def sample_gradient(
    color0: CssColor,
    color1: CssColor,
    config: Optional[GradientConfig] = None,
    **overrides: Any,
) -> tuple[GradientStop, ...]:
    """
    Sample a gradient into its minimal set of stops.

    Args:
        color0: Start color
        color1: End color
        config: Sampling settings (uses defaults if None)
        **overrides: GradientConfig fields replacing those in config,
            validated the same way (e.g. tolerance=0.001)

    Returns:
        Tuple of GradientStop, first at position 0.0 and last at 1.0

    Raises:
        TypeError: If an override is not a GradientConfig field
        ValueError: If an override fails GradientConfig validation

    Example:
        >>> stops = sample_gradient(
        ...     CssColor.srgb(1.0, 0.0, 0.0),
        ...     CssColor.srgb(0.0, 1.0, 0.0),
        ...     interp_cs="oklch",
        ...     output_cs="srgb",
        ... )
        >>> stops[0].position, stops[-1].position
        (0.0, 1.0)
    """
    if config is None:
        config = GradientConfig()
    if overrides:
        config = replace(config, **overrides)

    sampler = gradient(
        color0,
        color1,
        config.interp_cs,
        config.direction,
        config.tolerance,
        output_cs=config.resolved_output_cs,
        max_depth=config.max_depth,
    )
    return tuple(GradientStop(position=t, color=color) for t, color in sampler)
