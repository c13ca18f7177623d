# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Gradient core for smoothramp.

Adaptive placement of gradient stops so that straight segments between
them stay within a perceptual tolerance of the true interpolation.
"""

from smoothramp.gradient.sampler import GradientIter, gradient
from smoothramp.gradient.stops import sample_gradient

__all__ = ["gradient", "GradientIter", "sample_gradient"]
