# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Serializers for gradient stop delivery to renderers.

All serializers preserve stop order and positions exactly.
"""

from smoothramp.runtime.serializers.base import SerializerFormat
from smoothramp.runtime.serializers.stops import serialize, to_css_gradient, to_json

__all__ = [
    "SerializerFormat",
    "serialize",
    "to_json",
    "to_css_gradient",
]
