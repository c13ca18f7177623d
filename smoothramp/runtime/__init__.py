# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Delivery runtime for smoothramp.

Serialization of sampled stops for renderers: JSON for programs, a CSS
``linear-gradient()`` for browsers. The delivery layer never modifies
stop positions or order.
"""

from smoothramp.runtime.serializers import (
    SerializerFormat,
    serialize,
    to_css_gradient,
    to_json,
)

__all__ = [
    "serialize",
    "to_json",
    "to_css_gradient",
    "SerializerFormat",
]
