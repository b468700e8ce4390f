from __future__ import annotations

"""
Transformation engine:
- enums / values / trim: parameter types and their tokens
- layers: overlay segments
- image_options / video_options: inline parameter serialization
- host / transformation: URL assembly
"""

from cloudinary_kit.transformation import (
    enums,
    values,
    trim,
    layers,
    image_options,
    video_options,
    host,
    transformation,
)

__all__ = [
    "enums",
    "values",
    "trim",
    "layers",
    "image_options",
    "video_options",
    "host",
    "transformation",
]
