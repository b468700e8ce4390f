from __future__ import annotations

"""
Low-level helpers shared by the serializers: number rendering and token joining.
"""

from cloudinary_kit.core import numbers, utils

__all__ = [
    "numbers",
    "utils",
]
