from __future__ import annotations

"""
Application-level utilities:
- settings
- logging
- error definitions

bootstrap is imported explicitly (cloudinary_kit.app.bootstrap) since it
depends on the transformation package.
"""

from cloudinary_kit.app import errors, logging, settings

__all__ = [
    "errors",
    "logging",
    "settings",
]
