from __future__ import annotations
import math
import os
from dataclasses import dataclass

from cloudinary_kit.app.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}

def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    v = raw.lower().strip()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {raw}")

def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid number for {name}: {raw}") from exc
    if not math.isfinite(value):
        raise ConfigError(f"Invalid number for {name}: {raw}")
    return value

@dataclass(frozen=True)
class Settings:
    # Delivery
    host: str

    # Platform capability
    hevc_supported: bool
    display_scale: float

    # Logging
    log_level: str

def load_settings() -> Settings:
    return Settings(
        host=os.getenv("CLOUDINARY_HOST", "standard").strip(),
        hevc_supported=_get_bool("CLOUDINARY_HEVC_SUPPORTED", True),
        display_scale=_get_float("CLOUDINARY_DISPLAY_SCALE", 1.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip() or "INFO",
    )
