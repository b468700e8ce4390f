from __future__ import annotations

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, model_validator

from cloudinary_kit.core.numbers import format_number
from cloudinary_kit.transformation.enums import GravityDirection, QualityPreset, VideoCodec


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

# -----------------------------
# Gravity
# -----------------------------

class Gravity(_Value):
    """Where crops and overlays anchor. Two gravities are equal iff their tokens match."""
    direction: GravityDirection = GravityDirection.CENTER
    subject: Optional[str] = None   # only meaningful for auto, e.g. "face" detector

    @property
    def token(self) -> str:
        if self.direction is GravityDirection.AUTO and self.subject:
            return f"auto:{self.subject}"
        return self.direction.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gravity):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash(self.token)

    @classmethod
    def auto(cls, subject: Optional[str] = None) -> "Gravity":
        return cls(direction=GravityDirection.AUTO, subject=subject)

    @classmethod
    def center(cls) -> "Gravity":
        return cls(direction=GravityDirection.CENTER)

    @classmethod
    def north(cls) -> "Gravity":
        return cls(direction=GravityDirection.NORTH)

    @classmethod
    def south(cls) -> "Gravity":
        return cls(direction=GravityDirection.SOUTH)

    @classmethod
    def east(cls) -> "Gravity":
        return cls(direction=GravityDirection.EAST)

    @classmethod
    def west(cls) -> "Gravity":
        return cls(direction=GravityDirection.WEST)

    @classmethod
    def north_east(cls) -> "Gravity":
        return cls(direction=GravityDirection.NORTH_EAST)

    @classmethod
    def north_west(cls) -> "Gravity":
        return cls(direction=GravityDirection.NORTH_WEST)

    @classmethod
    def south_east(cls) -> "Gravity":
        return cls(direction=GravityDirection.SOUTH_EAST)

    @classmethod
    def south_west(cls) -> "Gravity":
        return cls(direction=GravityDirection.SOUTH_WEST)

    @classmethod
    def face(cls) -> "Gravity":
        return cls(direction=GravityDirection.FACE)

# -----------------------------
# Quality
# -----------------------------

class Quality(_Value):
    """Named preset or an explicit 0..100 level. Levels are not range checked."""
    preset: Optional[QualityPreset] = None
    level: Optional[int] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "Quality":
        if (self.preset is None) == (self.level is None):
            raise ValueError("Quality needs exactly one of preset or level")
        return self

    @property
    def token(self) -> str:
        if self.level is not None:
            return str(self.level)
        return self.preset.value

    @classmethod
    def auto(cls) -> "Quality":
        return cls(preset=QualityPreset.AUTO)

    @classmethod
    def best(cls) -> "Quality":
        return cls(preset=QualityPreset.BEST)

    @classmethod
    def good(cls) -> "Quality":
        return cls(preset=QualityPreset.GOOD)

    @classmethod
    def eco(cls) -> "Quality":
        return cls(preset=QualityPreset.ECO)

    @classmethod
    def low(cls) -> "Quality":
        return cls(preset=QualityPreset.LOW)

    @classmethod
    def value(cls, level: int) -> "Quality":
        return cls(level=level)

# -----------------------------
# Aspect ratio / framerate
# -----------------------------

class AspectRatio(_Value):
    width: Optional[int] = None
    height: Optional[int] = None
    ratio_value: Optional[float] = None

    @model_validator(mode="after")
    def _ratio_or_decimal(self) -> "AspectRatio":
        pair = self.width is not None and self.height is not None
        partial = (self.width is None) != (self.height is None)
        if partial or pair == (self.ratio_value is not None):
            raise ValueError("AspectRatio needs width and height, or ratio_value alone")
        return self

    @property
    def token(self) -> str:
        if self.ratio_value is not None:
            return format_number(self.ratio_value)
        return f"{self.width}:{self.height}"

    @classmethod
    def ratio(cls, width: int, height: int) -> "AspectRatio":
        return cls(width=width, height=height)

    @classmethod
    def decimal(cls, value: Union[int, float]) -> "AspectRatio":
        return cls(ratio_value=value)

class Framerate(_Value):
    low: int
    high: int

    @property
    def token(self) -> str:
        if self.low == self.high:
            return str(self.low)
        return f"{self.low}-{self.high}"

    @classmethod
    def exact(cls, fps: int) -> "Framerate":
        return cls(low=fps, high=fps)

    @classmethod
    def between(cls, low: int, high: int) -> "Framerate":
        return cls(low=low, high=high)

# -----------------------------
# Named preset / platform
# -----------------------------

class NamedTransformation(_Value):
    """A transformation stored server-side and referenced by name."""
    name: str

    @property
    def segment(self) -> str:
        return f"t_{self.name}"

class PlatformCapability(_Value):
    """
    What the rendering client can handle. Supplied by the caller (or settings)
    instead of probing the host platform.
    """
    supports_hevc: bool = True
    display_scale: float = 1.0

    @property
    def default_video_codec(self) -> VideoCodec:
        return VideoCodec.H265 if self.supports_hevc else VideoCodec.H264
