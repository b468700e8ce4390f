from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, model_validator

from cloudinary_kit.core.numbers import format_number


class VideoTrim(BaseModel):
    """
    Time window in seconds. Build it with one of the six factories:
    start_end, start_duration, end_duration, start_only, end_only, duration_only.

    Values are carried verbatim: no check that end > start or that
    seconds are non-negative.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    start: Optional[float] = None
    end: Optional[float] = None
    duration: Optional[float] = None

    @model_validator(mode="after")
    def _one_or_two_fields(self) -> "VideoTrim":
        populated = sum(v is not None for v in (self.start, self.end, self.duration))
        if populated == 0:
            raise ValueError("VideoTrim needs at least one of start, end, duration")
        if populated == 3:
            raise ValueError("VideoTrim cannot set start, end and duration together")
        return self

    @classmethod
    def start_end(cls, start: float, end: float) -> "VideoTrim":
        return cls(start=start, end=end)

    @classmethod
    def start_duration(cls, start: float, duration: float) -> "VideoTrim":
        return cls(start=start, duration=duration)

    @classmethod
    def end_duration(cls, end: float, duration: float) -> "VideoTrim":
        return cls(end=end, duration=duration)

    @classmethod
    def start_only(cls, start: float) -> "VideoTrim":
        return cls(start=start)

    @classmethod
    def end_only(cls, end: float) -> "VideoTrim":
        return cls(end=end)

    @classmethod
    def duration_only(cls, duration: float) -> "VideoTrim":
        return cls(duration=duration)

    def tokens(self) -> List[str]:
        out: List[str] = []
        if self.start is not None:
            out.append(f"so_{format_number(self.start)}")
        if self.end is not None:
            out.append(f"eo_{format_number(self.end)}")
        if self.duration is not None:
            out.append(f"du_{format_number(self.duration)}")
        return out
