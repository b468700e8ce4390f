from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from cloudinary_kit.core.numbers import format_number, truncate
from cloudinary_kit.core.utils import join_tokens
from cloudinary_kit.transformation.enums import AudioCodec, Crop, VideoCodec, VideoFlag, VideoFormat
from cloudinary_kit.transformation.trim import VideoTrim
from cloudinary_kit.transformation.values import AspectRatio, Framerate, Gravity, PlatformCapability

log = logging.getLogger(__name__)

DEFAULT_VIDEO_CODEC = PlatformCapability().default_video_codec


class VideoOptions(BaseModel):
    """
    Inline video transformation, serialized as two groups:
    encoding (format, codecs, fps, quality) / transformation (geometry, trim, ...).
    f_mp4 is always emitted.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    audio_codec: AudioCodec = AudioCodec.PASSTHROUGH
    video_codec: VideoCodec = DEFAULT_VIDEO_CODEC
    crop: Crop = Crop.NONE
    effect: Optional[str] = None
    flags: Tuple[VideoFlag, ...] = ()
    framerate: Optional[Framerate] = None
    gravity: Gravity = Field(default_factory=Gravity.center)
    quality: Optional[int] = None
    trim: Optional[VideoTrim] = None
    width: Optional[float] = None
    height: Optional[float] = None
    aspect_ratio: Optional[AspectRatio] = None
    scale: float = 1.0

    @classmethod
    def for_platform(cls, capability: PlatformCapability, **fields: Any) -> "VideoOptions":
        fields.setdefault("video_codec", capability.default_video_codec)
        fields.setdefault("scale", capability.display_scale)
        return cls(**fields)

    def encoding_params(self) -> List[str]:
        params = [VideoFormat.MP4.token]

        if self.audio_codec is not AudioCodec.PASSTHROUGH:
            params.append(self.audio_codec.token)

        if self.video_codec is not VideoCodec.AUTO:
            params.append(self.video_codec.token)

        if self.framerate is not None:
            params.append("fps_" + self.framerate.token)

        if self.quality is not None:
            params.append(f"q_{self.quality}")

        return params

    def transformation_params(self) -> List[str]:
        params: List[str] = []

        if self.crop is not Crop.NONE:
            params.append(self.crop.token)

        if self.effect is not None:
            params.append("e_" + self.effect)

        if self.flags:
            params.append(".".join(f.value for f in self.flags))

        if self.gravity != Gravity.center():
            params.append("g_" + self.gravity.token)

        if self.trim is not None:
            params.extend(self.trim.tokens())

        if self.height is not None:
            params.append("h_" + truncate(self.height))

        if self.width is not None:
            params.append("w_" + truncate(self.width))

        if self.aspect_ratio is not None:
            params.append("ar_" + self.aspect_ratio.token)

        if self.scale != 1.0:
            params.append("dpr_" + format_number(self.scale))

        return params

    def serialized(self) -> str:
        groups = [
            ",".join(self.encoding_params()),
            ",".join(self.transformation_params()),
        ]
        out = join_tokens(groups, sep="/")
        log.debug("serialized video options", extra={"segment": out})
        return out
