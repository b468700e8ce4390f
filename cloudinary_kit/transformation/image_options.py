from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from cloudinary_kit.core.numbers import format_number, truncate
from cloudinary_kit.core.utils import join_tokens
from cloudinary_kit.transformation.enums import Crop, ImageFlag, ImageFormat
from cloudinary_kit.transformation.layers import BaseLayer
from cloudinary_kit.transformation.trim import VideoTrim
from cloudinary_kit.transformation.values import AspectRatio, Gravity, PlatformCapability, Quality

log = logging.getLogger(__name__)

DEFAULT_IMAGE_FORMAT = ImageFormat.JPEG


class ImageOptions(BaseModel):
    """
    Inline image transformation. Every parameter left at its default is
    skipped, so ImageOptions(image_format=ImageFormat.AUTO) serializes to "".
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    image_format: ImageFormat = DEFAULT_IMAGE_FORMAT
    crop: Crop = Crop.NONE
    effect: Optional[str] = None
    flags: Tuple[ImageFlag, ...] = ()
    gravity: Gravity = Field(default_factory=Gravity.center)
    quality: Optional[Quality] = None
    trim: Optional[VideoTrim] = None
    width: Optional[float] = None
    height: Optional[float] = None
    aspect_ratio: Optional[AspectRatio] = None
    scale: float = 1.0
    layers: Tuple[BaseLayer, ...] = ()

    @classmethod
    def for_platform(cls, capability: PlatformCapability, **fields: Any) -> "ImageOptions":
        fields.setdefault("scale", capability.display_scale)
        return cls(**fields)

    def params(self) -> List[str]:
        params: List[str] = []

        if self.image_format is not ImageFormat.AUTO:
            params.append(self.image_format.token)

        if self.crop is not Crop.NONE:
            params.append(self.crop.token)

        if self.effect is not None:
            params.append("e_" + self.effect)

        if self.flags:
            params.append(".".join(f.value for f in self.flags))

        if self.gravity != Gravity.center():
            params.append("g_" + self.gravity.token)

        if self.quality is not None:
            params.append("q_" + self.quality.token)

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
        # params first, then one segment per layer; an empty params group is dropped
        segments = [",".join(self.params())]
        segments.extend(layer.serialized() for layer in self.layers)
        out = join_tokens(segments, sep="/")
        log.debug("serialized image options", extra={"segment": out})
        return out
