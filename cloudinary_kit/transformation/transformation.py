from __future__ import annotations

import logging
import re
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, model_validator

from cloudinary_kit.app.errors import InvalidURLComponentError
from cloudinary_kit.transformation.enums import DeliveryType, ImageFormat, MediaType, VideoFormat
from cloudinary_kit.transformation.host import HostConfig, default_host_config
from cloudinary_kit.transformation.image_options import ImageOptions
from cloudinary_kit.transformation.values import NamedTransformation
from cloudinary_kit.transformation.video_options import VideoOptions

log = logging.getLogger(__name__)

Options = Union[ImageOptions, VideoOptions]
OutputFormat = Union[ImageFormat, VideoFormat]

DEFAULT_OUTPUT_FORMAT = {
    MediaType.IMAGE: ImageFormat.HEIC,
    MediaType.VIDEO: VideoFormat.MP4,
}

# RFC 3986 pchar: unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR = r"(?:[A-Za-z0-9\-._~!$&'()*+,;=:@]|%[0-9A-Fa-f]{2})"
_SEGMENT_RE = re.compile(rf"{_PCHAR}+")
_PATH_RE = re.compile(rf"{_PCHAR}+(?:/{_PCHAR}+)*")


def _check_segment(component: str, value: str) -> str:
    if not _SEGMENT_RE.fullmatch(value):
        raise InvalidURLComponentError(component, value)
    return value


def _check_path(component: str, value: str) -> str:
    if not _PATH_RE.fullmatch(value):
        raise InvalidURLComponentError(component, value)
    return value

# -----------------------------
# Transformation kind
# -----------------------------

class TransformationKind(BaseModel):
    """Either inline options (dynamic) or a server-side preset (named), never both."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    options: Optional[Options] = None
    preset: Optional[NamedTransformation] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "TransformationKind":
        if (self.options is None) == (self.preset is None):
            raise ValueError("TransformationKind needs exactly one of options or preset")
        return self

    @classmethod
    def dynamic(cls, options: Options) -> "TransformationKind":
        return cls(options=options)

    @classmethod
    def named(cls, preset: Union[NamedTransformation, str]) -> "TransformationKind":
        if isinstance(preset, str):
            preset = NamedTransformation(name=preset)
        return cls(preset=preset)

    def segment(self) -> str:
        if self.preset is not None:
            _check_segment("named_transformation", self.preset.name)
            return self.preset.segment
        return self.options.serialized()

# -----------------------------
# Transformation
# -----------------------------

class Transformation(BaseModel):
    """
    One deliverable asset plus how to transform it.

    The host is not part of the value: url() and raw_url() read it from a
    HostConfig at call time, so the same Transformation renders against
    whatever host is configured when it is built into a URL.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    asset_id: str
    bucket: Optional[str] = None
    media_type: MediaType
    delivery_type: DeliveryType = DeliveryType.UPLOAD   # carried only; path always says "upload"
    kind: Optional[TransformationKind] = None
    output_format: Optional[OutputFormat] = None

    @model_validator(mode="after")
    def _format_matches_media(self) -> "Transformation":
        fmt = self.output_format
        if fmt is None:
            return self
        if self.media_type is MediaType.IMAGE and not isinstance(fmt, ImageFormat):
            raise ValueError(f"Image transformation cannot output {fmt.value}")
        if self.media_type is MediaType.VIDEO and not isinstance(fmt, VideoFormat):
            raise ValueError(f"Video transformation cannot output {fmt.value}")
        return self

    @property
    def resolved_format(self) -> OutputFormat:
        if self.output_format is not None:
            return self.output_format
        return DEFAULT_OUTPUT_FORMAT[self.media_type]

    @property
    def extension(self) -> Optional[str]:
        fmt = self.resolved_format
        if fmt is ImageFormat.AUTO:
            return None
        return fmt.value

    def _prefix(self, host_config: Optional[HostConfig]) -> str:
        host = (host_config or default_host_config).host

        path: List[str] = []
        if self.bucket is not None and host.is_standard:
            path.append(_check_segment("bucket", self.bucket))
        path.append(self.media_type.value)
        path.append("upload")
        return f"https://{host.host}/" + "/".join(path)

    def url(self, host_config: Optional[HostConfig] = None) -> str:
        """
        https://<host>/[<bucket>/]<image|video>/upload[/<segment>]/<asset_id>[.<ext>]
        Raises InvalidURLComponentError for bucket/asset/preset text that
        cannot appear in a URL path.
        """
        parts = [self._prefix(host_config)]

        if self.kind is not None:
            segment = self.kind.segment()
            if segment:
                parts.append(segment)

        asset = _check_path("asset_id", self.asset_id)
        ext = self.extension
        parts.append(f"{asset}.{ext}" if ext else asset)

        out = "/".join(parts)
        log.debug("built url", extra={"url": out, "media_type": self.media_type.value})
        return out

    def raw_url(self, host_config: Optional[HostConfig] = None) -> str:
        """Untransformed original: prefix + asset id, no segment, no extension."""
        out = self._prefix(host_config) + "/" + _check_path("asset_id", self.asset_id)
        log.debug("built raw url", extra={"url": out, "media_type": self.media_type.value})
        return out
