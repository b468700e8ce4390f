from __future__ import annotations

"""
cloudinary_kit: builds delivery URLs for transformed images and videos.

    opts = ImageOptions(crop=Crop.FILL, width=300, height=200)
    t = Transformation(asset_id="sample", bucket="demo", media_type=MediaType.IMAGE,
                       kind=TransformationKind.dynamic(opts))
    t.url()  # https://res.cloudinary.com/demo/image/upload/f_jpg,c_fill,h_200,w_300/sample.heic
"""

from cloudinary_kit.app.errors import CloudinaryKitError, ConfigError, InvalidURLComponentError
from cloudinary_kit.transformation.enums import (
    AudioCodec,
    Crop,
    DeliveryType,
    GravityDirection,
    ImageFlag,
    ImageFormat,
    MediaType,
    QualityPreset,
    VideoCodec,
    VideoFlag,
    VideoFormat,
)
from cloudinary_kit.transformation.host import CloudinaryHost, HostConfig, default_host_config
from cloudinary_kit.transformation.image_options import ImageOptions
from cloudinary_kit.transformation.layers import BaseLayer, TextLayer
from cloudinary_kit.transformation.transformation import Transformation, TransformationKind
from cloudinary_kit.transformation.trim import VideoTrim
from cloudinary_kit.transformation.values import (
    AspectRatio,
    Framerate,
    Gravity,
    NamedTransformation,
    PlatformCapability,
    Quality,
)
from cloudinary_kit.transformation.video_options import VideoOptions

__all__ = [
    "AspectRatio",
    "AudioCodec",
    "BaseLayer",
    "CloudinaryHost",
    "CloudinaryKitError",
    "ConfigError",
    "Crop",
    "DeliveryType",
    "Framerate",
    "Gravity",
    "GravityDirection",
    "HostConfig",
    "ImageFlag",
    "ImageFormat",
    "ImageOptions",
    "InvalidURLComponentError",
    "MediaType",
    "NamedTransformation",
    "PlatformCapability",
    "Quality",
    "QualityPreset",
    "TextLayer",
    "Transformation",
    "TransformationKind",
    "VideoCodec",
    "VideoFlag",
    "VideoFormat",
    "VideoOptions",
    "VideoTrim",
    "default_host_config",
]
