from __future__ import annotations

from enum import Enum

# -----------------------------
# Closed parameter sets
# Each member's value is the raw token the delivery service expects.
# -----------------------------

class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"

class DeliveryType(str, Enum):
    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"
    FETCH = "fetch"

class Crop(str, Enum):
    NONE = "none"
    CROP = "crop"
    SCALE = "scale"
    LIMIT = "limit"
    THUMB = "thumb"
    FIT = "fit"
    MINIMUM_FIT = "mfit"
    FILL = "fill"
    LIMIT_FILL = "lfill"
    PAD = "pad"
    LIMIT_PAD = "lpad"
    MINIMUM_PAD = "mpad"
    FILL_PAD = "fill_pad"

    @property
    def token(self) -> str:
        return "c_" + self.value

class ImageFormat(str, Enum):
    AUTO = "auto"       # service picks the format; no extension on the URL
    HEIC = "heic"
    JPEG = "jpg"
    PDF = "pdf"
    PNG = "png"
    WEBP = "webp"

    @property
    def token(self) -> str:
        return "f_" + self.value

class VideoFormat(str, Enum):
    MP4 = "mp4"
    WEBM = "webm"

    @property
    def token(self) -> str:
        return "f_" + self.value

class AudioCodec(str, Enum):
    PASSTHROUGH = "passthrough"   # keep source audio, never emitted
    NONE = "none"                 # strip audio
    AAC = "aac"
    MP3 = "mp3"

    @property
    def token(self) -> str:
        return "ac_" + self.value

class VideoCodec(str, Enum):
    AUTO = "auto"
    H264 = "h264"
    H265 = "h265"

    @property
    def token(self) -> str:
        return "vc_" + self.value

class QualityPreset(str, Enum):
    AUTO = "auto"
    BEST = "auto:best"
    GOOD = "auto:good"
    ECO = "auto:eco"
    LOW = "auto:low"

class GravityDirection(str, Enum):
    AUTO = "auto"
    CENTER = "center"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTH_EAST = "north_east"
    NORTH_WEST = "north_west"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    FACE = "face"

class ImageFlag(str, Enum):
    PROGRESSIVE = "fl_progressive"

class VideoFlag(str, Enum):
    WAVEFORM = "fl_waveform"
