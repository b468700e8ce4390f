from __future__ import annotations

import logging
import threading
from typing import Optional
from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

STANDARD_DOMAIN = "res.cloudinary.com"


class CloudinaryHost(BaseModel):
    """
    standard: shared delivery domain, bucket (cloud name) goes in the path.
    custom:   private CDN domain that already implies the bucket.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    custom_domain: Optional[str] = None

    @classmethod
    def standard(cls) -> "CloudinaryHost":
        return cls()

    @classmethod
    def custom(cls, domain: str) -> "CloudinaryHost":
        return cls(custom_domain=domain)

    @classmethod
    def parse(cls, value: Optional[str]) -> "CloudinaryHost":
        """Settings form: "" or "standard" -> standard, anything else is a custom domain."""
        v = (value or "").strip()
        if v == "" or v.lower() == "standard":
            return cls.standard()
        return cls.custom(v)

    @property
    def is_standard(self) -> bool:
        return self.custom_domain is None

    @property
    def host(self) -> str:
        if self.custom_domain is None:
            return STANDARD_DOMAIN
        return self.custom_domain


class HostConfig:
    """
    Holds the delivery host consulted each time a URL is built.
    Reads and writes go through a lock so reconfiguring at runtime is safe.
    """

    def __init__(self, host: Optional[CloudinaryHost] = None):
        self._lock = threading.Lock()
        self._host = host or CloudinaryHost.standard()

    @property
    def host(self) -> CloudinaryHost:
        with self._lock:
            return self._host

    @host.setter
    def host(self, value: CloudinaryHost) -> None:
        with self._lock:
            self._host = value
        log.info("delivery host changed", extra={"host": value.host})

    def reset(self) -> None:
        self.host = CloudinaryHost.standard()


# Process-wide default used when no config is passed to url()/raw_url().
default_host_config = HostConfig()
