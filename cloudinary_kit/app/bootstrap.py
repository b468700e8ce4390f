from __future__ import annotations

from typing import Optional, Tuple
from dotenv import load_dotenv

from cloudinary_kit.app.logging import setup_logging
from cloudinary_kit.app.settings import Settings, load_settings
from cloudinary_kit.transformation.host import CloudinaryHost, HostConfig, default_host_config
from cloudinary_kit.transformation.values import PlatformCapability


def capability_from_settings(s: Settings) -> PlatformCapability:
    return PlatformCapability(supports_hevc=s.hevc_supported, display_scale=s.display_scale)


def bootstrap(
    *,
    host_config: Optional[HostConfig] = None,
    dotenv_path: Optional[str] = None,
) -> Tuple[Settings, PlatformCapability]:
    """
    One-time startup wiring:
    - load .env (existing environment wins)
    - configure logging
    - apply CLOUDINARY_HOST to the host config (process-wide default unless given)
    - return settings + the platform capability for building options
    """
    load_dotenv(dotenv_path)
    s = load_settings()
    setup_logging(s.log_level)

    (host_config or default_host_config).host = CloudinaryHost.parse(s.host)
    return s, capability_from_settings(s)
