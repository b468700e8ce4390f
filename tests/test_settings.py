import json
import logging

import pytest

from cloudinary_kit import CloudinaryHost, ConfigError, HostConfig, VideoCodec
from cloudinary_kit.app.bootstrap import bootstrap, capability_from_settings
from cloudinary_kit.app.logging import JsonFormatter, setup_logging
from cloudinary_kit.app.settings import load_settings


def test_defaults(clean_env):
    s = load_settings()
    assert s.host == "standard"
    assert s.hevc_supported is True
    assert s.display_scale == 1.0
    assert s.log_level == "INFO"


def test_env_overrides(clean_env):
    clean_env.setenv("CLOUDINARY_HOST", "cdn.example.com")
    clean_env.setenv("CLOUDINARY_HEVC_SUPPORTED", "no")
    clean_env.setenv("CLOUDINARY_DISPLAY_SCALE", "2")
    s = load_settings()
    cap = capability_from_settings(s)
    assert s.host == "cdn.example.com"
    assert cap.default_video_codec is VideoCodec.H264
    assert cap.display_scale == 2.0


@pytest.mark.parametrize("name, raw", [("CLOUDINARY_DISPLAY_SCALE", "retina"), ("CLOUDINARY_DISPLAY_SCALE", "nan"), ("CLOUDINARY_HEVC_SUPPORTED", "maybe")])
def test_invalid_values(clean_env, name, raw):
    clean_env.setenv(name, raw)
    with pytest.raises(ConfigError):
        load_settings()


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, CloudinaryHost.standard()),
        ("", CloudinaryHost.standard()),
        ("Standard", CloudinaryHost.standard()),
        (" media.example.com ", CloudinaryHost.custom("media.example.com")),
    ],
)
def test_host_parse(raw, expected):
    assert CloudinaryHost.parse(raw) == expected


def test_host_domains():
    assert CloudinaryHost.standard().host == "res.cloudinary.com"
    assert CloudinaryHost.standard().is_standard
    assert CloudinaryHost.custom("x.example.com").host == "x.example.com"
    assert not CloudinaryHost.custom("x.example.com").is_standard


def test_bootstrap_reads_dotenv(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CLOUDINARY_HOST=cdn.example.com\nCLOUDINARY_DISPLAY_SCALE=3\n")
    cfg = HostConfig()

    s, cap = bootstrap(host_config=cfg, dotenv_path=str(env_file))

    assert s.host == "cdn.example.com"
    assert cfg.host == CloudinaryHost.custom("cdn.example.com")
    assert cap.display_scale == 3.0


def test_bootstrap_existing_env_wins(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CLOUDINARY_HOST=cdn.example.com\n")
    clean_env.setenv("CLOUDINARY_HOST", "standard")
    cfg = HostConfig(CloudinaryHost.custom("old.example.com"))

    bootstrap(host_config=cfg, dotenv_path=str(env_file))

    assert cfg.host.is_standard


def test_json_formatter():
    record = logging.LogRecord("cloudinary_kit.test", logging.INFO, __file__, 1, "built %s", ("x",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "cloudinary_kit.test"
    assert payload["msg"] == "built x"


def test_setup_logging_sets_level():
    setup_logging("debug")
    logger = logging.getLogger("cloudinary_kit")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    setup_logging("INFO")
