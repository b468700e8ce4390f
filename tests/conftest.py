import pytest

from cloudinary_kit.transformation.host import default_host_config

ENV_VARS = ("CLOUDINARY_HOST", "CLOUDINARY_HEVC_SUPPORTED", "CLOUDINARY_DISPLAY_SCALE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _reset_default_host():
    default_host_config.reset()
    yield
    default_host_config.reset()


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch remembers to remove anything load_dotenv() adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch
