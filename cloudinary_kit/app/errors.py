class CloudinaryKitError(Exception):
    """Base library error"""


class ConfigError(CloudinaryKitError):
    """Missing or invalid configuration"""


class InvalidURLComponentError(CloudinaryKitError):
    """A path component contains characters that cannot appear in a URL path"""

    def __init__(self, component: str, value: str):
        super().__init__(f"Invalid URL component {component}: {value!r}")
        self.component = component
        self.value = value
