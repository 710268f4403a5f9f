"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    CONFIG_ERROR = 2
    VERSION_NOT_FOUND = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    ACCEPT_VERSION_HEADER = "accept-version"
    VERSION_PROPERTY = "version"
    # Keys set on aiohttp requests once a version has been selected
    RESOLVED_VERSION_KEY = "resolved_version"
    RESOLUTION_KEY = "version_resolution"

    SPECIFIER_CARET = "^"
    SPECIFIER_TILDE = "~"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "VERSIONROUTE_LOG_LEVEL"

    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 8080
    HEALTH_PATH = "/_versionroute/health"
    CONFIG_FILE_EXTENSIONS = [".yaml", ".yml", ".json"]
