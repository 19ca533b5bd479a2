"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_REQUEST = 2
    FEED_ERROR = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PRODUCTS_RELEASES_JETBRAINS_IDES_URL = "https://www.jetbrains.com/updates/updates.xml"
    PRODUCTS_RELEASES_ANDROID_STUDIO_URL = "https://jb.gg/android-studio-releases-list.xml"
    CACHE_REDIRECTOR_URL = "https://cache-redirector.jetbrains.com"
    USE_CACHE_REDIRECTOR = True

    DEFAULT_CHANNELS = ["release"]
    OUTPUT_FORMATS = ["text", "json"]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    ENV_PREFIX = "IDE_RELEASES_"
    ENV_LOG_LEVEL = "IDE_RELEASES_LOG_LEVEL"

    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    HTTP_CACHE_TTL_SEC = 300
