"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    NO_VERSIONS = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "REVLISTER_LOG_LEVEL"
    ENV_REQUEST_TIMEOUT = "REVLISTER_REQUEST_TIMEOUT"
    ENV_HTTP_RETRIES = "REVLISTER_HTTP_RETRIES"

    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    USER_AGENT = "revlister/0.1"

    DEFAULT_TYPE = "jar"
    OUTPUT_FORMATS = ["text", "json"]

    # Artifact patterns for the well-known repository layouts.
    IVY_LAYOUT_PATTERNS = [
        "[organisation]/[module]/[revision]/[type]s/[artifact](-[classifier]).[ext]",
        "[organisation]/[module]/[revision]/[type]s/[artifact].[ext]",
    ]
    MAVEN_LAYOUT_PATTERNS = [
        "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier]).[ext]",
    ]
    GRADLE_LAYOUT_PATTERNS = [
        "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier])(.[ext])",
        "[organisation]/[module]/[revision]/ivy-[revision].xml",
    ]
