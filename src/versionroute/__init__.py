"""versionroute - route requests to version handlers.

Handlers are registered under version specifiers (``1.2.1``, ``^1``,
``~2.3.0``); each request is sent to the first specifier matching its
``accept-version`` header or pre-set version, else to a not-found handler or
the latest registered version.
"""

from .errors import ConfigurationError, VersionNotFoundError, VersionRouteError
from .dispatch import VersionDispatcher, get_requested_version
from .versioning import (
    Resolution,
    ResolutionMode,
    compare_versions,
    find_latest_version,
    locate_requested_version,
    parse_version,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "VersionNotFoundError",
    "VersionRouteError",
    "VersionDispatcher",
    "get_requested_version",
    "Resolution",
    "ResolutionMode",
    "compare_versions",
    "find_latest_version",
    "locate_requested_version",
    "parse_version",
]
