"""Request dispatch to version handlers."""

from .source import get_requested_version
from .dispatcher import Handler, VersionDispatcher

__all__ = [
    "get_requested_version",
    "Handler",
    "VersionDispatcher",
]
