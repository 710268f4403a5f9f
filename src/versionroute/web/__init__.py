"""aiohttp integration for version-based request dispatch.

This package provides a handler factory that picks a version handler per
request, helpers that mount versioned routes from a routes file, and a small
server that hosts them.
"""

from .handler import add_versioned_route, describe_routes, version_routes, versioned_handler
from .server import ServerConfig, VersionRouteServer, run_server_sync

__all__ = [
    "add_versioned_route",
    "describe_routes",
    "version_routes",
    "versioned_handler",
    "ServerConfig",
    "VersionRouteServer",
    "run_server_sync",
]
