"""HTTP server for versioned routes using aiohttp."""

from __future__ import annotations

import asyncio
import ipaddress
import logging
import signal
from dataclasses import dataclass, field
from typing import Any, List, Optional

from aiohttp import web

from ..config import RouteDefinition
from ..constants import Constants
from ..errors import ConfigurationError
from .handler import describe_routes, version_routes

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """Configuration for the versioned route server."""

    host: str = Constants.DEFAULT_HOST
    port: int = Constants.DEFAULT_PORT
    allow_external: bool = False
    routes: List[RouteDefinition] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: Any, routes_config: Any = None) -> "ServerConfig":
        """Create config from CLI arguments and an optional routes file.

        CLI values take precedence over the ``server`` section of the file.

        Args:
            args: Parsed CLI arguments namespace.
            routes_config: Optional RoutesConfig loaded from file.

        Returns:
            ServerConfig instance.
        """
        config = cls(allow_external=bool(getattr(args, "ALLOW_EXTERNAL", False)))
        if routes_config is not None:
            config.routes = list(routes_config.routes)
            if routes_config.host:
                config.host = routes_config.host
            if routes_config.port is not None:
                config.port = routes_config.port

        if getattr(args, "HOST", None):
            config.host = args.HOST
        if getattr(args, "PORT", None) is not None:
            config.port = args.PORT
        return config

    @property
    def binds_loopback(self) -> bool:
        """True when ``host`` only accepts connections from this machine."""
        host = (self.host or "").strip().lower()
        if host == "localhost":
            return True
        try:
            return ipaddress.ip_address(host).is_loopback
        except ValueError:
            # hostnames other than localhost may resolve anywhere
            return False

    def check_bind_address(self) -> None:
        """Refuse non-loopback hosts unless ``allow_external`` is set.

        Raises:
            ConfigurationError: If the host is public and not allowed.
        """
        if self.binds_loopback:
            return
        if not self.allow_external:
            raise ConfigurationError(
                f"Refusing to bind to non-loopback host {self.host!r} without --allow-external"
            )
        logger.warning("Serving versioned routes on public address %s", self.host)


class VersionRouteServer:
    """HTTP server dispatching each route to a version handler."""

    def __init__(self, config: ServerConfig):
        """Initialize the server.

        Args:
            config: Server configuration.
        """
        self._config = config
        self._app: Optional[web.Application] = None
        self._runner: Optional[web.AppRunner] = None

    def _create_app(self) -> web.Application:
        """Create the aiohttp application."""
        app = web.Application()
        app.router.add_get(Constants.HEALTH_PATH, self._health_check)
        version_routes(app, self._config.routes)
        app.on_startup.append(self._on_startup)
        app.on_cleanup.append(self._on_cleanup)
        return app

    async def _health_check(self, request: web.Request) -> web.Response:
        """Health check endpoint listing versioned routes."""
        return web.json_response({
            "status": "ok",
            "routes": describe_routes(request.app),
        })

    async def _on_startup(self, app: web.Application) -> None:
        logger.info("Version route server starting on %s:%s", self._config.host, self._config.port)

    async def _on_cleanup(self, app: web.Application) -> None:
        logger.info("Version route server stopped")

    async def start(self) -> None:
        """Start the server."""
        self._app = self._create_app()
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()

        site = web.TCPSite(
            self._runner,
            self._config.host,
            self._config.port,
        )
        await site.start()

        logger.info(
            "versionroute server listening on http://%s:%s",
            self._config.host, self._config.port,
        )
        for route in describe_routes(self._app):
            logger.info(
                "Route %s %s -> versions %s (fallback: %s)",
                route["method"], route["path"], ", ".join(route["versions"]),
                "not-found handler" if route["not_found_handler"] else route["latest"],
            )

    async def stop(self) -> None:
        """Stop the server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._app = None


def run_server_sync(config: ServerConfig) -> None:
    """Run the server synchronously.

    Installs signal handlers for SIGTERM and SIGINT for clean shutdown.

    Args:
        config: Server configuration.
    """
    server = VersionRouteServer(config)
    loop = asyncio.new_event_loop()

    async def run():
        await server.start()
        stop_event = asyncio.Event()
        running_loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            running_loop.add_signal_handler(sig, stop_event.set)
        await stop_event.wait()
        logger.info("Shutdown signal received, stopping...")
        await server.stop()

    try:
        loop.run_until_complete(run())
    except KeyboardInterrupt:
        # Fallback for platforms where signal handlers don't work (Windows)
        loop.run_until_complete(server.stop())
    finally:
        loop.close()
        logger.info("Server shutdown complete")
