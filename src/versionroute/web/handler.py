"""aiohttp integration: version-dispatching request handlers."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, List, Mapping, Optional

from aiohttp import hdrs, web

from ..config import RouteDefinition, import_handler
from ..constants import Constants
from ..dispatch.dispatcher import Handler, VersionDispatcher
from ..errors import VersionNotFoundError

logger = logging.getLogger(__name__)

AiohttpHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def versioned_handler(
    handlers: Mapping[str, Handler],
    not_found_handler: Optional[Handler] = None,
) -> AiohttpHandler:
    """Build an aiohttp handler that dispatches on the requested version.

    The version comes from ``request["version"]`` (set by an earlier
    middleware) or the ``accept-version`` header. The selected specifier is
    stored in ``request["resolved_version"]`` and the full resolution in
    ``request["version_resolution"]`` before the version handler runs.

    Raises:
        ConfigurationError: If ``handlers`` is not a mapping.
    """
    dispatcher = VersionDispatcher(handlers, not_found_handler)

    async def handle(request: web.Request) -> web.StreamResponse:
        try:
            resolution, handler = dispatcher.select(request)
        except VersionNotFoundError as e:
            logger.warning("No version handler for %s %s: %s", request.method, request.path, e)
            raise web.HTTPNotFound(text=str(e)) from e
        request[Constants.RESOLUTION_KEY] = resolution
        request[Constants.RESOLVED_VERSION_KEY] = resolution.version
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    handle.dispatcher = dispatcher  # type: ignore[attr-defined]
    return handle


def add_versioned_route(
    router: web.UrlDispatcher,
    route: RouteDefinition,
) -> web.AbstractRoute:
    """Register a route definition, importing its handlers."""
    handlers = {spec: import_handler(ref) for spec, ref in route.versions.items()}
    not_found = import_handler(route.not_found) if route.not_found else None
    handler = versioned_handler(handlers, not_found)
    logger.debug(
        "Mounted %s %s with versions %s", route.method, route.path, ", ".join(handlers)
    )
    return router.add_route(route.method, route.path, handler)


def version_routes(app: web.Application, routes: List[RouteDefinition]) -> List[web.AbstractRoute]:
    """Mount all route definitions on ``app``."""
    return [add_versioned_route(app.router, route) for route in routes]


def describe_routes(app: web.Application) -> List[Mapping[str, Any]]:
    """List versioned routes on ``app`` with their registered versions."""
    described = []
    for route in app.router.routes():
        dispatcher = getattr(route.handler, "dispatcher", None)
        # add_get() also registers a HEAD route for the same handler
        if dispatcher is None or route.method == hdrs.METH_HEAD:
            continue
        info = route.resource.get_info() if route.resource is not None else {}
        described.append({
            "method": route.method,
            "path": info.get("path") or info.get("formatter"),
            "versions": list(dispatcher.handlers),
            "latest": dispatcher.latest_version,
            "not_found_handler": dispatcher.not_found_handler is not None,
        })
    return described
