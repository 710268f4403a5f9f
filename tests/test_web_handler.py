"""Tests for the aiohttp versioned handler."""

import asyncio

import aiohttp
import aiohttp.test_utils
import pytest
from aiohttp import web

from versionroute.config import RouteDefinition
from versionroute.errors import ConfigurationError
from versionroute.versioning.models import ResolutionMode
from versionroute.web.handler import describe_routes, version_routes, versioned_handler


def _json_handler(name):
    async def handler(request):
        resolution = request["version_resolution"]
        return web.json_response({
            "handler": name,
            "resolved": request["resolved_version"],
            "mode": resolution.mode.value,
            "id": request.match_info.get("id"),
        })
    return handler


async def _get(app, path, headers=None):
    """Issue a GET against ``app`` and return (status, body)."""
    async with aiohttp.test_utils.TestServer(app) as ts:
        async with aiohttp.ClientSession() as session:
            resp = await session.get(f"http://{ts.host}:{ts.port}{path}", headers=headers or {})
            if resp.content_type == "application/json":
                return resp.status, await resp.json()
            return resp.status, await resp.text()


def _app(handlers, not_found=None, path="/items/{id}"):
    app = web.Application()
    app.router.add_get(path, versioned_handler(handlers, not_found))
    return app


class TestVersionedHandler:
    """Tests for versioned_handler."""

    def test_header_selects_version(self):
        """The accept-version header selects the handler; match_info is kept."""
        app = _app({"1.2.1": _json_handler("v1"), "^2": _json_handler("v2")})
        status, body = asyncio.run(_get(app, "/items/7", {"Accept-Version": "2.4"}))
        assert status == 200
        assert body == {"handler": "v2", "resolved": "^2", "mode": "matched", "id": "7"}

    def test_missing_header_uses_latest(self):
        """Without a version the latest handler serves the request."""
        app = _app({"1.2.1": _json_handler("v1"), "1.3.1": _json_handler("v13")})
        status, body = asyncio.run(_get(app, "/items/1"))
        assert status == 200
        assert body["handler"] == "v13"
        assert body["mode"] == ResolutionMode.LATEST.value

    def test_not_found_handler(self):
        """An unmatched version goes to the not-found handler."""
        async def not_found(request):
            assert request["resolved_version"] is None
            return web.json_response({"error": "unsupported"}, status=406)

        app = _app({"1.2.1": _json_handler("v1")}, not_found)
        status, body = asyncio.run(_get(app, "/items/1", {"accept-version": "9.0.0"}))
        assert status == 406
        assert body == {"error": "unsupported"}

    def test_sync_handler(self):
        """Handlers may return a response directly."""
        def sync_handler(request):
            return web.Response(text="sync")

        app = _app({"1.0.0": sync_handler}, path="/")
        status, body = asyncio.run(_get(app, "/", {"accept-version": "1.0.0"}))
        assert (status, body) == (200, "sync")

    def test_version_set_by_middleware(self):
        """A version stored on the request by a middleware takes precedence."""
        @web.middleware
        async def force_version(request, handler):
            request["version"] = 1
            return await handler(request)

        app = web.Application(middlewares=[force_version])
        app.router.add_get("/items/{id}", versioned_handler({
            "1": _json_handler("one"),
            "2": _json_handler("two"),
        }))
        status, body = asyncio.run(_get(app, "/items/3", {"accept-version": "2"}))
        assert status == 200
        assert body["handler"] == "one"

    def test_empty_registry_returns_404(self):
        """Nothing to dispatch to becomes a 404."""
        app = _app({}, path="/")
        status, _ = asyncio.run(_get(app, "/"))
        assert status == 404

    def test_invalid_registry(self):
        """A non-mapping registry fails when the handler is built."""
        with pytest.raises(ConfigurationError):
            versioned_handler(["1.0.0"])


class TestVersionRoutes:
    """Tests for mounting route definitions."""

    def test_mount_from_definitions(self):
        """Route definitions import their handlers and serve by version."""
        app = web.Application()
        version_routes(app, [
            RouteDefinition(
                path="/items/{id}",
                versions={
                    "1.2.1": "sample_handlers:items_v1",
                    "^2": "sample_handlers:items_v2",
                },
                not_found="sample_handlers:unsupported",
            ),
        ])
        async def _run():
            async with aiohttp.test_utils.TestServer(app) as ts:
                async with aiohttp.ClientSession() as session:
                    url = f"http://{ts.host}:{ts.port}/items/5"
                    resp = await session.get(url, headers={"accept-version": "2.0.1"})
                    assert resp.status == 200
                    assert await resp.json() == {"version": "v2", "id": "5"}
                    # No specifier matches 3: the not-found handler answers
                    resp = await session.get(url, headers={"accept-version": "3"})
                    assert resp.status == 406

        asyncio.run(_run())

    def test_describe_routes(self):
        """Only versioned routes are described."""
        app = web.Application()

        async def plain(request):
            return web.Response()

        app.router.add_get("/plain", plain)
        app.router.add_get("/items/{id}", versioned_handler({"1.0.0": plain, "~1.2.0": plain}))
        routes = describe_routes(app)
        assert routes == [{
            "method": "GET",
            "path": "/items/{id}",
            "versions": ["1.0.0", "~1.2.0"],
            "latest": "~1.2.0",
            "not_found_handler": False,
        }]
