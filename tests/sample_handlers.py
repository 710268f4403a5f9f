"""Handlers referenced by routes files in the tests."""

from aiohttp import web


async def items_v1(request):
    return web.json_response({"version": "v1", "id": request.match_info.get("id")})


async def items_v2(request):
    return web.json_response({"version": "v2", "id": request.match_info.get("id")})


async def unsupported(request):
    return web.json_response({"error": "unsupported version"}, status=406)


NOT_CALLABLE = "not a handler"
