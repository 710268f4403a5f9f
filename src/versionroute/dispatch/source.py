"""Extraction of the client's requested version from a request."""

from collections.abc import Mapping
from typing import Any, Optional

from ..constants import Constants


def _explicit_version(request: Any) -> Any:
    # aiohttp requests are mappings; their ``version`` attribute is the HTTP
    # protocol version, so only the mapping key counts for them.
    if isinstance(request, Mapping):
        return request.get(Constants.VERSION_PROPERTY)
    return getattr(request, Constants.VERSION_PROPERTY, None)


def _header_version(request: Any) -> Any:
    headers = getattr(request, "headers", None)
    if isinstance(request, Mapping) and headers is None:
        headers = request.get("headers")
    if not headers:
        return None
    value = headers.get(Constants.ACCEPT_VERSION_HEADER)
    if value is None and not hasattr(headers, "getall"):
        # Plain dicts are case-sensitive; multidicts already are not.
        for name, candidate in headers.items():
            if name.lower() == Constants.ACCEPT_VERSION_HEADER:
                value = candidate
                break
    return value


def get_requested_version(request: Any) -> Optional[str]:
    """Return the version requested by the client, or None.

    Precedence: an explicit ``version`` property set on the request (coerced
    to ``str``, so ``1`` becomes ``"1"``), then the ``accept-version``
    header (also coerced). Empty values are treated as absent.
    """
    if request is None:
        return None
    explicit = _explicit_version(request)
    if explicit is not None and explicit != "":
        return str(explicit)
    header = _header_version(request)
    if header is not None and header != "":
        return str(header)
    return None
