"""Per-request selection and invocation of version handlers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Optional, Tuple

from ..common.logging_utils import extra_context, is_debug_enabled
from ..errors import ConfigurationError, VersionNotFoundError
from ..versioning.models import Resolution, ResolutionMode
from ..versioning.resolver import find_latest_version, locate_requested_version
from .source import get_requested_version

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class VersionDispatcher:
    """Routes each request to exactly one version handler.

    The handler registry maps specifier strings (``"1.2.1"``, ``"^1"``,
    ``"~2.3.0"``) to callables. A request naming a version is sent to the
    first matching specifier; otherwise to the not-found handler when one is
    configured, else to the latest registered specifier.

    Dispatchers are callables themselves and can be registered as the
    handler of another dispatcher.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        not_found_handler: Optional[Handler] = None,
    ):
        """Initialize the dispatcher.

        Args:
            handlers: Mapping of version specifier to handler.
            not_found_handler: Optional handler for requests without a
                matching (or any) version.

        Raises:
            ConfigurationError: If ``handlers`` is missing or not a mapping,
                or any handler is not callable.
        """
        if handlers is None or not isinstance(handlers, Mapping):
            logger.error(
                "Version handlers must be a mapping of specifier to handler, got %s",
                type(handlers).__name__,
            )
            raise ConfigurationError(
                "Version handlers must be a mapping of specifier to handler"
            )
        invalid = [str(key) for key, handler in handlers.items() if not callable(handler)]
        if invalid:
            logger.error("Version handlers are not callable for: %s", ", ".join(invalid))
            raise ConfigurationError(
                f"Version handlers must be callable; got non-callable for {', '.join(invalid)}"
            )
        if not_found_handler is not None and not callable(not_found_handler):
            logger.error(
                "Not-found handler must be callable, got %s", type(not_found_handler).__name__
            )
            raise ConfigurationError("Not-found handler must be callable")
        self._handlers = MappingProxyType(
            {str(key): handler for key, handler in handlers.items()}
        )
        self._not_found_handler = not_found_handler
        self._latest = find_latest_version(self._handlers.keys())

    @property
    def handlers(self) -> Mapping[str, Handler]:
        """Read-only view of the registered handlers."""
        return self._handlers

    @property
    def not_found_handler(self) -> Optional[Handler]:
        return self._not_found_handler

    @property
    def latest_version(self) -> Optional[str]:
        """The specifier used as fallback when no not-found handler is set."""
        return self._latest

    def resolve(self, request: Any) -> Resolution:
        """Decide which handler serves ``request`` without invoking it."""
        requested = get_requested_version(request)
        matched = None
        if requested is not None:
            matched = locate_requested_version(requested, self._handlers.keys())

        if matched is not None:
            resolution = Resolution(requested, matched, ResolutionMode.MATCHED)
        elif self._not_found_handler is not None:
            resolution = Resolution(requested, None, ResolutionMode.NOT_FOUND)
        else:
            resolution = Resolution(requested, self._latest, ResolutionMode.LATEST)

        if is_debug_enabled(logger):
            logger.debug(
                "Version resolved",
                extra=extra_context(
                    event="version_resolution",
                    component="dispatcher",
                    outcome=resolution.mode.value,
                    requested=requested,
                    specifier=resolution.version,
                ),
            )
        return resolution

    def select(self, request: Any) -> Tuple[Resolution, Handler]:
        """Resolve ``request`` and return the resolution with its handler.

        Raises:
            VersionNotFoundError: If nothing is registered and no not-found
                handler is configured.
        """
        resolution = self.resolve(request)
        if resolution.mode is ResolutionMode.NOT_FOUND:
            return resolution, self._not_found_handler
        if resolution.version is None:
            raise VersionNotFoundError(resolution.requested)
        return resolution, self._handlers[resolution.version]

    def dispatch(self, request: Any, *args: Any, **kwargs: Any) -> Any:
        """Invoke the selected handler with the request and any extra arguments.

        Returns:
            Whatever the handler returns (possibly an awaitable).
        """
        _, handler = self.select(request)
        return handler(request, *args, **kwargs)

    __call__ = dispatch

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(versions={list(self._handlers)!r}, "
            f"not_found={self._not_found_handler is not None})"
        )
