"""Exceptions raised by versionroute."""


class VersionRouteError(Exception):
    """Base class for versionroute errors."""


class ConfigurationError(VersionRouteError, ValueError):
    """Raised when a version registry or routes file is malformed.

    Signalled at construction/load time so the host application can fail
    startup instead of failing inside request handling.
    """


class VersionNotFoundError(VersionRouteError, LookupError):
    """Raised when no handler can be selected for a request."""

    def __init__(self, requested=None):
        self.requested = requested
        if requested is None:
            msg = "No version handlers registered and no not-found handler configured"
        else:
            msg = f"No handler available for requested version {requested!r}"
        super().__init__(msg)
