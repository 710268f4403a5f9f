"""Loading of versioned route definitions from YAML or JSON files.

A routes file looks like::

    server:
      host: 127.0.0.1
      port: 8080
    routes:
      - path: /items/{id}
        method: GET
        versions:
          "1.2.1": mypkg.handlers:items_v1
          "^2": mypkg.handlers:items_v2
        not_found: mypkg.handlers:unsupported

Handlers are ``module:attribute`` references resolved with importlib.
"""

from __future__ import annotations

import importlib
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import yaml

from .constants import Constants
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class RouteDefinition:
    """One path whose handler depends on the requested version."""

    path: str
    versions: Dict[str, str]
    method: str = "GET"
    not_found: Optional[str] = None


@dataclass
class RoutesConfig:
    """Parsed routes file."""

    routes: List[RouteDefinition] = field(default_factory=list)
    host: Optional[str] = None
    port: Optional[int] = None


def import_handler(reference: str) -> Callable[..., Any]:
    """Resolve a ``module:attribute`` reference to a callable.

    Raises:
        ConfigurationError: If the reference is malformed, cannot be
            imported, or does not name a callable.
    """
    module_name, sep, attr_path = str(reference).partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(
            f"Handler reference must look like 'module:attribute', got {reference!r}"
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import handler module {module_name!r}: {e}") from e
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigurationError(f"Handler {reference!r} not found") from e
    if not callable(target):
        raise ConfigurationError(f"Handler {reference!r} is not callable")
    return target


def _read_file(config_path: str) -> Any:
    _, ext = os.path.splitext(config_path)
    ext = ext.lower()
    if ext not in Constants.CONFIG_FILE_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported config file type {ext!r}; expected one of "
            f"{', '.join(Constants.CONFIG_FILE_EXTENSIONS)}"
        )
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if ext == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read config {config_path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse config {config_path}: {e}") from e


def _parse_route(index: int, entry: Any) -> RouteDefinition:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"routes[{index}] must be a mapping")
    path = entry.get("path")
    if not path or not isinstance(path, str):
        raise ConfigurationError(f"routes[{index}].path is required")
    versions = entry.get("versions")
    if not isinstance(versions, dict):
        raise ConfigurationError(
            f"routes[{index}].versions must be a mapping of specifier to handler"
        )
    return RouteDefinition(
        path=path,
        # YAML reads unquoted 1 or 1.2 as numbers
        versions={str(spec): str(ref) for spec, ref in versions.items()},
        method=str(entry.get("method", "GET")).upper(),
        not_found=entry.get("not_found"),
    )


def parse_routes_config(data: Any) -> RoutesConfig:
    """Validate an already-decoded routes document."""
    if not isinstance(data, dict):
        raise ConfigurationError("Routes config must be a mapping")
    routes = data.get("routes") or []
    if not isinstance(routes, list):
        raise ConfigurationError("'routes' must be a list")
    server = data.get("server") or {}
    if not isinstance(server, dict):
        raise ConfigurationError("'server' must be a mapping")
    port = server.get("port")
    try:
        port = int(port) if port is not None else None
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid server port: {port!r}") from e
    return RoutesConfig(
        routes=[_parse_route(i, entry) for i, entry in enumerate(routes)],
        host=server.get("host"),
        port=port,
    )


def load_routes_config(config_path: str) -> RoutesConfig:
    """Load and validate a routes file.

    Args:
        config_path: Path to a YAML or JSON file.

    Returns:
        RoutesConfig instance.

    Raises:
        ConfigurationError: If the file is missing or malformed.
    """
    config = parse_routes_config(_read_file(config_path))
    logger.info("Loaded %d versioned route(s) from %s", len(config.routes), config_path)
    return config
