"""Command-line entry point for versionroute.

Commands:
    resolve  show which specifier would serve a requested version
    latest   show the latest of a set of specifiers
    serve    run an aiohttp server for the routes in a routes file
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

from .args import parse_args
from .common.logging_utils import configure_logging
from .config import load_routes_config
from .constants import ExitCodes
from .errors import ConfigurationError
from .versioning.resolver import find_latest_version, locate_requested_version

logger = logging.getLogger(__name__)


def _setup_logging(args: Any) -> None:
    """Configure logging based on CLI arguments."""
    configure_logging(getattr(args, "LOG_LEVEL", None))

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def run_resolve(args: Any) -> int:
    """Print the specifier selected for ``args.VERSION``."""
    specifiers = list(dict.fromkeys(args.SPECIFIERS))
    matched = locate_requested_version(args.VERSION, specifiers)
    if matched is not None:
        print(f"{matched}\tmatched")
        return ExitCodes.SUCCESS.value
    if args.NO_FALLBACK:
        logger.error("No specifier matches version %s", args.VERSION)
        return ExitCodes.VERSION_NOT_FOUND.value
    print(f"{find_latest_version(specifiers)}\tlatest")
    return ExitCodes.SUCCESS.value


def run_latest(args: Any) -> int:
    """Print the latest of ``args.SPECIFIERS``."""
    print(find_latest_version(args.SPECIFIERS))
    return ExitCodes.SUCCESS.value


def run_serve(args: Any) -> int:
    """Load a routes file and serve it until interrupted."""
    # Lazy import to avoid loading aiohttp for the offline commands
    from .web.server import ServerConfig, run_server_sync

    routes_config = load_routes_config(args.CONFIG)
    config = ServerConfig.from_args(args, routes_config)
    config.check_bind_address()
    run_server_sync(config)
    return ExitCodes.SUCCESS.value


_COMMANDS = {
    "resolve": run_resolve,
    "latest": run_latest,
    "serve": run_serve,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``versionroute`` command."""
    args = parse_args(argv)
    _setup_logging(args)
    try:
        return _COMMANDS[args.command](args)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return ExitCodes.CONFIG_ERROR.value


if __name__ == "__main__":
    sys.exit(main())
