"""Argument parsing functionality for versionroute."""

import argparse

from .constants import Constants


def build_parser():
    """Build the argument parser for the ``versionroute`` command."""
    parser = argparse.ArgumentParser(
        prog="versionroute",
        description=(
            "versionroute - route requests to version handlers by accept-version"
        ),
        add_help=True,
    )
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    resolve = subparsers.add_parser(
        "resolve",
        help="Show which registered specifier serves a requested version",
    )
    resolve.add_argument("VERSION",
                         help="Requested version, as sent in accept-version")
    resolve.add_argument("SPECIFIERS",
                         nargs="+",
                         help="Registered specifiers in registration order, e.g. 1.2.1 ^2 ~2.3.0")
    resolve.add_argument("--no-fallback",
                         dest="NO_FALLBACK",
                         help="Fail instead of falling back to the latest specifier",
                         action="store_true")

    latest = subparsers.add_parser(
        "latest",
        help="Show the latest of the given specifiers",
    )
    latest.add_argument("SPECIFIERS",
                        nargs="+",
                        help="Registered specifiers")

    serve = subparsers.add_parser(
        "serve",
        help="Serve versioned routes from a routes file",
    )
    serve.add_argument("-c", "--config",
                       dest="CONFIG",
                       help="Path to routes file (YAML, YML, or JSON)",
                       action="store",
                       type=str,
                       required=True)
    serve.add_argument("--host",
                       dest="HOST",
                       help=f"Bind address (default: {Constants.DEFAULT_HOST})",
                       action="store",
                       type=str)
    serve.add_argument("--port",
                       dest="PORT",
                       help=f"Bind port (default: {Constants.DEFAULT_PORT})",
                       action="store",
                       type=int)
    serve.add_argument("--allow-external",
                       dest="ALLOW_EXTERNAL",
                       help="Allow binding to non-loopback addresses",
                       action="store_true")

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
