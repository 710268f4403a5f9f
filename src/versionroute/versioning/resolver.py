"""Matching requested versions against registered specifiers."""

import logging
from typing import Any, Iterable, Optional

from ..common.logging_utils import extra_context, is_debug_enabled
from .comparator import version_sort_key
from .models import SpecifierKind, VersionIdentifier
from .parser import parse_requested_version, parse_version

logger = logging.getLogger(__name__)


def specifier_matches(specifier: VersionIdentifier, requested: VersionIdentifier) -> bool:
    """Check a single registered specifier against a requested version.

    * ``~X.Y.Z`` matches on major.minor (requested minor defaults to 0).
    * ``^X.Y.Z`` matches on major.
    * ``X.Y.Z`` matches when both sides, zero-padded to three parts, are equal.

    Comparison is textual, so ``01`` does not match ``1``.
    """
    if specifier.kind is SpecifierKind.TILDE:
        key_text = specifier.text(specifier.truncated(2))
        requested_text = requested.text(requested.padded(2)[:2])
    elif specifier.kind is SpecifierKind.CARET:
        key_text = specifier.text(specifier.truncated(1))
        requested_text = requested.text(requested.truncated(1))
    else:
        key_text = specifier.text(specifier.padded(3))
        requested_text = requested.text(requested.padded(3))
    return key_text == requested_text


def locate_requested_version(requested: Any, specifiers: Iterable[str]) -> Optional[str]:
    """Return the first registered specifier matching ``requested``.

    This is first-match, not best-match: when an exact and a caret key both
    match, whichever comes first in ``specifiers`` wins.

    Args:
        requested: Version supplied by the client (coerced to ``str``).
        specifiers: Registered specifier keys, in registration order.

    Returns:
        The matching key, or None.
    """
    requested_version = parse_requested_version(requested)
    for key in specifiers:
        if specifier_matches(parse_version(key), requested_version):
            if is_debug_enabled(logger):
                logger.debug(
                    "Specifier matched",
                    extra=extra_context(
                        event="specifier_match",
                        component="resolver",
                        outcome="matched",
                        requested=requested_version.raw,
                        specifier=key,
                    ),
                )
            return key
    return None


def find_latest_version(specifiers: Iterable[str]) -> Optional[str]:
    """Return the latest specifier, or None when there are none.

    The sort is stable, so among specifiers that compare equal the last one
    in input order is returned.
    """
    ordered = sorted(specifiers, key=version_sort_key)
    if not ordered:
        return None
    return ordered[-1]
