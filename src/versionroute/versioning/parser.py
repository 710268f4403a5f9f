"""Version string parsing."""

from typing import Any

from ..constants import Constants
from .models import SpecifierKind, VersionIdentifier

_PREFIXES = {
    Constants.SPECIFIER_CARET: SpecifierKind.CARET,
    Constants.SPECIFIER_TILDE: SpecifierKind.TILDE,
}


def parse_version(raw: Any, specifier: bool = True) -> VersionIdentifier:
    """Parse a version string such as ``1.2.3``, ``^1.2`` or ``~2.3.0``.

    Never fails: components are kept verbatim, including non-numeric ones.

    Args:
        raw: Version value; non-strings are coerced with ``str``.
        specifier: Recognise a leading ``^``/``~`` on the major component.
            Requested versions are parsed with ``specifier=False`` so they
            are taken literally.

    Returns:
        VersionIdentifier
    """
    text = raw if isinstance(raw, str) else str(raw)
    kind = SpecifierKind.NONE
    body = text
    if specifier and text[:1] in _PREFIXES:
        kind = _PREFIXES[text[0]]
        body = text[1:]
    return VersionIdentifier(raw=text, kind=kind, parts=tuple(body.split(".")))


def parse_requested_version(raw: Any) -> VersionIdentifier:
    """Parse a version supplied by a client."""
    return parse_version(raw, specifier=False)
