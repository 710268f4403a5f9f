"""Version parsing, ordering and specifier matching."""

from .models import ResolutionMode, Resolution, SpecifierKind, VersionIdentifier
from .parser import parse_version, parse_requested_version
from .comparator import compare_versions, version_sort_key
from .resolver import find_latest_version, locate_requested_version, specifier_matches

__all__ = [
    "ResolutionMode",
    "Resolution",
    "SpecifierKind",
    "VersionIdentifier",
    "parse_version",
    "parse_requested_version",
    "compare_versions",
    "version_sort_key",
    "find_latest_version",
    "locate_requested_version",
    "specifier_matches",
]
