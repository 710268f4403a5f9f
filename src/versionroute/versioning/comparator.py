"""Ordering of registered version specifiers.

The ordering is only used to find the latest registered specifier. It has two
sharp edges that callers rely on and that must not be "fixed":

* minor is defaulted to 0 when absent, but patch is not: a missing patch is
  treated like a non-numeric component;
* a non-numeric component on the right-hand side makes the left-hand side
  win, even if the left-hand side is non-numeric too.

Versions with more than three components are compared on the first three.
"""

from functools import cmp_to_key
from typing import List, Optional, Union

from .models import VersionIdentifier, numeric_value
from .parser import parse_version

VersionLike = Union[str, VersionIdentifier]

# Components defaulted to "0" when absent; patch deliberately excluded.
_DEFAULTED_COMPONENTS = 2
_COMPARED_COMPONENTS = 3


def _comparable(version: VersionLike) -> List[Optional[int]]:
    ident = version if isinstance(version, VersionIdentifier) else parse_version(version)
    values = []
    for i in range(_COMPARED_COMPONENTS):
        component = ident.component(i)
        if i < _DEFAULTED_COMPONENTS and not component:
            component = "0"
        values.append(numeric_value(component))
    return values


def compare_versions(left: VersionLike, right: VersionLike) -> int:
    """Compare two version specifiers.

    Returns:
        1 if ``left`` sorts after ``right``, -1 if before, 0 if equal.
    """
    left_values = _comparable(left)
    right_values = _comparable(right)
    for lval, rval in zip(left_values, right_values):
        if rval is None or (lval is not None and lval > rval):
            return 1
        if lval is None or lval < rval:
            return -1
    return 0


version_sort_key = cmp_to_key(compare_versions)
