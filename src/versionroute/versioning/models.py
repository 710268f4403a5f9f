"""Data models for version specifiers and request resolution."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

_NUMERIC_COMPONENT = re.compile(r"^\s*([0-9]+)\s*$")


class SpecifierKind(Enum):
    """Prefix carried by a registered version specifier."""
    NONE = ""
    CARET = "^"
    TILDE = "~"


class ResolutionMode(Enum):
    """How the handler for a request was selected."""
    MATCHED = "matched"
    LATEST = "latest"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class VersionIdentifier:
    """A parsed version string.

    ``parts`` holds the dot-separated components verbatim (prefix removed).
    Components are kept as text: matching is textual, and the comparator
    decides numeric-ness per component.
    """
    raw: str
    kind: SpecifierKind
    parts: Tuple[str, ...]

    def component(self, index: int) -> Optional[str]:
        """Return component ``index`` or None when absent."""
        if index < len(self.parts):
            return self.parts[index]
        return None

    @property
    def major(self) -> Optional[str]:
        return self.component(0)

    @property
    def minor(self) -> Optional[str]:
        return self.component(1)

    @property
    def patch(self) -> Optional[str]:
        return self.component(2)

    def padded(self, width: int = 3) -> Tuple[str, ...]:
        """Return all parts with missing or empty positions below ``width`` set to "0"."""
        parts = list(self.parts)
        for i in range(width):
            if i >= len(parts):
                parts.append("0")
            elif not parts[i]:
                parts[i] = "0"
        return tuple(parts)

    def truncated(self, width: int) -> Tuple[str, ...]:
        """Return at most the first ``width`` parts; absence stays absent."""
        return self.parts[:width]

    def text(self, parts: Tuple[str, ...]) -> str:
        """Join a view of this version back into dotted form."""
        return ".".join(parts)


def numeric_value(component: Optional[str]) -> Optional[int]:
    """Return the integer value of a component, or None when non-numeric.

    An absent component is non-numeric. An empty one counts as 0.
    """
    if component is None:
        return None
    if not component.strip():
        return 0
    match = _NUMERIC_COMPONENT.match(component)
    if not match:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one request against a registry."""
    requested: Optional[str]
    version: Optional[str]  # registry key that won; None for the not-found handler
    mode: ResolutionMode
