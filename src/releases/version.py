"""Numeric release versions.

A :class:`Version` is a ``major.minor.patch`` triple ordered lexicographically.
IDE feeds mix dotted release versions ("2023.1.2") with raw build numbers
("231.9011.34"); both share the same splitting rule, so one value type covers
them. The text a version was parsed from is kept for rendering but never takes
part in equality or ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ParseError

MAX_COMPONENTS = 3
WILDCARD = "*"
# Stands in for a wildcard component of a caller-supplied bound; effectively
# unbounded above, not literal infinity.
WILDCARD_COMPONENT = 99999

_NUMERIC = re.compile(r"[0-9]+")
_PRODUCT_PREFIX = re.compile(r"^[A-Za-z]+-(?=[0-9])")


@dataclass(frozen=True, order=True)
class Version:
    """Immutable ``major.minor.patch`` value."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    raw: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.raw or f"{self.major}.{self.minor}.{self.patch}"

    def compare_to(self, other: "Version") -> int:
        """Return -1, 0 or 1 as this version sorts before, equal to or after ``other``."""
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        return (mine > theirs) - (mine < theirs)

    @classmethod
    def parse_dotted(cls, text: Optional[str]) -> "Version":
        """Parse a dotted release version such as ``2023.1.2``."""
        return _parse(text, wildcard=False)

    @classmethod
    def parse_build_number(cls, text: Optional[str]) -> "Version":
        """Parse a build number such as ``231.9011.34`` or ``IU-231.9011.34``."""
        return _parse(_PRODUCT_PREFIX.sub("", (text or "").strip()), wildcard=False)

    @classmethod
    def parse_bound(cls, text: Optional[str]) -> "Version":
        """Parse a caller-supplied window bound, expanding ``*`` to the sentinel."""
        return _parse(text, wildcard=True)


def _parse(text: Optional[str], *, wildcard: bool) -> Version:
    value = (text or "").strip()
    if not value:
        return Version()

    components: List[int] = []
    for part in value.split(".")[:MAX_COMPONENTS]:
        if wildcard and part == WILDCARD:
            components.append(WILDCARD_COMPONENT)
        elif _NUMERIC.fullmatch(part):
            components.append(int(part))
        else:
            raise ParseError(value, f"component '{part}' is not numeric")

    components.extend([0] * (MAX_COMPONENTS - len(components)))
    return Version(components[0], components[1], components[2], raw=value)


parse_dotted = Version.parse_dotted
parse_build_number = Version.parse_build_number
parse_bound = Version.parse_bound
