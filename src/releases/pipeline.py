"""Resolution of release feeds into one version identifier per release line.

The pipeline is a pure function of its inputs:

1. merge the parsed feeds, keeping their order;
2. keep records of the requested product type;
3. keep records on an allowed channel;
4. keep records whose comparative version lies in the inclusive window;
5. group by release line ``(code, major, minor)`` in first-encounter order;
6. pick one representative per line (RELEASE first, then highest patch);
7. render ``"{code}-{version}"``.
"""

from __future__ import annotations

import itertools
import logging
import sys
from typing import Dict, Iterable, List, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled

from .models import Channel, ProductRelease, ResolutionParameters
from .version import Version

logger = logging.getLogger(__name__)

# A window bound whose major lies in this range is a build number ("231",
# "233.*") and is compared against build versions; any other bound ("2023.1")
# is compared against release versions.
BUILD_NUMBER_MAJOR_MIN = 100
BUILD_NUMBER_MAJOR_MAX = 999

RELEASE_SCORE = sys.maxsize

ReleaseLine = Tuple[str, int, int]


def resolve(params: ResolutionParameters, *feeds: Iterable[ProductRelease]) -> List[str]:
    """Resolve parsed feeds into ordered version identifiers.

    Args:
        params: Product type, allowed channels and version window.
        *feeds: Parsed releases of each feed, merged in the given order.

    Returns:
        One identifier per release line, in the order lines were first seen.
        An empty list when nothing matches.
    """
    merged = list(itertools.chain.from_iterable(feeds))
    candidates = [r for r in merged if r.product_type == params.product_type]
    candidates = [r for r in candidates if r.channel in params.channels]
    candidates = [r for r in candidates if in_window(r, params.since, params.until)]

    lines = group_by_release_line(candidates)
    identifiers = [format_release(select_representative(group)) for group in lines.values()]

    if is_debug_enabled(logger):
        logger.debug(
            "Resolved product releases",
            extra=extra_context(
                event="resolution",
                component="pipeline",
                product_type=params.product_type.code,
                merged=len(merged),
                matched=len(candidates),
                release_lines=len(lines),
            ),
        )
    return identifiers


def is_build_number_bound(bound: Version) -> bool:
    return BUILD_NUMBER_MAJOR_MIN <= bound.major <= BUILD_NUMBER_MAJOR_MAX


def comparative_version(release: ProductRelease, bound: Version) -> Version:
    """Return the field of ``release`` that is compared against ``bound``.

    Build number bounds (``231``, ``233.*``) compare against the build
    version; release bounds (``2023.1``) against the release version. Each
    bound is judged on its own, so ``since=231`` with ``until=2023.3.*``
    mixes both.
    """
    if is_build_number_bound(bound):
        return release.build_version
    return release.release_version


def in_window(release: ProductRelease, since: Version, until: Optional[Version]) -> bool:
    """Inclusive window check; ``until`` of None means unbounded above."""
    if comparative_version(release, since) < since:
        return False
    return until is None or comparative_version(release, until) <= until


def group_by_release_line(releases: Iterable[ProductRelease]) -> Dict[ReleaseLine, List[ProductRelease]]:
    """Partition releases by ``(code, major, minor)``, keeping first-encounter order."""
    lines: Dict[ReleaseLine, List[ProductRelease]] = {}
    for release in releases:
        key = (
            release.product_type.code,
            release.release_version.major,
            release.release_version.minor,
        )
        lines.setdefault(key, []).append(release)
    return lines


def _score(release: ProductRelease) -> int:
    if release.channel is Channel.RELEASE:
        return RELEASE_SCORE
    return release.release_version.patch


def select_representative(group: List[ProductRelease]) -> ProductRelease:
    """Pick the release standing for a whole release line.

    A RELEASE-channel record always wins; otherwise the highest patch wins.
    ``max`` keeps the first of equally scored records.
    """
    return max(group, key=_score)


def format_release(release: ProductRelease) -> str:
    """Render ``"{code}-{version}"``.

    RELEASE records use ``major.minor`` plus ``.patch`` when the patch is
    non-zero; other channels use the raw build number.
    """
    if release.channel is Channel.RELEASE:
        version = release.release_version
        formatted = f"{version.major}.{version.minor}"
        if version.patch > 0:
            formatted += f".{version.patch}"
    else:
        formatted = str(release.build_version)
    return f"{release.product_type.code}-{formatted}"
