"""Entry point of the release resolution engine for external callers.

Accepts already-retrieved manifest content (text, bytes, a path, or nothing),
parses both feeds, and runs the pipeline. A structurally invalid feed is
reported in the outcome and contributes no releases; the other feed is still
resolved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from common.logging_utils import extra_context, is_debug_enabled

from . import pipeline
from .errors import FeedFormatError, InvalidRequestError
from .feeds import android_studio, jetbrains
from .feeds._xml import FeedContent
from .models import Channel, PlatformType, ProductRelease, ResolutionParameters
from .version import Version

logger = logging.getLogger(__name__)

FeedSource = Union[str, bytes, os.PathLike, None]
FeedParser = Callable[[FeedContent], List[ProductRelease]]


@dataclass
class ResolutionOutcome:
    """Resolution outcome handed back to the caller."""
    versions: List[str]
    errors: List[FeedFormatError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def build_parameters(
    product_type: Union[str, PlatformType],
    channels: Iterable[Union[str, Channel]],
    since: Union[str, Version],
    until: Union[str, Version, None] = None,
) -> ResolutionParameters:
    """Build ResolutionParameters from caller-facing values.

    Raises:
        InvalidRequestError: Unknown product code or channel, or no channels.
        ParseError: A bound is not a numeric version.
    """
    if isinstance(product_type, PlatformType):
        resolved_type: Optional[PlatformType] = product_type
    else:
        resolved_type = PlatformType.from_code(product_type)
    if resolved_type is None:
        raise InvalidRequestError(f"Unknown product type code '{product_type}'")

    resolved_channels = set()
    for channel in channels:
        resolved = channel if isinstance(channel, Channel) else Channel.from_label(channel)
        if resolved is None:
            raise InvalidRequestError(f"Unknown release channel '{channel}'")
        resolved_channels.add(resolved)
    if not resolved_channels:
        raise InvalidRequestError("At least one release channel is required")

    return ResolutionParameters(
        product_type=resolved_type,
        channels=frozenset(resolved_channels),
        since=since if isinstance(since, Version) else Version.parse_dotted(since),
        until=until if until is None or isinstance(until, Version) else Version.parse_bound(until),
    )


def read_feed(source: FeedSource) -> FeedContent:
    """Turn a feed source into raw content.

    Text and bytes are content; path objects are read from disk. A missing
    file counts as an absent feed.
    """
    if source is None or isinstance(source, (str, bytes)):
        return source
    path = Path(source)
    try:
        return path.read_bytes()
    except FileNotFoundError:
        logger.warning("Release feed file not found: %s", path)
        return None


def resolve_releases(
    params: ResolutionParameters,
    jetbrains_ides: FeedSource = None,
    android_studio_releases: FeedSource = None,
) -> ResolutionOutcome:
    """Resolve both feeds against ``params``.

    Args:
        params: Resolution constraints.
        jetbrains_ides: JetBrains IDEs feed content or path; None when absent.
        android_studio_releases: Android Studio feed content or path; None when absent.

    Returns:
        ResolutionOutcome with the ordered identifiers and any feed failures.
    """
    errors: List[FeedFormatError] = []
    jetbrains_releases = _parse_feed(jetbrains.parse, jetbrains_ides, errors)
    android_releases = _parse_feed(android_studio.parse, android_studio_releases, errors)

    versions = pipeline.resolve(params, jetbrains_releases, android_releases)
    if is_debug_enabled(logger):
        logger.debug(
            "Resolution finished",
            extra=extra_context(
                event="function_exit",
                component="service",
                action="resolve_releases",
                outcome="empty" if not versions else "non_empty",
                count=len(versions),
                feed_errors=len(errors),
            ),
        )
    return ResolutionOutcome(versions=versions, errors=errors)


def _parse_feed(parser: FeedParser, source: FeedSource, errors: List[FeedFormatError]) -> List[ProductRelease]:
    try:
        return parser(read_feed(source))
    except FeedFormatError as exc:
        logger.warning("%s", exc)
        errors.append(exc)
        return []


__all__ = [
    "FeedSource",
    "ResolutionOutcome",
    "build_parameters",
    "read_feed",
    "resolve_releases",
]
