"""Parser for the Android Studio releases list.

The feed is a flat ``<content>`` document of ``<item>`` elements, each one a
single build on a single channel. Releases are compared on the IntelliJ
Platform they are built from (``platformBuild`` / ``platformVersion``), not on
Android Studio's own numbering.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from common.logging_utils import extra_context, is_debug_enabled

from ..errors import ParseError
from ..models import Channel, PlatformType, ProductRelease
from ..version import Version
from ._xml import FeedContent, child_text, load_root

logger = logging.getLogger(__name__)

FEED_NAME = "Android Studio"
ROOT_TAG = "content"


@dataclass
class Download:
    link: str = ""
    size: int = 0
    checksum: str = ""


@dataclass
class Item:
    """One ``<item>`` of the releases list; missing fields stay empty."""
    name: str = ""
    build: str = ""
    version: str = ""
    channel: str = ""
    platform_build: str = ""
    platform_version: str = ""
    date: str = ""
    downloads: List[Download] = field(default_factory=list)


def parse_items(content: FeedContent) -> List[Item]:
    """Read every ``<item>`` of the feed without interpreting it."""
    root = load_root(content, feed=FEED_NAME, root_tag=ROOT_TAG)
    if root is None:
        return []
    return [_read_item(elem) for elem in root.findall("item")]


def parse(content: FeedContent) -> List[ProductRelease]:
    """Parse feed content into Android Studio releases.

    Items with an unrecognized channel or a malformed platform version are
    skipped. Raises FeedFormatError if the content is not a ``<content>`` document.
    """
    releases = []
    for item in parse_items(content):
        release = _to_release(item)
        if release is not None:
            releases.append(release)
    return releases


def _read_item(elem: ET.Element) -> Item:
    return Item(
        name=child_text(elem, "name"),
        build=child_text(elem, "build"),
        version=child_text(elem, "version"),
        channel=child_text(elem, "channel"),
        platform_build=child_text(elem, "platformBuild"),
        platform_version=child_text(elem, "platformVersion"),
        date=child_text(elem, "date"),
        downloads=[_read_download(d) for d in elem.findall("download")],
    )


def _read_download(elem: ET.Element) -> Download:
    size_text = child_text(elem, "size")
    return Download(
        link=child_text(elem, "link"),
        size=int(size_text) if size_text.isdigit() else 0,
        checksum=child_text(elem, "checksum"),
    )


def _to_release(item: Item) -> Optional[ProductRelease]:
    channel = Channel.from_label(item.channel)
    if channel is None:
        _log_skip(item, "unknown_channel", item.channel)
        return None

    try:
        build_version = Version.parse_build_number(item.platform_build)
        release_version = Version.parse_dotted(item.platform_version)
    except ParseError as exc:
        _log_skip(item, "malformed_version", exc.text)
        return None

    return ProductRelease(
        product_name=item.name,
        product_type=PlatformType.ANDROID_STUDIO,
        channel=channel,
        build_version=build_version,
        release_version=release_version,
    )


def _log_skip(item: Item, reason: str, value: Optional[str]) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Skipping feed record",
            extra=extra_context(
                event="record_skip",
                component="feed_parser",
                feed=FEED_NAME,
                product=item.name,
                outcome=reason,
                value=value,
            ),
        )
