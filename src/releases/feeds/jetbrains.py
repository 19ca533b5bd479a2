"""Parser for the JetBrains IDEs release feed (``updates.xml``).

The feed nests builds under channels under products, and a product lists
every product code it is published as::

    <products>
      <product name="IntelliJ IDEA">
        <code>IU</code>
        <code>IC</code>
        <channel id="IC-IU-RELEASE-licensing-RELEASE" status="release">
          <build number="231.9011.34" fullNumber="231.9011.34" version="2023.1.2"/>
        </channel>
      </product>
    </products>

Every (build x code) combination of a product becomes one ProductRelease.
"""

from __future__ import annotations

import itertools
import logging
import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled

from ..errors import ParseError
from ..models import Channel, PlatformType, ProductRelease
from ..version import Version
from ._xml import FeedContent, load_root

logger = logging.getLogger(__name__)

FEED_NAME = "JetBrains IDEs"
ROOT_TAG = "products"

Combination = Tuple[ET.Element, str, ET.Element, ET.Element]


def parse(content: FeedContent) -> List[ProductRelease]:
    """Parse feed content into releases.

    Args:
        content: Raw XML text or bytes; None or blank content yields no releases.

    Returns:
        List of ProductRelease in document order.

    Raises:
        FeedFormatError: If the content is not a ``<products>`` document.
    """
    root = load_root(content, feed=FEED_NAME, root_tag=ROOT_TAG)
    if root is None:
        return []
    return list(iter_releases(root))


def iter_releases(root: ET.Element) -> Iterator[ProductRelease]:
    """Yield one release per usable (product, channel, build, code) combination."""
    for combination in _combinations(root):
        release = _to_release(*combination)
        if release is not None:
            yield release


def _combinations(root: ET.Element) -> Iterator[Combination]:
    for product in root.findall("product"):
        codes = [(code.text or "").strip() for code in product.findall("code")]
        builds = [
            (channel, build)
            for channel in product.findall("channel")
            for build in channel.findall("build")
        ]
        for (channel, build), code in itertools.product(builds, codes):
            yield product, code, channel, build


def _to_release(
    product: ET.Element, code: str, channel_elem: ET.Element, build: ET.Element
) -> Optional[ProductRelease]:
    name = product.get("name", "")

    product_type = PlatformType.from_code(code)
    if product_type is None:
        _log_skip(name, "unknown_product_code", code)
        return None

    channel = Channel.from_label(channel_elem.get("status"))
    if channel is None:
        _log_skip(name, "unknown_channel", channel_elem.get("status"))
        return None

    try:
        build_version = Version.parse_build_number(build.get("fullNumber") or build.get("number"))
        release_version = Version.parse_dotted(build.get("version"))
    except ParseError as exc:
        _log_skip(name, "malformed_version", exc.text)
        return None

    return ProductRelease(
        product_name=name,
        product_type=product_type,
        channel=channel,
        build_version=build_version,
        release_version=release_version,
    )


def _log_skip(name: str, reason: str, value: Optional[str]) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Skipping feed record",
            extra=extra_context(
                event="record_skip",
                component="feed_parser",
                feed=FEED_NAME,
                product=name,
                outcome=reason,
                value=value,
            ),
        )
