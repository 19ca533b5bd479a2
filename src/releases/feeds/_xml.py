"""XML loading shared by the feed parsers."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional, Union

from ..errors import FeedFormatError

FeedContent = Union[str, bytes, None]


def load_root(content: FeedContent, *, feed: str, root_tag: str) -> Optional[ET.Element]:
    """Parse feed content and return its root element.

    Returns None when the content is absent or blank. Raises FeedFormatError
    when it is not well-formed XML or the root element is not ``root_tag``.
    """
    if content is None or not content.strip():
        return None

    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise FeedFormatError(feed, f"not well-formed XML ({exc})") from exc

    if root.tag != root_tag:
        raise FeedFormatError(feed, f"expected <{root_tag}> root element, found <{root.tag}>")
    return root


def child_text(element: ET.Element, tag: str) -> str:
    """Return the stripped text of the first ``tag`` child, or an empty string."""
    return (element.findtext(tag) or "").strip()
