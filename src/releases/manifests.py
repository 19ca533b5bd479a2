"""Retrieval of release manifests from URLs or local files.

This is the I/O side of the resolution flow; the engine itself only ever
receives the content returned here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from common.http_client import robust_get
from constants import Constants

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = ("http", "https")


def is_remote(location: str) -> bool:
    return urlsplit(location).scheme.lower() in _REMOTE_SCHEMES


def redirect_url(url: str, redirector: Optional[str] = None) -> str:
    """Route a URL through the cache redirector: ``{redirector}/{host}/{path}``.

    URLs already pointing at the redirector are returned unchanged.
    """
    base = (redirector or Constants.CACHE_REDIRECTOR_URL).rstrip("/")
    if url.startswith(base + "/"):
        return url
    parts = urlsplit(url)
    target = parts.netloc + parts.path
    if parts.query:
        target += "?" + parts.query
    return f"{base}/{target}"


def load_manifest(location: Optional[str], *, use_cache_redirector: Optional[bool] = None) -> Optional[str]:
    """Return manifest text from a URL or file path.

    Returns None when the manifest is unavailable: no location, a missing or
    unreadable file, a non-200 response, or exhausted retries.
    """
    if not location:
        return None

    if not is_remote(location):
        try:
            return Path(location).read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Release manifest not found: %s", location)
        except (IOError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read release manifest %s: %s", location, exc)
        return None

    if use_cache_redirector is None:
        use_cache_redirector = Constants.USE_CACHE_REDIRECTOR
    url = redirect_url(location) if use_cache_redirector else location

    status_code, _, text = robust_get(url)
    if status_code != 200:
        logger.warning(
            "Release manifest %s unavailable (status %s): %s",
            location,
            status_code,
            text if status_code == 0 else "",
        )
        return None
    return text
