"""HTTP repository transport listing directories via their HTML index pages.

Transport retries live in common.http_client; this module only maps HTTP
outcomes onto the repository contract: 404/410 means "not found", any other
error status raises.
"""
from __future__ import annotations

import logging
import urllib.parse
from typing import Dict, List, Optional

from common.http_client import robust_get
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from .base import ExternalResourceRepository
from .listing_parser import parse_directory_listing

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUSES = (404, 410)


def _has_scheme(location: str) -> bool:
    return bool(urllib.parse.urlsplit(location).scheme)


class HttpResourceRepository(ExternalResourceRepository):
    """Lists remote directories below ``base_url``."""

    def __init__(self, base_url: str = "", headers: Optional[Dict[str, str]] = None):
        self.base_url = base_url
        self.headers = dict(headers or {})

    def url_for(self, location: str) -> str:
        """Build the listing URL for a location (always with a trailing slash)."""
        if _has_scheme(location) or not self.base_url:
            url = location
        else:
            url = self.base_url.rstrip("/") + "/" + location.lstrip("/")
        return url if url.endswith("/") else url + "/"

    def list(self, location: str) -> Optional[List[str]]:
        url = self.url_for(location)
        response = robust_get(url, headers=self.headers)
        if response.status_code in _NOT_FOUND_STATUSES:
            if is_debug_enabled(logger):
                logger.debug("Listing not found", extra=extra_context(
                    event="list", component="http_repository", action="GET",
                    outcome="not_found", status_code=response.status_code,
                    target=safe_url(url)
                ))
            return None
        response.raise_for_status()
        # Links are relative to the final URL when the server redirected.
        listed_url = response.url or url
        names = parse_directory_listing(listed_url, response.text, response.headers.get("Content-Type"))
        if is_debug_enabled(logger):
            logger.debug("Parsed directory listing", extra=extra_context(
                event="list", component="http_repository", action="parse",
                outcome="success", target=safe_url(url), count=len(names)
            ))
        return names

    def describe(self) -> str:
        return f"HTTP repository '{safe_url(self.base_url) or '<absolute urls>'}'"
