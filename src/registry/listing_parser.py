"""Parser for HTML directory listings (Apache/nginx/Artifactory style index pages)."""

from __future__ import annotations

import urllib.parse
from html.parser import HTMLParser
from typing import List, Optional


class DirectoryListingError(ValueError):
    """The response cannot be interpreted as a directory listing."""


class _AnchorCollector(HTMLParser):
    """Collects href attributes of <a> elements in document order."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: List[str] = []

    def handle_starttag(self, tag, attrs):
        if tag.lower() != "a":
            return
        for name, value in attrs:
            if name.lower() == "href" and value:
                self.hrefs.append(value.strip())


def _ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def _direct_child(base_url: str, href: str) -> Optional[str]:
    """Return the child name an href points to, or None for anything else."""
    if not href or href[0] in "?#":
        return None
    resolved = urllib.parse.urljoin(base_url, href)
    resolved = urllib.parse.urldefrag(resolved)[0]
    if "?" in resolved:
        resolved = resolved.split("?", 1)[0]
    if not resolved.startswith(base_url):
        return None
    child = resolved[len(base_url):]
    if child.endswith("/"):
        child = child[:-1]
    if not child or "/" in child:
        return None
    child = urllib.parse.unquote(child)
    if child in (".", ".."):
        return None
    return child


def parse_directory_listing(base_url: str, html: str, content_type: Optional[str] = "text/html") -> List[str]:
    """Extract direct child names from an HTML directory listing.

    Args:
        base_url: URL of the listed directory; links are resolved against it.
        html: Page body.
        content_type: Response content type; only ``text/html`` is accepted.

    Returns:
        Child names in page order without duplicates or trailing slashes.

    Raises:
        DirectoryListingError: If the content type is not HTML.
    """
    if not content_type or not content_type.lower().startswith("text/html"):
        raise DirectoryListingError(
            f"Unsupported ContentType {content_type} for directory listing '{base_url}'"
        )
    base_url = _ensure_trailing_slash(base_url)
    collector = _AnchorCollector()
    collector.feed(html)
    collector.close()

    names: List[str] = []
    seen = set()
    for href in collector.hrefs:
        child = _direct_child(base_url, href)
        if child is None or child in seen:
            continue
        seen.add(child)
        names.append(child)
    return names
