"""Repository transports used to list artifact directories.

- base.py: the ExternalResourceRepository interface
- filesystem.py: local directories (plain paths or file: URLs)
- http.py: remote directories through their HTML index pages
- listing_parser.py: HTML directory listing parser
"""

from typing import Dict, Optional

from .base import ExternalResourceRepository
from .filesystem import FileResourceRepository
from .http import HttpResourceRepository


def create_repository(location: str, headers: Optional[Dict[str, str]] = None) -> ExternalResourceRepository:
    """Pick the transport for a repository root: http(s) URLs or local paths."""
    if location.lower().startswith(("http://", "https://")):
        return HttpResourceRepository(location, headers=headers)
    return FileResourceRepository(location)


__all__ = [
    "ExternalResourceRepository",
    "FileResourceRepository",
    "HttpResourceRepository",
    "create_repository",
]
