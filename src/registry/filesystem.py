"""Local filesystem repository transport."""
from __future__ import annotations

import logging
import os
import urllib.parse
import urllib.request
from typing import List, Optional

from common.logging_utils import extra_context, is_debug_enabled
from .base import ExternalResourceRepository

logger = logging.getLogger(__name__)


def _to_path(root: str) -> str:
    """Accept a plain path or a ``file:`` URL."""
    if root.startswith("file:"):
        return urllib.request.url2pathname(urllib.parse.urlsplit(root).path)
    return root


class FileResourceRepository(ExternalResourceRepository):
    """Lists directories below a local repository root."""

    def __init__(self, root: str):
        self.root = os.path.abspath(_to_path(root))

    def _resolve(self, location: str) -> str:
        if location.startswith("file:"):
            return _to_path(location)
        return os.path.join(self.root, location.lstrip("/"))

    def list(self, location: str) -> Optional[List[str]]:
        path = self._resolve(location)
        try:
            names = sorted(os.listdir(path))
        except (FileNotFoundError, NotADirectoryError):
            if is_debug_enabled(logger):
                logger.debug("Directory not found", extra=extra_context(
                    event="list", component="filesystem", action="listdir",
                    outcome="not_found", target=path
                ))
            return None
        if is_debug_enabled(logger):
            logger.debug("Listed directory", extra=extra_context(
                event="list", component="filesystem", action="listdir",
                outcome="success", target=path, count=len(names)
            ))
        return names

    def describe(self) -> str:
        return f"file repository '{self.root}'"
