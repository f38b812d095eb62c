"""Repository collaborator interface consumed by the version lister."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class ExternalResourceRepository(ABC):
    """A repository that can list the children of a directory-like location."""

    @abstractmethod
    def list(self, location: str) -> Optional[List[str]]:
        """List child resource names at ``location``.

        Args:
            location: Listing directory, relative to the repository root
                (absolute URLs are accepted by HTTP repositories).

        Returns:
            Child names in repository order, or None if the location does not exist.

        Raises:
            Exception: Any transport failure; the lister wraps it.
        """

    @abstractmethod
    def describe(self) -> str:
        """Human-readable name of the repository, for logs."""
