"""Version discovery service running one lister session over a pattern set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from common.logging_utils import extra_context, is_debug_enabled
from registry.base import ExternalResourceRepository
from .errors import ResourceError
from .lister import ResourceVersionLister
from .models import ArtifactName, ModuleIdentifier, ResolveResult
from .patterns import ResourcePattern

logger = logging.getLogger(__name__)


@dataclass
class DiscoveryResult:
    """Outcome of a discovery session."""
    versions: List[str] = field(default_factory=list)
    attempted: List[str] = field(default_factory=list)
    errors: List[ResourceError] = field(default_factory=list)

    def unique_versions(self) -> List[str]:
        """Versions without repeats, in first-seen order."""
        return list(dict.fromkeys(self.versions))


class VersionDiscoveryService:
    """Discovers the versions of a module available in one repository."""

    def __init__(self, repository: ExternalResourceRepository):
        self.repository = repository
        self.lister = ResourceVersionLister(repository)

    def discover(
        self,
        module: ModuleIdentifier,
        artifact: ArtifactName,
        patterns: Iterable[ResourcePattern],
        fail_fast: bool = False,
    ) -> DiscoveryResult:
        """Visit every pattern in order within a single lister session.

        Args:
            module: Module whose versions are listed.
            artifact: Artifact descriptor used for token substitution.
            patterns: Candidate artifact location patterns.
            fail_fast: Re-raise the first listing failure instead of
                recording it and moving on to the next pattern.

        Returns:
            DiscoveryResult: Versions (duplicates kept), attempted locations and errors.
        """
        versions: List[str] = []
        result = ResolveResult()
        errors: List[ResourceError] = []
        visitor = self.lister.new_visitor(module, versions, result)

        for pattern in patterns:
            try:
                visitor.visit(pattern, artifact)
            except ResourceError as exc:
                if fail_fast:
                    raise
                logger.warning("%s: %s", exc.message, exc.cause)
                errors.append(exc)

        if is_debug_enabled(logger):
            logger.debug("Discovery finished", extra=extra_context(
                event="function_exit", component="service", action="discover",
                outcome="found" if versions else "none", target=self.repository.describe(),
                count=len(versions)
            ))
        return DiscoveryResult(versions=versions, attempted=result.attempted_locations, errors=errors)
