"""Resource version lister: discovers revisions by listing repository directories.

For each pattern the lister substitutes every token but ``[revision]``, lists
the deepest directory that precedes the revision marker and matches the
returned names against the path segment holding the marker.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Optional, Pattern, Set

from common.logging_utils import extra_context, is_debug_enabled
from registry.base import ExternalResourceRepository
from .errors import ResourceError
from .models import ArtifactName, ModuleIdentifier, ResolveResult
from .patterns import REVISION_MARKER, ResourcePattern

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class ListingTarget:
    """Directory to list and the pattern text that follows it."""
    directory: str
    remainder: str

    @property
    def name_template(self) -> str:
        """The remainder's first path segment, the one matched against listed names."""
        end = self.remainder.find(PATH_SEPARATOR)
        return self.remainder if end == -1 else self.remainder[:end]


def resolve_listing(path: str) -> Optional[ListingTarget]:
    """Split a substituted pattern into listing directory and match remainder.

    The directory is the text before the first revision marker, cut after the
    last path separator so only whole segments are listed.

    Returns:
        The listing target, or None when the pattern has no revision marker.
    """
    index = path.find(REVISION_MARKER)
    if index == -1:
        return None
    cut = path.rfind(PATH_SEPARATOR, 0, index) + 1
    return ListingTarget(directory=path[:cut], remainder=path[cut:])


def compile_revision_matcher(template: str) -> Pattern[str]:
    """Compile a single-segment template into an anchored revision matcher.

    Literal text is escaped; the first marker captures one or more non-separator
    characters and any later marker must repeat the same value.
    """
    parts = template.split(REVISION_MARKER)
    regex = [re.escape(parts[0])]
    for position, literal in enumerate(parts[1:]):
        regex.append("(?P<revision>[^/]+)" if position == 0 else "(?P=revision)")
        regex.append(re.escape(literal))
    return re.compile("".join(regex))


def extract_revisions(template: str, names: Optional[Iterable[str]]) -> List[str]:
    """Return the revision captured from every listed name that fully matches."""
    if not names:
        return []
    matcher = compile_revision_matcher(template)
    revisions = []
    for name in names:
        match = matcher.fullmatch(name)
        if match:
            revisions.append(match.group("revision"))
    return revisions


class VersionPatternVisitor:
    """One discovery session: accumulates revisions across visited patterns.

    The visitor appends to the caller's ``versions`` sequence and records every
    listed location on ``result``. A directory is listed at most once per
    session, whatever remainder the later patterns carry.
    """

    def __init__(
        self,
        repository: ExternalResourceRepository,
        module: ModuleIdentifier,
        versions: MutableSequence[str],
        result: ResolveResult,
    ):
        self._repository = repository
        self._module = module
        self._versions = versions
        self._result = result
        self._directories: Set[str] = set()

    def visit(self, pattern: ResourcePattern, artifact: ArtifactName) -> None:
        """List the versions available for ``pattern`` and append them to the sink.

        Raises:
            ResourceError: If the repository failed to list the directory.
        """
        path = pattern.to_version_list_pattern(self._module, artifact)
        target = resolve_listing(path)
        if target is None:
            logger.debug("revision token not defined in pattern %s.", path)
            return
        if target.directory in self._directories:
            if is_debug_enabled(logger):
                logger.debug("Skipping already listed directory", extra=extra_context(
                    event="dedup", component="lister", action="visit",
                    outcome="skipped", target=target.directory
                ))
            return
        self._directories.add(target.directory)
        self._result.attempted(target.directory)

        logger.debug("Listing all in %s", target.directory)
        try:
            names = self._repository.list(target.directory)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ResourceError(
                f"Could not list versions using {pattern}.",
                location=target.directory,
                cause=exc,
            ) from exc

        revisions = extract_revisions(target.name_template, names)
        if is_debug_enabled(logger):
            logger.debug("Matched listed names", extra=extra_context(
                event="function_exit", component="lister", action="visit",
                outcome="found" if names is not None else "not_found",
                target=target.directory, count=len(revisions)
            ))
        self._versions.extend(revisions)


class ResourceVersionLister:
    """Creates version pattern visitors bound to one repository."""

    def __init__(self, repository: ExternalResourceRepository):
        self.repository = repository

    def new_visitor(
        self,
        module: ModuleIdentifier,
        versions: MutableSequence[str],
        result: ResolveResult,
    ) -> VersionPatternVisitor:
        return VersionPatternVisitor(self.repository, module, versions, result)
