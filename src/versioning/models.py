"""Data models for module coordinates, artifacts and resolve diagnostics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PatternLayout(Enum):
    """Well-known repository layouts with a default pattern set."""
    IVY = "ivy"
    MAVEN = "maven"
    GRADLE = "gradle"


@dataclass(frozen=True)
class ModuleIdentifier:
    """Organisation (group) and module name."""
    group: str
    name: str

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


@dataclass(frozen=True)
class ModuleVersionIdentifier:
    """A module coordinate with an optional revision."""
    module: ModuleIdentifier
    version: Optional[str] = None

    def __str__(self) -> str:
        if self.version is None:
            return str(self.module)
        return f"{self.module}:{self.version}"


@dataclass(frozen=True)
class ArtifactName:
    """Artifact descriptor used to fill the [artifact], [type], [ext] and [classifier] tokens."""
    name: str
    type: str
    extension: Optional[str] = None
    classifier: Optional[str] = None


@dataclass
class ResolveResult:
    """Caller-owned record of every location probed during a discovery session."""
    _attempted: List[str] = field(default_factory=list)

    def attempted(self, location: str) -> None:
        """Record a location that was actually listed."""
        self._attempted.append(location)

    @property
    def attempted_locations(self) -> List[str]:
        return list(self._attempted)

    def has_attempts(self) -> bool:
        return bool(self._attempted)
