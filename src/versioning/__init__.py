"""Version discovery over Ivy/Maven artifact location patterns."""

from .errors import ConfigError, ResourceError
from .lister import ResourceVersionLister, VersionPatternVisitor
from .models import ArtifactName, ModuleIdentifier, ModuleVersionIdentifier, PatternLayout, ResolveResult
from .patterns import IvyResourcePattern, M2ResourcePattern, ResourcePattern
from .service import DiscoveryResult, VersionDiscoveryService

__all__ = [
    "ArtifactName",
    "ConfigError",
    "DiscoveryResult",
    "IvyResourcePattern",
    "M2ResourcePattern",
    "ModuleIdentifier",
    "ModuleVersionIdentifier",
    "PatternLayout",
    "ResolveResult",
    "ResourceError",
    "ResourcePattern",
    "ResourceVersionLister",
    "VersionDiscoveryService",
    "VersionPatternVisitor",
]
