"""Configuration loading and precedence handling for the revlister CLI.

Precedence is CLI flags, then environment variables, then the YAML file,
then the defaults in constants.Constants.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants
from versioning.errors import ConfigError
from versioning.models import PatternLayout
from versioning.patterns import ResourcePattern, create_pattern, default_patterns

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"repository", "layout", "patterns", "m2compatible", "headers", "request_timeout", "retries"}


@dataclass
class DiscoverySettings:
    """Resolved inputs for one CLI run."""
    repository: str
    patterns: List[ResourcePattern]
    headers: Dict[str, str] = field(default_factory=dict)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Args:
        config_path: Path to the YAML file; None means no configuration.

    Returns:
        Configuration mapping (empty when no path is given).

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    patterns = data.get("patterns")
    if patterns is not None and (
        not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns)
    ):
        raise ConfigError("'patterns' must be a list of strings")
    headers = data.get("headers")
    if headers is not None and not isinstance(headers, dict):
        raise ConfigError("'headers' must be a mapping")
    return data


def _int_setting(name: str, *candidates: Any) -> Optional[int]:
    for value in candidates:
        if value is None or value == "":
            continue
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid integer for {name}: {value!r}") from exc
    return None


def apply_http_overrides(args, config: Dict[str, Any]) -> None:
    """Apply timeout/retry overrides onto Constants."""
    timeout = _int_setting(
        "request_timeout",
        getattr(args, "REQUEST_TIMEOUT", None),
        os.environ.get(Constants.ENV_REQUEST_TIMEOUT),
        config.get("request_timeout"),
    )
    if timeout is not None:
        Constants.REQUEST_TIMEOUT = timeout
    retries = _int_setting(
        "retries",
        getattr(args, "HTTP_RETRIES", None),
        os.environ.get(Constants.ENV_HTTP_RETRIES),
        config.get("retries"),
    )
    if retries is not None:
        Constants.HTTP_RETRY_MAX = max(1, retries)


def resolve_settings(args, config: Dict[str, Any]) -> DiscoverySettings:
    """Merge CLI arguments over the configuration file.

    Raises:
        ConfigError: If no repository is given or the layout is unknown.
    """
    repository = getattr(args, "REPOSITORY", None) or config.get("repository")
    if not repository:
        raise ConfigError("No repository given (use --repository or 'repository' in the config)")

    m2compatible = bool(getattr(args, "M2COMPATIBLE", False) or config.get("m2compatible", False))
    texts = list(getattr(args, "PATTERNS", None) or config.get("patterns") or [])
    if texts:
        patterns = [create_pattern(text, m2compatible) for text in texts]
    else:
        layout_name = getattr(args, "LAYOUT", None) or config.get("layout") or PatternLayout.MAVEN.value
        try:
            layout = PatternLayout(str(layout_name).lower())
        except ValueError as exc:
            raise ConfigError(f"Unknown layout: {layout_name}") from exc
        patterns = default_patterns(layout, m2compatible)

    headers = {str(k): str(v) for k, v in (config.get("headers") or {}).items()}
    return DiscoverySettings(repository=str(repository), patterns=patterns, headers=headers)
