"""revlister - list module versions available in an Ivy/Maven artifact repository.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging
from args import parse_args
from cli_config import apply_http_overrides, load_config, resolve_settings
from registry import create_repository
from versioning.errors import ConfigError, ResourceError
from versioning.models import ArtifactName, ModuleIdentifier, ModuleVersionIdentifier
from versioning.service import VersionDiscoveryService

logger = logging.getLogger(__name__)


def _setup_logging(args):
    """Configure logging based on CLI arguments."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def build_artifact(args):
    """Build the artifact descriptor from CLI arguments."""
    artifact_type = args.TYPE or Constants.DEFAULT_TYPE
    return ArtifactName(
        name=args.ARTIFACT or args.MODULE,
        type=artifact_type,
        extension=args.EXT or artifact_type,
        classifier=args.CLASSIFIER,
    )


def render(result, args, coordinate):
    """Render a discovery result for stdout."""
    versions = result.unique_versions() if args.UNIQUE else list(result.versions)
    if args.OUTPUT_FORMAT == "json":
        document = {
            "module": str(coordinate.module),
            "versions": versions,
            "attempted": result.attempted,
            "errors": [str(e) for e in result.errors],
        }
        if coordinate.version is not None:
            document["requested"] = str(coordinate)
            document["found"] = coordinate.version in result.versions
        return json.dumps(document, indent=2)
    return "\n".join(versions)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)

    try:
        config = load_config(args.CONFIG)
        apply_http_overrides(args, config)
        settings = resolve_settings(args, config)
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value

    module = ModuleIdentifier(args.GROUP, args.MODULE)
    repository = create_repository(settings.repository, headers=settings.headers)
    service = VersionDiscoveryService(repository)
    logger.info("Listing versions of %s in %s", module, repository.describe())

    try:
        result = service.discover(module, build_artifact(args), settings.patterns, fail_fast=args.FAIL_FAST)
    except ResourceError as e:
        logger.error("%s Location: %s (%s)", e.message, e.location, e.cause)
        return ExitCodes.CONNECTION_ERROR.value

    coordinate = ModuleVersionIdentifier(module, args.REVISION)
    output = render(result, args, coordinate)
    if output:
        print(output)

    if result.errors:
        return ExitCodes.CONNECTION_ERROR.value
    if not result.versions:
        lines = "\n".join(f"  - {location}" for location in result.attempted) or "  (none)"
        logger.warning("No versions of %s found. Searched in the following locations:\n%s", module, lines)
        return ExitCodes.NO_VERSIONS.value
    if coordinate.version is not None and coordinate.version not in result.versions:
        logger.warning("%s not found; available: %s", coordinate, ", ".join(result.unique_versions()))
        return ExitCodes.NO_VERSIONS.value
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
