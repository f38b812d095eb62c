"""Argument parsing functionality for revlister."""

import argparse

from constants import Constants
from versioning.models import PatternLayout


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="revlister",
        description=(
            "revlister - list the versions of a module available in an "
            "Ivy or Maven artifact repository"
        ),
        add_help=True,
    )

    parser.add_argument("-g", "--group", "--organisation",
                        dest="GROUP",
                        help="Module organisation (group), i.e: org.acme",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-m", "--module",
                        dest="MODULE",
                        help="Module name",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-a", "--artifact",
                        dest="ARTIFACT",
                        help="Artifact name (default: the module name)",
                        action="store", type=str)
    parser.add_argument("--type",
                        dest="TYPE",
                        help=f"Artifact type (default: {Constants.DEFAULT_TYPE})",
                        action="store", type=str,
                        default=Constants.DEFAULT_TYPE)
    parser.add_argument("--ext",
                        dest="EXT",
                        help="Artifact extension (default: the artifact type)",
                        action="store", type=str)
    parser.add_argument("--classifier",
                        dest="CLASSIFIER",
                        help="Artifact classifier",
                        action="store", type=str)
    parser.add_argument("--revision",
                        dest="REVISION",
                        help="Only succeed if this exact revision is available",
                        action="store", type=str)

    parser.add_argument("-r", "--repository",
                        dest="REPOSITORY",
                        help="Repository root: http(s) URL, file: URL or local directory",
                        action="store", type=str)
    parser.add_argument("-p", "--pattern",
                        dest="PATTERNS",
                        help="Artifact pattern relative to the repository root (repeatable)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("--layout",
                        dest="LAYOUT",
                        help="Use the default patterns of a repository layout when no pattern is given",
                        action="store", type=str.lower,
                        choices=[layout.value for layout in PatternLayout])
    parser.add_argument("--m2",
                        dest="M2COMPATIBLE",
                        help="Treat patterns as Maven 2 patterns (organisation dots become '/')",
                        action="store_true")
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="YAML configuration file",
                        action="store", type=str)

    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (default: text)",
                        action="store", type=str.lower,
                        choices=Constants.OUTPUT_FORMATS,
                        default="text")
    parser.add_argument("-u", "--unique",
                        dest="UNIQUE",
                        help="Print each version once, in first-seen order",
                        action="store_true")
    parser.add_argument("--fail-fast",
                        dest="FAIL_FAST",
                        help="Stop at the first location that cannot be listed",
                        action="store_true")
    parser.add_argument("--timeout",
                        dest="REQUEST_TIMEOUT",
                        help="HTTP request timeout in seconds",
                        action="store", type=int)
    parser.add_argument("--retries",
                        dest="HTTP_RETRIES",
                        help="HTTP attempts per listing",
                        action="store", type=int)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
