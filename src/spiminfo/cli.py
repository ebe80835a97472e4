"""Command line entry point: print the info of a SPIM directory."""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from .core.config import LOG_LEVELS, SpimConfig
from .core.exceptions import LoadError
from .data.loader import DatasetLoader
from .utils.logging import get_logger, set_log_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spiminfo",
        description="Show stack dimensions and pixel size of a SPIM directory",
    )
    parser.add_argument("root", type=str, help="Root directory of the SPIM dataset")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if index lines disagree on the stack shape",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (overrides the configuration)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the spiminfo command."""
    args = build_parser().parse_args(argv)

    try:
        config = SpimConfig.from_yaml(args.config) if args.config else SpimConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config {args.config}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.strict:
        config.index.strict = True
    if args.log_level:
        config.log_level = args.log_level

    errors = config.validate()
    if errors:
        print(f"error: invalid configuration: {'; '.join(errors)}", file=sys.stderr)
        return 1

    set_log_level(config.log_level)

    try:
        info = DatasetLoader(config).load_dir(args.root)
    except LoadError as e:
        logger.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(info.to_dict(), indent=2))
    else:
        print(yaml.safe_dump(info.to_dict(), default_flow_style=False, sort_keys=False), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
