#!/usr/bin/env python3
"""Parse transmissions from the command line.

Prints each parsed request as JSON, or the reason it could not be
parsed. Reads one transmission per line from stdin when none are given.

Usage:
    uv run python scripts/parse_transmission.py "Anyface, Eagle 1, spiked 2-7-0"
    uv run python scripts/parse_transmission.py --callsign magic < transmissions.txt
    uv run python scripts/parse_transmission.py --stacks 25000 24000 10000
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gcibot.brevity.altitude import stacks_from
from gcibot.core.logging_system import get_logger, initialize_logging
from gcibot.parser import Parser
from gcibot.settings import get_gci_settings
from gcibot.version import get_version

logger = get_logger(__name__)

LOGGING_CONFIG = Path(__file__).parent.parent / "src" / "gcibot" / "config" / "logging.yaml"


def print_stacks(altitudes: list[float]) -> None:
    """Print altitude STACKS, highest first."""
    for stack in stacks_from(altitudes):
        print(json.dumps({"altitude": stack.altitude, "count": stack.count}))


def parse_lines(parser: Parser, lines: list[str]) -> int:
    """Parse transmissions and print results.

    Returns:
        Number of transmissions that could not be parsed.
    """
    failures = 0
    for line in lines:
        if not line.strip():
            continue
        result = parser.parse_detailed(line)
        if result.ok and result.request is not None:
            print(json.dumps(result.request.to_dict()))
        else:
            failures += 1
            reason = result.failure.value if result.failure else "unknown"
            print(json.dumps({"text": line.strip(), "failure": reason}))
    return failures


def main() -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(description="Parse GCI radio transmissions")
    arg_parser.add_argument("transmissions", nargs="*", help="Transmissions to parse")
    arg_parser.add_argument("--callsign", help="Override the controller callsign")
    arg_parser.add_argument("--vocabulary", type=Path, help="Path to a vocabulary YAML file")
    arg_parser.add_argument("--log-level", help="Override the log level")
    arg_parser.add_argument("--version", action="version", version=get_version())
    arg_parser.add_argument(
        "--stacks",
        nargs="+",
        type=float,
        metavar="FEET",
        help="Print altitude STACKS for these altitudes instead of parsing",
    )
    args = arg_parser.parse_args()

    settings = get_gci_settings()
    if args.callsign:
        try:
            settings.set_callsign(args.callsign)
        except ValueError as e:
            arg_parser.error(str(e))
    if args.vocabulary:
        settings.set_vocabulary_path(args.vocabulary)
    if args.log_level:
        settings.set_log_level(args.log_level)

    initialize_logging(LOGGING_CONFIG, level=settings.log_level)

    if args.stacks:
        print_stacks(args.stacks)
        return 0

    try:
        parser = Parser.from_settings(settings)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error("Could not create parser: %s", e)
        return 2

    lines = args.transmissions or sys.stdin.read().splitlines()
    failures = parse_lines(parser, lines)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
