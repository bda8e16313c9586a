"""
CLI entry point for the SimpleFIN client.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from simplefin_cli.app import process_accounts
from simplefin_cli.config import BuildInfo, Settings, format_version
from simplefin_cli.core.exceptions import SimpleFinError

logger = logging.getLogger("simplefin_cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; flag defaults come from SF_* variables."""
    parser = argparse.ArgumentParser(
        prog="sf",
        description="A CLI interface to simplefin.org",
    )
    parser.add_argument(
        "--url",
        default=os.environ.get("SF_URL"),
        help="Your specific SimpleFIN Access URL (env: SF_URL)",
    )
    parser.add_argument(
        "--proxy",
        default=os.environ.get("SF_PROXY"),
        help="Set the proxy URL (env: SF_PROXY)",
    )
    parser.add_argument(
        "--out",
        default=os.environ.get("SF_OUT"),
        help="Output filename for JSON results (env: SF_OUT)",
    )
    parser.add_argument(
        "--timeout",
        default=os.environ.get("SF_TIMEOUT"),
        help="Request timeout in seconds (env: SF_TIMEOUT, default: 30)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("version", help="Print the version")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        sys.stdout.write(format_version(BuildInfo.current()))
        return

    if not args.url:
        parser.error("the --url argument (or SF_URL) is required")

    # Configure logging; stdout is reserved for the table
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = Settings.load(
            url=args.url,
            proxy=args.proxy,
            out=args.out,
            timeout=args.timeout,
            verbose=args.verbose,
        )
        process_accounts(settings)
    except SimpleFinError as e:
        logger.error("%s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
