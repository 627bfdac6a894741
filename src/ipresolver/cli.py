"""CLI entry point for ipresolver."""

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from dotenv import load_dotenv

from ipresolver import __version__
from ipresolver.api import client_ip, is_internal_ip
from ipresolver.config import Config
from ipresolver.lookups import environ_lookup, mapping_lookup

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipresolver",
        description="Resolve client IPs behind proxies and classify private addresses",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the client IP for a set of request headers",
    )
    resolve_parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Request header, may be repeated",
    )
    resolve_parser.add_argument(
        "--remote-addr",
        default=None,
        help="Transport-level peer address used when no header matches",
    )
    resolve_parser.add_argument(
        "--environ",
        action="store_true",
        help="Read headers from the process environment (CGI style)",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Report whether addresses are internal (RFC 1918)",
    )
    check_parser.add_argument("addresses", nargs="+", metavar="ADDR")
    check_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing, only set the exit status",
    )
    return parser


def parse_headers(raw_headers: List[str]) -> Dict[str, str]:
    """Parse 'Name: value' strings into a header dict.

    Raises:
        ValueError: If an entry has no colon or an empty name.
    """
    headers: Dict[str, str] = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid header {raw!r}, expected 'Name: value'")
        headers.setdefault(name, value.strip())
    return headers


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "resolve":
        try:
            args.header_map = parse_headers(args.headers)
        except ValueError as exc:
            parser.error(str(exc))
    return args


def run_resolve(args: argparse.Namespace, config: Config) -> int:
    """Print the resolved client IP; return the exit status."""
    if args.environ:
        lookup = environ_lookup(os.environ)
        remote_addr = config.remote_addr or os.environ.get("REMOTE_ADDR")
    else:
        lookup = mapping_lookup(args.header_map)
        remote_addr = config.remote_addr

    ip = client_ip(lookup, remote_addr)
    if ip is None:
        print("No client IP could be resolved", file=sys.stderr)
        return 1
    print(ip)
    return 0


def run_check(args: argparse.Namespace) -> int:
    """Print the classification of each address; return 0 if all are internal."""
    all_internal = True
    for address in args.addresses:
        internal = is_internal_ip(address)
        all_internal = all_internal and internal
        if not args.quiet:
            print(f"{address}\t{'internal' if internal else 'external'}")
    return 0 if all_internal else 1


def main(argv: list[str] | None = None) -> None:
    """Main entry point for ipresolver CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env(remote_addr=getattr(args, "remote_addr", None))
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    if args.command == "resolve":
        status = run_resolve(args, config)
    else:
        status = run_check(args)

    if status:
        sys.exit(status)
