"""Argument parser helpers for the CLI."""

from __future__ import annotations

import argparse
import functools
import logging
import time

from .. import __version__


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity (int): Verbosity count from CLI flags.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.Formatter.converter = time.gmtime  # UTC timestamps
    logging.basicConfig(
        level=level,
        format="%(asctime)sZ [%(levelname)s] %(name)s: %(message)s",
    )


def _parse_positive_float(value: str, label: str) -> float:
    """Parse a positive float from CLI input.

    Args:
        value (str): String value to parse.
        label (str): Option label for error messages.

    Returns:
        float: Parsed value.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{label} must be a number") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{label} must be greater than zero")
    return parsed


def _common_parser() -> argparse.ArgumentParser:
    """Build the parent parser holding options shared by all commands.

    Returns:
        argparse.ArgumentParser: Parent parser (no help flag).
    """
    common = argparse.ArgumentParser(add_help=False)
    output_group = common.add_argument_group("Output")
    config_group = common.add_argument_group("Configuration")
    logging_group = common.add_argument_group("Logging")

    output_group.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    config_group.add_argument(
        "--config",
        dest="config",
        default=None,
        help="Settings file (defaults to the first config.yaml in the config directories)",
    )
    logging_group.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (use -vv for debug)",
    )
    return common


def _add_dns_arguments(parser: argparse.ArgumentParser) -> None:
    """Add DNS transport options to a command parser.

    Args:
        parser (argparse.ArgumentParser): Command parser.
    """
    dns_group = parser.add_argument_group("DNS")
    dns_group.add_argument(
        "--dns-server",
        dest="dns_servers",
        action="append",
        default=[],
        help="DNS server to use for lookups (repeatable; IP or hostname)",
    )
    dns_group.add_argument(
        "--dns-timeout",
        dest="dns_timeout",
        type=functools.partial(_parse_positive_float, label="DNS timeout"),
        default=None,
        help="Per-query DNS timeout in seconds",
    )
    dns_group.add_argument(
        "--dns-lifetime",
        dest="dns_lifetime",
        type=functools.partial(_parse_positive_float, label="DNS lifetime"),
        default=None,
        help="Total DNS query lifetime in seconds",
    )
    dns_group.add_argument(
        "--dns-tcp",
        dest="dns_tcp",
        action="store_true",
        help="Use TCP for DNS lookups",
    )


def _add_suffix_list_argument(parser: argparse.ArgumentParser) -> None:
    """Add the suffix list source option to a command parser.

    Args:
        parser (argparse.ArgumentParser): Command parser.
    """
    parser.add_argument(
        "--suffix-list",
        dest="suffix_list",
        default=None,
        help="Public Suffix List URL or file path (defaults to the configured URL)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    common = _common_parser()
    parser = argparse.ArgumentParser(
        prog="domain-policy",
        description="Inspect DMARC policy records and registrable domains",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version and exit",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    parse_cmd = commands.add_parser(
        "parse",
        parents=[common],
        help="Parse a raw DMARC TXT record",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parse_cmd.add_argument("record", help="Raw TXT value, e.g. 'v=DMARC1; p=reject'")

    lookup_cmd = commands.add_parser(
        "lookup",
        parents=[common],
        help="Look up the DMARC record published for a domain",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    lookup_cmd.add_argument("domain", help="Domain to query")
    _add_dns_arguments(lookup_cmd)

    discover_cmd = commands.add_parser(
        "discover",
        parents=[common],
        help="Find the DMARC policy applying to a domain, with organizational domain fallback",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    discover_cmd.add_argument("domain", help="Author domain")
    _add_dns_arguments(discover_cmd)
    _add_suffix_list_argument(discover_cmd)

    etld_cmd = commands.add_parser(
        "etld",
        parents=[common],
        help="Resolve registrable domains (eTLD+1)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    etld_cmd.add_argument("domains", nargs="+", metavar="domain", help="Domains to resolve")
    _add_suffix_list_argument(etld_cmd)
    return parser


__all__ = ["_parse_positive_float", "_setup_logging", "build_parser"]
