"""Command-line interface for DMARC and registrable domain lookups."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List

from ..dmarc.discovery import discover_dmarc_policy
from ..dmarc.errors import DmarcError
from ..dmarc.lookup import lookup_dmarc_record
from ..dmarc.parser import parse_dmarc_record
from ..dns_resolver import DnsLookupError
from ..output import (
    discovery_payload,
    error_payload,
    record_payload,
    registrable_domain_entry,
    registrable_domains_payload,
    render,
)
from ..psl.matcher import resolve_registrable_domain
from ..psl.source import SuffixListError, load_suffix_rules
from ..settings import Settings, load_settings
from ..status import Status, exit_code_for_status, status_for_error
from .parser import _setup_logging, build_parser

LOGGER = logging.getLogger(__name__)

__all__ = ["_setup_logging", "build_parser", "main"]


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI overrides on top of file settings.

    Args:
        settings (Settings): Settings loaded from configuration.
        args (argparse.Namespace): Parsed arguments.

    Returns:
        Settings: Updated settings.
    """
    overrides: dict = {}
    if getattr(args, "dns_servers", None):
        overrides["dns_nameservers"] = tuple(args.dns_servers)
    if getattr(args, "dns_timeout", None) is not None:
        overrides["dns_timeout"] = args.dns_timeout
    if getattr(args, "dns_lifetime", None) is not None:
        overrides["dns_lifetime"] = args.dns_lifetime
    if getattr(args, "dns_tcp", False):
        overrides["dns_use_tcp"] = True
    if getattr(args, "suffix_list", None):
        overrides["suffix_list_url"] = args.suffix_list
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _emit_error(error: BaseException, args: argparse.Namespace, domain: str | None) -> int:
    """Report a failed operation and return its exit code.

    Args:
        error (BaseException): Raised error.
        args (argparse.Namespace): Parsed arguments.
        domain (str | None): Domain involved, if any.

    Returns:
        int: Exit code for the error.
    """
    status = status_for_error(error)
    LOGGER.info("%s failed with %s: %s", args.command, status.value, error)
    payload = error_payload(status, error, domain)
    stream = sys.stdout if args.output == "json" else sys.stderr
    print(render("error", payload, args.output), file=stream)
    return exit_code_for_status(status)


def _run_parse(args: argparse.Namespace) -> int:
    """Handle the ``parse`` command.

    Args:
        args (argparse.Namespace): Parsed arguments.

    Returns:
        int: Exit code.
    """
    try:
        record = parse_dmarc_record(args.record)
    except DmarcError as err:
        return _emit_error(err, args, None)
    print(render("record", record_payload(record), args.output))
    return exit_code_for_status(Status.OK)


def _run_lookup(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the ``lookup`` command.

    Args:
        args (argparse.Namespace): Parsed arguments.
        settings (Settings): Effective settings.

    Returns:
        int: Exit code.
    """
    resolver = settings.build_resolver()
    try:
        record = lookup_dmarc_record(args.domain, resolver.get_txt)
    except DmarcError as err:
        return _emit_error(err, args, args.domain)
    print(render("record", record_payload(record, args.domain), args.output))
    return exit_code_for_status(Status.OK)


def _run_discover(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the ``discover`` command.

    Args:
        args (argparse.Namespace): Parsed arguments.
        settings (Settings): Effective settings.

    Returns:
        int: Exit code.
    """
    resolver = settings.build_resolver()
    try:
        rules = load_suffix_rules(settings.suffix_list_url, timeout=settings.suffix_list_timeout)
        discovery = discover_dmarc_policy(args.domain, rules, resolver.get_txt)
    except (DmarcError, SuffixListError, DnsLookupError) as err:
        return _emit_error(err, args, args.domain)
    print(render("discovery", discovery_payload(discovery), args.output))
    return exit_code_for_status(Status.OK)


def _run_etld(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the ``etld`` command.

    Args:
        args (argparse.Namespace): Parsed arguments.
        settings (Settings): Effective settings.

    Returns:
        int: Exit code of the first failing domain, or OK.
    """
    try:
        rules = load_suffix_rules(settings.suffix_list_url, timeout=settings.suffix_list_timeout)
    except SuffixListError as err:
        return _emit_error(err, args, None)
    entries = []
    for domain in args.domains:
        try:
            registrable = resolve_registrable_domain(domain, *rules)
        except SuffixListError as err:
            entries.append(registrable_domain_entry(domain, error=err, status=status_for_error(err)))
            continue
        entries.append(registrable_domain_entry(domain, registrable))
    payload = registrable_domains_payload(entries)
    print(render("etld", payload, args.output))
    return exit_code_for_status(payload["status"])


def main(argv: List[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv (List[str] | None): Optional argument list for parsing.

    Returns:
        int: Exit code (0=OK, 1=no policy/not found, 2=invalid, 3=temporary failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)
    LOGGER.debug("Parsed arguments: %s", args)

    if args.command == "parse":
        return _run_parse(args)

    try:
        settings = _apply_overrides(load_settings(args.config), args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        if args.command == "lookup":
            return _run_lookup(args, settings)
        if args.command == "discover":
            return _run_discover(args, settings)
        return _run_etld(args, settings)
    except ValueError as exc:
        # Raised while configuring nameservers.
        parser.error(str(exc))
