"""Stable public API for programmatic usage."""

from __future__ import annotations

from .dmarc import (
    AlignmentMode,
    DmarcError,
    DmarcRecord,
    DmarcSyntaxError,
    DuplicateTagError,
    FailureOptions,
    MultipleRecordsError,
    NoPolicyError,
    Policy,
    PolicyDiscovery,
    ReportFormat,
    TemporaryFailureError,
    discover_dmarc_policy,
    is_temporary_failure,
    lookup_dmarc_record,
    parse_dmarc_record,
    parse_tags,
)
from .dns_resolver import DnsLookupError, DnsNameNotFoundError, DnsResolver
from .psl import (
    PUBLIC_SUFFIX_LIST_URL,
    RegistrableDomainNotFoundError,
    SuffixListError,
    SuffixListFetchError,
    SuffixRules,
    fetch_suffix_list,
    load_suffix_list,
    load_suffix_rules,
    parse_suffix_list,
    resolve_registrable_domain,
)
from .settings import Settings, load_settings
from .status import ExitCodes, Status, exit_code_for_status, status_for_error

__all__ = [
    "AlignmentMode",
    "DmarcError",
    "DmarcRecord",
    "DmarcSyntaxError",
    "DnsLookupError",
    "DnsNameNotFoundError",
    "DnsResolver",
    "DuplicateTagError",
    "ExitCodes",
    "FailureOptions",
    "MultipleRecordsError",
    "NoPolicyError",
    "PUBLIC_SUFFIX_LIST_URL",
    "Policy",
    "PolicyDiscovery",
    "RegistrableDomainNotFoundError",
    "ReportFormat",
    "Settings",
    "Status",
    "SuffixListError",
    "SuffixListFetchError",
    "SuffixRules",
    "TemporaryFailureError",
    "discover_dmarc_policy",
    "exit_code_for_status",
    "fetch_suffix_list",
    "is_temporary_failure",
    "load_settings",
    "load_suffix_list",
    "load_suffix_rules",
    "lookup_dmarc_record",
    "parse_dmarc_record",
    "parse_suffix_list",
    "parse_tags",
    "resolve_registrable_domain",
    "status_for_error",
]
