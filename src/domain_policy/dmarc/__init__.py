"""DMARC record parsing, lookup and policy discovery."""

from __future__ import annotations

from .discovery import PolicyDiscovery, discover_dmarc_policy
from .errors import (
    DmarcError,
    DmarcSyntaxError,
    DuplicateTagError,
    MultipleRecordsError,
    NoPolicyError,
    TemporaryFailureError,
    is_temporary_failure,
)
from .lookup import DMARC_RECORD_PREFIX, TxtLookup, dmarc_record_name, lookup_dmarc_record
from .models import AlignmentMode, DmarcRecord, FailureOptions, Policy, ReportFormat
from .parser import parse_dmarc_record, parse_tags

__all__ = [
    "AlignmentMode",
    "DMARC_RECORD_PREFIX",
    "DmarcError",
    "DmarcRecord",
    "DmarcSyntaxError",
    "DuplicateTagError",
    "FailureOptions",
    "MultipleRecordsError",
    "NoPolicyError",
    "Policy",
    "PolicyDiscovery",
    "ReportFormat",
    "TemporaryFailureError",
    "TxtLookup",
    "discover_dmarc_policy",
    "dmarc_record_name",
    "is_temporary_failure",
    "lookup_dmarc_record",
    "parse_dmarc_record",
    "parse_tags",
]
